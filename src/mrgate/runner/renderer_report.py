# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Console and MR comment rendering for quality gate runs.

Rendering is a pure function of the merge request, findings and verdict:
the same inputs always produce the same text.
"""

from __future__ import annotations

from collections.abc import Sequence

from mrgate.models.model_finding import ModelFinding
from mrgate.models.model_merge_request import ModelCommit, ModelFileChange, ModelMergeRequest
from mrgate.models.model_verdict import ModelVerdict

COMMENT_MARKER = "<!-- mrgate -->"

_RULE_HEAVY = "=" * 70
_RULE_LIGHT = "-" * 70

_QUICK_REFERENCES = (
    "- **Conventional Commits**: `type(scope): description` where type is feat, fix, docs, etc.",
    "- **File Naming**: Controllers: `*_controller.dart`, Pages: `*_page.dart`",
    "- **Localization**: Use `LocaleKeys.keyName.tr` instead of hardcoded strings",
    "- **TODO Format**: `// TODO: TENT-123 - description`",
    "- **Smart Widgets**: Use SmartText/Row/Column instead of basic widgets",
    "- **Flutter ScreenUtil**: Use .w/.h/.sp/.r extensions for responsive design",
)


class ReportRenderer:
    """Renders the console transcript and the MR comment body.

    Usage::

        renderer = ReportRenderer("Acme App", details_per_check=5)
        print(renderer.render_console(mr, commits, files, findings, verdict))
        body = renderer.render_comment(findings, verdict)
    """

    def __init__(self, project_label: str, *, details_per_check: int = 5) -> None:
        self.project_label = project_label
        self.details_per_check = details_per_check

    # ------------------------------------------------------------------
    # Console
    # ------------------------------------------------------------------

    def render_header(self) -> str:
        return "\n".join(
            ["", _RULE_HEAVY, f"🔍 {self.project_label} - GitLab MR Checker", _RULE_HEAVY, ""]
        )

    def render_mr_info(
        self,
        merge_request: ModelMergeRequest,
        commits: Sequence[ModelCommit],
        changed_files: Sequence[ModelFileChange],
    ) -> str:
        return "\n".join(
            [
                "",
                "📋 MR Info:",
                f"   Title: {merge_request.title}",
                f"   Commits: {len(commits)}",
                f"   Files Changed: {len(changed_files)}",
                "",
                _RULE_LIGHT,
                "",
            ]
        )

    def render_findings(self, findings: Sequence[ModelFinding]) -> str:
        """Each summary line followed by a blank line."""
        return "".join(f"{finding.result.summary_line}\n\n" for finding in findings)

    def render_footer(self, verdict: ModelVerdict) -> str:
        lines = [_RULE_LIGHT]
        if verdict.overall_pass:
            if verdict.warnings > 0:
                lines.append(
                    f"⚠️  Code quality checks PASSED with {verdict.warnings} warning(s)"
                )
            else:
                lines.append("✅ Code quality checks PASSED")
            if verdict.info_issues > 0:
                lines.append(
                    f"ℹ️  {verdict.info_issues} suggestion(s) for process improvements "
                    "(non-blocking)"
                )
        else:
            lines.append(
                f"❌ {verdict.critical_failures} blocking issue(s) found - fix required"
            )
        if verdict.skipped_checks:
            lines.append(
                "⏱️  Run deadline expired; skipped checks: "
                + ", ".join(verdict.skipped_checks)
            )
        elif verdict.incomplete:
            lines.append("⏱️  Run deadline expired; some file contents were not read")
        lines.append(_RULE_HEAVY)
        return "\n".join(lines) + "\n"

    def render_console(
        self,
        merge_request: ModelMergeRequest,
        commits: Sequence[ModelCommit],
        changed_files: Sequence[ModelFileChange],
        findings: Sequence[ModelFinding],
        verdict: ModelVerdict,
    ) -> str:
        """Render the full console transcript of one run."""
        return "\n".join(
            [
                self.render_header(),
                self.render_mr_info(merge_request, commits, changed_files),
                self.render_findings(findings),
                self.render_footer(verdict),
            ]
        )

    # ------------------------------------------------------------------
    # MR comment
    # ------------------------------------------------------------------

    def status_banner(self, verdict: ModelVerdict) -> str:
        if not verdict.overall_pass:
            return (
                f"❌ **BLOCKING ISSUES FOUND** "
                f"({verdict.critical_failures} critical issue(s))"
            )
        if verdict.warnings == 0:
            banner = "✅ **CODE QUALITY CHECKS PASSED**"
        else:
            banner = f"⚠️  **PASSED WITH {verdict.warnings} WARNING(S)**"
        if verdict.info_issues > 0:
            banner += f"\n\nℹ️  **{verdict.info_issues} SUGGESTION(S)** (non-blocking)"
        return banner

    def render_comment(
        self,
        findings: Sequence[ModelFinding],
        verdict: ModelVerdict,
    ) -> str:
        """Render the Markdown MR note.

        The body starts with :data:`COMMENT_MARKER` so that stale notes from
        earlier runs can be recognised.
        """
        parts = [
            COMMENT_MARKER,
            f"## 🤖 {self.project_label} Code Quality Check",
            "",
            self.status_banner(verdict),
            "",
            "> **Focus**: Code quality, security, and maintainability. "
            "Process suggestions are non-blocking.",
            "",
        ]
        if verdict.incomplete:
            parts += [
                "> ⏱️ **Incomplete run**: the time budget expired before every "
                "check ran. Re-run the pipeline for a full report.",
                "",
            ]
            if verdict.skipped_checks:
                skipped = ", ".join(f"`{c}`" for c in verdict.skipped_checks)
                parts += [f"> Skipped checks: {skipped}", ""]
        parts += ["---", "", "### Check Summary", "", ""]
        body = "\n".join(parts)

        for finding in findings:
            body += finding.result.summary_line + "\n\n"

        with_issues = [f for f in findings if f.result.issues]
        if with_issues:
            body += "\n---\n\n### 📋 Details & Recommendations\n\n"
            for finding in with_issues:
                body += f"**{finding.check_name}:**\n"
                for issue in finding.result.issues[: self.details_per_check]:
                    body += f"{issue}\n"
                body += "\n"

        body += "\n".join(
            [
                "---",
                "",
                "### 📚 Quick References",
                "",
                *_QUICK_REFERENCES,
                "",
                "For full guidelines, see the project's MR rules documentation.",
                "",
                "---",
                "",
                f"*Generated by {self.project_label} GitLab CI MR Checker*",
                "",
            ]
        )
        return body


__all__ = ["COMMENT_MARKER", "ReportRenderer"]
