# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Unit tests for ReportRenderer."""

from __future__ import annotations

import pytest

from mrgate.models.model_check_result import ModelCheckResult
from mrgate.models.model_check_severity import CheckSeverity
from mrgate.models.model_finding import ModelFinding
from mrgate.models.model_merge_request import (
    ModelCommit,
    ModelFileChange,
    ModelMergeRequest,
)
from mrgate.models.model_verdict import ModelVerdict
from mrgate.runner.renderer_report import COMMENT_MARKER, ReportRenderer

# ---------------------------------------------------------------------------
# Test helpers
# ---------------------------------------------------------------------------


def make_finding(
    check_id: str = "secrets",
    *,
    passed: bool = True,
    severity: CheckSeverity = CheckSeverity.CRITICAL,
    issues: list[str] | None = None,
    name: str | None = None,
) -> ModelFinding:
    name = name or check_id.title()
    icon = "✅" if passed else "❌"
    return ModelFinding(
        check_id=check_id,
        check_name=name,
        severity=severity,
        result=ModelCheckResult(
            passed=passed,
            summary_line=f"{icon} **{name}**: summary",
            issues=issues or [],
        ),
    )


# ---------------------------------------------------------------------------
# Console
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestConsole:
    def setup_method(self) -> None:
        self.renderer = ReportRenderer("GetX Project")

    def test_header(self) -> None:
        header = self.renderer.render_header().split("\n")
        assert header[1] == "=" * 70
        assert header[2] == "🔍 GetX Project - GitLab MR Checker"

    def test_mr_info(self) -> None:
        info = self.renderer.render_mr_info(
            ModelMergeRequest(title="feat: login"),
            [ModelCommit(short_id="a")],
            [ModelFileChange(path="a"), ModelFileChange(path="b")],
        )
        assert "   Title: feat: login" in info
        assert "   Commits: 1" in info
        assert "   Files Changed: 2" in info

    @pytest.mark.parametrize(
        ("verdict", "expected"),
        [
            (ModelVerdict(), "✅ Code quality checks PASSED"),
            (ModelVerdict(warnings=2), "⚠️  Code quality checks PASSED with 2 warning(s)"),
            (
                ModelVerdict(critical_failures=3, overall_pass=False),
                "❌ 3 blocking issue(s) found - fix required",
            ),
        ],
    )
    def test_footer_status(self, verdict: ModelVerdict, expected: str) -> None:
        assert expected in self.renderer.render_footer(verdict)

    def test_footer_suggestions_and_incomplete(self) -> None:
        footer = self.renderer.render_footer(ModelVerdict(info_issues=1, incomplete=True))
        assert "ℹ️  1 suggestion(s) for process improvements (non-blocking)" in footer
        assert "⏱️  Run deadline expired; some file contents were not read" in footer
        assert footer.rstrip("\n").endswith("=" * 70)

    def test_console_lists_summary_lines_in_order(self) -> None:
        findings = [make_finding("secrets"), make_finding("description", passed=False)]
        text = self.renderer.render_console(
            ModelMergeRequest(), [], [], findings, ModelVerdict()
        )
        assert text.index("**Secrets**") < text.index("**Description**")


# ---------------------------------------------------------------------------
# Comment
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestComment:
    def setup_method(self) -> None:
        self.renderer = ReportRenderer("Acme App", details_per_check=5)

    def test_marker_and_heading(self) -> None:
        body = self.renderer.render_comment([], ModelVerdict())
        lines = body.split("\n")
        assert lines[0] == COMMENT_MARKER
        assert lines[1] == "## 🤖 Acme App Code Quality Check"
        assert "*Generated by Acme App GitLab CI MR Checker*" in body

    @pytest.mark.parametrize(
        ("verdict", "expected"),
        [
            (ModelVerdict(), "✅ **CODE QUALITY CHECKS PASSED**"),
            (ModelVerdict(warnings=1), "⚠️  **PASSED WITH 1 WARNING(S)**"),
            (
                ModelVerdict(critical_failures=2, overall_pass=False),
                "❌ **BLOCKING ISSUES FOUND** (2 critical issue(s))",
            ),
        ],
    )
    def test_status_banner(self, verdict: ModelVerdict, expected: str) -> None:
        assert self.renderer.status_banner(verdict).startswith(expected)

    def test_banner_appends_suggestions(self) -> None:
        banner = self.renderer.status_banner(ModelVerdict(info_issues=2))
        assert banner.endswith("ℹ️  **2 SUGGESTION(S)** (non-blocking)")

    def test_blocking_banner_omits_suggestions(self) -> None:
        verdict = ModelVerdict(critical_failures=1, info_issues=2, overall_pass=False)
        assert "SUGGESTION" not in self.renderer.status_banner(verdict)

    def test_details_limited_per_check(self) -> None:
        issues = [f"issue {i}" for i in range(8)]
        finding = make_finding("file-naming", passed=False, issues=issues)
        body = self.renderer.render_comment([finding], ModelVerdict(warnings=1))
        assert "### 📋 Details & Recommendations" in body
        assert "**File-Naming:**" in body
        assert "issue 4" in body
        assert "issue 5" not in body

    def test_no_details_section_without_issues(self) -> None:
        body = self.renderer.render_comment([make_finding()], ModelVerdict())
        assert "Details & Recommendations" not in body
        assert "### 📚 Quick References" in body

    def test_incomplete_note(self) -> None:
        body = self.renderer.render_comment([], ModelVerdict(incomplete=True))
        assert "**Incomplete run**" in body
        complete = self.renderer.render_comment([], ModelVerdict())
        assert "Incomplete run" not in complete

    def test_incomplete_note_names_skipped_checks(self) -> None:
        verdict = ModelVerdict(incomplete=True, skipped_checks=["secrets", "todo-comments"])
        body = self.renderer.render_comment([], verdict)
        assert "> Skipped checks: `secrets`, `todo-comments`" in body
        footer = self.renderer.render_footer(verdict)
        assert "⏱️  Run deadline expired; skipped checks: secrets, todo-comments" in footer

    def test_rendering_is_deterministic(self) -> None:
        findings = [
            make_finding("secrets", passed=False, issues=["  - `a.dart:1` potential API key"]),
            make_finding("description"),
        ]
        verdict = ModelVerdict.from_findings(findings)
        assert self.renderer.render_comment(findings, verdict) == (
            self.renderer.render_comment(findings, verdict)
        )
