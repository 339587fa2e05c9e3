# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Merge request check runner.

Fetches a merge request from a diff source, runs the rule engine against
it, reduces the findings to a verdict and renders the console transcript
and the MR comment. Posting the comment is optional and never changes the
exit code.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from mrgate.errors import FatalFetchError, SinkPostError
from mrgate.models.model_finding import ModelFinding
from mrgate.models.model_merge_request import (
    ModelCommit,
    ModelFileChange,
    ModelMergeRequest,
)
from mrgate.models.model_verdict import ModelVerdict
from mrgate.protocols import ProtocolDiffSource, ProtocolReportSink
from mrgate.rules.base import BaseCheck, CheckContext
from mrgate.rules.engine import RuleEngine
from mrgate.rules.registry import default_checks
from mrgate.runner.renderer_report import ReportRenderer
from mrgate.schemas.model_gate_policy import ModelGatePolicy

logger = logging.getLogger(__name__)


@dataclass
class MrCheckResult:
    """Result of one quality gate run.

    Attributes:
        merge_request: Fetched MR metadata.
        commits: Fetched commits.
        changed_files: Fetched changed files.
        findings: One finding per check that ran, in registration order.
        verdict: Aggregated verdict.
        console_report: Console transcript.
        comment_body: Markdown MR note.
        exit_code: 0 if the gate passed, 1 otherwise.
        comment_posted: True if the note reached the sink.
    """

    merge_request: ModelMergeRequest
    commits: list[ModelCommit]
    changed_files: list[ModelFileChange]
    findings: list[ModelFinding]
    verdict: ModelVerdict
    console_report: str
    comment_body: str
    exit_code: int
    comment_posted: bool = False


class RunnerMrCheck:
    """Runs the quality gate against one merge request.

    Usage::

        runner = RunnerMrCheck(client, policy)
        result = runner.run(sink=poster)
        print(result.console_report)
        sys.exit(result.exit_code)
    """

    def __init__(
        self,
        source: ProtocolDiffSource,
        policy: ModelGatePolicy | None = None,
        *,
        checks: Sequence[BaseCheck] | None = None,
        renderer: ReportRenderer | None = None,
        deadline_seconds: float | None = None,
    ) -> None:
        self._source = source
        self._policy = policy or ModelGatePolicy()
        self._engine = RuleEngine(
            checks if checks is not None else default_checks(), self._policy
        )
        self._renderer = renderer or ReportRenderer(
            self._policy.project_label,
            details_per_check=self._policy.limits.details_per_check,
        )
        self._deadline_seconds = deadline_seconds

    def run(self, sink: ProtocolReportSink | None = None) -> MrCheckResult:
        """Evaluate the merge request and optionally post the report.

        Args:
            sink: Destination for the comment body; None skips posting.

        Returns:
            MrCheckResult with findings, verdict and rendered reports.

        Raises:
            FatalFetchError: If metadata, commits or changed files could not
                be fetched. No report is produced in that case.
        """
        try:
            logger.info("Fetching MR details")
            merge_request = self._source.fetch_metadata()
            logger.info("Fetching commits")
            commits = list(self._source.fetch_commits())
            logger.info("Fetching file changes")
            changed_files = list(self._source.fetch_changed_files())
        except FatalFetchError as exc:
            logger.error("Cannot evaluate merge request: %s", exc)
            raise

        logger.info(
            "Evaluating MR %r: %d commit(s), %d changed file(s)",
            merge_request.title,
            len(commits),
            len(changed_files),
        )

        context = CheckContext(
            merge_request=merge_request,
            commits=commits,
            changed_files=changed_files,
            policy=self._policy,
            content_lookup=self._source.fetch_file_content,
        )
        engine_run = self._engine.run(context, deadline_seconds=self._deadline_seconds)
        findings = engine_run.findings
        verdict = ModelVerdict.from_findings(
            findings,
            incomplete=engine_run.incomplete,
            skipped_checks=engine_run.skipped_checks,
        )

        console_report = self._renderer.render_console(
            merge_request, commits, changed_files, findings, verdict
        )
        comment_body = self._renderer.render_comment(findings, verdict)

        comment_posted = False
        if sink is not None:
            comment_posted = self.post_report(sink, comment_body)

        logger.info(
            "Verdict: %d critical, %d warning, %d info (pass=%s)",
            verdict.critical_failures,
            verdict.warnings,
            verdict.info_issues,
            verdict.overall_pass,
        )

        return MrCheckResult(
            merge_request=merge_request,
            commits=commits,
            changed_files=changed_files,
            findings=findings,
            verdict=verdict,
            console_report=console_report,
            comment_body=comment_body,
            exit_code=verdict.exit_code,
            comment_posted=comment_posted,
        )

    @staticmethod
    def post_report(sink: ProtocolReportSink, body: str) -> bool:
        """Post ``body`` to ``sink``; return False (and log) on failure."""
        try:
            sink.post_note(body)
        except SinkPostError as exc:
            logger.warning("Failed to post comment: %s", exc)
            return False
        logger.info("Comment posted to MR successfully")
        return True


__all__ = ["MrCheckResult", "RunnerMrCheck"]
