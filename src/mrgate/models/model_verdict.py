# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Verdict model for the merge request quality gate.

The verdict is a deterministic reduction over findings. Given the same
findings, :meth:`ModelVerdict.from_findings` always returns the same verdict,
whatever order the findings are in.

Verdict rules:
- A failing CRITICAL finding counts as a critical failure
- A failing WARNING finding counts as a warning
- A failing INFO finding counts as an info issue
- The merge request passes if and only if there are zero critical failures
- A check skipped by the run deadline arrives as a failing finding, so a
  skipped CRITICAL check blocks the merge
"""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, Field

from mrgate.models.model_check_severity import CheckSeverity
from mrgate.models.model_finding import ModelFinding


class ModelVerdict(BaseModel):
    """Pass/fail decision derived from a run's findings.

    Use :meth:`from_findings` to create instances.

    Attributes:
        critical_failures: Failing findings with CRITICAL severity.
        warnings: Failing findings with WARNING severity.
        info_issues: Failing findings with INFO severity.
        overall_pass: True iff ``critical_failures == 0``.
        incomplete: True if the run deadline expired before all checks ran.
        skipped_checks: IDs of checks the deadline kept from running.

    Example::

        verdict = ModelVerdict.from_findings(findings)
        sys.exit(verdict.exit_code)
    """

    critical_failures: int = Field(default=0, ge=0)
    warnings: int = Field(default=0, ge=0)
    info_issues: int = Field(default=0, ge=0)
    overall_pass: bool = Field(default=True)
    incomplete: bool = Field(default=False)
    skipped_checks: list[str] = Field(default_factory=list)

    @classmethod
    def from_findings(
        cls,
        findings: Iterable[ModelFinding],
        *,
        incomplete: bool = False,
        skipped_checks: Iterable[str] = (),
    ) -> ModelVerdict:
        """Count failing findings per severity and decide the verdict.

        Args:
            findings: Findings of one run.
            incomplete: Whether the deadline cut the run short.
            skipped_checks: IDs of checks that never started. Their failing
                findings are already counted in ``findings``.

        Returns:
            A frozen ModelVerdict.
        """
        counts: dict[CheckSeverity, int] = {
            CheckSeverity.CRITICAL: 0,
            CheckSeverity.WARNING: 0,
            CheckSeverity.INFO: 0,
        }
        for finding in findings:
            if not finding.passed:
                counts[finding.severity] += 1

        return cls(
            critical_failures=counts[CheckSeverity.CRITICAL],
            warnings=counts[CheckSeverity.WARNING],
            info_issues=counts[CheckSeverity.INFO],
            overall_pass=counts[CheckSeverity.CRITICAL] == 0,
            incomplete=incomplete,
            skipped_checks=list(skipped_checks),
        )

    @property
    def exit_code(self) -> int:
        """Process exit code: 0 if the gate passed, 1 otherwise."""
        return 0 if self.overall_pass else 1

    model_config = {"frozen": True, "extra": "ignore", "from_attributes": True}


__all__ = ["ModelVerdict"]
