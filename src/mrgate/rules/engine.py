# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Rule engine for the merge request quality gate.

Runs every registered, enabled check against one run's data and collects
findings in registration order. The engine attaches each check's severity
from the policy; checks never choose their own severity.

Failure policy:
- A check that raises is reported as a failing finding ("check could not
  complete") and the remaining checks still run.
- With a deadline, content lookups after expiry return "" and checks that
  have not started are skipped. Each skipped check is reported as a failing
  finding at its registered severity, so an incomplete run cannot pass a
  critical check it never evaluated.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field, replace

from mrgate.errors import CheckLogicError
from mrgate.models.model_check_result import ModelCheckResult
from mrgate.models.model_check_severity import CheckSeverity
from mrgate.models.model_finding import ModelFinding
from mrgate.rules.base import BaseCheck, CheckContext
from mrgate.schemas.model_gate_policy import ModelGatePolicy

logger = logging.getLogger(__name__)


@dataclass
class EngineRun:
    """Findings of one engine run.

    Attributes:
        findings: Findings in registration order.
        incomplete: True if the deadline cut the run short.
        skipped_checks: IDs of checks that never started.
    """

    findings: list[ModelFinding]
    incomplete: bool = False
    skipped_checks: list[str] = field(default_factory=list)


class _Deadline:
    def __init__(self, seconds: float | None, clock: Callable[[], float]) -> None:
        self._clock = clock
        self._expires_at = None if seconds is None else clock() + seconds
        self.hit = False

    def expired(self) -> bool:
        if self._expires_at is None:
            return False
        if self._clock() >= self._expires_at:
            self.hit = True
        return self.hit


class RuleEngine:
    """Runs quality gate checks and tags results with severities.

    Usage::

        engine = RuleEngine(default_checks(), policy)
        run = engine.run(context)
        verdict = ModelVerdict.from_findings(run.findings, incomplete=run.incomplete)
    """

    def __init__(
        self,
        checks: Sequence[BaseCheck],
        policy: ModelGatePolicy | None = None,
        *,
        severities: Mapping[str, CheckSeverity] | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Register checks and attach their severities.

        Args:
            checks: Checks in report order.
            policy: Gate policy; defaults to ``ModelGatePolicy()``.
            severities: Severities for checks the policy does not know.
                The policy wins for built-in check IDs.
            clock: Monotonic clock used for the run deadline.

        Raises:
            ValueError: If a check has no ID, an ID is registered twice, or an
                enabled check has no severity.
        """
        seen: set[str] = set()
        for check in checks:
            if not check.check_id:
                raise ValueError(f"{check!r} has no check_id")
            if check.check_id in seen:
                raise ValueError(f"Duplicate check_id registered: {check.check_id!r}")
            seen.add(check.check_id)
        self._policy = policy or ModelGatePolicy()
        self._checks = [c for c in checks if self._policy.is_enabled(c.check_id)]
        extra = dict(severities or {})
        self._severities: dict[str, CheckSeverity] = {}
        for check in self._checks:
            severity = self._policy.get_severity(check.check_id)
            if severity is None:
                severity = extra.get(check.check_id)
            if severity is None:
                raise ValueError(
                    f"No severity registered for check_id {check.check_id!r}; "
                    "pass it in severities="
                )
            self._severities[check.check_id] = CheckSeverity(severity)
        self._clock = clock

    @property
    def policy(self) -> ModelGatePolicy:
        return self._policy

    @property
    def checks(self) -> list[BaseCheck]:
        """Enabled checks, in registration order."""
        return list(self._checks)

    def severity_of(self, check_id: str) -> CheckSeverity:
        """Return the severity attached to a registered check."""
        return self._severities[check_id]

    def run(
        self,
        context: CheckContext,
        *,
        deadline_seconds: float | None = None,
    ) -> EngineRun:
        """Evaluate every enabled check.

        Args:
            context: The run's data. Its policy is replaced by the engine's.
            deadline_seconds: Optional wall-clock budget for the whole run.

        Returns:
            EngineRun with one finding per enabled check, in registration
            order. Checks skipped by the deadline appear as failing findings.
        """
        deadline = _Deadline(deadline_seconds, self._clock)
        lookup = context.content_lookup

        def bounded_lookup(path: str) -> str:
            if deadline.expired():
                return ""
            return lookup(path)

        context = replace(context, policy=self._policy, content_lookup=bounded_lookup)
        findings: list[ModelFinding] = []
        skipped: list[str] = []

        for check in self._checks:
            if deadline.expired():
                skipped.append(check.check_id)
                result = self._skipped_result(check)
            else:
                result = self._evaluate(check, context)
            findings.append(
                ModelFinding(
                    check_id=check.check_id,
                    check_name=check.name,
                    result=result,
                    severity=self._severities[check.check_id],
                )
            )

        if deadline.hit:
            logger.warning(
                "Run deadline of %ss expired; %d check(s) skipped: %s",
                deadline_seconds,
                len(skipped),
                ", ".join(skipped) or "none",
            )

        return EngineRun(findings=findings, incomplete=deadline.hit, skipped_checks=skipped)

    @staticmethod
    def _skipped_result(check: BaseCheck) -> ModelCheckResult:
        return ModelCheckResult(
            passed=False,
            summary_line=f"⏱️ **{check.name}**: Skipped (run deadline expired)",
            issues=["Check did not run before the run deadline expired"],
        )

    def _evaluate(self, check: BaseCheck, context: CheckContext) -> ModelCheckResult:
        try:
            return check.evaluate(context)
        except Exception as exc:
            error = CheckLogicError(check.check_id, exc)
            logger.warning(
                "Check %s could not complete: %s", check.check_id, error, exc_info=True
            )
            return ModelCheckResult(
                passed=False,
                summary_line=f"❌ **{check.name}**: Check could not complete",
                issues=[f"Check could not complete: {error}"],
            )


__all__ = ["EngineRun", "RuleEngine"]
