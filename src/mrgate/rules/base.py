# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Base classes for quality gate checks.

A check is a read-only object with a stable ``check_id``, a display
``name`` and one capability: ``evaluate(context) -> ModelCheckResult``.
Checks never read each other's output, so the engine may run them in any
order; findings are still reported in registration order.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from mrgate.models.model_check_result import ModelCheckResult
from mrgate.models.model_merge_request import (
    ModelCommit,
    ModelFileChange,
    ModelMergeRequest,
)
from mrgate.rules.predicates import (
    format_file_examples,
    is_source_file,
    truncate_listing,
)
from mrgate.schemas.model_gate_policy import ModelGatePolicy

ContentLookup = Callable[[str], str]


@dataclass(frozen=True)
class CheckContext:
    """Everything a check may read during one run.

    Attributes:
        merge_request: MR metadata snapshot.
        commits: Commits of the MR.
        changed_files: Files touched by the MR.
        policy: Active gate policy.
        content_lookup: Returns a file's post-change content ("" if unavailable).
    """

    merge_request: ModelMergeRequest
    commits: Sequence[ModelCommit]
    changed_files: Sequence[ModelFileChange]
    policy: ModelGatePolicy = field(default_factory=ModelGatePolicy)
    content_lookup: ContentLookup = field(default=lambda _path: "")

    def content(self, path: str) -> str:
        return self.content_lookup(path)


class ViolationCollector:
    """Accumulates violation lines up to a cap.

    The cap bounds what is reported, not what is eligible: callers stop
    scanning once :attr:`full` is True.
    """

    def __init__(self, cap: int | None = None) -> None:
        self._cap = cap
        self._items: list[str] = []

    @property
    def full(self) -> bool:
        return self._cap is not None and len(self._items) >= self._cap

    def add(self, entry: str) -> bool:
        """Add a violation; return True if the collector is now full."""
        if not self.full:
            self._items.append(entry)
        return self.full

    @property
    def items(self) -> list[str]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)


class BaseCheck(ABC):
    """Abstract quality gate check."""

    check_id: str = ""
    name: str = ""

    @abstractmethod
    def evaluate(self, context: CheckContext) -> ModelCheckResult:
        """Evaluate the check against one run's data."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(check_id={self.check_id!r})"


class FileScanCheck(BaseCheck):
    """Template for checks that scan the content of changed files.

    Subclasses choose which files are eligible and how a file is scanned.
    This base takes care of file bookkeeping, the violation cap, and the
    summary line format shared by every content check::

        ✅ **Name**: None found (3 files checked: `a`, `b`, `c`)
        ❌ **Name**: 2 found in 3 files (`a`, `b`, `c`):
          - `a:10` ...
    """

    cap_key: str = ""
    pass_text: str = "None found"
    fail_icon: str = "❌"

    def is_eligible(self, path: str, policy: ModelGatePolicy) -> bool:
        return is_source_file(path, policy.source_extension)

    @abstractmethod
    def scan_file(
        self,
        path: str,
        content: str,
        collector: ViolationCollector,
        context: CheckContext,
    ) -> None:
        """Add violations found in one file to ``collector``."""

    def recommendations(self, policy: ModelGatePolicy) -> list[str]:
        return []

    def pass_message(self, policy: ModelGatePolicy) -> str:
        return self.pass_text

    def fail_text(self, count: int) -> str:
        return f"{count} found"

    def make_collector(self, policy: ModelGatePolicy) -> ViolationCollector:
        return ViolationCollector(policy.get_cap(self.cap_key or self.check_id))

    def evaluate(self, context: CheckContext) -> ModelCheckResult:
        policy = context.policy
        collector = self.make_collector(policy)
        checked: list[str] = []

        for change in context.changed_files:
            path = change.path
            if not self.is_eligible(path, policy):
                continue
            checked.append(path)
            if collector.full:
                continue
            content = context.content(path)
            if not content:
                continue
            self.scan_file(path, content, collector, context)

        return self.build_result(collector.items, checked, policy)

    def build_result(
        self,
        violations: list[str],
        checked: list[str],
        policy: ModelGatePolicy,
    ) -> ModelCheckResult:
        limits = policy.limits
        examples = format_file_examples(checked, limits.example_files)

        if not violations:
            return ModelCheckResult(
                passed=True,
                summary_line=(
                    f"✅ **{self.name}**: {self.pass_message(policy)} "
                    f"({len(checked)} files checked: {examples})"
                ),
                files_checked=len(checked),
                checked_file_names=checked,
            )

        listed = truncate_listing(violations, limits.listed_violations)
        listing = "\n".join(listed)
        return ModelCheckResult(
            passed=False,
            summary_line=(
                f"{self.fail_icon} **{self.name}**: {self.fail_text(len(violations))} "
                f"in {len(checked)} files ({examples}):\n{listing}"
            ),
            issues=[*self.recommendations(policy), *listed],
            files_checked=len(checked),
            checked_file_names=checked,
        )


__all__ = [
    "BaseCheck",
    "CheckContext",
    "ContentLookup",
    "FileScanCheck",
    "ViolationCollector",
]
