# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Checks over changed file paths (no content needed)."""

from __future__ import annotations

import re
from collections.abc import Sequence

from mrgate.models.model_check_result import ModelCheckResult
from mrgate.rules.base import BaseCheck, CheckContext
from mrgate.rules.patterns import LAYER_FOLDERS
from mrgate.rules.predicates import has_folder_segment, truncate_listing
from mrgate.schemas.model_gate_policy import ModelGatePolicy


class CheckSensitiveFiles(BaseCheck):
    """Forbidden or credential-looking files must never be committed."""

    check_id = "sensitive-files"
    name = "Sensitive Files"

    def evaluate(self, context: CheckContext) -> ModelCheckResult:
        policy = context.policy
        forbidden = set(policy.forbidden_files)
        patterns = [re.compile(p, re.IGNORECASE) for p in policy.sensitive_patterns]
        found: list[str] = []

        for change in context.changed_files:
            if change.basename in forbidden:
                found.append(f"  - `{change.path}` (forbidden file)")
            elif any(pattern.search(change.path) for pattern in patterns):
                found.append(f"  - `{change.path}` (sensitive file pattern)")

        if not found:
            return ModelCheckResult(
                passed=True,
                summary_line=(
                    f"✅ **{self.name}**: None detected "
                    f"({len(context.changed_files)} files checked)"
                ),
                files_checked=len(context.changed_files),
            )

        listing = "\n".join(found)
        return ModelCheckResult(
            passed=False,
            summary_line=f"❌ **{self.name}**: Found {len(found)} file(s):\n{listing}",
            issues=["Remove sensitive files before merging", *found],
            files_checked=len(context.changed_files),
        )


def _layer_patterns(policy: ModelGatePolicy) -> list[tuple[str, str, re.Pattern[str]]]:
    ext = re.escape(policy.source_extension)
    return [
        (folder, suffix, re.compile(rf"^[a-z_]+{suffix}{ext}$"))
        for folder, suffix in LAYER_FOLDERS
    ]


def _violation_result(
    name: str,
    pass_text: str,
    recommendation: str,
    violations: Sequence[str],
    policy: ModelGatePolicy,
) -> ModelCheckResult:
    if not violations:
        return ModelCheckResult(passed=True, summary_line=f"✅ **{name}**: {pass_text}")

    listed = truncate_listing(violations, policy.limits.listed_violations)
    listing = "\n".join(listed)
    return ModelCheckResult(
        passed=False,
        summary_line=f"❌ **{name}**: {len(violations)} violation(s):\n{listing}",
        issues=[recommendation, *listed],
    )


class CheckFileNaming(BaseCheck):
    """Files in layer folders must carry the layer's file suffix.

    ``controller/`` holds ``*_controller``, ``view/`` holds ``*_page`` and
    ``repository/`` holds ``*_repository`` source files. The first folder
    that appears in the path decides the rule.
    """

    check_id = "file-naming"
    name = "File Naming"

    def evaluate(self, context: CheckContext) -> ModelCheckResult:
        policy = context.policy
        ext = policy.source_extension
        layers = _layer_patterns(policy)
        violations: list[str] = []

        for change in context.changed_files:
            if not change.path.endswith(ext):
                continue
            for folder, suffix, pattern in layers:
                if not has_folder_segment(change.path, folder):
                    continue
                if not pattern.match(change.basename):
                    violations.append(f"  - `{change.path}` should be `*{suffix}{ext}`")
                break

        return _violation_result(
            self.name,
            "All files follow conventions",
            "Files must follow naming conventions: "
            + ", ".join(f"*{suffix}{ext}" for _, suffix, _ in layers),
            violations,
            policy,
        )


class CheckFolderStructure(BaseCheck):
    """Files named after a layer must live in that layer's folder."""

    check_id = "folder-structure"
    name = "Folder Structure"

    def evaluate(self, context: CheckContext) -> ModelCheckResult:
        policy = context.policy
        ext = policy.source_extension
        violations: list[str] = []

        for change in context.changed_files:
            if not change.path.endswith(ext):
                continue
            for folder, suffix in LAYER_FOLDERS:
                if not change.basename.endswith(f"{suffix}{ext}"):
                    continue
                if not has_folder_segment(change.path, folder):
                    violations.append(
                        f"  - `{change.path}` should be in a `{folder}/` folder"
                    )
                break

        return _violation_result(
            self.name,
            "All files properly organized",
            "Follow project structure: controllers in controller/, pages in view/, etc.",
            violations,
            policy,
        )


__all__ = ["CheckFileNaming", "CheckFolderStructure", "CheckSensitiveFiles"]
