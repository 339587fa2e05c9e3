# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Checks over MR metadata and commits.

These checks need no file content: they operate on the title, the
description and the commit list that the runner has already fetched.
"""

from __future__ import annotations

from mrgate.models.model_check_result import ModelCheckResult
from mrgate.rules.base import BaseCheck, CheckContext
from mrgate.rules.predicates import truncate_listing

_TITLE_EXAMPLE = "Example: `feat(login): add forgot password functionality`"
_WIP_PREFIXES = ("wip", "[wip]")


class CheckTitleFormat(BaseCheck):
    """MR title must follow Conventional Commit style."""

    check_id = "title-format"
    name = "Title Format"

    def evaluate(self, context: CheckContext) -> ModelCheckResult:
        policy = context.policy
        if policy.conventional_pattern.match(context.merge_request.title):
            return ModelCheckResult(
                passed=True,
                summary_line=f"✅ **{self.name}**: Valid Conventional Commit style",
            )

        examples = ", ".join(f"`{p}`" for p in policy.conventional_prefixes[:6])
        return ModelCheckResult(
            passed=False,
            summary_line=f"❌ **{self.name}**: Must follow Conventional Commit style",
            issues=[f"Title must start with one of: {examples}", _TITLE_EXAMPLE],
        )


class CheckDescription(BaseCheck):
    """MR description must be long enough; the template is recommended.

    A description that is long enough but lacks the template sections still
    passes, with a suggestion attached.
    """

    check_id = "description"
    name = "Description"

    def evaluate(self, context: CheckContext) -> ModelCheckResult:
        desc = context.merge_request.description.strip()
        min_length = context.policy.min_description_length

        if len(desc) < min_length:
            return ModelCheckResult(
                passed=False,
                summary_line=(
                    f"❌ **{self.name}**: Too short ({len(desc)}/{min_length} characters)"
                ),
                issues=[
                    f"Description must be at least {min_length} characters",
                    f"Current length: {len(desc)} characters",
                ],
            )

        lowered = desc.lower()
        has_description = "## description" in lowered
        has_type = "type of change" in lowered

        if not (has_description or has_type):
            return ModelCheckResult(
                passed=True,
                summary_line=(
                    f"⚠️  **{self.name}**: {len(desc)} characters (consider using template)"
                ),
                issues=[
                    "Consider using the MR description template",
                    "Should include: Description, Type of Change, Related Tickets, etc.",
                ],
            )

        return ModelCheckResult(
            passed=True,
            summary_line=f"✅ **{self.name}**: {len(desc)} characters, follows template",
        )


class CheckWipCommits(BaseCheck):
    """No commit may be marked work-in-progress."""

    check_id = "wip-commits"
    name = "WIP Commits"

    def evaluate(self, context: CheckContext) -> ModelCheckResult:
        wip: list[str] = []
        for commit in context.commits:
            message = commit.message.lower()
            title = commit.title.lower()
            if message.startswith(_WIP_PREFIXES) or title.startswith(_WIP_PREFIXES):
                wip.append(f"  - `{commit.short_id}`: {commit.title or 'N/A'}")

        if not wip:
            return ModelCheckResult(
                passed=True,
                summary_line=(
                    f"✅ **{self.name}**: None found ({len(context.commits)} commits checked)"
                ),
            )

        listing = "\n".join(wip)
        return ModelCheckResult(
            passed=False,
            summary_line=f"❌ **{self.name}**: Found {len(wip)} commit(s):\n{listing}",
            issues=["Remove or squash WIP commits before merging", *wip],
        )


class CheckCommitMessages(BaseCheck):
    """Every commit title must follow Conventional Commit style."""

    check_id = "commit-messages"
    name = "Commit Messages"

    def evaluate(self, context: CheckContext) -> ModelCheckResult:
        policy = context.policy
        pattern = policy.conventional_pattern
        bad = [
            f"  - `{commit.short_id}`: {commit.title[:60]}"
            for commit in context.commits
            if not pattern.match(commit.title)
        ]

        if not bad:
            return ModelCheckResult(
                passed=True,
                summary_line=(
                    f"✅ **{self.name}**: All follow Conventional Commits "
                    f"({len(context.commits)} checked)"
                ),
            )

        listed = truncate_listing(bad, policy.limits.listed_commits)
        listing = "\n".join(listed)
        return ModelCheckResult(
            passed=False,
            summary_line=(
                f"❌ **{self.name}**: {len(bad)} don't follow convention:\n{listing}"
            ),
            issues=[
                "Commit messages should follow format: `type(scope): description`",
                *listed,
            ],
        )


__all__ = [
    "CheckCommitMessages",
    "CheckDescription",
    "CheckTitleFormat",
    "CheckWipCommits",
]
