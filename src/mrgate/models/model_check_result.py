# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""CheckResult model: the output of one check for one run."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ModelCheckResult(BaseModel):
    """Outcome of a single quality gate check.

    ``issues`` is empty when the check passed without caveats. A passing
    check may still carry issues (e.g. a description that is long enough but
    does not follow the template).

    Attributes:
        passed: Whether the check passed.
        summary_line: One Markdown line (possibly followed by an indented
            violation list) shown in the console and the MR comment.
        issues: Recommendations and violations for the details section.
        files_checked: Number of files the check scanned.
        checked_file_names: Paths of scanned files, in scan order.
    """

    passed: bool = Field(..., description="Whether the check passed")
    summary_line: str = Field(
        ...,
        description="Markdown summary line for console and comment output",
        min_length=1,
    )
    issues: list[str] = Field(
        default_factory=list,
        description="Recommendations and listed violations",
    )
    files_checked: int = Field(
        default=0,
        description="Number of files scanned by this check",
        ge=0,
    )
    checked_file_names: list[str] = Field(
        default_factory=list,
        description="Paths of files scanned by this check",
    )

    model_config = {"frozen": True, "extra": "ignore", "from_attributes": True}


__all__ = ["ModelCheckResult"]
