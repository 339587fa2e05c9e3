# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Finding model: a check result tagged with its registered severity."""

from __future__ import annotations

from pydantic import BaseModel, Field

from mrgate.models.model_check_result import ModelCheckResult
from mrgate.models.model_check_severity import CheckSeverity


class ModelFinding(BaseModel):
    """The result of one check against one merge request.

    Findings are collected in check registration order so that reports are
    stable across runs.

    Attributes:
        check_id: Stable identifier of the check (e.g. "sensitive-files").
        check_name: Human-readable name used as a heading in reports.
        result: The check's result.
        severity: Severity the check was registered with.
    """

    check_id: str = Field(..., description="Check identifier", min_length=1)
    check_name: str = Field(..., description="Human-readable check name", min_length=1)
    result: ModelCheckResult = Field(..., description="Check result")
    severity: CheckSeverity = Field(..., description="Registered severity")

    @property
    def passed(self) -> bool:
        return self.result.passed

    @property
    def blocking(self) -> bool:
        """True if this finding blocks the merge request."""
        return not self.result.passed and self.severity == CheckSeverity.CRITICAL

    model_config = {"frozen": True, "extra": "ignore", "from_attributes": True}


__all__ = ["ModelFinding"]
