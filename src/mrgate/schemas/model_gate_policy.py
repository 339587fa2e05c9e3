# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Pydantic models for the quality gate policy file.

The policy exposes everything that used to be hardcoded in the checker as
data: which severity each check is registered with, which checks run, the
violation caps, and the tables the path checks match against. Every field is
optional; omitted fields take the built-in defaults, and partial
``severities`` / ``caps`` mappings are merged over the defaults.

Policy YAML structure::

    version: "1.0"
    project_label: "Acme App"
    severities:
      screenutil: warning
      todo-comments: info
    disabled_checks:
      - smart-widgets
    caps:
      hardcoded-strings: 20
    min_description_length: 20
    forbidden_files:
      - .env
      - secrets.json
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from mrgate.models.model_check_severity import CheckSeverity

# Check identifiers, in registration order.
CHECK_IDS: tuple[str, ...] = (
    "title-format",
    "description",
    "wip-commits",
    "commit-messages",
    "sensitive-files",
    "secrets",
    "file-naming",
    "folder-structure",
    "hardcoded-strings",
    "print-statements",
    "todo-comments",
    "screenutil",
    "smart-widgets",
)

DEFAULT_SEVERITIES: dict[str, CheckSeverity] = {
    "title-format": CheckSeverity.INFO,
    "description": CheckSeverity.INFO,
    "wip-commits": CheckSeverity.CRITICAL,
    "commit-messages": CheckSeverity.INFO,
    "sensitive-files": CheckSeverity.CRITICAL,
    "secrets": CheckSeverity.CRITICAL,
    "file-naming": CheckSeverity.WARNING,
    "folder-structure": CheckSeverity.WARNING,
    "hardcoded-strings": CheckSeverity.WARNING,
    "print-statements": CheckSeverity.WARNING,
    "todo-comments": CheckSeverity.INFO,
    "screenutil": CheckSeverity.CRITICAL,
    "smart-widgets": CheckSeverity.CRITICAL,
}

# Caps on reported violations. "smart-widgets-wrapping" bounds the secondary
# Container/Padding wrapping scan of the smart-widgets check.
DEFAULT_CAPS: dict[str, int] = {
    "hardcoded-strings": 15,
    "print-statements": 10,
    "todo-comments": 10,
    "screenutil": 15,
    "smart-widgets": 15,
    "smart-widgets-wrapping": 10,
    "secrets": 10,
}

DEFAULT_CONVENTIONAL_PREFIXES: tuple[str, ...] = (
    "feat",
    "fix",
    "docs",
    "style",
    "refactor",
    "perf",
    "test",
    "build",
    "ci",
    "chore",
    "revert",
)

DEFAULT_FORBIDDEN_FILES: tuple[str, ...] = (
    ".env",
    "secrets.json",
    ".env.local",
    ".env.production",
)

DEFAULT_SENSITIVE_PATTERNS: tuple[str, ...] = (
    r".*private.*key.*",
    r".*\.pem$",
    r".*\.key$",
    r".*\.keystore$",
    r".*token.*\.txt$",
    r".*credentials.*\.json$",
)

DEFAULT_PROJECT_LABEL = "GetX Project"


class ModelGateLimits(BaseModel):
    """Listing limits used when rendering violations.

    Attributes:
        listed_violations: Violations listed per path/content check before
            the "... and N more" line.
        listed_commits: Offending commits listed by the commit message check.
        details_per_check: Issues shown per check in the details section.
        example_files: Example file names shown in a summary line.
    """

    listed_violations: int = Field(default=10, ge=1)
    listed_commits: int = Field(default=5, ge=1)
    details_per_check: int = Field(default=5, ge=1)
    example_files: int = Field(default=5, ge=1)

    model_config = {"frozen": True, "extra": "forbid", "from_attributes": True}


class ModelGatePolicy(BaseModel):
    """Top-level policy for the merge request quality gate.

    Attributes:
        version: Policy schema version (e.g. "1.0").
        project_label: Cosmetic label interpolated into report text.
        severities: Check id -> severity. Merged over the defaults.
        disabled_checks: Check ids that are not registered for the run.
        caps: Check id -> maximum number of reported violations.
        limits: Listing limits for rendered output.
        min_description_length: Minimum stripped MR description length.
        source_extension: Extension of source files the content checks scan.
        conventional_prefixes: Allowed Conventional Commit types.
        forbidden_files: Basenames that must never be committed.
        sensitive_patterns: Path regexes (searched, case-insensitive) for
            files that look like keys or credentials.
    """

    version: str = Field(default="1.0", min_length=1)
    project_label: str = Field(default=DEFAULT_PROJECT_LABEL, min_length=1)
    severities: dict[str, CheckSeverity] = Field(
        default_factory=lambda: dict(DEFAULT_SEVERITIES),
    )
    disabled_checks: list[str] = Field(default_factory=list)
    caps: dict[str, int] = Field(default_factory=lambda: dict(DEFAULT_CAPS))
    limits: ModelGateLimits = Field(default_factory=ModelGateLimits)
    min_description_length: int = Field(default=10, ge=0)
    source_extension: str = Field(default=".dart", min_length=1)
    conventional_prefixes: list[str] = Field(
        default_factory=lambda: list(DEFAULT_CONVENTIONAL_PREFIXES),
        min_length=1,
    )
    forbidden_files: list[str] = Field(
        default_factory=lambda: list(DEFAULT_FORBIDDEN_FILES),
    )
    sensitive_patterns: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SENSITIVE_PATTERNS),
    )

    @field_validator("version")
    @classmethod
    def validate_version_format(cls, v: str) -> str:
        """Validate that version follows semver-ish format."""
        if not re.match(r"^\d+\.\d+(\.\d+)?$", v):
            raise ValueError(
                f"version must follow semver format (e.g., '1.0' or '1.0.0'), got: {v!r}"
            )
        return v

    @field_validator("severities", mode="before")
    @classmethod
    def merge_severities(cls, v: Any) -> Any:
        if isinstance(v, dict):
            return {**DEFAULT_SEVERITIES, **v}
        return v

    @field_validator("caps", mode="before")
    @classmethod
    def merge_caps(cls, v: Any) -> Any:
        if isinstance(v, dict):
            return {**DEFAULT_CAPS, **v}
        return v

    @field_validator("caps")
    @classmethod
    def validate_caps_positive(cls, v: dict[str, int]) -> dict[str, int]:
        bad = sorted(key for key, cap in v.items() if cap < 1)
        if bad:
            raise ValueError(f"caps must be >= 1, got non-positive caps for: {bad}")
        return v

    @field_validator("source_extension")
    @classmethod
    def validate_extension(cls, v: str) -> str:
        return v if v.startswith(".") else f".{v}"

    @field_validator("sensitive_patterns")
    @classmethod
    def validate_patterns_compile(cls, v: list[str]) -> list[str]:
        for pattern in v:
            try:
                re.compile(pattern)
            except re.error as exc:
                raise ValueError(
                    f"sensitive pattern {pattern!r} is not a valid regex: {exc}"
                ) from exc
        return v

    @model_validator(mode="after")
    def validate_known_check_ids(self) -> ModelGatePolicy:
        """Validate that severities, caps and disabled checks name real checks."""
        known = set(CHECK_IDS)
        unknown = {key for key in self.severities if key not in known}
        unknown |= {key for key in self.disabled_checks if key not in known}
        unknown |= {
            key
            for key in self.caps
            if key not in known and key not in DEFAULT_CAPS
        }
        if unknown:
            raise ValueError(
                f"Policy references unknown check IDs: {sorted(unknown)}. "
                f"Valid check IDs are: {list(CHECK_IDS)}"
            )
        return self

    def get_severity(self, check_id: str) -> CheckSeverity | None:
        """Return the severity a check is registered with, or None if it has none."""
        if check_id in self.severities:
            return self.severities[check_id]
        return DEFAULT_SEVERITIES.get(check_id)

    def get_cap(self, check_id: str) -> int:
        """Return the reported-violation cap for a check."""
        if check_id in self.caps:
            return self.caps[check_id]
        return DEFAULT_CAPS[check_id]

    def is_enabled(self, check_id: str) -> bool:
        return check_id not in self.disabled_checks

    @property
    def conventional_pattern(self) -> re.Pattern[str]:
        """Compiled Conventional Commit title pattern (case-insensitive)."""
        prefixes = "|".join(re.escape(p) for p in self.conventional_prefixes)
        return re.compile(rf"^({prefixes})(\(.+\))?:\s.+", re.IGNORECASE)

    model_config = {"frozen": True, "extra": "ignore", "from_attributes": True}


__all__ = [
    "CHECK_IDS",
    "DEFAULT_CAPS",
    "DEFAULT_CONVENTIONAL_PREFIXES",
    "DEFAULT_FORBIDDEN_FILES",
    "DEFAULT_PROJECT_LABEL",
    "DEFAULT_SENSITIVE_PATTERNS",
    "DEFAULT_SEVERITIES",
    "ModelGateLimits",
    "ModelGatePolicy",
]
