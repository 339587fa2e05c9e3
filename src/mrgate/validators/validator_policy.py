"""Policy validation logic for the merge request quality gate.

Validates policy YAML files against the ModelGatePolicy schema. Produces
actionable error messages with field names and line hints.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from mrgate.errors import PolicyLoadError
from mrgate.models.model_check_severity import CheckSeverity
from mrgate.schemas.model_gate_policy import CHECK_IDS, ModelGatePolicy

logger = logging.getLogger(__name__)


@dataclass
class PolicyValidationError:
    """A validation error with actionable context.

    Attributes:
        field: The field name or path that caused the error (e.g., "severities.secrets").
        message: Human-readable error description with remediation hint.
        line_hint: Optional line number hint if available from YAML parsing.
    """

    field: str
    message: str
    line_hint: int | None = None

    def __str__(self) -> str:
        location = f"line {self.line_hint}: " if self.line_hint else ""
        return f"{location}{self.field}: {self.message}"


@dataclass
class PolicyValidationWarning:
    """A validation warning that does not block policy loading."""

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


@dataclass
class PolicyValidationResult:
    """Result of validating a policy file.

    Attributes:
        policy: The parsed policy model (None if validation failed).
        errors: List of validation errors (empty if valid).
        warnings: List of validation warnings (non-blocking).
    """

    policy: ModelGatePolicy | None
    errors: list[PolicyValidationError] = field(default_factory=list)
    warnings: list[PolicyValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Return True if there are no blocking errors."""
        return len(self.errors) == 0 and self.policy is not None


class ValidatorPolicy:
    """Validates policy YAML files for the quality gate.

    This validator:
    - Parses YAML and validates against the Pydantic schema
    - Produces actionable error messages with field names
    - Lists valid values for invalid severities
    - Warns about (but does not fail on) checks that are both disabled and
      given a severity

    Usage::

        validator = ValidatorPolicy()
        result = validator.validate_file(".gitlab/mrgate.yaml")
        if not result.is_valid:
            for error in result.errors:
                print(f"ERROR: {error}")
    """

    def validate_file(self, path: str | Path) -> PolicyValidationResult:
        """Validate a policy YAML file at the given path."""
        try:
            content = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            return PolicyValidationResult(
                policy=None,
                errors=[
                    PolicyValidationError(
                        field="file",
                        message=f"Cannot read policy file {str(path)!r}: {exc}",
                    )
                ],
            )
        return self.validate_yaml_string(content)

    def validate_yaml_string(self, yaml_content: str) -> PolicyValidationResult:
        """Validate a policy from a YAML string.

        An empty document is a valid policy made entirely of defaults.
        """
        try:
            data = yaml.safe_load(yaml_content)
        except yaml.YAMLError as exc:
            line_hint: int | None = None
            mark = getattr(exc, "problem_mark", None)
            if mark is not None:
                line_hint = mark.line + 1
            return PolicyValidationResult(
                policy=None,
                errors=[
                    PolicyValidationError(
                        field="yaml",
                        message=f"Invalid YAML syntax: {exc}",
                        line_hint=line_hint,
                    )
                ],
            )

        if data is None:
            data = {}

        if not isinstance(data, dict):
            return PolicyValidationResult(
                policy=None,
                errors=[
                    PolicyValidationError(
                        field="root",
                        message=(
                            "Policy must be a YAML mapping (key: value pairs), "
                            f"got {type(data).__name__}"
                        ),
                    )
                ],
            )

        return self.validate_dict(data)

    def validate_dict(self, data: dict[str, Any]) -> PolicyValidationResult:
        """Validate a policy from an already-parsed dictionary.

        Args:
            data: Policy data as a Python dictionary.

        Returns:
            PolicyValidationResult with errors and warnings.
        """
        errors: list[PolicyValidationError] = []
        warnings: list[PolicyValidationWarning] = []

        try:
            policy = ModelGatePolicy.model_validate(data)
        except ValidationError as exc:
            for error in exc.errors():
                loc = error.get("loc", ())
                field_path = ".".join(str(part) for part in loc) if loc else "root"
                msg = error.get("msg", "Validation error")

                if error.get("type") == "enum" and field_path.startswith("severities"):
                    valid_vals = [s.value for s in CheckSeverity]
                    msg = (
                        "Invalid severity value. "
                        f"Valid values are: {valid_vals}. Got: {error.get('input')!r}"
                    )

                errors.append(PolicyValidationError(field=field_path, message=msg))

            return PolicyValidationResult(policy=None, errors=errors, warnings=warnings)

        explicit = data.get("severities") or {}
        for check_id in policy.disabled_checks:
            if check_id in explicit:
                warnings.append(
                    PolicyValidationWarning(
                        field=f"severities.{check_id}",
                        message=(
                            f"Check {check_id!r} is disabled; its severity has no effect."
                        ),
                    )
                )

        if set(CHECK_IDS) <= set(policy.disabled_checks):
            warnings.append(
                PolicyValidationWarning(
                    field="disabled_checks",
                    message="All checks are disabled; every merge request will pass.",
                )
            )

        for warning in warnings:
            logger.warning("Policy warning: %s", warning)

        return PolicyValidationResult(policy=policy, errors=[], warnings=warnings)


def load_policy(path: str | Path | None) -> ModelGatePolicy:
    """Load a policy file, or the built-in policy when ``path`` is None.

    Raises:
        PolicyLoadError: If the file is missing or invalid.
    """
    if path is None:
        return ModelGatePolicy()

    result = ValidatorPolicy().validate_file(path)
    if not result.is_valid or result.policy is None:
        details = "; ".join(str(error) for error in result.errors)
        raise PolicyLoadError(f"Policy file {str(path)!r} is invalid: {details}")
    return result.policy


__all__ = [
    "PolicyValidationError",
    "PolicyValidationResult",
    "PolicyValidationWarning",
    "ValidatorPolicy",
    "load_policy",
]
