# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Policy validators for the merge request quality gate."""

from mrgate.validators.validator_policy import (
    PolicyValidationError,
    PolicyValidationResult,
    PolicyValidationWarning,
    ValidatorPolicy,
    load_policy,
)

__all__ = [
    "PolicyValidationError",
    "PolicyValidationResult",
    "PolicyValidationWarning",
    "ValidatorPolicy",
    "load_policy",
]
