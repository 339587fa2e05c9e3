# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Policy schema models for the merge request quality gate."""

from mrgate.schemas.model_gate_policy import (
    CHECK_IDS,
    DEFAULT_CAPS,
    DEFAULT_SEVERITIES,
    ModelGateLimits,
    ModelGatePolicy,
)

__all__ = [
    "CHECK_IDS",
    "DEFAULT_CAPS",
    "DEFAULT_SEVERITIES",
    "ModelGateLimits",
    "ModelGatePolicy",
]
