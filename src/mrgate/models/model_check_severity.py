# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""CheckSeverity enum for the merge request quality gate.

Severity is attached to a check when it is registered with the rule engine.
It is never computed from the check's own output.
"""

from __future__ import annotations

from enum import Enum


class CheckSeverity(str, Enum):
    """Severity levels for quality gate checks.

    Severity rules:
    - CRITICAL failures block the merge request (non-zero exit code)
    - WARNING failures are reported but never block
    - INFO failures are suggestions only
    """

    CRITICAL = "critical"
    WARNING = "warning"
    INFO = "info"


__all__ = ["CheckSeverity"]
