# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Exception hierarchy for the merge request quality gate.

Propagation rules:
- FatalFetchError aborts the run before any report is produced.
- SoftFetchError never leaves the diff source; it becomes empty content.
- SinkPostError is logged; the run's exit code is unaffected.
- CheckLogicError is converted into a failing finding for that one check.
- PolicyLoadError stops the CLI before the run starts.
"""

from __future__ import annotations


class MrGateError(Exception):
    """Base exception for quality gate errors."""


class FatalFetchError(MrGateError):
    """Raised when MR metadata, commits or changed files cannot be fetched."""


class SoftFetchError(MrGateError):
    """Raised inside a diff source when one file's content cannot be fetched."""


class SinkPostError(MrGateError):
    """Raised when the report cannot be posted to the merge request."""


class CheckLogicError(MrGateError):
    """Raised when a check crashes while evaluating a merge request.

    Attributes:
        check_id: The check that failed.
    """

    def __init__(self, check_id: str, cause: BaseException) -> None:
        super().__init__(f"{type(cause).__name__}: {cause}")
        self.check_id = check_id
        self.cause = cause


class PolicyLoadError(MrGateError):
    """Raised when a policy file cannot be loaded or is invalid."""


__all__ = [
    "CheckLogicError",
    "FatalFetchError",
    "MrGateError",
    "PolicyLoadError",
    "SinkPostError",
    "SoftFetchError",
]
