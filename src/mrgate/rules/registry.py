# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Default check registry.

Registration order is report order. Severities are not part of the
registry: the engine looks them up in the policy.
"""

from __future__ import annotations

from mrgate.rules.base import BaseCheck
from mrgate.rules.checks_content import (
    CheckHardcodedStrings,
    CheckPrintStatements,
    CheckScreenUtil,
    CheckSecrets,
    CheckTodoComments,
)
from mrgate.rules.checks_metadata import (
    CheckCommitMessages,
    CheckDescription,
    CheckTitleFormat,
    CheckWipCommits,
)
from mrgate.rules.checks_paths import (
    CheckFileNaming,
    CheckFolderStructure,
    CheckSensitiveFiles,
)
from mrgate.rules.checks_widgets import CheckSmartWidgets


def default_checks() -> list[BaseCheck]:
    """Return fresh instances of every built-in check, in report order."""
    return [
        CheckTitleFormat(),
        CheckDescription(),
        CheckWipCommits(),
        CheckCommitMessages(),
        CheckSensitiveFiles(),
        CheckSecrets(),
        CheckFileNaming(),
        CheckFolderStructure(),
        CheckHardcodedStrings(),
        CheckPrintStatements(),
        CheckTodoComments(),
        CheckScreenUtil(),
        CheckSmartWidgets(),
    ]


__all__ = ["default_checks"]
