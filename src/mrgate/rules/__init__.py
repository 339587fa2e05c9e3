"""Quality gate checks and the engine that runs them."""

from mrgate.rules.base import (
    BaseCheck,
    CheckContext,
    ContentLookup,
    FileScanCheck,
    ViolationCollector,
)
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
from mrgate.rules.engine import EngineRun, RuleEngine
from mrgate.rules.registry import default_checks

__all__ = [
    "BaseCheck",
    "CheckCommitMessages",
    "CheckContext",
    "CheckDescription",
    "CheckFileNaming",
    "CheckFolderStructure",
    "CheckHardcodedStrings",
    "CheckPrintStatements",
    "CheckScreenUtil",
    "CheckSecrets",
    "CheckSensitiveFiles",
    "CheckSmartWidgets",
    "CheckTitleFormat",
    "CheckTodoComments",
    "CheckWipCommits",
    "ContentLookup",
    "EngineRun",
    "FileScanCheck",
    "RuleEngine",
    "ViolationCollector",
    "default_checks",
]
