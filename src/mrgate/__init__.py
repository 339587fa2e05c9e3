"""mrgate - merge request quality gate for Flutter/GetX projects on GitLab.

Evaluates a merge request against a fixed set of quality rules, renders a
console transcript and a Markdown MR note, and reports a pass/fail verdict
that blocks the merge only when a critical rule fails.
"""

from mrgate.models import (
    CheckSeverity,
    ModelCheckResult,
    ModelCommit,
    ModelFileChange,
    ModelFinding,
    ModelMergeRequest,
    ModelVerdict,
)
from mrgate.runner import MrCheckResult, ReportRenderer, RunnerMrCheck
from mrgate.schemas import ModelGatePolicy

__version__ = "0.1.0"

__all__ = [
    "CheckSeverity",
    "ModelCheckResult",
    "ModelCommit",
    "ModelFileChange",
    "ModelFinding",
    "ModelGatePolicy",
    "ModelMergeRequest",
    "ModelVerdict",
    "MrCheckResult",
    "ReportRenderer",
    "RunnerMrCheck",
    "__version__",
]
