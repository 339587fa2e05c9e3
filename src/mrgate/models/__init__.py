"""Domain models for the merge request quality gate."""

from mrgate.models.model_check_result import ModelCheckResult
from mrgate.models.model_check_severity import CheckSeverity
from mrgate.models.model_finding import ModelFinding
from mrgate.models.model_merge_request import (
    ModelCommit,
    ModelFileChange,
    ModelMergeRequest,
)
from mrgate.models.model_verdict import ModelVerdict

__all__ = [
    "CheckSeverity",
    "ModelCheckResult",
    "ModelCommit",
    "ModelFileChange",
    "ModelFinding",
    "ModelMergeRequest",
    "ModelVerdict",
]
