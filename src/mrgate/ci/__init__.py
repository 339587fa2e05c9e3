"""CI integration helpers."""

from mrgate.ci.ci_config import JOB_NAME, STAGE_NAME, ensure_gitlab_ci, patch_gitlab_ci

__all__ = ["JOB_NAME", "STAGE_NAME", "ensure_gitlab_ci", "patch_gitlab_ci"]
