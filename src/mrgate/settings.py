# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Environment configuration for the merge request quality gate.

GitLab CI provides the API URL, project ID and MR IID to every merge
request pipeline; the token must be configured as a masked CI variable.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from mrgate.gitlab.client_gitlab import DEFAULT_API_URL

_REQUIRED = (
    ("CI_PROJECT_ID", "project_id"),
    ("CI_MERGE_REQUEST_IID", "mr_iid"),
    ("GITLAB_TOKEN", "token"),
)


class MrGateSettings(BaseSettings):
    """Pydantic Settings for a quality gate run, loaded from environment.

    Environment variables:
        CI_API_V4_URL: GitLab API base URL (default https://gitlab.com/api/v4)
        CI_PROJECT_ID: Project ID (required)
        CI_MERGE_REQUEST_IID: Merge request IID (required)
        GITLAB_TOKEN: API token (required)
        MRGATE_PROJECT_LABEL: Label shown in reports (overrides the policy)
        MRGATE_POLICY_PATH: Policy YAML file
        MRGATE_DEADLINE_SECONDS: Wall-clock budget for one run
        LOG_LEVEL: Logging level (default INFO)
    """

    model_config = SettingsConfigDict(extra="ignore", populate_by_name=True)

    api_url: str = Field(
        default=DEFAULT_API_URL,
        validation_alias="CI_API_V4_URL",
        description="GitLab API v4 base URL",
    )
    project_id: str = Field(default="", validation_alias="CI_PROJECT_ID")
    mr_iid: str = Field(default="", validation_alias="CI_MERGE_REQUEST_IID")
    token: str = Field(default="", validation_alias="GITLAB_TOKEN", repr=False)
    project_label: str | None = Field(
        default=None,
        validation_alias="MRGATE_PROJECT_LABEL",
        description="Report label; None keeps the policy's label",
    )
    policy_path: str | None = Field(default=None, validation_alias="MRGATE_POLICY_PATH")
    deadline_seconds: float | None = Field(
        default=None,
        gt=0,
        validation_alias="MRGATE_DEADLINE_SECONDS",
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    @field_validator("project_label", "policy_path", "deadline_seconds", mode="before")
    @classmethod
    def empty_as_none(cls, v: object) -> object:
        """CI variables that are defined but empty count as unset."""
        return None if v == "" else v

    def required_status(self) -> list[tuple[str, bool]]:
        """Return (variable name, present) for each required CI variable."""
        return [(env, bool(getattr(self, attr))) for env, attr in _REQUIRED]

    def missing_required(self) -> list[str]:
        """Return the names of required CI variables that are not set."""
        return [env for env, present in self.required_status() if not present]


__all__ = ["MrGateSettings"]
