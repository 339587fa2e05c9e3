# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Merge request snapshot models.

These models are the normalised view of what a diff source returns. They are
fetched once per run and never mutated.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator


class ModelMergeRequest(BaseModel):
    """Merge request metadata.

    Attributes:
        title: The MR title.
        description: The MR description (GitLab may send null; stored as "").
        source_branch: Branch the MR merges from; used as the ref for content.
    """

    title: str = Field(default="", description="Merge request title")
    description: str = Field(default="", description="Merge request description")
    source_branch: str = Field(default="", description="Source branch name")

    @field_validator("title", "description", "source_branch", mode="before")
    @classmethod
    def coerce_null(cls, v: Any) -> Any:
        """GitLab returns null for empty descriptions."""
        return "" if v is None else v

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> ModelMergeRequest:
        """Build from a GitLab ``merge_requests/:iid`` payload."""
        return cls(
            title=payload.get("title"),
            description=payload.get("description"),
            source_branch=payload.get("source_branch"),
        )

    model_config = {"frozen": True, "extra": "ignore", "from_attributes": True}


class ModelCommit(BaseModel):
    """A single commit of the merge request.

    Attributes:
        short_id: Abbreviated commit SHA.
        title: First line of the commit message.
        message: Full commit message.
    """

    short_id: str = Field(default="", description="Abbreviated commit SHA")
    title: str = Field(default="", description="First line of the message")
    message: str = Field(default="", description="Full commit message")

    @field_validator("short_id", "title", "message", mode="before")
    @classmethod
    def coerce_null(cls, v: Any) -> Any:
        return "" if v is None else v

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> ModelCommit:
        """Build from a GitLab commit payload.

        Falls back to the first 8 characters of ``id`` when ``short_id`` is
        absent.
        """
        short_id = payload.get("short_id") or (payload.get("id") or "")[:8]
        return cls(
            short_id=short_id,
            title=payload.get("title"),
            message=payload.get("message"),
        )

    model_config = {"frozen": True, "extra": "ignore", "from_attributes": True}


class ModelFileChange(BaseModel):
    """A file touched by the merge request (its post-change path)."""

    path: str = Field(default="", description="New path of the changed file")

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> ModelFileChange:
        return cls(path=payload.get("new_path") or "")

    @property
    def basename(self) -> str:
        """Return the final path segment."""
        return self.path.rsplit("/", 1)[-1]

    model_config = {"frozen": True, "extra": "ignore", "from_attributes": True}


__all__ = ["ModelCommit", "ModelFileChange", "ModelMergeRequest"]
