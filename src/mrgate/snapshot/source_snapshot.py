# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Offline diff source backed by a JSON snapshot.

Snapshot format::

    {
      "merge_request": {"title": "...", "description": "...", "source_branch": "..."},
      "commits": [{"short_id": "...", "title": "...", "message": "..."}],
      "changes": [{"new_path": "lib/main.dart"}],
      "files": {"lib/main.dart": "void main() {}"}
    }

``merge_request``, ``commits`` and ``changes`` use the GitLab API payload
shapes, so a snapshot can be assembled from saved API responses.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from mrgate.errors import FatalFetchError
from mrgate.models.model_merge_request import (
    ModelCommit,
    ModelFileChange,
    ModelMergeRequest,
)

logger = logging.getLogger(__name__)


class ModelSnapshot(BaseModel):
    """Raw snapshot document."""

    merge_request: dict[str, Any] = Field(default_factory=dict)
    commits: list[dict[str, Any]] = Field(default_factory=list)
    changes: list[dict[str, Any]] = Field(default_factory=list)
    files: dict[str, str] = Field(default_factory=dict)

    model_config = {"frozen": True, "extra": "ignore"}


class SnapshotDiffSource:
    """Diff source that serves a merge request from memory.

    The ``ref`` argument of :meth:`fetch_file_content` is ignored: a
    snapshot holds exactly one version of each file.
    """

    def __init__(self, snapshot: ModelSnapshot) -> None:
        self._snapshot = snapshot

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SnapshotDiffSource:
        try:
            return cls(ModelSnapshot.model_validate(data))
        except ValidationError as exc:
            raise FatalFetchError(f"Invalid snapshot: {exc}") from exc

    @classmethod
    def from_file(cls, path: str | Path) -> SnapshotDiffSource:
        """Load a snapshot JSON file.

        Raises:
            FatalFetchError: If the file is unreadable or malformed.
        """
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise FatalFetchError(f"Cannot read snapshot {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise FatalFetchError(f"Snapshot {path} must contain a JSON object")
        logger.debug("Loaded snapshot %s", path)
        return cls.from_dict(data)

    def fetch_metadata(self) -> ModelMergeRequest:
        return ModelMergeRequest.from_api(self._snapshot.merge_request)

    def fetch_commits(self) -> list[ModelCommit]:
        return [ModelCommit.from_api(item) for item in self._snapshot.commits]

    def fetch_changed_files(self) -> list[ModelFileChange]:
        return [ModelFileChange.from_api(item) for item in self._snapshot.changes]

    def fetch_file_content(self, path: str, ref: str | None = None) -> str:
        return self._snapshot.files.get(path, "")


__all__ = ["ModelSnapshot", "SnapshotDiffSource"]
