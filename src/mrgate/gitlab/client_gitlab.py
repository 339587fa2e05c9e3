# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""GitLab REST API client for the merge request quality gate.

Implements both sides of a run: the diff source (MR metadata, commits,
changed files, file content) and the note endpoints used by the report
sink.

Failure contract:
- Metadata, commits and changes failures raise FatalFetchError.
- File content failures are logged at DEBUG and return "".
- Note posting failures raise SinkPostError.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from mrgate.errors import FatalFetchError, SinkPostError, SoftFetchError
from mrgate.models.model_merge_request import (
    ModelCommit,
    ModelFileChange,
    ModelMergeRequest,
)

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://gitlab.com/api/v4"
READ_TIMEOUT_SECONDS = 30.0
POST_TIMEOUT_SECONDS = 60.0
_PER_PAGE = 100


class GitLabClient:
    """Synchronous GitLab client scoped to one merge request.

    Args:
        project_id: GitLab project ID (``CI_PROJECT_ID``).
        mr_iid: Merge request IID (``CI_MERGE_REQUEST_IID``).
        token: Token sent as the ``PRIVATE-TOKEN`` header.
        api_url: API v4 base URL (``CI_API_V4_URL``).
        transport: Optional httpx transport, e.g. ``httpx.MockTransport``.

    Usage::

        with GitLabClient("123", "42", token) as client:
            mr = client.fetch_metadata()
            content = client.fetch_file_content("lib/main.dart")
    """

    def __init__(
        self,
        project_id: str,
        mr_iid: str,
        token: str,
        api_url: str = DEFAULT_API_URL,
        *,
        transport: httpx.BaseTransport | None = None,
        read_timeout: float = READ_TIMEOUT_SECONDS,
        post_timeout: float = POST_TIMEOUT_SECONDS,
    ) -> None:
        self._project_id = project_id
        self._mr_iid = mr_iid
        self._read_timeout = read_timeout
        self._post_timeout = post_timeout
        self._client = httpx.Client(
            base_url=api_url.rstrip("/"),
            headers={"PRIVATE-TOKEN": token},
            timeout=httpx.Timeout(read_timeout),
            transport=transport,
        )
        self._metadata: ModelMergeRequest | None = None
        self._content_cache: dict[tuple[str, str], str] = {}

    def __enter__(self) -> GitLabClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    @property
    def _mr_path(self) -> str:
        return f"/projects/{self._project_id}/merge_requests/{self._mr_iid}"

    # ------------------------------------------------------------------
    # Diff source
    # ------------------------------------------------------------------

    def _get_json(self, path: str, what: str, **params: Any) -> Any:
        try:
            response = self._client.get(path, params=params or None)
            response.raise_for_status()
            return response.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise FatalFetchError(f"Failed to fetch {what}: {exc}") from exc

    def _get_paginated(self, path: str, what: str) -> list[dict[str, Any]]:
        """GET every page of a list endpoint, following ``X-Next-Page``."""
        items: list[dict[str, Any]] = []
        page = "1"
        while page:
            try:
                response = self._client.get(
                    path, params={"per_page": _PER_PAGE, "page": page}
                )
                response.raise_for_status()
                data = response.json()
            except (httpx.HTTPError, ValueError) as exc:
                raise FatalFetchError(f"Failed to fetch {what}: {exc}") from exc
            if not isinstance(data, list):
                raise FatalFetchError(f"Failed to fetch {what}: expected a list")
            items.extend(data)
            page = response.headers.get("X-Next-Page", "")
        return items

    def fetch_metadata(self) -> ModelMergeRequest:
        """Fetch MR metadata once; later calls return the memoised value."""
        if self._metadata is None:
            payload = self._get_json(self._mr_path, "MR details")
            if not isinstance(payload, dict):
                raise FatalFetchError("Failed to fetch MR details: expected an object")
            self._metadata = ModelMergeRequest.from_api(payload)
        return self._metadata

    def fetch_commits(self) -> list[ModelCommit]:
        payload = self._get_paginated(f"{self._mr_path}/commits", "commits")
        return [ModelCommit.from_api(item) for item in payload]

    def fetch_changed_files(self) -> list[ModelFileChange]:
        payload = self._get_json(f"{self._mr_path}/changes", "MR changes")
        if not isinstance(payload, dict):
            raise FatalFetchError("Failed to fetch MR changes: expected an object")
        return [ModelFileChange.from_api(item) for item in payload.get("changes") or []]

    def _fetch_raw(self, path: str, ref: str) -> str:
        url = f"/projects/{self._project_id}/repository/files/{quote(path, safe='')}/raw"
        try:
            response = self._client.get(url, params={"ref": ref})
        except httpx.HTTPError as exc:
            raise SoftFetchError(f"{path}@{ref}: {exc}") from exc
        if response.status_code != 200:
            raise SoftFetchError(f"{path}@{ref}: HTTP {response.status_code}")
        return response.text

    def fetch_file_content(self, path: str, ref: str | None = None) -> str:
        """Return the content of ``path`` at ``ref`` (default: source branch).

        Never raises: an unavailable file yields "". Results, including
        failures, are cached per (path, ref).
        """
        if ref is None:
            try:
                ref = self.fetch_metadata().source_branch
            except FatalFetchError as exc:
                logger.debug("No ref for %s: %s", path, exc)
                return ""

        key = (path, ref)
        if key in self._content_cache:
            return self._content_cache[key]

        try:
            content = self._fetch_raw(path, ref)
        except SoftFetchError as exc:
            logger.debug("Could not fetch file content: %s", exc)
            content = ""
        self._content_cache[key] = content
        return content

    # ------------------------------------------------------------------
    # Notes
    # ------------------------------------------------------------------

    def post_note(self, body: str) -> dict[str, Any]:
        """Create an MR note.

        Raises:
            SinkPostError: If GitLab rejects the note or is unreachable.
        """
        try:
            response = self._client.post(
                f"{self._mr_path}/notes",
                json={"body": body},
                timeout=self._post_timeout,
            )
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise SinkPostError(f"Failed to post comment: {exc}") from exc
        try:
            data = response.json()
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}

    def list_notes(self) -> list[dict[str, Any]]:
        """Return every note of the MR.

        Raises:
            FatalFetchError: If the notes cannot be listed.
        """
        return self._get_paginated(f"{self._mr_path}/notes", "MR notes")

    def delete_note(self, note_id: int) -> None:
        """Delete one MR note.

        Raises:
            SinkPostError: If the note cannot be deleted.
        """
        try:
            response = self._client.delete(f"{self._mr_path}/notes/{note_id}")
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise SinkPostError(f"Failed to delete note {note_id}: {exc}") from exc


__all__ = [
    "DEFAULT_API_URL",
    "POST_TIMEOUT_SECONDS",
    "READ_TIMEOUT_SECONDS",
    "GitLabClient",
]
