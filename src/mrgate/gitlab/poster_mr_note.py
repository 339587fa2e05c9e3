# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""MR note poster for the merge request quality gate.

Every report starts with the hidden marker ``<!-- mrgate -->``. With
``replace_previous`` enabled, notes from earlier runs that carry the marker
are deleted before the new one is posted, so an MR shows a single current
report.
"""

from __future__ import annotations

import logging

from mrgate.errors import MrGateError
from mrgate.gitlab.client_gitlab import GitLabClient
from mrgate.runner.renderer_report import COMMENT_MARKER

logger = logging.getLogger(__name__)


class MrNotePoster:
    """Report sink that posts the comment body as a GitLab MR note.

    Cleanup is best-effort: a failure to list or delete stale notes is
    logged and the new note is still posted. Posting failures propagate as
    SinkPostError.

    Args:
        client: GitLab client scoped to the MR.
        replace_previous: Delete earlier notes carrying the marker.
    """

    def __init__(self, client: GitLabClient, *, replace_previous: bool = False) -> None:
        self._client = client
        self._replace_previous = replace_previous

    def post_note(self, body: str) -> None:
        if self._replace_previous:
            self._cleanup_previous_notes()
        self._client.post_note(body)

    def _cleanup_previous_notes(self) -> None:
        try:
            notes = self._client.list_notes()
        except MrGateError as exc:
            logger.warning("Could not list MR notes: %s", exc)
            return

        for note in notes:
            if COMMENT_MARKER not in (note.get("body") or ""):
                continue
            note_id = note.get("id")
            if not note_id:
                continue
            try:
                self._client.delete_note(int(note_id))
            except MrGateError as exc:
                logger.warning("Could not delete stale note %s: %s", note_id, exc)


__all__ = ["MrNotePoster"]
