"""Protocol definitions for the merge request quality gate.

The rule engine never talks to GitLab directly. It consumes a diff source
and, after the run, hands the report to a report sink. Both are injected so
that tests and offline runs can substitute in-memory implementations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from mrgate.models.model_merge_request import (
        ModelCommit,
        ModelFileChange,
        ModelMergeRequest,
    )


@runtime_checkable
class ProtocolDiffSource(Protocol):
    """Protocol for merge request data providers.

    Failure contract:
        - fetch_metadata, fetch_commits and fetch_changed_files raise
          FatalFetchError when the data cannot be retrieved.
        - fetch_file_content never raises; it returns "" when the file
          cannot be retrieved so that one unreadable file does not abort
          the whole evaluation.
    """

    def fetch_metadata(self) -> ModelMergeRequest:
        """Return the merge request metadata."""
        ...

    def fetch_commits(self) -> list[ModelCommit]:
        """Return the commits of the merge request."""
        ...

    def fetch_changed_files(self) -> list[ModelFileChange]:
        """Return the files touched by the merge request."""
        ...

    def fetch_file_content(self, path: str, ref: str | None = None) -> str:
        """Return the post-change content of ``path`` at ``ref``.

        Args:
            path: Repository-relative file path.
            ref: Git ref; defaults to the merge request's source branch.

        Returns:
            File content, or "" if it could not be retrieved.
        """
        ...


@runtime_checkable
class ProtocolReportSink(Protocol):
    """Protocol for the destination of the rendered report."""

    def post_note(self, body: str) -> None:
        """Post the report body.

        Raises:
            SinkPostError: If the report could not be posted.
        """
        ...


__all__ = ["ProtocolDiffSource", "ProtocolReportSink"]
