"""GitLab integration: diff source client and MR note poster."""

from mrgate.gitlab.client_gitlab import DEFAULT_API_URL, GitLabClient
from mrgate.gitlab.poster_mr_note import MrNotePoster

__all__ = ["DEFAULT_API_URL", "GitLabClient", "MrNotePoster"]
