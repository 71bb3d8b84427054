"""Abstract GitHub client interface.

run_check depends on BaseClient rather than on PyGithub, so tests can drive the
whole check with an in-memory fake and no network access.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from changeset_check_core.models import ChangedFile, ExistingComment


class BaseClient(ABC):
    """The four REST endpoints the check needs, with typed results."""

    @abstractmethod
    def list_pull_request_files(self, owner: str, repo: str, pull_number: int) -> list[ChangedFile]:
        """Return every file touched by the pull request."""

    @abstractmethod
    def list_issue_comments(self, owner: str, repo: str, issue_number: int) -> list[ExistingComment]:
        """Return the comments on the PR's issue thread, oldest first (ascending id)."""

    @abstractmethod
    def create_issue_comment(self, owner: str, repo: str, issue_number: int, body: str) -> int:
        """Post a new comment and return its id."""

    @abstractmethod
    def update_issue_comment(self, owner: str, repo: str, issue_number: int, comment_id: int, body: str) -> None:
        """Replace the body of an existing comment on the PR's issue thread."""
