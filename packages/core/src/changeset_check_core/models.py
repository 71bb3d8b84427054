"""Request-scoped data models.

Everything here is built fresh on each invocation and discarded when the
process exits. The only durable state is the comment stored by GitHub.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PullRequestContext:
    """The pull request a check run is about.

    Built once by the CLI from the Actions event payload and passed down
    explicitly, so nothing below the CLI reads environment variables.
    """

    owner: str
    repo: str
    pull_number: int
    commit_sha: str
    head_ref: str
    head_repo_url: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


@dataclass(frozen=True)
class ChangedFile:
    """A file touched by the pull request."""

    path: str
    status: str  # "added" | "modified" | "removed" | "renamed" | ...


@dataclass(frozen=True)
class ExistingComment:
    """A comment on the pull request's issue thread."""

    id: int
    body: str


@dataclass(frozen=True)
class CheckResult:
    """Outcome of run_check; the CLI maps a failure onto the Actions error channel."""

    ok: bool
    message: str = ""
    has_changeset: bool | None = None
    comment_id: int | None = None
    action: str | None = None  # "created" | "updated" | "shadow"

    @classmethod
    def success(cls, has_changeset: bool, action: str, comment_id: int | None = None) -> CheckResult:
        return cls(ok=True, has_changeset=has_changeset, comment_id=comment_id, action=action)

    @classmethod
    def failure(cls, message: str) -> CheckResult:
        return cls(ok=False, message=message)
