from __future__ import annotations

from github import Auth, Github

from changeset_check_core.gh.base import BaseClient
from changeset_check_core.models import ChangedFile, ExistingComment


def get_repo(github: Github, owner: str, repo: str):
    return github.get_repo(f"{owner}/{repo}")


def get_pull(repo, pr_number: int):
    return repo.get_pull(pr_number)


def get_issue(repo, issue_number: int):
    return repo.get_issue(issue_number)


class GithubClient(BaseClient):
    """BaseClient backed by PyGithub."""

    def __init__(self, token: str, github: Github | None = None):
        self._github = github if github is not None else Github(auth=Auth.Token(token), lazy=True)

    def list_pull_request_files(self, owner: str, repo: str, pull_number: int) -> list[ChangedFile]:
        pr = get_pull(get_repo(self._github, owner, repo), pull_number)
        return [ChangedFile(path=f.filename, status=f.status) for f in pr.get_files()]

    def list_issue_comments(self, owner: str, repo: str, issue_number: int) -> list[ExistingComment]:
        issue = get_issue(get_repo(self._github, owner, repo), issue_number)
        comments = [ExistingComment(id=c.id, body=c.body or "") for c in issue.get_comments()]
        # Comment ids grow monotonically, so sorting by id gives creation order
        # regardless of what order the API paginates in.
        return sorted(comments, key=lambda c: c.id)

    def create_issue_comment(self, owner: str, repo: str, issue_number: int, body: str) -> int:
        issue = get_issue(get_repo(self._github, owner, repo), issue_number)
        return issue.create_comment(body).id

    def update_issue_comment(self, owner: str, repo: str, issue_number: int, comment_id: int, body: str) -> None:
        issue = get_issue(get_repo(self._github, owner, repo), issue_number)
        issue.get_comment(comment_id).edit(body)
