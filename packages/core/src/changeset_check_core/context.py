"""Build a PullRequestContext from a GitHub Actions event payload.

The runner writes the triggering event to the file named by
GITHUB_EVENT_PATH; GITHUB_SHA and GITHUB_REPOSITORY carry the commit and the
``owner/name`` slug. The CLI resolves those variables and hands the values in
here, so this module never touches the environment.
"""

from __future__ import annotations

import json
from pathlib import Path

from changeset_check_core.models import PullRequestContext


def load_event(event_path: str) -> dict:
    """Read the JSON event payload written by the Actions runner."""
    path = Path(event_path)
    if not path.exists():
        raise FileNotFoundError(f"Event payload not found: {event_path}")
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def context_from_event(payload: dict, sha: str | None = None, repository: str | None = None) -> PullRequestContext:
    """
    Extract the pull request context from an event payload.

    ``repository`` (owner/name) falls back to ``payload.repository.full_name``;
    ``sha`` falls back to the PR head commit. Raises ValueError when the
    payload is not a pull request event or lacks a required field.
    """
    pr = payload.get("pull_request")
    if not pr:
        raise ValueError("Event payload has no pull_request; run this check on pull_request events.")

    full_name = repository or (payload.get("repository") or {}).get("full_name")
    if not full_name or "/" not in full_name:
        raise ValueError(f"Cannot determine repository owner/name (got {full_name!r}).")
    owner, repo = full_name.split("/", 1)

    head = pr.get("head") or {}
    head_repo = head.get("repo") or {}
    commit_sha = sha or head.get("sha")

    missing = [
        name
        for name, value in (
            ("pull_request.number", pr.get("number")),
            ("pull_request.head.ref", head.get("ref")),
            ("pull_request.head.repo.html_url", head_repo.get("html_url")),
            ("commit sha", commit_sha),
        )
        if not value
    ]
    if missing:
        raise ValueError(f"Event payload is missing: {', '.join(missing)}.")

    return PullRequestContext(
        owner=owner,
        repo=repo,
        pull_number=int(pr["number"]),
        commit_sha=commit_sha,
        head_ref=head["ref"],
        head_repo_url=head_repo["html_url"],
    )
