"""Pure decision helpers: does the PR add a changeset, and which comment is ours."""

from __future__ import annotations

from collections.abc import Iterable

from changeset_check_core.models import ChangedFile, ExistingComment


def changeset_files(files: Iterable[ChangedFile], changeset_dir: str = ".changeset") -> list[ChangedFile]:
    """Return the newly added files under ``changeset_dir``, in input order.

    Only ``added`` counts: editing or renaming an old changeset does not
    describe the current change, so it must not satisfy the check.
    """
    prefix = changeset_dir.rstrip("/") + "/"
    return [f for f in files if f.path.startswith(prefix) and f.status == "added"]


def has_changeset(files: Iterable[ChangedFile], changeset_dir: str = ".changeset") -> bool:
    return len(changeset_files(files, changeset_dir)) > 0


def find_comment_id(comments: Iterable[ExistingComment], signature: str) -> int | None:
    """Return the id of the first comment whose body contains ``signature``, or None."""
    for comment in comments:
        if signature in (comment.body or ""):
            return comment.id
    return None
