"""check command: create or update the changeset status comment on a PR."""

from __future__ import annotations

import json
import logging

import click

from changeset_check_cli.actions import group, set_failed, set_output
from changeset_check_core.checker import run_check
from changeset_check_core.context import context_from_event, load_event

logger = logging.getLogger(__name__)


@click.command("check")
@click.option(
    "--event-path",
    envvar="GITHUB_EVENT_PATH",
    default=None,
    help="Path to the pull_request event payload. Defaults to $GITHUB_EVENT_PATH.",
)
@click.option("--sha", envvar="GITHUB_SHA", default=None, help="Commit SHA to report. Defaults to $GITHUB_SHA.")
@click.option(
    "--repository",
    envvar="GITHUB_REPOSITORY",
    default=None,
    help="Repository in owner/name format. Defaults to $GITHUB_REPOSITORY.",
)
@click.option(
    "--shadow",
    "-s",
    is_flag=True,
    help="Dry-run mode: print the comment without posting to GitHub.",
)
@click.pass_context
def check_cmd(ctx, event_path: str | None, sha: str | None, repository: str | None, shadow: bool):
    """Check a pull request for a newly added changeset.

    Meant to run as a GitHub Actions step on pull_request events. Posts a
    single comment saying whether a changeset was found, and updates that
    same comment on every later run.

    \b
    Required environment variables:
      GITHUB_TOKEN         Token with permission to comment on pull requests
    """
    config = ctx.obj["config"]

    # Fail before reading anything else so a misconfigured workflow is obvious.
    if not config.get("github_token"):
        set_failed(config["missing_token_message"])

    if not event_path:
        raise click.UsageError("No event payload found. Set GITHUB_EVENT_PATH or pass --event-path.")

    try:
        payload = load_event(event_path)
        context = context_from_event(payload, sha=sha, repository=repository)
    except (OSError, ValueError) as e:
        raise click.UsageError(str(e))

    with group("Event payload"):
        logger.info("%s", json.dumps(payload, indent=2))

    try:
        result = run_check(context, config, shadow=shadow)
    except Exception as e:
        logger.exception("Changeset check failed")
        set_failed(str(e))

    if not result.ok:
        set_failed(result.message)

    set_output("has-changeset", "true" if result.has_changeset else "false")
    set_output("comment-id", "" if result.comment_id is None else str(result.comment_id))
    set_output("action", result.action or "")
