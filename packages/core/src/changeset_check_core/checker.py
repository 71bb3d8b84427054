"""Core changeset check orchestration."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

from github import GithubException
from rich.console import Console

from changeset_check_core.detector import changeset_files, find_comment_id, has_changeset
from changeset_check_core.gh.base import BaseClient
from changeset_check_core.gh.pull_request import GithubClient
from changeset_check_core.messages import render_message
from changeset_check_core.models import ChangedFile, CheckResult, ExistingComment, PullRequestContext

console = Console()
logger = logging.getLogger(__name__)


def gather_inputs(client: BaseClient, context: PullRequestContext) -> tuple[list[ChangedFile], list[ExistingComment]]:
    """Fetch the PR's changed files and issue comments in parallel.

    Both reads must succeed; an exception from either is re-raised here.
    """
    with ThreadPoolExecutor(max_workers=2) as pool:
        files_future = pool.submit(
            client.list_pull_request_files, context.owner, context.repo, context.pull_number
        )
        comments_future = pool.submit(
            client.list_issue_comments, context.owner, context.repo, context.pull_number
        )
        return files_future.result(), comments_future.result()


def print_shadow_message(message: str) -> None:
    """Print the comment body to the terminal without posting to GitHub."""
    console.print("\n[bold]Shadow mode: comment body (not posted)[/bold]\n")
    console.print(message, markup=False, highlight=False, soft_wrap=True)


def run_check(
    context: PullRequestContext,
    config: dict,
    client: BaseClient | None = None,
    shadow: bool = False,
) -> CheckResult:
    """Decide whether the PR adds a changeset and create or update the status comment.

    Returns a failure result when the token is missing (before any network
    call) or when GitHub rejects a request. Anything else propagates.
    """
    if not config.get("github_token"):
        return CheckResult.failure(config["missing_token_message"])

    if client is None:
        client = GithubClient(config["github_token"])

    try:
        files, comments = gather_inputs(client, context)

        verdict = has_changeset(files, config["changeset_dir"])
        comment_id = find_comment_id(comments, config["signature"])
        logger.debug(
            "%d changed file(s), %d comment(s) on %s#%d",
            len(files),
            len(comments),
            context.full_name,
            context.pull_number,
        )

        if verdict:
            found = changeset_files(files, config["changeset_dir"])
            console.print(f"[green]Changeset found:[/green] {', '.join(f.path for f in found)}")
        else:
            console.print(f"[yellow]No new changeset in {config['changeset_dir']}/[/yellow]")

        message = render_message(verdict, context, config)

        if shadow:
            print_shadow_message(message)
            return CheckResult.success(verdict, action="shadow", comment_id=comment_id)

        if comment_id is not None:
            client.update_issue_comment(context.owner, context.repo, context.pull_number, comment_id, message)
            console.print(f"[green]Updated comment {comment_id} on {context.full_name}#{context.pull_number}[/green]")
            return CheckResult.success(verdict, action="updated", comment_id=comment_id)

        new_id = client.create_issue_comment(context.owner, context.repo, context.pull_number, message)
        console.print(f"[green]Created comment {new_id} on {context.full_name}#{context.pull_number}[/green]")
        return CheckResult.success(verdict, action="created", comment_id=new_id)
    except GithubException as e:
        logger.error("GitHub API request failed: %s", e)
        return CheckResult.failure(str(e))
