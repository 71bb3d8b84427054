"""preview command: render a comment body without calling GitHub."""

from __future__ import annotations

import click
from rich.console import Console

from changeset_check_core.messages import render_message
from changeset_check_core.models import PullRequestContext

console = Console()


@click.command("preview")
@click.option("--sha", required=True, help="Commit SHA to embed in the message.")
@click.option(
    "--absent/--approve",
    "absent",
    default=True,
    show_default=True,
    help="Render the missing-changeset message or the approval message.",
)
@click.option("--head-ref", default="my-branch", show_default=True, help="Head branch used in the maintainer link.")
@click.option(
    "--repo-url",
    default="https://github.com/owner/repo",
    show_default=True,
    help="Head repository URL used in the maintainer link.",
)
@click.pass_context
def preview_cmd(ctx, sha: str, absent: bool, head_ref: str, repo_url: str):
    """Print the comment this tool would post, using the current config."""
    config = ctx.obj["config"]

    repo_url = repo_url.rstrip("/")
    # Owner and name never appear in the rendered body.
    context = PullRequestContext(
        owner="owner",
        repo="repo",
        pull_number=0,
        commit_sha=sha,
        head_ref=head_ref,
        head_repo_url=repo_url,
    )
    console.print(render_message(not absent, context, config), markup=False, highlight=False, soft_wrap=True)
