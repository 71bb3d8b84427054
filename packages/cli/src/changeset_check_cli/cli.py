"""CLI entry point for changeset-check.

Commands:
  check    - inspect a pull request and create or update the changeset comment
  preview  - render a comment body locally, without touching GitHub
  init     - write a config file and a GitHub Actions workflow
"""

from __future__ import annotations

import importlib.metadata
import logging

import click
import yaml
from rich.logging import RichHandler

from changeset_check_cli.commands.check import check_cmd
from changeset_check_cli.commands.init import init_cmd
from changeset_check_cli.commands.preview import preview_cmd


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


@click.group()
@click.version_option(
    version=importlib.metadata.version("changeset-check"),
    prog_name="changeset-check",
)
@click.option(
    "--config",
    "config_path",
    default=".changeset-check.yml",
    show_default=True,
    help="Path to the configuration file.",
    envvar="CHANGESET_CHECK_CONFIG",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default="info",
    show_default=True,
    help="Verbosity of diagnostic logging.",
)
@click.pass_context
def main(ctx: click.Context, config_path: str, log_level: str):
    """Comment on pull requests that are missing a changeset."""
    from changeset_check_core.config import load_config

    _configure_logging(log_level)
    ctx.ensure_object(dict)

    try:
        config = load_config(config_path)
    except (ValueError, yaml.YAMLError) as e:
        raise click.UsageError(str(e))

    ctx.obj["config"] = config
    ctx.obj["config_path"] = config_path


main.add_command(check_cmd)
main.add_command(preview_cmd)
main.add_command(init_cmd)
