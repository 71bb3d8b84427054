"""init command: set a repository up for changeset checks.

Writes the config file (only the keys that differ from the defaults) and a
GitHub Actions workflow that runs `changeset-check check` on every PR push.
"""

from __future__ import annotations

from pathlib import Path

import click
import yaml
from rich.console import Console

from changeset_check_core.config import DEFAULT_CONFIG

console = Console()

_WORKFLOW_TEMPLATE = """\
name: Changeset Check

on:
  pull_request:
    types: [opened, synchronize, reopened]

jobs:
  changeset-check:
    runs-on: ubuntu-latest
    permissions:
      contents: read
      pull-requests: write

    steps:
      - uses: actions/checkout@v4

      - name: Set up Python
        uses: actions/setup-python@v5
        with:
          python-version: "3.12"

      - name: Install changeset-check
        run: pip install "changeset-check=={version}"

      - name: Check for a changeset
        env:
          GITHUB_TOKEN: ${{{{ secrets.GITHUB_TOKEN }}}}
        run: changeset-check check
"""


@click.command("init")
@click.option("--yes", "-y", is_flag=True, help="Accept the defaults without prompting.")
@click.pass_context
def init_cmd(ctx, yes: bool):
    """Set up changeset checks for this repository.

    Creates the config file and generates a GitHub Actions workflow.
    """
    config_path = Path(ctx.obj.get("config_path", ".changeset-check.yml") if ctx.obj else ".changeset-check.yml")
    console.print("\n[bold cyan]changeset-check init[/bold cyan]: repository setup\n")

    if yes:
        changeset_dir = DEFAULT_CONFIG["changeset_dir"]
        add_command = DEFAULT_CONFIG["add_command"]
    else:
        changeset_dir = click.prompt("Changeset directory", default=DEFAULT_CONFIG["changeset_dir"])
        add_command = click.prompt("Command contributors run to add a changeset", default=DEFAULT_CONFIG["add_command"])

    config: dict = {}
    if changeset_dir != DEFAULT_CONFIG["changeset_dir"]:
        config["changeset_dir"] = changeset_dir
    if add_command != DEFAULT_CONFIG["add_command"]:
        config["add_command"] = add_command

    _write_config(config_path, config)
    console.print(f"[green]Created {config_path}[/green]")

    setup_ci = yes or click.confirm("\nGenerate .github/workflows/changeset-check.yml?", default=True)
    if setup_ci:
        workflow_path = _write_workflow()
        console.print(f"[green]Created {workflow_path}[/green]")

    console.print("\n[bold green]Setup complete![/bold green]")


def _write_config(path: Path, config: dict) -> None:
    """Write or update the config file, preserving any existing keys."""
    existing: dict = {}
    if path.exists():
        existing = yaml.safe_load(path.read_text()) or {}
    existing.update(config)
    path.write_text(yaml.dump(existing, default_flow_style=False, sort_keys=False))


def _get_version() -> str:
    """Read the current changeset-check version from the installed package metadata."""
    from importlib.metadata import PackageNotFoundError, version

    try:
        return version("changeset-check")
    except PackageNotFoundError:
        return "0.1.0"


def _write_workflow() -> Path:
    """Write the GitHub Actions workflow file."""
    workflow_dir = Path(".github/workflows")
    workflow_dir.mkdir(parents=True, exist_ok=True)
    workflow_path = workflow_dir / "changeset-check.yml"
    workflow_path.write_text(_WORKFLOW_TEMPLATE.format(version=_get_version()))
    return workflow_path
