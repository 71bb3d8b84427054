"""GitHub Actions workflow commands.

The runner parses specially formatted stdout lines (``::error::...``) and
reads step outputs from the file named by GITHUB_OUTPUT. See
https://docs.github.com/actions/using-workflows/workflow-commands-for-github-actions
"""

from __future__ import annotations

import os
import uuid
from contextlib import contextmanager
from typing import NoReturn

import click


def escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def error(message: str) -> None:
    click.echo(f"::error::{escape_data(message)}")


def set_failed(message: str) -> NoReturn:
    """Report ``message`` as an error annotation and fail the step."""
    error(message)
    raise SystemExit(1)


def set_output(name: str, value: str) -> None:
    """Append a step output to $GITHUB_OUTPUT; no-op outside Actions."""
    output_path = os.environ.get("GITHUB_OUTPUT")
    if not output_path:
        return
    with open(output_path, "a", encoding="utf-8") as f:
        if "\n" in value:
            delimiter = f"ghadelimiter_{uuid.uuid4()}"
            f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
        else:
            f.write(f"{name}={value}\n")


@contextmanager
def group(title: str):
    """Fold everything printed inside the block into a collapsible log group."""
    click.echo(f"::group::{title}")
    try:
        yield
    finally:
        click.echo("::endgroup::")
