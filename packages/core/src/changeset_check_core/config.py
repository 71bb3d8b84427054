import os
from pathlib import Path
from typing import Optional

import yaml

DEFAULT_CONFIG: dict = {
    "changeset_dir": ".changeset",
    "add_command": "npm run changeset",
    "docs_url": "https://github.com/Noviny/changesets/blob/master/docs/adding-a-changeset.md",
    # Hidden HTML comment used to find our own comment on the next run.
    "signature": "<!-- changeset-check-action-signature -->",
    "missing_token_message": "Please add the GITHUB_TOKEN to the changesets action",
}


def load_config(config_path: str = ".changeset-check.yml", cli_overrides: Optional[dict] = None) -> dict:
    """
    Load configuration by merging (in order of precedence):
      1. Built-in defaults
      2. .changeset-check.yml in the current directory
      3. CLI argument overrides
    """
    config = dict(DEFAULT_CONFIG)

    path = Path(config_path)
    if path.exists():
        with open(path) as f:
            file_config = yaml.safe_load(f) or {}
        if not isinstance(file_config, dict):
            raise ValueError(f"{config_path} must contain a mapping, got {type(file_config).__name__}.")
        config.update(file_config)

    if cli_overrides:
        for key, value in cli_overrides.items():
            if value is not None:
                config[key] = value

    # Resolve credentials from environment variables
    config["github_token"] = os.environ.get("GITHUB_TOKEN")

    return config
