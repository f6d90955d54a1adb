"""Configuration management for gql-schema."""

import os
from dataclasses import dataclass, field
from typing import Optional

import yaml

from . import utils

CONFIG_ENV_VAR = "GQL_SCHEMA_CONFIG"


@dataclass
class Config:
    """Configuration for gql-schema."""

    default_url: Optional[str] = None
    headers: list[str] = field(default_factory=list)


def get_default_config_path() -> str:
    """Get default config file path."""
    return utils.expand_path(os.environ.get(CONFIG_ENV_VAR, "~/.gql-schema/config.yaml"))


def load(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Config object with defaults for missing values.
    """
    if config_path is None:
        config_path = get_default_config_path()

    # Return defaults if config doesn't exist
    if not utils.exists(config_path):
        return Config()

    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return Config(
        default_url=data.get("default_url"),
        headers=list(data.get("headers") or []),
    )


def create_example_config(path: Optional[str] = None) -> str:
    """Create an example config file and return its path."""
    if path is None:
        path = get_default_config_path()

    utils.ensure_dir(utils.dirname(path))

    example = {
        "default_url": "https://example.com/graphql",
        "headers": [
            "Authorization: Bearer YOUR_TOKEN",
        ],
    }

    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(example, f, default_flow_style=False, sort_keys=False)

    return path
