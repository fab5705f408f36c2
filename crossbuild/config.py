"""
Configuration management for crossbuild.

Settings come from CROSSBUILD_* environment variables, optionally layered
over a crossbuild.yaml file. Environment variables take precedence.
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic_settings import BaseSettings

from crossbuild.profiles.relative_path import RelativePath

DEFAULT_CONFIG_FILE = "crossbuild.yaml"
ENV_PREFIX = "CROSSBUILD_"


class Settings(BaseSettings):
    """Application settings."""

    # Root variable that installed profile paths are recorded relative to
    root_name: str = "CROSSBUILD_ROOT"
    root_dir: str = ""

    # Profiles are installed here, relative to the root
    profiles_dir: str = ".profiles"

    log_level: str = "INFO"

    model_config = {"env_prefix": ENV_PREFIX}

    def resolved_root_dir(self) -> str:
        """Return the value of the root variable.

        Uses root_dir if set, otherwise the root variable from the
        environment, otherwise the current directory.
        """
        if self.root_dir:
            return self.root_dir
        return os.environ.get(self.root_name) or os.getcwd()

    def root(self) -> RelativePath:
        """Return the root as a RelativePath with no relative component."""
        return RelativePath(self.root_name, self.resolved_root_dir())

    def profiles_root(self) -> RelativePath:
        """Return the directory profiles are installed under."""
        return self.root().join(self.profiles_dir)


def load_config(config_path: Path) -> dict[str, Any]:
    """
    Load configuration values from a YAML file.

    Returns:
        Configuration dictionary (empty if the file does not exist)

    Raises:
        ValueError: If the file does not contain a mapping
    """
    if not config_path.exists():
        return {}

    with open(config_path) as f:
        config = yaml.safe_load(f) or {}

    if not isinstance(config, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")

    return config


def get_settings(config_path: Path | None = None) -> Settings:
    """
    Get application settings.

    Args:
        config_path: YAML file to read (default: ./crossbuild.yaml)

    Returns:
        Settings with file values applied where no environment variable
        overrides them
    """
    config = load_config(config_path or Path(DEFAULT_CONFIG_FILE))

    overrides = {
        key: value
        for key, value in config.items()
        if key in Settings.model_fields and f"{ENV_PREFIX}{key.upper()}" not in os.environ
    }
    return Settings(**overrides)
