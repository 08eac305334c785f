"""
Configuration loader — iconsmith.yml to IconsmithConfig.

A project does not need a config file: with none found (and none named
on the command line) every setting takes its default, rooted at the
working directory.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from iconsmith.core.models.config import IconsmithConfig

logger = logging.getLogger(__name__)

PROJECT_CONFIG_FILE = "iconsmith.yml"
CONFIG_FILE_NAMES = (PROJECT_CONFIG_FILE, "iconsmith.yaml")

# How far up from the start directory to look
_MAX_PARENTS = 20


class ConfigError(Exception):
    """The config file is missing, unreadable, or does not validate."""


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Nearest iconsmith.yml (or .yaml) at or above ``start_dir`` (default: cwd)."""
    start = (start_dir or Path.cwd()).resolve()

    for directory in [start, *start.parents][:_MAX_PARENTS]:
        for name in CONFIG_FILE_NAMES:
            candidate = directory / name
            if candidate.is_file():
                return candidate
    return None


def _read_mapping(path: Path) -> dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")
    return data


def load_config(path: Path | None = None) -> IconsmithConfig:
    """Load and validate the project configuration.

    Args:
        path: Explicit config file. When None, the nearest one is used,
            and defaults apply if there is none.

    Raises:
        ConfigError: an explicit file does not exist, or a file cannot
            be read, parsed or validated.
    """
    if path is None:
        path = find_config_file()
        if path is None:
            logger.debug("No %s found; using defaults", PROJECT_CONFIG_FILE)
            return IconsmithConfig()
    elif not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading config from %s", path)
    data = _read_mapping(path)

    try:
        config = IconsmithConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e

    logger.info("Loaded config '%s' from %s", config.name, path)
    return config


def project_root(config_path: Path | None) -> Path:
    """Directory the configured paths are relative to."""
    if config_path is None:
        return Path.cwd().resolve()
    return config_path.resolve().parent
