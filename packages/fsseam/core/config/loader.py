"""Configuration loading utilities with JSON and YAML support.

Config files are read through a FileSystemSync so loaders can be tested
against an in-memory filesystem.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from fsseam.core.config.models import AppConfig, LoggingConfig
from fsseam.core.io import FileSystemSync, RealFileSystemSync, absolute_path

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV_VAR = "FSSEAM_LOG_LEVEL"


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("config.json")
        'json'
        >>> detect_format("config.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    elif suffix in [".yaml", ".yml"]:
        return "yaml"
    else:
        raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path, fs: FileSystemSync | None = None) -> dict[str, Any]:
    """Load and return raw configuration dictionary.

    Supports both JSON and YAML formats. Format is auto-detected
    from file extension.

    Args:
        path: Path to config file (.json, .yaml, or .yml)
        fs: Filesystem to read through (defaults to RealFileSystemSync)

    Returns:
        Raw configuration dictionary

    Raises:
        FileNotFoundError: If config file does not exist
        ValueError: If format is not supported or file content is invalid
    """
    fs = fs if fs is not None else RealFileSystemSync()
    fmt = detect_format(path)
    text = fs.read_text(absolute_path(path))

    content: Any
    if fmt == "json":
        try:
            content = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
    else:
        try:
            content = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
        # safe_load returns None for empty files
        if content is None:
            content = {}

    if not isinstance(content, dict):
        raise ValueError(f"Config root must be a mapping in {path}")
    return content


def load_app_config(
    path: str | Path | None = None, fs: FileSystemSync | None = None
) -> AppConfig:
    """Load and validate application configuration.

    A missing default config file yields all defaults; an explicitly given
    path must exist. FSSEAM_LOG_LEVEL overrides logging.level.

    Args:
        path: Path to app config file (.json, .yaml, or .yml)
              Defaults to AppConfig.default_path()
        fs: Filesystem to read through (defaults to RealFileSystemSync)

    Returns:
        Validated AppConfig instance

    Raises:
        FileNotFoundError: If an explicit path does not exist
        ValidationError: If config is invalid
    """
    fs = fs if fs is not None else RealFileSystemSync()

    if path is None:
        default = AppConfig.default_path()
        if fs.exists(absolute_path(default)):
            config = AppConfig.model_validate(load_config(default, fs))
        else:
            logger.debug(f"No config at {default}, using defaults")
            config = AppConfig()
    else:
        config = AppConfig.model_validate(load_config(path, fs))

    level = os.getenv(LOG_LEVEL_ENV_VAR)
    if level:
        logging_config = LoggingConfig.model_validate(
            {**config.logging.model_dump(), "level": level.upper()}
        )
        config = config.model_copy(update={"logging": logging_config})

    return config
