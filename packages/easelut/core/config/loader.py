"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from easelut.core.config.models import EaseConfig
from easelut.core.utils.json import read_json

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "EASELUT_CONFIG"


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("ease.json")
        'json'
        >>> detect_format("ease.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    elif suffix in [".yaml", ".yml"]:
        return "yaml"
    else:
        raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load and return raw configuration dictionary.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Raw configuration dictionary

    Raises:
        FileNotFoundError: If config file does not exist
        ValueError: If format is not supported or file content is invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)

    if fmt == "json":
        try:
            return read_json(path)
        except ValueError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
    else:
        try:
            with path.open("r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
        # safe_load returns None for empty files
        if content is None:
            return {}
        if not isinstance(content, dict):
            raise ValueError(f"Config root in {path} must be a mapping")
        return content


def load_ease_config(path: str | Path | None = None) -> EaseConfig:
    """Load and validate evaluator configuration.

    Falls back to the EASELUT_CONFIG environment variable when no path is
    given, and to the defaults when neither is set.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Validated EaseConfig instance

    Raises:
        ValidationError: If config is invalid
        FileNotFoundError: If the given file does not exist
    """
    if path is None:
        path = os.getenv(CONFIG_ENV_VAR) or None

    if path is None:
        return EaseConfig()

    raw_config = load_config(path)
    config = EaseConfig.model_validate(raw_config)
    logger.debug("Loaded ease config from %s: %s", path, config)
    return config
