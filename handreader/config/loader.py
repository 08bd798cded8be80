"""
Configuration loader for the command-line tool with validation
"""
import os
import logging
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("json", "jsonl")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_CONFIG: Dict[str, Any] = {
    "output": "output.json",
    "format": "json",
    "indent": None,
    "workers": 1,
    "encoding": "utf-8",
    "log_level": "INFO",
}


class ConfigError(ValueError):
    """Configuration file is unreadable or has invalid values."""


def _validate(cfg: Dict[str, Any], source: str) -> Dict[str, Any]:
    unknown = sorted(set(cfg) - set(DEFAULT_CONFIG))
    if unknown:
        raise ConfigError(f"{source}: unknown keys {', '.join(unknown)}")

    if cfg["format"] not in OUTPUT_FORMATS:
        raise ConfigError(f"{source}: format must be one of {OUTPUT_FORMATS}, got {cfg['format']!r}")

    workers = cfg["workers"]
    if isinstance(workers, bool) or not isinstance(workers, int) or workers < 1:
        raise ConfigError(f"{source}: workers must be a positive integer, got {workers!r}")

    indent = cfg["indent"]
    if indent is not None and (isinstance(indent, bool) or not isinstance(indent, int) or indent < 0):
        raise ConfigError(f"{source}: indent must be null or a non-negative integer, got {indent!r}")

    level = str(cfg["log_level"]).upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"{source}: log_level must be one of {LOG_LEVELS}, got {cfg['log_level']!r}")
    cfg["log_level"] = level

    for key in ("output", "encoding"):
        if not isinstance(cfg[key], str) or not cfg[key]:
            raise ConfigError(f"{source}: {key} must be a non-empty string")

    return cfg


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from an optional YAML file on top of the defaults

    Args:
        path: Path to a YAML configuration file, or None for defaults only

    Returns:
        Validated configuration dictionary

    Raises:
        ConfigError: if the file is missing, malformed or has invalid values
    """
    cfg = dict(DEFAULT_CONFIG)
    if path is None:
        return cfg

    if not os.path.exists(path):
        raise ConfigError(f"config file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            loaded = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"{path}: invalid YAML: {e}") from e

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise ConfigError(f"{path}: top level must be a mapping")

    cfg.update(loaded)
    cfg = _validate(cfg, path)
    logger.debug(f"Loaded config from {path}: {cfg}")
    return cfg
