#!/usr/bin/env python3
"""
config.py
-------------------
Configuration loading for the today application.

The config file is optional and lives in the application directory as
config.yaml, config.yml or config.json (first found wins). All three are
read with PyYAML; a JSON object is valid YAML.

Recognized keys:
    entries_dir: Directory holding the dated entries (default: APP_DIR/entries)
    bankruptcy_level: Default pruning level when forwarding (default: none)

Example config.yaml:
    entries_dir: ~/notes/today
    bankruptcy_level: 2
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional

# --- Third party imports ---
import yaml

# --- Local imports ---
from today.core.exceptions import ConfigError, ValidationError
from today.core.logging_manager import TodayLogger, safe_logger
from today.core.paths import (
    default_entries_dir,
    default_log_dir,
    find_config_path,
    get_app_dir,
)
from today.core.validators import DataValidator

KNOWN_KEYS = {"entries_dir", "bankruptcy_level"}


@dataclass(frozen=True)
class TodayConfig:
    """
    Resolved application settings.

    Attributes:
        app_dir: Application directory
        entries_dir: Fully resolved entries directory
        log_dir: Directory for operation logs
        bankruptcy_level: Default pruning level, None for no pruning
        config_path: Config file the settings came from, if any
    """

    app_dir: Path
    entries_dir: Path
    log_dir: Path
    bankruptcy_level: Optional[int] = None
    config_path: Optional[Path] = None

    @classmethod
    def defaults(cls, app_dir: Path) -> "TodayConfig":
        return cls(
            app_dir=app_dir,
            entries_dir=default_entries_dir(app_dir),
            log_dir=default_log_dir(app_dir),
        )

    def with_bankruptcy_level(self, level: Optional[int]) -> "TodayConfig":
        """Return a copy with the pruning level overridden (None keeps the current one)."""
        if level is None:
            return self
        return replace(self, bankruptcy_level=DataValidator.normalize_bankruptcy_level(level))


def _read_config_file(config_path: Path) -> Dict[str, Any]:
    """
    Parse the config file into a mapping.

    Raises:
        ConfigError: If the file cannot be read, parsed, or is not a mapping
    """
    try:
        text = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read config file {config_path}: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Cannot parse config file {config_path}: {e}") from e

    # An empty file means "all defaults"
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Config file {config_path} must contain a mapping, "
            f"got {type(data).__name__}"
        )
    return data


def load_config(
    app_dir: Optional[Path] = None,
    logger: Optional[TodayLogger] = None,
) -> TodayConfig:
    """
    Load settings from the application directory.

    Args:
        app_dir: Application directory (default: resolved from $TODAY_DIR)
        logger: Optional logger; unknown keys are reported as warnings

    Returns:
        TodayConfig with defaults filled in for anything not configured

    Raises:
        ConfigError: If a config file exists but is unusable
    """
    app_dir = app_dir if app_dir is not None else get_app_dir()
    config = TodayConfig.defaults(app_dir)

    config_path = find_config_path(app_dir)
    if config_path is None:
        return config

    data = _read_config_file(config_path)

    unknown = sorted(str(key) for key in data if key not in KNOWN_KEYS)
    if unknown:
        safe_logger(logger).log_warning(
            "Ignoring unknown config keys", {"path": config_path, "keys": unknown}
        )

    try:
        entries_dir = config.entries_dir
        if data.get("entries_dir") is not None:
            entries_dir = DataValidator.normalize_path(data["entries_dir"], app_dir)
        bankruptcy_level = DataValidator.normalize_bankruptcy_level(
            data.get("bankruptcy_level")
        )
    except ValidationError as e:
        raise ConfigError(f"Invalid value in {config_path}: {e}") from e

    return replace(
        config,
        entries_dir=entries_dir,
        bankruptcy_level=bankruptcy_level,
        config_path=config_path,
    )

