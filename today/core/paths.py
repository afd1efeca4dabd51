#!/usr/bin/env python3
"""
paths.py
-------------------
Path resolution for the today application.

All state lives under a single application directory:

    APP_DIR/                 # $TODAY_DIR, or ~/.today
    ├── config.yaml          # optional (config.yml / config.json also read)
    ├── entries/             # default entries directory
    │   └── <YYYY-MM-DD>.md
    └── logs/                # operation and error logs

Unlike a project checkout, the application directory depends on the
environment at call time, so paths are exposed as functions rather than
import-time constants.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
from pathlib import Path
from typing import List, Optional

# ----- Constants -----
ENV_APP_DIR = "TODAY_DIR"
DEFAULT_APP_DIRNAME = ".today"
CONFIG_FILENAMES = ("config.yaml", "config.yml", "config.json")
ENTRIES_DIRNAME = "entries"
LOGS_DIRNAME = "logs"


def get_app_dir() -> Path:
    """
    Determine the application directory.

    Returns:
        $TODAY_DIR when set to a non-empty value, otherwise ~/.today
    """
    app_dir = os.environ.get(ENV_APP_DIR, "")
    if app_dir:
        return Path(app_dir)
    return Path.home() / DEFAULT_APP_DIRNAME


def config_candidates(app_dir: Path) -> List[Path]:
    """Config file locations inside app_dir, in lookup order."""
    return [app_dir / name for name in CONFIG_FILENAMES]


def find_config_path(app_dir: Path) -> Optional[Path]:
    """Return the first existing config file in app_dir, or None."""
    for candidate in config_candidates(app_dir):
        if candidate.is_file():
            return candidate
    return None


def default_entries_dir(app_dir: Path) -> Path:
    return app_dir / ENTRIES_DIRNAME


def default_log_dir(app_dir: Path) -> Path:
    return app_dir / LOGS_DIRNAME

