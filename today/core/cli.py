#!/usr/bin/env python3
"""
cli.py
------
Shared CLI helpers for today commands.

Functions:
    setup_logger: Initialize TodayLogger for CLI operations

Usage:
    from today.core.cli import setup_logger

    logger = setup_logger(log_dir, "today", verbose=True)
    logger.log_info("Forwarding previous entry")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import logging
from pathlib import Path

# --- Local imports ---
from today.core.logging_manager import TodayLogger


def setup_logger(log_dir: Path, component_name: str, verbose: bool = False) -> TodayLogger:
    """
    Setup logging for CLI operations.

    Args:
        log_dir: Log directory (typically {app_dir}/logs)
        component_name: Component identifier for logging
        verbose: Echo informational messages to stderr, not only warnings

    Returns:
        Configured TodayLogger instance
    """
    log_dir.mkdir(parents=True, exist_ok=True)
    console_level = logging.DEBUG if verbose else logging.WARNING
    return TodayLogger(log_dir, component_name=component_name, console_level=console_level)
