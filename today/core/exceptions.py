#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the today application.

Exception Hierarchy:
    Exception (built-in)
    └── TodayError - Base for all application errors
        ├── ConfigError - Config file unreadable or malformed
        ├── ValidationError - Invalid option or config values
        └── EntryIOError - Filesystem failure on an entry or directory

Malformed date headings and unterminated code fences are not errors:
forwarding proceeds and the content is passed through.

Usage:
    from today.core.exceptions import EntryIOError, TodayError

    try:
        create_or_forward(entries_dir, date.today())
    except EntryIOError as e:
        print(f"Failed on {e.path}: {e}")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Optional


class TodayError(Exception):
    """
    Base exception for the today application.

    Catch this to handle any failure raised deliberately by the
    application; the CLI reports these as one-line errors.
    """

    pass


class ConfigError(TodayError):
    """
    Exception for configuration failures.

    Raised when the config file exists but cannot be used:
    - Unreadable file (permissions, encoding)
    - Invalid YAML/JSON syntax
    - Top-level value that is not a mapping
    - A key with the wrong type

    A missing config file is not an error; defaults are used.

    Examples:
        >>> raise ConfigError("Cannot parse config file: ~/.today/config.json")
        >>> raise ConfigError("entries_dir must be a string, got int")
    """

    pass


class ValidationError(TodayError):
    """
    Exception for invalid values.

    Examples:
        >>> raise ValidationError("bankruptcy_level must be non-negative, got -1")
    """

    pass


class EntryIOError(TodayError):
    """
    Exception for filesystem failures while listing, reading or writing entries.

    Wraps the underlying OSError (available as __cause__) and records the
    path involved. Never retried.

    Attributes:
        path: File or directory the operation failed on

    Examples:
        >>> raise EntryIOError("reading entry", Path("entries/2024-01-01.md"))
    """

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        self.path = path
        if path is not None:
            message = f"{message} ({path})"
        super().__init__(message)
