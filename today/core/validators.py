#!/usr/bin/env python3
"""
validators.py
--------------------
Validation and normalization for config and CLI values.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from .exceptions import ValidationError


class DataValidator:
    """Centralized validation for user-supplied settings."""

    @staticmethod
    def normalize_bankruptcy_level(value: Any) -> Optional[int]:
        """
        Normalize a bankruptcy level.

        Args:
            value: None, an int, or a string holding an int

        Returns:
            Non-negative integer level, or None when no pruning is wanted

        Raises:
            ValidationError: If the value is not a non-negative integer
        """
        if value is None:
            return None
        # bool is an int subclass; `bankruptcy_level: true` is a mistake
        if isinstance(value, bool):
            raise ValidationError(f"bankruptcy_level must be an integer, got {value!r}")
        if isinstance(value, str):
            try:
                value = int(value.strip())
            except ValueError as e:
                raise ValidationError(
                    f"bankruptcy_level must be an integer, got {value!r}"
                ) from e
        if not isinstance(value, int):
            raise ValidationError(
                f"bankruptcy_level must be an integer, got {type(value).__name__}"
            )
        if value < 0:
            raise ValidationError(f"bankruptcy_level must be non-negative, got {value}")
        return value

    @staticmethod
    def normalize_path(value: Any, base_dir: Path) -> Path:
        """
        Normalize a configured directory.

        Expands a leading '~' and resolves relative paths against base_dir.

        Raises:
            ValidationError: If the value is not a non-empty string
        """
        if not isinstance(value, (str, Path)) or not str(value).strip():
            raise ValidationError(f"Expected a non-empty path, got {value!r}")
        path = Path(str(value).strip()).expanduser()
        if not path.is_absolute():
            path = base_dir / path
        return path
