"""
Input validation utilities for the Bookmark Converter.

This module provides validation functions for command-line arguments.
"""

import os
from pathlib import Path
from typing import Optional, Union

from bookmark_converter.core.bookmarks_io import STDOUT
from bookmark_converter.utils.error_handler import ValidationError


def validate_input_file(file_path: Union[str, Path]) -> Path:
    """
    Validate that input file exists and is readable.

    Args:
        file_path: Path to the bookmarks file

    Returns:
        Validated Path object

    Raises:
        ValidationError: If file doesn't exist or isn't readable
    """
    path = Path(file_path).expanduser()

    if not path.exists():
        raise ValidationError(f"Input file does not exist: {file_path}")

    if not path.is_file():
        raise ValidationError(f"Input path is not a file: {file_path}")

    if not os.access(path, os.R_OK):
        raise ValidationError(f"Input file is not readable: {file_path}")

    return path.absolute()


def validate_output_file(file_path: Union[str, Path]) -> Union[str, Path]:
    """
    Validate that output file path is writable.

    Args:
        file_path: Path to the output file, or STDOUT

    Returns:
        STDOUT unchanged, otherwise the validated Path object

    Raises:
        ValidationError: If path isn't writable or parent doesn't exist
    """
    if str(file_path) == STDOUT:
        return STDOUT

    path = Path(file_path).expanduser()

    parent = path.parent
    if not parent.is_dir():
        raise ValidationError(f"Output directory does not exist: {parent}")

    if not os.access(parent, os.W_OK):
        raise ValidationError(f"Output directory is not writable: {parent}")

    if path.is_dir():
        raise ValidationError(f"Output path is a directory: {file_path}")

    if path.exists() and not os.access(path, os.W_OK):
        raise ValidationError(f"Output file exists and is not writable: {file_path}")

    return path.absolute()


def validate_config_file(file_path: Union[str, Path, None]) -> Optional[Path]:
    """
    Validate configuration file if provided.

    Args:
        file_path: Path to the config file or None

    Returns:
        Validated Path object or None

    Raises:
        ValidationError: If file doesn't exist or isn't readable
    """
    if file_path is None:
        return None

    path = Path(file_path).expanduser()

    if not path.exists():
        raise ValidationError(f"Configuration file does not exist: {file_path}")

    if not path.is_file():
        raise ValidationError(f"Configuration path is not a file: {file_path}")

    if not os.access(path, os.R_OK):
        raise ValidationError(f"Configuration file is not readable: {file_path}")

    if path.suffix.lower() not in [".toml", ".json"]:
        raise ValidationError(
            f"Configuration file must be .toml or .json file, got: {path.suffix}"
        )

    return path.absolute()


def validate_title(title: Optional[str]) -> Optional[str]:
    """Reject a blank document title."""
    if title is not None and not title.strip():
        raise ValidationError("HTML title cannot be blank")

    return title
