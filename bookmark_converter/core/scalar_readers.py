"""
Typed field readers for loosely-typed bookmark JSON objects.

Each reader either returns a value of the expected type or raises a
FieldError naming the field.
"""

import re
from datetime import datetime
from typing import Any, Dict

from bookmark_converter.core.timestamps import decode_timestamp
from bookmark_converter.utils.error_handler import (
    KeyNotFoundError,
    NotAnIntegerError,
    TimestampRangeError,
    WrongTypeError,
)

_DECIMAL_PATTERN = re.compile(r"[+-]?[0-9]+")


def read_string(key: str, data: Dict[str, Any]) -> str:
    """
    Read a string field.

    Raises:
        KeyNotFoundError: If the field is absent
        WrongTypeError: If the field is not a string
    """
    if key not in data:
        raise KeyNotFoundError(key)

    value = data[key]
    if not isinstance(value, str):
        raise WrongTypeError(key)

    return value


def read_integer(key: str, data: Dict[str, Any], bit_size: int = 64) -> int:
    """
    Read a decimal integer stored as a string.

    Args:
        key: Field name
        data: Node mapping
        bit_size: Width of the signed integer the value must fit

    Raises:
        NotAnIntegerError: If the string is not a base-10 integer in range
    """
    text = read_string(key, data)

    if not _DECIMAL_PATTERN.fullmatch(text):
        raise NotAnIntegerError(key, text)

    value = int(text)
    limit = 1 << (bit_size - 1)
    if not -limit <= value < limit:
        raise NotAnIntegerError(key, text)

    return value


def read_timestamp(key: str, data: Dict[str, Any]) -> datetime:
    """Read a Chromium timestamp field as an aware UTC datetime."""
    value = read_integer(key, data, 64)

    try:
        return decode_timestamp(value)
    except OverflowError as e:
        raise TimestampRangeError(key, data[key]) from e
