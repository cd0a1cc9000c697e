"""Conversions between feed text and Python values."""

from datetime import datetime, timezone
from email.utils import format_datetime, parsedate_to_datetime
from typing import Any, Optional

from ..errors import ConversionError


def to_datetime(field: str, value: Any) -> Optional[datetime]:
    """
    Convert an RFC-2822 date string to a timezone-aware datetime.

    Args:
        field: Name of the field being converted (for error context)
        value: Date text, a datetime, or None

    Returns:
        Aware datetime, or None when value is None

    Raises:
        ConversionError: If the text is not a valid RFC-2822 date
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = parsedate_to_datetime(value.strip())
        except (TypeError, ValueError, IndexError):
            raise ConversionError(field, value, "datetime")
        if parsed is None:
            raise ConversionError(field, value, "datetime")
    else:
        raise ConversionError(field, value, "datetime")

    # "-0000" and naive inputs carry no offset; treat them as UTC
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)

    return parsed


def format_rfc2822(value: datetime) -> str:
    """Render a datetime as RFC-2822 text, e.g. ``Sun, 13 Mar 2016 20:02:02 -0700``."""
    return format_datetime(value)


def to_int(field: str, value: Any, non_negative: bool = False) -> Optional[int]:
    """
    Convert an integer or its decimal text to int.

    Args:
        field: Name of the field being converted
        value: int, decimal string, or None
        non_negative: Reject values below zero

    Returns:
        The integer, or None when value is None

    Raises:
        ConversionError: If the value is not an integer (or is negative when
            non_negative is set)
    """
    if value is None:
        return None

    if isinstance(value, bool):
        raise ConversionError(field, value, "integer")

    if isinstance(value, int):
        result = value
    elif isinstance(value, str):
        try:
            result = int(value.strip(), 10)
        except ValueError:
            raise ConversionError(field, value, "integer")
    else:
        raise ConversionError(field, value, "integer")

    if non_negative and result < 0:
        raise ConversionError(field, value, "non-negative integer")

    return result


def to_bool(field: str, value: Any) -> Optional[bool]:
    """Convert a bool or the text ``true``/``false`` to bool."""
    if value is None or isinstance(value, bool):
        return value

    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized == "true":
            return True
        if normalized == "false":
            return False

    raise ConversionError(field, value, "boolean")


def to_text(field: str, value: Any) -> Optional[str]:
    """Accept a string (or None) unchanged."""
    if value is None or isinstance(value, str):
        return value
    raise ConversionError(field, value, "string")
