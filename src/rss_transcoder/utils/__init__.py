"""Utility functions for RSS Transcoder."""

from .convert import format_rfc2822, to_bool, to_datetime, to_int, to_text

__all__ = [
    "format_rfc2822",
    "to_bool",
    "to_datetime",
    "to_int",
    "to_text",
]
