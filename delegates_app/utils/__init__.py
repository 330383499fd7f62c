"""Shared helpers for console output."""
from .formatting import format_optional_digits, format_price

__all__ = ["format_optional_digits", "format_price"]
