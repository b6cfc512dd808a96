"""Coercion of loosely typed metadata fields."""

from __future__ import annotations

import math
import numbers

_PREFIXED = ("0x", "0o", "0b")


def _parse_text(text: str) -> int | float | None:
    text = text.strip()
    if not text or "_" in text:
        return None
    try:
        return int(text, 0) if text[:2].lower() in _PREFIXED else int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return None
    return None if math.isnan(number) else number


def _from_number(value: numbers.Number) -> int | float | None:
    # Decimal, Fraction and other numeric types; complex numbers have no float form.
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError):
        return None
    if math.isnan(number):
        return None
    return int(value) if number.is_integer() else number  # type: ignore[call-overload]


def to_number(value: object) -> int | float | None:
    """Convert a field value to a number, or None when it isn't one.

    Empty and whitespace-only strings are absent rather than zero.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return None if math.isnan(value) else value
    if isinstance(value, numbers.Number):
        return _from_number(value)
    if isinstance(value, bytes):
        return _parse_text(value.decode(errors="replace"))
    if isinstance(value, str):
        return _parse_text(value)
    return None


def to_code(value: object) -> int | float | str | None:
    """Coerce a ``code`` or ``level`` value: numbers where possible, else text."""
    if value is None or isinstance(value, str) and value == "":
        return None
    number = to_number(value)
    if number is not None:
        return number
    return str(value)
