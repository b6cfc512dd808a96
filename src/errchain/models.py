"""Canonical record of an error-like input."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .log import get_logger
from .stack import format_native_stack

FIELD_NAMES = (
    "message",
    "parent",
    "cause",
    "exit_code",
    "errno",
    "code",
    "level",
    "orphan_stack",
    "stack",
)


def read_field(value: object, name: str) -> object:
    """Read ``name`` off a mapping or an attribute object, None when absent.

    Foreign objects may raise from properties; those are treated as absent.
    """
    if isinstance(value, str):
        return None
    if isinstance(value, Mapping):
        return value.get(name)
    try:
        return getattr(value, name, None)
    except Exception as e:
        get_logger().debug("Ignoring unreadable field %r on %s: %s", name, type(value).__name__, e)
        return None


def _text(value: object) -> str | None:
    return None if value is None else str(value)


@dataclass(frozen=True)
class ErrorRecord:
    """One candidate of the lineage, reduced to the fields construction reads.

    Every field is None when the source value did not carry it.
    """

    message: str | None = None
    parent: object = None
    exit_code: object = None
    errno: object = None
    code: object = None
    level: object = None
    orphan_stack: str | None = None
    stack: str | None = None

    @classmethod
    def from_value(cls, value: object) -> ErrorRecord:
        """Normalize a string, mapping, native exception or ErrorChain."""
        if isinstance(value, str):
            return cls(message=value)

        raw = {name: read_field(value, name) for name in FIELD_NAMES}
        message = _text(raw["message"])
        parent = raw["parent"] or raw["cause"]
        stack = _text(raw["stack"])

        if isinstance(value, BaseException):
            if not message:
                message = str(value) or None
            if not parent:
                parent = value.__cause__
            if stack is None:
                stack = format_native_stack(value)

        return cls(
            message=message,
            parent=parent,
            exit_code=raw["exit_code"],
            errno=raw["errno"],
            code=raw["code"],
            level=raw["level"],
            orphan_stack=_text(raw["orphan_stack"]),
            stack=stack,
        )
