"""Stack text helpers: native tracebacks, code tags and segment joining."""

from __future__ import annotations

import traceback
from typing import Iterable

STACK_SEPARATOR = "\n↳ "


def format_native_stack(exc: BaseException) -> str:
    """Traceback text for ``exc`` alone, without its chained causes.

    An exception that was never raised has no frames, so only its
    ``Type: message`` line is returned.
    """
    if exc.__traceback__ is None:
        lines = traceback.format_exception_only(type(exc), exc)
    else:
        lines = traceback.format_exception(type(exc), exc, exc.__traceback__, chain=False)
    return "".join(lines).rstrip("\n")


def prepend_code(code: object, text: str) -> str:
    """Tag ``text`` with ``[code]: `` unless the code is empty, numeric or already present."""
    if code and isinstance(code, str) and code not in text:
        return f"[{code}]: {text}"
    return text


def join_stack(entries: Iterable[str]) -> str:
    """Join stack segments, dropping empty ones."""
    return STACK_SEPARATOR.join(entry for entry in entries if entry)


def split_stack(text: str) -> list[str]:
    """Recover the individual segments of a composed stack."""
    if not text:
        return []
    return text.split(STACK_SEPARATOR)
