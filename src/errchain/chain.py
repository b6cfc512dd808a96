"""ErrorChain: an exception that carries its causal ancestry.

Wrapping a lower-level error keeps its stack and metadata::

    try:
        read_config(path)
    except OSError as e:
        raise ErrorChain("could not load configuration", e)

The wrapper's ``stack`` holds its own trace followed by every ancestor's,
separated by ``STACK_SEPARATOR``; ``exit_code``, ``code`` and ``level`` are
inherited from the nearest error in the lineage that carries them.
"""

from __future__ import annotations

from typing import Iterable, Union

from .coerce import to_code, to_number
from .errors import InvalidInputError
from .log import get_logger
from .models import ErrorRecord
from .stack import join_stack, prepend_code

# Compared by value so a second copy of this module still recognizes the type.
CHAIN_MARKER = "errchain.chain.ErrorChain"

ErrorValue = Union["ErrorChain", BaseException]


def _resolve_exit_code(records: Iterable[ErrorRecord]) -> int | float | None:
    # Outer loop over the lineage, inner over field names; the first field a
    # candidate carries decides for that candidate.
    for record in records:
        for value in (record.exit_code, record.errno, record.code):
            if value is None:
                continue
            number = to_number(value)
            if number is not None:
                return number
            break
    return None


def _resolve_code(records: Iterable[ErrorRecord], name: str) -> int | float | str:
    for record in records:
        code = to_code(getattr(record, name))
        if code is not None:
            return code
    return ""


def _segment(record: ErrorRecord, fallback: object) -> str:
    text = record.orphan_stack or record.stack or record.message or str(fallback)
    return prepend_code(record.code, text)


class ErrorChain(Exception):
    """An error that envelops its parent to keep ancestry stack information.

    Args:
        value: Description of the error. A string, a mapping or object with
            any of ``message``, ``code``, ``level``, ``exit_code``, ``errno``,
            ``parent``, ``cause``, ``orphan_stack`` and ``stack``, a native
            exception, or another ErrorChain.
        parent: The cause. Takes precedence over ``parent`` and ``cause``
            carried by ``value``; anything that isn't already an exception is
            wrapped into an ErrorChain first.

    Raises:
        InvalidInputError: ``value`` is empty.

    Subclasses may set class-level ``exit_code``, ``code`` and ``level``
    defaults; metadata carried by ``value`` still wins over them.
    """

    __errchain_marker__ = CHAIN_MARKER

    exit_code: int | float | None = None
    code: int | float | str = ""
    level: int | float | str = ""

    message: str
    parent: ErrorValue | None
    ancestors: list[ErrorValue]
    orphan_stack: str
    stack: str

    def __init__(self, value: object, parent: object = None) -> None:
        if not value:
            raise InvalidInputError("Attempted to create an ErrorChain without an input")

        source = ErrorRecord.from_value(value)
        message = source.message or str(value) or repr(value)
        super().__init__(message)
        self.message = message

        self.parent = None
        self.ancestors = []
        if not parent:
            parent = source.parent
        if parent:
            if ErrorChain.is_error(parent):
                self.parent = parent
            else:
                get_logger().debug("Wrapping %s parent of %r", type(parent).__name__, message)
                self.parent = ErrorChain(parent)

        if self.parent is not None:
            self.ancestors.append(self.parent)
            if ErrorChain.is_error_chain(self.parent):
                self.ancestors.extend(self.parent.ancestors)
            if isinstance(self.parent, BaseException):
                self.__cause__ = self.parent

        own = ErrorRecord.from_value(self)
        lineage = [ErrorRecord.from_value(ancestor) for ancestor in self.ancestors]
        records = [source, own, *lineage]

        self.exit_code = _resolve_exit_code(records)
        self.code = _resolve_code(records, "code")
        self.level = _resolve_code(records, "level")

        self.orphan_stack = prepend_code(
            self.code,
            source.orphan_stack or source.stack or own.stack or message or "",
        )
        self.stack = join_stack([
            self.orphan_stack,
            *(_segment(record, ancestor) for record, ancestor in zip(lineage, self.ancestors)),
        ])

    @classmethod
    def is_error_chain(cls, value: object) -> bool:
        """Whether ``value`` is an ErrorChain, even one from another copy of this module."""
        if isinstance(value, cls):
            return True
        # The marker is a class attribute; classes themselves are not instances.
        if isinstance(value, type):
            return False
        try:
            return getattr(value, "__errchain_marker__", None) == CHAIN_MARKER
        except Exception:
            return False

    @classmethod
    def is_error(cls, value: object) -> bool:
        """Whether ``value`` is a native exception or an ErrorChain."""
        return isinstance(value, BaseException) or ErrorChain.is_error_chain(value)

    @classmethod
    def ensure(cls, value: object) -> ErrorChain:
        """Return ``value`` itself if it is already an ErrorChain, else wrap it."""
        if cls.is_error_chain(value):
            return value  # type: ignore[return-value]
        return cls.create(value)

    @classmethod
    def create(cls, value: object, parent: object = None) -> ErrorChain:
        """Factory form of ``cls(value, parent)``."""
        return cls(value, parent)


create = ErrorChain.create
ensure = ErrorChain.ensure
is_error_chain = ErrorChain.is_error_chain
is_error_value = ErrorChain.is_error
