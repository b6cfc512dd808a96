"""Configuration dataclass with CLI defaults."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Config:
    """Frozen configuration for one command line invocation."""

    messages: tuple[str, ...] = ()  # root cause first, outermost last
    code: str = ""
    level: str = ""
    exit_code: str = ""  # kept as text; coerced like any other input field
    orphan: bool = False  # print only the outermost orphan stack
    verbose: bool = False

    def root_input(self) -> dict:
        """Input record for the root cause, carrying the requested metadata."""
        record: dict = {"message": self.messages[0] if self.messages else ""}
        if self.code:
            record["code"] = self.code
        if self.level:
            record["level"] = self.level
        if self.exit_code:
            record["exit_code"] = self.exit_code
        return record
