"""Exception hierarchy with exit codes."""


class ErrchainError(Exception):
    """Base exception for errchain."""

    exit_code: int = 1

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidInputError(ErrchainError, ValueError):
    """An ErrorChain was requested without a description."""

    exit_code = 2
