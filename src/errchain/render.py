"""Build a chain from command line configuration and render it."""

from __future__ import annotations

from .chain import ErrorChain
from .config import Config
from .errors import InvalidInputError
from .log import get_logger


def build_chain(config: Config) -> ErrorChain:
    """Wrap each message around the previous one. Returns the outermost error."""
    logger = get_logger()
    if not config.messages or not all(config.messages):
        raise InvalidInputError("Every error in the chain needs a non-empty message")

    chain = ErrorChain.create(config.root_input())
    for message in config.messages[1:]:
        chain = ErrorChain.create(message, chain)
    logger.debug(
        "Built chain of %d error(s): exit_code=%r code=%r level=%r",
        len(chain.ancestors) + 1, chain.exit_code, chain.code, chain.level,
    )
    return chain


def render_chain(chain: ErrorChain, orphan: bool = False) -> str:
    """Text to print for ``chain``: its full stack, or its orphan stack alone."""
    return chain.orphan_stack if orphan else chain.stack


def exit_status(chain: ErrorChain) -> int:
    """Process exit status for ``chain``; 0 when no exit code was inherited."""
    if chain.exit_code is None:
        return 0
    try:
        return int(chain.exit_code)
    except (OverflowError, ValueError):
        return 1
