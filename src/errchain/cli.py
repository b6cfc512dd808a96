"""CLI entry point using Click."""

from __future__ import annotations

import sys

import click

from .config import Config
from .errors import ErrchainError
from .log import setup_logging
from .render import build_chain, exit_status, render_chain


@click.command()
@click.argument("messages", nargs=-1, required=True)
@click.option("--code", default="", help="Code of the root cause (numeric or symbolic).")
@click.option("--level", default="", help="Severity level of the root cause.")
@click.option("--exit-code", default="", help="Exit code of the root cause.")
@click.option("--orphan", is_flag=True, default=False,
    help="Print only the outermost error's own stack, without ancestry.")
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging.")
def main(
    messages: tuple[str, ...],
    code: str,
    level: str,
    exit_code: str,
    orphan: bool,
    verbose: bool,
) -> None:
    """Wrap MESSAGES into an error chain and print its stack.

    Messages are given root cause first; each one wraps the one before it.
    The process exits with the exit code the outermost error inherited.
    """
    setup_logging(verbose)

    config = Config(
        messages=messages,
        code=code,
        level=level,
        exit_code=exit_code,
        orphan=orphan,
        verbose=verbose,
    )

    try:
        chain = build_chain(config)
    except ErrchainError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(e.exit_code)
    except Exception as e:
        click.echo(f"Unexpected error: {e}", err=True)
        sys.exit(5)

    click.echo(render_chain(chain, orphan=config.orphan))
    sys.exit(exit_status(chain))


if __name__ == "__main__":
    main()
