"""Shared utilities for CLI commands"""

from __future__ import annotations

import logging
import os
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from shq.exceptions import ShqError

console = Console(stderr=True)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the shq CLI.

    Log levels:
    - Normal: Only warnings/errors shown
    - Verbose (--verbose): INFO level
    - Debug (SHQ_DEBUG=1): DEBUG level - parse/expand sizes, config loading
    """
    debug = bool(os.environ.get("SHQ_DEBUG"))
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console,
        show_time=verbose,
        show_path=debug,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("shq")
    logger.setLevel(level)
    logger.handlers = [handler]
    logger.propagate = False


def exit_with_error(message: str, exit_code: int = 1) -> NoReturn:
    """Exit the program with an error message."""
    typer.secho(f"Error: {message}", err=True, fg=typer.colors.RED)
    raise typer.Exit(code=exit_code)


def handle_error(error: Exception) -> NoReturn:
    """Report errors and exit; anything outside the library is unexpected."""
    if isinstance(error, (ShqError, ValueError)):
        exit_with_error(str(error))
    exit_with_error(f"Unexpected error: {error}")


def parse_assignments(items: Optional[list[str]], as_list: bool = False) -> dict:
    """Parse ``name=value`` options; list values are comma separated."""
    values: dict = {}
    for item in items or []:
        name, sep, value = item.partition("=")
        if not sep or not name:
            exit_with_error(f"Expected name=value, got {item!r}")
        if as_list:
            values[name] = [v for v in value.split(",")] if value else []
        else:
            values[name] = value
    return values
