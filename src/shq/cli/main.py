"""Shq CLI Main Entry Point

Build safely quoted shell command lines from templates.

Usage:
    shq render 'cp -r {*files} {dest}' -l files=a,b -s dest='My Files'
    shq render copy                 # named template from shq.yaml
    shq parse 'ls {!flags} {dir}'   # dump parts as JSON
    shq quote "it's" 'a b'          # quote words, one per line
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer

from shq import __version__
from shq.ast.parser import parse
from shq.ast.spec import dumps
from shq.compiler.context import ChainContext, MappingContext
from shq.compiler.expander import expand
from shq.compiler.quoting import quote
from shq.core.config import ShqConfig, find_config_file

from .utils import handle_error, parse_assignments, setup_logging

log = logging.getLogger(__name__)

typer_app = typer.Typer(no_args_is_help=True)


def load_config(file_path: Optional[Path]) -> ShqConfig:
    path = file_path or find_config_file()
    if path is None:
        return ShqConfig()
    return ShqConfig.load(path)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"shq {__version__}")
        raise typer.Exit()


@typer_app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", help="Show info logs."),
    version: bool = typer.Option(
        False,
        "-V",
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Shell command templates with correct POSIX quoting."""
    setup_logging(verbose)


@typer_app.command()
def render(
    template: str = typer.Argument(..., help="Template source or a name from shq.yaml."),
    set_: Optional[List[str]] = typer.Option(
        None, "-s", "--set", help="Scalar value, name=value. Repeatable."
    ),
    list_: Optional[List[str]] = typer.Option(
        None, "-l", "--list", help="List value, name=a,b,c. Repeatable."
    ),
    file_path: Optional[Path] = typer.Option(
        None, "-f", "--file", help="Path to shq.yaml file."
    ),
    style: Optional[str] = typer.Option(
        None, "--style", help="Quoting style: minimal or always."
    ),
) -> None:
    """Expand a template and print the command line."""
    values = parse_assignments(set_)
    values.update(parse_assignments(list_, as_list=True))

    try:
        config = load_config(file_path)
        source = config.get_template(template)
        if source is None:
            source = template
        else:
            log.info("Using template %r from config", template)
        context = ChainContext(MappingContext(values), MappingContext(config.get_vars()))
        result = expand(parse(source), context, style=style or config.style)
    except Exception as exc:
        handle_error(exc)

    typer.echo(result)


@typer_app.command("parse")
def parse_command(
    template: str = typer.Argument(..., help="Template source."),
) -> None:
    """Print the parts of a template as JSON."""
    try:
        parts = parse(template)
    except Exception as exc:
        handle_error(exc)
    typer.echo(dumps(parts).decode())


@typer_app.command("quote")
def quote_command(
    words: List[str] = typer.Argument(..., help="Words to quote."),
) -> None:
    """Quote each word for a POSIX shell, one per line."""
    for word in words:
        typer.echo(quote(word))


def app() -> None:
    """Entry point for the CLI."""
    typer_app()


if __name__ == "__main__":
    app()
