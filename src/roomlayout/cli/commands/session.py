"""Shared helpers for commands that edit a layout file.

Every editing command loads the file into a fresh engine, applies one
mutation and writes the file back only if the mutation committed.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import NoReturn, TypeVar

import typer

from roomlayout.application import LayoutEngine
from roomlayout.application.config import LayoutParseError, dump_layout, load_layout
from roomlayout.domain import LayoutError

__all__ = [
    "display_load_error",
    "edit_layout",
    "fail",
    "open_layout",
    "run_mutation",
]

T = TypeVar("T")


def fail(message: str) -> NoReturn:
    """Print an error on stderr and exit with code 1."""
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=1)


def display_load_error(error: LayoutParseError) -> None:
    """Display a layout loading error.

    Args:
        error: The LayoutParseError to display
    """
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation" and error.details:
        for detail in error.details:
            path = detail.get("path", "unknown")
            message = detail.get("message", "Unknown error")
            value = detail.get("value")
            typer.echo(f"  {path}: {message}", err=True)
            if value is not None and not isinstance(value, (dict, list)):
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)


def open_layout(layout_file: Path) -> LayoutEngine:
    """Load a layout file into a new engine, exiting on failure."""
    engine = LayoutEngine()
    try:
        load_layout(engine, layout_file)
    except LayoutParseError as e:
        display_load_error(e)
        raise typer.Exit(code=1)
    except LayoutError as e:
        fail(str(e))
    return engine


def run_mutation(action: Callable[[], T]) -> T:
    """Run an engine mutation, mapping rejections to exit code 1."""
    try:
        return action()
    except LayoutError as e:
        fail(str(e))
    except KeyError as e:
        fail(e.args[0] if e.args else "Unknown id")
    except ValueError as e:
        fail(str(e))


@contextmanager
def edit_layout(layout_file: Path) -> Iterator[LayoutEngine]:
    """Open a layout, yield its engine and save it if the block succeeds."""
    engine = open_layout(layout_file)
    yield engine
    dump_layout(engine, layout_file)
