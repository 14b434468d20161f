"""Validate command for checking layout files.

This module provides the `validate` command that checks a layout JSON file
for syntax errors, schema violations and broken layout invariants (objects
outside the room, room sizes outside the permitted range). Overlapping
non-stackable objects are reported as warnings.
"""

from pathlib import Path
from typing import Annotated

import typer

from roomlayout.application import LayoutEngine
from roomlayout.application.config import LayoutParseError, load_layout
from roomlayout.cli.commands.session import display_load_error
from roomlayout.domain import LayoutError


def validate_command(
    layout_file: Annotated[
        Path,
        typer.Argument(help="Path to the layout JSON file to validate"),
    ],
) -> None:
    """Validate a room layout file.

    Checks the layout file for:
    - JSON syntax errors
    - Schema validation errors (missing fields, invalid types, etc.)
    - Objects that do not fit the room
    - Room sizes outside the permitted range
    - Overlapping non-stackable objects (warning)

    Exit codes:
        0 - Layout is valid with no warnings
        1 - Layout has errors (cannot be loaded)
        2 - Layout is valid but has warnings

    Example:
        roomlayout validate bedroom.json
    """
    typer.echo(f"Validating {layout_file}...")
    typer.echo()

    engine = LayoutEngine()
    try:
        load_layout(engine, layout_file)
    except LayoutParseError as e:
        display_load_error(e)
        typer.echo()
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)
    except LayoutError as e:
        typer.echo("Errors:", err=True)
        typer.echo(f"  {e}", err=True)
        typer.echo()
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    room = engine.room
    typer.echo(f"Room: {room.width:g} x {room.depth:g} x {room.height:g} mm")
    typer.echo(
        f"{len(engine.objects)} objects, {len(engine.features)} features, "
        f"{len(engine.groups)} groups"
    )
    overlaps = engine.overlapping_pairs()
    if overlaps:
        typer.echo()
        typer.echo("Warnings:")
        for first, second in overlaps:
            typer.echo(f"  objects: {first} and {second} overlap")
        typer.echo()
        typer.echo(f"Validation passed with {len(overlaps)} warning(s)")
        raise typer.Exit(code=2)
    typer.echo("Validation passed. Layout is valid.")
