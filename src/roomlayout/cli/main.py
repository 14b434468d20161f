"""Typer CLI for room layout editing."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from roomlayout.cli.commands import (
    add_feature,
    add_object,
    group_objects,
    move_group,
    move_object,
    new_layout,
    remove_feature,
    remove_object,
    resize_room,
    room_size,
    rotate_object,
    ungroup,
    update_object,
    validate_command,
)
from roomlayout.cli.commands.session import open_layout
from roomlayout.domain import ViewType
from roomlayout.infrastructure import LayoutDiagramFormatter, LayoutTableFormatter

app = typer.Typer(
    name="roomlayout",
    help="Arrange furniture and wall features in a rectangular room.",
)


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    """Arrange furniture and wall features in a rectangular room."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


app.command(name="new")(new_layout)
app.command(name="validate")(validate_command)
app.command(name="add-object")(add_object)
app.command(name="update-object")(update_object)
app.command(name="move-object")(move_object)
app.command(name="rotate-object")(rotate_object)
app.command(name="remove-object")(remove_object)
app.command(name="add-feature")(add_feature)
app.command(name="remove-feature")(remove_feature)
app.command(name="group")(group_objects)
app.command(name="ungroup")(ungroup)
app.command(name="move-group")(move_group)
app.command(name="resize")(resize_room)
app.command(name="room-size")(room_size)


@app.command()
def show(
    layout_file: Annotated[Path, typer.Argument(help="Path to the layout JSON file")],
    view: Annotated[
        ViewType, typer.Option("--view", help="View to draw: top, front or side")
    ] = ViewType.TOP,
    table: Annotated[
        bool, typer.Option("--table/--no-table", help="Also list objects, features and groups")
    ] = False,
    columns: Annotated[int, typer.Option("--columns", help="Diagram width in characters")] = 60,
    rows: Annotated[int, typer.Option("--rows", help="Diagram height in characters")] = 20,
) -> None:
    """Show an ASCII diagram of a layout."""
    if columns < 10 or rows < 5:
        typer.echo("Error: diagram must be at least 10 columns by 5 rows", err=True)
        raise typer.Exit(code=1)

    engine = open_layout(layout_file)
    formatter = LayoutDiagramFormatter()
    typer.echo(
        formatter.format(
            engine.room, engine.objects, engine.features, view=view, width=columns, height=rows
        )
    )
    if table:
        typer.echo()
        typer.echo(
            LayoutTableFormatter().format(
                engine.room, engine.objects, engine.features, engine.groups
            )
        )


if __name__ == "__main__":
    app()
