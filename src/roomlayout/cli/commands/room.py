"""Room commands: create layouts, resize rooms and size them from mat counts."""

from pathlib import Path
from typing import Annotated

import typer

from roomlayout.application import LayoutEngine, LayoutSettings
from roomlayout.application.config import dump_layout
from roomlayout.cli.commands.session import edit_layout, fail, run_mutation
from roomlayout.domain import RoomShape, room_size_from_mats

LayoutFile = Annotated[Path, typer.Argument(help="Path to the layout JSON file")]


def new_layout(
    layout_file: LayoutFile,
    mats: Annotated[
        int, typer.Option("--mats", "-m", help="Room size as a floor-mat count (5-8)")
    ] = 6,
    shape: Annotated[
        RoomShape, typer.Option("--shape", "-s", help="Room aspect")
    ] = RoomShape.SQUARE,
    height: Annotated[float, typer.Option("--height", "-h", help="Room height in mm")] = 2500,
    force: Annotated[bool, typer.Option("--force", "-f", help="Overwrite existing file")] = False,
) -> None:
    """Create an empty layout file.

    Examples:
        roomlayout new bedroom.json
        roomlayout new study.json --mats 8 --shape horizontal
    """
    if layout_file.exists() and not force:
        fail(f"File already exists: {layout_file} (use --force to overwrite)")
    try:
        settings = LayoutSettings(default_mats=mats, default_shape=shape, default_height=height)
        engine = LayoutEngine(settings=settings)
    except ValueError as e:
        fail(str(e))
    dump_layout(engine, layout_file)
    room = engine.room
    typer.echo(
        f"Created {layout_file}: {room.width:g} x {room.depth:g} x {room.height:g} mm"
    )


def resize_room(
    layout_file: LayoutFile,
    width: Annotated[float | None, typer.Option("--width", "-w", help="Room width in mm")] = None,
    depth: Annotated[float | None, typer.Option("--depth", "-d", help="Room depth in mm")] = None,
    height: Annotated[float | None, typer.Option("--height", "-h", help="Room height in mm")] = None,
) -> None:
    """Resize the room, re-fitting every object and feature.

    Dimensions not given keep their current value.
    """
    with edit_layout(layout_file) as engine:
        room = engine.room
        new_width = room.width if width is None else width
        new_depth = room.depth if depth is None else depth
        new_height = room.height if height is None else height
        run_mutation(lambda: engine.resize_room(new_width, new_depth, new_height))
    typer.echo(f"Resized room to {new_width:g} x {new_depth:g} x {new_height:g} mm")


def room_size(
    mats: Annotated[int, typer.Argument(help="Floor-mat count (5-8)")],
    shape: Annotated[
        RoomShape, typer.Option("--shape", "-s", help="Room aspect")
    ] = RoomShape.SQUARE,
) -> None:
    """Print the room width and depth for a floor-mat count."""
    try:
        width, depth = room_size_from_mats(mats, shape, LayoutSettings().size_constraints())
    except ValueError as e:
        fail(str(e))
    typer.echo(f"{mats} mats ({shape.value}): {width:g} x {depth:g} mm")
