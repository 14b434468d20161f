"""Object commands: add, update, move, rotate and remove layout objects."""

from pathlib import Path
from typing import Annotated, Any

import typer

from roomlayout.cli.commands.session import edit_layout, fail, run_mutation
from roomlayout.domain import DEFAULT_OBJECT_COLOR, LayoutObject

LayoutFile = Annotated[Path, typer.Argument(help="Path to the layout JSON file")]
ObjectId = Annotated[str, typer.Argument(help="Id of the object")]


def add_object(
    layout_file: LayoutFile,
    name: Annotated[str, typer.Option("--name", "-n", help="Display name")] = "",
    width: Annotated[float, typer.Option("--width", "-w", help="Width (x) in mm")] = 1000,
    depth: Annotated[float, typer.Option("--depth", "-d", help="Depth (y) in mm")] = 1000,
    height: Annotated[float, typer.Option("--height", "-h", help="Height (z) in mm")] = 1000,
    x: Annotated[float, typer.Option("--x", help="Left edge in mm")] = 0,
    y: Annotated[float, typer.Option("--y", help="Top edge in mm")] = 0,
    z: Annotated[float, typer.Option("--z", help="Elevation in mm")] = 0,
    color: Annotated[str, typer.Option("--color", help="Display color token")] = DEFAULT_OBJECT_COLOR,
    stackable: Annotated[
        bool,
        typer.Option("--stackable/--no-stackable", help="Allow overlapping other objects"),
    ] = True,
) -> None:
    """Add an object to a layout.

    The object is clamped into the room and trimmed to fit. A non-stackable
    object that would overlap another one is rejected.

    Example:
        roomlayout add-object bedroom.json --name Bed -w 1400 -d 2000 -h 450 --no-stackable
    """
    with edit_layout(layout_file) as engine:
        try:
            obj = LayoutObject(
                name=name, w=width, d=depth, h=height, x=x, y=y, z=z,
                color=color, stackable=stackable,
            )
        except ValueError as e:
            fail(str(e))
        run_mutation(lambda: engine.add_object(obj))
    typer.echo(f"Added object {obj.id} at ({obj.x:g}, {obj.y:g}, {obj.z:g})")


def update_object(
    layout_file: LayoutFile,
    object_id: ObjectId,
    name: Annotated[str | None, typer.Option("--name", "-n", help="Display name")] = None,
    width: Annotated[float | None, typer.Option("--width", "-w", help="Width (x) in mm")] = None,
    depth: Annotated[float | None, typer.Option("--depth", "-d", help="Depth (y) in mm")] = None,
    height: Annotated[float | None, typer.Option("--height", "-h", help="Height (z) in mm")] = None,
    x: Annotated[float | None, typer.Option("--x", help="Left edge in mm")] = None,
    y: Annotated[float | None, typer.Option("--y", help="Top edge in mm")] = None,
    z: Annotated[float | None, typer.Option("--z", help="Elevation in mm")] = None,
    color: Annotated[str | None, typer.Option("--color", help="Display color token")] = None,
    stackable: Annotated[
        bool | None,
        typer.Option("--stackable/--no-stackable", help="Allow overlapping other objects"),
    ] = None,
) -> None:
    """Change some properties of an object.

    Only the given options are changed. The update is applied atomically:
    if the result would overlap another object nothing changes.

    Example:
        roomlayout update-object bedroom.json obj_1718000000000_k3j9x0a1b --x 500 --y 500
    """
    patch: dict[str, Any] = {
        key: value
        for key, value in (
            ("name", name), ("w", width), ("d", depth), ("h", height),
            ("x", x), ("y", y), ("z", z), ("color", color), ("stackable", stackable),
        )
        if value is not None
    }
    if not patch:
        fail("Nothing to update; pass at least one option")

    with edit_layout(layout_file) as engine:
        obj = run_mutation(lambda: engine.update_object(object_id, patch))
    typer.echo(
        f"Updated object {obj.id}: {obj.w:g} x {obj.d:g} x {obj.h:g} "
        f"at ({obj.x:g}, {obj.y:g}, {obj.z:g})"
    )


def move_object(
    layout_file: LayoutFile,
    object_id: ObjectId,
    x: Annotated[float, typer.Option("--x", help="New left edge in mm")],
    y: Annotated[float, typer.Option("--y", help="New top edge in mm")],
) -> None:
    """Move an object, clamping it into the room."""
    with edit_layout(layout_file) as engine:
        obj = run_mutation(lambda: engine.move_object(object_id, x, y))
    typer.echo(f"Moved object {obj.id} to ({obj.x:g}, {obj.y:g})")


def rotate_object(layout_file: LayoutFile, object_id: ObjectId) -> None:
    """Rotate an object a quarter turn about its centre."""
    with edit_layout(layout_file) as engine:
        obj = run_mutation(lambda: engine.rotate_object(object_id))
    typer.echo(f"Rotated object {obj.id}: now {obj.w:g} x {obj.d:g} at ({obj.x:g}, {obj.y:g})")


def remove_object(layout_file: LayoutFile, object_id: ObjectId) -> None:
    """Remove an object (and drop it from its group)."""
    with edit_layout(layout_file) as engine:
        if engine.remove_object(object_id) is None:
            fail(f"Unknown object: {object_id}")
    typer.echo(f"Removed object {object_id}")
