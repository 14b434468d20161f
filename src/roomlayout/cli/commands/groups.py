"""Group commands: group, ungroup and move groups of objects."""

from pathlib import Path
from typing import Annotated

import typer

from roomlayout.cli.commands.session import edit_layout, fail, run_mutation

LayoutFile = Annotated[Path, typer.Argument(help="Path to the layout JSON file")]
GroupId = Annotated[str, typer.Argument(help="Id of the group")]


def group_objects(
    layout_file: LayoutFile,
    object_ids: Annotated[list[str], typer.Argument(help="Ids of the objects to group")],
    name: Annotated[str, typer.Option("--name", "-n", help="Group name")] = "",
) -> None:
    """Group two or more ungrouped objects.

    Objects that already belong to a group are skipped; at least two
    objects must remain.

    Example:
        roomlayout group bedroom.json obj_a obj_b --name "Desk set"
    """
    with edit_layout(layout_file) as engine:
        group = run_mutation(lambda: engine.create_group(name, object_ids))
    typer.echo(f"Created group {group.id} ({group.name}) with {len(group)} objects")


def ungroup(layout_file: LayoutFile, group_id: GroupId) -> None:
    """Dissolve a group; its objects stay where they are."""
    with edit_layout(layout_file) as engine:
        if not engine.ungroup(group_id):
            fail(f"Unknown group: {group_id}")
    typer.echo(f"Removed group {group_id}")


def move_group(
    layout_file: LayoutFile,
    group_id: GroupId,
    dx: Annotated[float, typer.Option("--dx", help="Offset along x in mm")] = 0,
    dy: Annotated[float, typer.Option("--dy", help="Offset along y in mm")] = 0,
    check_overlap: Annotated[
        bool,
        typer.Option(
            "--check-overlap/--no-check-overlap",
            help="Reject the move if a member would overlap a non-member",
        ),
    ] = True,
) -> None:
    """Move every object of a group by the same offset, or none of them."""
    with edit_layout(layout_file) as engine:
        moved = run_mutation(
            lambda: engine.move_group(group_id, dx, dy, check_overlap=check_overlap)
        )
        if not moved:
            fail(f"Group {group_id} cannot move by ({dx:g}, {dy:g})")
    typer.echo(f"Moved group {group_id} by ({dx:g}, {dy:g})")
