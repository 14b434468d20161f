"""Wall feature commands: add and remove windows, doors and closets."""

from pathlib import Path
from typing import Annotated

import typer

from roomlayout.cli.commands.session import edit_layout, fail
from roomlayout.domain import FeatureType, RoomFeature, Wall

LayoutFile = Annotated[Path, typer.Argument(help="Path to the layout JSON file")]


def add_feature(
    layout_file: LayoutFile,
    feature_type: Annotated[
        FeatureType, typer.Option("--type", "-t", help="Feature type")
    ] = FeatureType.WINDOW,
    wall: Annotated[Wall, typer.Option("--wall", help="Wall to attach to")] = Wall.TOP,
    position: Annotated[
        float, typer.Option("--position", "-p", help="Offset along the wall in mm")
    ] = 0,
    width: Annotated[
        float, typer.Option("--width", "-w", help="Extent along the wall in mm")
    ] = 1000,
) -> None:
    """Attach a window, door or closet to a wall.

    The feature is clamped onto the wall; if nothing of it is left the
    command fails.

    Example:
        roomlayout add-feature bedroom.json --type door --wall left --position 200 --width 800
    """
    feature = RoomFeature(type=feature_type, wall=wall, position=position, width=width)
    with edit_layout(layout_file) as engine:
        if not engine.add_feature(feature):
            fail(f"No room left for a {feature_type.value} on the {wall.value} wall")
    typer.echo(
        f"Added {feature.type.value} on {feature.wall.value} wall "
        f"at {feature.position:g}mm, width {feature.width:g}mm"
    )


def remove_feature(
    layout_file: LayoutFile,
    index: Annotated[
        int, typer.Argument(help="Index of the feature as listed by 'show --table'")
    ],
) -> None:
    """Remove a wall feature by its list index."""
    with edit_layout(layout_file) as engine:
        features = engine.features
        if not 0 <= index < len(features):
            fail(f"No feature at index {index} ({len(features)} features)")
        feature = features[index]
        engine.remove_feature(feature)
    typer.echo(f"Removed {feature.type.value} from {feature.wall.value} wall")
