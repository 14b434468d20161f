"""Pytest configuration and shared fixtures for room layout tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from roomlayout.application import LayoutEngine
from roomlayout.domain import Room


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: end-to-end tests of the CLI and web API")
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures for rooms and engines
# =============================================================================


@pytest.fixture
def room() -> Room:
    """An unconstrained 5000 x 4000 x 2500 mm room."""
    return Room(width=5000, depth=4000, height=2500)


@pytest.fixture
def engine(room: Room) -> LayoutEngine:
    """An empty engine over the unconstrained room."""
    return LayoutEngine(room=room)


@pytest.fixture
def sample_layout() -> dict[str, Any]:
    """A saved layout with a bed, a grouped desk and lamp, a window and a door."""
    return {
        "room": {"width": 3600, "depth": 3600, "height": 2500},
        "objects": [
            {
                "id": "obj_bed",
                "name": "Bed",
                "w": 1400,
                "d": 2000,
                "h": 450,
                "x": 0,
                "y": 0,
                "z": 0,
                "color": "rgba(0,150,255,0.5)",
                "stackable": False,
            },
            {
                "id": "obj_desk",
                "name": "Desk",
                "w": 1200,
                "d": 600,
                "h": 720,
                "x": 2000,
                "y": 0,
                "z": 0,
                "color": "rgba(120,80,40,0.5)",
                "stackable": False,
            },
            {
                "id": "obj_lamp",
                "name": "Lamp",
                "w": 300,
                "d": 300,
                "h": 1500,
                "x": 2000,
                "y": 1000,
                "z": 0,
                "color": "rgba(255,220,0,0.5)",
                "stackable": True,
            },
        ],
        "roomFeatures": [
            {"type": "window", "wall": "top", "position": 1000, "width": 1200},
            {"type": "door", "wall": "left", "position": 2600, "width": 800},
        ],
        "groups": [
            {
                "id": "group_desk",
                "name": "Desk set",
                "objectIds": ["obj_desk", "obj_lamp"],
                "createdAt": "2024-06-01T12:00:00+00:00",
            }
        ],
        "version": "1.0",
        "savedAt": "2024-06-01T12:30:00+00:00",
    }


@pytest.fixture
def layout_file(tmp_path: Path, sample_layout: dict[str, Any]) -> Path:
    """The sample layout written to a temporary JSON file."""
    path = tmp_path / "bedroom.json"
    path.write_text(json.dumps(sample_layout, indent=2), encoding="utf-8")
    return path
