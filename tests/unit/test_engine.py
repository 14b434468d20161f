"""Unit tests for LayoutEngine.

These tests verify:
- Mutations go through the registries and notify listeners
- Room resizing keeps every object and feature valid, or changes nothing
- Removing an object keeps groups consistent
- Documents round-trip and a failed load leaves the session untouched
"""

from datetime import datetime, timezone
from typing import Any

import pytest

from roomlayout.application import LayoutEngine, LayoutSettings
from roomlayout.application.config import LayoutParseError
from roomlayout.domain import (
    DimensionOutOfRange,
    LayoutObject,
    OverlapRejected,
    Room,
    RoomFeature,
    Wall,
)


class TestEngineConstruction:
    """Tests for engine construction."""

    def test_default_room_from_settings(self) -> None:
        """Without a room the engine creates the settings' default room."""
        engine = LayoutEngine()
        assert (engine.room.width, engine.room.depth) == (3117, 3117)
        assert engine.room.size_constraints is not None

    def test_shared_room(self, room: Room, engine: LayoutEngine) -> None:
        """Every registry holds the same room instance."""
        assert engine.room is room
        assert engine.object_manager.room is room
        assert engine.feature_manager.room is room

    def test_coordinate_space_uses_settings(self, room: Room) -> None:
        """The coordinate space carries the session scale."""
        engine = LayoutEngine(room=room, settings=LayoutSettings(scale=0.5))
        assert engine.coordinate_space().room_size_px == pytest.approx((2500, 2000))


class TestEngineObjects:
    """Tests for object operations and listeners."""

    def test_overlap_rejected_through_engine(self, engine: LayoutEngine) -> None:
        """Moving a non-stackable object onto another fails without changes.

        The second object starts at (2000, 2000) rather than on top of the
        first, because add_object already rejects an overlapping insert.
        """
        engine.add_object(LayoutObject(id="a", w=1000, d=800, stackable=False))
        engine.add_object(LayoutObject(id="b", x=2000, y=2000, w=1000, d=800, stackable=False))

        with pytest.raises(OverlapRejected):
            engine.update_object("b", {"x": 500, "y": 500})

        assert (engine.get_object("a").x, engine.get_object("a").y) == (0, 0)
        assert (engine.get_object("b").x, engine.get_object("b").y) == (2000, 2000)

    def test_listeners_notified_on_commit(self, engine: LayoutEngine) -> None:
        """Listeners run after committed mutations only."""
        calls: list[LayoutEngine] = []
        engine.add_listener(calls.append)

        engine.add_object(LayoutObject(id="a", stackable=False))
        engine.move_object("a", 100, 100)
        assert len(calls) == 2

        engine.add_object(LayoutObject(id="b", x=3000, stackable=False))
        with pytest.raises(OverlapRejected):
            engine.move_object("b", 0, 0)
        assert len(calls) == 3
        assert calls[0] is engine

    def test_remove_listener(self, engine: LayoutEngine) -> None:
        """A removed listener is no longer called."""
        calls: list[LayoutEngine] = []
        engine.add_listener(calls.append)
        engine.remove_listener(calls.append)
        engine.add_object(LayoutObject())
        assert calls == []

    def test_get_unknown_object(self, engine: LayoutEngine) -> None:
        """get_object raises KeyError for unknown ids."""
        with pytest.raises(KeyError):
            engine.get_object("missing")

    def test_rotate_does_not_check_overlap(self, engine: LayoutEngine) -> None:
        """Rotation may leave two non-stackable objects intersecting."""
        engine.add_object(LayoutObject(id="a", x=0, y=0, w=2000, d=500, stackable=False))
        engine.add_object(LayoutObject(id="b", x=750, y=1000, w=500, d=1000, stackable=False))
        engine.rotate_object("a")
        rotated = engine.get_object("a")
        assert (rotated.w, rotated.d) == (500, 2000)
        assert (rotated.x, rotated.y) == (750, 0)

    def test_remove_object_leaves_group(self, engine: LayoutEngine) -> None:
        """Removing a grouped object drops it from its group."""
        for obj_id, x in (("a", 0), ("b", 1500), ("c", 3000)):
            engine.add_object(LayoutObject(id=obj_id, x=x, stackable=False))
        group = engine.create_group("G", ["a", "b", "c"])

        assert engine.remove_object("a") is not None
        assert group.object_ids == ["b", "c"]
        assert engine.group_for_object("a") is None
        assert engine.remove_object("a") is None


class TestEngineResize:
    """Tests for LayoutEngine.resize_room()."""

    def test_objects_reclamped(self, engine: LayoutEngine) -> None:
        """Objects past the new walls are pulled back inside."""
        engine.add_object(LayoutObject(id="a", x=4000, y=3000, w=1000, d=1000))
        engine.resize_room(4500, 3500, 2500)
        obj = engine.get_object("a")
        assert (obj.x, obj.y) == (3500, 2500)

    def test_features_refitted(self, engine: LayoutEngine) -> None:
        """Features slide back onto shortened walls."""
        feature = RoomFeature(wall=Wall.RIGHT, position=3000, width=1000)
        engine.add_feature(feature)
        engine.resize_room(5000, 3000, 2500)
        assert feature.position == 2000
        assert feature.width == 1000

    def test_smaller_than_object_rejected(self, engine: LayoutEngine) -> None:
        """A room narrower than an object is rejected."""
        engine.add_object(LayoutObject(id="a", w=3000))
        with pytest.raises(DimensionOutOfRange) as exc_info:
            engine.resize_room(2500, 4000, 2500)
        assert exc_info.value.dimension == "width"
        assert engine.room.width == 5000

    def test_overlap_after_clamp_rejected(self, engine: LayoutEngine) -> None:
        """A resize that would push objects together changes nothing."""
        engine.add_object(LayoutObject(id="a", x=0, w=1000, stackable=False))
        engine.add_object(LayoutObject(id="b", x=3500, w=1000, stackable=False))

        with pytest.raises(OverlapRejected):
            engine.resize_room(1500, 4000, 2500)

        assert engine.room.width == 5000
        assert engine.get_object("b").x == 3500

    def test_existing_overlap_does_not_block_resize(self, engine: LayoutEngine) -> None:
        """A pair already crossing after a rotation does not stop an enlargement."""
        engine.add_object(LayoutObject(id="a", x=0, y=0, w=2000, d=500, stackable=False))
        engine.add_object(LayoutObject(id="b", x=750, y=1000, w=500, d=1000, stackable=False))
        engine.rotate_object("a")
        assert engine.overlapping_pairs() == [("a", "b")]

        engine.resize_room(5000, 5000, 2500)

        assert (engine.room.width, engine.room.depth) == (5000, 5000)
        assert engine.overlapping_pairs() == [("a", "b")]

    def test_new_overlap_still_rejected_next_to_existing_one(
        self, engine: LayoutEngine
    ) -> None:
        """Only pairs created by re-clamping block the resize."""
        engine.add_object(LayoutObject(id="a", x=0, y=0, w=2000, d=500, stackable=False))
        engine.add_object(LayoutObject(id="b", x=750, y=1000, w=500, d=1000, stackable=False))
        engine.add_object(LayoutObject(id="c", x=4000, y=0, w=1000, d=1000, stackable=False))
        engine.rotate_object("a")

        with pytest.raises(OverlapRejected) as exc_info:
            engine.resize_room(2000, 4000, 2500)

        assert (exc_info.value.object_id, exc_info.value.other_id) == ("a", "c")
        assert engine.room.width == 5000

    def test_constraints_enforced(self) -> None:
        """A constrained room rejects out-of-range sizes."""
        engine = LayoutEngine()
        with pytest.raises(DimensionOutOfRange):
            engine.resize_room(3000, 3000, 3500)
        assert engine.room.height == 2500

    def test_non_positive_rejected(self, engine: LayoutEngine) -> None:
        """Zero dimensions raise ValueError."""
        with pytest.raises(ValueError):
            engine.resize_room(0, 4000, 2500)


class TestEngineGroups:
    """Tests for group operations through the engine."""

    def test_move_group(self, engine: LayoutEngine) -> None:
        """move_group reports whether the group moved."""
        engine.add_object(LayoutObject(id="a", x=0, stackable=False))
        engine.add_object(LayoutObject(id="b", x=1000, stackable=False))
        group = engine.create_group("Pair", ["a", "b"])

        assert engine.move_group(group.id, 100, 100)
        assert engine.get_object("b").x == 1100
        assert not engine.move_group(group.id, 4000, 0)
        assert engine.get_object("b").x == 1100

    def test_ungroup(self, engine: LayoutEngine) -> None:
        """Ungrouping keeps the objects."""
        engine.add_object(LayoutObject(id="a", stackable=True))
        engine.add_object(LayoutObject(id="b", stackable=True))
        group = engine.create_group("", ["a", "b"])
        assert engine.ungroup(group.id)
        assert engine.groups == []
        assert len(engine.objects) == 2

    def test_get_unknown_group(self, engine: LayoutEngine) -> None:
        """get_group raises KeyError for unknown ids."""
        with pytest.raises(KeyError):
            engine.get_group("missing")


class TestEngineDocuments:
    """Tests for to_document() and load_document()."""

    def test_load_sample(self, engine: LayoutEngine, sample_layout: dict[str, Any]) -> None:
        """A saved layout replaces the session."""
        engine.load_document(sample_layout)

        assert (engine.room.width, engine.room.depth) == (3600, 3600)
        assert [obj.id for obj in engine.objects] == ["obj_bed", "obj_desk", "obj_lamp"]
        assert len(engine.features) == 2
        assert engine.group_for_object("obj_lamp").id == "group_desk"

    def test_round_trip(self, engine: LayoutEngine, sample_layout: dict[str, Any]) -> None:
        """Saving a loaded layout reproduces its content."""
        engine.load_document(sample_layout)
        saved_at = datetime(2024, 7, 1, tzinfo=timezone.utc)

        document = engine.to_document(saved_at=saved_at)

        assert document["room"] == sample_layout["room"]
        assert document["objects"] == sample_layout["objects"]
        assert document["roomFeatures"] == sample_layout["roomFeatures"]
        assert document["groups"] == sample_layout["groups"]
        assert document["version"] == "1.0"
        assert document["savedAt"] == saved_at.isoformat()

    def test_optional_fields_defaulted(self, engine: LayoutEngine) -> None:
        """Missing optional object fields take the object defaults."""
        engine.load_document(
            {
                "room": {"width": 3000, "depth": 3000, "height": 2400},
                "objects": [{"w": 500, "d": 500, "h": 500, "x": 10, "y": 20}],
                "roomFeatures": [],
            }
        )
        obj = engine.objects[0]
        assert obj.z == 0
        assert obj.stackable is True
        assert obj.id.startswith("obj_")
        assert engine.groups == []

    def test_objects_clamped_on_load(self, engine: LayoutEngine) -> None:
        """Objects hanging over a wall are pulled inside."""
        engine.load_document(
            {
                "room": {"width": 3000, "depth": 3000, "height": 2400},
                "objects": [{"id": "a", "w": 1000, "d": 1000, "h": 500, "x": 2500, "y": 0}],
                "roomFeatures": [],
            }
        )
        assert engine.get_object("a").x == 2000

    def test_overlapping_objects_loaded(
        self, engine: LayoutEngine, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Overlapping non-stackable objects are loaded as saved, with a warning."""
        document = {
            "room": {"width": 3000, "depth": 3000, "height": 2400},
            "objects": [
                {"id": "a", "w": 1000, "d": 1000, "h": 500, "x": 0, "y": 0, "stackable": False},
                {"id": "b", "w": 1000, "d": 1000, "h": 500, "x": 500, "y": 0, "stackable": False},
            ],
            "roomFeatures": [],
        }

        with caplog.at_level("WARNING", logger="roomlayout.application.engine"):
            engine.load_document(document)

        assert engine.get_object("b").x == 500
        assert engine.overlapping_pairs() == [("a", "b")]
        assert "Loaded overlapping objects a and b" in caplog.text

    @pytest.mark.parametrize(
        "objects",
        [
            [
                {"id": "a", "w": 1000, "d": 1000, "h": 500, "x": 0, "y": 0},
                {"id": "a", "w": 1000, "d": 1000, "h": 500, "x": 2000, "y": 0},
            ],
            [{"id": "a", "w": 9000, "d": 1000, "h": 500, "x": 0, "y": 0}],
        ],
        ids=["duplicate-id", "too-large"],
    )
    def test_invalid_load_leaves_session(
        self,
        engine: LayoutEngine,
        sample_layout: dict[str, Any],
        objects: list[dict[str, Any]],
    ) -> None:
        """A rejected document does not touch the current session."""
        engine.load_document(sample_layout)
        bad = {"room": {"width": 3000, "depth": 3000, "height": 2400}, "objects": objects}

        with pytest.raises(LayoutParseError) as exc_info:
            engine.load_document(bad)

        assert exc_info.value.error_type == "validation"
        assert engine.room.width == 3600
        assert len(engine.objects) == 3

    def test_schema_error(self, engine: LayoutEngine) -> None:
        """Schema violations report the offending path."""
        with pytest.raises(LayoutParseError) as exc_info:
            engine.load_document({"room": {"width": -1, "depth": 3000, "height": 2400}})
        assert exc_info.value.details[0]["path"] == "room.width"

    def test_room_out_of_constraints(self, sample_layout: dict[str, Any]) -> None:
        """A constrained session rejects an out-of-range room."""
        engine = LayoutEngine()
        sample_layout["room"]["width"] = 8000
        with pytest.raises(DimensionOutOfRange):
            engine.load_document(sample_layout)
        assert engine.room.width == 3117


class TestMutationRoundTrip:
    """Every state the engine can reach survives to_document()/load_document()."""

    @pytest.fixture
    def crossing(self, engine: LayoutEngine) -> LayoutEngine:
        """A grouped pair next to a lone cabinet, in the unconstrained room."""
        engine.add_object(LayoutObject(id="a", x=0, y=0, w=2000, d=500, stackable=False))
        engine.add_object(LayoutObject(id="b", x=750, y=1000, w=500, d=1000, stackable=False))
        engine.add_object(LayoutObject(id="c", x=3000, y=0, w=1000, d=1000, stackable=False))
        engine.add_object(LayoutObject(id="d", x=3000, y=2000, w=1000, d=1000, stackable=False))
        engine.create_group("Right", ["c", "d"])
        engine.add_feature(RoomFeature(wall=Wall.BOTTOM, position=1000, width=1000))
        return engine

    @staticmethod
    def reload(engine: LayoutEngine) -> LayoutEngine:
        saved_at = datetime(2024, 7, 1, tzinfo=timezone.utc)
        document = engine.to_document(saved_at=saved_at)
        restored = LayoutEngine(room=Room(width=1, depth=1, height=1))
        restored.load_document(document)
        assert restored.to_document(saved_at=saved_at) == document
        return restored

    def test_after_rotation_into_overlap(self, crossing: LayoutEngine) -> None:
        """A rotation that crosses another object still round-trips."""
        crossing.rotate_object("a")
        assert crossing.overlapping_pairs() == [("a", "b")]

        restored = self.reload(crossing)

        assert restored.overlapping_pairs() == [("a", "b")]
        rotated = restored.get_object("a")
        assert (rotated.x, rotated.y, rotated.w, rotated.d) == (750, 0, 500, 2000)

    def test_after_unchecked_group_move(self, crossing: LayoutEngine) -> None:
        """A batch group move onto another object still round-trips."""
        group = crossing.group_for_object("c")
        assert crossing.move_group(group.id, -2500, 1000)
        assert crossing.overlapping_pairs() == [("b", "c")]

        restored = self.reload(crossing)

        assert restored.get_group(group.id).object_ids == ["c", "d"]
        assert restored.get_object("c").x == 500

    def test_after_resize(self, crossing: LayoutEngine) -> None:
        """Re-clamped objects and re-fitted features round-trip."""
        crossing.resize_room(4500, 3500, 2500)

        restored = self.reload(crossing)

        assert (restored.room.width, restored.room.depth) == (4500, 3500)
        assert restored.get_object("d").y == 2000
        assert restored.features[0].position == 1000

    def test_after_rotation_then_resize(self, crossing: LayoutEngine) -> None:
        """Enlarging a room that holds a rotation overlap round-trips."""
        crossing.rotate_object("a")
        crossing.resize_room(5000, 5000, 2500)

        restored = self.reload(crossing)

        assert restored.room.depth == 5000
        assert restored.overlapping_pairs() == [("a", "b")]

    def test_after_update_and_removal(self, crossing: LayoutEngine) -> None:
        """Patched and removed objects round-trip with their groups."""
        crossing.update_object("b", {"name": "Cabinet", "color": "#336699", "z": 100})
        crossing.remove_object("d")

        restored = self.reload(crossing)

        cabinet = restored.get_object("b")
        assert (cabinet.name, cabinet.color, cabinet.z) == ("Cabinet", "#336699", 100)
        assert restored.group_for_object("c").object_ids == ["c"]
