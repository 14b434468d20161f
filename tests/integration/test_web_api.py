"""Integration tests for the REST API.

Every endpoint receives a layout document and returns the updated
document, so these tests post the shared sample layout and inspect the
response bodies and error mappings.
"""

from typing import Any

import pytest
from fastapi.testclient import TestClient

from roomlayout.web.app import create_app


@pytest.fixture
def client() -> TestClient:
    """Create a test client over a fresh application."""
    return TestClient(create_app())


def objects_by_id(layout: dict[str, Any]) -> dict[str, dict[str, Any]]:
    return {obj["id"]: obj for obj in layout["objects"]}


class TestHealth:
    """Tests for the health endpoint."""

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_openapi_lists_error_schema(self, client: TestClient) -> None:
        """Mutation endpoints document their error bodies."""
        schema = client.get("/openapi.json").json()
        assert "ErrorResponseSchema" in schema["components"]["schemas"]
        assert "409" in schema["paths"]["/api/v1/objects"]["post"]["responses"]


class TestValidateEndpoint:
    """Tests for POST /api/v1/validate."""

    def test_valid_layout(self, client: TestClient, sample_layout: dict[str, Any]) -> None:
        response = client.post("/api/v1/validate", json={"layout": sample_layout})

        assert response.status_code == 200
        body = response.json()
        assert body["is_valid"] is True
        assert (body["object_count"], body["feature_count"], body["group_count"]) == (3, 2, 1)

    def test_schema_errors(self, client: TestClient, sample_layout: dict[str, Any]) -> None:
        """Schema errors are reported in the body, not as an HTTP error."""
        sample_layout["room"]["width"] = -5
        response = client.post("/api/v1/validate", json={"layout": sample_layout})

        assert response.status_code == 200
        body = response.json()
        assert body["is_valid"] is False
        assert body["errors"][0]["path"] == "room.width"

    def test_overlap_is_a_warning(
        self, client: TestClient, sample_layout: dict[str, Any]
    ) -> None:
        """Overlapping non-stackable objects load and are reported as warnings."""
        sample_layout["objects"][1]["x"] = 0
        body = client.post("/api/v1/validate", json={"layout": sample_layout}).json()
        assert body["is_valid"] is True
        assert body["errors"] == []
        assert body["warnings"] == [
            {"path": "objects", "message": "Objects obj_bed and obj_desk overlap"}
        ]

    def test_room_out_of_range(self, client: TestClient, sample_layout: dict[str, Any]) -> None:
        sample_layout["room"]["depth"] = 6000
        body = client.post("/api/v1/validate", json={"layout": sample_layout}).json()
        assert body["is_valid"] is False
        assert body["errors"][0]["path"] == "room"


class TestRenderEndpoint:
    """Tests for POST /api/v1/render."""

    def test_render_front_with_table(
        self, client: TestClient, sample_layout: dict[str, Any]
    ) -> None:
        response = client.post(
            "/api/v1/render",
            json={"layout": sample_layout, "view": "front", "include_table": True},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["view"] == "front"
        assert body["diagram"].startswith("FRONT VIEW (3600mm x 2500mm)")
        assert "ROOM LAYOUT" in body["table"]

    def test_render_defaults(self, client: TestClient, sample_layout: dict[str, Any]) -> None:
        body = client.post("/api/v1/render", json={"layout": sample_layout}).json()
        assert body["view"] == "top"
        assert body["table"] is None

    def test_render_too_small(self, client: TestClient, sample_layout: dict[str, Any]) -> None:
        response = client.post(
            "/api/v1/render", json={"layout": sample_layout, "columns": 5}
        )
        assert response.status_code == 422

    def test_malformed_layout(self, client: TestClient) -> None:
        """Malformed documents map to 422 with the loader's error body."""
        response = client.post("/api/v1/render", json={"layout": {"objects": []}})

        assert response.status_code == 422
        body = response.json()
        assert body["error_type"] == "validation"
        assert body["details"][0]["path"] == "room"


class TestObjectEndpoints:
    """Tests for the object endpoints."""

    def test_add_object(self, client: TestClient, sample_layout: dict[str, Any]) -> None:
        response = client.post(
            "/api/v1/objects",
            json={
                "layout": sample_layout,
                "object": {"name": "Chair", "w": 500, "d": 500, "h": 900, "x": 3300, "y": 3000},
            },
        )

        assert response.status_code == 200
        body = response.json()
        chair = objects_by_id(body["layout"])[body["object_id"]]
        assert chair["name"] == "Chair"
        assert (chair["x"], chair["y"]) == (3100, 3000)

    def test_add_overlapping(self, client: TestClient, sample_layout: dict[str, Any]) -> None:
        response = client.post(
            "/api/v1/objects",
            json={"layout": sample_layout, "object": {"x": 200, "y": 200, "stackable": False}},
        )

        assert response.status_code == 409
        body = response.json()
        assert body["error_type"] == "overlap"
        assert body["details"]["other_id"] == "obj_bed"

    def test_update_object(self, client: TestClient, sample_layout: dict[str, Any]) -> None:
        response = client.post(
            "/api/v1/objects/update",
            json={
                "layout": sample_layout,
                "object_id": "obj_desk",
                "changes": {"y": 1500, "name": "Writing desk"},
            },
        )

        assert response.status_code == 200
        desk = objects_by_id(response.json()["layout"])["obj_desk"]
        assert desk["y"] == 1500
        assert desk["name"] == "Writing desk"

    def test_update_overlap(self, client: TestClient, sample_layout: dict[str, Any]) -> None:
        response = client.post(
            "/api/v1/objects/update",
            json={"layout": sample_layout, "object_id": "obj_desk", "changes": {"x": 500}},
        )
        assert response.status_code == 409

    def test_update_unknown_object(
        self, client: TestClient, sample_layout: dict[str, Any]
    ) -> None:
        response = client.post(
            "/api/v1/objects/update",
            json={"layout": sample_layout, "object_id": "obj_ghost", "changes": {"x": 1}},
        )
        assert response.status_code == 404
        assert response.json()["error_type"] == "not_found"

    def test_update_bad_field(self, client: TestClient, sample_layout: dict[str, Any]) -> None:
        """Fields outside the patch schema are refused."""
        response = client.post(
            "/api/v1/objects/update",
            json={"layout": sample_layout, "object_id": "obj_desk", "changes": {"id": "x"}},
        )
        assert response.status_code == 422
        assert response.json()["detail"][0]["loc"][-2:] == ["changes", "id"]

    @pytest.mark.parametrize(
        "changes",
        [{"stackable": "maybe"}, {"w": "wide"}, {"d": 0}, {"x": [1]}],
        ids=["stackable", "width", "zero-depth", "position"],
    )
    def test_update_wrong_type(
        self,
        client: TestClient,
        sample_layout: dict[str, Any],
        changes: dict[str, Any],
    ) -> None:
        """Patch values are type checked before they reach the object."""
        response = client.post(
            "/api/v1/objects/update",
            json={"layout": sample_layout, "object_id": "obj_desk", "changes": changes},
        )
        assert response.status_code == 422

    def test_update_stackable_string_is_coerced(
        self, client: TestClient, sample_layout: dict[str, Any]
    ) -> None:
        """A "false" string is read as a boolean, so the desk still may not sit on the bed."""
        response = client.post(
            "/api/v1/objects/update",
            json={
                "layout": sample_layout,
                "object_id": "obj_desk",
                "changes": {"x": 0, "y": 0, "stackable": "false"},
            },
        )
        assert response.status_code == 409
        assert response.json()["details"]["other_id"] == "obj_bed"

    def test_update_stackable_flag(
        self, client: TestClient, sample_layout: dict[str, Any]
    ) -> None:
        """A boolean stackable change is stored as a boolean."""
        response = client.post(
            "/api/v1/objects/update",
            json={
                "layout": sample_layout,
                "object_id": "obj_lamp",
                "changes": {"stackable": False},
            },
        )
        assert response.status_code == 200
        assert objects_by_id(response.json()["layout"])["obj_lamp"]["stackable"] is False

    def test_rotate_object(self, client: TestClient, sample_layout: dict[str, Any]) -> None:
        response = client.post(
            "/api/v1/objects/rotate",
            json={"layout": sample_layout, "object_id": "obj_bed"},
        )
        assert response.status_code == 200
        bed = objects_by_id(response.json()["layout"])["obj_bed"]
        assert (bed["w"], bed["d"]) == (2000, 1400)

    def test_rotated_overlap_can_be_sent_back(
        self, client: TestClient, sample_layout: dict[str, Any]
    ) -> None:
        """A layout whose rotation crossed another object is accepted by later requests."""
        sample_layout["objects"][1]["x"] = 1500
        rotated = client.post(
            "/api/v1/objects/rotate",
            json={"layout": sample_layout, "object_id": "obj_bed"},
        ).json()["layout"]

        check = client.post("/api/v1/validate", json={"layout": rotated}).json()
        assert check["is_valid"] is True
        assert len(check["warnings"]) == 1

        response = client.post(
            "/api/v1/room/resize",
            json={"layout": rotated, "width": 4000, "depth": 3600, "height": 2500},
        )
        assert response.status_code == 200

        response = client.post(
            "/api/v1/objects/rotate",
            json={"layout": rotated, "object_id": "obj_bed"},
        )
        assert response.status_code == 200
        bed = objects_by_id(response.json()["layout"])["obj_bed"]
        assert (bed["x"], bed["y"], bed["w"], bed["d"]) == (300, 0, 1400, 2000)


class TestGroupEndpoints:
    """Tests for the group endpoints."""

    def test_create_group(self, client: TestClient, sample_layout: dict[str, Any]) -> None:
        sample_layout["groups"] = []
        response = client.post(
            "/api/v1/groups",
            json={"layout": sample_layout, "name": "Work", "object_ids": ["obj_bed", "obj_desk"]},
        )

        assert response.status_code == 200
        body = response.json()
        group = body["layout"]["groups"][0]
        assert group["id"] == body["group_id"]
        assert group["objectIds"] == ["obj_bed", "obj_desk"]

    def test_insufficient_members(
        self, client: TestClient, sample_layout: dict[str, Any]
    ) -> None:
        response = client.post(
            "/api/v1/groups",
            json={"layout": sample_layout, "object_ids": ["obj_bed", "obj_lamp"]},
        )

        assert response.status_code == 422
        body = response.json()
        assert body["error_type"] == "insufficient_members"
        assert body["details"]["available_ids"] == ["obj_bed"]

    def test_move_group(self, client: TestClient, sample_layout: dict[str, Any]) -> None:
        response = client.post(
            "/api/v1/groups/move",
            json={"layout": sample_layout, "group_id": "group_desk", "dx": 200, "dy": 100},
        )

        assert response.status_code == 200
        objects = objects_by_id(response.json()["layout"])
        assert (objects["obj_desk"]["x"], objects["obj_desk"]["y"]) == (2200, 100)
        assert (objects["obj_lamp"]["x"], objects["obj_lamp"]["y"]) == (2200, 1100)

    def test_move_group_rejected(
        self, client: TestClient, sample_layout: dict[str, Any]
    ) -> None:
        response = client.post(
            "/api/v1/groups/move",
            json={"layout": sample_layout, "group_id": "group_desk", "dx": -1000},
        )
        assert response.status_code == 409
        assert response.json()["error_type"] == "move_rejected"

    def test_move_unknown_group(self, client: TestClient, sample_layout: dict[str, Any]) -> None:
        response = client.post(
            "/api/v1/groups/move",
            json={"layout": sample_layout, "group_id": "group_ghost", "dx": 10},
        )
        assert response.status_code == 404


class TestRoomEndpoints:
    """Tests for POST /api/v1/room/resize."""

    def test_resize(self, client: TestClient, sample_layout: dict[str, Any]) -> None:
        response = client.post(
            "/api/v1/room/resize",
            json={"layout": sample_layout, "width": 3000, "depth": 3600, "height": 2400},
        )

        assert response.status_code == 200
        layout = response.json()["layout"]
        assert layout["room"] == {"width": 3000, "depth": 3600, "height": 2400}
        assert objects_by_id(layout)["obj_desk"]["x"] == 1800

    def test_resize_out_of_range(
        self, client: TestClient, sample_layout: dict[str, Any]
    ) -> None:
        response = client.post(
            "/api/v1/room/resize",
            json={"layout": sample_layout, "width": 1500, "depth": 3600, "height": 2400},
        )

        assert response.status_code == 422
        body = response.json()
        assert body["error_type"] == "dimension_out_of_range"
        assert body["details"]["dimension"] == "width"

    def test_resize_non_positive(self, client: TestClient, sample_layout: dict[str, Any]) -> None:
        response = client.post(
            "/api/v1/room/resize",
            json={"layout": sample_layout, "width": 0, "depth": 3600, "height": 2400},
        )
        assert response.status_code == 422
