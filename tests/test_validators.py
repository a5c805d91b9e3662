"""Tests for geometry, adjacency, door and window validation."""

import pytest

from floorplan_engine.generators.placement import place_rooms
from floorplan_engine.models import (
    Adjacency,
    Door,
    FloorPlan,
    PlannedRoom,
    Plot,
    Room,
    RoomPlan,
    RoomType,
    Window,
)
from floorplan_engine.validators.geometry import (
    validate_adjacencies,
    validate_aspect_ratios,
    validate_bounds,
    validate_min_dimensions,
    validate_overlaps,
    validate_room_placement,
)
from floorplan_engine.validators.openings import (
    validate_doors,
    validate_floor_plan,
    validate_windows,
)


def _room(room_id, x, y, w, h, room_type=RoomType.OTHER) -> Room:
    return Room(id=room_id, name=room_id.title(), type=room_type, x=x, y=y, width=w, height=h)


def _door(door_id, from_id, to_id, x, y, orientation="vertical") -> Door:
    return Door(
        id=door_id, from_room_id=from_id, to_room_id=to_id,
        x=x, y=y, width=3, orientation=orientation,
    )


@pytest.fixture
def plot() -> Plot:
    return Plot(width=20, height=10)


@pytest.fixture
def bath_kitchen(plot) -> FloorPlan:
    """Bathroom and kitchen side by side, with a door between them."""
    return FloorPlan(
        plot=plot,
        rooms=[
            _room("bath", 0, 0, 10, 10, RoomType.BATHROOM),
            _room("kitchen", 10, 0, 10, 10, RoomType.KITCHEN),
        ],
        doors=[
            _door("d1", "kitchen", None, 20, 4),
            _door("d2", "bath", "kitchen", 10, 3),
        ],
        windows=[
            Window(id="w1", room_id="kitchen", x=12, y=0, width=4, orientation="horizontal"),
        ],
    )


# ── Room geometry ─────────────────────────────────────────────────


class TestBounds:
    def test_inside(self, plot):
        assert validate_bounds(plot, [_room("a", 0, 0, 20, 10)]) == []

    def test_negative_coordinates(self, plot):
        errors = validate_bounds(plot, [_room("a", -1, 0, 10, 10)])
        assert len(errors) == 1
        assert errors[0].severity == "error"
        assert "negative coordinates" in errors[0].message

    def test_exceeds_width_and_height(self, plot):
        errors = validate_bounds(plot, [_room("a", 15, 5, 10, 10)])
        assert len(errors) == 2
        assert "exceeds plot width" in errors[0].message
        assert "exceeds plot height" in errors[1].message


class TestMinDimensions:
    def test_hallway_may_be_narrow(self):
        assert validate_min_dimensions([_room("h", 0, 0, 3, 10, RoomType.HALLWAY)]) == []

    def test_bedroom_too_narrow(self):
        errors = validate_min_dimensions([_room("b", 0, 0, 4, 10, RoomType.BEDROOM)])
        assert len(errors) == 1
        assert "below 5ft minimum" in errors[0].message
        assert errors[0].element_id == "b"


class TestAspectRatios:
    def test_hallway_limit(self):
        assert validate_aspect_ratios([_room("h", 0, 0, 3, 24, RoomType.HALLWAY)]) == []
        errors = validate_aspect_ratios([_room("h", 0, 0, 3, 25, RoomType.HALLWAY)])
        assert len(errors) == 1
        assert "exceeds 8:1" in errors[0].message

    def test_room_limit(self):
        errors = validate_aspect_ratios([_room("b", 0, 0, 5, 21, RoomType.BEDROOM)])
        assert len(errors) == 1
        assert "4.2:1" in errors[0].message

    def test_zero_dimension(self):
        errors = validate_aspect_ratios([_room("b", 0, 0, 0, 10)])
        assert len(errors) == 1
        assert "zero dimension" in errors[0].message


class TestOverlaps:
    def test_overlap_reports_area(self):
        errors = validate_overlaps([_room("a", 0, 0, 10, 10), _room("b", 5, 5, 10, 10)])
        assert len(errors) == 1
        assert "overlap by ~25 sqft" in errors[0].message

    def test_adjacent_rooms_do_not_overlap(self):
        assert validate_overlaps([_room("a", 0, 0, 10, 10), _room("b", 10, 0, 10, 10)]) == []


class TestRoomPlacement:
    def test_placed_rooms_pass(self):
        plan = RoomPlan(
            plot=Plot(width=30, height=20),
            rooms=[
                PlannedRoom(id="l", name="Living", type="living_room", zone="public",
                            target_area=300, width_range=(10, 20), height_range=(10, 20)),
                PlannedRoom(id="b", name="Bedroom", type="bedroom", zone="private",
                            target_area=300, width_range=(10, 20), height_range=(10, 20)),
            ],
        )
        result = place_rooms(plan)
        assert validate_room_placement(plan.plot, result.rooms) == []

    def test_collects_all_checks(self, plot):
        rooms = [_room("a", -1, 0, 4, 10), _room("b", 2, 0, 10, 10)]
        messages = [e.message for e in validate_room_placement(plot, rooms)]
        assert any("negative" in m for m in messages)
        assert any("minimum" in m for m in messages)
        assert any("overlap" in m for m in messages)


class TestAdjacencies:
    def test_satisfied(self):
        rooms = [_room("a", 0, 0, 10, 10), _room("b", 10, 0, 10, 10)]
        adj = [Adjacency(room_id="a", adjacent_to="b", strength="required")]
        assert validate_adjacencies(rooms, adj) == []

    def test_required_unmet_is_error(self):
        rooms = [_room("a", 0, 0, 10, 10), _room("b", 11, 0, 9, 10)]
        errors = validate_adjacencies(rooms, [Adjacency(room_id="a", adjacent_to="b", strength="required")])
        assert len(errors) == 1
        assert errors[0].severity == "error"
        assert errors[0].message.startswith("Required adjacency not satisfied")

    def test_preferred_unmet_is_warning(self):
        rooms = [_room("a", 0, 0, 10, 10), _room("b", 11, 0, 9, 10)]
        errors = validate_adjacencies(rooms, [Adjacency(room_id="a", adjacent_to="b", strength="preferred")])
        assert len(errors) == 1
        assert errors[0].severity == "warning"

    def test_unknown_room(self):
        errors = validate_adjacencies(
            [_room("a", 0, 0, 10, 10)],
            [Adjacency(room_id="a", adjacent_to="ghost")],
        )
        assert len(errors) == 1
        assert "unknown room ID 'ghost'" in errors[0].message


# ── Doors ─────────────────────────────────────────────────────────


class TestDoors:
    def test_valid_doors(self, bath_kitchen):
        errors = validate_doors(bath_kitchen.plot, bath_kitchen.rooms, bath_kitchen.doors)
        assert errors == []

    def test_exterior_door_off_boundary(self, bath_kitchen):
        doors = [_door("d1", "kitchen", None, 15, 4)]
        errors = validate_doors(bath_kitchen.plot, bath_kitchen.rooms, doors)
        assert len(errors) == 1
        assert errors[0].severity == "warning"
        assert "not on a plot boundary" in errors[0].message

    def test_exterior_door_unknown_room(self, bath_kitchen):
        doors = [_door("d1", "ghost", None, 0, 4)]
        errors = validate_doors(bath_kitchen.plot, bath_kitchen.rooms, doors)
        assert [e.severity for e in errors] == ["error"]

    def test_unknown_to_room(self, bath_kitchen):
        doors = [_door("d2", "bath", "ghost", 10, 3)]
        errors = validate_doors(bath_kitchen.plot, bath_kitchen.rooms, doors)
        assert len(errors) == 1
        assert errors[0].severity == "error"
        assert "unknown toRoomId 'ghost'" in errors[0].message

    def test_unknown_from_room(self, bath_kitchen):
        doors = [_door("d2", "ghost", "bath", 10, 3)]
        errors = validate_doors(bath_kitchen.plot, bath_kitchen.rooms, doors)
        assert "unknown fromRoomId 'ghost'" in errors[0].message

    def test_rooms_not_sharing_wall(self):
        plot = Plot(width=30, height=10)
        rooms = [_room("a", 0, 0, 10, 10), _room("b", 20, 0, 10, 10)]
        errors = validate_doors(plot, rooms, [_door("d", "a", "b", 10, 3)])
        assert len(errors) == 1
        assert errors[0].severity == "warning"
        assert "don't share a wall" in errors[0].message


# ── Windows ───────────────────────────────────────────────────────


class TestWindows:
    def test_valid_exterior_window(self, bath_kitchen):
        errors = validate_windows(bath_kitchen.plot, bath_kitchen.rooms, bath_kitchen.windows)
        assert errors == []

    def test_vertical_window_on_side_wall(self, bath_kitchen):
        windows = [Window(id="w", room_id="bath", x=0, y=2, width=4, orientation="vertical")]
        assert validate_windows(bath_kitchen.plot, bath_kitchen.rooms, windows) == []

    def test_window_on_interior_wall(self, bath_kitchen):
        windows = [Window(id="w", room_id="bath", x=10, y=2, width=4, orientation="vertical")]
        errors = validate_windows(bath_kitchen.plot, bath_kitchen.rooms, windows)
        assert len(errors) == 1
        assert "interior wall" in errors[0].message

    def test_window_not_on_room_edge(self, bath_kitchen):
        windows = [Window(id="w", room_id="bath", x=2, y=5, width=4, orientation="horizontal")]
        errors = validate_windows(bath_kitchen.plot, bath_kitchen.rooms, windows)
        assert len(errors) == 1
        assert "not on a horizontal edge" in errors[0].message

    def test_window_extends_past_room(self, bath_kitchen):
        windows = [Window(id="w", room_id="bath", x=8, y=0, width=4, orientation="horizontal")]
        errors = validate_windows(bath_kitchen.plot, bath_kitchen.rooms, windows)
        assert len(errors) == 1
        assert "extends outside room" in errors[0].message

    def test_window_unknown_room(self, bath_kitchen):
        windows = [Window(id="w", room_id="ghost", x=8, y=0, width=4, orientation="horizontal")]
        errors = validate_windows(bath_kitchen.plot, bath_kitchen.rooms, windows)
        assert [e.severity for e in errors] == ["error"]


class TestFloorPlan:
    def test_clean_plan(self, bath_kitchen):
        assert validate_floor_plan(bath_kitchen) == []

    def test_adjacencies_checked_when_given(self, bath_kitchen):
        adj = [Adjacency(room_id="bath", adjacent_to="ghost", strength="required")]
        errors = validate_floor_plan(bath_kitchen, adj)
        assert len(errors) == 1
        assert errors[0].element_type == "Adjacency"

    def test_repeatable(self, bath_kitchen):
        first = validate_floor_plan(bath_kitchen)
        second = validate_floor_plan(bath_kitchen)
        assert first == second
