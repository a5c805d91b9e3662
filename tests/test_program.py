"""Tests for room program feasibility checks."""

import pytest

from floorplan_engine.models import Adjacency, PlannedRoom, Plot, RoomPlan, RoomType, Zone
from floorplan_engine.validators.program import MAX_ROOMS, validate_room_plan


def _planned(room_id, room_type=RoomType.OTHER, zone=Zone.PUBLIC, area=300.0,
             width=(10, 20), height=(10, 20)) -> PlannedRoom:
    return PlannedRoom(
        id=room_id, name=room_id.title(), type=room_type, zone=zone,
        target_area=area, width_range=width, height_range=height,
    )


@pytest.fixture
def plan() -> RoomPlan:
    """A feasible two-room program on a 30x20 plot."""
    return RoomPlan(
        plot=Plot(width=30, height=20),
        rooms=[
            _planned("living", RoomType.LIVING_ROOM, Zone.PUBLIC),
            _planned("bed", RoomType.BEDROOM, Zone.PRIVATE),
        ],
        entry_room_id="living",
    )


def _messages(errors, severity=None):
    return [e.message for e in errors if severity is None or e.severity == severity]


class TestRoomPlan:
    def test_feasible_plan(self, plan):
        assert validate_room_plan(plan) == []

    def test_no_rooms(self):
        errors = validate_room_plan(RoomPlan(plot=Plot(width=30, height=20)))
        assert _messages(errors) == ["Room plan must have at least 1 room."]

    def test_too_many_rooms(self):
        rooms = [_planned(f"r{i}", area=20, width=(5, 6), height=(5, 6)) for i in range(MAX_ROOMS + 1)]
        plan = RoomPlan(plot=Plot(width=30, height=20), rooms=rooms, entry_room_id="r0")
        assert any("Too many rooms (31)" in m for m in _messages(validate_room_plan(plan), "error"))

    def test_duplicate_ids(self, plan):
        plan.rooms.append(_planned("bed", RoomType.BEDROOM, Zone.PRIVATE, area=0))
        errors = validate_room_plan(plan)
        assert "Duplicate room ID 'bed'." in _messages(errors, "error")

    def test_unknown_entry(self, plan):
        plan.entry_room_id = "porch"
        assert any("entryRoomId 'porch'" in m for m in _messages(validate_room_plan(plan), "error"))

    def test_ids_reported(self, plan):
        plan.rooms.append(_planned("bed", RoomType.BEDROOM, Zone.PRIVATE, area=0))
        dup = [e for e in validate_room_plan(plan) if e.message.startswith("Duplicate")]
        assert dup[0].element_id == "bed"
        assert dup[0].element_type == "RoomPlan"


class TestArea:
    def test_over_capacity(self, plan):
        plan.rooms[0] = _planned("living", RoomType.LIVING_ROOM, Zone.PUBLIC, area=400)
        errors = validate_room_plan(plan)
        assert any("exceeds plot capacity (600 sqft) by 17%" in m for m in _messages(errors, "error"))

    def test_within_slack(self, plan):
        plan.rooms[0] = _planned("living", RoomType.LIVING_ROOM, Zone.PUBLIC, area=320)
        assert validate_room_plan(plan) == []

    def test_under_used(self, plan):
        plan.rooms[0] = _planned("living", RoomType.LIVING_ROOM, Zone.PUBLIC, area=30)
        errors = validate_room_plan(plan)
        assert any("uses only 55% of plot" in m for m in _messages(errors, "warning"))
        assert _messages(errors, "error") == []


class TestRanges:
    def test_min_width_below_type_minimum(self, plan):
        plan.rooms[1] = _planned("bed", RoomType.BEDROOM, Zone.PRIVATE, width=(4, 12), height=(10, 12))
        errors = validate_room_plan(plan)
        assert any("min width 4ft is below 5ft minimum" in m for m in _messages(errors, "error"))

    def test_hallway_may_be_narrow(self, plan):
        plan.rooms[1] = _planned("hall", RoomType.HALLWAY, Zone.SERVICE, width=(3, 12), height=(10, 20))
        plan.adjacencies = []
        assert _messages(validate_room_plan(plan), "error") == []

    def test_max_beyond_plot(self, plan):
        plan.rooms[1] = _planned("bed", RoomType.BEDROOM, Zone.PRIVATE, width=(10, 35), height=(10, 20))
        errors = validate_room_plan(plan)
        assert any("max width (35ft) exceeds plot width (30ft)" in m for m in _messages(errors, "warning"))

    def test_worst_case_aspect_ratio(self, plan):
        plan.rooms[1] = _planned("bed", RoomType.BEDROOM, Zone.PRIVATE, width=(5, 25), height=(5, 6))
        errors = validate_room_plan(plan)
        assert any("aspect ratio 5.0:1 (limit: 4:1)" in m for m in _messages(errors, "warning"))


class TestAdjacencyReferences:
    def test_self_adjacency(self, plan):
        plan.adjacencies = [Adjacency(room_id="bed", adjacent_to="bed")]
        errors = validate_room_plan(plan)
        assert any("Self-adjacency" in m for m in _messages(errors, "error"))

    def test_unknown_reference(self, plan):
        plan.adjacencies = [Adjacency(room_id="bed", adjacent_to="ghost")]
        errors = validate_room_plan(plan)
        assert "Adjacency references unknown room ID 'ghost'." in _messages(errors, "error")


class TestZoning:
    def test_entry_not_public(self, plan):
        plan.entry_room_id = "bed"
        errors = validate_room_plan(plan)
        assert any("Entry room 'Bed' is in 'private' zone" in m for m in _messages(errors, "warning"))

    def test_bedroom_not_private(self, plan):
        plan.rooms[1] = _planned("bed", RoomType.BEDROOM, Zone.PUBLIC)
        errors = validate_room_plan(plan)
        assert any("Bedroom 'Bed' is in 'public' zone" in m for m in _messages(errors, "warning"))

    def test_kitchen_dining_without_adjacency(self, plan):
        plan.rooms = [
            _planned("kitchen", RoomType.KITCHEN, Zone.SERVICE),
            _planned("dining", RoomType.DINING_ROOM, Zone.PUBLIC),
        ]
        plan.entry_room_id = "dining"
        assert any("no adjacency requirement" in m for m in _messages(validate_room_plan(plan), "warning"))

        plan.adjacencies = [Adjacency(room_id="dining", adjacent_to="kitchen", strength="required")]
        assert validate_room_plan(plan) == []
