"""Door and window validation for a finalized floor plan.

Second validation pass, run after the finalizer has added openings:
- exterior doors sit on the plot boundary
- interior doors join two existing rooms that share a wall
- windows sit on an exterior wall of their room, within the room's extent
"""

from __future__ import annotations

from floorplan_engine.models.elements import Door, Orientation, Window
from floorplan_engine.models.floorplan import FloorPlan
from floorplan_engine.models.geometry import WALL_TOLERANCE, Plot
from floorplan_engine.models.rooms import Adjacency, Room
from floorplan_engine.validators.geometry import (
    ValidationError,
    validate_adjacencies,
    validate_room_placement,
)


def validate_floor_plan(
    floor_plan: FloorPlan,
    adjacencies: list[Adjacency] | None = None,
) -> list[ValidationError]:
    """Run every geometry, adjacency and opening check on a floor plan."""
    errors = validate_room_placement(floor_plan.plot, floor_plan.rooms)
    if adjacencies:
        errors.extend(validate_adjacencies(floor_plan.rooms, adjacencies))
    errors.extend(validate_doors(floor_plan.plot, floor_plan.rooms, floor_plan.doors))
    errors.extend(validate_windows(floor_plan.plot, floor_plan.rooms, floor_plan.windows))
    return errors


def validate_doors(
    plot: Plot,
    rooms: list[Room],
    doors: list[Door],
    tolerance: float = WALL_TOLERANCE,
) -> list[ValidationError]:
    """Check door placement and room references."""
    errors: list[ValidationError] = []
    by_id = {r.id: r for r in rooms}

    for door in doors:
        from_room = by_id.get(door.from_room_id)

        if door.is_exterior:
            if from_room is None:
                errors.append(_door_error(door, f"unknown fromRoomId '{door.from_room_id}'"))
            if not plot.on_plot_boundary(door.x, door.y):
                errors.append(ValidationError(
                    severity="warning",
                    element_type="Door",
                    element_id=door.id,
                    message=(
                        f"Exterior door '{door.id}' is not on a plot boundary edge "
                        f"(x:{door.x:g}, y:{door.y:g})."
                    ),
                ))
            continue

        if from_room is None:
            errors.append(_door_error(door, f"unknown fromRoomId '{door.from_room_id}'"))
            continue
        to_room = by_id.get(door.to_room_id)
        if to_room is None:
            errors.append(_door_error(door, f"unknown toRoomId '{door.to_room_id}'"))
            continue

        if not from_room.shares_wall(to_room, tolerance):
            errors.append(ValidationError(
                severity="warning",
                element_type="Door",
                element_id=door.id,
                message=(
                    f"Door '{door.id}' connects '{from_room.name}' and "
                    f"'{to_room.name}' but they don't share a wall."
                ),
            ))

    return errors


def _door_error(door: Door, detail: str) -> ValidationError:
    return ValidationError(
        severity="error",
        element_type="Door",
        element_id=door.id,
        message=f"Door '{door.id}' references {detail}.",
    )


def validate_windows(
    plot: Plot,
    rooms: list[Room],
    windows: list[Window],
) -> list[ValidationError]:
    """Check that each window sits on an exterior wall of its room.

    A horizontal window's y must equal its room's top or bottom edge and
    that edge must be the plot's top or bottom boundary; its x-span must
    stay within the room. Vertical windows are the same with axes swapped.
    """
    errors: list[ValidationError] = []
    by_id = {r.id: r for r in rooms}

    for win in windows:
        room = by_id.get(win.room_id)
        if room is None:
            errors.append(ValidationError(
                severity="error",
                element_type="Window",
                element_id=win.id,
                message=f"Window '{win.id}' references unknown roomId '{win.room_id}'.",
            ))
            continue

        if win.orientation == Orientation.HORIZONTAL:
            fixed, axis = win.y, "y"
            room_edges = (room.y, room.bottom)
            plot_edges = (0, plot.height)
            span_start, span_end = room.x, room.right
            along = win.x
            edge_kind = "horizontal"
        else:
            fixed, axis = win.x, "x"
            room_edges = (room.x, room.right)
            plot_edges = (0, plot.width)
            span_start, span_end = room.y, room.bottom
            along = win.y
            edge_kind = "vertical"

        if fixed not in room_edges:
            errors.append(_window_warning(
                win,
                f"Window '{win.id}' {axis}={fixed:g} is not on a {edge_kind} "
                f"edge of room '{room.name}'.",
            ))
        elif fixed not in plot_edges:
            errors.append(_window_warning(
                win,
                f"Window '{win.id}' is on an interior wall, not an exterior "
                f"wall ({axis}={fixed:g}).",
            ))

        if along < span_start or along + win.width > span_end:
            errors.append(_window_warning(
                win,
                f"Window '{win.id}' extends outside room '{room.name}' along the wall.",
            ))

    return errors


def _window_warning(win: Window, message: str) -> ValidationError:
    return ValidationError(
        severity="warning",
        element_type="Window",
        element_id=win.id,
        message=message,
    )
