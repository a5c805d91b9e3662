"""Geometry validation for placed rooms.

Pure checks over (plot, rooms) that return findings instead of raising,
so a caller can run them on every generate → validate → fix iteration:
- bounds: rooms inside the plot
- minimum dimension by room type
- aspect ratio by room type
- pairwise overlap
- adjacency satisfaction (rooms that should share a wall)
"""

from __future__ import annotations

from dataclasses import dataclass

from floorplan_engine.models.geometry import WALL_TOLERANCE, Plot
from floorplan_engine.models.rooms import Adjacency, Room


@dataclass
class ValidationError:
    """A single validation finding."""

    severity: str  # "error" | "warning"
    message: str
    element_type: str = ""
    element_id: str = ""


def validate_room_placement(plot: Plot, rooms: list[Room]) -> list[ValidationError]:
    """Run all room geometry checks (bounds, dimensions, ratios, overlaps)."""
    errors: list[ValidationError] = []
    errors.extend(validate_bounds(plot, rooms))
    errors.extend(validate_min_dimensions(rooms))
    errors.extend(validate_aspect_ratios(rooms))
    errors.extend(validate_overlaps(rooms))
    return errors


def validate_bounds(plot: Plot, rooms: list[Room]) -> list[ValidationError]:
    """Every room must lie within [0, plot.width] × [0, plot.height]."""
    errors: list[ValidationError] = []
    for room in rooms:
        if room.x < 0 or room.y < 0:
            errors.append(ValidationError(
                severity="error",
                element_type="Room",
                element_id=room.id,
                message=(
                    f"Room '{room.name}' has negative coordinates "
                    f"(x:{room.x:g}, y:{room.y:g})."
                ),
            ))
        if room.right > plot.width:
            errors.append(ValidationError(
                severity="error",
                element_type="Room",
                element_id=room.id,
                message=(
                    f"Room '{room.name}' exceeds plot width: x({room.x:g}) + "
                    f"width({room.width:g}) = {room.right:g} > plot width({plot.width:g})."
                ),
            ))
        if room.bottom > plot.height:
            errors.append(ValidationError(
                severity="error",
                element_type="Room",
                element_id=room.id,
                message=(
                    f"Room '{room.name}' exceeds plot height: y({room.y:g}) + "
                    f"height({room.height:g}) = {room.bottom:g} > plot height({plot.height:g})."
                ),
            ))
    return errors


def validate_min_dimensions(rooms: list[Room]) -> list[ValidationError]:
    """Width and height must meet the room type's minimum (3ft hallway, else 5ft)."""
    errors: list[ValidationError] = []
    for room in rooms:
        min_dim = room.min_dimension
        if room.width < min_dim or room.height < min_dim:
            errors.append(ValidationError(
                severity="error",
                element_type="Room",
                element_id=room.id,
                message=(
                    f"Room '{room.name}' ({room.type.value}) has a dimension below "
                    f"{min_dim:g}ft minimum: {room.width:g}x{room.height:g}."
                ),
            ))
    return errors


def validate_aspect_ratios(rooms: list[Room]) -> list[ValidationError]:
    """Long side / short side must stay within the type limit (8 hallway, else 4)."""
    errors: list[ValidationError] = []
    for room in rooms:
        longer = max(room.width, room.height)
        shorter = min(room.width, room.height)
        if shorter == 0:
            errors.append(ValidationError(
                severity="error",
                element_type="Room",
                element_id=room.id,
                message=(
                    f"Room '{room.name}' has a zero dimension: "
                    f"{room.width:g}x{room.height:g}."
                ),
            ))
            continue
        ratio = longer / shorter
        max_ratio = room.max_aspect_ratio
        if ratio > max_ratio:
            errors.append(ValidationError(
                severity="error",
                element_type="Room",
                element_id=room.id,
                message=(
                    f"Room '{room.name}' aspect ratio {ratio:.1f}:1 exceeds "
                    f"{max_ratio:g}:1 limit ({room.width:g}x{room.height:g})."
                ),
            ))
    return errors


def validate_overlaps(rooms: list[Room]) -> list[ValidationError]:
    """No two rooms may intersect with positive area."""
    errors: list[ValidationError] = []
    for i, a in enumerate(rooms):
        for b in rooms[i + 1:]:
            if a.overlaps(b):
                area = a.overlap_area(b)
                errors.append(ValidationError(
                    severity="error",
                    element_type="Room",
                    element_id=a.id,
                    message=(
                        f"Rooms '{a.name}' and '{b.name}' overlap by ~{area:g} sqft. "
                        f"A: ({a.x:g},{a.y:g}) {a.width:g}x{a.height:g}, "
                        f"B: ({b.x:g},{b.y:g}) {b.width:g}x{b.height:g}."
                    ),
                ))
    return errors


def validate_adjacencies(
    rooms: list[Room],
    adjacencies: list[Adjacency],
    tolerance: float = WALL_TOLERANCE,
) -> list[ValidationError]:
    """Check that rooms meant to be adjacent actually share a wall.

    Unmet required adjacency → error, unmet preferred → warning. An
    adjacency naming a room that doesn't exist → error.
    """
    errors: list[ValidationError] = []
    by_id = {r.id: r for r in rooms}

    for adj in adjacencies:
        a = by_id.get(adj.room_id)
        b = by_id.get(adj.adjacent_to)
        if a is None or b is None:
            missing = adj.room_id if a is None else adj.adjacent_to
            errors.append(ValidationError(
                severity="error",
                element_type="Adjacency",
                element_id=missing,
                message=f"Adjacency references unknown room ID '{missing}'.",
            ))
            continue
        if not a.shares_wall(b, tolerance):
            label = "Required" if adj.is_required else "Preferred"
            errors.append(ValidationError(
                severity="error" if adj.is_required else "warning",
                element_type="Adjacency",
                element_id=a.id,
                message=(
                    f"{label} adjacency not satisfied: '{a.name}' and "
                    f"'{b.name}' do not share a wall."
                ),
            ))
    return errors
