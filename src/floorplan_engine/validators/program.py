"""Room program feasibility checks (no geometry).

Run before placement to catch programs that can't produce a sound plan:
room count, unique ids, total area vs plot, dimension ranges, entry room,
adjacency references and zoning sanity.
"""

from __future__ import annotations

from floorplan_engine.models.rooms import RoomPlan, RoomType, Zone, max_aspect_ratio, min_dimension
from floorplan_engine.validators.geometry import ValidationError

MAX_ROOMS = 30

# Total target area must land between these fractions of the plot area.
MAX_AREA_RATIO = 1.05
MIN_AREA_RATIO = 0.6


def validate_room_plan(plan: RoomPlan) -> list[ValidationError]:
    """Check a room program before it is handed to the placement engine."""
    errors: list[ValidationError] = []

    if not plan.rooms:
        errors.append(_error("Room plan must have at least 1 room."))
        return errors
    if len(plan.rooms) > MAX_ROOMS:
        errors.append(_error(f"Too many rooms ({len(plan.rooms)}). Maximum is {MAX_ROOMS}."))

    ids: set[str] = set()
    for room in plan.rooms:
        if room.id in ids:
            errors.append(_error(f"Duplicate room ID '{room.id}'.", room.id))
        ids.add(room.id)

    errors.extend(_validate_total_area(plan))
    errors.extend(_validate_room_ranges(plan))

    if plan.entry_room_id not in ids:
        errors.append(_error(
            f"entryRoomId '{plan.entry_room_id}' does not match any room ID."
        ))

    for adj in plan.adjacencies:
        if adj.room_id == adj.adjacent_to:
            errors.append(_error(
                f"Self-adjacency: room '{adj.room_id}' listed as adjacent to itself.",
                adj.room_id,
            ))
        for ref in (adj.room_id, adj.adjacent_to):
            if ref not in ids:
                errors.append(_error(f"Adjacency references unknown room ID '{ref}'.", ref))

    errors.extend(_validate_zoning(plan))
    return errors


def _validate_total_area(plan: RoomPlan) -> list[ValidationError]:
    errors: list[ValidationError] = []
    plot_area = plan.plot.width * plan.plot.height
    total = plan.total_target_area

    if total > plot_area * MAX_AREA_RATIO:
        over = round((total / plot_area - 1) * 100)
        errors.append(_error(
            f"Total room area ({total:g} sqft) exceeds plot capacity "
            f"({plot_area:g} sqft) by {over}%. Reduce room sizes or increase plot."
        ))
    if total < plot_area * MIN_AREA_RATIO:
        used = round(total / plot_area * 100)
        errors.append(_warning(
            f"Total room area ({total:g} sqft) uses only {used}% of plot "
            f"({plot_area:g} sqft). Consider adding rooms or increasing room sizes."
        ))
    return errors


def _validate_room_ranges(plan: RoomPlan) -> list[ValidationError]:
    """Per-room dimension range checks."""
    errors: list[ValidationError] = []

    for room in plan.rooms:
        min_dim = min_dimension(room.type)
        min_w, max_w = room.width_range
        min_h, max_h = room.height_range

        # Inverted ranges are rejected when PlannedRoom is constructed.
        if min_w < min_dim:
            errors.append(_error(
                f"Room '{room.name}' ({room.type.value}) min width {min_w:g}ft "
                f"is below {min_dim:g}ft minimum.",
                room.id,
            ))
        if min_h < min_dim:
            errors.append(_error(
                f"Room '{room.name}' ({room.type.value}) min height {min_h:g}ft "
                f"is below {min_dim:g}ft minimum.",
                room.id,
            ))

        if max_w > plan.plot.width:
            errors.append(_warning(
                f"Room '{room.name}' max width ({max_w:g}ft) exceeds plot width "
                f"({plan.plot.width:g}ft).",
                room.id,
            ))
        if max_h > plan.plot.height:
            errors.append(_warning(
                f"Room '{room.name}' max height ({max_h:g}ft) exceeds plot height "
                f"({plan.plot.height:g}ft).",
                room.id,
            ))

        if min_w > 0 and min_h > 0:
            limit = max_aspect_ratio(room.type)
            worst = max(max_w / min_h, max_h / min_w)
            if worst > limit:
                errors.append(_warning(
                    f"Room '{room.name}' dimension ranges could produce aspect ratio "
                    f"{worst:.1f}:1 (limit: {limit:g}:1). Narrow the ranges.",
                    room.id,
                ))

    return errors


def _validate_zoning(plan: RoomPlan) -> list[ValidationError]:
    """Zoning sanity warnings and the kitchen-dining adjacency intent."""
    errors: list[ValidationError] = []

    entry = plan.get_room(plan.entry_room_id)
    if entry is not None and entry.zone != Zone.PUBLIC:
        errors.append(_warning(
            f"Entry room '{entry.name}' is in '{entry.zone.value}' zone, "
            f"should typically be 'public'.",
            entry.id,
        ))
    for room in plan.rooms:
        if room.type == RoomType.BEDROOM and room.zone != Zone.PRIVATE:
            errors.append(_warning(
                f"Bedroom '{room.name}' is in '{room.zone.value}' zone, "
                f"should typically be 'private'.",
                room.id,
            ))

    kitchens = {r.id for r in plan.rooms if r.type == RoomType.KITCHEN}
    dining = {r.id for r in plan.rooms if r.type == RoomType.DINING_ROOM}
    if kitchens and dining:
        linked = any(
            (a.room_id in kitchens and a.adjacent_to in dining)
            or (a.room_id in dining and a.adjacent_to in kitchens)
            for a in plan.adjacencies
        )
        if not linked:
            errors.append(_warning(
                "Kitchen and dining room exist but no adjacency requirement "
                "between them. Consider adding one."
            ))

    return errors


def _error(message: str, element_id: str = "") -> ValidationError:
    return ValidationError(
        severity="error", element_type="RoomPlan", element_id=element_id, message=message
    )


def _warning(message: str, element_id: str = "") -> ValidationError:
    return ValidationError(
        severity="warning", element_type="RoomPlan", element_id=element_id, message=message
    )
