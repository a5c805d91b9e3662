"""Reachability reviewer: architectural rules over the door graph.

Builds the door graph, runs BFS from the entrance and applies a fixed
battery of rules. Each rule returns zero or more issues.

Issue codes:
    NO_ENTRANCE: no entrance room or exterior door → CRITICAL
    UNREACHABLE_ROOM: room not reachable from the entrance → CRITICAL
    BATHROOM_TO_BATHROOM: door joins two bathrooms → CRITICAL
    BATHROOM_TO_KITCHEN: door joins a bathroom and a kitchen → CRITICAL
    BATHROOM_TO_PUBLIC: door joins a bathroom and a living/dining room → WARNING
    BEDROOM_THROUGH_BEDROOM: path to a bedroom passes another bedroom → WARNING
    KITCHEN_DINING_DISCONNECTED: kitchen and dining room share no wall → WARNING
    MISSING_WINDOW: habitable room without a window → WARNING
    FAR_BATHROOM: nearest bathroom more than 2 doors from a bedroom → SUGGESTION
    DEEP_NESTING: room 4+ doors from the entrance → SUGGESTION
"""

from __future__ import annotations

from dataclasses import dataclass, field

from floorplan_engine.models.floorplan import FloorPlan
from floorplan_engine.models.rooms import HABITABLE_TYPES, Room, RoomType
from floorplan_engine.queries.door_graph import (
    BFSNode,
    DoorGraph,
    build_door_graph,
    find_entrance_room_id,
)

_PUBLIC_TYPES = {RoomType.LIVING_ROOM, RoomType.DINING_ROOM}

ALL_PASSED_SUMMARY = "All checks passed — no architectural issues found"


@dataclass
class ReviewIssue:
    """A single review finding."""

    severity: str  # "critical" | "warning" | "suggestion"
    code: str
    message: str
    affected_rooms: list[str] = field(default_factory=list)


@dataclass
class ReviewResult:
    """Outcome of a review. ``passed`` is False iff any issue is critical."""

    issues: list[ReviewIssue]
    summary: str
    passed: bool

    @property
    def critical_count(self) -> int:
        return sum(1 for i in self.issues if i.severity == "critical")

    @property
    def warning_count(self) -> int:
        return sum(1 for i in self.issues if i.severity == "warning")

    @property
    def suggestion_count(self) -> int:
        return sum(1 for i in self.issues if i.severity == "suggestion")

    def codes(self) -> list[str]:
        """Issue codes in report order."""
        return [i.code for i in self.issues]


def review_floor_plan(floor_plan: FloorPlan) -> ReviewResult:
    """Run every reachability and room-relationship rule on a floor plan."""
    rooms = floor_plan.room_map()
    graph = build_door_graph(floor_plan)
    entrance_id = find_entrance_room_id(floor_plan)
    visited = graph.bfs(entrance_id) if entrance_id is not None else {}

    issues: list[ReviewIssue] = []
    issues.extend(check_reachability(floor_plan, visited, entrance_id))
    issues.extend(check_bathroom_to_bathroom(floor_plan, rooms))
    issues.extend(check_bathroom_to_kitchen(floor_plan, rooms))
    issues.extend(check_bathroom_to_public(floor_plan, rooms))
    issues.extend(check_bedroom_through_bedroom(floor_plan, rooms, visited))
    issues.extend(check_kitchen_dining_adjacency(floor_plan))
    issues.extend(check_missing_windows(floor_plan))
    issues.extend(check_bathroom_distance(floor_plan, graph))
    issues.extend(check_deep_nesting(floor_plan, visited))
    return build_result(issues)


def build_result(issues: list[ReviewIssue]) -> ReviewResult:
    """Wrap issues with a tally summary and the pass flag."""
    criticals = sum(1 for i in issues if i.severity == "critical")
    warnings = sum(1 for i in issues if i.severity == "warning")
    suggestions = sum(1 for i in issues if i.severity == "suggestion")

    parts: list[str] = []
    if criticals:
        parts.append(f"{criticals} critical")
    if warnings:
        parts.append(f"{warnings} warning{'s' if warnings > 1 else ''}")
    if suggestions:
        parts.append(f"{suggestions} suggestion{'s' if suggestions > 1 else ''}")

    summary = ", ".join(parts) if parts else ALL_PASSED_SUMMARY
    return ReviewResult(issues=issues, summary=summary, passed=criticals == 0)


# ── Rules ────────────────────────────────────────────────────────────


def check_reachability(
    floor_plan: FloorPlan,
    visited: dict[str, BFSNode],
    entrance_id: str | None,
) -> list[ReviewIssue]:
    """NO_ENTRANCE / UNREACHABLE_ROOM."""
    if entrance_id is None:
        return [ReviewIssue(
            severity="critical",
            code="NO_ENTRANCE",
            message=(
                "No entrance room or exterior door found. "
                "Every floor plan needs an entrance."
            ),
        )]

    issues: list[ReviewIssue] = []
    for room in floor_plan.rooms:
        if room.id not in visited:
            issues.append(ReviewIssue(
                severity="critical",
                code="UNREACHABLE_ROOM",
                message=(
                    f"'{room.name}' ({room.type.value}) is not reachable from the "
                    f"entrance. Add a door connecting it to an accessible room."
                ),
                affected_rooms=[room.id],
            ))
    return issues


def _interior_door_pairs(
    floor_plan: FloorPlan, rooms: dict[str, Room]
) -> list[tuple[Room, Room]]:
    """(from, to) room pairs for every interior door whose rooms exist."""
    pairs = []
    for door in floor_plan.doors:
        if door.to_room_id is None:
            continue
        a = rooms.get(door.from_room_id)
        b = rooms.get(door.to_room_id)
        if a is not None and b is not None:
            pairs.append((a, b))
    return pairs


def check_bathroom_to_bathroom(
    floor_plan: FloorPlan, rooms: dict[str, Room]
) -> list[ReviewIssue]:
    """BATHROOM_TO_BATHROOM: bathrooms must not open into each other."""
    issues: list[ReviewIssue] = []
    for a, b in _interior_door_pairs(floor_plan, rooms):
        if a.type == RoomType.BATHROOM and b.type == RoomType.BATHROOM:
            issues.append(ReviewIssue(
                severity="critical",
                code="BATHROOM_TO_BATHROOM",
                message=(
                    f"'{a.name}' and '{b.name}' are connected by a door. "
                    f"Bathrooms should not open into each other."
                ),
                affected_rooms=[a.id, b.id],
            ))
    return issues


def check_bathroom_to_kitchen(
    floor_plan: FloorPlan, rooms: dict[str, Room]
) -> list[ReviewIssue]:
    """BATHROOM_TO_KITCHEN: a bathroom must not open into a kitchen."""
    issues: list[ReviewIssue] = []
    for a, b in _interior_door_pairs(floor_plan, rooms):
        if {a.type, b.type} == {RoomType.BATHROOM, RoomType.KITCHEN}:
            bath, kitchen = (a, b) if a.type == RoomType.BATHROOM else (b, a)
            issues.append(ReviewIssue(
                severity="critical",
                code="BATHROOM_TO_KITCHEN",
                message=(
                    f"'{bath.name}' opens directly into '{kitchen.name}'. "
                    f"Route bathroom access through a hallway instead."
                ),
                affected_rooms=[a.id, b.id],
            ))
    return issues


def check_bathroom_to_public(
    floor_plan: FloorPlan, rooms: dict[str, Room]
) -> list[ReviewIssue]:
    """BATHROOM_TO_PUBLIC: bathrooms should open into hallways or bedrooms."""
    issues: list[ReviewIssue] = []
    for a, b in _interior_door_pairs(floor_plan, rooms):
        if a.type == RoomType.BATHROOM and b.type in _PUBLIC_TYPES:
            bath, public = a, b
        elif b.type == RoomType.BATHROOM and a.type in _PUBLIC_TYPES:
            bath, public = b, a
        else:
            continue
        issues.append(ReviewIssue(
            severity="warning",
            code="BATHROOM_TO_PUBLIC",
            message=(
                f"'{bath.name}' opens directly into '{public.name}'. Bathrooms "
                f"should open into hallways or bedrooms, not public rooms."
            ),
            affected_rooms=[a.id, b.id],
        ))
    return issues


def check_bedroom_through_bedroom(
    floor_plan: FloorPlan,
    rooms: dict[str, Room],
    visited: dict[str, BFSNode],
) -> list[ReviewIssue]:
    """BEDROOM_THROUGH_BEDROOM: one issue per unordered bedroom pair."""
    issues: list[ReviewIssue] = []
    seen: set[tuple[str, str]] = set()

    for room in floor_plan.rooms:
        if room.type != RoomType.BEDROOM:
            continue
        node = visited.get(room.id)
        if node is None:
            continue

        for step in node.path[1:-1]:
            intermediate = rooms.get(step)
            if intermediate is None or intermediate.type != RoomType.BEDROOM:
                continue
            pair = tuple(sorted((room.id, intermediate.id)))
            if pair in seen:
                continue
            seen.add(pair)
            issues.append(ReviewIssue(
                severity="warning",
                code="BEDROOM_THROUGH_BEDROOM",
                message=(
                    f"'{room.name}' is only accessible by passing through "
                    f"'{intermediate.name}'. Add a hallway to provide "
                    f"independent access."
                ),
                affected_rooms=[room.id, intermediate.id],
            ))
            break

    return issues


def check_kitchen_dining_adjacency(floor_plan: FloorPlan) -> list[ReviewIssue]:
    """KITCHEN_DINING_DISCONNECTED: only when both room types exist."""
    kitchens = floor_plan.rooms_of_type(RoomType.KITCHEN)
    dining = floor_plan.rooms_of_type(RoomType.DINING_ROOM)
    if not kitchens or not dining:
        return []

    for kitchen in kitchens:
        for dining_room in dining:
            if kitchen.shares_wall(dining_room):
                return []

    return [ReviewIssue(
        severity="warning",
        code="KITCHEN_DINING_DISCONNECTED",
        message=(
            "Kitchen and dining room don't share a wall. "
            "They should be adjacent for functional flow."
        ),
        affected_rooms=[r.id for r in kitchens] + [r.id for r in dining],
    )]


def check_missing_windows(floor_plan: FloorPlan) -> list[ReviewIssue]:
    """MISSING_WINDOW: habitable rooms need natural light."""
    with_windows = {w.room_id for w in floor_plan.windows}
    issues: list[ReviewIssue] = []
    for room in floor_plan.rooms:
        if room.type in HABITABLE_TYPES and room.id not in with_windows:
            issues.append(ReviewIssue(
                severity="warning",
                code="MISSING_WINDOW",
                message=(
                    f"'{room.name}' ({room.type.value}) has no window. "
                    f"Habitable rooms need natural light."
                ),
                affected_rooms=[room.id],
            ))
    return issues


def check_bathroom_distance(
    floor_plan: FloorPlan,
    graph: DoorGraph,
    max_hops: int = 2,
) -> list[ReviewIssue]:
    """FAR_BATHROOM: BFS from each bedroom to its nearest bathroom."""
    bathroom_ids = [r.id for r in floor_plan.rooms_of_type(RoomType.BATHROOM)]
    if not bathroom_ids:
        return []

    issues: list[ReviewIssue] = []
    for room in floor_plan.rooms_of_type(RoomType.BEDROOM):
        reached = graph.bfs(room.id)
        depths = [reached[b].depth for b in bathroom_ids if b in reached]
        nearest = min(depths) if depths else None

        if nearest is None:
            message = (
                f"'{room.name}' has no door path to any bathroom. "
                f"Consider adding a closer bathroom."
            )
        elif nearest > max_hops:
            message = (
                f"'{room.name}' is {nearest} doors away from the nearest "
                f"bathroom. Consider adding a closer bathroom."
            )
        else:
            continue
        issues.append(ReviewIssue(
            severity="suggestion",
            code="FAR_BATHROOM",
            message=message,
            affected_rooms=[room.id],
        ))
    return issues


def check_deep_nesting(
    floor_plan: FloorPlan,
    visited: dict[str, BFSNode],
    deep_nesting_depth: int = 4,
) -> list[ReviewIssue]:
    """DEEP_NESTING: rooms that take too many doors to reach."""
    issues: list[ReviewIssue] = []
    for room in floor_plan.rooms:
        node = visited.get(room.id)
        if node is not None and node.depth >= deep_nesting_depth:
            issues.append(ReviewIssue(
                severity="suggestion",
                code="DEEP_NESTING",
                message=(
                    f"'{room.name}' requires {node.depth} doors to reach from the "
                    f"entrance. Consider adding a hallway for better circulation."
                ),
                affected_rooms=[room.id],
            ))
    return issues
