"""Deterministic room placement.

Turns a RoomPlan (rooms with zones, target areas and adjacency intents)
into integer-coordinate rooms that exactly tile the plot.

Strip-based tiling with adjacency-aware ordering:
1. Normalize the entry edge (always lay out as if the entry is at the top;
   left/right entries are handled by transposing the plot)
2. Group rooms by zone and stack the zone bands front-to-back
3. Size bands in proportion to their target area, honouring minimum heights
4. Order rooms within a band by DFS over required adjacencies
5. Split crowded bands into sub-rows
6. Apportion row widths with the largest-remainder method
7. Snap to integers and repair the tiling
8. Transpose back if needed

Target areas are soft: the engine relaxes them whenever that is needed to
keep minimum dimensions and an exact tiling.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from floorplan_engine.models.rooms import (
    ROOM_COLORS,
    EntryEdge,
    PlannedRoom,
    Room,
    RoomPlan,
    Zone,
    min_dimension,
)

logger = logging.getLogger(__name__)

# Bands nearest the entry come first.
ZONE_ORDER = (Zone.PUBLIC, Zone.SERVICE, Zone.PRIVATE)


@dataclass
class PlacementResult:
    """Output of the placement engine."""

    rooms: list[Room]
    warnings: list[str] = field(default_factory=list)
    success: bool = True


@dataclass
class _Strip:
    """A horizontal strip (zone band or sub-row) in the normalized frame."""

    label: str
    y: int
    height: int
    min_height: int
    rooms: list[PlannedRoom]


@dataclass
class _Cell:
    """Working rectangle for one room while the layout is built."""

    room: PlannedRoom
    x: int
    y: int
    width: int
    height: int


AdjacencyMap = dict[str, list[str]]


def place_rooms(plan: RoomPlan) -> PlacementResult:
    """Compute concrete room rectangles for a room program.

    Never raises for a schema-valid plan. Anything the engine had to
    relax is reported in ``warnings``.
    """
    if not plan.rooms:
        return PlacementResult(rooms=[])

    warnings: list[str] = []
    # Only the whole-foot part of a fractional plot is tiled.
    plot_w = max(math.floor(plan.plot.width), 1)
    plot_h = max(math.floor(plan.plot.height), 1)
    if (plot_w, plot_h) != (plan.plot.width, plan.plot.height):
        warnings.append(
            f"Plot {plan.plot.width:g}x{plan.plot.height:g} is not whole feet; "
            f"rooms tile the {plot_w}x{plot_h} part."
        )

    if len(plan.rooms) == 1:
        room = _make_room(plan.rooms[0], 0, 0, plot_w, plot_h)
        return PlacementResult(rooms=[room], warnings=warnings)

    transpose = plan.entry_edge in (EntryEdge.LEFT, EntryEdge.RIGHT)
    reverse = plan.entry_edge in (EntryEdge.BOTTOM, EntryEdge.RIGHT)
    norm_w, norm_h = (plot_h, plot_w) if transpose else (plot_w, plot_h)

    if transpose:
        rooms = [
            r.model_copy(update={"width_range": r.height_range, "height_range": r.width_range})
            for r in plan.rooms
        ]
    else:
        rooms = list(plan.rooms)

    logger.debug(
        "Placing %d rooms on %dx%d plot (entry %s, transpose=%s)",
        len(rooms), plot_w, plot_h, plan.entry_edge.value, transpose,
    )

    if plan.entry_room_id and plan.get_room(plan.entry_room_id) is None:
        warnings.append(
            f"Entry room '{plan.entry_room_id}' is not in the room program; "
            f"rooms are ordered without an entry seed."
        )

    groups = _group_by_zone(rooms, reverse)
    if len(groups) > norm_h:
        warnings.append(
            f"Plot depth {norm_h}ft cannot hold {len(groups)} zone bands; "
            f"all rooms were laid out in a single band."
        )
        groups = [("all", rooms)]

    required = _build_adjacency_map(
        [(a.room_id, a.adjacent_to) for a in plan.adjacencies if a.is_required]
    )

    bands = _allocate_strips(groups, 0, norm_h, warnings)

    cells: list[_Cell] = []
    for band in bands:
        ordered = _order_by_adjacency(band.rooms, required, plan.entry_room_id)
        logger.debug(
            "Band %s: y=%d h=%d order=%s",
            band.label, band.y, band.height, [r.id for r in ordered],
        )
        band.rooms = ordered
        cells.extend(_layout_band(band, norm_w, warnings))

    _snap_and_repair(cells, norm_w, norm_h)

    if transpose:
        placed = [_make_room(c.room, c.y, c.x, c.height, c.width) for c in cells]
    else:
        placed = [_make_room(c.room, c.x, c.y, c.width, c.height) for c in cells]

    for w in warnings:
        logger.debug("Placement warning: %s", w)
    return PlacementResult(rooms=placed, warnings=warnings)


# ── Zone grouping ────────────────────────────────────────────────────


def _group_by_zone(
    rooms: list[PlannedRoom], reverse: bool
) -> list[tuple[str, list[PlannedRoom]]]:
    """Group rooms into zone bands, nearest-to-entry first."""
    groups = []
    for zone in ZONE_ORDER:
        members = [r for r in rooms if r.zone == zone]
        if members:
            groups.append((zone.value, members))
    if reverse:
        groups.reverse()
    return groups


# ── Strip allocation (bands and sub-rows) ────────────────────────────


def _strip_min_height(rooms: list[PlannedRoom]) -> int:
    """Largest per-type minimum dimension among the strip's rooms."""
    return max(int(min_dimension(r.type)) for r in rooms)


def _allocate_strips(
    groups: list[tuple[str, list[PlannedRoom]]],
    origin: int,
    total: int,
    warnings: list[str],
) -> list[_Strip]:
    """Split ``total`` feet into one strip per group, proportional to area.

    Non-final strips get at least their minimum height and leave 1ft for
    every later strip. The final strip absorbs the rounding remainder; if
    that leaves it under its minimum, the exact deficit is borrowed from
    the preceding strip's spare height. A deficit that can't be covered is
    accepted and reported.
    """
    weights = [sum(r.target_area for r in rooms) for _, rooms in groups]
    total_weight = sum(weights)
    count = len(groups)

    strips: list[_Strip] = []
    y = origin
    for i, (label, rooms) in enumerate(groups):
        min_h = _strip_min_height(rooms)
        later = count - 1 - i
        if later == 0:
            height = origin + total - y
        else:
            if total_weight > 0:
                height = _round(total * weights[i] / total_weight)
            else:
                height = _round(total / count)
            height = max(height, min_h)
            height = min(height, origin + total - y - later)
        strips.append(_Strip(label=label, y=y, height=height, min_height=min_h, rooms=rooms))
        y += height

    last = strips[-1]
    deficit = last.min_height - last.height
    if deficit > 0 and len(strips) > 1:
        prev = strips[-2]
        give = min(deficit, max(0, prev.height - prev.min_height))
        prev.height -= give
        last.y -= give
        last.height += give

    for strip in strips:
        if strip.height < strip.min_height:
            warnings.append(
                f"Strip '{strip.label}' is {strip.height}ft deep, below its "
                f"{strip.min_height}ft minimum; accepted to keep the tiling."
            )
    return strips


# ── Adjacency ordering ───────────────────────────────────────────────


def _build_adjacency_map(pairs: list[tuple[str, str]]) -> AdjacencyMap:
    """Undirected adjacency map. Neighbour lists keep insertion order."""
    graph: AdjacencyMap = {}
    for a, b in pairs:
        for src, dst in ((a, b), (b, a)):
            neighbours = graph.setdefault(src, [])
            if dst not in neighbours:
                neighbours.append(dst)
    return graph


def _order_by_adjacency(
    rooms: list[PlannedRoom],
    required: AdjacencyMap,
    entry_room_id: str,
) -> list[PlannedRoom]:
    """Linear room order from a DFS over required adjacencies.

    Seeds with the entry room (if it is in this band), then the remaining
    rooms in program order. Neighbours with the fewest in-band links are
    visited first so chains come out as chains rather than stars.
    """
    if len(rooms) <= 1:
        return list(rooms)

    by_id = {r.id: r for r in rooms}
    subgraph = {
        rid: [n for n in required.get(rid, []) if n in by_id] for rid in by_id
    }

    seeds = [entry_room_id] if entry_room_id in by_id else []
    seeds += [r.id for r in rooms if r.id != entry_room_id]

    visited: set[str] = set()
    ordered: list[PlannedRoom] = []

    def visit(room_id: str) -> None:
        visited.add(room_id)
        ordered.append(by_id[room_id])
        candidates = sorted(
            (n for n in subgraph[room_id] if n not in visited),
            key=lambda n: len(subgraph[n]),
        )
        for n in candidates:
            if n not in visited:
                visit(n)

    for seed in seeds:
        if seed not in visited:
            visit(seed)
    return ordered


# ── Band and row layout ──────────────────────────────────────────────


def _layout_band(band: _Strip, width: int, warnings: list[str]) -> list[_Cell]:
    """Lay out a band's rooms, splitting into sub-rows when crowded."""
    rooms = band.rooms
    widest_min = _strip_min_height(rooms)
    row_count = max(1, math.ceil(len(rooms) * widest_min / width))

    if row_count <= 1 or band.height < widest_min * row_count:
        return _layout_row(rooms, band.y, band.height, width, warnings)

    per_row = math.ceil(len(rooms) / row_count)
    chunks = [
        (f"{band.label} row {i // per_row + 1}", rooms[i:i + per_row])
        for i in range(0, len(rooms), per_row)
    ]
    logger.debug("Band %s split into %d sub-rows", band.label, len(chunks))

    cells: list[_Cell] = []
    for row in _allocate_strips(chunks, band.y, band.height, warnings):
        cells.extend(_layout_row(row.rooms, row.y, row.height, width, warnings))
    return cells


def _layout_row(
    rooms: list[PlannedRoom],
    y: int,
    height: int,
    total_width: int,
    warnings: list[str],
) -> list[_Cell]:
    """Place rooms left to right so their widths sum to ``total_width``."""
    count = len(rooms)
    minimums = [int(min_dimension(r.type)) for r in rooms]
    total_min = sum(minimums)

    if total_min >= total_width:
        if total_min > total_width:
            warnings.append(
                f"Row of {count} rooms needs {total_min}ft but only "
                f"{total_width}ft is available; widths were divided equally."
            )
        cells = []
        x = 0
        for room, w in zip(rooms, largest_remainder(total_width, [1.0] * count)):
            cells.append(_Cell(room, x, y, w, height))
            x += w
        return cells

    weights = [r.target_area for r in rooms]
    if sum(weights) <= 0:
        weights = [1.0] * count
    extras = largest_remainder(total_width - total_min, weights)
    widths = [m + e for m, e in zip(minimums, extras)]

    cells = []
    x = 0
    for i, room in enumerate(rooms):
        w = total_width - x if i == count - 1 else widths[i]
        cells.append(_Cell(room, x, y, w, height))
        x += w
    return cells


def largest_remainder(total: int, weights: list[float]) -> list[int]:
    """Apportion ``total`` integer units in proportion to ``weights``.

    Floors every proportional share, then hands the leftover units one at
    a time to the largest fractional remainders (ties keep input order).
    The parts always sum to ``total``.
    """
    weight_sum = sum(weights)
    shares = [total * w / weight_sum for w in weights]
    parts = [math.floor(s) for s in shares]
    leftover = total - sum(parts)
    by_remainder = sorted(
        range(len(shares)), key=lambda i: shares[i] - parts[i], reverse=True
    )
    for i in by_remainder[:leftover]:
        parts[i] += 1
    return parts


# ── Integer snap and tiling repair ───────────────────────────────────


def _snap_and_repair(cells: list[_Cell], width: int, height: int) -> None:
    """Round, clamp and close gaps so the cells tile width × height.

    Rows are cells sharing a y value. Within a row each cell's right edge
    is pulled to the next cell's left edge and the last cell reaches the
    far edge. Every row's height becomes the distance to the next row.
    """
    for c in cells:
        c.x, c.y = _round(c.x), _round(c.y)
        c.width, c.height = _round(c.width), _round(c.height)

    for c in cells:
        if c.x + c.width > width:
            c.width = width - c.x
        if c.y + c.height > height:
            c.height = height - c.y
        c.width = max(c.width, 1)
        c.height = max(c.height, 1)

    rows: dict[int, list[_Cell]] = {}
    for c in cells:
        rows.setdefault(c.y, []).append(c)

    for row in rows.values():
        row.sort(key=lambda c: c.x)
        for current, nxt in zip(row, row[1:]):
            if current.x + current.width != nxt.x:
                current.width = nxt.x - current.x
        row[-1].width = width - row[-1].x

    row_ys = sorted(rows)
    for i, row_y in enumerate(row_ys):
        row_h = row_ys[i + 1] - row_y if i < len(row_ys) - 1 else height - row_y
        for c in rows[row_y]:
            c.height = row_h


def _round(value: float) -> int:
    """Round half up, independent of banker's rounding."""
    return math.floor(value + 0.5)


def _make_room(
    planned: PlannedRoom, x: float, y: float, width: float, height: float
) -> Room:
    return Room(
        id=planned.id,
        name=planned.name,
        type=planned.type,
        x=x,
        y=y,
        width=width,
        height=height,
        color=ROOM_COLORS[planned.type],
    )
