"""Door graph: rooms connected by interior doors.

Nodes are room ids, edges are non-exterior doors. The graph is undirected
(a door connects both ways). Exterior doors are not edges; they are only
used to locate the entrance when no room is typed as one.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from floorplan_engine.models.floorplan import FloorPlan
from floorplan_engine.models.rooms import RoomType


@dataclass
class BFSNode:
    """Where BFS reached a room: hop depth and room-id path from the start."""

    depth: int
    path: list[str]


@dataclass
class DoorGraph:
    """Undirected room graph. Neighbour lists keep door order."""

    adjacency: dict[str, list[str]] = field(default_factory=dict)

    def add_room(self, room_id: str) -> None:
        self.adjacency.setdefault(room_id, [])

    def add_door(self, a: str, b: str) -> None:
        """Connect two rooms. Rooms not in the graph are ignored."""
        if a not in self.adjacency or b not in self.adjacency:
            return
        if b not in self.adjacency[a]:
            self.adjacency[a].append(b)
        if a not in self.adjacency[b]:
            self.adjacency[b].append(a)

    def neighbors(self, room_id: str) -> list[str]:
        return self.adjacency.get(room_id, [])

    def bfs(self, start: str) -> dict[str, BFSNode]:
        """Breadth-first search from ``start``.

        Returns every reachable room with its hop depth and full path.
        Unreachable rooms are absent from the result.
        """
        visited: dict[str, BFSNode] = {}
        queue = [(start, 0, [start])]
        while queue:
            current, depth, path = queue.pop(0)
            if current in visited:
                continue
            visited[current] = BFSNode(depth=depth, path=path)
            for neighbor in self.neighbors(current):
                if neighbor not in visited:
                    queue.append((neighbor, depth + 1, [*path, neighbor]))
        return visited


def build_door_graph(floor_plan: FloorPlan) -> DoorGraph:
    """Build the door graph for a floor plan."""
    graph = DoorGraph()
    for room in floor_plan.rooms:
        graph.add_room(room.id)
    for door in floor_plan.doors:
        if door.to_room_id is None:
            continue
        graph.add_door(door.from_room_id, door.to_room_id)
    return graph


def find_entrance_room_id(floor_plan: FloorPlan) -> str | None:
    """Resolve the entrance room.

    Prefers a room typed as entrance, then the room behind any exterior
    door. Returns None if neither exists.
    """
    for room in floor_plan.rooms:
        if room.type == RoomType.ENTRANCE:
            return room.id
    for door in floor_plan.doors:
        if door.to_room_id is None:
            return door.from_room_id
    return None
