"""Graph queries over a floor plan.

- door_graph: rooms connected by doors, entrance lookup, BFS
"""

from floorplan_engine.queries.door_graph import (
    BFSNode,
    DoorGraph,
    build_door_graph,
    find_entrance_room_id,
)

__all__ = [
    "BFSNode",
    "DoorGraph",
    "build_door_graph",
    "find_entrance_room_id",
]
