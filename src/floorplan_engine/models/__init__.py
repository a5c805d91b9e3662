"""Floor plan data models."""

from floorplan_engine.models.geometry import WALL_TOLERANCE, Plot, Rect
from floorplan_engine.models.rooms import (
    HABITABLE_TYPES,
    ROOM_COLORS,
    Adjacency,
    AdjacencyStrength,
    EntryEdge,
    PlannedRoom,
    Room,
    RoomPlan,
    RoomType,
    Zone,
    max_aspect_ratio,
    min_dimension,
)
from floorplan_engine.models.elements import Door, Orientation, SwingDirection, Window
from floorplan_engine.models.floorplan import FloorPlan

__all__ = [
    "WALL_TOLERANCE",
    "Plot",
    "Rect",
    "HABITABLE_TYPES",
    "ROOM_COLORS",
    "Adjacency",
    "AdjacencyStrength",
    "EntryEdge",
    "PlannedRoom",
    "Room",
    "RoomPlan",
    "RoomType",
    "Zone",
    "max_aspect_ratio",
    "min_dimension",
    "Door",
    "Orientation",
    "SwingDirection",
    "Window",
    "FloorPlan",
]
