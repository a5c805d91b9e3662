"""Room models: the room program (pre-placement) and placed rooms.

A room program is what an upstream producer asks for: rooms with target
areas, dimension ranges and zones, plus adjacency intents. Placed rooms
are what the placement engine returns: concrete rectangles that tile
the plot.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from floorplan_engine.models.geometry import Plot, Rect


class RoomType(str, Enum):
    """Room function classification."""

    BEDROOM = "bedroom"
    BATHROOM = "bathroom"
    KITCHEN = "kitchen"
    LIVING_ROOM = "living_room"
    DINING_ROOM = "dining_room"
    HALLWAY = "hallway"
    GARAGE = "garage"
    BALCONY = "balcony"
    UTILITY = "utility"
    ENTRANCE = "entrance"
    OTHER = "other"


class Zone(str, Enum):
    """Room zoning: shared/social, bedrooms & baths, kitchen/utility/garage."""

    PUBLIC = "public"
    PRIVATE = "private"
    SERVICE = "service"


class AdjacencyStrength(str, Enum):
    REQUIRED = "required"
    PREFERRED = "preferred"


class EntryEdge(str, Enum):
    """Plot edge the entry faces."""

    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


# Rule tables (feet). Hallway-type rooms may be narrower and longer.
MIN_DIMENSIONS: dict[RoomType, float] = {RoomType.HALLWAY: 3}
DEFAULT_MIN_DIMENSION = 5

MAX_ASPECT_RATIOS: dict[RoomType, float] = {RoomType.HALLWAY: 8}
DEFAULT_MAX_ASPECT_RATIO = 4

ROOM_COLORS: dict[RoomType, str] = {
    RoomType.BEDROOM: "#DBEAFE",
    RoomType.BATHROOM: "#CFFAFE",
    RoomType.KITCHEN: "#FEF9C3",
    RoomType.LIVING_ROOM: "#D1FAE5",
    RoomType.DINING_ROOM: "#FED7AA",
    RoomType.HALLWAY: "#F3F4F6",
    RoomType.GARAGE: "#E5E7EB",
    RoomType.BALCONY: "#ECFCCB",
    RoomType.UTILITY: "#E5E7EB",
    RoomType.ENTRANCE: "#EDE9FE",
    RoomType.OTHER: "#F9FAFB",
}

# Rooms people live in: need daylight, can't be walk-through.
HABITABLE_TYPES = frozenset({
    RoomType.BEDROOM,
    RoomType.LIVING_ROOM,
    RoomType.DINING_ROOM,
    RoomType.KITCHEN,
})


def min_dimension(room_type: RoomType) -> float:
    """Smallest allowed width/height for a room type (feet)."""
    return MIN_DIMENSIONS.get(room_type, DEFAULT_MIN_DIMENSION)


def max_aspect_ratio(room_type: RoomType) -> float:
    """Largest allowed long-side / short-side ratio for a room type."""
    return MAX_ASPECT_RATIOS.get(room_type, DEFAULT_MAX_ASPECT_RATIO)


class PlannedRoom(BaseModel):
    """A room as requested by the room program, before placement."""

    id: str
    name: str
    type: RoomType = RoomType.OTHER
    zone: Zone
    target_area: float = Field(ge=0, description="Target area in sqft")
    width_range: tuple[float, float] = Field(description="Preferred [min, max] width in feet")
    height_range: tuple[float, float] = Field(description="Preferred [min, max] height in feet")

    @field_validator("width_range", "height_range")
    @classmethod
    def range_is_ordered(cls, v: tuple[float, float]) -> tuple[float, float]:
        if v[0] > v[1]:
            raise ValueError(f"Range min {v[0]} exceeds max {v[1]}")
        return v


class Room(Rect):
    """A placed room. Immutable once produced by the placement engine."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    type: RoomType = RoomType.OTHER
    color: str = ""

    @model_validator(mode="before")
    @classmethod
    def default_color(cls, data):
        if isinstance(data, dict) and not data.get("color"):
            room_type = data.get("type", RoomType.OTHER)
            try:
                room_type = RoomType(room_type)
            except ValueError:
                return data  # field validation reports the bad type
            data = {**data, "color": ROOM_COLORS[room_type]}
        return data

    @property
    def min_dimension(self) -> float:
        return min_dimension(self.type)

    @property
    def max_aspect_ratio(self) -> float:
        return max_aspect_ratio(self.type)


class Adjacency(BaseModel):
    """Declarative intent that two rooms should share a wall."""

    room_id: str
    adjacent_to: str
    strength: AdjacencyStrength = AdjacencyStrength.PREFERRED
    reason: str = ""

    @property
    def is_required(self) -> bool:
        return self.strength == AdjacencyStrength.REQUIRED


class RoomPlan(BaseModel):
    """The room program handed to the placement engine."""

    plot: Plot
    rooms: list[PlannedRoom] = Field(default_factory=list)
    adjacencies: list[Adjacency] = Field(default_factory=list)
    entry_room_id: str = ""
    entry_edge: EntryEdge = EntryEdge.TOP
    notes: str = ""

    def get_room(self, room_id: str) -> PlannedRoom | None:
        """Find a planned room by id."""
        return next((r for r in self.rooms if r.id == room_id), None)

    @property
    def total_target_area(self) -> float:
        return sum(r.target_area for r in self.rooms)
