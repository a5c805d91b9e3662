"""FloorPlan: plot + placed rooms + openings, the unit the reviewer audits."""

from __future__ import annotations

from pydantic import BaseModel, Field

from floorplan_engine.models.elements import Door, Window
from floorplan_engine.models.geometry import Plot
from floorplan_engine.models.rooms import Room, RoomType


class FloorPlan(BaseModel):
    """A finalized floor plan."""

    plot: Plot
    rooms: list[Room] = Field(default_factory=list)
    doors: list[Door] = Field(default_factory=list)
    windows: list[Window] = Field(default_factory=list)
    notes: str = ""

    def get_room(self, room_id: str) -> Room | None:
        """Find a room by id."""
        return next((r for r in self.rooms if r.id == room_id), None)

    def room_map(self) -> dict[str, Room]:
        """Rooms keyed by id."""
        return {r.id: r for r in self.rooms}

    def rooms_of_type(self, room_type: RoomType) -> list[Room]:
        """All rooms of a given type, in plan order."""
        return [r for r in self.rooms if r.type == room_type]

    @property
    def exterior_doors(self) -> list[Door]:
        return [d for d in self.doors if d.is_exterior]
