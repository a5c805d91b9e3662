"""Openings: doors and windows.

Both are produced by the downstream finalizer and only read here. A
door's (x, y) is the point where it sits on a wall line; its width runs
along that wall in the direction given by ``orientation``.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class Orientation(str, Enum):
    """Direction of the wall an opening sits on."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class SwingDirection(str, Enum):
    INWARD = "inward"
    OUTWARD = "outward"


class Door(BaseModel):
    """A door between two rooms, or from a room to the exterior.

    ``to_room_id`` of None marks an exterior door.
    """

    id: str
    from_room_id: str
    to_room_id: str | None = None
    x: float
    y: float
    width: float = Field(gt=0, description="Door width in feet")
    orientation: Orientation
    swing_direction: SwingDirection | None = None

    @property
    def is_exterior(self) -> bool:
        return self.to_room_id is None


class Window(BaseModel):
    """A window on one of its room's walls."""

    id: str
    room_id: str
    x: float
    y: float
    width: float = Field(gt=0, description="Window width in feet")
    orientation: Orientation
