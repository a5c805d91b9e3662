"""Geometric primitives: the plot and axis-aligned rectangles.

All coordinates are in feet. The origin is the plot's top-left corner,
x grows to the right and y grows downward.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


# Two edges closer than this are treated as the same wall line (feet).
WALL_TOLERANCE = 0.5


class Plot(BaseModel):
    """The buildable rectangle every room must fit inside."""

    width: float = Field(gt=0, description="Plot width in feet")
    height: float = Field(gt=0, description="Plot height in feet")
    area: float | None = Field(default=None, description="width × height in sqft")

    @model_validator(mode="after")
    def area_matches_dimensions(self) -> Plot:
        expected = self.width * self.height
        if self.area is None:
            self.area = expected
        elif abs(self.area - expected) > 1e-6:
            raise ValueError(
                f"Plot area {self.area} does not match width × height ({expected})"
            )
        return self

    def within_plot(self, rect: Rect) -> bool:
        """True if the rectangle lies inside [0,width]×[0,height]."""
        return (
            rect.x >= 0
            and rect.y >= 0
            and rect.right <= self.width
            and rect.bottom <= self.height
        )

    def on_plot_boundary(self, x: float, y: float) -> bool:
        """True if (x, y) lies exactly on one of the four boundary lines."""
        return x == 0 or y == 0 or x == self.width or y == self.height


class Rect(BaseModel):
    """Axis-aligned rectangle (feet)."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def area(self) -> float:
        return self.width * self.height

    def overlaps(self, other: Rect) -> bool:
        """True if the two rectangles intersect with positive area."""
        x_overlap = self.x < other.right and self.right > other.x
        y_overlap = self.y < other.bottom and self.bottom > other.y
        return x_overlap and y_overlap

    def overlap_area(self, other: Rect) -> float:
        """Area of the intersection (0 when disjoint or only touching)."""
        dx = max(0.0, min(self.right, other.right) - max(self.x, other.x))
        dy = max(0.0, min(self.bottom, other.bottom) - max(self.y, other.y))
        return dx * dy

    def shares_wall(self, other: Rect, tolerance: float = WALL_TOLERANCE) -> bool:
        """Check whether two rectangles share a wall segment.

        One rectangle's right (or bottom) edge must meet the other's left
        (or top) edge within ``tolerance``, and their spans along the
        perpendicular axis must overlap with positive length. Touching at
        a corner only does not count. The relation is symmetric.
        """
        vertical_span = max(self.y, other.y) < min(self.bottom, other.bottom)
        horizontal_span = max(self.x, other.x) < min(self.right, other.right)

        if vertical_span and (
            abs(self.right - other.x) <= tolerance
            or abs(other.right - self.x) <= tolerance
        ):
            return True
        if horizontal_span and (
            abs(self.bottom - other.y) <= tolerance
            or abs(other.bottom - self.y) <= tolerance
        ):
            return True
        return False

    def contains_point(self, x: float, y: float) -> bool:
        """True if (x, y) is inside the rectangle or on its edge."""
        return self.x <= x <= self.right and self.y <= y <= self.bottom
