"""Validation for room programs and floor plans.

Every check returns a list of findings and never raises, so callers can
run them on each generate → validate → fix iteration.

Geometry validators (ValidationError, severity error | warning):
- program: room program feasibility, before placement
- geometry: bounds, minimum dimensions, aspect ratios, overlaps, adjacencies
- openings: door and window placement, plus the full floor plan pass

Architectural review (ReviewIssue, severity critical | warning | suggestion):
- reachability: door graph BFS from the entrance and room-relationship rules
- advisory: suggestion-only issues from an external reviewer
"""

from floorplan_engine.validators.geometry import (
    ValidationError,
    validate_adjacencies,
    validate_aspect_ratios,
    validate_bounds,
    validate_min_dimensions,
    validate_overlaps,
    validate_room_placement,
)
from floorplan_engine.validators.openings import (
    validate_doors,
    validate_floor_plan,
    validate_windows,
)
from floorplan_engine.validators.program import validate_room_plan
from floorplan_engine.validators.reachability import (
    ReviewIssue,
    ReviewResult,
    review_floor_plan,
)
from floorplan_engine.validators.advisory import (
    merge_advisory_issues,
    parse_advisory_response,
)

__all__ = [
    "ValidationError",
    "validate_adjacencies",
    "validate_aspect_ratios",
    "validate_bounds",
    "validate_min_dimensions",
    "validate_overlaps",
    "validate_room_placement",
    "validate_doors",
    "validate_floor_plan",
    "validate_windows",
    "validate_room_plan",
    "ReviewIssue",
    "ReviewResult",
    "review_floor_plan",
    "merge_advisory_issues",
    "parse_advisory_response",
]
