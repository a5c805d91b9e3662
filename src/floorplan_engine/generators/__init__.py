"""Layout generation.

- placement: room program → integer rooms that exactly tile the plot
"""

from floorplan_engine.generators.placement import PlacementResult, place_rooms

__all__ = [
    "PlacementResult",
    "place_rooms",
]
