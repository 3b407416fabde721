"""
seatmap core - constants and enumerations.
"""

from .enums import SectionKind, AmenityKind, SeatState, GesturePhase
from .constants import (
    MIN_ZOOM_SCALE,
    MAX_ZOOM_SCALE,
    DEFAULT_ZOOM_SCALE,
    GRID_CELL_SIZE_M,
    clamp_zoom,
)

__all__ = [
    "SectionKind",
    "AmenityKind",
    "SeatState",
    "GesturePhase",
    "MIN_ZOOM_SCALE",
    "MAX_ZOOM_SCALE",
    "DEFAULT_ZOOM_SCALE",
    "GRID_CELL_SIZE_M",
    "clamp_zoom",
]
