"""
cabin.py - Cabin geometry schema v1.0

Physical dimensions of an aircraft cabin and the shapes placed inside it:
the fuselage outline, seats and amenities. All values in cabin space.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple
import math
import logging

from seatmap.core.enums import AmenityKind
from seatmap.errors import InvalidGeometryError
from seatmap.geometry.primitives import CabinCoordinate, Rect

__all__ = [
    'CabinBounds',
    'FuselageGeometry',
    'SeatGeometry',
    'AmenityGeometry',
]

logger = logging.getLogger(__name__)


# =============================================================================
# CABIN BOUNDS
# =============================================================================

@dataclass(frozen=True)
class CabinBounds:
    """
    Physical constants for an aircraft family.

    Attributes:
        width: Total cabin width (m)
        length: Passenger cabin length (m)
        aisle_width: Aisle width (m)
        seat_width: Seat width (m)
        seat_depth: Seat depth (m), cushion depth is derived from this
        row_spacing: Clearance between seat rows (m)
    """

    width: float
    length: float
    aisle_width: float
    seat_width: float
    seat_depth: float
    row_spacing: float

    @property
    def half_width(self) -> float:
        return self.width / 2

    @property
    def rect(self) -> Rect:
        return Rect(-self.half_width, 0.0, self.width, self.length)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "length": self.length,
            "aisle_width": self.aisle_width,
            "seat_width": self.seat_width,
            "seat_depth": self.seat_depth,
            "row_spacing": self.row_spacing,
        }


# =============================================================================
# FUSELAGE
# =============================================================================

@dataclass(frozen=True)
class FuselageGeometry:
    """
    Simplified fuselage outline: a rectangle whose nose and tail corners are
    rounded with elliptical arcs (lateral radius width/4, longitudinal radius
    nose_length / tail_length).
    """

    width: float
    length: float
    nose_length: float
    tail_length: float

    @property
    def corner_radius_x(self) -> float:
        return self.width / 4

    @property
    def rect(self) -> Rect:
        return Rect(-self.width / 2, 0.0, self.width, self.length)

    def outline(self, bounds: Optional[CabinBounds] = None, segments: int = 8) -> List[Tuple[float, float]]:
        """
        Closed outline polygon in cabin coordinates, clockwise from the nose.

        Args:
            bounds: Cabin bounds the fuselage encloses (used only for logging
                when the cabin does not fit)
            segments: Points per rounded corner

        Returns:
            List of (x, y) vertices; the first vertex is not repeated
        """
        if bounds is not None and bounds.width > self.width:
            logger.warning(
                f"Cabin width {bounds.width} exceeds fuselage width {self.width}"
            )

        half = self.width / 2
        rx = min(self.corner_radius_x, half)
        ry_nose = min(self.nose_length, self.length / 2)
        ry_tail = min(self.tail_length, self.length / 2)

        # (center_x, center_y, radius_y, start_angle) per corner, clockwise in
        # screen orientation (y grows toward the tail)
        corners = [
            (half - rx, ry_nose, ry_nose, -math.pi / 2),           # nose right
            (half - rx, self.length - ry_tail, ry_tail, 0.0),       # tail right
            (-half + rx, self.length - ry_tail, ry_tail, math.pi / 2),  # tail left
            (-half + rx, ry_nose, ry_nose, math.pi),                # nose left
        ]

        points: List[Tuple[float, float]] = []
        for cx, cy, ry, start in corners:
            for i in range(segments + 1):
                angle = start + (math.pi / 2) * i / segments
                points.append((cx + rx * math.cos(angle), cy + ry * math.sin(angle)))
        return points

    def to_dict(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "length": self.length,
            "nose_length": self.nose_length,
            "tail_length": self.tail_length,
        }


# =============================================================================
# SEAT GEOMETRY
# =============================================================================

@dataclass(frozen=True)
class SeatGeometry:
    """Geometric description of a single seat."""

    center: CabinCoordinate
    width: float
    depth: float
    corner_radius: float = 0.0

    def __post_init__(self):
        if self.width <= 0 or self.depth <= 0:
            raise InvalidGeometryError("Seat", self.width, self.depth)

    @property
    def rect(self) -> Rect:
        """Axis-aligned rectangle in cabin coordinates."""
        return Rect.from_center(self.center.x, self.center.y, self.width, self.depth)

    def contains(self, coord: CabinCoordinate) -> bool:
        return self.rect.contains_point(coord.x, coord.y)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "center": list(self.center.to_tuple()),
            "width": self.width,
            "depth": self.depth,
            "corner_radius": self.corner_radius,
        }


# =============================================================================
# AMENITY GEOMETRY
# =============================================================================

@dataclass(frozen=True)
class AmenityGeometry:
    """Geometric description for lavatories, galleys, doors and exit markers."""

    kind: AmenityKind
    rect: Rect
    label: Optional[str] = None

    def __post_init__(self):
        if self.rect.is_empty:
            raise InvalidGeometryError(
                f"Amenity {self.kind.value}", self.rect.width, self.rect.height
            )

    def contains(self, coord: CabinCoordinate) -> bool:
        return self.rect.contains_point(coord.x, coord.y)
