"""
schema.py - Cabin layout schema v1.0

Defines sections, seats, amenities and the immutable CabinLayout aggregate
produced by the layout generator.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple
import logging

from seatmap.core.enums import AmenityKind, SectionKind
from seatmap.geometry.cabin import (
    AmenityGeometry,
    CabinBounds,
    FuselageGeometry,
    SeatGeometry,
)
from seatmap.geometry.primitives import CabinCoordinate, Rect

__all__ = [
    'SeatConfiguration',
    'CabinSection',
    'SeatDefinition',
    'AmenityDefinition',
    'CabinLayout',
    'seat_identifier',
]

logger = logging.getLogger(__name__)


def seat_identifier(row: int, column: str) -> str:
    """Seat id in "{row}{column}" form, e.g. "12A"."""
    return f"{row}{column}"


# =============================================================================
# SECTIONS
# =============================================================================

@dataclass(frozen=True)
class SeatConfiguration:
    """
    Ordered column letters of one row.

    Attributes:
        left_seats: Columns against the left wall, outermost first
        right_seats: Columns against the right wall, innermost first
        middle_seats: Columns straddling the centerline, left to right
    """

    left_seats: Tuple[str, ...]
    right_seats: Tuple[str, ...]
    middle_seats: Tuple[str, ...] = ()

    @property
    def all_columns(self) -> Tuple[str, ...]:
        return self.left_seats + self.middle_seats + self.right_seats

    @property
    def seats_per_row(self) -> int:
        return len(self.all_columns)

    @property
    def label(self) -> str:
        """Configuration label such as "3+3" or "2+2+2"."""
        groups = [self.left_seats, self.middle_seats, self.right_seats]
        return "+".join(str(len(g)) for g in groups if g)

    @classmethod
    def premium(cls) -> "SeatConfiguration":
        """2+2 premium cabin; B and E are left empty."""
        return cls(left_seats=("A", "C"), right_seats=("D", "F"))

    @classmethod
    def economy(cls) -> "SeatConfiguration":
        """3+3 economy cabin."""
        return cls(left_seats=("A", "B", "C"), right_seats=("D", "E", "F"))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "left_seats": list(self.left_seats),
            "middle_seats": list(self.middle_seats),
            "right_seats": list(self.right_seats),
        }


@dataclass(frozen=True)
class CabinSection:
    """A contiguous row range sharing a configuration and classification."""

    kind: SectionKind
    start_row: int
    end_row: int  # inclusive
    seat_configuration: SeatConfiguration

    @property
    def rows(self) -> range:
        return range(self.start_row, self.end_row + 1)

    @property
    def row_count(self) -> int:
        return max(0, self.end_row - self.start_row + 1)

    @property
    def seat_count(self) -> int:
        return self.row_count * self.seat_configuration.seats_per_row

    @property
    def is_exit_row(self) -> bool:
        return self.kind is SectionKind.EXIT_ROW

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "start_row": self.start_row,
            "end_row": self.end_row,
            "seat_configuration": self.seat_configuration.to_dict(),
        }


# =============================================================================
# SEATS AND AMENITIES
# =============================================================================

@dataclass(frozen=True)
class SeatDefinition:
    """A single seat in the layout."""

    id: str
    row: int
    column: str
    geometry: SeatGeometry
    section_kind: SectionKind
    is_exit_row: bool = False
    is_available: bool = True

    @property
    def rect(self) -> Rect:
        return self.geometry.rect

    def contains(self, coord: CabinCoordinate) -> bool:
        return self.geometry.contains(coord)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "row": self.row,
            "column": self.column,
            "geometry": self.geometry.to_dict(),
            "section_kind": self.section_kind.value,
            "is_exit_row": self.is_exit_row,
            "is_available": self.is_available,
        }


@dataclass(frozen=True)
class AmenityDefinition:
    """A lavatory, galley, door or exit-row marker."""

    id: str
    geometry: AmenityGeometry

    @property
    def kind(self) -> AmenityKind:
        return self.geometry.kind

    @property
    def rect(self) -> Rect:
        return self.geometry.rect

    @property
    def label(self) -> Optional[str]:
        return self.geometry.label

    def contains(self, coord: CabinCoordinate) -> bool:
        return self.geometry.contains(coord)

    def to_dict(self) -> Dict[str, Any]:
        r = self.rect
        return {
            "id": self.id,
            "kind": self.kind.value,
            "rect": [r.x, r.y, r.width, r.height],
            "label": self.label,
        }


# =============================================================================
# CABIN LAYOUT
# =============================================================================

@dataclass(frozen=True)
class CabinLayout:
    """
    Complete cabin layout. Built once by the generator, read-only afterwards.

    Seat order is generation order (section, row, then left/middle/right
    columns); spatial index entries refer to positions in ``seats``.
    """

    aircraft_id: str
    sections: Tuple[CabinSection, ...]
    seats: Tuple[SeatDefinition, ...]
    amenities: Tuple[AmenityDefinition, ...]
    bounds: CabinBounds
    fuselage: FuselageGeometry
    _index_by_id: Dict[str, int] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self):
        index = {seat.id: i for i, seat in enumerate(self.seats)}
        # frozen dataclass: populate the lookup table in place
        self._index_by_id.update(index)

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    @property
    def seat_count(self) -> int:
        return len(self.seats)

    @property
    def seat_ids(self) -> List[str]:
        return [seat.id for seat in self.seats]

    def seat_index(self, seat_id: str) -> Optional[int]:
        return self._index_by_id.get(seat_id)

    def seat_by_id(self, seat_id: str) -> Optional[SeatDefinition]:
        idx = self._index_by_id.get(seat_id)
        return self.seats[idx] if idx is not None else None

    def has_seat(self, seat_id: str) -> bool:
        return seat_id in self._index_by_id

    def seats_in_section(self, kind: SectionKind) -> List[SeatDefinition]:
        return [seat for seat in self.seats if seat.section_kind is kind]

    def seats_in_row(self, row: int) -> List[SeatDefinition]:
        return [seat for seat in self.seats if seat.row == row]

    def amenity_by_id(self, amenity_id: str) -> Optional[AmenityDefinition]:
        for amenity in self.amenities:
            if amenity.id == amenity_id:
                return amenity
        return None

    @property
    def available_seat_count(self) -> int:
        return sum(1 for seat in self.seats if seat.is_available)

    @property
    def seat_extent(self) -> Rect:
        """Bounding rectangle of every seat."""
        return Rect.bounding(seat.rect for seat in self.seats)

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "aircraft_id": self.aircraft_id,
            "bounds": self.bounds.to_dict(),
            "fuselage": self.fuselage.to_dict(),
            "sections": [s.to_dict() for s in self.sections],
            "seats": [s.to_dict() for s in self.seats],
            "amenities": [a.to_dict() for a in self.amenities],
            "seat_count": self.seat_count,
        }
