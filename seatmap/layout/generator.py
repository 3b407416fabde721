"""
generator.py - Cabin layout generation v1.0

Turns an aircraft profile into a complete CabinLayout: seats for every
section row and the fixed lavatory/galley amenities.
"""

from typing import List, Optional, Sequence, Tuple
import logging
import time

from seatmap.core.constants import (
    AMENITY_FRONT_Y_M,
    AMENITY_REAR_GAP_M,
    AMENITY_WALL_INSET_M,
    GALLEY_DEPTH_M,
    GALLEY_WIDTH_M,
    LAVATORY_DEPTH_M,
    LAVATORY_WIDTH_M,
    SEAT_CORNER_RADIUS_M,
)
from seatmap.core.enums import AmenityKind
from seatmap.geometry.cabin import AmenityGeometry, CabinBounds, FuselageGeometry, SeatGeometry
from seatmap.geometry.primitives import CabinCoordinate, Rect
from seatmap.layout.aircraft import AircraftProfile, get_aircraft
from seatmap.layout.availability import AllAvailable, AvailabilitySource
from seatmap.layout.placement import cushion_depth, lateral_positions, row_positions
from seatmap.layout.schema import (
    AmenityDefinition,
    CabinLayout,
    CabinSection,
    SeatDefinition,
    seat_identifier,
)
from seatmap.layout.validation import ensure_valid_configuration

__all__ = [
    'CabinLayoutGenerator',
    'generate_amenities',
    'build_layout',
]

logger = logging.getLogger(__name__)


# =============================================================================
# LAYOUT GENERATOR
# =============================================================================

class CabinLayoutGenerator:
    """
    Builds cabin layouts from aircraft profiles.

    Generation is deterministic for a given profile and availability source.
    The configuration is validated before any seat is placed.
    """

    def __init__(self, availability: Optional[AvailabilitySource] = None):
        """
        Initialize the generator.

        Args:
            availability: Decides seat availability (defaults to all available)
        """
        self._availability = availability or AllAvailable()

    @property
    def availability(self) -> AvailabilitySource:
        return self._availability

    # -------------------------------------------------------------------------
    # Main Generation
    # -------------------------------------------------------------------------

    def generate(self, aircraft: str) -> CabinLayout:
        """
        Generate the layout for a catalog aircraft.

        Args:
            aircraft: Aircraft identifier, e.g. "A320"

        Returns:
            Immutable CabinLayout

        Raises:
            UnknownAircraftError: If the aircraft is not in the catalog
            LayoutConfigurationError: If its sections do not fit the cabin
        """
        return self.generate_from_profile(get_aircraft(aircraft))

    def generate_from_profile(self, profile: AircraftProfile) -> CabinLayout:
        return self.generate_from_parts(
            aircraft_id=profile.identifier,
            bounds=profile.cabin_bounds(),
            fuselage=profile.fuselage_geometry(),
            sections=profile.cabin_sections(),
        )

    def generate_from_parts(
        self,
        aircraft_id: str,
        bounds: CabinBounds,
        fuselage: FuselageGeometry,
        sections: Sequence[CabinSection],
    ) -> CabinLayout:
        """Generate a layout from explicit bounds, fuselage and sections."""
        start_time = time.time()

        ensure_valid_configuration(bounds, sections, aircraft_id=aircraft_id)

        seats, seat_y_end = self._generate_seats(bounds, sections)
        amenities = generate_amenities(bounds, seat_y_end)

        layout = CabinLayout(
            aircraft_id=aircraft_id,
            sections=tuple(sections),
            seats=tuple(seats),
            amenities=tuple(amenities),
            bounds=bounds,
            fuselage=fuselage,
        )

        elapsed = (time.time() - start_time) * 1000
        logger.info(
            f"Generated {aircraft_id} layout: {layout.seat_count} seats "
            f"({layout.available_seat_count} available), {len(amenities)} amenities "
            f"in {elapsed:.1f} ms"
        )
        return layout

    # -------------------------------------------------------------------------
    # Seats
    # -------------------------------------------------------------------------

    def _generate_seats(
        self,
        bounds: CabinBounds,
        sections: Sequence[CabinSection],
    ) -> Tuple[List[SeatDefinition], float]:
        """Seats in section, row, left/middle/right order plus the final y cursor."""
        depth = cushion_depth(bounds)
        rows, seat_y_end = row_positions(sections)

        seats: List[SeatDefinition] = []
        for section, row, row_y in rows:
            for column, seat_x in lateral_positions(bounds, section.seat_configuration):
                seat_id = seat_identifier(row, column)
                seats.append(SeatDefinition(
                    id=seat_id,
                    row=row,
                    column=column,
                    geometry=SeatGeometry(
                        center=CabinCoordinate(seat_x, row_y),
                        width=bounds.seat_width,
                        depth=depth,
                        corner_radius=SEAT_CORNER_RADIUS_M,
                    ),
                    section_kind=section.kind,
                    is_exit_row=section.is_exit_row,
                    is_available=self._availability.is_available(seat_id, row, column),
                ))

        return seats, seat_y_end


# =============================================================================
# AMENITIES
# =============================================================================

def generate_amenities(bounds: CabinBounds, seat_y_end: float) -> List[AmenityDefinition]:
    """
    Fixed amenities: a front-left lavatory, a front-right galley and two rear
    lavatories placed behind the final row cursor.
    """
    half = bounds.half_width
    rear_y = seat_y_end + AMENITY_REAR_GAP_M

    def amenity(amenity_id: str, kind: AmenityKind, x: float, y: float,
                width: float, depth: float, label: Optional[str]) -> AmenityDefinition:
        return AmenityDefinition(
            id=amenity_id,
            geometry=AmenityGeometry(kind=kind, rect=Rect(x, y, width, depth), label=label),
        )

    return [
        amenity("lav-front-left", AmenityKind.LAVATORY,
                -half + AMENITY_WALL_INSET_M, AMENITY_FRONT_Y_M,
                LAVATORY_WIDTH_M, LAVATORY_DEPTH_M, "LAV"),
        amenity("galley-front-right", AmenityKind.GALLEY,
                half - GALLEY_WIDTH_M - AMENITY_WALL_INSET_M, AMENITY_FRONT_Y_M,
                GALLEY_WIDTH_M, GALLEY_DEPTH_M, None),
        amenity("lav-rear-left", AmenityKind.LAVATORY,
                -half + AMENITY_WALL_INSET_M, rear_y,
                LAVATORY_WIDTH_M, LAVATORY_DEPTH_M, "LAV"),
        amenity("lav-rear-right", AmenityKind.LAVATORY,
                half - LAVATORY_WIDTH_M - AMENITY_WALL_INSET_M, rear_y,
                LAVATORY_WIDTH_M, LAVATORY_DEPTH_M, "LAV"),
    ]


def build_layout(aircraft: str = "A320", availability: Optional[AvailabilitySource] = None) -> CabinLayout:
    """Generate a layout with a fresh generator."""
    return CabinLayoutGenerator(availability).generate(aircraft)
