"""
placement.py - Seat placement rules v1.0

Lateral and longitudinal placement shared by the generator and the
build-time configuration checks, so both see the same seat positions.
"""

from typing import List, Sequence, Tuple

from seatmap.core.constants import (
    FIRST_ROW_Y_M,
    PREMIUM_SEAT_PITCH_M,
    SEAT_DEPTH_FACTOR,
    SEAT_LATERAL_GAP_M,
    SEAT_WALL_OFFSET_M,
    SECTION_GAP_M,
    STANDARD_SEAT_PITCH_M,
)
from seatmap.core.enums import SectionKind
from seatmap.geometry.cabin import CabinBounds
from seatmap.layout.schema import CabinSection, SeatConfiguration

__all__ = [
    'seat_pitch',
    'cushion_depth',
    'lateral_positions',
    'row_positions',
]


def seat_pitch(kind: SectionKind) -> float:
    """Longitudinal distance between consecutive rows of a section."""
    if kind is SectionKind.PREMIUM:
        return PREMIUM_SEAT_PITCH_M
    return STANDARD_SEAT_PITCH_M


def cushion_depth(bounds: CabinBounds) -> float:
    return bounds.seat_depth * SEAT_DEPTH_FACTOR


def lateral_positions(bounds: CabinBounds, config: SeatConfiguration) -> List[Tuple[str, float]]:
    """
    Seat center x for every column of a row, in left, middle, right order.

    Left seats step inward from the left wall. Middle seats are centered on
    the centerline. Right seats step inward from the right wall in mirrored
    order, so the last configured letter sits against the wall.
    """
    step = bounds.seat_width + SEAT_LATERAL_GAP_M
    positions: List[Tuple[str, float]] = []

    for index, column in enumerate(config.left_seats):
        positions.append((column, -bounds.half_width + SEAT_WALL_OFFSET_M + index * step))

    count = len(config.middle_seats)
    for index, column in enumerate(config.middle_seats):
        positions.append((column, (index - (count - 1) / 2) * step))

    count = len(config.right_seats)
    for index, column in enumerate(config.right_seats):
        positions.append((column, bounds.half_width - SEAT_WALL_OFFSET_M - (count - 1 - index) * step))

    return positions


def row_positions(sections: Sequence[CabinSection]) -> Tuple[List[Tuple[CabinSection, int, float]], float]:
    """
    Longitudinal position of every row.

    The cursor starts at FIRST_ROW_Y_M, advances by the section pitch after
    each row and by SECTION_GAP_M after each section.

    Returns:
        ([(section, row, y), ...], final cursor y)
    """
    rows: List[Tuple[CabinSection, int, float]] = []
    y = FIRST_ROW_Y_M
    for section in sections:
        pitch = seat_pitch(section.kind)
        for row in section.rows:
            rows.append((section, row, y))
            y += pitch
        y += SECTION_GAP_M
    return rows, y
