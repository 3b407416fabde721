"""
seatmap - Aircraft cabin seat map core.

Provides:
- Cabin layout generation from aircraft profiles
- Cabin/view coordinate mapping under pan and zoom
- Grid-indexed seat hit testing
- Seat selection state with animated presentation
"""

from seatmap.cabin_view import CabinViewController, SeatFrame, AmenityFrame
from seatmap.config import SeatMapConfig, get_config, set_config
from seatmap.errors import (
    SeatMapError,
    LayoutConfigurationError,
    UnknownAircraftError,
    InvalidGeometryError,
    AircraftProfileError,
)
from seatmap.layout.generator import CabinLayoutGenerator, build_layout
from seatmap.logging_setup import setup_logging

__version__ = "1.0.0"

__all__ = [
    'CabinViewController',
    'SeatFrame',
    'AmenityFrame',
    'SeatMapConfig',
    'get_config',
    'set_config',
    'SeatMapError',
    'LayoutConfigurationError',
    'UnknownAircraftError',
    'InvalidGeometryError',
    'AircraftProfileError',
    'CabinLayoutGenerator',
    'build_layout',
    'setup_logging',
]
