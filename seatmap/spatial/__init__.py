"""
seatmap spatial - seat index and hit testing.
"""

from .index import GridKey, SpatialIndex
from .hit_test import SeatHitTester

__all__ = [
    "GridKey",
    "SpatialIndex",
    "SeatHitTester",
]
