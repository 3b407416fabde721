"""
seatmap geometry - coordinate primitives and cabin shapes.
"""

from .primitives import CabinCoordinate, ViewPoint, ViewSize, Rect, AffineTransform
from .cabin import CabinBounds, FuselageGeometry, SeatGeometry, AmenityGeometry

__all__ = [
    "CabinCoordinate",
    "ViewPoint",
    "ViewSize",
    "Rect",
    "AffineTransform",
    "CabinBounds",
    "FuselageGeometry",
    "SeatGeometry",
    "AmenityGeometry",
]
