"""
primitives.py - Coordinate types, rectangles and affine transforms v1.0

Cabin space is measured in meters with the origin on the centerline at the
nose (x lateral, y toward the tail). View space is measured in pixels.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple
import math

import numpy as np

__all__ = [
    'CabinCoordinate',
    'ViewPoint',
    'ViewSize',
    'Rect',
    'AffineTransform',
]


# =============================================================================
# POINTS AND SIZES
# =============================================================================

@dataclass(frozen=True)
class CabinCoordinate:
    """Position in cabin space (meters)."""

    x: float  # Lateral offset from centerline
    y: float  # Longitudinal distance from nose

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def offset(self, dx: float, dy: float) -> "CabinCoordinate":
        return CabinCoordinate(self.x + dx, self.y + dy)

    def distance_to(self, other: "CabinCoordinate") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def is_close(self, other: "CabinCoordinate", tol: float = 1e-9) -> bool:
        return abs(self.x - other.x) <= tol and abs(self.y - other.y) <= tol


@dataclass(frozen=True)
class ViewPoint:
    """Position in view space (pixels)."""

    x: float
    y: float

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def __add__(self, other: "ViewPoint") -> "ViewPoint":
        return ViewPoint(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "ViewPoint") -> "ViewPoint":
        return ViewPoint(self.x - other.x, self.y - other.y)

    @classmethod
    def zero(cls) -> "ViewPoint":
        return cls(0.0, 0.0)


@dataclass(frozen=True)
class ViewSize:
    """Viewport size in pixels."""

    width: float
    height: float

    @property
    def is_degenerate(self) -> bool:
        """True when nothing can be laid out (zero or negative extent)."""
        return self.width <= 0 or self.height <= 0


# =============================================================================
# RECTANGLE
# =============================================================================

@dataclass(frozen=True)
class Rect:
    """
    Axis-aligned rectangle.

    Containment is half-open: points on the min edges are inside, points on
    the max edges are not, so adjacent rectangles never both claim a point.
    """

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_center(cls, cx: float, cy: float, width: float, height: float) -> "Rect":
        return cls(cx - width / 2, cy - height / 2, width, height)

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def contains_point(self, px: float, py: float) -> bool:
        if self.is_empty:
            return False
        return self.min_x <= px < self.max_x and self.min_y <= py < self.max_y

    def intersects(self, other: "Rect") -> bool:
        return (
            self.min_x < other.max_x and other.min_x < self.max_x
            and self.min_y < other.max_y and other.min_y < self.max_y
        )

    def union(self, other: "Rect") -> "Rect":
        min_x = min(self.min_x, other.min_x)
        min_y = min(self.min_y, other.min_y)
        return Rect(
            min_x,
            min_y,
            max(self.max_x, other.max_x) - min_x,
            max(self.max_y, other.max_y) - min_y,
        )

    def corners(self) -> Tuple[Tuple[float, float], ...]:
        """Corners clockwise from (min_x, min_y)."""
        return (
            (self.min_x, self.min_y),
            (self.max_x, self.min_y),
            (self.max_x, self.max_y),
            (self.min_x, self.max_y),
        )

    @classmethod
    def bounding(cls, rects: Iterable["Rect"]) -> "Rect":
        result = None
        for rect in rects:
            result = rect if result is None else result.union(rect)
        if result is None:
            return cls(0.0, 0.0, 0.0, 0.0)
        return result


# =============================================================================
# AFFINE TRANSFORM
# =============================================================================

class AffineTransform:
    """
    2D affine transform stored as a 3x3 homogeneous matrix.

    Composition follows "apply self, then other" via then(), so
    ``AffineTransform.scaling(s, s).then(AffineTransform.translation(tx, ty))``
    scales first and translates second.
    """

    __slots__ = ("_matrix",)

    def __init__(self, matrix: np.ndarray = None):
        if matrix is None:
            matrix = np.identity(3, dtype=float)
        matrix = np.asarray(matrix, dtype=float)
        if matrix.shape != (3, 3):
            raise ValueError(f"Affine matrix must be 3x3, got {matrix.shape}")
        self._matrix = matrix

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def identity(cls) -> "AffineTransform":
        return cls()

    @classmethod
    def translation(cls, tx: float, ty: float) -> "AffineTransform":
        m = np.identity(3, dtype=float)
        m[0, 2] = tx
        m[1, 2] = ty
        return cls(m)

    @classmethod
    def scaling(cls, sx: float, sy: float = None) -> "AffineTransform":
        if sy is None:
            sy = sx
        m = np.identity(3, dtype=float)
        m[0, 0] = sx
        m[1, 1] = sy
        return cls(m)

    # -------------------------------------------------------------------------
    # Composition
    # -------------------------------------------------------------------------

    @property
    def matrix(self) -> np.ndarray:
        return self._matrix.copy()

    def then(self, other: "AffineTransform") -> "AffineTransform":
        """Transform that applies self first, then other."""
        return AffineTransform(other._matrix @ self._matrix)

    def __matmul__(self, other: "AffineTransform") -> "AffineTransform":
        # Matrix convention: (a @ b) applies b first
        return AffineTransform(self._matrix @ other._matrix)

    def inverse(self) -> "AffineTransform":
        return AffineTransform(np.linalg.inv(self._matrix))

    @property
    def scale_x(self) -> float:
        return float(self._matrix[0, 0])

    @property
    def scale_y(self) -> float:
        return float(self._matrix[1, 1])

    @property
    def translation_x(self) -> float:
        return float(self._matrix[0, 2])

    @property
    def translation_y(self) -> float:
        return float(self._matrix[1, 2])

    # -------------------------------------------------------------------------
    # Application
    # -------------------------------------------------------------------------

    def apply(self, x: float, y: float) -> Tuple[float, float]:
        m = self._matrix
        return (
            float(m[0, 0] * x + m[0, 1] * y + m[0, 2]),
            float(m[1, 0] * x + m[1, 1] * y + m[1, 2]),
        )

    def apply_many(self, points: Sequence[Tuple[float, float]]) -> np.ndarray:
        """Transform an (N, 2) sequence of points, returning an (N, 2) array."""
        pts = np.asarray(points, dtype=float).reshape(-1, 2)
        homogeneous = np.hstack([pts, np.ones((pts.shape[0], 1))])
        return (homogeneous @ self._matrix.T)[:, :2]

    def apply_rect(self, rect: Rect) -> Rect:
        """Bounding rectangle of a transformed rectangle."""
        mapped = self.apply_many(rect.corners())
        mins = mapped.min(axis=0)
        maxs = mapped.max(axis=0)
        return Rect(float(mins[0]), float(mins[1]), float(maxs[0] - mins[0]), float(maxs[1] - mins[1]))

    def is_close(self, other: "AffineTransform", tol: float = 1e-9) -> bool:
        return bool(np.allclose(self._matrix, other._matrix, atol=tol))

    def __repr__(self) -> str:
        return (
            f"AffineTransform(sx={self.scale_x:.6g}, sy={self.scale_y:.6g}, "
            f"tx={self.translation_x:.6g}, ty={self.translation_y:.6g})"
        )
