"""
index.py - Uniform-grid seat index v1.0

Maps 1 m grid cells in cabin space to the seats whose rectangle overlaps
them. A query returns the candidates registered in the single cell holding
the point; candidates still need a precise containment check.

The index belongs to one layout and is rebuilt wholesale when the layout
changes, never patched.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, List, Set, Tuple
import math
import logging

from seatmap.core.constants import GRID_CELL_SIZE_M
from seatmap.geometry.cabin import SeatGeometry
from seatmap.geometry.primitives import CabinCoordinate, Rect

__all__ = [
    'GridKey',
    'SpatialIndex',
]

logger = logging.getLogger("seatmap.spatial")


@dataclass(frozen=True)
class GridKey:
    """Integer cell coordinates."""

    x: int
    y: int


class SpatialIndex:
    """Grid cell -> seat index lists."""

    def __init__(self, cell_size: float = GRID_CELL_SIZE_M):
        if cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {cell_size}")
        self._cell_size = cell_size
        self._grid: Dict[GridKey, List[int]] = {}
        self._cells_by_seat: Dict[int, List[GridKey]] = {}

    @classmethod
    def build(cls, geometries: Iterable[SeatGeometry], cell_size: float = GRID_CELL_SIZE_M) -> "SpatialIndex":
        """Index every geometry under its position in the sequence."""
        index = cls(cell_size)
        for seat_index, geometry in enumerate(geometries):
            index.insert(seat_index, geometry)
        logger.debug(f"Built spatial index: {index.seat_count} seats in {len(index)} cells")
        return index

    @property
    def cell_size(self) -> float:
        return self._cell_size

    # -------------------------------------------------------------------------
    # Cells
    # -------------------------------------------------------------------------

    def cell_key(self, coord: CabinCoordinate) -> GridKey:
        """Cell containing a coordinate."""
        return GridKey(
            int(math.floor(coord.x / self._cell_size)),
            int(math.floor(coord.y / self._cell_size)),
        )

    def cell_rect(self, key: GridKey) -> Rect:
        s = self._cell_size
        return Rect(key.x * s, key.y * s, s, s)

    def cell_range(self, rect: Rect) -> Tuple[GridKey, GridKey]:
        """
        Inclusive (min, max) cells a rectangle overlaps.

        A max edge lying exactly on a cell boundary does not reach into the
        next cell, matching half-open rectangle containment.
        """
        s = self._cell_size
        min_key = GridKey(int(math.floor(rect.min_x / s)), int(math.floor(rect.min_y / s)))
        max_key = GridKey(
            max(min_key.x, int(math.ceil(rect.max_x / s)) - 1),
            max(min_key.y, int(math.ceil(rect.max_y / s)) - 1),
        )
        return min_key, max_key

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def insert(self, seat_index: int, geometry: SeatGeometry) -> None:
        """Register a seat in every cell its rectangle overlaps."""
        min_key, max_key = self.cell_range(geometry.rect)
        cells = self._cells_by_seat.setdefault(seat_index, [])
        for cell_x in range(min_key.x, max_key.x + 1):
            for cell_y in range(min_key.y, max_key.y + 1):
                key = GridKey(cell_x, cell_y)
                self._grid.setdefault(key, []).append(seat_index)
                cells.append(key)

    def clear(self) -> None:
        self._grid.clear()
        self._cells_by_seat.clear()

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def query(self, coord: CabinCoordinate) -> List[int]:
        """Candidate seat indices for the cell containing ``coord``."""
        return list(self._grid.get(self.cell_key(coord), ()))

    def query_rect(self, rect: Rect) -> Set[int]:
        """Candidate seat indices for every cell a rectangle overlaps."""
        min_key, max_key = self.cell_range(rect)
        found: Set[int] = set()
        for cell_x in range(min_key.x, max_key.x + 1):
            for cell_y in range(min_key.y, max_key.y + 1):
                found.update(self._grid.get(GridKey(cell_x, cell_y), ()))
        return found

    def cells_for(self, seat_index: int) -> List[GridKey]:
        return list(self._cells_by_seat.get(seat_index, ()))

    @property
    def indexed_seats(self) -> Set[int]:
        return set(self._cells_by_seat)

    @property
    def seat_count(self) -> int:
        return len(self._cells_by_seat)

    def __len__(self) -> int:
        """Number of occupied cells."""
        return len(self._grid)

    def __contains__(self, key: GridKey) -> bool:
        return key in self._grid
