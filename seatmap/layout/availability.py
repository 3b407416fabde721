"""
availability.py - Seat availability sources v1.0

The generator asks an injected source whether each seat is available, so a
layout build is a pure function of (aircraft, source).
"""

from __future__ import annotations
from typing import Mapping, Optional, Protocol
import hashlib
import logging
import random

__all__ = [
    'AvailabilitySource',
    'AllAvailable',
    'SeededAvailability',
    'MappedAvailability',
    'availability_from_seed',
]

logger = logging.getLogger(__name__)


class AvailabilitySource(Protocol):
    """Decides whether a seat can be selected."""

    def is_available(self, seat_id: str, row: int, column: str) -> bool:
        ...


class AllAvailable:
    """Every seat is available."""

    def is_available(self, seat_id: str, row: int, column: str) -> bool:
        return True

    def __repr__(self) -> str:
        return "AllAvailable()"


class SeededAvailability:
    """
    Pseudo-random availability that is reproducible for a given seed.

    Each seat draws from its own generator seeded by (seed, seat_id), so the
    answer for a seat does not depend on the order seats are generated in.
    """

    def __init__(self, seed: int, available_ratio: float = 0.5):
        if not 0.0 <= available_ratio <= 1.0:
            raise ValueError(f"available_ratio must be within [0, 1], got {available_ratio}")
        self.seed = seed
        self.available_ratio = available_ratio

    def is_available(self, seat_id: str, row: int, column: str) -> bool:
        digest = hashlib.sha256(f"{self.seed}:{seat_id}".encode("utf-8")).hexdigest()
        rng = random.Random(int(digest[:16], 16))
        return rng.random() < self.available_ratio

    def __repr__(self) -> str:
        return f"SeededAvailability(seed={self.seed}, available_ratio={self.available_ratio})"


class MappedAvailability:
    """Availability looked up from a seat id -> bool mapping."""

    def __init__(self, mapping: Mapping[str, bool], default: bool = True):
        self._mapping = dict(mapping)
        self.default = default

    def is_available(self, seat_id: str, row: int, column: str) -> bool:
        return bool(self._mapping.get(seat_id, self.default))

    def __repr__(self) -> str:
        return f"MappedAvailability({len(self._mapping)} seats, default={self.default})"


def availability_from_seed(seed: Optional[int]) -> AvailabilitySource:
    """Seeded source when a seed is configured, otherwise all seats available."""
    if seed is None:
        return AllAvailable()
    return SeededAvailability(seed)
