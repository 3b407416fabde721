"""
errors.py - Seat map error taxonomy v1.0

Structured error types for layout construction and aircraft resolution.

Runtime conditions such as a degenerate viewport, a tap outside every seat
or selecting an unavailable seat are not errors and never raise.
"""

from __future__ import annotations
from typing import Any, Dict, Optional
from enum import Enum
import logging

logger = logging.getLogger("seatmap.errors")


# =============================================================================
# ERROR CATEGORIES
# =============================================================================

class ErrorCategory(Enum):
    """Categories of seat map errors."""
    CONFIGURATION = "configuration"   # Section/seat configuration inconsistent
    CATALOG = "catalog"               # Aircraft lookup or profile problems
    GEOMETRY = "geometry"             # Degenerate shapes


# =============================================================================
# BASE ERROR CLASS
# =============================================================================

class SeatMapError(Exception):
    """
    Base class for seat map errors.

    Provides structured error information with:
    - Error code for programmatic handling
    - Human-readable message
    - Recovery hint for the host
    - Detailed context for debugging
    """

    code: str = "SEAT_000"
    category: ErrorCategory = ErrorCategory.CONFIGURATION

    def __init__(
        self,
        message: str = "",
        *,
        aircraft_id: str = "",
        recovery_hint: str = "",
        details: Optional[Dict[str, Any]] = None,
        **kwargs,
    ):
        self.message = message or self.__class__.__doc__ or "Seat map error"
        self.aircraft_id = aircraft_id
        self.recovery_hint = recovery_hint
        self.details = details or {}
        self.details.update(kwargs)

        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary."""
        return {
            "code": self.code,
            "category": self.category.value,
            "message": self.message,
            "aircraft_id": self.aircraft_id,
            "recovery_hint": self.recovery_hint,
            "details": self.details,
        }

    def __str__(self) -> str:
        parts = [f"[{self.code}] {self.message}"]
        if self.aircraft_id:
            parts.append(f"(aircraft: {self.aircraft_id})")
        if self.recovery_hint:
            parts.append(f"Hint: {self.recovery_hint}")
        return " ".join(parts)


# =============================================================================
# SPECIFIC ERROR TYPES
# =============================================================================

class LayoutConfigurationError(SeatMapError):
    """Cabin section configuration is inconsistent."""

    code = "SEAT_001"
    category = ErrorCategory.CONFIGURATION

    def __init__(self, message: str, *, problems: Optional[list] = None, **kwargs):
        kwargs.setdefault(
            "recovery_hint",
            "Check section row ranges and that seat columns fit within the cabin width.",
        )
        super().__init__(message, problems=list(problems or []), **kwargs)

    @property
    def problems(self) -> list:
        return self.details.get("problems", [])


class UnknownAircraftError(SeatMapError):
    """Aircraft identifier is not in the catalog."""

    code = "SEAT_002"
    category = ErrorCategory.CATALOG

    def __init__(self, aircraft_id: str, known: Optional[list] = None):
        super().__init__(
            f"Unknown aircraft type: {aircraft_id}",
            aircraft_id=aircraft_id,
            recovery_hint="Register the aircraft profile before building its layout.",
            known=list(known or []),
        )


class InvalidGeometryError(SeatMapError):
    """Geometry has zero or negative extent."""

    code = "SEAT_003"
    category = ErrorCategory.GEOMETRY

    def __init__(self, what: str, width: float, depth: float):
        super().__init__(
            f"{what} must have positive width and depth, got {width} x {depth}",
            width=width,
            depth=depth,
        )


class AircraftProfileError(SeatMapError):
    """Aircraft profile data failed validation."""

    code = "SEAT_004"
    category = ErrorCategory.CATALOG

    def __init__(self, message: str, *, aircraft_id: str = "", errors: Optional[list] = None):
        super().__init__(
            message,
            aircraft_id=aircraft_id,
            recovery_hint="Fix the profile fields reported in details.errors.",
            errors=list(errors or []),
        )
