"""
aircraft.py - Aircraft catalog v1.0

Resolves an aircraft identifier to the parameter set the layout generator
needs: cabin bounds, fuselage geometry and the ordered cabin sections.

Profiles are pydantic models so additional aircraft can be registered from
plain mappings or JSON documents and are validated on the way in.
"""

from __future__ import annotations
from typing import Any, Dict, List, Mapping, Tuple, Union
import logging

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from seatmap.core.enums import SectionKind
from seatmap.errors import AircraftProfileError, UnknownAircraftError
from seatmap.geometry.cabin import CabinBounds, FuselageGeometry
from seatmap.layout.schema import CabinSection, SeatConfiguration

__all__ = [
    'BoundsProfile',
    'FuselageProfile',
    'SectionProfile',
    'AircraftProfile',
    'A320_PROFILE',
    'register_aircraft',
    'register_aircraft_json',
    'unregister_aircraft',
    'get_aircraft',
    'supported_aircraft',
]

logger = logging.getLogger(__name__)


# =============================================================================
# PROFILE MODELS
# =============================================================================

class BoundsProfile(BaseModel):
    """Cabin dimensions (m)."""
    model_config = ConfigDict(frozen=True)

    width: float = Field(..., gt=0, description="Total cabin width (m)")
    length: float = Field(..., gt=0, description="Passenger cabin length (m)")
    aisle_width: float = Field(..., ge=0, description="Aisle width (m)")
    seat_width: float = Field(..., gt=0, description="Seat width (m)")
    seat_depth: float = Field(..., gt=0, description="Seat depth (m)")
    row_spacing: float = Field(0.0, ge=0, description="Clearance between rows (m)")

    def to_bounds(self) -> CabinBounds:
        return CabinBounds(**self.model_dump())


class FuselageProfile(BaseModel):
    """Fuselage outline dimensions (m)."""
    model_config = ConfigDict(frozen=True)

    width: float = Field(..., gt=0, description="Fuselage width (m)")
    length: float = Field(..., gt=0, description="Overall length (m)")
    nose_length: float = Field(..., ge=0, description="Nose taper length (m)")
    tail_length: float = Field(..., ge=0, description="Tail taper length (m)")

    def to_fuselage(self) -> FuselageGeometry:
        return FuselageGeometry(**self.model_dump())


class SectionProfile(BaseModel):
    """One cabin section: row range, classification and column letters."""
    model_config = ConfigDict(frozen=True)

    kind: SectionKind
    start_row: int = Field(..., ge=1)
    end_row: int = Field(..., ge=1)
    left_seats: List[str]
    right_seats: List[str]
    middle_seats: List[str] = Field(default_factory=list)

    @field_validator('left_seats', 'right_seats', 'middle_seats')
    @classmethod
    def validate_columns(cls, v):
        for letter in v:
            if len(letter) != 1 or not letter.isalpha() or not letter.isupper():
                raise ValueError(f'Column must be a single uppercase letter, got {letter!r}')
        return v

    @model_validator(mode='after')
    def validate_rows(self):
        if self.end_row < self.start_row:
            raise ValueError(f'end_row {self.end_row} precedes start_row {self.start_row}')
        if not (self.left_seats or self.middle_seats or self.right_seats):
            raise ValueError('Section defines no seat columns')
        return self

    def to_section(self) -> CabinSection:
        return CabinSection(
            kind=self.kind,
            start_row=self.start_row,
            end_row=self.end_row,
            seat_configuration=SeatConfiguration(
                left_seats=tuple(self.left_seats),
                right_seats=tuple(self.right_seats),
                middle_seats=tuple(self.middle_seats),
            ),
        )


class AircraftProfile(BaseModel):
    """A supported aircraft type."""
    model_config = ConfigDict(frozen=True)

    manufacturer: str = Field(..., min_length=1)
    model: str = Field(..., min_length=1)
    bounds: BoundsProfile
    fuselage: FuselageProfile
    sections: List[SectionProfile] = Field(..., min_length=1)

    @property
    def identifier(self) -> str:
        return self.model.upper()

    @property
    def display_name(self) -> str:
        return f"{self.manufacturer} {self.model}"

    def cabin_bounds(self) -> CabinBounds:
        return self.bounds.to_bounds()

    def fuselage_geometry(self) -> FuselageGeometry:
        return self.fuselage.to_fuselage()

    def cabin_sections(self) -> Tuple[CabinSection, ...]:
        return tuple(section.to_section() for section in self.sections)


# =============================================================================
# BUILT-IN PROFILES
# =============================================================================

A320_PROFILE = AircraftProfile(
    manufacturer="Airbus",
    model="A320",
    bounds=BoundsProfile(
        width=3.7,
        length=27.5,
        aisle_width=0.5,
        seat_width=0.46,
        seat_depth=0.8,
        row_spacing=0.1,
    ),
    fuselage=FuselageProfile(
        width=3.95,
        length=37.57,
        nose_length=5.0,
        tail_length=5.0,
    ),
    sections=[
        SectionProfile(
            kind=SectionKind.PREMIUM, start_row=1, end_row=10,
            left_seats=["A", "C"], right_seats=["D", "F"],
        ),
        SectionProfile(
            kind=SectionKind.EXIT_ROW, start_row=11, end_row=12,
            left_seats=["A", "B", "C"], right_seats=["D", "E", "F"],
        ),
        SectionProfile(
            kind=SectionKind.ECONOMY, start_row=13, end_row=30,
            left_seats=["A", "B", "C"], right_seats=["D", "E", "F"],
        ),
    ],
)


# =============================================================================
# CATALOG
# =============================================================================

_CATALOG: Dict[str, AircraftProfile] = {
    A320_PROFILE.identifier: A320_PROFILE,
}


def register_aircraft(data: Union[AircraftProfile, Mapping[str, Any]]) -> AircraftProfile:
    """
    Add an aircraft profile to the catalog.

    Args:
        data: A profile, or a mapping validated into one

    Returns:
        The registered profile

    Raises:
        AircraftProfileError: If the mapping fails validation
    """
    if isinstance(data, AircraftProfile):
        profile = data
    else:
        try:
            profile = AircraftProfile.model_validate(data)
        except ValidationError as e:
            model = data.get("model", "") if isinstance(data, Mapping) else ""
            logger.error(f"Rejected aircraft profile {model!r}: {e.error_count()} error(s)")
            raise AircraftProfileError(
                f"Invalid aircraft profile {model!r}",
                aircraft_id=str(model),
                errors=[err["msg"] for err in e.errors()],
            ) from e

    if profile.identifier in _CATALOG:
        logger.info(f"Replacing aircraft profile {profile.identifier}")
    _CATALOG[profile.identifier] = profile
    return profile


def register_aircraft_json(raw: Union[str, bytes]) -> AircraftProfile:
    """Validate a JSON document into a profile and register it."""
    try:
        profile = AircraftProfile.model_validate_json(raw)
    except ValidationError as e:
        raise AircraftProfileError(
            "Invalid aircraft profile JSON",
            errors=[err["msg"] for err in e.errors()],
        ) from e
    return register_aircraft(profile)


def unregister_aircraft(identifier: str) -> bool:
    """Remove a profile. Returns True if one was removed."""
    return _CATALOG.pop(identifier.strip().upper(), None) is not None


def get_aircraft(identifier: str) -> AircraftProfile:
    """
    Resolve an aircraft identifier (case-insensitive, e.g. "a320").

    Raises:
        UnknownAircraftError: If no profile is registered under that id
    """
    key = identifier.strip().upper()
    profile = _CATALOG.get(key)
    if profile is None:
        raise UnknownAircraftError(identifier, known=sorted(_CATALOG))
    return profile


def supported_aircraft() -> List[AircraftProfile]:
    """Registered profiles ordered by identifier."""
    return [_CATALOG[key] for key in sorted(_CATALOG)]
