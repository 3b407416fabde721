"""
seatmap layout - cabin layout schema, aircraft catalog and generation.

Provides:
- Section, seat and amenity definitions
- Aircraft profiles and catalog lookup
- Injected seat availability sources
- Build-time configuration validation
- Deterministic layout generation
"""

from seatmap.layout.schema import (
    SeatConfiguration,
    CabinSection,
    SeatDefinition,
    AmenityDefinition,
    CabinLayout,
    seat_identifier,
)
from seatmap.layout.aircraft import (
    AircraftProfile,
    A320_PROFILE,
    register_aircraft,
    register_aircraft_json,
    unregister_aircraft,
    get_aircraft,
    supported_aircraft,
)
from seatmap.layout.availability import (
    AvailabilitySource,
    AllAvailable,
    SeededAvailability,
    MappedAvailability,
    availability_from_seed,
)
from seatmap.layout.validation import (
    ValidationSeverity,
    ConfigurationIssue,
    ValidationResult,
    validate_cabin_configuration,
    ensure_valid_configuration,
)
from seatmap.layout.generator import (
    CabinLayoutGenerator,
    generate_amenities,
    build_layout,
)

__all__ = [
    # Schema
    'SeatConfiguration',
    'CabinSection',
    'SeatDefinition',
    'AmenityDefinition',
    'CabinLayout',
    'seat_identifier',
    # Catalog
    'AircraftProfile',
    'A320_PROFILE',
    'register_aircraft',
    'register_aircraft_json',
    'unregister_aircraft',
    'get_aircraft',
    'supported_aircraft',
    # Availability
    'AvailabilitySource',
    'AllAvailable',
    'SeededAvailability',
    'MappedAvailability',
    'availability_from_seed',
    # Validation
    'ValidationSeverity',
    'ConfigurationIssue',
    'ValidationResult',
    'validate_cabin_configuration',
    'ensure_valid_configuration',
    # Generator
    'CabinLayoutGenerator',
    'generate_amenities',
    'build_layout',
]
