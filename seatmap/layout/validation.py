"""
validation.py - Cabin configuration validation v1.0

Build-time checks that a section list actually fits the declared cabin.
A configuration that fails is a construction defect: the generator raises
instead of producing overlapping geometry.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple
from enum import Enum
import logging

from seatmap.core.constants import COORDINATE_EPSILON, SEAT_LATERAL_GAP_M
from seatmap.errors import LayoutConfigurationError
from seatmap.geometry.cabin import CabinBounds
from seatmap.layout.placement import cushion_depth, lateral_positions, row_positions, seat_pitch
from seatmap.layout.schema import CabinSection, seat_identifier

__all__ = [
    'ValidationSeverity',
    'ConfigurationIssue',
    'ValidationResult',
    'validate_cabin_configuration',
    'ensure_valid_configuration',
]

logger = logging.getLogger(__name__)


# =============================================================================
# RESULT TYPES
# =============================================================================

class ValidationSeverity(Enum):
    """Severity levels for configuration issues."""

    ERROR = "error"       # Geometry would overlap or leave the cabin
    WARNING = "warning"   # Builds, but probably not what was intended


@dataclass
class ConfigurationIssue:
    """A single problem found in a cabin configuration."""

    rule: str
    severity: ValidationSeverity
    message: str
    section_index: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rule": self.rule,
            "severity": self.severity.value,
            "message": self.message,
            "section_index": self.section_index,
        }


@dataclass
class ValidationResult:
    """Outcome of validating a cabin configuration."""

    is_valid: bool = True
    issues: List[ConfigurationIssue] = field(default_factory=list)
    checked_rules: List[str] = field(default_factory=list)

    def add_error(self, rule: str, message: str, section_index: Optional[int] = None) -> None:
        self.issues.append(ConfigurationIssue(rule, ValidationSeverity.ERROR, message, section_index))
        self.is_valid = False

    def add_warning(self, rule: str, message: str, section_index: Optional[int] = None) -> None:
        self.issues.append(ConfigurationIssue(rule, ValidationSeverity.WARNING, message, section_index))

    @property
    def errors(self) -> List[ConfigurationIssue]:
        return [i for i in self.issues if i.severity == ValidationSeverity.ERROR]

    @property
    def warnings(self) -> List[ConfigurationIssue]:
        return [i for i in self.issues if i.severity == ValidationSeverity.WARNING]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "issues": [i.to_dict() for i in self.issues],
            "checked_rules": self.checked_rules,
        }


# =============================================================================
# RULES
# =============================================================================

def _check_row_ranges(sections: Sequence[CabinSection], result: ValidationResult) -> None:
    result.checked_rules.append("row_ranges")
    claimed: Dict[int, int] = {}
    for i, section in enumerate(sections):
        if section.end_row < section.start_row:
            result.add_error(
                "row_ranges",
                f"Section {i} ends at row {section.end_row} before it starts at {section.start_row}",
                i,
            )
            continue
        for row in section.rows:
            if row in claimed:
                result.add_error(
                    "row_ranges",
                    f"Row {row} is claimed by sections {claimed[row]} and {i}",
                    i,
                )
                break
            claimed[row] = i


def _check_columns(sections: Sequence[CabinSection], result: ValidationResult) -> None:
    result.checked_rules.append("columns")
    for i, section in enumerate(sections):
        columns = section.seat_configuration.all_columns
        if not columns:
            result.add_error("columns", f"Section {i} has no seat columns", i)
            continue
        duplicates = sorted({c for c in columns if columns.count(c) > 1})
        if duplicates:
            result.add_error(
                "columns",
                f"Section {i} repeats column(s) {', '.join(duplicates)}",
                i,
            )


def _blocks(bounds: CabinBounds, section: CabinSection) -> List[Tuple[float, float]]:
    """Lateral (min_x, max_x) extent of each non-empty seat block."""
    config = section.seat_configuration
    positions = dict(lateral_positions(bounds, config))
    half = bounds.seat_width / 2
    extents = []
    for group in (config.left_seats, config.middle_seats, config.right_seats):
        if group:
            xs = [positions[c] for c in group]
            extents.append((min(xs) - half, max(xs) + half))
    return extents


def _check_lateral_fit(bounds: CabinBounds, sections: Sequence[CabinSection], result: ValidationResult) -> None:
    result.checked_rules.append("lateral_fit")
    for i, section in enumerate(sections):
        config = section.seat_configuration
        groups = [g for g in (config.left_seats, config.middle_seats, config.right_seats) if g]

        # Seats, in-block gaps and one aisle between neighbouring blocks
        required = (
            len(config.all_columns) * bounds.seat_width
            + sum(len(g) - 1 for g in groups) * SEAT_LATERAL_GAP_M
            + (len(groups) - 1) * bounds.aisle_width
        )
        if required > bounds.width + COORDINATE_EPSILON:
            result.add_error(
                "lateral_fit",
                f"Section {i} ({config.label}) needs {required:.3f} m but the cabin is {bounds.width:.3f} m wide",
                i,
            )

        blocks = _blocks(bounds, section)
        if blocks[0][0] < -bounds.half_width - COORDINATE_EPSILON or blocks[-1][1] > bounds.half_width + COORDINATE_EPSILON:
            result.add_error(
                "lateral_fit",
                f"Section {i} places seats outside the cabin walls",
                i,
            )
        for (_, left_max), (right_min, _) in zip(blocks, blocks[1:]):
            if right_min - left_max < -COORDINATE_EPSILON:
                result.add_error("lateral_fit", f"Section {i} seat blocks overlap", i)
            elif right_min - left_max < bounds.aisle_width - COORDINATE_EPSILON:
                result.add_warning(
                    "lateral_fit",
                    f"Section {i} aisle is {right_min - left_max:.3f} m, narrower than {bounds.aisle_width:.3f} m",
                    i,
                )


def _check_longitudinal_fit(bounds: CabinBounds, sections: Sequence[CabinSection], result: ValidationResult) -> None:
    result.checked_rules.append("longitudinal_fit")
    depth = cushion_depth(bounds)
    for i, section in enumerate(sections):
        if depth > seat_pitch(section.kind) + COORDINATE_EPSILON:
            result.add_error(
                "longitudinal_fit",
                f"Section {i} seat depth {depth:.3f} m exceeds its pitch {seat_pitch(section.kind):.3f} m",
                i,
            )

    rows, _ = row_positions(sections)
    if rows:
        last_y = rows[-1][2]
        if last_y + depth / 2 > bounds.length + COORDINATE_EPSILON:
            result.add_error(
                "longitudinal_fit",
                f"Last row ends at {last_y + depth / 2:.3f} m, past the {bounds.length:.3f} m cabin",
            )


def _check_unique_ids(sections: Sequence[CabinSection], result: ValidationResult) -> None:
    result.checked_rules.append("unique_ids")
    seen = set()
    for i, section in enumerate(sections):
        for row in section.rows:
            for column in section.seat_configuration.all_columns:
                seat_id = seat_identifier(row, column)
                if seat_id in seen:
                    result.add_error("unique_ids", f"Seat id {seat_id} is generated twice", i)
                    return
                seen.add(seat_id)


# =============================================================================
# ENTRY POINTS
# =============================================================================

def validate_cabin_configuration(bounds: CabinBounds, sections: Sequence[CabinSection]) -> ValidationResult:
    """
    Check that sections fit the cabin and produce unique seats.

    Args:
        bounds: Cabin dimensions
        sections: Ordered cabin sections

    Returns:
        ValidationResult with any issues found
    """
    result = ValidationResult()
    if not sections:
        result.add_error("sections", "Cabin has no sections")
        return result

    _check_row_ranges(sections, result)
    _check_columns(sections, result)
    if not result.is_valid:
        return result

    _check_lateral_fit(bounds, sections, result)
    _check_longitudinal_fit(bounds, sections, result)
    _check_unique_ids(sections, result)
    return result


def ensure_valid_configuration(
    bounds: CabinBounds,
    sections: Sequence[CabinSection],
    aircraft_id: str = "",
) -> ValidationResult:
    """
    Validate and raise on errors.

    Raises:
        LayoutConfigurationError: If any rule reports an error
    """
    result = validate_cabin_configuration(bounds, sections)
    for issue in result.warnings:
        logger.warning(issue.message)
    if not result.is_valid:
        messages = [issue.message for issue in result.errors]
        logger.error(f"Cabin configuration rejected: {'; '.join(messages)}")
        raise LayoutConfigurationError(
            f"Cabin configuration has {len(messages)} error(s)",
            aircraft_id=aircraft_id,
            problems=messages,
        )
    return result
