"""
test_layout_validation.py - Tests for build-time configuration validation

Tests for:
- Row range rules
- Column rules
- Lateral and longitudinal fit
- Generator refusal of inconsistent configurations
"""

import pytest


def section(kind, start, end, left=("A", "B", "C"), right=("D", "E", "F"), middle=()):
    from seatmap.layout.schema import CabinSection, SeatConfiguration

    return CabinSection(
        kind=kind,
        start_row=start,
        end_row=end,
        seat_configuration=SeatConfiguration(left_seats=tuple(left), right_seats=tuple(right),
                                             middle_seats=tuple(middle)),
    )


class TestValidateCabinConfiguration:
    """Tests for validate_cabin_configuration."""

    def test_a320_is_valid(self, a320_bounds):
        from seatmap.layout.aircraft import get_aircraft
        from seatmap.layout.validation import validate_cabin_configuration

        result = validate_cabin_configuration(a320_bounds, get_aircraft("A320").cabin_sections())

        assert result.is_valid
        assert result.errors == []
        assert result.checked_rules == ["row_ranges", "columns", "lateral_fit", "longitudinal_fit", "unique_ids"]

    def test_no_sections(self, a320_bounds):
        from seatmap.layout.validation import validate_cabin_configuration

        result = validate_cabin_configuration(a320_bounds, [])

        assert not result.is_valid

    def test_overlapping_rows(self, a320_bounds):
        from seatmap.core.enums import SectionKind
        from seatmap.layout.validation import validate_cabin_configuration

        sections = [section(SectionKind.ECONOMY, 1, 10), section(SectionKind.ECONOMY, 8, 12)]
        result = validate_cabin_configuration(a320_bounds, sections)

        assert not result.is_valid
        assert result.errors[0].rule == "row_ranges"
        assert result.errors[0].section_index == 1

    def test_inverted_rows(self, a320_bounds):
        from seatmap.core.enums import SectionKind
        from seatmap.layout.validation import validate_cabin_configuration

        result = validate_cabin_configuration(a320_bounds, [section(SectionKind.ECONOMY, 5, 3)])

        assert not result.is_valid
        assert "before it starts" in result.errors[0].message

    def test_duplicate_columns(self, a320_bounds):
        from seatmap.core.enums import SectionKind
        from seatmap.layout.validation import validate_cabin_configuration

        result = validate_cabin_configuration(
            a320_bounds, [section(SectionKind.ECONOMY, 1, 2, left=("A", "B"), right=("B", "F"))]
        )

        assert not result.is_valid
        assert result.errors[0].rule == "columns"

    def test_three_blocks_do_not_fit_single_aisle(self, a320_bounds):
        """2+2+2 needs two aisles, more than a 3.7 m cabin offers."""
        from seatmap.core.enums import SectionKind
        from seatmap.layout.validation import validate_cabin_configuration

        sections = [section(SectionKind.PREMIUM, 1, 5, left=("A", "B"), middle=("C", "D"), right=("E", "F"))]
        result = validate_cabin_configuration(a320_bounds, sections)

        assert not result.is_valid
        assert any(issue.rule == "lateral_fit" for issue in result.errors)

    def test_too_many_rows_for_cabin(self, a320_bounds):
        from seatmap.core.enums import SectionKind
        from seatmap.layout.validation import validate_cabin_configuration

        result = validate_cabin_configuration(a320_bounds, [section(SectionKind.ECONOMY, 1, 40)])

        assert not result.is_valid
        assert result.errors[-1].rule == "longitudinal_fit"

    def test_result_to_dict(self, a320_bounds):
        from seatmap.core.enums import SectionKind
        from seatmap.layout.validation import validate_cabin_configuration

        data = validate_cabin_configuration(a320_bounds, [section(SectionKind.ECONOMY, 5, 3)]).to_dict()

        assert data["is_valid"] is False
        assert data["issues"][0]["severity"] == "error"


class TestGeneratorRefusesBadConfiguration:
    """The generator raises instead of producing overlapping seats."""

    def test_overlapping_sections_raise(self, a320_bounds):
        from seatmap.core.enums import SectionKind
        from seatmap.errors import LayoutConfigurationError
        from seatmap.layout.aircraft import get_aircraft
        from seatmap.layout.generator import CabinLayoutGenerator

        sections = [section(SectionKind.ECONOMY, 1, 10), section(SectionKind.ECONOMY, 10, 12)]

        with pytest.raises(LayoutConfigurationError) as exc_info:
            CabinLayoutGenerator().generate_from_parts(
                aircraft_id="TEST",
                bounds=a320_bounds,
                fuselage=get_aircraft("A320").fuselage_geometry(),
                sections=sections,
            )

        error = exc_info.value
        assert error.code == "SEAT_001"
        assert error.aircraft_id == "TEST"
        assert error.problems

    def test_overflowing_width_raises(self):
        from seatmap.core.enums import SectionKind
        from seatmap.errors import LayoutConfigurationError
        from seatmap.geometry.cabin import CabinBounds, FuselageGeometry
        from seatmap.layout.generator import CabinLayoutGenerator

        narrow = CabinBounds(width=2.0, length=20.0, aisle_width=0.5,
                             seat_width=0.46, seat_depth=0.8, row_spacing=0.1)

        with pytest.raises(LayoutConfigurationError):
            CabinLayoutGenerator().generate_from_parts(
                aircraft_id="NARROW",
                bounds=narrow,
                fuselage=FuselageGeometry(width=2.2, length=25.0, nose_length=3.0, tail_length=3.0),
                sections=[section(SectionKind.ECONOMY, 1, 5)],
            )
