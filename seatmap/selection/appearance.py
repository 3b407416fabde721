"""
appearance.py - Seat appearance resolution v1.0

Appearance is a pure function of seat state and section kind, so the host
can re-derive every seat's colors at any time without stored styling.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict
import logging

from seatmap.core.constants import (
    BASE_LABEL_FONT_SIZE,
    MAX_STROKE_WIDTH,
    MIN_STROKE_WIDTH,
)
from seatmap.core.enums import SeatState, SectionKind

__all__ = [
    'Color',
    'SeatAppearance',
    'SeatStyle',
    'SELECTED_APPEARANCE',
    'UNAVAILABLE_APPEARANCE',
    'SECTION_APPEARANCE',
    'resolve_appearance',
    'seat_style_for_zoom',
]

logger = logging.getLogger(__name__)


# =============================================================================
# COLOR
# =============================================================================

@dataclass(frozen=True)
class Color:
    """RGBA color, channels in [0, 1]."""

    r: float
    g: float
    b: float
    a: float = 1.0

    @classmethod
    def from_rgb255(cls, r: int, g: int, b: int, a: float = 1.0) -> "Color":
        return cls(r / 255.0, g / 255.0, b / 255.0, a)

    @classmethod
    def white(cls, level: float = 1.0) -> "Color":
        return cls(level, level, level, 1.0)

    def with_alpha(self, a: float) -> "Color":
        return Color(self.r, self.g, self.b, a)

    def lerp(self, other: "Color", t: float) -> "Color":
        """Linear blend toward ``other``; t=0 is self, t=1 is other."""
        t = max(0.0, min(1.0, t))
        return Color(
            self.r + (other.r - self.r) * t,
            self.g + (other.g - self.g) * t,
            self.b + (other.b - self.b) * t,
            self.a + (other.a - self.a) * t,
        )

    def to_hex(self) -> str:
        """#RRGGBBAA"""
        channels = (self.r, self.g, self.b, self.a)
        return "#" + "".join(f"{int(round(c * 255)):02X}" for c in channels)

    def is_close(self, other: "Color", tol: float = 1e-9) -> bool:
        return all(
            abs(x - y) <= tol
            for x, y in zip((self.r, self.g, self.b, self.a), (other.r, other.g, other.b, other.a))
        )


# System palette
GREEN = Color.from_rgb255(52, 199, 89)
BLUE = Color.from_rgb255(0, 122, 255)
GRAY = Color.white(0.56)
GRAY3 = Color.white(0.78)
GRAY4 = Color.white(0.82)
GRAY6 = Color.white(0.95)
LABEL = Color.white(0.0)
WHITE = Color.white(1.0)


# =============================================================================
# APPEARANCE
# =============================================================================

@dataclass(frozen=True)
class SeatAppearance:
    """Fill, border and label colors of one seat."""

    fill: Color
    stroke: Color
    text: Color

    def lerp(self, other: "SeatAppearance", t: float) -> "SeatAppearance":
        return SeatAppearance(
            fill=self.fill.lerp(other.fill, t),
            stroke=self.stroke.lerp(other.stroke, t),
            text=self.text.lerp(other.text, t),
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            "fill": self.fill.to_hex(),
            "stroke": self.stroke.to_hex(),
            "text": self.text.to_hex(),
        }


SELECTED_APPEARANCE = SeatAppearance(fill=GREEN, stroke=GREEN, text=WHITE)
UNAVAILABLE_APPEARANCE = SeatAppearance(fill=GRAY4, stroke=GRAY3, text=GRAY)

SECTION_APPEARANCE: Dict[SectionKind, SeatAppearance] = {
    SectionKind.PREMIUM: SeatAppearance(fill=BLUE.with_alpha(0.15), stroke=BLUE, text=BLUE),
    SectionKind.EXIT_ROW: SeatAppearance(fill=GREEN.with_alpha(0.15), stroke=GREEN, text=GREEN),
    SectionKind.ECONOMY: SeatAppearance(fill=GRAY6, stroke=GRAY3, text=LABEL),
}


def resolve_appearance(state: SeatState, section_kind: SectionKind) -> SeatAppearance:
    """
    Colors for a seat.

    Selected seats use the accent, unavailable seats are muted regardless of
    section, and everything else is keyed by section kind.
    """
    if state is SeatState.AVAILABLE_SELECTED:
        return SELECTED_APPEARANCE
    if state is SeatState.UNAVAILABLE:
        return UNAVAILABLE_APPEARANCE
    return SECTION_APPEARANCE[section_kind]


# =============================================================================
# ZOOM-DEPENDENT STYLE
# =============================================================================

@dataclass(frozen=True)
class SeatStyle:
    """Stroke and label sizing at a given zoom."""

    font_size: float
    line_width: float


def seat_style_for_zoom(scale: float) -> SeatStyle:
    """Labels grow with zoom; stroke width stays visually constant within limits."""
    line_width = max(MIN_STROKE_WIDTH, min(MAX_STROKE_WIDTH, 1.0 / scale))
    return SeatStyle(font_size=BASE_LABEL_FONT_SIZE * scale, line_width=line_width)
