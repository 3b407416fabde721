"""
seatmap selection - seat state, appearance and animated transitions.
"""

from .appearance import (
    Color,
    SeatAppearance,
    SeatStyle,
    SELECTED_APPEARANCE,
    UNAVAILABLE_APPEARANCE,
    SECTION_APPEARANCE,
    resolve_appearance,
    seat_style_for_zoom,
)
from .transition import (
    linear,
    cubic_bezier,
    ease_in_ease_out,
    TransitionStatus,
    TransitionFrame,
    SeatTransition,
    TransitionDriver,
)
from .events import (
    SeatEventType,
    SeatEvent,
    SelectionListener,
    SeatEventBus,
)
from .state_machine import SelectionResult, SeatSelectionStateMachine

__all__ = [
    # Appearance
    "Color",
    "SeatAppearance",
    "SeatStyle",
    "SELECTED_APPEARANCE",
    "UNAVAILABLE_APPEARANCE",
    "SECTION_APPEARANCE",
    "resolve_appearance",
    "seat_style_for_zoom",
    # Transitions
    "linear",
    "cubic_bezier",
    "ease_in_ease_out",
    "TransitionStatus",
    "TransitionFrame",
    "SeatTransition",
    "TransitionDriver",
    # Events
    "SeatEventType",
    "SeatEvent",
    "SelectionListener",
    "SeatEventBus",
    # State machine
    "SelectionResult",
    "SeatSelectionStateMachine",
]
