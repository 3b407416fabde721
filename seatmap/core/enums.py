"""
seatmap Core Enumerations

Enumeration types used throughout the seat map core.
"""

from enum import Enum


class SectionKind(str, Enum):
    """
    Classification of a cabin section.
    """
    PREMIUM = "premium"      # 2+2 business cabin
    EXIT_ROW = "exit_row"    # Emergency exit rows
    ECONOMY = "economy"      # 3+3 economy cabin


class AmenityKind(str, Enum):
    """
    Non-seat cabin elements.
    """
    LAVATORY = "lavatory"
    GALLEY = "galley"
    DOOR = "door"
    EXIT_ROW = "exit_row"


class SeatState(str, Enum):
    """
    Selection state of a single seat.

    Transitions:
        AVAILABLE_UNSELECTED -> AVAILABLE_SELECTED   (select)
        AVAILABLE_SELECTED   -> AVAILABLE_UNSELECTED (deselect, or another seat selected)
        UNAVAILABLE          -> (none)
    """
    UNAVAILABLE = "unavailable"
    AVAILABLE_UNSELECTED = "available_unselected"
    AVAILABLE_SELECTED = "available_selected"

    @property
    def is_selectable(self) -> bool:
        return self is SeatState.AVAILABLE_UNSELECTED

    @property
    def is_selected(self) -> bool:
        return self is SeatState.AVAILABLE_SELECTED


class GesturePhase(str, Enum):
    """
    Lifecycle phase of a pan or pinch gesture as reported by the host.
    """
    BEGAN = "began"
    CHANGED = "changed"
    ENDED = "ended"
    CANCELLED = "cancelled"
