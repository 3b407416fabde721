"""
state_machine.py - Seat selection state machine v1.0

Per-seat states and the single global selection of one cabin view.

    AVAILABLE_UNSELECTED --select--> AVAILABLE_SELECTED
    AVAILABLE_SELECTED --deselect / another seat selected--> AVAILABLE_UNSELECTED
    UNAVAILABLE: terminal, select() is a no-op

At most one seat is AVAILABLE_SELECTED at any time.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple
import logging

from seatmap.core.constants import SELECTED_SEAT_SCALE, UNSELECTED_SEAT_SCALE
from seatmap.core.enums import SeatState
from seatmap.layout.schema import CabinLayout
from seatmap.selection.appearance import SeatAppearance, resolve_appearance
from seatmap.selection.events import SeatEvent, SeatEventBus
from seatmap.selection.transition import SeatTransition, TransitionDriver, TransitionFrame

__all__ = [
    'SelectionResult',
    'SeatSelectionStateMachine',
]

logger = logging.getLogger("seatmap.selection")


@dataclass(frozen=True)
class SelectionResult:
    """
    Outcome of a select/deselect request.

    Attributes:
        changed: False when the request was a no-op
        selected_id: Selection after the request
        previous_id: Selection before the request
        reason: Why nothing changed ("" when changed)
    """

    changed: bool
    selected_id: Optional[str]
    previous_id: Optional[str]
    reason: str = ""

    @classmethod
    def no_change(cls, current: Optional[str], reason: str) -> "SelectionResult":
        return cls(changed=False, selected_id=current, previous_id=current, reason=reason)


class SeatSelectionStateMachine:
    """
    Tracks seat states for one layout and presents changes.

    Presentation (scale and colors) is either applied immediately or animated
    through the TransitionDriver; the machine is the observer of its own
    transitions and drops frames from superseded ones.
    """

    def __init__(
        self,
        layout: CabinLayout,
        bus: Optional[SeatEventBus] = None,
        driver: Optional[TransitionDriver] = None,
        animate: bool = True,
    ):
        self._layout = layout
        self._bus = bus or SeatEventBus()
        self._driver = driver or TransitionDriver()
        self._animate = animate
        self._states: Dict[str, SeatState] = {}
        self._presented: Dict[str, Tuple[float, SeatAppearance]] = {}
        self._selected: Optional[str] = None
        self._load_states()

    def _load_states(self) -> None:
        self._states = {
            seat.id: SeatState.AVAILABLE_UNSELECTED if seat.is_available else SeatState.UNAVAILABLE
            for seat in self._layout.seats
        }
        self._presented.clear()
        self._selected = None

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def layout(self) -> CabinLayout:
        return self._layout

    @property
    def bus(self) -> SeatEventBus:
        return self._bus

    @property
    def driver(self) -> TransitionDriver:
        return self._driver

    @property
    def animate(self) -> bool:
        return self._animate

    @animate.setter
    def animate(self, value: bool) -> None:
        self._animate = value

    @property
    def selected_id(self) -> Optional[str]:
        return self._selected

    def state_of(self, seat_id: str) -> Optional[SeatState]:
        return self._states.get(seat_id)

    def selected_ids(self) -> List[str]:
        """Every seat in the selected state (never more than one)."""
        return [sid for sid, state in self._states.items() if state is SeatState.AVAILABLE_SELECTED]

    # -------------------------------------------------------------------------
    # Appearance
    # -------------------------------------------------------------------------

    def appearance_of(self, seat_id: str) -> Optional[SeatAppearance]:
        """Resting appearance derived from state alone."""
        seat = self._layout.seat_by_id(seat_id)
        if seat is None:
            return None
        return resolve_appearance(self._states[seat_id], seat.section_kind)

    def target_scale(self, seat_id: str) -> float:
        if self._states.get(seat_id) is SeatState.AVAILABLE_SELECTED:
            return SELECTED_SEAT_SCALE
        return UNSELECTED_SEAT_SCALE

    def presented_scale(self, seat_id: str) -> float:
        """Scale currently on screen, mid-animation if one is running."""
        presented = self._presented.get(seat_id)
        return presented[0] if presented else self.target_scale(seat_id)

    def presented_appearance(self, seat_id: str) -> Optional[SeatAppearance]:
        presented = self._presented.get(seat_id)
        return presented[1] if presented else self.appearance_of(seat_id)

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def select(self, seat_id: str) -> SelectionResult:
        """
        Select a seat, implicitly deselecting the previous one.

        Unknown, unavailable or already-selected seats are a no-op.
        """
        current = self._selected
        state = self._states.get(seat_id)
        if state is None:
            logger.debug(f"Ignoring selection of unknown seat {seat_id!r}")
            return SelectionResult.no_change(current, "unknown_seat")
        if state is SeatState.UNAVAILABLE:
            logger.debug(f"Ignoring selection of unavailable seat {seat_id}")
            return SelectionResult.no_change(current, "unavailable")
        if not state.is_selectable:
            return SelectionResult.no_change(current, "already_selected")

        previous = self._selected
        if previous is not None:
            self._set_state(previous, SeatState.AVAILABLE_UNSELECTED)
        self._set_state(seat_id, SeatState.AVAILABLE_SELECTED)
        self._selected = seat_id

        logger.info(f"Seat selected: {seat_id}" + (f" (was {previous})" if previous else ""))
        self._bus.emit(SeatEvent.selection_changed(seat_id, previous))
        self._request_redraw("selection")
        return SelectionResult(changed=True, selected_id=seat_id, previous_id=previous)

    def deselect(self) -> SelectionResult:
        """Return the current selection to available-unselected."""
        previous = self._selected
        if previous is None:
            return SelectionResult.no_change(None, "nothing_selected")

        self._set_state(previous, SeatState.AVAILABLE_UNSELECTED)
        self._selected = None

        logger.info(f"Seat deselected: {previous}")
        self._bus.emit(SeatEvent.selection_changed(None, previous))
        self._request_redraw("selection")
        return SelectionResult(changed=True, selected_id=None, previous_id=previous)

    def toggle(self, seat_id: str) -> SelectionResult:
        """Select a seat, or deselect it when it is already the selection."""
        if self._selected == seat_id:
            return self.deselect()
        return self.select(seat_id)

    def reset(self) -> None:
        """Clear selection and presentation without animating, e.g. on navigation away."""
        animate = self._animate
        self._animate = False
        try:
            if self._selected is not None:
                self.deselect()
        finally:
            self._animate = animate
        self._driver.cancel_all()
        self._presented.clear()

    def rebuild(self, layout: CabinLayout) -> None:
        """Switch to a new layout; all state starts fresh."""
        self._driver.cancel_all()
        previous = self._selected
        self._layout = layout
        self._load_states()
        if previous is not None:
            self._bus.emit(SeatEvent.selection_changed(None, previous))
        self._request_redraw("layout")

    def _set_state(self, seat_id: str, new_state: SeatState) -> None:
        old_state = self._states[seat_id]
        if old_state is new_state:
            return
        self._states[seat_id] = new_state
        self._bus.emit(SeatEvent.seat_state_changed(seat_id, old_state.value, new_state.value))
        self._present(seat_id)

    def _present(self, seat_id: str) -> None:
        target_scale = self.target_scale(seat_id)
        target_appearance = self.appearance_of(seat_id)

        if not self._animate:
            self._driver.cancel(seat_id)
            self._presented[seat_id] = (target_scale, target_appearance)
            return

        # Start from what is on screen so a preempted animation continues smoothly
        if seat_id in self._presented:
            from_scale, from_appearance = self._presented[seat_id]
        else:
            from_scale = self._resting_scale_before(seat_id)
            from_appearance = self._resting_appearance_before(seat_id)
        self._presented[seat_id] = (from_scale, from_appearance)

        self._driver.start(
            seat_id,
            from_scale=from_scale,
            to_scale=target_scale,
            from_appearance=from_appearance,
            to_appearance=target_appearance,
            observer=self,
        )

    def _resting_scale_before(self, seat_id: str) -> float:
        # State already flipped; the previous resting scale is the opposite one
        if self._states[seat_id] is SeatState.AVAILABLE_SELECTED:
            return UNSELECTED_SEAT_SCALE
        return SELECTED_SEAT_SCALE

    def _resting_appearance_before(self, seat_id: str) -> SeatAppearance:
        seat = self._layout.seat_by_id(seat_id)
        if self._states[seat_id] is SeatState.AVAILABLE_SELECTED:
            return resolve_appearance(SeatState.AVAILABLE_UNSELECTED, seat.section_kind)
        return resolve_appearance(SeatState.AVAILABLE_SELECTED, seat.section_kind)

    # -------------------------------------------------------------------------
    # Frame driving
    # -------------------------------------------------------------------------

    def tick(self, now: Optional[float] = None) -> List[TransitionFrame]:
        """Advance running animations; called by the host once per frame."""
        return self._driver.tick(now)

    def on_transition_progress(self, transition: SeatTransition, frame: TransitionFrame) -> None:
        if not self._driver.is_current(transition):
            return
        self._presented[frame.seat_id] = (frame.scale, frame.appearance)
        self._request_redraw("transition")

    def on_transition_complete(self, transition: SeatTransition, frame: TransitionFrame) -> None:
        # Re-derive from state rather than trusting the frame
        self._presented[frame.seat_id] = (self.target_scale(frame.seat_id), self.appearance_of(frame.seat_id))
        self._request_redraw("transition")

    def _request_redraw(self, reason: str) -> None:
        self._bus.emit(SeatEvent.redraw_requested(reason, source="selection"))
