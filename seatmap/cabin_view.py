"""
cabin_view.py - Cabin view controller v1.0

The single view-side component of the seat map. It owns the layout, its
spatial index, the user's pan/zoom state and the selection state machine,
and exposes what a host UI needs to draw frames and forward input:

    controller = CabinViewController.for_aircraft("A320")
    controller.set_viewport_size(ViewSize(390, 844))
    controller.on_redraw = lambda reason: view.set_needs_display()
    controller.handle_tap(ViewPoint(195, 300))
    for frame in controller.seat_frames():
        ...

Drawing, navigation and confirmation UI stay with the host.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple
import logging

from seatmap.config import SeatMapConfig, get_config
from seatmap.core.enums import AmenityKind, GesturePhase, SeatState
from seatmap.geometry.primitives import Rect, ViewPoint, ViewSize
from seatmap.layout.availability import availability_from_seed
from seatmap.layout.generator import CabinLayoutGenerator
from seatmap.layout.schema import CabinLayout, SeatDefinition
from seatmap.selection.appearance import SeatAppearance, SeatStyle, seat_style_for_zoom
from seatmap.selection.events import SeatEvent, SeatEventBus, SeatEventType, SelectionListener
from seatmap.selection.state_machine import SeatSelectionStateMachine, SelectionResult
from seatmap.selection.transition import TransitionDriver, TransitionFrame
from seatmap.spatial.hit_test import SeatHitTester
from seatmap.transform.context import RenderingContext
from seatmap.transform.gestures import (
    PanAdapter,
    PanGesture,
    PinchAdapter,
    PinchGesture,
    ViewTransformState,
)

__all__ = [
    'SeatFrame',
    'AmenityFrame',
    'CabinViewController',
]

logger = logging.getLogger("seatmap.view")

RedrawCallback = Callable[[str], None]


# =============================================================================
# FRAME RECORDS
# =============================================================================

@dataclass(frozen=True)
class SeatFrame:
    """Everything needed to draw one seat in view space."""

    seat_id: str
    rect: Rect
    corner_radius: float
    scale: float
    appearance: SeatAppearance
    style: SeatStyle
    state: SeatState

    @property
    def presented_rect(self) -> Rect:
        """``rect`` scaled about its center by the presentation scale."""
        cx, cy = self.rect.center
        return Rect.from_center(cx, cy, self.rect.width * self.scale, self.rect.height * self.scale)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "seat_id": self.seat_id,
            "rect": [self.rect.x, self.rect.y, self.rect.width, self.rect.height],
            "corner_radius": self.corner_radius,
            "scale": self.scale,
            "appearance": self.appearance.to_dict(),
            "font_size": self.style.font_size,
            "line_width": self.style.line_width,
            "state": self.state.value,
        }


@dataclass(frozen=True)
class AmenityFrame:
    """View-space rectangle of a lavatory, galley or marker."""

    amenity_id: str
    kind: AmenityKind
    rect: Rect
    label: Optional[str] = None


# =============================================================================
# CONTROLLER
# =============================================================================

class CabinViewController:
    """
    Consolidated cabin view core.

    Single-threaded: every method is expected on the host's UI thread. The
    controller is also the RedrawSink for its gesture adapters, so every
    applied update ends up in request_redraw().
    """

    def __init__(
        self,
        layout: CabinLayout,
        config: Optional[SeatMapConfig] = None,
        driver: Optional[TransitionDriver] = None,
    ):
        self._config = config or get_config()
        self._layout = layout
        self._bus = SeatEventBus()
        self._hit_tester = SeatHitTester(layout)
        self._view_state = ViewTransformState()
        self._view_size = ViewSize(0.0, 0.0)
        self._pan = PanAdapter(self._view_state, redraw=self)
        self._pinch = PinchAdapter(self._view_state, redraw=self)
        self._selection = SeatSelectionStateMachine(
            layout,
            bus=self._bus,
            driver=driver or TransitionDriver(duration=self._config.transition_duration_s),
            animate=self._config.animate_selection,
        )
        self.on_redraw: Optional[RedrawCallback] = None

        # Selection machine redraws are forwarded to the host callback
        self._bus.subscribe(SeatEventType.REDRAW_REQUESTED, self._forward_redraw)

        logger.info(f"Cabin view ready for {layout.aircraft_id} ({layout.seat_count} seats)")

    @classmethod
    def for_aircraft(
        cls,
        aircraft: Optional[str] = None,
        config: Optional[SeatMapConfig] = None,
    ) -> "CabinViewController":
        """
        Build the layout for a catalog aircraft and wrap it in a controller.

        Raises:
            UnknownAircraftError: If the aircraft is not in the catalog
        """
        config = config or get_config()
        generator = CabinLayoutGenerator(availability_from_seed(config.availability_seed))
        layout = generator.generate(aircraft or config.default_aircraft)
        return cls(layout, config=config)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def layout(self) -> CabinLayout:
        return self._layout

    @property
    def config(self) -> SeatMapConfig:
        return self._config

    @property
    def events(self) -> SeatEventBus:
        return self._bus

    @property
    def selection(self) -> SeatSelectionStateMachine:
        return self._selection

    @property
    def hit_tester(self) -> SeatHitTester:
        return self._hit_tester

    @property
    def view_state(self) -> ViewTransformState:
        return self._view_state

    @property
    def viewport_size(self) -> ViewSize:
        return self._view_size

    @property
    def selected_seat_id(self) -> Optional[str]:
        return self._selection.selected_id

    @property
    def render_seats(self) -> bool:
        return self._config.render_seats

    @property
    def rendering_context(self) -> Optional[RenderingContext]:
        """Transform for the current viewport and zoom; None until the viewport has an area."""
        return RenderingContext.create(
            self._layout.bounds,
            self._view_size,
            scale=self._view_state.scale,
            translation=self._view_state.translation,
        )

    # -------------------------------------------------------------------------
    # Layout and viewport
    # -------------------------------------------------------------------------

    def set_layout(self, layout: CabinLayout) -> None:
        """Swap in a new layout; the index is rebuilt and selection starts fresh."""
        self._layout = layout
        self._hit_tester.rebuild(layout)
        self._selection.rebuild(layout)
        logger.info(f"Cabin view switched to {layout.aircraft_id} ({layout.seat_count} seats)")

    def set_viewport_size(self, size: ViewSize) -> bool:
        """
        Record the host view's size.

        Returns:
            False when the size is degenerate and rendering is skipped
        """
        self._view_size = size
        if size.is_degenerate:
            logger.debug(f"Viewport {size.width}x{size.height} is degenerate, skipping render")
            return False
        self.request_redraw("layout")
        return True

    # -------------------------------------------------------------------------
    # Selection
    # -------------------------------------------------------------------------

    def select_seat(self, seat_id: str) -> Optional[str]:
        """
        Select a seat by id.

        Returns:
            The selected seat id after the request; unchanged when the seat is
            unknown or unavailable
        """
        self._selection.select(seat_id)
        return self._selection.selected_id

    def clear_selection(self) -> SelectionResult:
        return self._selection.deselect()

    def confirm_selection(self) -> Optional[str]:
        """Selected seat id for the host's confirmation action, or None."""
        seat_id = self._selection.selected_id
        if seat_id is None:
            logger.debug("Confirm requested with nothing selected")
            return None
        logger.info(f"Seat confirmed: {seat_id}")
        return seat_id

    def add_selection_listener(self, listener: SelectionListener) -> None:
        self._bus.add_listener(listener)

    def remove_selection_listener(self, listener: SelectionListener) -> bool:
        return self._bus.remove_listener(listener)

    # -------------------------------------------------------------------------
    # Input
    # -------------------------------------------------------------------------

    def seat_at_view_point(self, point: ViewPoint) -> Optional[SeatDefinition]:
        return self._hit_tester.hit_view_point(point, self.rendering_context)

    def handle_tap(self, point: ViewPoint) -> Optional[str]:
        """
        Select the seat under a tap.

        Returns:
            Id of the tapped seat if it is now selected, else None
        """
        seat = self.seat_at_view_point(point)
        if seat is None:
            return None
        result = self._selection.select(seat.id)
        if not result.changed and result.reason != "already_selected":
            return None
        return seat.id

    def handle_pan(self, phase: GesturePhase, dx: float, dy: float) -> ViewPoint:
        """
        Forward a pan update in view pixels.

        Returns:
            The delta left on the recognizer, zero once consumed
        """
        gesture = PanGesture(phase=phase, translation=ViewPoint(dx, dy))
        self._pan.handle(gesture)
        return gesture.translation

    def handle_pinch(self, phase: GesturePhase, factor: float) -> float:
        """
        Forward a pinch update.

        Returns:
            The factor left on the recognizer, 1.0 once consumed
        """
        gesture = PinchGesture(phase=phase, scale=factor)
        self._pinch.handle(gesture)
        return gesture.scale

    def reset_view(self) -> None:
        """Back to scale 1.0 and no translation. Selection is not touched."""
        self._view_state.reset()
        self._bus.emit(SeatEvent(event_type=SeatEventType.VIEW_RESET, source="view"))
        self.request_redraw("reset")

    # -------------------------------------------------------------------------
    # Redraw
    # -------------------------------------------------------------------------

    def request_redraw(self, reason: str) -> None:
        self._bus.emit(SeatEvent.redraw_requested(reason, source="view"))

    def _forward_redraw(self, event: SeatEvent) -> None:
        if self.on_redraw is not None:
            self.on_redraw(event.payload.get("reason", ""))

    def tick(self, now: Optional[float] = None) -> List[TransitionFrame]:
        """Advance selection animations; called once per display frame."""
        return self._selection.tick(now)

    # -------------------------------------------------------------------------
    # Frames
    # -------------------------------------------------------------------------

    def seat_frames(self) -> List[SeatFrame]:
        """
        View-space frames for every seat.

        Empty when seat rendering is disabled or the viewport is degenerate.
        """
        if not self._config.render_seats:
            return []
        context = self.rendering_context
        if context is None:
            return []

        style = seat_style_for_zoom(self._view_state.scale)
        s = context.effective_scale
        frames = []
        for seat in self._layout.seats:
            frames.append(SeatFrame(
                seat_id=seat.id,
                rect=context.to_view_rect(seat.rect),
                corner_radius=seat.geometry.corner_radius * s,
                scale=self._selection.presented_scale(seat.id),
                appearance=self._selection.presented_appearance(seat.id),
                style=style,
                state=self._selection.state_of(seat.id),
            ))
        return frames

    def amenity_frames(self) -> List[AmenityFrame]:
        context = self.rendering_context
        if context is None:
            return []
        return [
            AmenityFrame(
                amenity_id=amenity.id,
                kind=amenity.kind,
                rect=context.to_view_rect(amenity.rect),
                label=amenity.label,
            )
            for amenity in self._layout.amenities
        ]

    def fuselage_outline_view(self, segments: int = 8) -> List[Tuple[float, float]]:
        """Closed fuselage polygon in view pixels."""
        context = self.rendering_context
        if context is None:
            return []
        fuselage = self._layout.fuselage
        return context.project_outline(fuselage.outline(self._layout.bounds, segments=segments), fuselage)
