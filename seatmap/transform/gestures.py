"""
gestures.py - Gesture-to-transform adapters v1.0

Converts incremental pan and pinch updates from the host into zoom and
translation changes. Adapters never render; they mark the view dirty
through a RedrawSink and the host re-renders on its next pass.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Protocol
import logging

from seatmap.core.constants import DEFAULT_ZOOM_SCALE, clamp_zoom
from seatmap.core.enums import GesturePhase
from seatmap.geometry.primitives import ViewPoint

__all__ = [
    'RedrawSink',
    'ViewTransformState',
    'PanGesture',
    'PinchGesture',
    'PanAdapter',
    'PinchAdapter',
]

logger = logging.getLogger("seatmap.gestures")


class RedrawSink(Protocol):
    """Receives "state changed, re-render" requests."""

    def request_redraw(self, reason: str) -> None:
        ...


@dataclass
class ViewTransformState:
    """User-controlled zoom and pan. Scale always stays within [0.5, 3.0]."""

    scale: float = DEFAULT_ZOOM_SCALE
    translation: ViewPoint = field(default_factory=ViewPoint.zero)

    def __post_init__(self):
        self.scale = clamp_zoom(self.scale)

    def pan_by(self, dx: float, dy: float) -> None:
        self.translation = ViewPoint(self.translation.x + dx, self.translation.y + dy)

    def zoom_by(self, factor: float) -> None:
        self.scale = clamp_zoom(self.scale * factor)

    def reset(self) -> None:
        self.scale = DEFAULT_ZOOM_SCALE
        self.translation = ViewPoint.zero()

    @property
    def is_identity(self) -> bool:
        return self.scale == DEFAULT_ZOOM_SCALE and self.translation == ViewPoint.zero()


# =============================================================================
# GESTURE RECORDS
# =============================================================================

@dataclass
class PanGesture:
    """
    Host pan recognizer state: translation accumulated since the last reset.

    The adapter consumes ``translation`` and resets it to zero.
    """

    phase: GesturePhase
    translation: ViewPoint = field(default_factory=ViewPoint.zero)


@dataclass
class PinchGesture:
    """
    Host pinch recognizer state: scale factor accumulated since the last reset.

    The adapter consumes ``scale`` and resets it to 1.0.
    """

    phase: GesturePhase
    scale: float = 1.0


# =============================================================================
# ADAPTERS
# =============================================================================

class PanAdapter:
    """Adds pan deltas (already in view pixels) to the translation."""

    def __init__(self, state: ViewTransformState, redraw: Optional[RedrawSink] = None):
        self._state = state
        self._redraw = redraw

    def handle(self, gesture: PanGesture) -> bool:
        """
        Apply one pan update.

        Returns:
            True if the translation changed
        """
        if gesture.phase is not GesturePhase.CHANGED:
            return False

        delta = gesture.translation
        gesture.translation = ViewPoint.zero()
        if delta.x == 0 and delta.y == 0:
            return False

        self._state.pan_by(delta.x, delta.y)
        if self._redraw is not None:
            self._redraw.request_redraw("pan")
        return True


class PinchAdapter:
    """Multiplies the zoom by the pinch increment, clamped to [0.5, 3.0]."""

    def __init__(self, state: ViewTransformState, redraw: Optional[RedrawSink] = None):
        self._state = state
        self._redraw = redraw

    def handle(self, gesture: PinchGesture) -> bool:
        """
        Apply one pinch update.

        Returns:
            True if the update was applied (the clamped scale may be unchanged)
        """
        if gesture.phase is not GesturePhase.CHANGED:
            return False

        factor = gesture.scale
        gesture.scale = 1.0
        if factor <= 0:
            logger.debug(f"Ignoring non-positive pinch factor {factor}")
            return False

        self._state.zoom_by(factor)
        if self._redraw is not None:
            self._redraw.request_redraw("pinch")
        return True
