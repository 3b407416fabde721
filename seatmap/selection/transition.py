"""
transition.py - Interruptible seat transitions v1.0

A selection change can be presented as a short animation: the seat scales
from 1.0 to 1.1 (or back) while its colors cross-fade. The host's per-frame
driver calls TransitionDriver.tick(); the driver reports eased progress to
the transition's observer and fires one completion at the end.

Each transition carries a generation token. Starting a new transition for a
seat supersedes the old one, and callbacks are only delivered while the
token is still current, so a preempted animation never writes stale state.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Protocol
from enum import Enum
import itertools
import logging
import time

from seatmap.core.constants import COLOR_SWITCH_PROGRESS, SELECTION_TRANSITION_DURATION_S
from seatmap.selection.appearance import SeatAppearance

__all__ = [
    'EasingFunction',
    'linear',
    'cubic_bezier',
    'ease_in_ease_out',
    'TransitionStatus',
    'TransitionFrame',
    'TransitionObserver',
    'SeatTransition',
    'TransitionDriver',
]

logger = logging.getLogger("seatmap.transition")


# =============================================================================
# EASING
# =============================================================================

EasingFunction = Callable[[float], float]


def linear(t: float) -> float:
    return max(0.0, min(1.0, t))


def cubic_bezier(x1: float, y1: float, x2: float, y2: float) -> EasingFunction:
    """
    CSS-style cubic-bezier timing curve through (0,0) and (1,1).

    Solves x(s) = t by bisection, which is monotonic for x1, x2 in [0, 1].
    """
    def coord(s: float, p1: float, p2: float) -> float:
        u = 1.0 - s
        return 3 * u * u * s * p1 + 3 * u * s * s * p2 + s * s * s

    def ease(t: float) -> float:
        if t <= 0.0:
            return 0.0
        if t >= 1.0:
            return 1.0
        lo, hi = 0.0, 1.0
        for _ in range(40):
            mid = (lo + hi) / 2
            if coord(mid, x1, x2) < t:
                lo = mid
            else:
                hi = mid
        return coord((lo + hi) / 2, y1, y2)

    return ease


ease_in_ease_out = cubic_bezier(0.42, 0.0, 0.58, 1.0)


# =============================================================================
# TRANSITION
# =============================================================================

class TransitionStatus(Enum):
    RUNNING = "running"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class TransitionFrame:
    """Presentation values at one progress step."""

    seat_id: str
    progress: float
    scale: float
    appearance: SeatAppearance


class TransitionObserver(Protocol):
    """Receives frames and the completion of a seat transition."""

    def on_transition_progress(self, transition: "SeatTransition", frame: TransitionFrame) -> None:
        ...

    def on_transition_complete(self, transition: "SeatTransition", frame: TransitionFrame) -> None:
        ...


@dataclass
class SeatTransition:
    """Handle for one in-flight seat animation."""

    seat_id: str
    generation: int
    from_scale: float
    to_scale: float
    from_appearance: SeatAppearance
    to_appearance: SeatAppearance
    started_at: float
    duration: float = SELECTION_TRANSITION_DURATION_S
    easing: EasingFunction = ease_in_ease_out
    observer: Optional[TransitionObserver] = None
    status: TransitionStatus = TransitionStatus.RUNNING
    progress: float = 0.0

    @property
    def is_running(self) -> bool:
        return self.status is TransitionStatus.RUNNING

    @property
    def ends_at(self) -> float:
        return self.started_at + self.duration

    def raw_progress(self, now: float) -> float:
        # Compare against the end time first; (now - start) / duration can land just under 1.0
        if self.duration <= 0 or now >= self.ends_at:
            return 1.0
        return max(0.0, min(1.0, (now - self.started_at) / self.duration))

    def scale_at(self, progress: float) -> float:
        return self.from_scale + (self.to_scale - self.from_scale) * progress

    def appearance_at(self, progress: float) -> SeatAppearance:
        """
        Cross-faded colors. Past the switch point the target colors are
        shown outright, and at completion exactly the target is returned.
        """
        if progress >= 1.0 or progress > COLOR_SWITCH_PROGRESS:
            return self.to_appearance
        return self.from_appearance.lerp(self.to_appearance, progress / COLOR_SWITCH_PROGRESS)

    def frame(self, progress: float) -> TransitionFrame:
        return TransitionFrame(
            seat_id=self.seat_id,
            progress=progress,
            scale=self.scale_at(progress),
            appearance=self.appearance_at(progress),
        )


# =============================================================================
# DRIVER
# =============================================================================

class TransitionDriver:
    """
    Owns the active transitions, at most one per seat.

    tick() is cheap and idempotent: ticking again with the same (or an
    earlier) timestamp delivers nothing new.
    """

    def __init__(
        self,
        duration: float = SELECTION_TRANSITION_DURATION_S,
        easing: EasingFunction = ease_in_ease_out,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._duration = duration
        self._easing = easing
        self._clock = clock
        self._active: Dict[str, SeatTransition] = {}
        self._generations = itertools.count(1)

    @property
    def duration(self) -> float:
        return self._duration

    def now(self) -> float:
        return self._clock()

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def start(
        self,
        seat_id: str,
        from_scale: float,
        to_scale: float,
        from_appearance: SeatAppearance,
        to_appearance: SeatAppearance,
        observer: Optional[TransitionObserver] = None,
        now: Optional[float] = None,
    ) -> SeatTransition:
        """Begin a transition for a seat, superseding any running one."""
        self.cancel(seat_id)
        transition = SeatTransition(
            seat_id=seat_id,
            generation=next(self._generations),
            from_scale=from_scale,
            to_scale=to_scale,
            from_appearance=from_appearance,
            to_appearance=to_appearance,
            started_at=self.now() if now is None else now,
            duration=self._duration,
            easing=self._easing,
            observer=observer,
        )
        self._active[seat_id] = transition
        logger.debug(f"Started transition {transition.generation} for seat {seat_id}")
        return transition

    def cancel(self, seat_id: str) -> Optional[SeatTransition]:
        transition = self._active.pop(seat_id, None)
        if transition is not None and transition.is_running:
            transition.status = TransitionStatus.CANCELLED
            logger.debug(f"Cancelled transition {transition.generation} for seat {seat_id}")
        return transition

    def cancel_all(self) -> int:
        count = 0
        for seat_id in list(self._active):
            if self.cancel(seat_id) is not None:
                count += 1
        return count

    def is_current(self, transition: SeatTransition) -> bool:
        return self._active.get(transition.seat_id) is transition and transition.is_running

    def active_for(self, seat_id: str) -> Optional[SeatTransition]:
        return self._active.get(seat_id)

    @property
    def active_count(self) -> int:
        return len(self._active)

    # -------------------------------------------------------------------------
    # Frame
    # -------------------------------------------------------------------------

    def tick(self, now: Optional[float] = None) -> List[TransitionFrame]:
        """
        Advance every active transition to ``now``.

        Returns:
            Frames delivered during this tick
        """
        if now is None:
            now = self.now()

        delivered: List[TransitionFrame] = []
        for transition in list(self._active.values()):
            # An observer callback may have superseded this one already
            if not self.is_current(transition):
                continue

            raw = transition.raw_progress(now)
            progress = 1.0 if raw >= 1.0 else transition.easing(raw)
            if progress <= transition.progress and raw < 1.0:
                continue
            transition.progress = max(progress, transition.progress)

            frame = transition.frame(transition.progress)
            if transition.observer is not None:
                transition.observer.on_transition_progress(transition, frame)
            delivered.append(frame)

            if raw >= 1.0 and self.is_current(transition):
                transition.status = TransitionStatus.COMPLETED
                del self._active[transition.seat_id]
                if transition.observer is not None:
                    transition.observer.on_transition_complete(transition, frame)
                logger.debug(f"Completed transition {transition.generation} for seat {transition.seat_id}")

        return delivered

    def finish_all(self) -> List[TransitionFrame]:
        """Jump every active transition to its end state."""
        if not self._active:
            return []
        latest = max(t.ends_at for t in self._active.values())
        return self.tick(latest)
