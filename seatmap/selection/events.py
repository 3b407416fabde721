"""
selection/events.py - Selection event bus

Explicit listener contract between the selection state machine and its host.
Hosts subscribe to selection changes (to drive a confirmation action) and to
redraw requests (to schedule a render pass).
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Protocol
from datetime import datetime, timezone
from enum import Enum
import uuid
import logging

logger = logging.getLogger("seatmap.events")


class SeatEventType(Enum):
    """Types of seat map events."""

    SELECTION_CHANGED = "selection_changed"
    SEAT_STATE_CHANGED = "seat_state_changed"
    REDRAW_REQUESTED = "redraw_requested"
    VIEW_RESET = "view_reset"


@dataclass
class SeatEvent:
    """A seat map event with payload."""

    event_id: str = field(default_factory=lambda: str(uuid.uuid4())[:8])
    event_type: SeatEventType = SeatEventType.REDRAW_REQUESTED
    source: str = ""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    payload: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "event_id": self.event_id,
            "type": self.event_type.value,
            "source": self.source,
            "timestamp": self.timestamp.isoformat() if self.timestamp else None,
            "payload": self.payload,
        }

    @property
    def seat_id(self) -> Optional[str]:
        return self.payload.get("seat_id")

    @classmethod
    def selection_changed(
        cls,
        seat_id: Optional[str],
        previous_id: Optional[str],
        source: str = "selection",
    ) -> "SeatEvent":
        """Create a selection changed event; seat_id is None after a deselect."""
        return cls(
            event_type=SeatEventType.SELECTION_CHANGED,
            source=source,
            payload={
                "seat_id": seat_id,
                "previous_id": previous_id,
            },
        )

    @classmethod
    def seat_state_changed(cls, seat_id: str, old_state: str, new_state: str, source: str = "selection") -> "SeatEvent":
        return cls(
            event_type=SeatEventType.SEAT_STATE_CHANGED,
            source=source,
            payload={
                "seat_id": seat_id,
                "old_state": old_state,
                "new_state": new_state,
            },
        )

    @classmethod
    def redraw_requested(cls, reason: str, source: str = "view") -> "SeatEvent":
        return cls(
            event_type=SeatEventType.REDRAW_REQUESTED,
            source=source,
            payload={"reason": reason},
        )


class SelectionListener(Protocol):
    """Host-side receiver for selection changes."""

    def on_selection_changed(self, seat_id: Optional[str], previous_id: Optional[str]) -> None:
        ...


# Type alias for event handlers
EventHandler = Callable[[SeatEvent], None]


class SeatEventBus:
    """
    Per-view event bus.

    Unlike a process-wide bus, each cabin view owns its own instance, so
    listeners never see events from another layout.
    """

    def __init__(self, max_history: int = 50):
        self._handlers: Dict[SeatEventType, List[EventHandler]] = {}
        self._listeners: List[SelectionListener] = []
        self._history: List[SeatEvent] = []
        self._max_history = max_history

    # -------------------------------------------------------------------------
    # Subscription
    # -------------------------------------------------------------------------

    def subscribe(self, event_type: SeatEventType, handler: EventHandler) -> None:
        """
        Subscribe to events of a specific type.

        Args:
            event_type: Type of events to receive
            handler: Callback function(event) -> None
        """
        handlers = self._handlers.setdefault(event_type, [])
        if handler not in handlers:
            handlers.append(handler)
            logger.debug(f"Subscribed handler to {event_type.value}")

    def unsubscribe(self, event_type: SeatEventType, handler: EventHandler) -> bool:
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)
            return True
        return False

    def add_listener(self, listener: SelectionListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: SelectionListener) -> bool:
        if listener in self._listeners:
            self._listeners.remove(listener)
            return True
        return False

    # -------------------------------------------------------------------------
    # Emission
    # -------------------------------------------------------------------------

    def emit(self, event: SeatEvent) -> None:
        """
        Emit an event to all subscribers.

        Handler failures are logged and do not stop delivery to the others.
        """
        self._history.append(event)
        if len(self._history) > self._max_history:
            self._history = self._history[-self._max_history:]

        logger.debug(f"Emitting event: {event.event_type.value} from {event.source}")

        for handler in list(self._handlers.get(event.event_type, [])):
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Event handler failed: {e}")

        if event.event_type is SeatEventType.SELECTION_CHANGED:
            for listener in list(self._listeners):
                try:
                    listener.on_selection_changed(event.payload.get("seat_id"), event.payload.get("previous_id"))
                except Exception as e:
                    logger.error(f"Selection listener failed: {e}")

    def get_history(self, limit: int = 20, event_type: Optional[SeatEventType] = None) -> List[SeatEvent]:
        events = self._history
        if event_type is not None:
            events = [e for e in events if e.event_type is event_type]
        return events[-limit:]

    def clear_history(self) -> None:
        self._history.clear()
