"""
seatmap Test Configuration and Fixtures

Shared layouts, controllers and a manually advanced clock for transition tests.
"""

import pytest


class FakeClock:
    """Monotonic clock advanced by hand."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> float:
        self.now += seconds
        return self.now


class RedrawRecorder:
    """RedrawSink that remembers every reason it was given."""

    def __init__(self):
        self.reasons = []

    def request_redraw(self, reason: str) -> None:
        self.reasons.append(reason)


class SelectionRecorder:
    """SelectionListener that remembers every (seat_id, previous_id) pair."""

    def __init__(self):
        self.changes = []

    def on_selection_changed(self, seat_id, previous_id) -> None:
        self.changes.append((seat_id, previous_id))


@pytest.fixture
def a320_layout():
    """Default A320 layout, every seat available."""
    from seatmap.layout.generator import build_layout

    return build_layout("A320")


@pytest.fixture
def a320_bounds():
    from seatmap.layout.aircraft import get_aircraft

    return get_aircraft("A320").cabin_bounds()


@pytest.fixture
def phone_viewport():
    from seatmap.geometry.primitives import ViewSize

    return ViewSize(390.0, 844.0)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def redraw_recorder():
    return RedrawRecorder()


@pytest.fixture
def selection_recorder():
    return SelectionRecorder()


@pytest.fixture
def static_config():
    """Configuration with seats rendered and selection changes applied instantly."""
    from seatmap.config import SeatMapConfig

    return SeatMapConfig(render_seats=True, animate_selection=False)


@pytest.fixture
def controller(a320_layout, static_config, phone_viewport):
    """Cabin view controller with a phone-sized viewport."""
    from seatmap.cabin_view import CabinViewController

    view = CabinViewController(a320_layout, config=static_config)
    view.set_viewport_size(phone_viewport)
    return view


@pytest.fixture
def scratch_aircraft():
    """Registers aircraft for a test and removes them afterwards."""
    from seatmap.layout.aircraft import unregister_aircraft

    registered = []
    yield registered
    for identifier in registered:
        unregister_aircraft(identifier)
