"""
test_gestures.py - Tests for pan/zoom gesture adapters

Tests for:
- View transform state clamping and reset
- Pan deltas applied only while the gesture changes
- Pinch factors multiplied and clamped
"""

import pytest


class TestViewTransformState:
    """Tests for ViewTransformState."""

    def test_defaults(self):
        from seatmap.geometry.primitives import ViewPoint
        from seatmap.transform.gestures import ViewTransformState

        state = ViewTransformState()

        assert state.scale == 1.0
        assert state.translation == ViewPoint(0.0, 0.0)
        assert state.is_identity

    def test_construction_clamps(self):
        from seatmap.transform.gestures import ViewTransformState

        assert ViewTransformState(scale=9.0).scale == 3.0
        assert ViewTransformState(scale=0.01).scale == 0.5

    def test_reset(self):
        from seatmap.geometry.primitives import ViewPoint
        from seatmap.transform.gestures import ViewTransformState

        state = ViewTransformState()
        state.zoom_by(2.5)
        state.pan_by(40.0, -12.0)
        state.reset()

        assert state.scale == 1.0
        assert state.translation == ViewPoint(0.0, 0.0)


class TestPanAdapter:
    """Tests for PanAdapter."""

    def test_changed_phase_applies_and_resets_delta(self, redraw_recorder):
        from seatmap.core.enums import GesturePhase
        from seatmap.geometry.primitives import ViewPoint
        from seatmap.transform.gestures import PanAdapter, PanGesture, ViewTransformState

        state = ViewTransformState()
        adapter = PanAdapter(state, redraw_recorder)
        gesture = PanGesture(GesturePhase.CHANGED, ViewPoint(15.0, -4.0))

        assert adapter.handle(gesture)
        assert state.translation == ViewPoint(15.0, -4.0)
        assert gesture.translation == ViewPoint(0.0, 0.0)
        assert redraw_recorder.reasons == ["pan"]

    def test_deltas_accumulate(self, redraw_recorder):
        from seatmap.core.enums import GesturePhase
        from seatmap.geometry.primitives import ViewPoint
        from seatmap.transform.gestures import PanAdapter, PanGesture, ViewTransformState

        state = ViewTransformState()
        adapter = PanAdapter(state, redraw_recorder)
        gesture = PanGesture(GesturePhase.CHANGED)
        for dx, dy in [(5.0, 1.0), (2.5, -3.0), (-1.0, 0.0)]:
            gesture.translation = ViewPoint(dx, dy)
            adapter.handle(gesture)

        assert state.translation.x == pytest.approx(6.5)
        assert state.translation.y == pytest.approx(-2.0)
        assert len(redraw_recorder.reasons) == 3

    @pytest.mark.parametrize("phase_name", ["BEGAN", "ENDED", "CANCELLED"])
    def test_other_phases_ignored(self, redraw_recorder, phase_name):
        from seatmap.core.enums import GesturePhase
        from seatmap.geometry.primitives import ViewPoint
        from seatmap.transform.gestures import PanAdapter, PanGesture, ViewTransformState

        state = ViewTransformState()
        gesture = PanGesture(GesturePhase[phase_name], ViewPoint(15.0, -4.0))

        assert not PanAdapter(state, redraw_recorder).handle(gesture)
        assert state.is_identity
        assert gesture.translation == ViewPoint(15.0, -4.0)
        assert redraw_recorder.reasons == []

    def test_zero_delta_requests_no_redraw(self, redraw_recorder):
        from seatmap.core.enums import GesturePhase
        from seatmap.transform.gestures import PanAdapter, PanGesture, ViewTransformState

        assert not PanAdapter(ViewTransformState(), redraw_recorder).handle(PanGesture(GesturePhase.CHANGED))
        assert redraw_recorder.reasons == []


class TestPinchAdapter:
    """Tests for PinchAdapter."""

    def test_clamped_sequence(self, redraw_recorder):
        from seatmap.core.enums import GesturePhase
        from seatmap.transform.gestures import PinchAdapter, PinchGesture, ViewTransformState

        state = ViewTransformState()
        adapter = PinchAdapter(state, redraw_recorder)
        gesture = PinchGesture(GesturePhase.CHANGED)

        scales = []
        for factor in (2.0, 2.0, 0.1, 1.5):
            gesture.scale = factor
            adapter.handle(gesture)
            assert gesture.scale == 1.0
            scales.append(state.scale)

        assert scales == pytest.approx([2.0, 3.0, 0.5, 0.75])
        assert redraw_recorder.reasons == ["pinch"] * 4

    def test_began_phase_ignored(self, redraw_recorder):
        from seatmap.core.enums import GesturePhase
        from seatmap.transform.gestures import PinchAdapter, PinchGesture, ViewTransformState

        state = ViewTransformState()
        gesture = PinchGesture(GesturePhase.BEGAN, 2.0)

        assert not PinchAdapter(state, redraw_recorder).handle(gesture)
        assert state.scale == 1.0
        assert gesture.scale == 2.0

    def test_non_positive_factor_ignored(self, redraw_recorder):
        from seatmap.core.enums import GesturePhase
        from seatmap.transform.gestures import PinchAdapter, PinchGesture, ViewTransformState

        state = ViewTransformState(scale=2.0)

        assert not PinchAdapter(state, redraw_recorder).handle(PinchGesture(GesturePhase.CHANGED, 0.0))
        assert state.scale == 2.0
        assert redraw_recorder.reasons == []
