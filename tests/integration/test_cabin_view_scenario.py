"""
test_cabin_view_scenario.py - End-to-end cabin view scenarios

Covers the host-facing flow: build an A320 view, size the viewport, select
seats by id and by tap, pan and zoom, reset the view, and read back frames.
"""

import pytest


class TestExitRowSelection:
    """Build an A320, select an exit-row seat, reset the view."""

    def test_exit_row_seat_selection_and_reset(self, controller):
        from seatmap.core.enums import GesturePhase, SectionKind
        from seatmap.geometry.primitives import ViewPoint
        from seatmap.selection.appearance import SECTION_APPEARANCE, SELECTED_APPEARANCE

        seat = controller.layout.seat_by_id("12A")
        assert seat.is_exit_row
        assert controller.selection.presented_appearance("12A") == SECTION_APPEARANCE[SectionKind.EXIT_ROW]

        assert controller.select_seat("12A") == "12A"
        assert controller.selection.presented_appearance("12A") == SELECTED_APPEARANCE
        assert controller.selection.presented_scale("12A") == 1.1

        controller.handle_pinch(GesturePhase.CHANGED, 2.0)
        controller.handle_pan(GesturePhase.CHANGED, 40.0, -25.0)
        controller.reset_view()

        assert controller.view_state.scale == 1.0
        assert controller.view_state.translation == ViewPoint(0.0, 0.0)
        assert controller.selected_seat_id == "12A"

    def test_confirm_selection(self, controller):
        assert controller.confirm_selection() is None

        controller.select_seat("12A")

        assert controller.confirm_selection() == "12A"

    def test_unknown_and_unavailable_leave_selection(self, static_config, phone_viewport):
        from seatmap.cabin_view import CabinViewController
        from seatmap.layout.availability import MappedAvailability
        from seatmap.layout.generator import build_layout

        view = CabinViewController(build_layout("A320", MappedAvailability({"5D": False})), config=static_config)
        view.set_viewport_size(phone_viewport)

        view.select_seat("12A")

        assert view.select_seat("5D") == "12A"
        assert view.select_seat("99Z") == "12A"

    def test_clear_selection(self, controller, selection_recorder):
        controller.add_selection_listener(selection_recorder)
        controller.select_seat("12A")
        controller.clear_selection()

        assert controller.selected_seat_id is None
        assert selection_recorder.changes == [("12A", None), (None, "12A")]
        assert controller.remove_selection_listener(selection_recorder)


class TestTapSelection:
    """Hit testing through the view transform."""

    def test_tap_selects_seat_after_pan_and_zoom(self, controller):
        from seatmap.core.enums import GesturePhase

        controller.handle_pinch(GesturePhase.CHANGED, 1.8)
        controller.handle_pan(GesturePhase.CHANGED, -30.0, -220.0)

        center = controller.layout.seat_by_id("14C").geometry.center
        point = controller.rendering_context.to_view(center)

        assert controller.handle_tap(point) == "14C"
        assert controller.selected_seat_id == "14C"

    def test_tap_in_aisle_selects_nothing(self, controller):
        from seatmap.geometry.primitives import CabinCoordinate

        point = controller.rendering_context.to_view(CabinCoordinate(0.0, 20.0))

        assert controller.handle_tap(point) is None
        assert controller.selected_seat_id is None

    def test_tap_on_selected_seat_keeps_it(self, controller):
        center = controller.layout.seat_by_id("14C").geometry.center
        point = controller.rendering_context.to_view(center)

        controller.handle_tap(point)

        assert controller.handle_tap(point) == "14C"
        assert controller.selected_seat_id == "14C"

    def test_tap_before_viewport_is_sized(self, a320_layout, static_config):
        from seatmap.cabin_view import CabinViewController
        from seatmap.geometry.primitives import ViewPoint

        view = CabinViewController(a320_layout, config=static_config)

        assert view.rendering_context is None
        assert view.handle_tap(ViewPoint(100.0, 100.0)) is None

    def test_seat_at_view_point(self, controller):
        seat = controller.layout.seat_by_id("30F")
        point = controller.rendering_context.to_view(seat.geometry.center)

        assert controller.seat_at_view_point(point) is seat


class TestRedraw:
    """Redraw requests reach the host callback."""

    def test_gestures_and_selection_request_redraws(self, controller):
        from seatmap.core.enums import GesturePhase

        reasons = []
        controller.on_redraw = reasons.append

        controller.handle_pan(GesturePhase.CHANGED, 5.0, 5.0)
        controller.handle_pinch(GesturePhase.CHANGED, 1.2)
        controller.select_seat("12A")
        controller.reset_view()

        assert reasons == ["pan", "pinch", "selection", "reset"]

    def test_gesture_outside_changed_phase_is_ignored(self, controller):
        from seatmap.core.enums import GesturePhase

        reasons = []
        controller.on_redraw = reasons.append

        assert controller.handle_pan(GesturePhase.ENDED, 5.0, 5.0).x == 5.0
        assert controller.handle_pinch(GesturePhase.BEGAN, 2.0) == 2.0
        assert reasons == []
        assert controller.view_state.is_identity

    def test_consumed_gesture_deltas(self, controller):
        from seatmap.core.enums import GesturePhase
        from seatmap.geometry.primitives import ViewPoint

        assert controller.handle_pan(GesturePhase.CHANGED, 5.0, 5.0) == ViewPoint(0.0, 0.0)
        assert controller.handle_pinch(GesturePhase.CHANGED, 9.0) == 1.0
        assert controller.view_state.scale == 3.0

    def test_view_reset_event(self, controller):
        from seatmap.selection.events import SeatEventType

        controller.reset_view()

        assert controller.events.get_history(event_type=SeatEventType.VIEW_RESET)


class TestFrames:
    """Frame output for the host renderer."""

    def test_seat_frames(self, controller):
        from seatmap.core.enums import SeatState

        controller.select_seat("12A")
        frames = {frame.seat_id: frame for frame in controller.seat_frames()}

        assert len(frames) == 160
        selected = frames["12A"]
        assert selected.state is SeatState.AVAILABLE_SELECTED
        assert selected.scale == 1.1
        assert selected.presented_rect.width == pytest.approx(selected.rect.width * 1.1)
        assert selected.style.font_size == pytest.approx(14.0)
        assert selected.to_dict()["appearance"]["fill"] == "#34C759FF"

    def test_frames_follow_zoom(self, controller):
        from seatmap.core.enums import GesturePhase

        before = {f.seat_id: f.rect.width for f in controller.seat_frames()}
        controller.handle_pinch(GesturePhase.CHANGED, 2.0)
        after = {f.seat_id: f for f in controller.seat_frames()}

        assert after["1A"].rect.width == pytest.approx(before["1A"] * 2.0)
        assert after["1A"].style.line_width == pytest.approx(0.5)

    def test_seat_layer_disabled(self, a320_layout, phone_viewport):
        from seatmap.cabin_view import CabinViewController
        from seatmap.config import SeatMapConfig

        view = CabinViewController(a320_layout, config=SeatMapConfig(render_seats=False))
        view.set_viewport_size(phone_viewport)

        assert view.seat_frames() == []
        assert len(view.amenity_frames()) == 4
        assert view.fuselage_outline_view()

    def test_degenerate_viewport_renders_nothing(self, controller):
        from seatmap.geometry.primitives import ViewSize

        assert not controller.set_viewport_size(ViewSize(0.0, 844.0))
        assert controller.seat_frames() == []
        assert controller.amenity_frames() == []
        assert controller.fuselage_outline_view() == []

    def test_amenity_frames(self, controller):
        frames = {frame.amenity_id: frame for frame in controller.amenity_frames()}

        assert frames["lav-front-left"].label == "LAV"
        assert frames["galley-front-right"].label is None


class TestAnimatedView:
    """Controller with animated selection driven by a manual clock."""

    def test_tick_drives_presentation(self, a320_layout, phone_viewport, clock):
        from seatmap.cabin_view import CabinViewController
        from seatmap.config import SeatMapConfig
        from seatmap.selection.transition import TransitionDriver

        view = CabinViewController(
            a320_layout,
            config=SeatMapConfig(animate_selection=True),
            driver=TransitionDriver(clock=clock),
        )
        view.set_viewport_size(phone_viewport)
        reasons = []
        view.on_redraw = reasons.append

        view.select_seat("12A")
        assert view.selection.presented_scale("12A") == 1.0

        view.tick(0.15)
        view.tick(0.3)

        assert view.selection.presented_scale("12A") == pytest.approx(1.1)
        # two progress frames plus the completion
        assert reasons.count("transition") == 3


class TestLayoutSwap:
    """Switching aircraft rebuilds the index and clears selection."""

    def test_set_layout(self, controller, selection_recorder):
        from seatmap.layout.availability import MappedAvailability
        from seatmap.layout.generator import build_layout

        controller.add_selection_listener(selection_recorder)
        controller.select_seat("12A")
        replacement = build_layout("A320", MappedAvailability({"12A": False}))

        controller.set_layout(replacement)

        assert controller.layout is replacement
        assert controller.hit_tester.layout is replacement
        assert controller.selected_seat_id is None
        assert controller.select_seat("12A") is None
        assert selection_recorder.changes[-1] == (None, "12A")

    def test_for_aircraft_uses_config(self):
        from seatmap.cabin_view import CabinViewController
        from seatmap.config import SeatMapConfig

        view = CabinViewController.for_aircraft(config=SeatMapConfig(availability_seed=42))

        assert view.layout.aircraft_id == "A320"
        assert view.layout.available_seat_count < 160

    def test_for_unknown_aircraft(self):
        from seatmap.cabin_view import CabinViewController
        from seatmap.errors import UnknownAircraftError

        with pytest.raises(UnknownAircraftError):
            CabinViewController.for_aircraft("B747")
