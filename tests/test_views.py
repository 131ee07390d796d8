"""Tests for view switching and camera moves."""

import pytest

from midi_configurator.configurator import (
    CameraAnimator,
    CameraRig,
    SelectionMode,
    UnknownViewError,
    View,
    ViewController,
    get_product,
)
from midi_configurator.configurator.views import ease_in_out_cubic


class TestEasing:
    """Tests for the easing curve."""

    def test_endpoints(self):
        assert ease_in_out_cubic(0.0) == 0.0
        assert ease_in_out_cubic(1.0) == 1.0
        assert ease_in_out_cubic(0.5) == pytest.approx(0.5)


class TestCameraAnimator:
    """Tests for CameraAnimator tokens."""

    def make_animator(self, mixo):
        rig = CameraRig(mixo.normal_pose.position, mixo.normal_pose.target)
        return CameraAnimator(rig, duration=1.0)

    def test_last_write_wins(self, mixo):
        """Test frames of a superseded move are dropped."""
        animator = self.make_animator(mixo)
        first = animator.start(mixo.top_pose)
        second = animator.start(mixo.normal_pose)

        assert second != first
        assert animator.current_token == second
        assert animator.advance(0.5, token=first) is False
        assert animator.rig.position == mixo.normal_pose.position
        assert animator.complete(first) is False

    def test_advance_to_end(self, mixo):
        animator = self.make_animator(mixo)
        token = animator.start(mixo.top_pose)

        assert animator.in_flight
        assert animator.advance(0.5, token=token) is False
        assert animator.advance(0.6, token=token) is True
        assert animator.rig.position == pytest.approx(mixo.top_pose.position)
        assert not animator.in_flight

    def test_complete(self, mixo):
        animator = self.make_animator(mixo)
        token = animator.start(mixo.top_pose)

        assert animator.complete(token)
        assert animator.rig.position == mixo.top_pose.position
        assert animator.rig.target == mixo.top_pose.target


class TestViewController:
    """Tests for ViewController."""

    def test_change_view_clears_selection(self, mixo, classification, selection):
        selection.select(classification.get("boton1"))
        views = ViewController(mixo, selection)
        views.change_view(View.KNOBS, classification)

        assert views.current is View.KNOBS
        assert selection.is_empty
        assert not classification.get("boton1").highlighted

    def test_chassis_view_selects_chassis(self, mixo, classification, selection):
        """Test the chassis view arms the first chassis part."""
        views = ViewController(mixo, selection)
        views.change_view("chassis", classification)

        assert selection.mode == SelectionMode.SINGLE
        assert selection.active.name == "cubeChasis"
        assert selection.active.highlighted

    def test_orbit_only_in_normal_view(self, mixo, classification, selection):
        views = ViewController(mixo, selection)
        assert views.animator.rig.orbit_enabled

        views.change_view("buttons", classification)
        assert not views.animator.rig.orbit_enabled

        views.change_view("normal", classification)
        assert views.animator.rig.orbit_enabled

    def test_rapid_switches(self, mixo, classification, selection):
        """Test only the latest view's move is honored."""
        views = ViewController(mixo, selection)
        first = views.change_view("buttons", classification)
        latest = views.change_view("normal", classification)

        assert views.animator.complete(first) is False
        assert views.animator.complete(latest) is True
        assert views.animator.rig.position == mixo.normal_pose.position

    def test_unknown_view(self, mixo, classification, selection):
        views = ViewController(mixo, selection)
        with pytest.raises(UnknownViewError):
            views.change_view("wheels", classification)

    def test_view_not_offered(self, classification, selection):
        """Test products reject views they do not have."""
        views = ViewController(get_product("fado"), selection)
        with pytest.raises(UnknownViewError):
            views.change_view("buttons", classification)

    def test_initial_view_framed(self, mixo, selection):
        """Test a controller opened in an editing view starts on its pose."""
        views = ViewController(mixo, selection, view=View.KNOBS)

        assert views.animator.rig.position == mixo.top_pose.position
        assert views.animator.rig.target == mixo.top_pose.target
        assert not views.animator.rig.orbit_enabled
