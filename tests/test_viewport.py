"""Pan / zoom / reset state transitions of the viewport."""

import math

import pytest

from flightmap.errors import InvalidZoomFactorError
from flightmap.geo.viewport import Viewport, ViewportBounds, ViewportController


@pytest.fixture
def controller():
    return ViewportController()


# --------------------------------------------------------------------
# Zoom
# --------------------------------------------------------------------


def test_zoom_in_keeps_centre(controller):
    before = controller.viewport.center
    vp = controller.zoom(0.5)
    assert (vp.width, vp.height) == (500.0, 250.0)
    assert (vp.x, vp.y) == (250.0, 125.0)
    assert vp.center == pytest.approx(before)


@pytest.mark.parametrize("factor", [0.8, 1.25, 0.5, 1.5])
def test_zoom_then_inverse_restores_size(controller, factor):
    controller.zoom(factor)
    vp = controller.zoom(1 / factor)
    assert vp.width == pytest.approx(1000.0)
    assert vp.height == pytest.approx(500.0)
    assert vp.x == pytest.approx(0.0)
    assert vp.y == pytest.approx(0.0)


def test_zoom_clamps_each_axis_and_keeps_centre():
    ctl = ViewportController(bounds=ViewportBounds(min_width=100, max_width=2000,
                                                   min_height=100, max_height=1000))
    vp = ctl.zoom(0.1)
    assert vp.width == 100
    assert vp.height == 100
    assert vp.center == pytest.approx((500.0, 250.0))

    for _ in range(10):
        vp = ctl.zoom(10)
    assert vp.width == 2000
    assert vp.height == 1000
    assert vp.center == pytest.approx((500.0, 250.0))


def test_zoom_round_trip_with_clamp_stays_in_bounds(controller):
    b = controller.bounds
    controller.zoom(0.01)
    vp = controller.zoom(100)
    assert b.min_width <= vp.width <= b.max_width
    assert b.min_height <= vp.height <= b.max_height


@pytest.mark.parametrize("factor", [0, -1, float("nan"), float("inf"), "2"])
def test_invalid_zoom_factor_leaves_viewport_untouched(controller, factor):
    controller.zoom(0.8)
    before = controller.viewport
    with pytest.raises(InvalidZoomFactorError):
        controller.zoom(factor)
    assert controller.viewport == before


def test_zoom_buttons_use_fixed_steps(controller):
    assert controller.zoom_in().width == pytest.approx(800.0)
    assert controller.zoom_out().width == pytest.approx(1000.0)


# --------------------------------------------------------------------
# Pan
# --------------------------------------------------------------------


def test_pan_moves_origin_against_drag(controller):
    controller.pointer_down(100, 100)
    vp = controller.pointer_move(150, 80)
    assert (vp.x, vp.y) == (-50.0, 20.0)
    vp = controller.pointer_move(160, 80)
    assert (vp.x, vp.y) == (-60.0, 20.0)


def test_pan_speed_scales_with_zoom(controller):
    controller.zoom(0.5)
    controller.pointer_down(0, 0)
    vp = controller.pointer_move(100, 100)
    assert vp.x == pytest.approx(250.0 - 50.0)
    assert vp.y == pytest.approx(125.0 - 50.0)


def test_pan_is_resolution_independent():
    ctl = ViewportController(screen_size=(2000, 1000))
    ctl.pointer_down(0, 0)
    vp = ctl.pointer_move(-200, -100)
    assert (vp.x, vp.y) == (100.0, 50.0)


def test_move_without_pointer_down_is_ignored(controller):
    assert controller.pointer_move(500, 500) == Viewport()


@pytest.mark.parametrize("end", ["pointer_up", "pointer_leave"])
def test_pointer_up_or_leave_ends_pan(controller, end):
    controller.pointer_down(0, 0)
    controller.pointer_move(10, 0)
    getattr(controller, end)()
    assert not controller.is_panning
    before = controller.viewport
    controller.pointer_move(300, 300)
    assert controller.viewport == before


def test_invalid_screen_size_rejected(controller):
    with pytest.raises(ValueError):
        controller.set_screen_size(0, 500)


def test_reset_restores_default_and_stops_pan(controller):
    controller.zoom(0.5)
    controller.pointer_down(0, 0)
    controller.pointer_move(40, 40)
    assert controller.reset() == Viewport()
    assert not controller.is_panning


def test_view_box_string():
    assert Viewport(x=-12.5, y=0, width=800, height=400).as_view_box() == "-12.5 0 800 400"
    assert math.isclose(Viewport().center[0], 500.0)
