import math

import pytest

from solo_mandelbrot.view import Dragging, Idle, ViewState, update_drag


def test_default_view():
    view = ViewState()
    assert (view.center_x, view.center_y, view.zoom) == (-0.5, 0.0, 1.0)


@pytest.mark.parametrize("zoom", [0.0, -1.0, math.inf, math.nan])
def test_rejects_bad_zoom(zoom):
    with pytest.raises(ValueError):
        ViewState(0.0, 0.0, zoom)


def test_scroll_up_zooms_in():
    view = ViewState()
    assert view.scroll(1.0)
    assert view.zoom == 1.0 / 1.1


def test_scroll_down_zooms_out():
    view = ViewState()
    assert view.scroll(-3.0)
    assert view.zoom == 1.0 * 1.1


def test_zero_scroll_is_ignored():
    view = ViewState()
    assert not view.scroll(0.0)
    assert view.zoom == 1.0


def test_zoom_in_then_out_restores_zoom():
    view = ViewState(zoom=0.37)
    for _ in range(25):
        view.scroll(1)
    for _ in range(25):
        view.scroll(-1)
    assert view.zoom == pytest.approx(0.37, rel=1e-12)


def test_first_press_starts_drag_without_panning():
    view = ViewState()
    state, changed = update_drag(Idle(), view, True, (100, 100))
    assert state == Dragging((100, 100))
    assert not changed
    assert (view.center_x, view.center_y) == (-0.5, 0.0)


def test_drag_pans_by_delta_over_zoom():
    view = ViewState(zoom=2.0)
    state, _ = update_drag(Idle(), view, True, (100, 100))
    state, changed = update_drag(state, view, True, (110, 94))
    assert changed
    assert state == Dragging((110, 94))
    assert view.center_x == -0.5 - 10 / 2.0
    assert view.center_y == 0.0 - (-6) / 2.0


def test_drag_uses_last_position_not_press_position():
    view = ViewState(0.0, 0.0, 1.0)
    state, _ = update_drag(Idle(), view, True, (0, 0))
    state, _ = update_drag(state, view, True, (5, 0))
    state, _ = update_drag(state, view, True, (8, 0))
    assert view.center_x == -8.0


def test_release_returns_to_idle():
    view = ViewState()
    state, _ = update_drag(Idle(), view, True, (10, 10))
    state, changed = update_drag(state, view, False, (20, 20))
    assert state == Idle()
    assert not changed

    # A new press after release does not pan
    state, changed = update_drag(state, view, True, (50, 50))
    assert not changed
    assert (view.center_x, view.center_y) == (-0.5, 0.0)


def test_unknown_pointer_position_keeps_state():
    view = ViewState()
    state, changed = update_drag(Dragging((1, 2)), view, True, None)
    assert state == Dragging((1, 2))
    assert not changed

    state, changed = update_drag(Idle(), view, True, None)
    assert state == Idle()
    assert not changed


def test_zoom_out_overflow_is_skipped():
    view = ViewState(zoom=1.7e308)
    assert not view.scroll(-1)
    assert view.zoom == 1.7e308
    assert view.scroll(1)
