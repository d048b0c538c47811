"""Tests for world <-> canvas mapping."""

import pytest

from pointrank import CanvasPoint2D, Point2D, Viewport


def test_viewport_size_follows_canvas_aspect_ratio():
    vp = Viewport(canvas_width=800, canvas_height=400, width=10.0)
    assert vp.viewport_size() == (5.0, 10.0)
    assert vp.scale == 80.0


def test_center_maps_to_canvas_center():
    vp = Viewport(canvas_width=800, canvas_height=600, center=Point2D(3.0, -2.0))
    c, visible = vp.as_canvas_point(Point2D(3.0, -2.0))
    assert visible
    assert c == CanvasPoint2D(400.0, 300.0)


def test_world_y_grows_up_canvas_y_grows_down():
    vp = Viewport(canvas_width=100, canvas_height=100, width=10.0)
    top_left, visible = vp.as_canvas_point(Point2D(-5.0, 5.0))
    assert visible
    assert top_left == CanvasPoint2D(0.0, 0.0)
    below, _ = vp.as_canvas_point(Point2D(0.0, -1.0))
    assert below.y > 50.0


def test_points_off_canvas_are_not_visible():
    vp = Viewport(canvas_width=100, canvas_height=100, width=10.0)
    c, visible = vp.as_canvas_point(Point2D(20.0, 0.0))
    assert not visible
    assert c.x > 100.0


def test_world_and_canvas_mapping_are_inverse():
    vp = Viewport(canvas_width=640, canvas_height=480, center=Point2D(1.5, 2.5), width=7.0)
    for p in (Point2D(0.0, 0.0), Point2D(1.5, 2.5), Point2D(-3.25, 4.0)):
        c, _ = vp.as_canvas_point(p)
        back = vp.as_world_point(c)
        assert back.x == pytest.approx(p.x)
        assert back.y == pytest.approx(p.y)


def test_translate_and_zoom():
    vp = Viewport(canvas_width=100, canvas_height=100, width=10.0)
    vp.translate_viewport(2.0, -1.0)
    assert vp.center == Point2D(2.0, -1.0)
    vp.zoom(2.0)
    assert vp.viewport_size() == (20.0, 20.0)
    with pytest.raises(ValueError):
        vp.zoom(0.0)


def test_bad_sizes_are_rejected():
    with pytest.raises(ValueError):
        Viewport(canvas_width=0, canvas_height=10)
    with pytest.raises(ValueError):
        Viewport(width=-1.0)
    vp = Viewport()
    with pytest.raises(ValueError):
        vp.setup_canvas(-1, 100)
    vp.setup_canvas(300, 600)
    assert (vp.canvas_height, vp.canvas_width) == (300, 600)
