import math

import pytest

from egedemos.shapes import (
    BLACK,
    BLUE,
    LIGHTMAGENTA,
    WHITE,
    YELLOW,
    arrow_points,
    render_alpha,
    render_arrow,
    render_rotated,
    render_star,
    render_triangles,
    star_points,
)


def rgb(surface, pos):
    return tuple(surface.get_at(pos))[:3]


def test_star_points_on_circle():
    pts = star_points(300, 200, 100, 0.4)
    assert len(pts) == 5
    for x, y in pts:
        assert math.dist((x, y), (300, 200)) == pytest.approx(100, abs=1.5)


def test_arrow_head_geometry():
    head = arrow_points(100, 100, 300, 150, math.pi / 8, 0.2)
    assert head[0] == (300, 150)
    shaft = math.dist((100, 100), (300, 150))
    for p in head[1:]:
        assert math.dist(p, head[0]) == pytest.approx(0.2 * shaft)


def test_render_star():
    s = render_star(0.0)
    assert s.get_size() == (640, 480)
    assert rgb(s, (0, 0)) == BLACK
    assert rgb(s, star_points(300, 200, 100, 0.0)[0]) == (255, 255, 255)


def test_render_arrow_line():
    s = render_arrow()
    assert rgb(s, (100, 100)) == (255, 255, 255)
    assert rgb(s, (5, 5)) == BLACK


def test_render_alpha():
    s = render_alpha()
    assert rgb(s, (50, 50)) == WHITE
    assert rgb(s, (350, 380)) == BLUE
    assert rgb(s, (35, 35)) == LIGHTMAGENTA


def test_render_triangles():
    s = render_triangles()
    assert s.get_size() == (800, 600)
    assert rgb(s, (0, 10)) == BLUE
    assert rgb(s, (0, 30)) == WHITE


def test_render_rotated():
    s = render_rotated()
    assert rgb(s, (20, 20)) == WHITE
    assert rgb(s, (60, 60)) == BLACK
    assert rgb(s, (300, 200)) == YELLOW