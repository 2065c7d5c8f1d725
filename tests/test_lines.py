import random

import pytest

from egedemos.colors import channels
from egedemos.lines import Trail, Vertex


def test_vertex_inside_moves_by_velocity():
    v = Vertex(10.0, 20.0, 1.5, -2.0)
    v.move(640, 480, random.Random(0))
    assert v.x == pytest.approx(10.0 + 1.5)
    assert v.y == pytest.approx(20.0 - 2.0)
    assert (v.dx, v.dy) == (1.5, -2.0)


def test_vertex_bounces_off_left_edge():
    v = Vertex(-1.0, 10.0, -1.0, 0.0)
    v.move(640, 480, random.Random(3))
    assert 0.5 <= v.dx < 1.5
    assert v.x == pytest.approx(-1.0 + v.dx)


def test_vertex_bounce_speed_scales_with_width():
    v = Vertex(1281.0, 10.0, 1.0, 0.0)
    v.move(1280, 480, random.Random(5))
    assert -3.0 < v.dx <= -1.0


def test_vertex_bounces_off_bottom():
    v = Vertex(5.0, 500.0, 0.0, 2.0)
    v.move(640, 480, random.Random(1))
    assert -1.5 < v.dy <= -0.5


def test_create_shapes():
    trail = Trail.create(5, 4, 640, 480, random.Random(7))
    assert len(trail.polygons) == 5
    assert len(trail.newest) == 4
    assert all(p == () for p in list(trail.polygons)[1:])
    for v in trail.vertices:
        assert 0 <= v.x < 640 and 0 <= v.y < 480
        assert 1 <= v.dx < 3 and 1 <= v.dy < 3


def test_create_rejects_bad_sizes():
    with pytest.raises(ValueError):
        Trail.create(0, 4, 640, 480, random.Random(0))
    with pytest.raises(ValueError):
        Trail.create(3, 0, 640, 480, random.Random(0))


def test_advance_shifts_history():
    rng = random.Random(11)
    trail = Trail.create(3, 3, 640, 480, rng)
    before = trail.newest
    trail.advance(rng)
    assert trail.polygons[1] == before
    assert trail.newest == tuple((v.x, v.y) for v in trail.vertices)
    trail.advance(rng)
    trail.advance(rng)
    assert len(trail.polygons) == 3
    assert trail.oldest != ()


def test_color_fades_towards_next():
    rng = random.Random(2)
    trail = Trail.create(2, 3, 640, 480, rng)
    trail.advance(rng)
    for c, n in zip(channels(trail.color), channels(trail.next_color)):
        assert 0 <= c <= n


def test_color_reaches_next_after_change_time():
    rng = random.Random(4)
    trail = Trail.create(2, 3, 640, 480, rng)
    trail.change_time = 1
    trail.advance(rng)
    assert trail.color == trail.next_color


def test_timer_expiry_picks_new_target():
    rng = random.Random(9)
    trail = Trail.create(2, 3, 640, 480, rng)
    trail.color = 0x123456
    trail.time_left = 1
    trail.advance(rng)
    assert trail.prev_color == 0x123456
    assert trail.now_time == 0
    assert 60 <= trail.change_time < 1060
    assert 0 <= trail.time_left < 1000