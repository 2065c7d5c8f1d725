import random

import pytest

from egedemos.fireworks import LIFETIME, SPARK_GRAVITY, Firework


def test_reset_state():
    fw = Firework(random.Random(3))
    assert len(fw.sparks) == 100
    origin = (fw.sparks[0].x, fw.sparks[0].y)
    assert all((s.x, s.y) == origin for s in fw.sparks)
    assert 20 <= origin[0] < 620
    assert 100 <= origin[1] < 200
    assert all(-1 < s.vx <= 1 and -1 < s.vy <= 1 for s in fw.sparks)
    assert 0 <= fw.start < 300
    assert fw.count == 0


def test_waits_before_launch():
    fw = Firework(random.Random(1))
    fw.start = 5
    before = [(s.x, s.y) for s in fw.sparks]
    fw.update()
    assert [(s.x, s.y) for s in fw.sparks] == before
    assert fw.count == 1


def test_moves_after_launch():
    fw = Firework(random.Random(2), size=10)
    fw.start = 0
    fw.update()
    vy = [s.vy for s in fw.sparks]
    pos = [(s.x + s.vx, s.y + s.vy + SPARK_GRAVITY) for s in fw.sparks]
    fw.update()
    assert [s.vy for s in fw.sparks] == pytest.approx([v + SPARK_GRAVITY for v in vy])
    assert [(s.x, s.y) for s in fw.sparks] == pytest.approx(pos)


def test_restarts_after_lifetime():
    fw = Firework(random.Random(4), size=5)
    fw.count = fw.start + LIFETIME
    fw.update()
    assert fw.count == 0
    assert len(fw.sparks) == 5
    assert 100 <= fw.sparks[0].y < 200


def test_size_respected():
    fw = Firework(random.Random(0), size=7)
    fw.reset()
    assert len(fw.sparks) == 7