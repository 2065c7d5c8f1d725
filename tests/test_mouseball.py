import math

import pytest

from egedemos.mouseball import DragBall, DragController, MouseEvent, MouseKind


def test_contains():
    ball = DragBall(20, 100.0, 100.0)
    assert ball.contains(110, 105)
    assert not ball.contains(130, 100)


def test_down_inside_grabs():
    ball = DragBall(20, 100.0, 100.0, vx=3.0, vy=2.0)
    assert ball.handle(MouseEvent(MouseKind.DOWN, 105, 95), 0, 0)
    assert (ball.x, ball.y, ball.vx, ball.vy) == (105, 95, 0.0, 0.0)
    assert not ball.free


def test_down_outside_ignored():
    ball = DragBall(20, 100.0, 100.0, vx=3.0)
    assert not ball.handle(MouseEvent(MouseKind.DOWN, 300, 300), 0, 0)
    assert (ball.x, ball.vx, ball.free) == (100.0, 3.0, True)


def test_up_releases():
    ball = DragBall(20, 100.0, 100.0, free=False)
    assert not ball.handle(MouseEvent(MouseKind.UP, 100, 100), 0, 0)
    assert ball.free


def test_move_takes_faster_drag_speed():
    ball = DragBall(20, 100.0, 100.0, vx=1.0, vy=0.0)
    assert ball.handle(MouseEvent(MouseKind.MOVE, 110, 104), 10.0, 4.0)
    assert (ball.vx, ball.vy) == (10.0, 4.0)
    assert (ball.x, ball.y) == (110, 104)


def test_move_slower_damps():
    ball = DragBall(20, 100.0, 100.0, vx=10.0, vy=0.0)
    ball.handle(MouseEvent(MouseKind.MOVE, 101, 100), 1.0, 0.0)
    assert ball.vx == pytest.approx(10.0 * 0.9)


def test_update_friction_reduces_speed():
    ball = DragBall(20, 300.0, 200.0, vx=3.0, vy=4.0)
    ball.update()
    assert math.hypot(ball.vx, ball.vy) == pytest.approx(5.0 - ball.friction)
    assert (ball.x, ball.y) == (303.0, 204.0)


def test_update_clamps_to_wall():
    ball = DragBall(20, 5.0, 200.0, vx=-2.0)
    ball.update()
    assert ball.vx > 0
    assert ball.x == pytest.approx(20 + 2.0)


def test_held_ball_does_not_move():
    ball = DragBall(20, 300.0, 200.0, vx=3.0, free=False)
    ball.update()
    assert ball.x == 300.0 and ball.vx == 3.0


def test_controller_captures_topmost():
    balls = [DragBall(20, 100.0, 100.0), DragBall(20, 105.0, 100.0)]
    ctl = DragController(balls)
    ctl.dispatch(MouseEvent(MouseKind.DOWN, 102, 100))
    assert ctl.captured == 1
    assert balls[0].free and not balls[1].free


def test_controller_drag_and_release():
    balls = [DragBall(20, 100.0, 100.0)]
    ctl = DragController(balls)
    ctl.dispatch(MouseEvent(MouseKind.DOWN, 100, 100))
    ctl.dispatch(MouseEvent(MouseKind.MOVE, 120, 110))
    assert (balls[0].x, balls[0].y) == (120, 110)
    assert (balls[0].vx, balls[0].vy) == (20.0, 10.0)
    ctl.dispatch(MouseEvent(MouseKind.UP, 120, 110))
    assert ctl.captured == -1
    assert balls[0].free


def test_settle_damps_held_ball():
    balls = [DragBall(20, 100.0, 100.0)]
    ctl = DragController(balls)
    ctl.dispatch(MouseEvent(MouseKind.DOWN, 100, 100))
    ctl.dispatch(MouseEvent(MouseKind.MOVE, 110, 100))
    ctl.settle()
    assert balls[0].vx == pytest.approx(10.0 * 0.9)


def test_move_without_capture_ignored():
    balls = [DragBall(20, 100.0, 100.0)]
    ctl = DragController(balls)
    ctl.dispatch(MouseEvent(MouseKind.MOVE, 100, 100))
    assert ctl.captured == -1
    assert balls[0].free