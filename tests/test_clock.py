import datetime as dt
import math

import pytest

from egedemos.clock import CENTER, RADIUS, clock_hands, hand_position, timestamp_text


def test_hand_position_up_and_right():
    assert hand_position((0, 0), 0, 10) == pytest.approx((0, -10))
    assert hand_position((5, 5), math.pi / 2, 10) == pytest.approx((15, 5))


def test_noon_hands_point_up():
    hands = clock_hands(dt.time(12, 0, 0))
    for name, factor in (("hour", 0.5), ("minute", 0.9), ("second", 1.0)):
        assert hands[name] == pytest.approx((CENTER[0], CENTER[1] - RADIUS * factor), abs=1e-9)


def test_hand_lengths():
    hands = clock_hands(dt.time(7, 23, 41))
    d = math.dist(hands["minute"], CENTER)
    assert d == pytest.approx(RADIUS * 0.9)


def test_timestamp_format():
    assert timestamp_text(dt.datetime(2023, 7, 7, 9, 5, 3)) == "2023/07/07  9:05:03"