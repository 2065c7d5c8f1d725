import random

import pytest

from egedemos.tetris import GREY, ROTATIONS, SHAPES, WALL, Key, State, Tetris, shade


def _columns(game):
    return [
        game.piece_x + dx
        for row in SHAPES[game.shape][game.rotation]
        for dx, v in enumerate(row)
        if v
    ]


def _interior(game):
    return [game.board[y][1 : game.width + 1] for y in range(1, game.height + 1)]


def test_shade_values():
    assert shade(0x808080, 0.5) == 0x404040
    assert shade(0xC0C0C0, 2.0) == 0xFFFFFF


@pytest.mark.parametrize(
    "shape, rotation",
    [(s, t) for s in range(1, 8) for t in range(ROTATIONS[s])],
)
def test_merge_places_four_cells_of_each_rotation(shape, rotation):
    g = Tetris(rng=random.Random(0))
    g.update()
    g.shape, g.rotation = shape, rotation
    g.piece_x, g.piece_y = 3, 5
    assert not g.collides()
    assert g.merge() == 0
    cells = [v for row in _interior(g) for v in row if v]
    assert cells == [shape] * 4


def test_rejects_small_board():
    with pytest.raises(ValueError):
        Tetris(3, 20)


def test_tick_sequence():
    g = Tetris(rng=random.Random(1))
    assert g.tick() is True
    assert g.state is State.NEXT
    assert g.tick() is True
    assert g.state is State.NORMAL
    assert g.tick() is False


def test_first_update_spawns_piece():
    g = Tetris(rng=random.Random(2))
    g.update()
    assert g.state is State.NORMAL
    assert g.piece_y == 1
    assert g.rotation == 0
    assert 1 <= g.shape <= 7
    assert not g.collides()
    assert all(v == 0 for row in _interior(g) for v in row)
    assert g.board[0][0] == WALL


def test_move_left_sets_slide_offset():
    g = Tetris(rng=random.Random(3))
    g.update()
    x = g.piece_x
    g.press(Key.LEFT)
    g.update()
    assert g.piece_x == x - 1
    assert g.offset_x == 1.0


def test_left_stops_at_wall():
    g = Tetris(rng=random.Random(4))
    g.update()
    for _ in range(12):
        g.press(Key.LEFT)
    g.update()
    assert not g.collides()
    assert min(_columns(g)) == 1


def test_rotate_forward_and_back():
    g = Tetris(rng=random.Random(5))
    g.update()
    g.shape, g.rotation = 1, 0
    g.press(Key.ROTATE)
    g.update()
    assert g.rotation == 1
    g.press(Key.ROTATE_BACK)
    g.press(Key.ROTATE_BACK)
    g.update()
    assert g.rotation == ROTATIONS[1] - 1


def test_square_does_not_rotate():
    g = Tetris(rng=random.Random(5))
    g.update()
    g.shape, g.rotation = 7, 0
    g.press(Key.ROTATE)
    g.update()
    assert g.rotation == 0


def test_gravity_drop_timing():
    g = Tetris(rng=random.Random(6), drop_time=5)
    for _ in range(5):
        g.update()
    assert g.piece_y == 1
    g.update()
    assert g.piece_y == 2


def test_holding_down_falls_faster():
    fast = Tetris(rng=random.Random(7))
    slow = Tetris(rng=random.Random(7))
    fast.update()
    slow.update()
    fast.press(Key.DOWN)
    for _ in range(30):
        fast.update()
        slow.update()
    assert fast.piece_y > slow.piece_y


def test_release_down_clears_forbid():
    g = Tetris(rng=random.Random(8))
    g.forbid_down = True
    g.release(Key.DOWN)
    assert g.forbid_down is False


def test_merge_without_full_line():
    g = Tetris(rng=random.Random(9))
    g.update()
    g.shape, g.rotation = 6, 0
    g.piece_x, g.piece_y = 1, g.height - 1
    assert g.merge() == 0
    assert g.board[g.height][1:5] == [6, 6, 6, 6]


def test_merge_clears_full_line():
    g = Tetris(rng=random.Random(10))
    g.update()
    h = g.height
    for x in range(5, g.width + 1):
        g.board[h][x] = 2
    g.board[h - 1][7] = 3
    g.shape, g.rotation = 6, 0
    g.piece_x, g.piece_y = 1, h - 1
    assert g.merge() == 1
    assert g.board[h][7] == 3
    assert sum(1 for row in _interior(g) for v in row if v) == 1
    assert len(g.board) == h + 2
    assert g.board[h + 1][1] == WALL


def test_game_over_greys_and_restarts():
    g = Tetris(rng=random.Random(11))
    g.update()
    for y in range(1, 5):
        for x in range(1, g.width + 1):
            g.board[y][x] = 3
    g.state = State.NEXT
    g.update()
    assert g.state is State.OVER
    for _ in range(2 * g.height):
        g.update()
    filled = [v for row in _interior(g) for v in row if v]
    assert filled and all(v == GREY for v in filled)
    g.press(Key.RESTART)
    g.update()
    g.update()
    assert g.state is State.NORMAL
    assert all(v == 0 for row in _interior(g) for v in row)


def test_piece_never_overlaps_during_play():
    g = Tetris(rng=random.Random(12), drop_time=3)
    chooser = random.Random(99)
    checked = 0
    for _ in range(600):
        key = chooser.choice(list(Key))
        if chooser.random() < 0.7:
            g.press(key)
        else:
            g.release(key)
        g.update()
        if g.state is State.NORMAL:
            assert not g.collides()
            checked += 1
    assert checked > 0