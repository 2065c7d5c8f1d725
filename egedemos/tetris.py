"""Falling-block puzzle with smooth piece movement."""

from __future__ import annotations

import argparse
import enum
import random
from collections.abc import Iterator, Sequence

from .colors import channels, scale

WALL = -1
GREY = 8

COLORS = (
    0, 0xA00000, 0xA05000, 0xA0A000, 0xC000,
    0x00A0A0, 0x4040C0, 0xA000A0, 0x808080, 0xFFFFFF,
)

_FRAME_COLORS = (0x400040, 0x600060, 0xA000A0, 0xFF00FF, 0xA000A0, 0x600060, 0x400040)

_RAW = (
    (("0000",),),
    (("0000", "1110", "0100"), ("0100", "1100", "0100"), ("0100", "1110"), ("0100", "0110", "0100")),
    (("2200", "0200", "0200"), ("0020", "2220"), ("0200", "0200", "0220"), ("0000", "2220", "2000")),
    (("0330", "0300", "0300"), ("0000", "3330", "0030"), ("0300", "0300", "3300"), ("3000", "3330")),
    (("4400", "0440"), ("0040", "0440", "0400")),
    (("0550", "5500"), ("0500", "0550", "0050")),
    (("0000", "6666"), ("0060", "0060", "0060", "0060")),
    (("0000", "0770", "0770"),),
)


def _grid(rows: tuple[str, ...]) -> tuple[tuple[int, ...], ...]:
    padded = (*rows, *("0000",) * (4 - len(rows)))
    return tuple(tuple(int(ch) for ch in row) for row in padded)


SHAPES = tuple(tuple(_grid(rot) for rot in rotations) for rotations in _RAW)
ROTATIONS = (1, 4, 4, 4, 2, 2, 2, 1)


def shade(color: int, factor: float) -> int:
    """Brighten or darken a colour, clamping every channel."""
    return scale(color, factor)


class State(enum.Enum):
    START = 0
    NEXT = 1
    NORMAL = 2
    OVER = 3


class Key(enum.IntEnum):
    RESTART = 0
    LEFT = 1
    RIGHT = 2
    DOWN = 3
    ROTATE = 4
    ROTATE_BACK = 5


class Tetris:
    """Game logic: board, falling piece and the state machine driving them.

    The board is indexed [row][column] with playable cells at 1..height and
    1..width; the surrounding ring holds WALL.
    """

    def __init__(
        self,
        width: int = 10,
        height: int = 20,
        rng: random.Random | None = None,
        drop_time: int = 60,
        move_time: int = 10,
    ) -> None:
        if width < 4 or height < 4:
            raise ValueError(f"board too small: {width}x{height}")
        if drop_time < 1 or move_time < 1:
            raise ValueError("drop_time and move_time must be positive")
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.drop_time = drop_time
        self.move_time = move_time
        self.state = State.START
        self.board = self._empty_board()
        self.shape = 0
        self.rotation = -1
        self.piece_x = 0
        self.piece_y = 0
        self.offset_x = 0.0
        self.offset_y = 0.0
        self.next_shape = 0
        self.after_next_shape = 0
        self.drop_timer = drop_time
        self.drop_step = 1
        self.slide_timer = 0
        self.forbid_down = False
        self.gray_row = 0
        self.over_ticks = 0
        self._flags = [0] * len(Key)
        self._held = [False] * len(Key)

    def _empty_board(self) -> list[list[int]]:
        w, h = self.width, self.height
        return [
            [0 if 1 <= x <= w and 1 <= y <= h else WALL for x in range(w + 2)]
            for y in range(h + 2)
        ]

    def _random_shape(self) -> int:
        return self.rng.randrange(7) + 1

    def _occupied(self, y: int, x: int) -> bool:
        if not (0 <= y < self.height + 2 and 0 <= x < self.width + 2):
            return True
        return self.board[y][x] != 0

    def _cells(self) -> Iterator[tuple[int, int, int]]:
        for dy, row in enumerate(SHAPES[self.shape][self.rotation]):
            for dx, value in enumerate(row):
                if value:
                    yield self.piece_y + dy, self.piece_x + dx, value

    def press(self, key: Key | int) -> None:
        """Register a key press (repeats count separately)."""
        key = Key(key)
        self._flags[key] += 1
        self._held[key] = True

    def release(self, key: Key | int) -> None:
        """Register a key release."""
        key = Key(key)
        self._flags[key] = 0
        self._held[key] = False
        if key is Key.DOWN:
            self.forbid_down = False

    def collides(self) -> bool:
        """True when the current piece overlaps a wall or a filled cell."""
        return any(self._occupied(y, x) for y, x, _ in self._cells())

    def merge(self) -> int:
        """Fix the piece into the board, remove full lines; return how many."""
        for y, x, value in self._cells():
            self.board[y][x] = value
        interior = self.board[1 : self.height + 1]
        kept = [row for row in interior if 0 in row[1 : self.width + 1]]
        cleared = self.height - len(kept)
        blank = [[WALL, *([0] * self.width), WALL] for _ in range(cleared)]
        self.board = [self.board[0], *blank, *kept, self.board[self.height + 1]]
        return cleared

    def _start(self) -> bool:
        self.next_shape = self._random_shape()
        self.after_next_shape = self._random_shape()
        self.board = self._empty_board()
        self.forbid_down = False
        self.rotation = -1
        self.state = State.NEXT
        return True

    def _next(self) -> bool:
        self.piece_x = (self.width - 4) // 2 + 1
        self.piece_y = 1
        self.rotation = 0
        self.shape = self.next_shape
        self.offset_y = 0.0
        self.next_shape = self.after_next_shape
        self.after_next_shape = self._random_shape()
        self.drop_timer = self.drop_time
        self.slide_timer = 0
        if self.collides():
            self.gray_row = self.height * 2
            self.over_ticks = 0
            self.state = State.OVER
        else:
            self.state = State.NORMAL
        return True

    def _normal(self) -> bool:
        down = self._held[Key.DOWN]
        if not down or self.forbid_down:
            self.drop_timer -= 1
            self.drop_step = 1
        if self.slide_timer:
            self.slide_timer += -1 if self.slide_timer > 0 else 1
        for key, step in ((Key.LEFT, -1), (Key.RIGHT, 1)):
            for _ in range(self._flags[key]):
                self.piece_x += step
                if self.collides():
                    self.piece_x -= step
                else:
                    self.slide_timer = -step * self.move_time
        self.offset_x = self.slide_timer / self.move_time
        turns = ROTATIONS[self.shape]
        for key, step in ((Key.ROTATE, 1), (Key.ROTATE_BACK, -1)):
            for _ in range(self._flags[key]):
                previous = self.rotation
                self.rotation = (previous + turns + step) % turns
                if self.collides():
                    self.rotation = previous
        if not self.forbid_down and down:
            self.drop_timer -= self.drop_step
            self.drop_step += 1
        if self.drop_timer < 0:
            self.piece_y += 1
            if self.collides():
                self.piece_y -= 1
                self.merge()
                self.offset_x = self.offset_y = 0.0
                self.rotation = -1
                if down:
                    self.forbid_down = True
                self.state = State.NEXT
            else:
                self.drop_timer += self.drop_time
        if self.state is State.NORMAL:
            self.offset_y = self.drop_timer / self.drop_time
        return False

    def _over(self) -> bool:
        if self.gray_row > 0 and self.gray_row % 2 == 0:
            row = self.board[self.gray_row >> 1]
            for x in range(1, self.width + 1):
                if row[x]:
                    row[x] = GREY
        self.gray_row -= 1
        self.over_ticks += 1
        if self._flags[Key.RESTART] > 0:
            self.state = State.START
        return False

    def tick(self) -> bool:
        """Run one state transition; True when another should follow at once."""
        handler = {
            State.START: self._start,
            State.NEXT: self._next,
            State.NORMAL: self._normal,
            State.OVER: self._over,
        }[self.state]
        again = handler()
        self._flags = [0] * len(Key)
        return again

    def update(self) -> None:
        """Run transitions until the game settles for this frame."""
        while self.tick():
            pass


def _paint(pg, screen, font, game: Tetris, base_x: int, base_y: int, bw: int, bh: int) -> None:
    def edge(x: int, y: int, w: int, h: int, color: int, dark: bool = True) -> None:
        bright = channels(shade(color, 1.5))
        pg.draw.line(screen, bright, (x, y + h), (x, y))
        pg.draw.line(screen, bright, (x, y), (x + w, y))
        second = channels(shade(color, 0.7)) if dark else bright
        pg.draw.line(screen, second, (x + w, y), (x + w, y + h))
        pg.draw.line(screen, second, (x + w, y + h), (x, y + h))

    def tile(x: int, y: int, color: int) -> None:
        w, h = bw - 1, bh - 1
        pg.draw.rect(screen, channels(color), pg.Rect(x + 1, y + 1, w - 1, h - 1))
        edge(x, y, w, h, color)
        edge(x + 1, y + 1, w - 2, h - 2, color)

    def frame(x: int, y: int, w: int, h: int) -> None:
        pg.draw.rect(screen, (1, 1, 1), pg.Rect(x, y, w, h))
        w, h = w - 1, h - 1
        for color in _FRAME_COLORS:
            x, y, w, h = x - 1, y - 1, w + 2, h + 2
            edge(x, y, w, h, color, dark=False)

    def grid4(bx: int, by: int, mat, dx: float = 0.0, dy: float = 0.0, override: int = 0) -> None:
        for y in range(3, -1, -1):
            for x, value in enumerate(mat[y]):
                if value:
                    color = COLORS[override or value]
                    tile(
                        int(bx + (x + dx) * bw + 1000.5) - 1000,
                        int(by + (y - dy) * bh + 1000.5) - 1000,
                        color,
                    )

    screen.fill((0, 0, 0))
    frame(base_x + 5 * bw, base_y, game.width * bw, game.height * bh)
    frame(base_x, base_y, 4 * bw, 4 * bh)
    frame(base_x, base_y + 5 * bh, 4 * bw, 4 * bh)
    bx, by = base_x + 4 * bw, base_y - bh
    for y in range(game.height, 0, -1):
        for x in range(1, game.width + 1):
            value = game.board[y][x]
            if value:
                tile(bx + x * bw, by + y * bh, COLORS[value])
    if game.rotation >= 0:
        grid4(
            base_x + (game.piece_x + 4) * bw,
            base_y + (game.piece_y - 1) * bh,
            SHAPES[game.shape][game.rotation],
            game.offset_x,
            game.offset_y,
        )
    grid4(base_x, base_y, SHAPES[game.next_shape][0])
    grid4(base_x, base_y + 5 * bh, SHAPES[game.after_next_shape][0], override=GREY)
    if game.state is State.OVER:
        text = font.render("Press F2 to Restart game", True, (255, 255, 255))
        screen.blit(text, (base_x + 5 * bw, base_y))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Falling blocks game.")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    import pygame

    fps = 120
    pygame.init()
    screen = pygame.display.set_mode((400, 520))
    pygame.display.set_caption("Tetris")
    pygame.key.set_repeat(200, 50)
    font = pygame.font.SysFont(None, 18)
    clock = pygame.time.Clock()
    game = Tetris(10, 20, random.Random(args.seed), drop_time=fps // 2, move_time=10)
    keys = {
        pygame.K_F2: Key.RESTART,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_DOWN: Key.DOWN,
        pygame.K_UP: Key.ROTATE,
        pygame.K_KP0: Key.ROTATE_BACK,
    }
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key in keys:
                game.press(keys[event.key])
            elif event.type == pygame.KEYUP and event.key in keys:
                game.release(keys[event.key])
        game.update()
        _paint(pygame, screen, font, game, 20, 20, 24, 24)
        pygame.display.flip()
        clock.tick(fps)
    pygame.quit()
    return 0