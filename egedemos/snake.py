"""A tiny snake game on a 40x30 grid."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence

from .colors import channels

MAP_W = 40
MAP_H = 30
EMPTY, BODY, FRUIT = 0, 1, 2
CELL_COLORS = (0x545454, 0x00A800, 0xA80000)


class SnakeGame:
    """Snake state on a grid of cells.

    ``kinds`` holds EMPTY, BODY or FRUIT per cell; ``links`` points from each
    body cell to the next cell towards the head, so the tail can follow.
    The direction is packed as (dx + 1) | ((dy + 1) << 2).
    """

    def __init__(self, width: int = MAP_W, height: int = MAP_H, rng: random.Random | None = None) -> None:
        if width < 2 or height < 1:
            raise ValueError(f"grid too small: {width}x{height}")
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.kinds = [EMPTY] * (width * height)
        self.links = [0] * (width * height)
        self.direction = 6
        self.head = 0
        self.grow = 2
        self.tail = 0
        self.kinds[0] = BODY

    def place_fruit(self) -> int:
        """Put a fruit on a random empty cell and return its index."""
        if EMPTY not in self.kinds:
            raise ValueError("no empty cell for a fruit")
        while True:
            cell = self.rng.randrange(self.width * self.height)
            if self.kinds[cell] == EMPTY:
                self.kinds[cell] = FRUIT
                return cell

    def step(self, dx: int, dy: int, user: bool = False) -> bool:
        """Move the head by (dx, dy); False when the snake dies.

        A user move straight back against the current direction is ignored.
        """
        if user and dx + (self.direction & 3) == 1 and dy + (self.direction >> 2) == 1:
            return True
        if dx and not dy:
            col = self.head % self.width + dx
            if not 0 <= col < self.width:
                return False
            new_head = self.head + dx
        else:
            row = self.head // self.width + dy
            if not 0 <= row < self.height:
                return False
            new_head = self.head + dy * self.width
        kind = self.kinds[new_head]
        if kind == BODY:
            return False
        if kind == FRUIT:
            self.grow += 5
            self.kinds[new_head] = EMPTY
            self.place_fruit()
        if self.grow > 0:
            self.grow -= 1
        else:
            old = self.tail
            self.tail = self.links[old]
            self.kinds[old] = EMPTY
            self.links[old] = 0
        self.links[self.head] = new_head
        self.head = new_head
        self.kinds[new_head] = BODY
        self.links[new_head] = 0
        self.direction = (dx + 1) | ((dy + 1) << 2)
        return True

    def forward(self) -> bool:
        """Move one cell in the current direction."""
        return self.step((self.direction & 3) - 1, (self.direction >> 2) - 1)

    def steer(self, key: str) -> bool:
        """Handle a w/a/s/d key; other keys do nothing."""
        moves = {"a": (-1, 0), "d": (1, 0), "w": (0, -1), "s": (0, 1)}
        move = moves.get(key.lower())
        if move is None:
            return True
        return self.step(*move, user=True)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Snake.")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    import pygame

    width, height = 640, 480
    gw, gh = width // MAP_W, height // MAP_H
    game = SnakeGame(rng=random.Random(args.seed))
    game.place_fruit()
    pygame.init()
    screen = pygame.display.set_mode((width, height))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()
    countdown = -1
    alive = True
    while alive:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                alive = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    alive = False
                elif event.unicode and not game.steer(event.unicode):
                    alive = False
        if alive and countdown < 0:
            alive = game.forward()
            countdown = 20
        countdown -= 1
        for index, kind in enumerate(game.kinds):
            y, x = divmod(index, MAP_W)
            pygame.draw.rect(screen, channels(CELL_COLORS[kind]), pygame.Rect(x * gw, y * gh, gw, gh))
        pygame.display.flip()
        clock.tick(60)
    pygame.quit()
    return 0