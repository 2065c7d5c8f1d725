"""Morphing-lines screensaver: bouncing polygons that leave a coloured trail."""

from __future__ import annotations

import argparse
import random
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass

from .colors import channels, hsv_to_rgb, rgb

Snapshot = tuple[tuple[float, float], ...]


def _rand_float(rng: random.Random, dv: float, db: float) -> float:
    return rng.random() * dv + db


@dataclass
class Vertex:
    """A polygon corner with a velocity."""

    x: float
    y: float
    dx: float
    dy: float

    def move(self, width: int, height: int, rng: random.Random) -> None:
        """Step by the velocity, picking a new inward speed when off screen."""
        dv, db = 1.0, 0.5
        tw, th = width / 640.0, height / 480.0
        if self.x < 0:
            self.dx = _rand_float(rng, dv, db) * tw
        if self.y < 0:
            self.dy = _rand_float(rng, dv, db) * th
        if self.x > width:
            self.dx = -_rand_float(rng, dv, db) * tw
        if self.y > height:
            self.dy = -_rand_float(rng, dv, db) * th
        self.x += self.dx
        self.y += self.dy


@dataclass
class Trail:
    """One moving polygon and the history of its past outlines.

    ``polygons[0]`` is the newest outline, ``polygons[-1]`` the oldest; the
    oldest is the one erased on screen each frame.
    """

    width: int
    height: int
    vertices: list[Vertex]
    polygons: deque[Snapshot]
    color: int = 0
    prev_color: int = 0
    next_color: int = 0
    change_time: int = 1000
    now_time: int = 0
    time_left: int = 1000

    @classmethod
    def create(
        cls, count: int, npoints: int, width: int, height: int, rng: random.Random
    ) -> Trail:
        """A trail of count outlines of a polygon with npoints corners."""
        if count < 1:
            raise ValueError(f"trail length must be positive: {count}")
        if npoints < 1:
            raise ValueError(f"polygon needs at least one point: {npoints}")
        next_color = hsv_to_rgb(rng.randrange(360), 1.0, 0.5)
        vertices = [
            Vertex(
                float(rng.randrange(width)),
                float(rng.randrange(height)),
                rng.random() * 2 + 1,
                rng.random() * 2 + 1,
            )
            for _ in range(npoints)
        ]
        trail = cls(
            width,
            height,
            vertices,
            deque(maxlen=count),
            next_color=next_color,
        )
        trail.polygons.append(trail._snapshot())
        trail.polygons.extend(() for _ in range(count - 1))
        return trail

    def _snapshot(self) -> Snapshot:
        return tuple((v.x, v.y) for v in self.vertices)

    @property
    def newest(self) -> Snapshot:
        return self.polygons[0]

    @property
    def oldest(self) -> Snapshot:
        return self.polygons[-1]

    def advance(self, rng: random.Random) -> None:
        """Move the polygon one frame and update the fading colour."""
        for vertex in self.vertices:
            vertex.move(self.width, self.height, rng)
        self.polygons.appendleft(self._snapshot())
        self.now_time += 1
        self.time_left -= 1
        if self.time_left <= 0:
            self.prev_color = self.color
            self.next_color = hsv_to_rgb(rng.randrange(360), 1.0, _rand_float(rng, 0.5, 0.5))
            self.time_left = rng.randrange(1000)
            self.change_time = rng.randrange(1000) + 60
            self.now_time = 0
        if self.now_time >= self.change_time:
            self.color = self.next_color
        else:
            dt = 1 - self.now_time / self.change_time
            self.color = rgb(
                *(
                    int((p - n) * dt + n)
                    for p, n in zip(channels(self.prev_color), channels(self.next_color))
                )
            )


def _outline(snapshot: Snapshot) -> list[tuple[int, int]]:
    points = [(int(x + 0.5), int(y + 0.5)) for x, y in snapshot]
    return points + points[:1]


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Morphing lines screensaver.")
    parser.add_argument("--width", type=int, default=640)
    parser.add_argument("--height", type=int, default=480)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    import pygame

    rng = random.Random(args.seed)
    pygame.init()
    screen = pygame.display.set_mode((args.width, args.height))
    pygame.display.set_caption("Lines")
    clock = pygame.time.Clock()
    trails = [
        Trail.create(length, points, args.width, args.height, rng)
        for length, points in ((80, 4), (40, 3))
    ]
    screen.fill((0, 0, 0))
    running = True
    while running:
        for event in pygame.event.get():
            if event.type in (pygame.QUIT, pygame.KEYDOWN):
                running = False
        for trail in trails:
            trail.advance(rng)
        for trail in trails:
            old = _outline(trail.oldest)
            if len(old) >= 2:
                pygame.draw.lines(screen, (0, 0, 0), False, old)
            new = _outline(trail.newest)
            if len(new) >= 2:
                pygame.draw.lines(screen, channels(trail.color), False, new)
        pygame.display.flip()
        clock.tick(60)
    pygame.quit()
    return 0