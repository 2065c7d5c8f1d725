"""Bouncing triangles filled with gradients whose corner colours drift."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence
from dataclasses import dataclass

from .colors import blend, channels, hsv_to_rgb


@dataclass
class ColorVertex:
    """A moving corner whose colour fades between random hues."""

    x: float
    y: float
    dx: float
    dy: float
    color: int = 0
    prev_color: int = 0
    next_color: int = 0
    change_time: int = 1000
    now_time: int = 0
    next_change: int = 1000

    def move(self, width: int, height: int, rng: random.Random) -> None:
        """Step position and colour by one frame, bouncing off the edges."""
        dv, db = 1.0, 0.5
        tw, th = width / 640.0, height / 480.0
        if self.x < 0:
            self.dx = (rng.random() * dv + db) * tw
        if self.y < 0:
            self.dy = (rng.random() * dv + db) * th
        if self.x > width:
            self.dx = -(rng.random() * dv + db) * tw
        if self.y > height:
            self.dy = -(rng.random() * dv + db) * th
        self.x += self.dx
        self.y += self.dy

        self.now_time += 1
        if self.now_time > self.change_time + self.next_change:
            self.now_time = 0
            self.prev_color = self.next_color
            self.next_color = hsv_to_rgb(rng.randrange(360), 1.0, 1.0)
            self.change_time = rng.randrange(1024) + 512
            self.next_change = rng.randrange(1024) + 512
        self.color = blend(self.prev_color, self.next_color, self.now_time / self.change_time)


@dataclass
class GradientPolygon:
    """A polygon of colour vertices."""

    vertices: list[ColorVertex]
    width: int
    height: int

    @classmethod
    def create(
        cls, npoints: int, width: int, height: int, rng: random.Random
    ) -> GradientPolygon:
        """A polygon with npoints random corners inside the screen."""
        if npoints < 1:
            raise ValueError(f"polygon needs at least one point: {npoints}")
        vertices = []
        for _ in range(npoints):
            x = float(rng.randrange(width))
            y = float(rng.randrange(height))
            dx = rng.random() * 2 + 1
            dy = rng.random() * 2 + 1
            nxt = hsv_to_rgb(rng.randrange(360), 1.0, 0.5)
            vertices.append(ColorVertex(x, y, dx, dy, next_color=nxt))
        return cls(vertices, width, height)

    def move(self, rng: random.Random) -> None:
        """Move every corner by one frame."""
        for vertex in self.vertices:
            vertex.move(self.width, self.height, rng)

    def points(self) -> list[tuple[float, float, int]]:
        """The corners as (x, y, color)."""
        return [(v.x, v.y, v.color) for v in self.vertices]


_Corner = tuple[float, float, tuple[int, int, int]]


def _fill_triangle(surface, draw, a: _Corner, b: _Corner, c: _Corner, steps: int = 12) -> None:
    def at(i: int, j: int) -> _Corner:
        k = steps - i - j
        x = (a[0] * k + b[0] * i + c[0] * j) / steps
        y = (a[1] * k + b[1] * i + c[1] * j) / steps
        col = tuple(
            (ca * k + cb * i + cc * j) // steps for ca, cb, cc in zip(a[2], b[2], c[2])
        )
        return x, y, col

    def tri(p: _Corner, q: _Corner, r: _Corner) -> None:
        col = tuple((u + v + w) // 3 for u, v, w in zip(p[2], q[2], r[2]))
        draw.polygon(surface, col, [(p[0], p[1]), (q[0], q[1]), (r[0], r[1])])

    for i in range(steps):
        for j in range(steps - i):
            tri(at(i, j), at(i + 1, j), at(i, j + 1))
            if i + j < steps - 1:
                tri(at(i + 1, j), at(i + 1, j + 1), at(i, j + 1))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Colour gradient triangles.")
    parser.add_argument("--width", type=int, default=640)
    parser.add_argument("--height", type=int, default=480)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    import pygame

    rng = random.Random(args.seed)
    pygame.init()
    screen = pygame.display.set_mode((args.width, args.height))
    pygame.display.set_caption("Triangles")
    clock = pygame.time.Clock()
    shapes = [GradientPolygon.create(3, args.width, args.height, rng) for _ in range(3)]
    running = True
    while running:
        for event in pygame.event.get():
            if event.type in (pygame.QUIT, pygame.KEYDOWN):
                running = False
        for shape in shapes:
            shape.move(rng)
        screen.fill((0, 0, 0))
        for shape in shapes:
            corners = [(x, y, channels(col)) for x, y, col in shape.points()]
            for b, c in zip(corners[1:], corners[2:]):
                _fill_triangle(screen, pygame.draw, corners[0], b, c)
        pygame.display.flip()
        clock.tick(60)
    pygame.quit()
    return 0