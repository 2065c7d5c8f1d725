"""Bouncing balls under gravity with elastic collisions."""

from __future__ import annotations

import argparse
import math
import random
from collections.abc import Sequence
from dataclasses import dataclass, field

from .colors import channels, hsv_to_rgb

GRAVITY = 0.05
_MAX_ATTEMPTS = 100_000


@dataclass
class Ball:
    """A ball whose mass is proportional to the square of its radius."""

    x: float
    y: float
    r: int
    vx: float = 0.0
    vy: float = 0.0
    color: int = 0

    def overlaps(self, other: Ball) -> bool:
        """True when the two balls intersect."""
        dx, dy = self.x - other.x, self.y - other.y
        return dx * dx + dy * dy < (self.r + other.r) ** 2

    def _on_edge(self, width: int, height: int) -> bool:
        return (
            self.x < self.r
            or self.x >= width - self.r
            or self.y < self.r
            or self.y >= height - self.r
        )


def _distance2(x1: float, y1: float, x2: float, y2: float) -> float:
    return (x1 - x2) ** 2 + (y1 - y2) ** 2


def collide(a: Ball, b: Ball) -> None:
    """Exchange momentum along the line of centres (elastic collision)."""
    ma, mb = a.r * a.r, b.r * b.r
    sx, sy = a.x - b.x, a.y - b.y
    dist = math.hypot(sx, sy)
    if dist == 0:
        return
    s1x, s1y = sx / dist, sy / dist
    t1x, t1y = -s1y, s1x

    vas = a.vx * s1x + a.vy * s1y
    vat = a.vx * t1x + a.vy * t1y
    vbs = b.vx * s1x + b.vy * s1y
    vbt = b.vx * t1x + b.vy * t1y

    vasf = (2 * mb * vbs + vas * (ma - mb)) / (ma + mb)
    vbsf = (2 * ma * vas - vbs * (ma - mb)) / (ma + mb)

    a.vx = vasf * s1x + vat * t1x
    a.vy = vasf * s1y + vat * t1y
    b.vx = vbsf * s1x + vbt * t1x
    b.vy = vbsf * s1y + vbt * t1y


@dataclass
class BallWorld:
    """A box of balls falling under gravity."""

    width: int
    height: int
    balls: list[Ball] = field(default_factory=list)

    @classmethod
    def spawn(cls, count: int, width: int, height: int, rng: random.Random) -> BallWorld:
        """Place count resting balls at random, away from edges and each other."""
        world = cls(width, height)
        for _ in range(count):
            for _attempt in range(_MAX_ATTEMPTS):
                ball = Ball(
                    float(rng.randrange(width)),
                    float(rng.randrange(height)),
                    rng.randrange(40) + 20,
                )
                if ball._on_edge(width, height):
                    continue
                if any(ball.overlaps(other) for other in reversed(world.balls)):
                    continue
                break
            else:
                raise ValueError(f"no room for {count} balls in {width}x{height}")
            ball.color = hsv_to_rgb(rng.randrange(10000) * 360.0 / 10000.0, 1.0, 1.0)
            world.balls.append(ball)
        return world

    def update(self) -> None:
        """Advance one frame: gravity, wall bounces, then collisions."""
        for b in self.balls:
            b.vy += GRAVITY
            b.x += b.vx
            b.y += b.vy
            if b.y >= self.height - b.r and b.vy > 0:
                b.y -= b.vy
                b.vy = -b.vy
            if b.x < b.r and b.vx < 0:
                b.vx = -b.vx
            if b.x >= self.width - b.r and b.vx > 0:
                b.vx = -b.vx
        for i, a in enumerate(self.balls):
            for b in reversed(self.balls[:i]):
                if a.overlaps(b) and _distance2(a.x, a.y, b.x, b.y) > _distance2(
                    a.x + a.vx, a.y + a.vy, b.x + b.vx, b.y + b.vy
                ):
                    collide(a, b)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Bouncing balls.")
    parser.add_argument("--count", type=int, default=8)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    import pygame

    width, height = 640, 480
    rng = random.Random(args.seed)
    world = BallWorld.spawn(args.count, width, height, rng)
    pygame.init()
    screen = pygame.display.set_mode((width, height))
    pygame.display.set_caption("Balls")
    clock = pygame.time.Clock()
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
        world.update()
        screen.fill((0, 0, 0))
        for ball in world.balls:
            pygame.draw.circle(screen, channels(ball.color), (ball.x, ball.y), ball.r)
        pygame.display.flip()
        clock.tick(120)
    pygame.quit()
    return 0