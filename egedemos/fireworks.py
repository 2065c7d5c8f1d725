"""Fireworks: bursts of sparks falling under light gravity."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence
from dataclasses import dataclass

from .colors import channels, hsv_to_rgb

SPARK_GRAVITY = 0.01
LIFETIME = 400
FIREWORKS = 20


@dataclass
class _Spark:
    x: float
    y: float
    vx: float
    vy: float


class Firework:
    """A burst that waits a random delay, flies for LIFETIME frames, then restarts."""

    def __init__(self, rng: random.Random, size: int = 100) -> None:
        self.rng = rng
        self.size = size
        self.sparks: list[_Spark] = []
        self.color = 0
        self.start = 0
        self.count = 0
        self.reset()

    def reset(self) -> None:
        """Pick a new origin, spark velocities, colour and launch delay."""
        rng = self.rng
        x = rng.random() * 600.0 + 20.0
        y = rng.random() * 100.0 + 100.0
        self.sparks = [
            _Spark(x, y, 1.0 - rng.random() * 2.0, 1.0 - rng.random() * 2.0)
            for _ in range(self.size)
        ]
        self.color = hsv_to_rgb(rng.random() * 360.0, 1.0, 1.0)
        self.start = rng.randrange(300)
        self.count = 0

    def update(self) -> None:
        """Advance one frame."""
        launched = self.count > self.start
        self.count += 1
        if launched:
            for spark in self.sparks:
                spark.vy += SPARK_GRAVITY
                spark.x += spark.vx
                spark.y += spark.vy
        if self.count > self.start + LIFETIME:
            self.reset()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Fireworks.")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    import pygame

    width, height = 640, 480
    rng = random.Random(args.seed)
    fireworks = [Firework(rng) for _ in range(FIREWORKS)]
    pygame.init()
    screen = pygame.display.set_mode((width, height))
    pygame.display.set_caption("Fireworks")
    clock = pygame.time.Clock()
    running = True
    while running:
        for event in pygame.event.get():
            if event.type in (pygame.QUIT, pygame.KEYDOWN):
                running = False
        for fw in fireworks:
            fw.update()
        small = pygame.transform.smoothscale(screen, (width // 2, height // 2))
        screen.blit(pygame.transform.smoothscale(small, (width, height)), (0, 0))
        for fw in fireworks:
            color = channels(fw.color)
            for spark in fw.sparks:
                x, y = int(spark.x), int(spark.y)
                if 0 <= x < width and 0 <= y < height:
                    screen.set_at((x, y), color)
        pygame.display.flip()
        clock.tick(60)
    pygame.quit()
    return 0