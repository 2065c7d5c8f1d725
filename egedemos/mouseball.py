"""Balls with friction that can be grabbed and flung with the mouse."""

from __future__ import annotations

import argparse
import enum
import math
import random
from collections.abc import Sequence
from dataclasses import dataclass, field

from .colors import channels, hsv_to_rgb

WIDTH = 640
HEIGHT = 480
BALLS = 10


class MouseKind(enum.Enum):
    NONE = 0
    DOWN = 1
    UP = 2
    MOVE = 3


@dataclass(frozen=True)
class MouseEvent:
    kind: MouseKind
    x: int
    y: int


@dataclass
class DragBall:
    """A ball sliding with friction, clamped to the window."""

    r: int
    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    color: int = 0
    friction: float = 1 / 100.0
    free: bool = True
    width: int = WIDTH
    height: int = HEIGHT

    def update(self) -> None:
        """Keep inside the walls, then move and slow down if not held."""
        if self.x - self.r <= 0:
            self.x = self.r
            if self.vx <= 0:
                self.vx = -self.vx
        if self.x + self.r >= self.width:
            self.x = self.width - self.r
            if self.vx >= 0:
                self.vx = -self.vx
        if self.y - self.r <= 0:
            self.y = self.r
            if self.vy <= 0:
                self.vy = -self.vy
        if self.y + self.r >= self.height:
            self.y = self.height - self.r
            if self.vy >= 0:
                self.vy = -self.vy
        if self.free:
            self.x += self.vx
            self.y += self.vy
            speed = math.hypot(self.vx, self.vy)
            if speed > 1e-9:
                self.vx -= self.vx * self.friction / speed
                self.vy -= self.vy * self.friction / speed
            else:
                self.vx = 0.0
                self.vy = 0.0

    def contains(self, x: float, y: float) -> bool:
        """True when (x, y) lies inside the ball."""
        dx, dy = x - self.x, y - self.y
        return dx * dx + dy * dy < self.r * self.r

    def handle(self, event: MouseEvent, dx: float, dy: float) -> bool:
        """React to a mouse event; return True while the ball stays grabbed."""
        damping = 0.9
        if event.kind is MouseKind.DOWN:
            if self.contains(event.x, event.y):
                self.vx = self.vy = 0.0
                self.x, self.y = event.x, event.y
                self.free = False
                return True
        elif event.kind is MouseKind.UP:
            self.free = True
            return False
        elif event.kind is MouseKind.MOVE:
            if dx * dx + dy * dy > self.vx * self.vx + self.vy * self.vy:
                self.vx, self.vy = dx, dy
            else:
                self.vx *= damping
                self.vy *= damping
            self.x, self.y = event.x, event.y
            self.free = False
            return True
        elif not self.free:
            self.vx *= damping
            self.vy *= damping
        return False


@dataclass
class DragController:
    """Routes mouse events to the ball that is being dragged."""

    balls: list[DragBall]
    captured: int = -1
    last_x: int = 0
    last_y: int = 0
    _seen: bool = field(default=False, repr=False)

    def dispatch(self, event: MouseEvent) -> None:
        """Feed one mouse event."""
        dx = float(event.x - self.last_x)
        dy = float(event.y - self.last_y)
        self.last_x, self.last_y = event.x, event.y
        if self.captured == -1 and event.kind is MouseKind.DOWN:
            for i in reversed(range(len(self.balls))):
                if self.balls[i].handle(event, dx, dy):
                    self.captured = i
                    break
        elif self.captured >= 0 and event.kind in (MouseKind.UP, MouseKind.MOVE):
            if not self.balls[self.captured].handle(event, dx, dy):
                self.captured = -1

    def settle(self) -> None:
        """End of frame: let a held ball lose its fling speed."""
        if self.captured >= 0:
            event = MouseEvent(MouseKind.NONE, self.last_x, self.last_y)
            self.balls[self.captured].handle(event, 0.0, 0.0)


def _random_ball(rng: random.Random, width: int = WIDTH, height: int = HEIGHT) -> DragBall:
    r = rng.randrange(20) + 20
    x = float(rng.randrange(width - r * 2) + r)
    y = float(rng.randrange(height - r * 2) + r)
    vx = (6 * rng.random() + 0.1) * (rng.randrange(2) * 2.0 - 1)
    vy = (6 * rng.random() + 0.1) * (rng.randrange(2) * 2.0 - 1)
    color = hsv_to_rgb(rng.random() * 360.0, 1.0, 0.8)
    return DragBall(r, x, y, vx, vy, color, width=width, height=height)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Drag and fling balls.")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    import pygame

    rng = random.Random(args.seed)
    controller = DragController([_random_ball(rng) for _ in range(BALLS)])
    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Colliding balls")
    clock = pygame.time.Clock()
    kinds = {
        pygame.MOUSEBUTTONDOWN: MouseKind.DOWN,
        pygame.MOUSEBUTTONUP: MouseKind.UP,
        pygame.MOUSEMOTION: MouseKind.MOVE,
    }
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type in kinds:
                controller.dispatch(MouseEvent(kinds[event.type], *event.pos))
        controller.settle()
        for ball in controller.balls:
            ball.update()
        screen.fill((0, 0, 0))
        for ball in controller.balls:
            pygame.draw.circle(screen, channels(ball.color), (int(ball.x), int(ball.y)), ball.r)
        pygame.display.flip()
        clock.tick(60)
    pygame.quit()
    return 0