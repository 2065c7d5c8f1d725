"""Starfield screensaver: stars drifting left to right at different speeds."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field

from .colors import rgb

SPEED = 0.006
MAX_STARS = 2000
PREVIEW_STARS = 200


@dataclass
class Star:
    """A star; x runs from 0 to 1 across the screen, faster stars are brighter."""

    x: float = 0.0
    y: int = 0
    step: float = 0.0
    color: int = 0

    def reset(self, rng: random.Random, height: int) -> None:
        """Restart at the left edge with a random row and speed."""
        self.x = 0.0
        self.y = rng.randrange(height)
        self.step = rng.random() * SPEED * 0.9 + SPEED * 0.1
        level = min(255, int(self.step * 255 / SPEED + 0.5))
        self.color = rgb(level, level, level)

    def advance(self, dt: float) -> bool:
        """Move by dt seconds; True when the star has left the screen."""
        self.x += self.step * dt * 60
        return self.x > 1


@dataclass
class Starfield:
    """All stars of the screen."""

    width: int
    height: int
    count: int = MAX_STARS
    rng: random.Random = field(default_factory=random.Random)
    stars: list[Star] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.stars:
            for _ in range(self.count):
                star = Star()
                star.reset(self.rng, self.height)
                star.x = self.rng.random()
                self.stars.append(star)

    def update(self, dt: float) -> list[tuple[tuple[int, int], tuple[int, int], int]]:
        """Advance every star; return (old pixel, new pixel, colour) for each."""
        moves = []
        for star in self.stars:
            old = (int(star.x * self.width), star.y)
            if star.advance(dt):
                star.reset(self.rng, self.height)
            moves.append((old, (int(star.x * self.width), star.y), star.color))
        return moves


def parse_mode(argv: Sequence[str]) -> int:
    """Screensaver mode: 0 full screen, 1 preview, -1 configuration request."""
    if not argv:
        return 0
    flag = argv[0].lower()
    if flag == "/p":
        return 1
    if flag != "/s":
        return -1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    mode = parse_mode(argv)
    if mode < 0:
        print("This screensaver has no settings.")
        return 0
    parser = argparse.ArgumentParser(description="Starfield screensaver.")
    parser.add_argument("flags", nargs="*")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    import pygame

    fps = 60
    pygame.init()
    if mode == 0:
        screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN | pygame.NOFRAME)
        pygame.mouse.set_visible(False)
    else:
        screen = pygame.display.set_mode((320, 240))
    width, height = screen.get_size()
    count = MAX_STARS if mode == 0 else PREVIEW_STARS
    field_ = Starfield(width, height, count, random.Random(args.seed))
    font = pygame.font.SysFont(None, 16)
    clock = pygame.time.Clock()
    screen.fill((0, 0, 0))
    origin: tuple[int, int] | None = None
    running = True
    while running:
        for event in pygame.event.get():
            if event.type in (pygame.QUIT, pygame.KEYDOWN):
                running = False
            elif event.type == pygame.MOUSEMOTION:
                if origin is None:
                    origin = event.pos
                dx, dy = event.pos[0] - origin[0], event.pos[1] - origin[1]
                if mode == 0 and dx * dx + dy * dy > 400:
                    running = False
        for old, new, color in field_.update(1.0 / fps):
            screen.set_at(old, (0, 0, 0))
            screen.set_at(new, ((color >> 16) & 0xFF,) * 3)
        pygame.draw.rect(screen, (0, 0, 0), pygame.Rect(0, 0, 90, 14))
        screen.blit(font.render(f"{clock.get_fps():8.2f} FPS", True, (255, 255, 255)), (0, 0))
        pygame.display.flip()
        clock.tick(fps)
    pygame.quit()
    return 0