"""Typing game: catch falling letters by pressing their keys."""

from __future__ import annotations

import argparse
import random
import string
from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass
class Target:
    """A falling letter."""

    x: float
    y: float
    dy: float
    char: str
    visible: bool = True


@dataclass
class TypingGame:
    """Letters spawn every 31 frames and fall until typed or off screen."""

    width: int = 400
    height: int = 400
    rng: random.Random = field(default_factory=random.Random)
    targets: list[Target] = field(default_factory=list)
    timer: int = 1000

    def hit(self, key: str) -> Target | None:
        """Remove the lowest visible letter matching key; return it if any."""
        key = key.lower()
        if len(key) != 1 or key not in string.ascii_lowercase:
            return None
        best: Target | None = None
        for target in self.targets:
            if not target.visible or target.char != key:
                continue
            if best is None or target.y > best.y:
                best = target
        if best is not None:
            best.visible = False
        return best

    def update(self, spawn: bool) -> None:
        """Optionally add a letter, then let every letter fall."""
        if spawn:
            self.targets.append(
                Target(
                    float(self.rng.randrange(self.width - 40) + 20 - 9),
                    -50.0,
                    self.rng.random() * 3 + 1,
                    chr(self.rng.randrange(26) + ord("a")),
                )
            )
        for target in self.targets:
            target.y += target.dy
        self.targets = [t for t in self.targets if t.visible and t.y <= self.height]

    def tick(self) -> bool:
        """Advance one frame; True when a new letter appeared."""
        self.timer += 1
        spawn = self.timer > 30
        if spawn:
            self.timer = 0
        self.update(spawn)
        return spawn


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Typing game.")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    import pygame

    game = TypingGame(rng=random.Random(args.seed))
    pygame.init()
    screen = pygame.display.set_mode((game.width, game.height))
    pygame.display.set_caption("Typing")
    font = pygame.font.SysFont(None, 36)
    clock = pygame.time.Clock()
    fade = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
    fade.fill((0, 0, 0, 48))
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.unicode:
                game.hit(event.unicode)
        game.tick()
        screen.blit(fade, (0, 0))
        for t in game.targets:
            screen.blit(font.render(t.char, True, (255, 255, 255)), (int(t.x), int(t.y)))
        pygame.display.flip()
        clock.tick(60)
    pygame.quit()
    return 0