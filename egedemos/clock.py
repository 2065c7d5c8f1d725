"""Analogue clock with hour, minute and second hands."""

from __future__ import annotations

import argparse
import datetime as dt
import math
from collections.abc import Sequence

CENTER = (200.0, 200.0)
RADIUS = 150.0


def hand_position(center: tuple[float, float], angle: float, radius: float) -> tuple[float, float]:
    """Point at angle radians clockwise from twelve o'clock."""
    return math.sin(angle) * radius + center[0], -math.cos(angle) * radius + center[1]


def clock_hands(moment: dt.datetime | dt.time) -> dict[str, tuple[float, float]]:
    """Tip positions of the hour, minute and second hands."""
    pi2 = math.pi * 2
    h = moment.hour + moment.minute / 60.0
    m = moment.minute + moment.second / 60.0
    s = float(moment.second)
    return {
        "hour": hand_position(CENTER, h * pi2 / 12, RADIUS * 0.5),
        "minute": hand_position(CENTER, m * pi2 / 60, RADIUS * 0.9),
        "second": hand_position(CENTER, s * pi2 / 60, RADIUS),
    }


def timestamp_text(moment: dt.datetime) -> str:
    """Date and time line shown below the dial."""
    return (
        f"{moment.year}/{moment.month:02d}/{moment.day:02d} "
        f"{moment.hour:2d}:{moment.minute:02d}:{moment.second:02d}"
    )


def main(argv: Sequence[str] | None = None) -> int:
    argparse.ArgumentParser(description="Analogue clock.").parse_args(argv)

    import pygame

    pygame.init()
    screen = pygame.display.set_mode((400, 480))
    pygame.display.set_caption("Clock")
    font = pygame.font.SysFont("Courier New", 24)
    clock = pygame.time.Clock()
    cx, cy = CENTER
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
        screen.fill((0, 0, 0))
        pygame.draw.circle(screen, (0x40, 0x40, 0x40), (cx, cy), RADIUS * 1.2)

        def text(s: str, pos: tuple[float, float], color: tuple[int, int, int]) -> None:
            img = font.render(s, True, color)
            screen.blit(img, img.get_rect(center=(int(pos[0]), int(pos[1]))))

        for num in range(1, 13):
            text(str(num), hand_position(CENTER, num * math.pi * 2 / 12, RADIUS), (255, 255, 255))
        now = dt.datetime.now()
        hands = clock_hands(now)
        pygame.draw.line(screen, (0, 0, 255), hands["hour"], CENTER, 10)
        pygame.draw.line(screen, (255, 0, 255), hands["minute"], CENTER, 5)
        pygame.draw.line(screen, (255, 255, 0), hands["second"], CENTER, 1)
        pygame.draw.circle(screen, (255, 255, 0), (cx, cy), RADIUS * 0.05)
        text(timestamp_text(now), (cx, cy + RADIUS * 1.4), (255, 255, 0))
        pygame.display.flip()
        clock.tick(60)
    pygame.quit()
    return 0