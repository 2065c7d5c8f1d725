"""Still pictures: a rotating star, an arrow, translucent shapes and image transforms."""

from __future__ import annotations

import argparse
import math
from collections.abc import Sequence

import pygame

WHITE = (0xFC, 0xFC, 0xFC)
BLACK = (0, 0, 0)
BLUE = (0, 0, 0xA8)
RED = (0xA8, 0, 0)
GREEN = (0, 0xA8, 0)
YELLOW = (0xFC, 0xFC, 0x54)
LIGHTMAGENTA = (0xFC, 0x54, 0xFC)
LIGHTBLUE = (0x54, 0x54, 0xFC)

STAR_ANGLE = math.pi * 4 / 5
STAR_SPEED = -0.03


def star_points(x: float, y: float, r: float, a: float) -> list[tuple[int, int]]:
    """Corners of a five-pointed star, in drawing order."""
    return [
        (int(-math.cos(STAR_ANGLE * n + a) * r + x), int(math.sin(STAR_ANGLE * n + a) * r + y))
        for n in range(5)
    ]


def arrow_points(
    sx: float, sy: float, ex: float, ey: float, r: float, length: float
) -> list[tuple[float, float]]:
    """Arrow head triangle at (ex, ey); r is the half angle, length a fraction of the shaft."""
    c, s = math.cos(r), math.sin(r)
    dx, dy = sx - ex, sy - ey
    return [
        (ex, ey),
        (length * (dx * c + dy * s) + ex, length * (-dx * s + dy * c) + ey),
        (length * (dx * c - dy * s) + ex, length * (dx * s + dy * c) + ey),
    ]


def render_star(angle: float, size: tuple[int, int] = (640, 480)) -> pygame.Surface:
    """Blue star with white outline rotated by angle."""
    surface = pygame.Surface(size)
    surface.fill(BLACK)
    points = star_points(300, 200, 100, angle)
    pygame.draw.polygon(surface, (0, 0, 255), points)
    pygame.draw.polygon(surface, (255, 255, 255), points, 1)
    return surface


def render_arrow(size: tuple[int, int] = (640, 480)) -> pygame.Surface:
    """A white line ending in a filled arrow head."""
    surface = pygame.Surface(size)
    surface.fill(BLACK)
    pygame.draw.line(surface, (255, 255, 255), (100, 100), (300, 150), 2)
    pygame.draw.polygon(surface, (255, 0, 255), arrow_points(100, 100, 300, 150, math.pi / 8, 0.2))
    return surface


def render_alpha(size: tuple[int, int] = (640, 480)) -> pygame.Surface:
    """Shapes drawn on a transparent layer and composited over a blue bar."""
    surface = pygame.Surface(size)
    surface.fill(WHITE)
    pygame.draw.rect(surface, BLUE, pygame.Rect(100, 100, 500, 300))
    layer = pygame.Surface(size, pygame.SRCALPHA)
    layer.fill((0, 0, 0, 0))
    pygame.draw.line(layer, (*RED, 255), (100, 100), (400, 400), 10)
    pygame.draw.ellipse(layer, (*GREEN, 255), pygame.Rect(200, 100, 200, 200), 5)
    pygame.draw.ellipse(layer, (*LIGHTMAGENTA, 255), pygame.Rect(10, 10, 50, 50))
    pygame.draw.ellipse(layer, (*LIGHTBLUE, 255), pygame.Rect(100, 10, 50, 50))
    surface.blit(layer, (0, 0))
    return surface


def _triangle_image(size: int = 200) -> pygame.Surface:
    img = pygame.Surface((size, size), pygame.SRCALPHA)
    img.fill((0, 0, 0, 0))
    points = [(100, 50), (50, 150), (150, 150)]
    pygame.draw.polygon(img, (*YELLOW, 255), points)
    pygame.draw.polygon(img, (*RED, 255), points, 1)
    return img


def _blit_centered(target: pygame.Surface, img: pygame.Surface, center: tuple[int, int]) -> None:
    target.blit(img, img.get_rect(center=center))


def render_triangles(size: tuple[int, int] = (800, 600)) -> pygame.Surface:
    """Striped background with a triangle image drawn plain, stretched, rotated and plain."""
    surface = pygame.Surface(size)
    surface.fill(WHITE)
    for i in range(12):
        pygame.draw.rect(surface, BLUE, pygame.Rect(0, i * 50, size[0], 20))
    img = _triangle_image()
    surface.blit(img, (0, 0))
    surface.blit(pygame.transform.scale(img, (400, 300)), (200, 0))
    _blit_centered(surface, pygame.transform.rotate(img, -45), (400, 450))
    surface.blit(img, (600, 400))
    return surface


def render_rotated(size: tuple[int, int] = (640, 480)) -> pygame.Surface:
    """Triangle image rotated 45 degrees and doubled, its white background left out."""
    surface = pygame.Surface(size)
    surface.fill(WHITE)
    pygame.draw.rect(surface, BLACK, pygame.Rect(50, 50, 550, 350))
    img = _triangle_image()
    img = pygame.transform.rotate(pygame.transform.scale(img, (400, 400)), 45)
    _blit_centered(surface, img, (300, 200))
    return surface


_STILLS = {
    "arrow": render_arrow,
    "alpha": render_alpha,
    "triangles": render_triangles,
    "rotated": render_rotated,
}


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Show a drawing demo.")
    parser.add_argument("demo", choices=["star", *_STILLS], nargs="?", default="star")
    args = parser.parse_args(argv)

    pygame.init()
    size = (800, 600) if args.demo == "triangles" else (640, 480)
    screen = pygame.display.set_mode(size)
    pygame.display.set_caption(args.demo)
    clock = pygame.time.Clock()
    angle = 0.0
    running = True
    while running:
        for event in pygame.event.get():
            if event.type in (pygame.QUIT, pygame.KEYDOWN):
                running = False
        if args.demo == "star":
            angle += STAR_SPEED
            if angle > math.pi * 2:
                angle -= math.pi * 2
            screen.blit(render_star(angle, size), (0, 0))
        else:
            screen.blit(_STILLS[args.demo](size), (0, 0))
        pygame.display.flip()
        clock.tick(60)
    pygame.quit()
    return 0