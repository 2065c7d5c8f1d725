"""Mandelbrot set explorer with mouse-driven zoom."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from .colors import channels, hsl_to_rgb

ITERATIONS = 1000
MAXCOLOR = 300
WIDTH = 640
HEIGHT = 480


def escape_count(c: complex, iterations: int = ITERATIONS) -> int:
    """Return the iterations left when z escapes, or 0 if it never does."""
    z = 0j
    remaining = iterations
    while True:
        remaining -= 1
        if remaining == 0:
            break
        z = z * z + c
        if z.real * z.real + z.imag * z.imag > 4.0:
            break
    return remaining


def make_palette(size: int = MAXCOLOR) -> list[int]:
    """Gradient from hue 240 to hue 330 through black and white."""
    palette = [0] * size
    for i in range(size // 2):
        lightness = i * 2.0 / size
        palette[i] = hsl_to_rgb(240, 1.0, lightness)
        palette[size - 1 - i] = hsl_to_rgb(330, 1.0, lightness)
    return palette


def pixel_color(c: complex, palette: Sequence[int], iterations: int = ITERATIONS) -> int:
    """Colour of point c: black inside the set, a palette entry outside."""
    k = escape_count(c, iterations)
    if k > 0:
        return palette[(iterations - k) % len(palette)]
    return 0


@dataclass(frozen=True)
class Viewport:
    """Rectangle of the complex plane mapped onto the screen."""

    from_x: float = -2.2
    from_y: float = -1.65
    to_x: float = 2.2
    to_y: float = 1.65

    def point_at(self, x: float, y: float, width: int, height: int) -> complex:
        """Complex number under screen pixel (x, y)."""
        return complex(
            self.from_x + (self.to_x - self.from_x) * (x / width),
            self.from_y + (self.to_y - self.from_y) * (y / height),
        )

    def zoom(self, x0: int, y0: int, x1: int, y1: int, width: int, height: int) -> Viewport:
        """Viewport covering the screen rectangle (x0, y0)-(x1, y1)."""
        dx = self.to_x - self.from_x
        dy = self.to_y - self.from_y
        return Viewport(
            self.from_x + dx * x0 / width,
            self.from_y + dy * y0 / height,
            self.from_x + dx * x1 / width,
            self.from_y + dy * y1 / height,
        )


RESET_VIEW = Viewport(-2.2, -1.65, 1.2, 1.65)


def fit_selection(x0: int, y0: int, x1: int, y1: int) -> tuple[int, int, int, int] | None:
    """Normalise a drag rectangle and stretch it to a 4:3 ratio.

    Returns None for a rectangle with no width or no height.
    """
    if x0 == x1 or y0 == y1:
        return None
    x0, x1 = sorted((x0, x1))
    y0, y1 = sorted((y0, y1))
    if (x1 - x0) * 0.75 < (y1 - y0):
        y1 += 3 - (y1 - y0) % 3
        x0 -= (y1 - y0) // 3 * 4 // 2 - (x1 - x0) // 2
        x1 = x0 + (y1 - y0) // 3 * 4
    else:
        x1 += 4 - (x1 - x0) % 4
        y0 -= (x1 - x0) * 3 // 4 // 2 - (y1 - y0) // 2
        y1 = y0 + (x1 - x0) * 3 // 4
    return x0, y0, x1, y1


def _columns(
    viewport: Viewport, width: int, height: int, palette: Sequence[int], iterations: int
) -> Iterator[tuple[int, list[int]]]:
    for x in range(width):
        yield x, [
            pixel_color(viewport.point_at(x, y, width, height), palette, iterations)
            for y in range(height)
        ]


def render(
    viewport: Viewport,
    width: int = WIDTH,
    height: int = HEIGHT,
    palette: Sequence[int] | None = None,
    iterations: int = ITERATIONS,
) -> list[list[int]]:
    """Colours of every pixel, as rows indexed [y][x]."""
    palette = make_palette() if palette is None else palette
    rows = [[0] * width for _ in range(height)]
    for x, column in _columns(viewport, width, height, palette, iterations):
        for y, color in enumerate(column):
            rows[y][x] = color
    return rows


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Explore the Mandelbrot set.")
    parser.add_argument("--iterations", type=int, default=ITERATIONS)
    parser.add_argument("--colors", type=int, default=MAXCOLOR)
    args = parser.parse_args(argv)

    import pygame

    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Mandelbrot set")
    palette = make_palette(args.colors)
    image = pygame.Surface((WIDTH, HEIGHT))

    def draw(view: Viewport) -> bool:
        for x, column in _columns(view, WIDTH, HEIGHT, palette, args.iterations):
            for y, color in enumerate(column):
                image.set_at((x, y), pygame.Color(*channels(color)))
            screen.blit(image, (0, 0))
            pygame.display.flip()
            if any(e.type == pygame.QUIT for e in pygame.event.get(pygame.QUIT)):
                return False
        return True

    view = Viewport()
    running = draw(view)
    selection: list[int] | None = None
    while running:
        event = pygame.event.wait()
        if event.type == pygame.QUIT:
            break
        if event.type == pygame.MOUSEBUTTONUP:
            if event.button == 3:
                view = RESET_VIEW
                selection = None
                running = draw(view)
            elif selection is not None:
                x0, y0 = selection[0], selection[1]
                selection = None
                fitted = fit_selection(x0, y0, *event.pos)
                if fitted is not None:
                    view = view.zoom(*fitted, WIDTH, HEIGHT)
                    running = draw(view)
        elif event.type == pygame.MOUSEMOTION and selection is not None:
            selection[2:] = event.pos
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            selection = [*event.pos, *event.pos]
        screen.blit(image, (0, 0))
        if selection is not None:
            x0, y0, x1, y1 = selection
            rect = pygame.Rect(min(x0, x1), min(y0, y1), abs(x1 - x0) + 1, abs(y1 - y0) + 1)
            pygame.draw.rect(screen, (255, 255, 255), rect, 1)
        pygame.display.flip()
    pygame.quit()
    return 0