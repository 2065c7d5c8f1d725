"""Julia set screensaver with incremental, smoothly coloured rendering."""

from __future__ import annotations

import argparse
import math
import random
import time
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass

from .colors import channels, rgb

BAILOUT = 256.0
COL_INS = 1.0 / BAILOUT / BAILOUT * 256 * 32
LOG_SIZE = (18 * 18) * 32
SEED_BOUNDS = (-1.9, -1.2, 0.5, 1.2)


def _log2(d: float) -> float:
    if d != d or d < 0:
        return math.nan
    if d == 0:
        return -math.inf
    return math.log2(d)


def iter_to_color(value: float) -> int:
    """Fold a smooth iteration value into a 0..255 triangle wave."""
    return int(abs(math.fmod(value + 255, 510) - 255))


def log_table(size: int = LOG_SIZE) -> list[float]:
    """Fractional escape corrections indexed by |z|^2 * COL_INS."""
    return [1 - _log2(_log2(i / COL_INS) / 2) for i in range(size)]


_LOG_MAP = log_table()


@dataclass
class ColorScheme:
    """Per-channel frequencies and phase shifts of the colouring."""

    red: float = 28.0
    green: float = 16.0
    blue: float = 32.0
    red_shift: float = 0.0
    green_shift: float = 0.0
    blue_shift: float = 128.0

    def color(self, z: complex, iteration: int) -> int:
        """Colour of a point that escaped with value z after iteration steps."""
        r = z.real * z.real + z.imag * z.imag
        smooth = iteration + _LOG_MAP[int(r * COL_INS)]
        return rgb(
            iter_to_color(smooth * self.red + self.red_shift),
            iter_to_color(smooth * self.green + self.green_shift),
            iter_to_color(smooth * self.blue + self.blue_shift),
        )

    @classmethod
    def randomized(cls, rng: random.Random) -> ColorScheme:
        """A random scheme in the same ranges the screensaver uses."""
        dc, dca, db = 64.0, 128.0, 16.0
        return cls(
            rng.random() * dc + db,
            rng.random() * dc + db,
            rng.random() * dc + db,
            rng.random() * dca,
            rng.random() * dca,
            rng.random() * dca,
        )


class JuliaField:
    """Per-pixel Julia iteration state, advanced one step at a time."""

    def __init__(
        self,
        width: int,
        height: int,
        scheme: ColorScheme | None = None,
        c: complex = complex(0.262, 0.002),
        rotate: float = 0.0,
        radius: float = 1.5,
        center: complex = 0j,
    ) -> None:
        self.width = width
        self.height = height
        self.scheme = scheme if scheme is not None else ColorScheme()
        self.radius = radius
        self.center = center
        self.processed = 0
        self.reset(c, rotate)

    @property
    def pending(self) -> int:
        """Number of pixels that have not escaped yet."""
        return len(self._pending)

    def reset(self, c: complex, rotate: float) -> None:
        """Start over with parameter c and the plane rotated by rotate radians."""
        self.c = c
        self.rotate = rotate
        sr, cr = math.sin(rotate), math.cos(rotate)
        aspect = self.width / self.height
        from_x = self.center.real - self.radius * aspect
        to_x = self.center.real + self.radius * aspect
        from_y = self.center.imag - self.radius
        to_y = self.center.imag + self.radius
        self._z = []
        for y in range(self.height):
            im = from_y + (to_y - from_y) * (y / self.height)
            for x in range(self.width):
                re = from_x + (to_x - from_x) * (x / self.width)
                self._z.append(complex(cr * re + sr * im, sr * re - cr * im))
        self._iters = [0] * (self.width * self.height)
        self._pending = list(range(self.width * self.height))
        self.processed = 0

    def step(self) -> list[tuple[int, int, int]]:
        """Iterate every pending pixel once; return (x, y, color) of those that escaped."""
        c = self.c
        z, iters = self._z, self._iters
        escaped: list[tuple[int, int, int]] = []
        still: list[int] = []
        for idx in self._pending:
            v = z[idx] * z[idx] + c
            z[idx] = v
            iters[idx] += 1
            if v.real * v.real + v.imag * v.imag > BAILOUT:
                y, x = divmod(idx, self.width)
                escaped.append((x, y, self.scheme.color(v, iters[idx])))
            else:
                still.append(idx)
        self.processed = len(self._pending)
        self._pending = still
        return escaped


def _mandel_escape(c: complex, limit: int) -> int:
    z = 0j
    for n in range(1, limit + 1):
        z = z * z + c
        if z.real * z.real + z.imag * z.imag > 4.0:
            return n
    return 0


class SeedMap:
    """Escape counts of the Mandelbrot set, flooded in from the top and bottom edges.

    Cells never reached or never escaping hold 0; they guide the choice of
    Julia parameters near the set's boundary.
    """

    def __init__(
        self,
        width: int = 1200,
        height: int = 1200,
        bounds: tuple[float, float, float, float] = SEED_BOUNDS,
        limit: int = 64,
    ) -> None:
        self.width = width
        self.height = height
        self.bounds = bounds
        self.limit = limit
        self.counts: list[list[int]] | None = None

    def compute(self) -> list[list[int]]:
        """Fill and return the grid of escape counts."""
        w, h = self.width, self.height
        x0, y0, x1, y1 = self.bounds
        counts = [[0] * w for _ in range(h)]
        seen = bytearray(w * h)
        queue: deque[tuple[int, int]] = deque()
        for x in range(w):
            queue.append((x, 0))
            queue.append((x, h - 1))
        while queue:
            x, y = queue.popleft()
            if seen[y * w + x]:
                continue
            seen[y * w + x] = 1
            c = complex(x0 + (x1 - x0) * (x / w), y0 + (y1 - y0) * (y / h))
            k = _mandel_escape(c, self.limit)
            if not k:
                continue
            counts[y][x] = k
            for nx, ny in ((x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y)):
                if 0 <= nx < w and 0 <= ny < h and not seen[ny * w + nx]:
                    queue.append((nx, ny))
        self.counts = counts
        return counts

    def choose_seed(self, rng: random.Random) -> complex:
        """Pick a random parameter whose cell escaped after at least 16 steps."""
        counts = self.counts if self.counts is not None else self.compute()
        if not any(v >= 16 for row in counts for v in row):
            raise ValueError("no cell of the seed map qualifies")
        x0, y0, x1, y1 = self.bounds
        while True:
            c = complex(x0 + rng.random() * (x1 - x0), y0 + rng.random() * (y1 - y0))
            ix = int((c.real - x0) / (x1 - x0) * self.width)
            iy = int((c.imag - y0) / (y1 - y0) * self.height)
            if counts[iy][ix] >= 16:
                return c


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Julia set screensaver.")
    parser.add_argument("--width", type=int, default=640)
    parser.add_argument("--height", type=int, default=480)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    import pygame

    rng = random.Random(args.seed)
    pygame.init()
    screen = pygame.display.set_mode((args.width, args.height))
    pygame.display.set_caption("Julia set")

    def interrupted() -> bool:
        return any(
            e.type in (pygame.QUIT, pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN)
            for e in pygame.event.get()
        )

    seeds = SeedMap()
    scheme = ColorScheme.randomized(rng)
    field = JuliaField(args.width, args.height, scheme, complex(0.262, 0.002), rng.random() * 360)
    screen.fill((0, 0, 0))
    started = time.monotonic()
    idle = 0
    loop = 1
    while not interrupted():
        escaped = field.step()
        for x, y, color in escaped:
            screen.set_at((x, y), pygame.Color(*channels(color)))
        pygame.display.flip()
        idle = 0 if escaped else idle + 1
        if field.processed == 0 or idle > 8 or loop > 1000:
            if seeds.counts is None:
                seeds.compute()
                if interrupted():
                    break
            field.scheme = ColorScheme.randomized(rng)
            rotate = rng.random() * 360
            field.reset(seeds.choose_seed(rng), rotate)
            idle = 0
            deadline = started + 3.0
            quit_now = False
            while time.monotonic() < deadline:
                if interrupted():
                    quit_now = True
                    break
                pygame.time.wait(20)
            if quit_now:
                break
            screen.fill((0, 0, 0))
            started = time.monotonic()
            loop = 0
        loop += 1
    pygame.quit()
    return 0