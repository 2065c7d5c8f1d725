"""Rippling spring net that can be pulled with the mouse."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass, replace

DEFAULT_K = 0.03
DEFAULT_FRICTION = 0.001


@dataclass
class _Node:
    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    ax: float = 0.0
    ay: float = 0.0
    left_link: tuple[float, float] = (0.0, 0.0)
    upper_link: tuple[float, float] = (0.0, 0.0)


def spring_force(px: float, py: float, x: float, y: float, k: float) -> tuple[float, float]:
    """Force pulling a point at (px, py) towards (x, y) with stiffness k."""
    return (x - px) * k, (y - py) * k


class SpringNet:
    """A grid of masses joined by springs, with a fixed ring of border points.

    Points are indexed [row][column]; rows 0 and ny + 1 and columns 0 and
    nx + 1 form the border, which never moves.
    """

    def __init__(
        self,
        nx: int,
        ny: int,
        width: float,
        height: float,
        k: float = DEFAULT_K,
        friction: float = DEFAULT_FRICTION,
        skip: int = 3,
    ) -> None:
        if nx < 2 or ny < 2:
            raise ValueError(f"net needs at least 2x2 points, got {nx}x{ny}")
        if k >= 0.5:
            raise ValueError(f"spring constant must be below 0.5, got {k}")
        if skip < 1:
            raise ValueError(f"skip must be positive, got {skip}")
        self.nx = nx
        self.ny = ny
        self.k = k
        self.friction = friction
        self.skip = skip
        self.dtw = width / (nx - 1)
        self.dth = height / (ny - 1)
        self.layer = 0
        self._layers = [self._rest_grid(), self._rest_grid()]
        self._captured: tuple[int, int] | None = None

    def _rest_grid(self) -> list[list[_Node]]:
        return [
            [_Node(self.dtw * (x - 1), self.dth * (y - 1)) for x in range(self.nx + 2)]
            for y in range(self.ny + 2)
        ]

    def _move_point(self, cur: list[list[_Node]], nxt: list[list[_Node]], x: int, y: int) -> None:
        op = cur[y][x]
        k = self.k
        ax = ay = 0.0

        right = cur[y][x + 1]
        force = spring_force(op.x, op.y, right.x - self.dtw, right.y, k)
        right.left_link = force
        ax += force[0]
        ay += force[1]

        below = cur[y + 1][x]
        force = spring_force(op.x, op.y, below.x, below.y - self.dth, k)
        below.upper_link = force
        ax += force[0]
        ay += force[1]

        ax -= op.left_link[0]
        ay -= op.left_link[1]
        ax -= op.upper_link[0]
        ay -= op.upper_link[1]

        node = replace(op, ax=ax, ay=ay)
        node.vx += ax
        node.vy += ay
        node.x += node.vx
        node.y += node.vy
        node.vx *= 1 - self.friction
        node.vy *= 1 - self.friction
        nxt[y][x] = node

    def step(self) -> None:
        """Advance the simulation by one time step."""
        cur = self._layers[self.layer]
        nxt = self._layers[self.layer ^ 1]
        for x in range(1, self.nx + 1):
            op, p = cur[0][x], cur[1][x]
            p.upper_link = spring_force(op.x, op.y, p.x, p.y - self.dth, self.k)
        for y in range(1, self.ny + 1):
            op, p = cur[y][0], cur[y][1]
            p.left_link = spring_force(op.x, op.y, p.x - self.dtw, p.y, self.k)
            for x in range(1, self.nx + 1):
                self._move_point(cur, nxt, x, y)
        self.layer ^= 1

    def grab(self, x: float, y: float) -> tuple[int, int]:
        """Hold a point at (x, y); return its (column, row).

        The first call picks the nearest free point (every skip-th row and
        column is left out); later calls move that same point until release().
        """
        grid = self._layers[self.layer]
        if self._captured is None:
            best = (1, 1)
            best_dist = 1e9
            for gy in range(1, self.ny):
                if gy % self.skip == 0:
                    continue
                for gx in range(1, self.nx):
                    if gx % self.skip == 0:
                        continue
                    node = grid[gy][gx]
                    dist = abs(x - node.x) + abs(y - node.y)
                    if dist < best_dist:
                        best = (gx, gy)
                        best_dist = dist
            self._captured = best
        gx, gy = self._captured
        node = grid[gy][gx]
        node.x = float(x)
        node.y = float(y)
        node.vx = 0.0
        node.vy = 0.0
        return gx, gy

    def release(self) -> None:
        """Let go of the held point."""
        self._captured = None

    def rows(self) -> list[list[tuple[int, int]]]:
        """Rounded screen positions along each horizontal line of the net."""
        grid = self._layers[self.layer]
        return [
            [(int(p.x + 0.5), int(p.y + 0.5)) for p in grid[y][: self.nx + 2]]
            for y in range(self.ny + 1)
        ]

    def columns(self) -> list[list[tuple[int, int]]]:
        """Rounded screen positions along each vertical line of the net."""
        grid = self._layers[self.layer]
        return [
            [(int(grid[y][x].x + 0.5), int(grid[y][x].y + 0.5)) for y in range(self.ny + 2)]
            for x in range(self.nx + 1)
        ]


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Drag a rippling spring net.")
    parser.add_argument("--base", type=int, default=20)
    args = parser.parse_args(argv)

    import pygame

    width, height = 640, 480
    pygame.init()
    screen = pygame.display.set_mode((width, height))
    pygame.display.set_caption("Spring net")
    clock = pygame.time.Clock()
    net = SpringNet(args.base * 4, args.base * 3, width, height)
    running = True
    while running:
        for event in pygame.event.get():
            if event.type in (pygame.QUIT, pygame.KEYDOWN):
                running = False
        screen.fill((0, 0, 0))
        for line in (*net.rows(), *net.columns()):
            pygame.draw.lines(screen, (0, 128, 0), False, line)
        pygame.display.flip()
        net.step()
        net.step()
        if pygame.mouse.get_pressed()[0]:
            net.grab(*pygame.mouse.get_pos())
        else:
            net.release()
        clock.tick(60)
    pygame.quit()
    return 0