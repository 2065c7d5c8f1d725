"""Shows typed characters and prints their codes."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Iterable, Sequence

FONT_HEIGHT = 20
WIDTH = 480
HEIGHT = 360


def format_codes(codes: Iterable[int]) -> str:
    """Character codes as a comma separated line."""
    return ", ".join(str(c) for c in codes)


def parse_mode(argv: Sequence[str]) -> str:
    """'utf-8', 'utf-16' or 'ansi' from the first argument."""
    if argv and argv[0] == "--utf-8":
        return "utf-8"
    if argv and argv[0] == "--utf-16":
        return "utf-16"
    return "ansi"


class InputLog:
    """Lines of typed text; the oldest drops off when the screen is full."""

    def __init__(self, wide: bool = False, encoding: str = "latin-1", max_lines: int = HEIGHT // FONT_HEIGHT) -> None:
        self.wide = wide
        self.encoding = encoding
        self._lines: deque[str] = deque(maxlen=max_lines)

    def add(self, codes: Sequence[int]) -> str | None:
        """Add one frame's characters as a line; return it, or None if empty."""
        if not codes:
            return None
        if self.wide:
            text = "".join(chr(c) for c in codes)
        else:
            text = bytes(c & 0xFF for c in codes).decode(self.encoding, errors="replace")
        self._lines.append(text)
        return text

    def lines(self) -> list[str]:
        """Lines on screen, oldest first."""
        return list(self._lines)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Keyboard input demo.")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--utf-8", dest="utf8", action="store_true")
    group.add_argument("--utf-16", dest="utf16", action="store_true")
    args = parser.parse_args(argv)
    mode = "utf-8" if args.utf8 else "utf-16" if args.utf16 else "ansi"

    import pygame

    log = InputLog(wide=mode == "utf-16", encoding="utf-8" if mode == "utf-8" else "latin-1")
    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption(f"input demo - {mode.upper()}")
    font = pygame.font.SysFont(None, FONT_HEIGHT)
    clock = pygame.time.Clock()
    running = True
    while running:
        codes: list[int] = []
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.TEXTINPUT:
                if log.wide:
                    codes.extend(ord(ch) for ch in event.text)
                else:
                    codes.extend(event.text.encode(log.encoding, errors="replace"))
        if codes:
            print(format_codes(codes))
            log.add(codes)
        screen.fill((0, 0, 0))
        for i, line in enumerate(log.lines()):
            screen.blit(font.render(line, True, (255, 255, 255)), (5, i * FONT_HEIGHT))
        pygame.display.flip()
        clock.tick(60)
    pygame.quit()
    return 0