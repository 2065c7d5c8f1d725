"""Colour helpers working on packed 0xRRGGBB integers."""

from __future__ import annotations

import colorsys

__all__ = ["hsv_to_rgb", "hsl_to_rgb", "rgb", "channels", "blend", "scale"]


def _to_byte(value: float) -> int:
    return min(255, max(0, int(value * 255 + 0.5)))


def rgb(r: int, g: int, b: int) -> int:
    """Pack three 0..255 channels into one colour value."""
    for name, value in (("red", r), ("green", g), ("blue", b)):
        if not 0 <= value <= 255:
            raise ValueError(f"{name} channel out of range: {value}")
    return (int(r) << 16) | (int(g) << 8) | int(b)


def channels(color: int) -> tuple[int, int, int]:
    """Split a packed colour into its (red, green, blue) channels."""
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def hsv_to_rgb(h: float, s: float, v: float) -> int:
    """Convert hue in degrees, saturation and value to a packed colour."""
    r, g, b = colorsys.hsv_to_rgb((h % 360) / 360.0, s, v)
    return rgb(_to_byte(r), _to_byte(g), _to_byte(b))


def hsl_to_rgb(h: float, s: float, l: float) -> int:
    """Convert hue in degrees, saturation and lightness to a packed colour."""
    r, g, b = colorsys.hls_to_rgb((h % 360) / 360.0, l, s)
    return rgb(_to_byte(r), _to_byte(g), _to_byte(b))


def blend(prev: int, nxt: int, t: float) -> int:
    """Interpolate between two colours; t is clamped to [0, 1]."""
    if t <= 0:
        return prev
    if t >= 1:
        return nxt
    mixed = (
        min(255, int(a * (1 - t) + b * t))
        for a, b in zip(channels(prev), channels(nxt))
    )
    return rgb(*mixed)


def scale(color: int, factor: float) -> int:
    """Multiply every channel by factor, clamping to 0..255."""
    return rgb(*(min(255, max(0, int(c * factor))) for c in channels(color)))