"""Animated graphics demos: fractals, physics toys, screensavers and small games."""

__version__ = "0.1.0"