"""Timed actions, easing curves, signals, actor state and 2-D transforms for games."""

__version__ = "0.1.0"