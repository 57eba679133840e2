"""Emoji versus humans: a lane-defence game with a pygame window and text save files."""

__version__ = "0.1.0"