"""Capture game text, translate it and lay out the translation over the game window."""

__version__ = "0.9.3"