"""Lifecycle state of the translation overlay."""

from __future__ import annotations

from enum import Enum


class State(Enum):
    """Whether the overlay is idle, translating, or being configured."""

    STOPPED = "stopped"
    STARTED = "started"
    PAUSED = "paused"