"""Small helpers: ranges, text slicing, font sizing and file locations."""

from __future__ import annotations

import math
import os
import tempfile
from collections.abc import Iterable
from pathlib import Path

import platformdirs

APP_ID = "gameoverlay"


def value_in_range(value: int, minimum: int, maximum: int) -> bool:
    """Return True if ``value`` lies in the closed range [minimum, maximum]."""
    return minimum <= value <= maximum


def split_utf8(text: str, start: int, end: int) -> str:
    """Return characters ``start`` to ``end`` of ``text``, stripped of whitespace."""
    return text[:end][start:].strip()


def temp_path() -> str:
    """Return the application's temporary directory, creating it if needed."""
    path = Path(tempfile.gettempdir()) / APP_ID
    path.mkdir(parents=True, exist_ok=True)
    return str(path)


def remove_file(path: str | os.PathLike[str]) -> None:
    """Delete the file at ``path``."""
    os.remove(path)


def _text_lines(text: str) -> list[str]:
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def calc_font_size(lines: Iterable[str] | str, width: float, height: float) -> float:
    """Estimate a font size that fits ``lines`` into a ``width`` x ``height`` box.

    The widest line is taken to be the lexicographically greatest one.
    """
    rows = _text_lines(lines) if isinstance(lines, str) else list(lines)
    if not rows:
        raise ValueError("no lines to measure")
    char_count = len(max(rows)) + 2
    cell_height = height / len(rows)
    cell_width = width / char_count
    return math.sqrt(cell_width * cell_height)


def _user_data_dir() -> Path:
    path = Path(platformdirs.user_data_dir()) / APP_ID
    path.mkdir(parents=True, exist_ok=True)
    return path


def data_path() -> Path:
    """Return the path of the saved profiles file."""
    return _user_data_dir() / "data.json"


def settings_path() -> Path:
    """Return the path of the settings file."""
    return _user_data_dir() / "settings.json"