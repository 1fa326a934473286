"""Windows that can be captured, and capturing them into image files."""

from __future__ import annotations

import uuid
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from PIL import Image

from gameoverlay import utils
from gameoverlay.areas import AreaData

TITLE_LIMIT = 70
TITLE_KEEP = 67


@dataclass(frozen=True)
class WindowInfo:
    """A top-level window and the monitor it is shown on."""

    id: int
    app_name: str
    title: str
    x: int
    y: int
    width: int
    height: int
    monitor_width: int
    monitor_height: int


class WindowSource(Protocol):
    """Lists the open windows and captures their contents."""

    def windows(self) -> Sequence[WindowInfo]:
        """Return every open window."""

    def capture_image(self, window: WindowInfo) -> Image.Image:
        """Return an image of the contents of ``window``."""


def shorten_title(title: str) -> str:
    """Shorten a long window title for display, ending it with an ellipsis."""
    encoded = title.encode("utf-8")
    if len(encoded) < TITLE_LIMIT:
        return title
    at_boundary = len(encoded) == TITLE_LIMIT or (encoded[TITLE_LIMIT] & 0xC0) != 0x80
    if not at_boundary:
        return title
    return f"{utils.split_utf8(title, 0, TITLE_KEEP)}..."


def _new_image_path() -> Path:
    return Path(utils.temp_path()) / f"{uuid.uuid4()}.png"


@dataclass(frozen=True)
class ScreenData:
    """The window selected for translation."""

    id: int = 0
    app_name: str = ""
    title: str = ""

    def _find_window(self, source: WindowSource) -> WindowInfo:
        for window in source.windows():
            if window.id == self.id:
                return window
        raise LookupError("Window not found")

    def capture_screen(self, source: WindowSource) -> Image.Image:
        """Return a monitor-sized RGBA image with the window drawn at its position."""
        window = self._find_window(source)
        canvas = Image.new("RGBA", (window.monitor_width, window.monitor_height), (0, 0, 0, 0))
        captured = source.capture_image(window).convert("RGBA")
        x = max(0, window.x)
        y = max(0, window.y)
        width = min(window.width, window.monitor_width)
        height = min(window.height, window.monitor_height)
        if width > captured.width or height > captured.height:
            raise ValueError("captured image is smaller than the window")
        if x + width > canvas.width or y + height > canvas.height:
            raise ValueError("window does not fit on its monitor")
        canvas.paste(captured.crop((0, 0, width, height)), (x, y))
        return canvas

    def capture(self, source: WindowSource) -> str:
        """Capture the window into a temporary PNG file and return its path."""
        image = self.capture_screen(source)
        path = _new_image_path()
        image.save(path)
        return str(path)

    def capture_areas(self, source: WindowSource, areas: Iterable[AreaData]) -> list[str]:
        """Capture each area into its own temporary PNG file, in order."""
        image = self.capture_screen(source)
        paths = []
        for area in areas:
            if (
                area.x < 0
                or area.y < 0
                or area.width < 0
                or area.height < 0
                or area.x + area.width > image.width
                or area.y + area.height > image.height
            ):
                raise ValueError(f"area outside the captured image: {area}")
            crop = image.crop((area.x, area.y, area.x + area.width, area.y + area.height))
            path = _new_image_path()
            crop.save(path)
            paths.append(str(path))
        return paths