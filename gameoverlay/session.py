"""Running the translation overlay: state changes, one OCR-and-translate cycle, text layout."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from gameoverlay import utils
from gameoverlay.areas import AreaData
from gameoverlay.ocr import OcrEngine, OcrLanguage
from gameoverlay.profiles import load_profiles
from gameoverlay.screen import ScreenData, WindowSource
from gameoverlay.state import State
from gameoverlay.translator import BrowserTab, Translator, all_languages
from gameoverlay.workspace import Workspace

OUTLINE_OFFSET = 1.5
STATUS_IDLE = "Idle"
STATUS_RUNNING = "Running"


class SessionError(Exception):
    """Raised when the overlay cannot start or a translation cycle fails."""


@dataclass(frozen=True)
class TextPlacement:
    """A piece of text to draw at a baseline position with a given font size."""

    x: float
    y: float
    text: str
    font_size: float

    @property
    def outline_positions(self) -> list[tuple[float, float]]:
        """Positions where the dark outline copies of the text are drawn."""
        return [
            (self.x + dx, self.y + dy)
            for dx in (-OUTLINE_OFFSET, OUTLINE_OFFSET)
            for dy in (-OUTLINE_OFFSET, OUTLINE_OFFSET)
        ]


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def layout_text(area: AreaData, vertical: bool) -> list[TextPlacement]:
    """Place the text of ``area`` inside its rectangle, one line after another.

    Horizontal text puts each line below the previous one; vertical text puts
    each character below the previous one and each line to the right.
    Blank text yields no placements.
    """
    if not area.text.strip():
        return []
    lines = _lines(area.text)
    if vertical:
        font_size = utils.calc_font_size(lines, area.height, area.width)
        placements = []
        x = float(area.x)
        for line in lines:
            y = float(area.y)
            for char in line:
                y += font_size
                placements.append(TextPlacement(x, y, char, font_size))
            x += font_size
        return placements

    font_size = utils.calc_font_size(lines, area.width, area.height)
    placements = []
    y = float(area.y)
    for line in lines:
        y += font_size
        placements.append(TextPlacement(float(area.x), y, line, font_size))
    return placements


@dataclass
class Session:
    """The overlay's state machine and its translation cycle."""

    workspace: Workspace
    engine: OcrEngine
    source: WindowSource
    tab: BrowserTab
    screen: ScreenData | None = None
    ocr: OcrLanguage | None = None
    translator: Translator | None = None
    state: State = State.STOPPED
    running: bool = False
    status: str = STATUS_IDLE
    overlay_open: bool = False
    overlay_intangible: bool = False
    placements: list[TextPlacement] = field(default_factory=list)
    rectangles: list[AreaData] = field(default_factory=list)

    def _open_overlay(self, intangible: bool) -> None:
        self.overlay_open = True
        self.overlay_intangible = intangible

    def _close_overlay(self) -> None:
        self.overlay_open = False
        self.overlay_intangible = False

    def _inputs(self) -> tuple[OcrLanguage, ScreenData, Translator, list[AreaData], bool]:
        if self.ocr is None:
            raise LookupError("No OCR language selected")
        if self.screen is None:
            raise LookupError("No screen selected")
        if self.translator is None:
            raise LookupError("No translation language selected")
        profile = self.workspace.selected_profile()
        return self.ocr, self.screen, self.translator, list(profile.areas), not profile.use_areas

    def on_action(self) -> State:
        """Start when stopped or paused, stop when started; return the new state."""
        if self.state is State.STARTED:
            return self.stop()
        return self.start()

    def start(self) -> State:
        """Open the click-through overlay and enter the started state."""
        if self.running:
            raise SessionError(
                "Still Running: please wait until the previous translation is finished."
            )
        self._open_overlay(intangible=True)
        try:
            self._inputs()
        except LookupError as err:
            self.state = State.STOPPED
            raise SessionError(str(err)) from err
        self.state = State.STARTED
        return self.state

    def stop(self) -> State:
        """Close the overlay and enter the stopped state."""
        self._close_overlay()
        self.state = State.STOPPED
        return self.state

    def configure(self) -> State:
        """Toggle editing of translation areas on the overlay."""
        if self.state is State.PAUSED:
            return self.stop()
        self._open_overlay(intangible=False)
        try:
            areas = self.workspace.selected_profile().areas
        except LookupError:
            return self.state
        self.rectangles = list(areas)
        self.state = State.PAUSED
        return self.state

    def run_once(self) -> list[TextPlacement]:
        """Read the selected window, translate it and lay out the result."""
        self.running = True
        self.status = STATUS_RUNNING
        try:
            ocr, screen, translator, areas, is_areas = self._inputs()
            if is_areas:
                texts = ocr.ocr_areas(self.engine, areas, screen, self.source)
            else:
                texts = ocr.ocr_screen(self.engine, screen, self.source)
            provider = self.workspace.settings.effective_provider()
            translated = translator.translate_from_ocr(self.tab, ocr, provider, texts)
        except Exception as err:
            self.running = False
            self.status = STATUS_IDLE
            self.stop()
            raise SessionError(str(err)) from err
        self.running = False
        self.status = STATUS_IDLE
        self.placements = [
            placement
            for area in translated
            for placement in layout_text(area, ocr.is_vertical)
        ]
        return self.placements


def main(argv: Sequence[str] | None = None) -> int:
    """List translation languages, describe OCR languages, or list saved profiles."""
    parser = argparse.ArgumentParser(prog="gameoverlay")
    commands = parser.add_subparsers(dest="command")
    commands.add_parser("languages", help="list translation languages")
    ocr_parser = commands.add_parser("ocr-language", help="describe an OCR language code")
    ocr_parser.add_argument("code")
    profiles_parser = commands.add_parser("profiles", help="list saved profiles")
    profiles_parser.add_argument("--data", type=Path, default=None)
    args = parser.parse_args(argv)

    if args.command == "languages":
        for language in all_languages():
            print(f"{language.code}\t{language.language}")
    elif args.command == "ocr-language":
        ocr = OcrLanguage.from_code(args.code)
        print(ocr.language)
        print(f"translates from: {ocr.to_translator().code}")
    elif args.command == "profiles":
        path = args.data if args.data is not None else utils.data_path()
        for profile in load_profiles(path):
            print(f"{profile.title}\t{profile.app}\t{len(profile.areas)} areas")
    else:
        parser.print_help()
    return 0