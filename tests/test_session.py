from pathlib import Path

import pytest
from PIL import Image

from gameoverlay import utils
from gameoverlay.areas import AreaData
from gameoverlay.ocr import OcrLanguage, OcrWord
from gameoverlay.profiles import ProfileData, save_profiles
from gameoverlay.screen import ScreenData, WindowInfo
from gameoverlay.session import Session, SessionError, TextPlacement, layout_text, main
from gameoverlay.settings import Settings
from gameoverlay.state import State
from gameoverlay.translator import Translator, translator_language
from gameoverlay.workspace import Workspace

WINDOW = WindowInfo(
    id=1,
    app_name="game",
    title="Game",
    x=0,
    y=0,
    width=100,
    height=100,
    monitor_width=100,
    monitor_height=100,
)


class FakeSource:
    def __init__(self, windows=(WINDOW,)):
        self._windows = list(windows)

    def windows(self):
        return self._windows

    def capture_image(self, window):
        return Image.new("RGBA", (window.width, window.height), (255, 255, 255, 255))


class FakeEngine:
    def __init__(self):
        self.paths = []

    def image_to_string(self, path, lang):
        self.paths.append(path)
        return "  hello  "

    def image_to_data(self, path, lang):
        self.paths.append(path)
        return [
            OcrWord(5, 6, 10, 8, 90.0, "hello"),
            OcrWord(20, 6, 10, 9, 90.0, "world"),
            OcrWord(0, 0, 0, 0, -1.0, ""),
        ]


class FakeTab:
    def __init__(self, result="-> hola\n"):
        self.result = result
        self.urls = []
        self.selectors = []

    def navigate_to(self, url):
        self.urls.append(url)

    def element_text(self, selector):
        self.selectors.append(selector)
        return self.result

    def elements_text(self, selector):
        self.selectors.append(selector)
        return [self.result]


def make_session(tmp_path, use_areas=False, provider="", selections=True, source=None, tab=None):
    settings = Settings(tra_provider=provider, path=tmp_path / "settings.json")
    profile = ProfileData(
        title="Game",
        app="game",
        language="eng",
        translation="ja",
        use_areas=use_areas,
        areas=[AreaData(x=10, y=10, width=40, height=20)],
    )
    workspace = Workspace(
        data_file=tmp_path / "data.json", settings=settings, profiles=[profile], selected=0
    )
    session = Session(
        workspace=workspace,
        engine=FakeEngine(),
        source=source or FakeSource(),
        tab=tab or FakeTab(),
    )
    if selections:
        session.screen = ScreenData(id=1, app_name="game", title="Game")
        session.ocr = OcrLanguage.from_code("eng")
        session.translator = Translator(translator_language("ja"))
    return session


def test_layout_horizontal_lines_step_by_font_size():
    area = AreaData(x=3, y=4, width=40, height=20, text="ab\ncd")
    placements = layout_text(area, vertical=False)
    size = utils.calc_font_size(["ab", "cd"], 40, 20)
    assert [p.text for p in placements] == ["ab", "cd"]
    assert all(p.x == 3 and p.font_size == size for p in placements)
    assert placements[0].y == pytest.approx(4 + size)
    assert placements[1].y - placements[0].y == pytest.approx(size)


def test_layout_vertical_places_characters_downwards():
    area = AreaData(x=3, y=4, width=10, height=50, text="ab\nc")
    placements = layout_text(area, vertical=True)
    size = utils.calc_font_size(["ab", "c"], 50, 10)
    assert [p.text for p in placements] == ["a", "b", "c"]
    assert placements[0].x == placements[1].x == 3
    assert placements[2].x == pytest.approx(3 + size)
    assert placements[1].y - placements[0].y == pytest.approx(size)
    assert placements[2].y == placements[0].y


def test_layout_blank_text_is_empty():
    assert layout_text(AreaData(x=0, y=0, width=10, height=10, text="  \n "), False) == []


def test_outline_positions_surround_text():
    placement = TextPlacement(10.0, 20.0, "x", 12.0)
    positions = placement.outline_positions
    assert len(positions) == 4
    assert all(abs(px - 10.0) == 1.5 and abs(py - 20.0) == 1.5 for px, py in positions)


def test_on_action_toggles_between_started_and_stopped(tmp_path):
    session = make_session(tmp_path)
    assert session.on_action() is State.STARTED
    assert session.overlay_open and session.overlay_intangible
    assert session.on_action() is State.STOPPED
    assert not session.overlay_open


def test_start_while_running_keeps_state(tmp_path):
    session = make_session(tmp_path)
    session.running = True
    with pytest.raises(SessionError):
        session.start()
    assert session.state is State.STOPPED


def test_start_without_selection_fails(tmp_path):
    session = make_session(tmp_path, selections=False)
    with pytest.raises(SessionError, match="No OCR language selected"):
        session.on_action()
    assert session.state is State.STOPPED


def test_configure_toggles_paused(tmp_path):
    session = make_session(tmp_path)
    assert session.configure() is State.PAUSED
    assert session.rectangles == session.workspace.selected_profile().areas
    assert session.overlay_open and not session.overlay_intangible
    assert session.configure() is State.STOPPED
    assert not session.overlay_open


def test_run_once_over_areas_uses_google(tmp_path):
    session = make_session(tmp_path)
    session.start()
    placements = session.run_once()
    assert [p.text for p in placements] == ["hola"]
    assert placements[0].x == 10
    url = session.tab.urls[0]
    assert "sl=en" in url and "tl=ja" in url
    assert session.running is False
    assert session.status == "Idle"
    assert all(not Path(path).exists() for path in session.engine.paths)


def test_run_once_full_screen_groups_lines(tmp_path):
    session = make_session(tmp_path, use_areas=True, tab=FakeTab("-> hola mundo\n"))
    placements = session.run_once()
    assert [p.text for p in placements] == ["hola mundo"]
    assert placements[0].x == 5
    assert session.placements == placements


def test_run_once_deepl_provider(tmp_path):
    session = make_session(tmp_path, provider="deepl")
    session.run_once()
    assert session.tab.urls[0].startswith("https://deepl.com/en/translator#en/ja/")
    assert session.tab.selectors == [
        "[role='textbox'][aria-labelledby='translation-target-heading']"
    ]


def test_run_once_failure_stops(tmp_path):
    session = make_session(tmp_path, source=FakeSource(windows=()))
    session.start()
    with pytest.raises(SessionError, match="Window not found"):
        session.run_once()
    assert session.state is State.STOPPED
    assert session.running is False


def test_main_lists_languages(capsys):
    assert main(["languages"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "auto\tDetect language"
    assert "en\tEnglish" in out


def test_main_describes_ocr_language(capsys):
    main(["ocr-language", "jpn_vert"])
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Japanese Vertical"
    assert out[1] == "translates from: auto"


def test_main_lists_profiles(tmp_path, capsys):
    data = tmp_path / "data.json"
    save_profiles([ProfileData(title="First", app="game", areas=[AreaData()])], data)
    main(["profiles", "--data", str(data)])
    assert capsys.readouterr().out.strip() == "First\tgame\t1 areas"