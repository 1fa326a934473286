import json

import pytest

from gameoverlay.areas import AreaData
from gameoverlay.profiles import ProfileData, load_profiles, save_profiles
from gameoverlay.settings import Settings
from gameoverlay.workspace import NEW_PROFILE_TITLE, Workspace, apply_drag


@pytest.fixture
def settings(tmp_path):
    return Settings(ocr_lang="jpn", tra_lang="en", path=tmp_path / "settings.json")


@pytest.fixture
def workspace(tmp_path, settings):
    return Workspace.load(tmp_path / "data.json", settings)


def test_apply_drag_adds_new_area():
    result = apply_drag([], 10, 20, 30, 40)
    assert result == [AreaData(x=10, y=20, width=30, height=40)]


def test_apply_drag_normalizes_negative_size():
    result = apply_drag([], 50, 50, -20, -10)
    assert len(result) == 1
    area = result[0]
    assert (area.width, area.height) == (20, 10)
    assert area.x + area.width == 50
    assert area.y + area.height == 50


def test_apply_drag_click_removes_area_under_point():
    areas = [AreaData(0, 0, 10, 10), AreaData(100, 100, 10, 10)]
    result = apply_drag(areas, 5, 5, 0, 0)
    assert result == [AreaData(100, 100, 10, 10)]


def test_apply_drag_click_outside_keeps_areas():
    areas = [AreaData(0, 0, 10, 10)]
    assert apply_drag(areas, 50, 50, 0, 0) == areas


def test_apply_drag_straight_line_changes_nothing():
    areas = [AreaData(0, 0, 10, 10)]
    assert apply_drag(areas, 50, 50, 0, 15) == areas
    assert apply_drag(areas, 50, 50, 15, 0) == areas


def test_apply_drag_moves_area_started_inside():
    areas = [AreaData(0, 0, 10, 10)]
    result = apply_drag(areas, 5, 5, 20, 30)
    assert len(result) == 1
    assert result[0].x == areas[0].x + 20
    assert result[0].y == areas[0].y + 30
    assert (result[0].width, result[0].height) == (10, 10)


def test_apply_drag_does_not_mutate_input():
    areas = [AreaData(0, 0, 10, 10)]
    apply_drag(areas, 5, 5, 20, 30)
    assert areas == [AreaData(0, 0, 10, 10)]


def test_apply_drag_rejects_overlapping_area():
    areas = [AreaData(0, 0, 50, 50)]
    assert apply_drag(areas, 60, 60, -30, -30) == areas


def test_load_missing_file_creates_untitled_profile(workspace, settings):
    assert len(workspace.profiles) == 1
    profile = workspace.selected_profile()
    assert profile.title == NEW_PROFILE_TITLE
    assert profile.language == settings.ocr_lang
    assert profile.translation == settings.tra_lang
    assert workspace.selected == 0


def test_save_and_load_round_trip(tmp_path, settings):
    data_file = tmp_path / "data.json"
    original = [
        ProfileData("Game", "game.exe", "eng", "pt", True, [AreaData(1, 2, 3, 4)]),
    ]
    save_profiles(original, data_file)
    workspace = Workspace.load(data_file, settings)
    assert workspace.profiles == original
    workspace.profiles[0].title = "Renamed"
    workspace.save()
    assert load_profiles(data_file)[0].title == "Renamed"
    assert json.loads(settings.path.read_text())["ocr_lang"] == settings.ocr_lang


def test_new_profile_not_duplicated(workspace):
    workspace.new_profile("app", False)
    assert len(workspace.profiles) == 1


def test_new_profile_without_screen_raises(workspace):
    workspace.profiles[0].title = "Named"
    with pytest.raises(LookupError):
        workspace.new_profile(None, False)


def test_new_profile_appends_after_named(workspace):
    workspace.profiles[0].title = "Named"
    workspace.new_profile("game.exe", True)
    assert len(workspace.profiles) == 2
    assert workspace.profiles[1].app == "game.exe"
    assert workspace.profiles[1].use_areas is True


def test_select_out_of_range_clears_selection(workspace):
    workspace.select(5)
    assert workspace.selected is None
    assert workspace.current_index == 0


def test_remove_current_profile_keeps_one(workspace):
    workspace.profiles[0].title = "Named"
    workspace.remove_current_profile("game.exe", False)
    assert [p.title for p in workspace.profiles] == [NEW_PROFILE_TITLE]
    assert workspace.selected == 0


def test_remove_current_profile_without_screen_raises(workspace):
    workspace.profiles[0].title = "Named"
    with pytest.raises(LookupError):
        workspace.remove_current_profile(None, False)
    assert workspace.profiles == []
    with pytest.raises(LookupError):
        workspace.selected_profile()


def test_remove_selects_first(workspace):
    workspace.profiles[0].title = "First"
    workspace.new_profile("game.exe", False)
    workspace.select(1)
    workspace.remove_current_profile("game.exe", False)
    assert [p.title for p in workspace.profiles] == ["First"]
    assert workspace.selected == 0


def test_drag_updates_selected_profile(workspace):
    result = workspace.drag(10, 20, 30, 40)
    assert workspace.selected_profile().areas == result
    assert result == [AreaData(10, 20, 30, 40)]
    assert workspace.drag(15, 25, 0, 0) == []
    assert workspace.selected_profile().areas == []