"""Profiles being edited, the selected profile and translation-area editing."""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from gameoverlay import utils
from gameoverlay.areas import AreaData
from gameoverlay.profiles import ProfileData, load_profiles, save_profiles
from gameoverlay.settings import Settings

NEW_PROFILE_TITLE = "[New Profile]"


def _contains(area: AreaData, x: int, y: int) -> bool:
    return utils.value_in_range(x, area.x, area.x + area.width) and utils.value_in_range(
        y, area.y, area.y + area.height
    )


def _overlaps(first: AreaData, second: AreaData) -> bool:
    x_overlap = utils.value_in_range(
        first.x, second.x, second.x + second.width
    ) or utils.value_in_range(second.x, first.x, first.x + first.width)
    y_overlap = utils.value_in_range(
        first.y, second.y, second.y + second.height
    ) or utils.value_in_range(second.y, first.y, first.y + first.height)
    return x_overlap and y_overlap


def apply_drag(
    areas: Sequence[AreaData], x: int, y: int, width: int, height: int
) -> list[AreaData]:
    """Return the areas after a drag from (x, y) by (width, height).

    A click without movement removes the areas under it, a drag starting
    inside an area moves that area, and any other drag adds a new area
    unless it overlaps an existing one. Straight-line drags change nothing.
    """
    result = [dataclasses.replace(area) for area in areas]
    can_add = True

    if width == 0 and height == 0:
        can_add = False
        result = [area for area in result if not _contains(area, x, y)]
    elif width == 0 or height == 0:
        can_add = False
    else:
        for area in result:
            if _contains(area, x, y):
                area.x += width
                area.y += height
                can_add = False

    if height < 0:
        height = -height
        y -= height
    if width < 0:
        width = -width
        x -= width
    new_rect = AreaData(x=x, y=y, width=width, height=height)

    if can_add and not any(_overlaps(new_rect, area) for area in result):
        result.append(new_rect)
    return result


@dataclass
class Workspace:
    """The list of profiles, which one is selected, and the user settings."""

    data_file: Path
    settings: Settings
    profiles: list[ProfileData] = field(default_factory=list)
    selected: int | None = None

    @classmethod
    def load(cls, data_file: Path | str, settings: Settings) -> Workspace:
        """Read saved profiles, ensure there is at least one, and select the first."""
        path = Path(data_file)
        workspace = cls(data_file=path, settings=settings, profiles=load_profiles(path))
        if not workspace.profiles:
            workspace.new_profile("", False)
        workspace.select(0)
        return workspace

    def save(self) -> None:
        """Write the profiles and the settings to their files."""
        save_profiles(self.profiles, self.data_file)
        self.settings.update_json()

    @property
    def current_index(self) -> int:
        """Index of the selected profile, or 0 when nothing is selected."""
        return 0 if self.selected is None else self.selected

    def selected_profile(self) -> ProfileData:
        """Return the selected profile; raise LookupError if there is none."""
        index = self.current_index
        if not 0 <= index < len(self.profiles):
            raise LookupError("no profile at the selected position")
        return self.profiles[index]

    def select(self, index: int) -> None:
        """Select the profile at ``index``; an invalid index clears the selection."""
        self.selected = index if 0 <= index < len(self.profiles) else None

    def new_profile(self, app: str | None, use_areas: bool) -> None:
        """Append an untitled profile unless the last one is still untitled.

        ``app`` is the selected window's application; None means no window
        is selected, which raises LookupError.
        """
        if self.profiles and self.profiles[-1].title == NEW_PROFILE_TITLE:
            return
        if app is None:
            raise LookupError("No screen selected")
        self.profiles.append(
            ProfileData(
                title=NEW_PROFILE_TITLE,
                app=app,
                language=self.settings.ocr_lang,
                translation=self.settings.tra_lang,
                use_areas=use_areas,
                areas=[],
            )
        )

    def remove_current_profile(self, app: str | None, use_areas: bool) -> None:
        """Remove the selected profile, keep at least one, and select the first."""
        index = self.current_index
        if 0 <= index < len(self.profiles):
            del self.profiles[index]
        error: LookupError | None = None
        if not self.profiles:
            try:
                self.new_profile(app, use_areas)
            except LookupError as err:
                error = err
        self.select(0)
        if error is not None:
            raise error

    def drag(self, x: int, y: int, width: int, height: int) -> list[AreaData]:
        """Apply a drag to the selected profile's areas and return them."""
        profile = self.selected_profile()
        profile.areas = apply_drag(profile.areas, x, y, width, height)
        return list(profile.areas)