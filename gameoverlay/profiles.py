"""Saved translation profiles."""

from __future__ import annotations

import json
import os
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from gameoverlay.areas import AreaData


@dataclass
class ProfileData:
    """A named set of window, languages and translation areas."""

    title: str = ""
    app: str = ""
    language: str = ""
    translation: str = ""
    use_areas: bool = False
    areas: list[AreaData] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the stored form of the profile."""
        return {
            "title": self.title,
            "app": self.app,
            "language": self.language,
            "translation": self.translation,
            "use_areas": self.use_areas,
            "areas": [area.to_dict() for area in self.areas],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ProfileData:
        """Build a profile from its stored form."""
        try:
            return cls(
                title=str(data["title"]),
                app=str(data["app"]),
                language=str(data["language"]),
                translation=str(data["translation"]),
                use_areas=bool(data["use_areas"]),
                areas=[AreaData.from_dict(area) for area in data["areas"]],
            )
        except (KeyError, TypeError) as err:
            raise ValueError(f"invalid profile: {err}") from err


def load_profiles(path: str | os.PathLike[str]) -> list[ProfileData]:
    """Read profiles from ``path``; a missing file yields no profiles."""
    try:
        handle = open(path, encoding="utf-8")
    except OSError:
        return []
    with handle:
        data = json.load(handle)
    if not isinstance(data, list):
        raise ValueError("profiles file must hold a list")
    return [ProfileData.from_dict(item) for item in data]


def save_profiles(profiles: Iterable[ProfileData], path: str | os.PathLike[str]) -> None:
    """Write ``profiles`` to ``path`` as JSON."""
    payload = [profile.to_dict() for profile in profiles]
    with open(path, "w", encoding="utf-8") as handle:
        json.dump(payload, handle, separators=(",", ":"))