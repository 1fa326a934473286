"""Persisted user preferences."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from gameoverlay import utils

logger = logging.getLogger(__name__)

DEFAULT_PROVIDER = "google"

_PROPERTIES = {
    "tra-lang": "tra_lang",
    "tra-provider": "tra_provider",
    "ocr-lang": "ocr_lang",
}


@dataclass
class Settings:
    """OCR language, translation language and translation provider."""

    ocr_lang: str = ""
    tra_lang: str = ""
    tra_provider: str = ""
    path: Path | None = field(default=None, compare=False, repr=False)

    def effective_provider(self) -> str:
        """Return the configured provider, falling back to Google."""
        return self.tra_provider or DEFAULT_PROVIDER

    def set(self, prop: str, value: str) -> None:
        """Update a property by its hyphenated name and persist; unknown names are ignored."""
        attribute = _PROPERTIES.get(prop)
        if attribute is not None:
            setattr(self, attribute, value)
        try:
            self.update_json()
        except OSError as err:
            logger.error("Failed to update settings: %r", err)

    def update_json(self) -> None:
        """Write the settings to their file."""
        path = self.path
        if path is None:
            try:
                path = utils.settings_path()
            except OSError:
                return
        payload = {
            "ocr_lang": self.ocr_lang,
            "tra_lang": self.tra_lang,
            "tra_provider": self.tra_provider,
        }
        with open(path, "w", encoding="utf-8") as handle:
            json.dump(payload, handle, separators=(",", ":"))

    @classmethod
    def load(cls, path: Path | str | None = None) -> Settings:
        """Read settings from ``path``; a missing file yields defaults."""
        target = Path(path) if path is not None else utils.settings_path()
        try:
            handle = open(target, encoding="utf-8")
        except OSError:
            return cls(path=target)
        with handle:
            data = json.load(handle)
        try:
            return cls(
                ocr_lang=str(data["ocr_lang"]),
                tra_lang=str(data["tra_lang"]),
                tra_provider=str(data["tra_provider"]),
                path=target,
            )
        except (KeyError, TypeError) as err:
            raise ValueError(f"invalid settings file: {err}") from err