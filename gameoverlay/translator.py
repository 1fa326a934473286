"""Translation languages and web-page based translation providers."""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Protocol
from urllib.parse import quote

from gameoverlay.areas import AreaData

GOOGLE_SELECTOR = "[jsname='W297wb']"
DEEPL_SELECTOR = "[role='textbox'][aria-labelledby='translation-target-heading']"
SEGMENT_MARKER = "-> "


@dataclass(frozen=True)
class TranslatorLanguage:
    """A language a translation provider can target."""

    code: str
    language: str


_LANGUAGES: tuple[TranslatorLanguage, ...] = tuple(
    TranslatorLanguage(code, language)
    for code, language in (
        ("auto", "Detect language"),
        ("bg", "Bulgarian"),
        ("zh", "Chinese"),
        ("cs", "Czech"),
        ("da", "Danish"),
        ("nl", "Dutch"),
        ("en", "English"),
        ("et", "Estonian"),
        ("fi", "Finnish"),
        ("fr", "French"),
        ("de", "German"),
        ("el", "Greek"),
        ("hu", "Hungarian"),
        ("id", "Indonesian"),
        ("it", "Italian"),
        ("ja", "Japanese"),
        ("ko", "Korean"),
        ("lv", "Latvian"),
        ("lt", "Lithuanian"),
        ("nb", "Norwegian"),
        ("pl", "Polish"),
        ("pt", "Portuguese"),
        ("ro", "Romanian"),
        ("ru", "Russian"),
        ("sk", "Slovak"),
        ("sl", "Slovenian"),
        ("es", "Spanish"),
        ("sv", "Swedish"),
        ("tr", "Turkish"),
        ("uk", "Ukrainian"),
    )
)


def all_languages() -> tuple[TranslatorLanguage, ...]:
    """Return every supported translation language, auto-detection first."""
    return _LANGUAGES


def translator_language(code: str) -> TranslatorLanguage:
    """Return the language with ``code``; raise KeyError if unknown."""
    for language in _LANGUAGES:
        if language.code == code:
            return language
    raise KeyError(f"unknown translation language: {code!r}")


def google_url(target: str, source: str, text: str) -> str:
    """Return the Google Translate page URL for already-encoded ``text``."""
    text = text.replace(" ", "%20")
    return f"https://translate.google.com.br/?sl={source}&tl={target}&text=${text}&op=translate"


def deepl_url(target: str, source: str, text: str) -> str:
    """Return the DeepL page URL for already-encoded ``text``."""
    text = text.replace(" ", "%20")
    return f"https://deepl.com/en/translator#{source}/{target}/{text}"


class BrowserTab(Protocol):
    """A browser tab able to load pages and read element text."""

    def navigate_to(self, url: str) -> None:
        """Load ``url`` and wait until navigation has finished."""

    def element_text(self, selector: str) -> str:
        """Wait for the first element matching ``selector`` and return its text."""

    def elements_text(self, selector: str) -> Sequence[str]:
        """Wait for elements matching ``selector`` and return their texts."""


@dataclass(frozen=True)
class Translator:
    """Translates text into ``target`` through a browser tab."""

    target: TranslatorLanguage

    @property
    def code(self) -> str:
        return self.target.code

    def translate(self, tab: BrowserTab, source: str, provider: str, text: str) -> str:
        """Translate ``text`` from ``source``; any provider but "google" means DeepL."""
        encoded = quote(text, safe="")
        if provider == "google":
            return self.translate_from_google(tab, self.code, source, encoded)
        return self.translate_from_deepl(tab, self.code, source, encoded)

    def translate_from_ocr(
        self, tab: BrowserTab, ocr: Any, provider: str, texts: Sequence[AreaData]
    ) -> list[AreaData]:
        """Translate the text of every area in one request, keeping geometry."""
        areas = list(texts)
        if not areas:
            return areas
        joined = "".join(f"{SEGMENT_MARKER}{area.text}\n" for area in areas)
        translated = self.translate(tab, ocr.to_translator().code, provider, joined)
        segments = translated.split(SEGMENT_MARKER)[1:]
        if len(segments) > len(areas):
            raise ValueError("translation returned more segments than were sent")
        for index, segment in enumerate(segments):
            areas[index] = dataclasses.replace(areas[index], text=segment)
        return areas

    def translate_from_google(self, tab: BrowserTab, target: str, source: str, text: str) -> str:
        """Translate encoded ``text`` using the Google Translate page."""
        tab.navigate_to(google_url(target, source, text))
        return "".join(tab.elements_text(GOOGLE_SELECTOR))

    def translate_from_deepl(self, tab: BrowserTab, target: str, source: str, text: str) -> str:
        """Translate encoded ``text`` using the DeepL page."""
        tab.navigate_to(deepl_url(target, source, text))
        return tab.element_text(DEEPL_SELECTOR)