"""OCR languages and reading text from captured windows."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol

from gameoverlay import utils
from gameoverlay.areas import AreaData
from gameoverlay.screen import ScreenData, WindowSource
from gameoverlay.translator import TranslatorLanguage, translator_language

INVALID_LANGUAGE = "Invalid"

_LANGUAGE_NAMES = {
    "afr": "Afrikaans",
    "amh": "Amharic",
    "ara": "Arabic",
    "asm": "Assamese",
    "aze": "Azerbaijani",
    "aze_cyrl": "Azerbaijani - Cyrilic",
    "bel": "Belarusian",
    "ben": "Bengali",
    "bod": "Tibetan",
    "bos": "Bosnian",
    "bre": "Breton",
    "bul": "Bulgarian",
    "cat": "Catalan; Valencian",
    "ceb": "Cebuano",
    "ces": "Czech",
    "chi_sim": "Chinese - Simplified",
    "chi_tra": "Chinese - Traditional",
    "chr": "Cherokee",
    "cos": "Corsican",
    "cym": "Welsh",
    "dan": "Danish",
    "dan_frak": "Danish - Fraktur (contrib)",
    "deu": "German",
    "deu_frak": "German - Fraktur (contrib)",
    "dzo": "Dzongkha",
    "ell": "Greek, Modern (1453-)",
    "eng": "English",
    "enm": "English, Middle (1100-1500)",
    "epo": "Esperanto",
    "equ": "Math / equation detection module",
    "est": "Estonian",
    "eus": "Basque",
    "fao": "Faroese",
    "fas": "Persian",
    "fil": "Filipino (old - Tagalog)",
    "fin": "Finnish",
    "fra": "French",
    "frk": "German - Fraktur",
    "frm": "French, Middle (ca.1400-1600)",
    "fry": "Western Frisian",
    "gla": "Scottish Gaelic",
    "gle": "Irish",
    "glg": "Galician",
    "grc": "Greek, Ancient (to 1453) (contrib)",
    "guj": "Gujarati",
    "hat": "Haitian; Haitian Creole",
    "heb": "Hebrew",
    "hin": "Hindi",
    "hrv": "Croatian",
    "hun": "Hungarian",
    "hye": "Armenian",
    "iku": "Inuktitut",
    "ind": "Indonesian",
    "isl": "Icelandic",
    "ita": "Italian",
    "ita_old": "Italian - Old",
    "jav": "Javanese",
    "jpn": "Japanese",
    "jpn_vert": "Japanese Vertical",
    "kan": "Kannada",
    "kat": "Georgian",
    "kat_old": "Georgian - Old",
    "kaz": "Kazakh",
    "khm": "Central Khmer",
    "kir": "Kirghiz; Kyrgyz",
    "kmr": "Kurmanji (Kurdish - Latin Script)",
    "kor": "Korean",
    "kor_vert": "Korean (vertical)",
    "kur": "Kurdish (Arabic Script)",
    "lao": "Lao",
    "lat": "Latin",
    "lav": "Latvian",
    "lit": "Lithuanian",
    "ltz": "Luxembourgish",
    "mal": "Malayalam",
    "mar": "Marathi",
    "mkd": "Macedonian",
    "mlt": "Maltese",
    "mon": "Mongolian",
    "mri": "Maori",
    "msa": "Malay",
    "mya": "Burmese",
    "nep": "Nepali",
    "nld": "Dutch; Flemish",
    "nor": "Norwegian",
    "oci": "Occitan (post 1500)",
    "ori": "Oriya",
    "osd": "Orientation and script detection module",
    "pan": "Panjabi; Punjabi",
    "pol": "Polish",
    "por": "Portuguese",
    "pus": "Pushto; Pashto",
    "que": "Quechua",
    "ron": "Romanian; Moldavian; Moldovan",
    "rus": "Russian",
    "san": "Sanskrit",
    "sin": "Sinhala; Sinhalese",
    "slk": "Slovak",
    "slk_frak": "Slovak - Fraktur (contrib)",
    "slv": "Slovenian",
    "snd": "Sindhi",
    "spa": "Spanish; Castilian",
    "spa_old": "Spanish; Castilian - Old",
    "sqi": "Albanian",
    "srp": "Serbian",
    "srp_latn": "Serbian - Latin",
    "sun": "Sundanese",
    "swa": "Swahili",
    "swe": "Swedish",
    "syr": "Syriac",
    "tam": "Tamil",
    "tat": "Tatar",
    "tel": "Telugu",
    "tgk": "Tajik",
    "tgl": "Tagalog (new - Filipino)",
    "tha": "Thai",
    "tir": "Tigrinya",
    "ton": "Tonga",
    "tur": "Turkish",
    "uig": "Uighur; Uyghur",
    "ukr": "Ukrainian",
    "urd": "Urdu",
    "uzb": "Uzbek",
    "uzb_cyrl": "Uzbek - Cyrilic",
    "vie": "Vietnamese",
    "yid": "Yiddish",
    "yor": "Yoruba",
}

_TRANSLATOR_CODES = {
    "eng": "en",
    "nld": "nl",
    "dan": "da",
    "ces": "cs",
    "chi_sim": "zh",
    "bul": "bg",
    "est": "et",
    "fin": "fi",
    "fra": "fr",
    "deu": "de",
    "ell": "el",
    "hun": "hu",
    "ind": "id",
    "ita": "it",
    "jpn": "ja",
    "kor": "ko",
    "lav": "lv",
    "lit": "lt",
    "nor": "nb",
    "pol": "pl",
    "por": "pt",
    "ron": "ro",
    "rus": "ru",
    "slk": "sk",
    "slv": "sl",
    "spa": "es",
    "swe": "sv",
    "tur": "tr",
    "ukr": "uk",
}


@dataclass(frozen=True)
class OcrWord:
    """One word reported by the OCR engine with its box and confidence."""

    left: int
    top: int
    width: int
    height: int
    conf: float
    text: str


class OcrEngine(Protocol):
    """Reads text from image files."""

    def image_to_string(self, path: str, lang: str) -> str:
        """Return all text found in the image at ``path``."""

    def image_to_data(self, path: str, lang: str) -> Sequence[OcrWord]:
        """Return the words found in the image at ``path``; separators have conf <= 0."""


def group_lines(words: Iterable[OcrWord]) -> list[AreaData]:
    """Join words into lines; a word with non-positive confidence ends a line.

    Words after the last separator are dropped.
    """
    lines: list[AreaData] = []
    line = AreaData()
    for word in words:
        if word.conf <= 0:
            if not line.text.strip():
                continue
            line.text = line.text.strip()
            lines.append(line)
            line = AreaData()
            continue
        if not line.text.strip():
            line.x = word.left
            line.y = word.top
        line.height = max(line.height, word.height)
        line.width += word.width
        line.text += f"{word.text} "
    return lines


@dataclass(frozen=True)
class OcrLanguage:
    """A language the OCR engine can read."""

    code: str
    language: str
    is_vertical: bool = False

    @classmethod
    def from_code(cls, code: str) -> OcrLanguage:
        """Describe the OCR language ``code``; unknown codes are named "Invalid"."""
        language = _LANGUAGE_NAMES.get(code, INVALID_LANGUAGE)
        return cls(code=code, language=language, is_vertical="Vertical" in language)

    def to_translator(self) -> TranslatorLanguage:
        """Return the matching translation language, or auto-detection."""
        return translator_language(_TRANSLATOR_CODES.get(self.code, "auto"))

    def ocr_areas(
        self,
        engine: OcrEngine,
        areas: Sequence[AreaData],
        screen: ScreenData,
        source: WindowSource,
    ) -> list[AreaData]:
        """Read the text inside each area of the window."""
        results = []
        for area, path in zip(areas, screen.capture_areas(source, areas)):
            text = engine.image_to_string(path, self.code).strip()
            utils.remove_file(path)
            results.append(dataclasses.replace(area, text=text))
        return results

    def ocr_screen(
        self, engine: OcrEngine, screen: ScreenData, source: WindowSource
    ) -> list[AreaData]:
        """Read every line of text in the window together with its position."""
        path = screen.capture(source)
        words = engine.image_to_data(path, self.code)
        utils.remove_file(path)
        return group_lines(words)

    def ocr_image(self, engine: OcrEngine, path: str) -> str:
        """Return the text found in the image file at ``path``."""
        return engine.image_to_string(path, self.code)