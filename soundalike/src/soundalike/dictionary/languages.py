"""Languages published by ipa-dict and their Wiktionary editions."""

from __future__ import annotations

import logging
from urllib.parse import quote

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en_US"

LANGUAGES: dict[str, str] = {
    "ar": "Arabic",
    "de": "German",
    "en_UK": "English (UK)",
    "en_US": "English (US)",
    "eo": "Esperanto",
    "es_ES": "Spanish (Spain)",
    "es_MX": "Spanish (Mexico)",
    "fa": "Persian",
    "fi": "Finnish",
    "fr_FR": "French (France)",
    "fr_QC": "French (Quebec)",
    "is": "Icelandic",
    "ja": "Japanese",
    "jam": "Jamaican Creole",
    "km": "Khmer",
    "ko": "Korean",
    "ma": "Malay",
    "nb": "Norwegian Bokmål",
    "nl": "Dutch",
    "or": "Odia",
    "pl": "Polish",
    "pt_BR": "Portuguese (Brazil)",
    "ro": "Romanian",
    "sv": "Swedish",
    "sw": "Swahili",
    "tts": "Isan",
    "vi_C": "Vietnamese (Central)",
    "vi_N": "Vietnamese (Northern)",
    "vi_S": "Vietnamese (Southern)",
    "yue": "Cantonese",
    "zh_hans": "Mandarin (Simplified)",
    "zh_hant": "Mandarin (Traditional)",
}

LANGUAGE_EXAMPLES: dict[str, tuple[str, ...]] = {
    "ar": ("كتاب", "ماء", "شمس"),
    "de": ("Haus", "Buch", "Wasser"),
    "en_UK": ("bread", "knight", "through"),
    "en_US": ("bread", "knight", "through"),
    "eo": ("domo", "libro", "akvo"),
    "es_ES": ("casa", "agua", "libro"),
    "es_MX": ("casa", "agua", "libro"),
    "fa": ("آب", "کتاب", "خورشید"),
    "fi": ("talo", "kirja", "vesi"),
    "fr_FR": ("maison", "livre", "eau"),
    "fr_QC": ("maison", "livre", "eau"),
    "is": ("hús", "bók", "vatn"),
    "ja": ("本", "水", "家"),
    "jam": ("house", "book", "wata"),
    "km": ("ផ្ទះ", "សៀវភៅ", "ទឹក"),
    "ko": ("집", "책", "물"),
    "ma": ("rumah", "buku", "air"),
    "nb": ("hus", "bok", "vann"),
    "nl": ("huis", "boek", "water"),
    "or": ("ଘର", "ପୁସ୍ତକ", "ପାଣି"),
    "pl": ("dom", "książka", "woda"),
    "pt_BR": ("casa", "livro", "água"),
    "ro": ("casă", "carte", "apă"),
    "sv": ("hus", "bok", "vatten"),
    "sw": ("nyumba", "kitabu", "maji"),
    "tts": ("บ้าน", "หนังสือ", "น้ำ"),
    "vi_C": ("nhà", "sách", "nước"),
    "vi_N": ("nhà", "sách", "nước"),
    "vi_S": ("nhà", "sách", "nước"),
    "yue": ("屋", "書", "水"),
    "zh_hans": ("房子", "书", "水"),
    "zh_hant": ("房子", "書", "水"),
}

# ipa-dict code -> Wiktionary edition; jam and tts have none
_WIKTIONARY_SUBDOMAINS: dict[str, str] = {
    "ar": "ar",
    "de": "de",
    "en_UK": "en",
    "en_US": "en",
    "eo": "eo",
    "es_ES": "es",
    "es_MX": "es",
    "fa": "fa",
    "fi": "fi",
    "fr_FR": "fr",
    "fr_QC": "fr",
    "is": "is",
    "ja": "ja",
    "km": "km",
    "ko": "ko",
    "ma": "ms",  # ipa-dict "ma" is Malay, Wiktionary uses "ms"
    "nb": "no",
    "nl": "nl",
    "or": "or",
    "pl": "pl",
    "pt_BR": "pt",
    "ro": "ro",
    "sv": "sv",
    "sw": "sw",
    "vi_C": "vi",
    "vi_N": "vi",
    "vi_S": "vi",
    "zh_hans": "zh",
    "zh_hant": "zh",
    "yue": "zh",  # Cantonese entries live on the Chinese edition
}


def is_supported(code: str) -> bool:
    return code in LANGUAGES


def language_name(code: str) -> str:
    """Display name for a language code; unknown codes are returned as-is."""
    return LANGUAGES.get(code, code)


def examples_for(code: str) -> tuple[str, ...]:
    """Example query words for a language, falling back to English (US)."""
    return LANGUAGE_EXAMPLES.get(code, LANGUAGE_EXAMPLES[DEFAULT_LANGUAGE])


def wiktionary_subdomain(code: str) -> str | None:
    return _WIKTIONARY_SUBDOMAINS.get(code)


def wiktionary_url(word: str, code: str) -> str | None:
    """Link to the word's page on the matching Wiktionary edition, if any."""
    subdomain = wiktionary_subdomain(code)
    if subdomain is None:
        logger.debug("No Wiktionary edition for language %s", code)
        return None
    title = quote(word.strip().replace(" ", "_"), safe="")
    return f"https://{subdomain}.wiktionary.org/wiki/{title}"
