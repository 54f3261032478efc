"""Tests for the language registry and Wiktionary links."""

from __future__ import annotations

from soundalike.dictionary.languages import (
    LANGUAGE_EXAMPLES,
    LANGUAGES,
    examples_for,
    is_supported,
    language_name,
    wiktionary_subdomain,
    wiktionary_url,
)


class TestRegistry:
    def test_language_count(self):
        assert len(LANGUAGES) == 32

    def test_every_language_has_examples(self):
        assert set(LANGUAGE_EXAMPLES) == set(LANGUAGES)

    def test_is_supported(self):
        assert is_supported("en_US")
        assert is_supported("zh_hant")
        assert not is_supported("en")

    def test_language_name(self):
        assert language_name("nb") == "Norwegian Bokmål"
        assert language_name("xx") == "xx"

    def test_examples_fall_back_to_english(self):
        assert examples_for("de") == ("Haus", "Buch", "Wasser")
        assert examples_for("does_not_exist") == ("bread", "knight", "through")


class TestWiktionarySubdomain:
    def test_maps_language_codes(self):
        assert wiktionary_subdomain("en_US") == "en"
        assert wiktionary_subdomain("en_UK") == "en"
        assert wiktionary_subdomain("pt_BR") == "pt"
        assert wiktionary_subdomain("fr_QC") == "fr"
        assert wiktionary_subdomain("zh_hant") == "zh"
        assert wiktionary_subdomain("ma") == "ms"
        assert wiktionary_subdomain("nb") == "no"
        assert wiktionary_subdomain("yue") == "zh"

    def test_unsupported(self):
        assert wiktionary_subdomain("does_not_exist") is None
        assert wiktionary_subdomain("jam") is None
        assert wiktionary_subdomain("tts") is None


class TestWiktionaryUrl:
    def test_spaces_become_underscores(self):
        assert wiktionary_url("ice cream", "en_US") == "https://en.wiktionary.org/wiki/ice_cream"

    def test_non_ascii_is_percent_encoded(self):
        assert wiktionary_url("水", "ja") == "https://ja.wiktionary.org/wiki/%E6%B0%B4"

    def test_word_is_trimmed(self):
        assert wiktionary_url("  haus ", "de") == "https://de.wiktionary.org/wiki/haus"

    def test_unsupported_language(self):
        assert wiktionary_url("word", "does_not_exist") is None
