"""Holds the dictionary for the currently selected language."""

from __future__ import annotations

import logging
from collections.abc import Callable

from soundalike.config.schema import DictionaryConfig
from soundalike.dictionary.fetcher import load_dictionary
from soundalike.dictionary.languages import is_supported, language_name
from soundalike.dictionary.models import Dictionary

logger = logging.getLogger(__name__)

Loader = Callable[[str, DictionaryConfig], Dictionary]


class DictionaryStore:
    """Active-language dictionary state.

    Selecting a language loads a complete new snapshot and swaps it in; the
    previous snapshot is never patched, so readers holding a reference to it
    keep a consistent view.
    """

    def __init__(
        self,
        config: DictionaryConfig | None = None,
        loader: Loader = load_dictionary,
    ) -> None:
        self.config = config or DictionaryConfig()
        self._loader = loader
        self._language: str | None = None
        self._dictionary: Dictionary | None = None

    @property
    def language(self) -> str | None:
        return self._language

    @property
    def dictionary(self) -> Dictionary | None:
        return self._dictionary

    def select_language(self, code: str, reload: bool = False) -> Dictionary:
        """Make *code* the active language, loading its dictionary."""
        if not is_supported(code):
            raise ValueError(f"Unsupported language code: {code}")
        if code == self._language and self._dictionary is not None and not reload:
            return self._dictionary

        logger.info("Loading pronunciation dictionary for %s", language_name(code))
        dictionary = self._loader(code, self.config)
        self._language = code
        self._dictionary = dictionary
        logger.info("Loaded %d words for %s", len(dictionary), code)
        return dictionary
