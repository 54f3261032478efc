"""Download raw dictionary text from the ipa-dict repository."""

from __future__ import annotations

import logging
from pathlib import Path

import requests

from soundalike.config.schema import DictionaryConfig
from soundalike.dictionary.line_parser import load_dictionary_file, parse_dictionary_text
from soundalike.dictionary.models import Dictionary
from soundalike.utils.retry import retry

logger = logging.getLogger(__name__)


class DictionaryUnavailableError(Exception):
    """Raised when a language's dictionary cannot be obtained."""

    def __init__(self, language: str, reason: str) -> None:
        super().__init__(f"Unable to load dictionary for {language}: {reason}")
        self.language = language
        self.reason = reason


def dictionary_url(language: str, base_url: str) -> str:
    return f"{base_url.rstrip('/')}/{language}.txt"


def fetch_dictionary_text(language: str, config: DictionaryConfig | None = None) -> str:
    """GET the raw dictionary text for *language*, retrying transient errors."""
    config = config or DictionaryConfig()
    url = dictionary_url(language, config.base_url)

    @retry(
        max_attempts=config.max_attempts,
        delay=config.retry_delay,
        exceptions=(requests.ConnectionError, requests.Timeout),
    )
    def _get() -> requests.Response:
        return requests.get(url, timeout=config.timeout)

    logger.info("Fetching dictionary %s", url)
    try:
        response = _get()
    except requests.RequestException as exc:
        raise DictionaryUnavailableError(language, str(exc)) from exc

    if response.status_code != 200:
        raise DictionaryUnavailableError(language, f"HTTP {response.status_code} from {url}")
    response.encoding = config.encoding
    return response.text


def load_dictionary(language: str, config: DictionaryConfig | None = None) -> Dictionary:
    """Load a language's dictionary from ``local_dir`` if set, else the network."""
    config = config or DictionaryConfig()
    if config.local_dir is not None:
        path = Path(config.local_dir) / f"{language}.txt"
        if not path.exists():
            raise DictionaryUnavailableError(language, f"{path} does not exist")
        return load_dictionary_file(path, language, encoding=config.encoding)

    text = fetch_dictionary_text(language, config)
    return parse_dictionary_text(text, language, source=dictionary_url(language, config.base_url))
