"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from soundalike.dictionary.line_parser import load_dictionary_file
from soundalike.dictionary.models import Dictionary, DictionaryEntry

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def config_path() -> Path:
    return FIXTURES_DIR / "config_test.yaml"


@pytest.fixture
def sample_dictionary_path() -> Path:
    return FIXTURES_DIR / "en_US.txt"


@pytest.fixture
def sample_dictionary(sample_dictionary_path: Path) -> Dictionary:
    return load_dictionary_file(sample_dictionary_path, "en_US")


@pytest.fixture
def pat_bat_dictionary() -> Dictionary:
    return Dictionary(
        language="en_US",
        entries=(
            DictionaryEntry(word="pat", ipas=("pæt",)),
            DictionaryEntry(word="bat", ipas=("bæt",)),
        ),
    )
