"""Tests for configuration schema and loader."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from soundalike.config.loader import load_config
from soundalike.config.schema import (
    DEFAULT_DICTIONARY_BASE_URL,
    AppConfig,
    DictionaryConfig,
    SearchConfig,
    VariantPolicy,
)


class TestAppConfig:
    def test_defaults(self):
        cfg = AppConfig()
        assert cfg.language == "en_US"
        assert cfg.log_level == "INFO"
        assert cfg.dictionary.base_url == DEFAULT_DICTIONARY_BASE_URL
        assert cfg.dictionary.local_dir is None

    def test_search_defaults(self):
        cfg = SearchConfig()
        assert cfg.threshold == 30
        assert cfg.max_results == 1000
        assert cfg.page_size == 50
        assert cfg.variant_policy == VariantPolicy.BEST
        assert cfg.workers == 1


class TestValidation:
    def test_threshold_range(self):
        with pytest.raises(ValidationError):
            SearchConfig(threshold=101)
        with pytest.raises(ValidationError):
            SearchConfig(threshold=-1)

    def test_positive_sizes(self):
        with pytest.raises(ValidationError):
            SearchConfig(max_results=0)
        with pytest.raises(ValidationError):
            SearchConfig(page_size=0)
        with pytest.raises(ValidationError):
            SearchConfig(workers=0)

    def test_attempts(self):
        with pytest.raises(ValidationError):
            DictionaryConfig(max_attempts=0)

    def test_unknown_policy(self):
        with pytest.raises(ValidationError):
            SearchConfig(variant_policy="all")


class TestLoadConfig:
    def test_load_test_config(self, config_path: Path):
        cfg = load_config(config_path)
        assert cfg.language == "en_UK"
        assert cfg.log_level == "DEBUG"
        assert cfg.dictionary.timeout == 5
        assert cfg.dictionary.max_attempts == 2
        assert cfg.search.threshold == 40
        assert cfg.search.page_size == 2
        assert cfg.search.variant_policy == VariantPolicy.FIRST

    def test_load_empty_yaml(self, tmp_path: Path):
        p = tmp_path / "empty.yaml"
        p.write_text("")
        cfg = load_config(p)
        assert cfg.language == "en_US"

    def test_no_path_gives_defaults(self):
        assert load_config(None) == AppConfig()
