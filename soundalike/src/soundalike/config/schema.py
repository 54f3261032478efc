"""Pydantic v2 configuration models for soundalike."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_DICTIONARY_BASE_URL = (
    "https://raw.githubusercontent.com/open-dict-data/ipa-dict/master/data"
)


class VariantPolicy(str, Enum):
    """How a word with several pronunciations is scored against a query."""

    FIRST = "first"
    BEST = "best"


class DictionaryConfig(BaseModel):
    base_url: str = DEFAULT_DICTIONARY_BASE_URL
    timeout: float = Field(default=30.0, gt=0)
    max_attempts: int = Field(default=3, ge=1)
    retry_delay: float = Field(default=1.0, ge=0)
    # Directory of pre-downloaded {code}.txt files; bypasses the network
    local_dir: Path | None = None
    encoding: str = "utf-8"


class SearchConfig(BaseModel):
    threshold: int = Field(default=30, ge=0, le=100)
    max_results: int = Field(default=1000, ge=1)
    page_size: int = Field(default=50, ge=1)
    variant_policy: VariantPolicy = VariantPolicy.BEST
    workers: int = Field(default=1, ge=1)


class AppConfig(BaseModel):
    """Top-level application configuration."""

    language: str = "en_US"
    dictionary: DictionaryConfig = Field(default_factory=DictionaryConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    log_level: str = "INFO"
