"""Data models for search queries and their results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class SearchError(str, Enum):
    """Reasons a query produced no ranking."""

    EMPTY_QUERY = "empty_query"
    DICTIONARY_UNAVAILABLE = "dictionary_unavailable"
    UNRESOLVED_WORD = "unresolved_word"


@dataclass(frozen=True)
class SearchResult:
    """A dictionary word scored against the query pronunciation."""

    word: str
    ipa: str
    similarity: int
    query_ipa: str

    def __post_init__(self) -> None:
        if not 0 <= self.similarity <= 100:
            raise ValueError(f"similarity out of range: {self.similarity}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "word": self.word,
            "ipa": self.ipa,
            "similarity": self.similarity,
            "query_ipa": self.query_ipa,
        }


@dataclass
class SearchOutcome:
    """Everything a caller needs to present one query.

    Exactly one of ``results`` (possibly empty) or ``error`` is meaningful:
    when ``error`` is set, no ranking was performed.
    """

    query: str
    query_ipa: str = ""
    results: list[SearchResult] = field(default_factory=list)
    error: SearchError | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, query: str, error: SearchError) -> SearchOutcome:
        if error == SearchError.EMPTY_QUERY:
            message = "Please enter a word or IPA notation"
        elif error == SearchError.DICTIONARY_UNAVAILABLE:
            message = "Dictionary not loaded. Please wait."
        else:
            message = f'Could not find pronunciation for "{query}". Try IPA notation.'
        return cls(query=query, error=error, message=message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "query": self.query,
            "query_ipa": self.query_ipa,
            "results": [r.to_dict() for r in self.results],
            "error": self.error.value if self.error else None,
            "message": self.message,
        }
