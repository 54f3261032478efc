"""Data models for pronunciation dictionaries."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class DictionaryEntry:
    """A headword with one or more IPA pronunciation variants.

    ``ipas`` keeps the variants in source order; the first one is the
    canonical pronunciation used when the word itself is a query.
    """

    word: str
    ipas: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.ipas:
            raise ValueError(f"Dictionary entry {self.word!r} has no pronunciation")
        # Accept lists from callers but store an immutable tuple
        object.__setattr__(self, "ipas", tuple(self.ipas))

    @property
    def ipa(self) -> str:
        return self.ipas[0]

    def to_dict(self) -> dict[str, Any]:
        return {"word": self.word, "ipas": list(self.ipas)}

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> DictionaryEntry:
        ipas = d.get("ipas")
        if ipas is None:
            ipas = [d["ipa"]]
        return cls(word=d["word"], ipas=tuple(ipas))


@dataclass(frozen=True)
class Dictionary:
    """Immutable snapshot of one language's pronunciation dictionary."""

    language: str
    entries: tuple[DictionaryEntry, ...] = field(default_factory=tuple)
    source: str = ""
    skipped: int = 0

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[DictionaryEntry]:
        return iter(self.entries)

    def find_word(self, word: str) -> DictionaryEntry | None:
        """Return the first entry whose word matches case-insensitively."""
        needle = word.lower()
        for entry in self.entries:
            if entry.word.lower() == needle:
                return entry
        return None
