"""IPA string cleanup and segmentation into phones."""

from __future__ import annotations

import re

# Delimiters, stress, length and syllable marks dropped before tokenising
_IPA_MARKS_RE = re.compile(r"[/\[\]ˈˌːˑ.]")

# Two-character phones recognised as a single unit (diphthongs, affricates)
MULTI_CHAR_PHONES: frozenset[str] = frozenset({
    "aɪ", "aʊ", "ɔɪ", "eɪ", "oʊ", "ɛɪ",
    "tʃ", "dʒ", "ts", "dz",
})


def strip_ipa_marks(raw: str) -> str:
    """Remove IPA delimiters and suprasegmental marks, lowercase and trim."""
    return _IPA_MARKS_RE.sub("", raw).lower().strip()


def normalize_ipa(raw: str) -> list[str]:
    """Split an IPA string into a list of phones.

    Scans left to right; at every position the two-character lookahead is
    tried against :data:`MULTI_CHAR_PHONES` first, otherwise a single
    character is taken. There are no phones longer than two characters.

    >>> normalize_ipa("/ˈhɛloʊ/")
    ['h', 'ɛ', 'l', 'oʊ']
    """
    text = strip_ipa_marks(raw)
    phones: list[str] = []
    i = 0
    while i < len(text):
        pair = text[i:i + 2]
        if pair in MULTI_CHAR_PHONES:
            phones.append(pair)
            i += 2
        else:
            phones.append(text[i])
            i += 1
    return phones
