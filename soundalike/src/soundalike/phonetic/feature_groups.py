"""Articulatory feature groups and the phone-to-phone distance built on them.

Each IPA phone is assigned to zero or more natural classes (vowel height and
backness, voicing, manner of articulation). Two phones are compared by the
classes they share or by whether their classes form a known related pair,
which gives a small closed set of substitution costs used by the weighted
edit distance in :mod:`soundalike.phonetic.levenshtein`.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

# Group membership is load-bearing for ranking; keep order and contents fixed.
PHONETIC_GROUPS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    # Vowels
    "high_front_vowels": ("i", "ɪ", "y", "ʏ"),
    "mid_front_vowels": ("e", "ɛ", "ø", "œ"),
    "low_front_vowels": ("æ", "a"),
    "high_back_vowels": ("u", "ʊ", "ɯ", "ɤ"),
    "mid_back_vowels": ("o", "ɔ", "ʌ"),
    "low_back_vowels": ("ɑ", "ɒ"),
    "central_vowels": ("ə", "ɜ", "ɝ", "ɐ"),
    "diphthongs": ("aɪ", "aʊ", "ɔɪ", "eɪ", "oʊ", "ɛɪ"),

    # Stops (both ɡ and ASCII g are listed)
    "voiceless_stops": ("p", "t", "k", "ʔ"),
    "voiced_stops": ("b", "d", "ɡ", "g"),

    # Fricatives / affricates
    "voiceless_fricatives": ("f", "θ", "s", "ʃ", "h", "x", "ç"),
    "voiced_fricatives": ("v", "ð", "z", "ʒ", "ɣ"),
    "affricates": ("tʃ", "dʒ", "ts", "dz"),

    # Sonorants
    "nasals": ("m", "n", "ŋ", "ɲ"),
    "liquids": ("l", "ɹ", "r", "ɾ", "ʀ", "ɭ"),
    "glides": ("w", "j", "ɥ"),
})

# Unordered pairs of distinct groups treated as systematically related
RELATED_GROUP_PAIRS: tuple[tuple[str, str], ...] = (
    ("voiceless_stops", "voiced_stops"),
    ("voiceless_fricatives", "voiced_fricatives"),
    ("high_front_vowels", "mid_front_vowels"),
    ("high_back_vowels", "mid_back_vowels"),
    ("mid_front_vowels", "low_front_vowels"),
    ("mid_back_vowels", "low_back_vowels"),
    ("nasals", "liquids"),
    ("liquids", "glides"),
)

SAME_PHONE_COST = 0.0
SHARED_GROUP_COST = 0.3
RELATED_GROUP_COST = 0.6
UNRELATED_COST = 1.0


def _build_phone_index(
    groups: Mapping[str, tuple[str, ...]],
) -> Mapping[str, tuple[str, ...]]:
    index: dict[str, list[str]] = {}
    for group_name, phones in groups.items():
        for phone in phones:
            index.setdefault(phone, []).append(group_name)
    return MappingProxyType({phone: tuple(names) for phone, names in index.items()})


PHONE_TO_GROUPS: Mapping[str, tuple[str, ...]] = _build_phone_index(PHONETIC_GROUPS)


def groups_for(phone: str) -> tuple[str, ...]:
    """Return the feature groups a phone belongs to (empty if unknown)."""
    return PHONE_TO_GROUPS.get(phone, ())


def phonetic_distance(phone1: str, phone2: str) -> float:
    """Substitution cost between two phones.

    Returns one of 0.0 (same symbol), 0.3 (shared natural class),
    0.6 (classes form a related pair) or 1.0 (unrelated). Phones missing
    from the group table belong to no class, so they are either identical
    or maximally distant from everything else.
    """
    if phone1 == phone2:
        return SAME_PHONE_COST

    groups1 = groups_for(phone1)
    groups2 = groups_for(phone2)

    if any(g in groups2 for g in groups1):
        return SHARED_GROUP_COST

    for cat1, cat2 in RELATED_GROUP_PAIRS:
        if (cat1 in groups1 and cat2 in groups2) or (cat2 in groups1 and cat1 in groups2):
            return RELATED_GROUP_COST

    return UNRELATED_COST
