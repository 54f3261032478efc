"""Phonetically weighted Levenshtein distance and percentage similarity."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

from soundalike.phonetic.feature_groups import phonetic_distance
from soundalike.phonetic.ipa_tokenizer import normalize_ipa

logger = logging.getLogger(__name__)

INDEL_COST = 1.0


def phonetic_levenshtein_distance(seq1: Sequence[str], seq2: Sequence[str]) -> float:
    """Compute edit distance between two phone sequences.

    Insertion/deletion cost = 1, substitution cost is the feature-based
    :func:`phonetic_distance` (0, 0.3, 0.6 or 1.0).
    """
    n, m = len(seq1), len(seq2)

    dp = [[0.0] * (m + 1) for _ in range(n + 1)]
    for i in range(n + 1):
        dp[i][0] = i * INDEL_COST
    for j in range(m + 1):
        dp[0][j] = j * INDEL_COST

    for i in range(1, n + 1):
        for j in range(1, m + 1):
            sub_cost = phonetic_distance(seq1[i - 1], seq2[j - 1])
            dp[i][j] = min(
                dp[i - 1][j] + INDEL_COST,      # deletion
                dp[i][j - 1] + INDEL_COST,      # insertion
                dp[i - 1][j - 1] + sub_cost,    # substitution
            )
    return dp[n][m]


def round_half_up(value: float) -> int:
    """Round a non-negative number to the nearest integer, .5 going up."""
    return int(math.floor(value + 0.5))


def _similarity_from_phones(
    phones1: Sequence[str], phones2: Sequence[str]
) -> tuple[float, int]:
    max_len = max(len(phones1), len(phones2))
    if max_len == 0:
        return 0.0, 100
    dist = phonetic_levenshtein_distance(phones1, phones2)
    return dist, round_half_up(max(0.0, (max_len - dist) / max_len * 100))


def phone_similarity(phones1: Sequence[str], phones2: Sequence[str]) -> int:
    """Percentage similarity between two already-normalised phone sequences."""
    _, similarity = _similarity_from_phones(phones1, phones2)
    return similarity


def calculate_similarity(ipa1: str, ipa2: str) -> int:
    """Percentage similarity (0-100) between two IPA strings.

    100 = identical phone sequences (including two empty strings).
    """
    return phone_similarity(normalize_ipa(ipa1), normalize_ipa(ipa2))


@dataclass(frozen=True)
class SimilarityBreakdown:
    """Intermediate values of a similarity computation."""

    phones_a: tuple[str, ...]
    phones_b: tuple[str, ...]
    distance: float
    similarity: int

    def to_dict(self) -> dict[str, object]:
        return {
            "phones_a": list(self.phones_a),
            "phones_b": list(self.phones_b),
            "distance": round(self.distance, 4),
            "similarity": self.similarity,
        }


def similarity_breakdown(ipa1: str, ipa2: str) -> SimilarityBreakdown:
    """Like :func:`calculate_similarity` but keeps the phones and distance."""
    phones1 = normalize_ipa(ipa1)
    phones2 = normalize_ipa(ipa2)
    dist, similarity = _similarity_from_phones(phones1, phones2)
    logger.debug("%r vs %r: distance=%.2f similarity=%d", ipa1, ipa2, dist, similarity)
    return SimilarityBreakdown(
        phones_a=tuple(phones1),
        phones_b=tuple(phones2),
        distance=dist,
        similarity=similarity,
    )
