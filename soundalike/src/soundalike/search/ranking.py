"""Rank a dictionary by phonetic similarity to a query.

The query is either literal IPA or a word that is looked up in the active
dictionary to obtain its pronunciation. Every entry is then scored with
:func:`~soundalike.phonetic.levenshtein.phone_similarity`, weak matches are
dropped and the rest sorted best-first.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ProcessPoolExecutor
from itertools import chain

from soundalike.config.schema import SearchConfig, VariantPolicy
from soundalike.dictionary.models import Dictionary, DictionaryEntry
from soundalike.phonetic.ipa_tokenizer import normalize_ipa
from soundalike.phonetic.levenshtein import phone_similarity
from soundalike.search.models import SearchError, SearchOutcome, SearchResult
from soundalike.utils.batching import batched

logger = logging.getLogger(__name__)

# Characters that only occur in IPA, never in the plain spellings we expect
IPA_PROBE_CHARS: frozenset[str] = frozenset("ɑæɔəɛɪʊʌɜθðʃʒŋɹ")

DEFAULT_THRESHOLD = 30
DEFAULT_MAX_RESULTS = 1000

# Entries per task when scoring in worker processes
_PARALLEL_BATCH_SIZE = 2000


def looks_like_ipa(query: str) -> bool:
    """Heuristic: IPA delimiters up front, or any IPA-only character."""
    if query.startswith(("/", "[")):
        return True
    return any(ch in IPA_PROBE_CHARS for ch in query)


def resolve_query_ipa(query: str, dictionary: Dictionary) -> str | None:
    """Return the pronunciation to search with, or None if the word is unknown.

    A plain-word query is never used as literal IPA.
    """
    if looks_like_ipa(query):
        return query
    entry = dictionary.find_word(query)
    if entry is None:
        return None
    return entry.ipa


def _score_entry(
    query_phones: Sequence[str],
    query_ipa: str,
    entry: DictionaryEntry,
    policy: VariantPolicy,
) -> SearchResult:
    if policy == VariantPolicy.FIRST:
        best_ipa = entry.ipa
        best = phone_similarity(query_phones, normalize_ipa(best_ipa))
    else:
        best_ipa, best = "", -1
        for ipa in entry.ipas:
            score = phone_similarity(query_phones, normalize_ipa(ipa))
            if score > best:
                best_ipa, best = ipa, score
    return SearchResult(word=entry.word, ipa=best_ipa, similarity=best, query_ipa=query_ipa)


def _score_batch(
    query_ipa: str,
    entries: list[DictionaryEntry],
    policy: VariantPolicy,
) -> list[SearchResult]:
    query_phones = normalize_ipa(query_ipa)
    return [_score_entry(query_phones, query_ipa, entry, policy) for entry in entries]


def score_entries(
    query_ipa: str,
    entries: Sequence[DictionaryEntry],
    policy: VariantPolicy = VariantPolicy.BEST,
    workers: int = 1,
) -> list[SearchResult]:
    """Score every entry against *query_ipa*, preserving dictionary order."""
    if workers <= 1 or len(entries) <= _PARALLEL_BATCH_SIZE:
        return _score_batch(query_ipa, list(entries), policy)

    batches = list(batched(entries, _PARALLEL_BATCH_SIZE))
    logger.debug("Scoring %d entries in %d batches on %d workers", len(entries), len(batches), workers)
    with ProcessPoolExecutor(max_workers=workers) as pool:
        # map() yields in submission order, so dictionary order survives
        scored = pool.map(
            _score_batch,
            [query_ipa] * len(batches),
            batches,
            [policy] * len(batches),
        )
        return list(chain.from_iterable(scored))


def rank_dictionary(
    query_ipa: str,
    entries: Sequence[DictionaryEntry],
    threshold: int = DEFAULT_THRESHOLD,
    max_results: int = DEFAULT_MAX_RESULTS,
    policy: VariantPolicy = VariantPolicy.BEST,
    workers: int = 1,
) -> list[SearchResult]:
    """Return entries scoring strictly above *threshold*, best first.

    Ties keep dictionary order (``sorted`` is stable). At most
    *max_results* results are returned.
    """
    scored = score_entries(query_ipa, entries, policy=policy, workers=workers)
    kept = [r for r in scored if r.similarity > threshold]
    kept = sorted(kept, key=lambda r: r.similarity, reverse=True)
    logger.info(
        "Query %r: %d/%d entries above %d%%", query_ipa, len(kept), len(scored), threshold
    )
    return kept[:max_results]


def search(
    query: str,
    dictionary: Dictionary | None,
    config: SearchConfig | None = None,
) -> SearchOutcome:
    """Run a full query; failures come back in ``SearchOutcome.error``."""
    config = config or SearchConfig()
    query = query.strip()

    if not query:
        return SearchOutcome.failure(query, SearchError.EMPTY_QUERY)
    if dictionary is None or len(dictionary) == 0:
        return SearchOutcome.failure(query, SearchError.DICTIONARY_UNAVAILABLE)

    query_ipa = resolve_query_ipa(query, dictionary)
    if query_ipa is None:
        logger.info("No pronunciation for %r in %s", query, dictionary.language)
        return SearchOutcome.failure(query, SearchError.UNRESOLVED_WORD)

    results = rank_dictionary(
        query_ipa,
        dictionary.entries,
        threshold=config.threshold,
        max_results=config.max_results,
        policy=config.variant_policy,
        workers=config.workers,
    )
    return SearchOutcome(query=query, query_ipa=query_ipa, results=results)


def paginate(results: Sequence[SearchResult], page: int = 1, page_size: int = 50) -> list[SearchResult]:
    """Return the 1-based *page* of *results*; out-of-range pages are empty."""
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    for number, chunk in enumerate(batched(results, page_size), start=1):
        if number == page:
            return chunk
    return []
