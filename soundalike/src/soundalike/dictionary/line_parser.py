"""Parser for the tab-separated ipa-dict text format.

Each record is one line::

    word<TAB>/ipa1/, /ipa2/

Malformed lines are reported as ``None`` rather than raised, so that a whole
file can be loaded while skipping the bad records.
"""

from __future__ import annotations

import logging
from pathlib import Path

from soundalike.dictionary.models import Dictionary, DictionaryEntry

logger = logging.getLogger(__name__)


def split_ipa_variants(ipa_field: str) -> list[str]:
    """Split a comma-separated pronunciation field into trimmed variants.

    Empty segments are dropped, so ``""`` gives ``[]``.
    """
    return [part.strip() for part in ipa_field.split(",") if part.strip()]


def parse_dictionary_line(line: str) -> DictionaryEntry | None:
    """Parse one ``word<TAB>ipa[,ipa...]`` record, or return None."""
    word, tab, ipa_field = line.partition("\t")
    if not tab:
        return None

    word = word.strip()
    ipas = split_ipa_variants(ipa_field.strip())
    if not word or not ipas:
        return None
    return DictionaryEntry(word=word, ipas=tuple(ipas))


def parse_dictionary_text(text: str, language: str, source: str = "") -> Dictionary:
    """Build a Dictionary from the full text of a dictionary resource."""
    entries: list[DictionaryEntry] = []
    skipped = 0
    for line_num, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        entry = parse_dictionary_line(line)
        if entry is None:
            logger.debug("Skipping malformed line %d in %s: %r", line_num, language, line[:80])
            skipped += 1
            continue
        entries.append(entry)

    logger.info(
        "Parsed %d entries for %s (%d malformed lines skipped)",
        len(entries), language, skipped,
    )
    return Dictionary(
        language=language,
        entries=tuple(entries),
        source=source,
        skipped=skipped,
    )


def load_dictionary_file(path: Path | str, language: str, encoding: str = "utf-8") -> Dictionary:
    """Read a local dictionary file into a Dictionary."""
    path = Path(path)
    text = path.read_text(encoding=encoding)
    return parse_dictionary_text(text, language, source=str(path))
