"""CLI handlers for the compare and phones subcommands."""

from __future__ import annotations

import orjson
import typer

from soundalike.phonetic.ipa_tokenizer import normalize_ipa
from soundalike.phonetic.levenshtein import similarity_breakdown


def run_compare(ipa_a: str, ipa_b: str, as_json: bool) -> None:
    breakdown = similarity_breakdown(ipa_a, ipa_b)
    if as_json:
        typer.echo(orjson.dumps(breakdown.to_dict()).decode())
        return
    typer.echo(f"phones a:   {' '.join(breakdown.phones_a)}")
    typer.echo(f"phones b:   {' '.join(breakdown.phones_b)}")
    typer.echo(f"distance:   {breakdown.distance:.2f}")
    typer.echo(f"similarity: {breakdown.similarity}%")


def run_phones(ipa: str) -> None:
    typer.echo(" ".join(normalize_ipa(ipa)))
