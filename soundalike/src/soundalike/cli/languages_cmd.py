"""CLI handler for the languages subcommand."""

from __future__ import annotations

import typer

from soundalike.dictionary.languages import LANGUAGES, examples_for, wiktionary_subdomain


def run_languages() -> None:
    for code, name in LANGUAGES.items():
        wiki = wiktionary_subdomain(code) or "-"
        examples = ", ".join(examples_for(code))
        typer.echo(f"{code:<8} {name:<24} wiktionary={wiki:<3} e.g. {examples}")
