"""CLI handler for the search subcommand."""

from __future__ import annotations

import logging

import orjson
import typer

from soundalike.config.loader import load_config
from soundalike.dictionary.fetcher import DictionaryUnavailableError
from soundalike.dictionary.languages import language_name, wiktionary_url
from soundalike.dictionary.line_parser import load_dictionary_file
from soundalike.dictionary.store import DictionaryStore
from soundalike.search.ranking import paginate, search
from soundalike.utils.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def run_search(
    query: str,
    lang: str | None,
    config_path: str | None,
    dictionary_path: str | None,
    page: int,
    as_json: bool,
) -> None:
    cfg = load_config(config_path)
    setup_logging(cfg.log_level)
    language = lang or cfg.language

    try:
        if dictionary_path:
            dictionary = load_dictionary_file(
                dictionary_path, language, encoding=cfg.dictionary.encoding
            )
        else:
            dictionary = DictionaryStore(cfg.dictionary).select_language(language)
    except (DictionaryUnavailableError, ValueError, OSError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc

    outcome = search(query, dictionary, cfg.search)
    if not outcome.ok:
        typer.secho(outcome.message, fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    shown = paginate(outcome.results, page=page, page_size=cfg.search.page_size)

    if as_json:
        for result in shown:
            row = result.to_dict()
            row["wiktionary_url"] = wiktionary_url(result.word, language)
            typer.echo(orjson.dumps(row).decode())
        return

    typer.echo(
        f"{len(outcome.results)} words in {language_name(language)} sound like "
        f"{outcome.query} {outcome.query_ipa}"
    )
    for result in shown:
        typer.echo(f"{result.similarity:>3}%  {result.word}  {result.ipa}")
    total_pages = -(-len(outcome.results) // cfg.search.page_size)
    if total_pages > 1:
        typer.echo(f"page {page}/{total_pages}")
