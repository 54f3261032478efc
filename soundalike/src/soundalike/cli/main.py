"""Main Typer application."""

from __future__ import annotations

import typer

app = typer.Typer(
    name="soundalike",
    help="Find words that sound like a given word or IPA string, across languages.",
    no_args_is_help=True,
)


@app.command()
def search(
    query: str = typer.Argument(..., help="A dictionary word or IPA such as /ˈhɛloʊ/"),
    lang: str = typer.Option(None, "--lang", "-l", help="Dictionary language code"),
    config: str = typer.Option(None, "--config", "-c", help="Path to config YAML"),
    dictionary: str = typer.Option(
        None, "--dictionary", "-d", help="Read a local ipa-dict file instead of downloading"
    ),
    page: int = typer.Option(1, "--page", "-p", min=1, help="Result page to show"),
    as_json: bool = typer.Option(False, "--json", help="Emit JSON lines"),
) -> None:
    """Rank dictionary words by phonetic similarity to QUERY."""
    from .search_cmd import run_search

    run_search(query, lang, config, dictionary, page, as_json)


@app.command()
def compare(
    ipa_a: str = typer.Argument(..., help="First IPA string"),
    ipa_b: str = typer.Argument(..., help="Second IPA string"),
    as_json: bool = typer.Option(False, "--json", help="Emit JSON"),
) -> None:
    """Show the phonetic distance and similarity between two IPA strings."""
    from .compare_cmd import run_compare

    run_compare(ipa_a, ipa_b, as_json)


@app.command()
def phones(
    ipa: str = typer.Argument(..., help="IPA string to segment"),
) -> None:
    """Print the phones an IPA string is split into."""
    from .compare_cmd import run_phones

    run_phones(ipa)


@app.command()
def languages() -> None:
    """List supported dictionary languages."""
    from .languages_cmd import run_languages

    run_languages()


if __name__ == "__main__":
    app()
