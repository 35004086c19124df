"""smartscrape CLI entry-point for running the pipeline from a terminal.

Usage:
    python cli/main.py --help

Commands:
    scrape    → fetch a URL through the relay chain and print its content
    domain    → print the bare hostname of a URL
    relays    → list the relays that would be tried, in order
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from smartscrape.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any working directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import json
import logging

import typer

from smartscrape.config import settings
from smartscrape.log import setup_logging
from smartscrape.scraper import (
    active_relays,
    extract_domain,
    is_valid_url,
    scrape as run_scrape,
    to_note_blocks,
)

app = typer.Typer(
    name="smartscrape",
    help="Extract structured article content from any URL.",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Configure logging before any command runs."""
    setup_logging(logging.DEBUG if verbose else settings.log_level)


# ---------------------------------------------------------------------------
# Scrape
# ---------------------------------------------------------------------------
@app.command("scrape")
def scrape(
    url: str = typer.Argument(..., help="URL to scrape."),
    as_json: bool = typer.Option(False, "--json", help="Print the full article record as JSON."),
    notes: bool = typer.Option(False, "--notes", help="Print note-editor blocks instead of text."),
    document_order: bool = typer.Option(
        False, "--document-order", help="Order blocks by position in the page."
    ),
) -> None:
    """Scrape a URL and print its extracted content."""
    article = run_scrape(url, document_order=document_order or None)

    if as_json:
        typer.echo(json.dumps(article.to_dict(), indent=2, ensure_ascii=False))
    elif article.error:
        typer.echo(f"❌ {article.error}")
    elif notes:
        for note in to_note_blocks(article.content_blocks):
            typer.echo(f"[{note.type}] {note.content}")
    else:
        typer.echo(f"[scrape] Title  : {article.title}")
        typer.echo(f"[scrape] Author : {article.author or '(none)'}")
        typer.echo(f"[scrape] Date   : {article.published_date or '(none)'}")
        typer.echo(f"[scrape] Blocks : {len(article.content_blocks)}")
        typer.echo("")
        typer.echo(article.plain_text)

    if article.error:
        raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
@app.command("domain")
def domain(
    url: str = typer.Argument(..., help="URL to inspect."),
) -> None:
    """Print the hostname of a URL without its leading 'www.'."""
    if not is_valid_url(url):
        typer.echo(f"❌ Invalid URL: {url}")
        raise typer.Exit(code=1)
    typer.echo(extract_domain(url))


@app.command("relays")
def relays() -> None:
    """List the relays that will be tried, in order."""
    try:
        chain = active_relays()
    except ValueError as e:
        typer.echo(f"❌ {e}")
        raise typer.Exit(code=1)
    for position, relay in enumerate(chain, start=1):
        typer.echo(f"  {position}. {relay.name:<14} {relay.template}")
    typer.echo(f"Timeout per relay: {settings.relay_timeout:g}s")


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
