"""Command line interface for PageFinder."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from pagefinder.config import AppConfig
from pagefinder.index.indexer import Indexer
from pagefinder.index.pagination import paginate
from pagefinder.index.search import find_keyword_matches
from pagefinder.index.storage import InMemoryDocumentStore
from pagefinder.index.tfidf import TfIdfScorer
from pagefinder.utils.files import fingerprint_file, iter_text_paths


console = Console()
app = typer.Typer(help="PageFinder - paginate, fingerprint, search and score text files")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _read_text(path: Path, config: AppConfig) -> str:
    try:
        return path.read_text(encoding=config.encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise typer.BadParameter(f"Cannot read {path}: {exc}") from exc


@app.command()
def pages(
    path: Path = typer.Argument(..., help="Text file to paginate.", exists=True, dir_okay=False),
    page_size: int = typer.Option(AppConfig().page_size, help="Page size in characters"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Show how a file splits into pages."""
    _setup_logging(verbose)
    if page_size < 1:
        raise typer.BadParameter("Page size must be positive")
    config = AppConfig(page_size=page_size)

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Page")
    table.add_column("Length")
    table.add_column("Preview")

    for page in paginate(_read_text(path, config), page_size=config.page_size):
        table.add_row(str(page.page_number), str(len(page.content)), page.content.replace("\n", " ")[:60])

    console.print(table)


@app.command()
def fingerprint(
    inputs: List[Path] = typer.Argument(..., help="Files to fingerprint.", exists=True, dir_okay=False),
) -> None:
    """Print the content fingerprint of each file, as an import would record it."""
    config = AppConfig()
    for path in inputs:
        try:
            digest = fingerprint_file(path, encoding=config.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise typer.BadParameter(f"Cannot read {path}: {exc}") from exc
        console.print(f"{digest}  {path}")


@app.command()
def search(
    keyword: str = typer.Argument(..., help="Keyword to look for (case-sensitive)"),
    inputs: List[Path] = typer.Argument(..., help="Text files or directories to search.", resolve_path=True),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Find the first occurrence of a keyword in each file."""
    _setup_logging(verbose)
    config = AppConfig()
    if len(keyword) < config.min_keyword_length:
        raise typer.BadParameter(
            f"Keyword must be at least {config.min_keyword_length} characters long"
        )

    store = InMemoryDocumentStore(page_size=config.page_size)
    stats = Indexer(store, config).index(inputs)
    if stats.failed:
        console.print(f"[yellow]{stats.failed} file(s) could not be read.[/yellow]")
    if not store.list_documents():
        if not stats.failed:
            console.print("[yellow]No text files found.[/yellow]")
        return

    matches = find_keyword_matches(keyword, store.list_documents(), min_length=config.min_keyword_length)
    if not matches:
        console.print("[yellow]No matches found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Document")
    table.add_column("Page")
    table.add_column("Context")
    for match in matches:
        table.add_row(match.document_name, str(match.page_number), match.context)
    console.print(table)


@app.command()
def score(
    query: Optional[str] = typer.Argument(None, help="Query text"),
    corpus: List[Path] = typer.Option(..., "--corpus", "-c", help="Corpus files or directories."),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Score this file's contents instead of QUERY."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Compute the TF-IDF relevance of a query against a corpus of files."""
    _setup_logging(verbose)
    config = AppConfig()
    if file is not None:
        query = _read_text(file, config)
    if query is None:
        raise typer.BadParameter("Provide QUERY or --file")

    scorer = TfIdfScorer()
    for path in iter_text_paths(corpus, extensions=config.text_extensions):
        scorer.add_document_to_corpus(_read_text(path, config))

    if scorer.corpus_size == 0:
        console.print("[yellow]Corpus is empty.[/yellow]")
    console.print(f"Corpus documents: {scorer.corpus_size}")
    console.print(f"TF-IDF score: {scorer.calculate_document_tfidf(query):.6f}")
