"""Command line interface for doctagger."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from doctagger.config import AppConfig
from doctagger.errors import ExtractionError, FilterConfigError
from doctagger.index.walker import DirectoryWalker
from doctagger.ingestion.registry import default_registry
from doctagger.keywords.ranker import DEFAULT_TOP_K
from doctagger.keywords.tagger import DocumentTagger
from doctagger.utils.files import write_documents


console = Console()
err_console = Console(stderr=True)
app = typer.Typer(help="doctagger - keyword tagging for PDF and EPUB collections")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


@app.command()
def index(
    root: Path = typer.Argument(
        ..., help="Directory containing PDF/EPUB files.", exists=True, file_okay=False, resolve_path=True
    ),
    exclusions: Optional[Path] = typer.Option(None, "--exclusions", help="CSV file of excluded tags"),
    output: Path = typer.Option(AppConfig().output_path, "--output", "-o", help="JSON output path"),
    recursive: bool = typer.Option(True, "--recursive/--no-recursive", help="Descend into subdirectories"),
    top_k: int = typer.Option(DEFAULT_TOP_K, help="Maximum keywords per document", min=1),
    update_metadata: bool = typer.Option(
        False, "--update-metadata", help="Overwrite tags in sibling .metadata.json files"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Tag every document under ROOT and write the results as JSON."""
    _setup_logging(verbose)
    config = AppConfig(
        root=root,
        exclusions_path=exclusions,
        output_path=output,
        recursive=recursive,
        top_k=top_k,
        update_metadata=update_metadata,
    )

    tagger = DocumentTagger(config.resolve_exclusions_path(Path.cwd()), top_k=config.top_k)
    walker = DirectoryWalker(
        tagger,
        recursive=config.recursive,
        update_metadata=config.update_metadata,
    )

    console.print(f"Tagging documents in [bold]{config.root}[/bold]...")
    try:
        result = walker.walk(config.root)
    except FilterConfigError as exc:
        err_console.print(f"[red]Invalid exclusion list:[/red] {exc}")
        raise typer.Exit(code=1)

    for message in result.errors:
        err_console.print(f"[red]Error:[/red] {message}")
    if not result.complete:
        err_console.print("[yellow]Traversal was interrupted; results may be incomplete.[/yellow]")

    if not result.documents:
        console.print("[yellow]No documents tagged.[/yellow]")

    resolved_output = config.resolve_output_path(Path.cwd())
    write_documents(result.documents, resolved_output)
    console.print(
        f"Documents: {len(result.documents)}, errors: {len(result.errors)} "
        f"-> [bold]{resolved_output}[/bold]"
    )


@app.command()
def keywords(
    path: Path = typer.Argument(..., help="PDF or EPUB file", exists=True, dir_okay=False, resolve_path=True),
    exclusions: Optional[Path] = typer.Option(None, "--exclusions", help="CSV file of excluded tags"),
    top_k: int = typer.Option(DEFAULT_TOP_K, help="Maximum keywords to display", min=1),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Show the ranked keywords of a single document."""
    _setup_logging(verbose)
    config = AppConfig(exclusions_path=exclusions, top_k=top_k)

    extractor = default_registry().for_path(path)
    if extractor is None:
        raise typer.BadParameter(f"Unsupported file type: {path.suffix or path.name}")

    tagger = DocumentTagger(config.resolve_exclusions_path(Path.cwd()), top_k=config.top_k)
    try:
        document = tagger.tag(path.name, extractor(path))
    except (ExtractionError, FilterConfigError) as exc:
        err_console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1)

    if not document.keywords:
        console.print("[yellow]No keywords found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("#")
    table.add_column("Keyword")
    for position, keyword in enumerate(document.keywords, start=1):
        table.add_row(str(position), keyword)

    console.print(table)
