"""CLI for deal document ingestion."""

import asyncio
import json
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from underwriting.core.config import get_config
from underwriting.core.documents import DOCUMENT_TYPES, DocumentType, missing_document_types
from underwriting.core.errors import IngestionError
from underwriting.core.logging import configure_logging
from underwriting.ingestion.pipeline import IngestionPipeline
from underwriting.ingestion.sources import process_pdf_file
from underwriting.utils.text import count_tokens, truncate_text

console = Console()


@click.group()
@click.option("--log-level", default=None, help="Log level (defaults to config)")
def main(log_level: str | None):
    """Underwriting document tools - parse deal PDFs into prompt-sized chunks."""
    config = get_config()
    configure_logging(log_level or config.log_level, json_logs=config.json_logs)


@main.command()
@click.argument("location")
@click.option("--max-chunk-size", type=click.IntRange(min=1), default=None, help="Characters per chunk")
@click.option("--output", "-o", type=click.Path(), help="Output JSON file")
@click.option("--preview", default=80, help="Characters of each chunk to show")
def ingest(location: str, max_chunk_size: int | None, output: str | None, preview: int):
    """Parse a PDF from a local path or storage URL."""
    pipeline = IngestionPipeline(max_chunk_size=max_chunk_size)

    console.print(f"\n[bold]Processing:[/bold] {location}")

    try:
        result = asyncio.run(process_pdf_file(location, pipeline=pipeline))
    except IngestionError as e:
        console.print(f"[red]❌ Failed to parse {escape(location)}: {escape(str(e))}[/red]")
        sys.exit(1)

    table = Table(title=f"{result.page_count} pages, {len(result.chunks)} chunks")
    table.add_column("#", justify="right")
    table.add_column("Page", justify="right")
    table.add_column("Chars", justify="right")
    table.add_column("Tokens", justify="right")
    table.add_column("Preview")

    for chunk in result.chunks:
        table.add_row(
            str(chunk.index),
            str(chunk.page_hint) if chunk.page_hint is not None else "-",
            str(len(chunk.text)),
            str(count_tokens(chunk.text)),
            escape(truncate_text(chunk.text.replace("\n", " "), preview)),
        )

    console.print(table)

    if output:
        output_path = Path(output)
        with open(output_path, "w") as f:
            json.dump(result.model_dump(), f, indent=2)
        console.print(f"\n[green]✅ Saved to {output_path}[/green]")


@main.command("doc-types")
def doc_types():
    """List supported deal document types."""
    table = Table(title="Document types")
    table.add_column("Type")
    table.add_column("Label")
    table.add_column("Required")
    table.add_column("Description")

    for info in DOCUMENT_TYPES:
        table.add_row(info.type.value, info.label, "yes" if info.required else "", info.description)

    console.print(table)


@main.command()
@click.argument(
    "present",
    nargs=-1,
    type=click.Choice([t.value for t in DocumentType], case_sensitive=False),
)
def missing(present: tuple[str, ...]):
    """Show required document types not yet uploaded."""
    absent = missing_document_types(t.upper() for t in present)

    if not absent:
        console.print("[green]✅ All required documents present[/green]")
        return

    console.print(f"[yellow]Missing {len(absent)} required documents:[/yellow]")
    for doc_type in absent:
        console.print(f"  • {doc_type.value}")


if __name__ == "__main__":
    main()
