# ABOUTME: The `epubmeta scan` command for extracting metadata from a directory.
# ABOUTME: Walks a directory tree and reports each EPUB, isolating per-file failures.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from epubmeta.core.batch import extract_all, find_epubs

console = Console()


@click.command("scan")
@click.argument(
    "directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
def scan(directory: Path) -> None:
    """Extract metadata from every EPUB under DIRECTORY."""
    epub_files = find_epubs(directory)

    if not epub_files:
        console.print(f"No EPUB files found in {directory}")
        return

    console.print(f"Found {len(epub_files)} EPUB file(s)")
    result = extract_all(epub_files)

    if result.books:
        table = Table(show_header=True, pad_edge=False)
        table.add_column("File")
        table.add_column("Title", style="bold")
        table.add_column("Creators")
        table.add_column("Language")
        table.add_column("Cover")
        for epub_path, meta in result.books:
            table.add_row(
                escape(str(epub_path.relative_to(directory))),
                escape(meta.title),
                escape(meta.author) or "[dim]unknown[/dim]",
                escape(meta.language),
                "yes" if meta.has_cover else "no",
            )
        console.print(table)

    for epub_path, message in result.error_details:
        console.print(f"[red]Failed:[/red] {escape(epub_path.name)}: {escape(message)}")

    console.print(
        f"\n[bold]Extracted:[/bold] {result.extracted}  "
        f"[bold]Errors:[/bold] {result.errors}"
    )
