# ABOUTME: The `epubmeta inspect` command for viewing EPUB metadata.
# ABOUTME: Shows extracted metadata for a single EPUB file and can save its cover.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from epubmeta.formats.epub import read_epub_metadata
from epubmeta.formats.errors import EpubReadError

console = Console()


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--cover-out",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the cover image bytes to this file.",
)
def inspect(path: Path, cover_out: Path | None) -> None:
    """Show metadata extracted from an EPUB file."""
    try:
        meta = read_epub_metadata(path)
    except EpubReadError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise SystemExit(1) from exc

    table = Table(title=escape(path.name), show_header=False, pad_edge=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")

    table.add_row("Title", escape(meta.title))
    if meta.creators is None:
        table.add_row("Creators", "[dim]not present[/dim]")
    else:
        table.add_row("Creators", escape(meta.author) or "[dim]empty[/dim]")
    table.add_row("Language", escape(meta.language))
    table.add_row("Identifier", escape(f"{meta.identifier.type}={meta.identifier.id}"))
    table.add_row("Date", meta.date.isoformat() if meta.date else "[dim]none[/dim]")
    if meta.has_cover:
        table.add_row("Cover", f"yes ({len(meta.cover)} bytes)")
    else:
        table.add_row("Cover", "no")

    console.print(table)

    if cover_out is not None:
        if meta.cover is None:
            console.print("[yellow]No cover to write.[/yellow]")
            return
        cover_out.write_bytes(meta.cover)
        console.print(f"[green]Cover written:[/green] {cover_out}")
