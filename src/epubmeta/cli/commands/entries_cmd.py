# ABOUTME: The `epubmeta entries` command for listing the files inside an EPUB.
# ABOUTME: Useful for diagnosing rootfile and cover lookups that come back empty.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from epubmeta.formats.archive import open_archive
from epubmeta.formats.errors import EpubReadError

console = Console()


@click.command("entries")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def entries(path: Path) -> None:
    """List the archive entries of an EPUB file."""
    try:
        with open_archive(path) as archive:
            names = archive.list_entries()
    except EpubReadError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise SystemExit(1) from exc

    for name in names:
        console.print(name, markup=False, highlight=False)
