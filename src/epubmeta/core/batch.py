# ABOUTME: Batch extraction over many EPUB files with per-file failure isolation.
# ABOUTME: A failing file is recorded as an error and never aborts its siblings.

import logging
from dataclasses import dataclass, field
from pathlib import Path

from epubmeta.formats.epub import read_epub_metadata
from epubmeta.formats.errors import EpubReadError
from epubmeta.metadata.types import EpubMetadata

logger = logging.getLogger(__name__)


@dataclass
class BatchResult:
    """Summary of a batch extraction."""

    books: list[tuple[Path, EpubMetadata]] = field(default_factory=list)
    error_details: list[tuple[Path, str]] = field(default_factory=list)

    @property
    def extracted(self) -> int:
        return len(self.books)

    @property
    def errors(self) -> int:
        return len(self.error_details)


def find_epubs(directory: Path) -> list[Path]:
    """Recursively find all .epub files in a directory."""
    return sorted(directory.rglob("*.epub"))


def extract_all(paths: list[Path]) -> BatchResult:
    """Extract metadata from each EPUB independently.

    Args:
        paths: EPUB file paths to process, in order.

    Returns:
        BatchResult with one entry per path, either in books or in
        error_details.
    """
    result = BatchResult()

    for epub_path in paths:
        try:
            metadata = read_epub_metadata(epub_path)
        except (EpubReadError, OSError) as exc:
            logger.info("Failed to extract %s: %s", epub_path, exc)
            result.error_details.append((epub_path, str(exc)))
            continue

        result.books.append((epub_path, metadata))

    return result
