# ABOUTME: EPUB metadata extraction pipeline: archive -> rootfile -> package metadata.
# ABOUTME: Each stage fails fast with a typed error; there is no partial result.

import logging
from pathlib import Path
from typing import BinaryIO

from epubmeta.formats.archive import open_archive
from epubmeta.formats.container import locate_rootfile
from epubmeta.formats.errors import ArchiveReadError
from epubmeta.formats.opf import extract_package_metadata
from epubmeta.metadata.types import EpubMetadata

logger = logging.getLogger(__name__)


def extract_epub_metadata(source: BinaryIO | Path) -> EpubMetadata:
    """Extract metadata from an EPUB given as a binary stream or path.

    The archive is closed before returning, on success and on failure. The
    returned value holds no reference to it.

    Raises:
        EpubReadError: Any subclass, for the first stage that fails.
    """
    with open_archive(source) as archive:
        rootfile_path = locate_rootfile(archive)
        return extract_package_metadata(archive, rootfile_path)


def read_epub_metadata(path: Path) -> EpubMetadata:
    """Extract metadata from an EPUB file.

    Args:
        path: Path to the EPUB file.

    Returns:
        EpubMetadata populated with extracted fields.

    Raises:
        EpubReadError: If the file cannot be read or parsed.
    """
    if not path.exists():
        raise ArchiveReadError(f"File not found: {path}")

    logger.debug("Extracting metadata from %s", path)
    with path.open("rb") as stream:
        return extract_epub_metadata(stream)
