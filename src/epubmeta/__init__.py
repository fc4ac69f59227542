# ABOUTME: epubmeta - bibliographic metadata extraction from EPUB archives.
# ABOUTME: Re-exports the extraction entry points and the result types.

from epubmeta.formats.epub import extract_epub_metadata, read_epub_metadata
from epubmeta.formats.errors import EpubReadError
from epubmeta.metadata.types import EpubMetadata, Identifier

__all__ = [
    "EpubMetadata",
    "EpubReadError",
    "Identifier",
    "extract_epub_metadata",
    "read_epub_metadata",
]
