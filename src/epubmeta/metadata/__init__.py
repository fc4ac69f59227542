# ABOUTME: Metadata package for the values produced by EPUB extraction.
# ABOUTME: Exports the result dataclasses and the field shape projections.

from epubmeta.metadata.fields import FieldValue, TextNode, first_of, many_of
from epubmeta.metadata.types import EpubMetadata, Identifier, ManifestItem

__all__ = [
    "EpubMetadata",
    "FieldValue",
    "Identifier",
    "ManifestItem",
    "TextNode",
    "first_of",
    "many_of",
]
