# ABOUTME: Core data structures for EPUB extraction results.
# ABOUTME: EpubMetadata is a freestanding value with no reference back to the archive.

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ManifestItem:
    """One resource declared in the package manifest."""

    id: str
    href: str
    media_type: str | None = None


@dataclass
class Identifier:
    """The package identifier.

    `type` holds the dc:identifier element's `id` attribute (its scheme label in
    the source document) and `id` holds the element text.
    """

    type: str
    id: str


@dataclass
class EpubMetadata:
    """Bibliographic metadata extracted from an EPUB package document.

    `creators` is None when the package has no dc:creator element at all, which
    is distinct from an empty list. `date` and `cover` are None when absent.
    """

    title: str
    language: str
    identifier: Identifier
    creators: list[str] | None = None
    date: datetime | None = None
    cover: bytes | None = None

    @property
    def author(self) -> str:
        """Convenience property: joined creator string for display."""
        return ", ".join(self.creators) if self.creators else ""

    @property
    def has_cover(self) -> bool:
        """Whether cover image data is present."""
        return self.cover is not None and len(self.cover) > 0
