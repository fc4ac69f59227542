# ABOUTME: Shared pytest fixtures for epubmeta tests.
# ABOUTME: Provides EPUB files written by ebooklib and hand-assembled zip archives.

from pathlib import Path

import pytest
from ebooklib import epub

from tests.fixtures.archives import COVER_BYTES, container_xml, package_opf, write_epub


@pytest.fixture
def sample_epub(tmp_path: Path) -> Path:
    """Create a minimal valid EPUB file with known metadata via ebooklib."""
    book = epub.EpubBook()

    book.set_identifier("test-isbn-978-0-123456-47-2")
    book.set_title("The Name of the Rose")
    book.set_language("en")
    book.add_author("Umberto Eco")
    book.add_metadata("DC", "date", "1980-09-01")

    # Add a minimal chapter so the EPUB is structurally valid
    chapter = epub.EpubHtml(title="Chapter 1", file_name="chap01.xhtml", lang="en")
    chapter.content = b"<html><body><h1>Chapter 1</h1><p>Content.</p></body></html>"
    book.add_item(chapter)

    book.toc = [epub.Link("chap01.xhtml", "Chapter 1", "chap01")]
    book.add_item(epub.EpubNcx())
    book.add_item(epub.EpubNav())
    book.spine = ["nav", chapter]

    filepath = tmp_path / "name_of_the_rose.epub"
    epub.write_epub(str(filepath), book)
    return filepath


@pytest.fixture
def corrupt_epub(tmp_path: Path) -> Path:
    """Create a corrupt file that is not a valid EPUB."""
    filepath = tmp_path / "corrupt.epub"
    filepath.write_text("this is not a valid epub file")
    return filepath


@pytest.fixture
def minimal_epub(tmp_path: Path) -> Path:
    """An archive whose package has only the required fields (OEBPS layout)."""
    return write_epub(
        tmp_path / "minimal.epub",
        {
            "META-INF/container.xml": container_xml("OEBPS/content.opf", namespaced=False),
            "OEBPS/content.opf": package_opf(),
        },
    )


@pytest.fixture
def covered_epub(tmp_path: Path) -> Path:
    """An archive with two creators, a date, and a cover under EPUB/."""
    return write_epub(
        tmp_path / "covered.epub",
        {
            "META-INF/container.xml": container_xml("EPUB/package.opf"),
            "EPUB/package.opf": package_opf(
                title="Good Omens",
                extra_metadata=(
                    '<dc:creator id="a1">Terry Pratchett</dc:creator>'
                    '<dc:creator id="a2">Neil Gaiman</dc:creator>'
                    "<dc:date>1990-05-01</dc:date>"
                ),
                manifest_items=(
                    '<item id="cover" href="cover.jpg" media-type="image/jpeg"/>'
                    '<item id="nav" href="nav.xhtml" media-type="application/xhtml+xml"/>'
                ),
            ),
            "EPUB/cover.jpg": COVER_BYTES,
        },
    )


@pytest.fixture
def missing_container_epub(tmp_path: Path) -> Path:
    """A zip archive with no META-INF/container.xml."""
    return write_epub(
        tmp_path / "no_container.epub",
        {"OEBPS/content.opf": package_opf()},
    )
