# ABOUTME: Extracts bibliographic metadata from the OPF package document.
# ABOUTME: Collapses variant field shapes and resolves the cover through the manifest.

import logging
import re
from datetime import datetime, timezone

from lxml import etree

from epubmeta.formats.archive import EpubArchive
from epubmeta.formats.errors import (
    EntryNotFoundError,
    InvalidDateError,
    MalformedPackageError,
    MissingRootfileError,
)
from epubmeta.formats.xmlparse import (
    children_named,
    element_text,
    first_child,
    local_name,
    parse_document,
)
from epubmeta.metadata.fields import FieldValue, TextNode, first_of, many_of
from epubmeta.metadata.types import EpubMetadata, Identifier, ManifestItem

logger = logging.getLogger(__name__)

COVER_ITEM_ID = "cover"

# Cover hrefs are joined onto this fixed prefix rather than resolved against
# the rootfile's own directory.
COVER_PATH_PREFIX = "EPUB/"

# W3CDTF reduced precision forms that datetime.fromisoformat() rejects
_YEAR_RE = re.compile(r"^(\d{4})$")
_YEAR_MONTH_RE = re.compile(r"^(\d{4})-(\d{2})$")


def read_field(metadata: etree._Element, name: str) -> FieldValue | None:
    """Read a Dublin Core field from the metadata element as a tagged shape.

    Returns None when no element with that local name exists. A single
    attribute-less element yields a bare string, a single attributed element
    a TextNode, and a repeated element a list of TextNodes.
    """
    elements = children_named(metadata, name)
    if not elements:
        return None

    if len(elements) == 1:
        element = elements[0]
        if not element.attrib:
            return element_text(element)
        return TextNode(text=element_text(element), id=element.get("id"))

    return [TextNode(text=element_text(el), id=el.get("id")) for el in elements]


def read_manifest(package: etree._Element) -> list[ManifestItem]:
    """Return the manifest items in document order.

    Items without an id or href cannot be looked up or fetched, so they are
    skipped. A package without a manifest yields an empty list.
    """
    manifest = first_child(package, "manifest")
    if manifest is None:
        return []

    items = []
    for element in children_named(manifest, "item"):
        item_id = element.get("id")
        href = element.get("href")
        if not item_id or not href:
            logger.debug("Skipping manifest item without id or href: %s", dict(element.attrib))
            continue
        items.append(ManifestItem(id=item_id, href=href, media_type=element.get("media-type")))
    return items


def find_manifest_item(items: list[ManifestItem], item_id: str) -> ManifestItem | None:
    """Return the first manifest item with exactly this id, or None."""
    for item in items:
        if item.id == item_id:
            return item
    return None


def parse_date(text: str) -> datetime:
    """Parse a dc:date value into a timezone-aware datetime.

    Accepts ISO 8601 dates and timestamps plus the bare year and year-month
    forms. Values without an offset are taken as UTC.

    Raises:
        InvalidDateError: If the text is not a recognizable date.
    """
    value = text.strip()
    try:
        if match := _YEAR_RE.match(value):
            parsed = datetime(int(match.group(1)), 1, 1)
        elif match := _YEAR_MONTH_RE.match(value):
            parsed = datetime(int(match.group(1)), int(match.group(2)), 1)
        else:
            parsed = datetime.fromisoformat(value)
    except ValueError as exc:
        raise InvalidDateError(text) from exc

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _required_text(metadata: etree._Element, name: str, rootfile_path: str) -> str:
    """Read a required field via first_of, failing on absence or empty text."""
    value = read_field(metadata, name)
    text = first_of(value) if value is not None else ""
    if not text:
        raise MalformedPackageError(f"{rootfile_path}: missing required dc:{name}")
    return text


def _read_identifier(metadata: etree._Element, rootfile_path: str) -> Identifier:
    """Read dc:identifier as an attributed node.

    The element's `id` attribute becomes Identifier.type and its text becomes
    Identifier.id. When the element repeats, the first occurrence is used.
    """
    value = read_field(metadata, "identifier")
    if value is None:
        raise MalformedPackageError(f"{rootfile_path}: missing required dc:identifier")

    if isinstance(value, list):
        node = value[0]
    elif isinstance(value, TextNode):
        node = value
    else:
        raise MalformedPackageError(f"{rootfile_path}: dc:identifier has no id attribute")

    if not node.id:
        raise MalformedPackageError(f"{rootfile_path}: dc:identifier has no id attribute")
    if not node.text:
        raise MalformedPackageError(f"{rootfile_path}: dc:identifier is empty")

    return Identifier(type=node.id, id=node.text)


def _read_creators(metadata: etree._Element) -> list[str] | None:
    """Read every non-empty dc:creator; None when there are none."""
    value = read_field(metadata, "creator")
    if value is None:
        return None
    creators = [text for text in many_of(value) if text]
    return creators or None


def _read_cover(archive: EpubArchive, items: list[ManifestItem]) -> bytes | None:
    """Fetch the cover resource named by the manifest item with id "cover"."""
    item = find_manifest_item(items, COVER_ITEM_ID)
    if item is None:
        return None

    cover_path = f"{COVER_PATH_PREFIX}{item.href}"
    try:
        return archive.read_binary(cover_path)
    except EntryNotFoundError:
        logger.debug("Manifest cover %s has no archive entry", cover_path)
        return None


def extract_package_metadata(archive: EpubArchive, rootfile_path: str) -> EpubMetadata:
    """Extract metadata from the package document at `rootfile_path`.

    Args:
        archive: The open EPUB archive.
        rootfile_path: In-archive path of the package document, as named by
            the container.

    Returns:
        EpubMetadata populated with the extracted fields.

    Raises:
        MissingRootfileError: If no archive entry exists at rootfile_path.
        MalformedPackageError: If the document is not valid XML or lacks a
            required field (title, language, identifier).
        InvalidDateError: If dc:date is present but unparsable.
    """
    try:
        data = archive.read_binary(rootfile_path)
    except EntryNotFoundError as exc:
        raise MissingRootfileError(
            rootfile_path, f"Root file not found in archive: {rootfile_path}"
        ) from exc

    try:
        package = parse_document(data)
    except etree.XMLSyntaxError as exc:
        raise MalformedPackageError(f"{rootfile_path} is not valid XML: {exc}") from exc

    if local_name(package) != "package":
        raise MalformedPackageError(
            f"{rootfile_path} root element is <{local_name(package)}>, expected <package>"
        )

    metadata = first_child(package, "metadata")
    if metadata is None:
        raise MalformedPackageError(f"{rootfile_path} has no <metadata> element")

    title = _required_text(metadata, "title", rootfile_path)
    language = _required_text(metadata, "language", rootfile_path)
    identifier = _read_identifier(metadata, rootfile_path)

    creators = _read_creators(metadata)

    date_value = read_field(metadata, "date")
    date_text = first_of(date_value) if date_value is not None else ""
    date = parse_date(date_text) if date_text else None

    cover = _read_cover(archive, read_manifest(package))

    return EpubMetadata(
        title=title,
        language=language,
        identifier=identifier,
        creators=creators,
        date=date,
        cover=cover,
    )
