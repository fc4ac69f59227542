# ABOUTME: Shared lxml parsing helpers for the container and package documents.
# ABOUTME: Matches elements by local name so namespaced and bare documents both work.

from lxml import etree


def parse_document(data: bytes) -> etree._Element:
    """Parse raw XML bytes, letting lxml honor the encoding declaration.

    Raises:
        lxml.etree.XMLSyntaxError: If the bytes are not well-formed XML.
    """
    # A fresh parser per document; lxml parsers are not shared across threads.
    parser = etree.XMLParser(resolve_entities=False, no_network=True, remove_comments=True)
    return etree.fromstring(data, parser=parser)


def local_name(element: etree._Element) -> str | None:
    """Return the tag without its namespace, or None for non-element nodes."""
    if not isinstance(element.tag, str):
        return None
    return etree.QName(element).localname


def children_named(element: etree._Element, name: str) -> list[etree._Element]:
    """Return the direct children whose local name equals `name`."""
    return [child for child in element if local_name(child) == name]


def first_child(element: etree._Element, name: str) -> etree._Element | None:
    matches = children_named(element, name)
    return matches[0] if matches else None


def element_text(element: etree._Element) -> str:
    """Return the full stripped text content of an element."""
    return "".join(element.itertext()).strip()
