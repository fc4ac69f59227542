# ABOUTME: The three shapes a package metadata field can take, and their projections.
# ABOUTME: first_of picks the primary value, many_of keeps every value in order.

from dataclasses import dataclass


@dataclass(frozen=True)
class TextNode:
    """A metadata element that carries attributes alongside its text."""

    text: str
    id: str | None = None


# A field is a bare string (one element, no attributes), a single attributed
# node, or a list of nodes when the element repeats.
FieldValue = str | TextNode | list[TextNode]


def first_of(value: FieldValue) -> str:
    """Return the primary text of a field, whichever shape it arrived in."""
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return value[0].text
    return value.text


def many_of(value: FieldValue) -> list[str]:
    """Return every text of a field in document order.

    A bare string or a single node becomes a one-element list.
    """
    if isinstance(value, str):
        return [value]
    if isinstance(value, list):
        return [node.text for node in value]
    return [value.text]
