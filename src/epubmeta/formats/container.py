# ABOUTME: Locates the package document through META-INF/container.xml.
# ABOUTME: The first rootfile declaration is authoritative; later ones are ignored.

import logging

from lxml import etree

from epubmeta.formats.archive import EpubArchive
from epubmeta.formats.errors import (
    EntryNotFoundError,
    MalformedContainerError,
    MissingContainerError,
)
from epubmeta.formats.xmlparse import children_named, first_child, local_name, parse_document

logger = logging.getLogger(__name__)

CONTAINER_PATH = "META-INF/container.xml"


def locate_rootfile(archive: EpubArchive) -> str:
    """Return the in-archive path of the package document.

    The path is returned exactly as written in the container, since it is
    used as a literal entry name afterwards.

    Raises:
        MissingContainerError: If META-INF/container.xml is absent.
        MalformedContainerError: If the container has no rootfile full-path.
    """
    try:
        data = archive.read_binary(CONTAINER_PATH)
    except EntryNotFoundError as exc:
        raise MissingContainerError(
            CONTAINER_PATH, f"Couldn't find {CONTAINER_PATH} in archive"
        ) from exc

    try:
        root = parse_document(data)
    except etree.XMLSyntaxError as exc:
        raise MalformedContainerError(f"{CONTAINER_PATH} is not valid XML: {exc}") from exc

    if local_name(root) != "container":
        raise MalformedContainerError(
            f"{CONTAINER_PATH} root element is <{local_name(root)}>, expected <container>"
        )

    rootfiles = first_child(root, "rootfiles")
    declarations = children_named(rootfiles, "rootfile") if rootfiles is not None else []
    if not declarations:
        raise MalformedContainerError(f"{CONTAINER_PATH} declares no rootfile")

    if len(declarations) > 1:
        logger.debug(
            "Container declares %d rootfiles; using the first", len(declarations)
        )

    full_path = declarations[0].get("full-path")
    if not full_path:
        raise MalformedContainerError(f"{CONTAINER_PATH} rootfile has no full-path")

    logger.debug("Located rootfile at %s", full_path)
    return full_path
