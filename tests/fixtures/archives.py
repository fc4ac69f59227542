# ABOUTME: Builders for hand-assembled EPUB archives used across the test suite.
# ABOUTME: Gives exact control over container, package and cover entries.

import io
import struct
import zipfile
from pathlib import Path

DC_NS = "http://purl.org/dc/elements/1.1/"
OPF_NS = "http://www.idpf.org/2007/opf"
CONTAINER_NS = "urn:oasis:names:tc:opendocument:xmlns:container"

COVER_BYTES = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00fake-jpeg-payload"


def container_xml(*rootfile_paths: str, namespaced: bool = True) -> str:
    """Render a container.xml declaring the given rootfiles in order."""
    xmlns = f' version="1.0" xmlns="{CONTAINER_NS}"' if namespaced else ""
    rootfiles = "".join(
        f'<rootfile full-path="{path}" media-type="application/oebps-package+xml"/>'
        for path in rootfile_paths
    )
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        f"<container{xmlns}><rootfiles>{rootfiles}</rootfiles></container>"
    )


def package_opf(
    *,
    title: str | None = "Test Book",
    language: str | None = "en",
    identifier: str | None = '<dc:identifier id="ISBN">123</dc:identifier>',
    extra_metadata: str = "",
    manifest_items: str = "",
) -> str:
    """Render a package document.

    `identifier` and `extra_metadata` are raw XML fragments so tests can
    exercise every element shape directly. Pass None to omit a field.
    """
    fields = []
    if title is not None:
        fields.append(f"<dc:title>{title}</dc:title>")
    if language is not None:
        fields.append(f"<dc:language>{language}</dc:language>")
    if identifier is not None:
        fields.append(identifier)
    fields.append(extra_metadata)

    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        f'<package xmlns="{OPF_NS}" version="3.0" unique-identifier="ISBN">'
        f'<metadata xmlns:dc="{DC_NS}" xmlns:opf="{OPF_NS}">{"".join(fields)}</metadata>'
        f"<manifest>{manifest_items}</manifest>"
        "</package>"
    )


def zip_bytes(entries: dict[str, str | bytes]) -> io.BytesIO:
    """Build an in-memory zip archive from a name -> content mapping."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as zf:
        zf.writestr("mimetype", "application/epub+zip", compress_type=zipfile.ZIP_STORED)
        for name, content in entries.items():
            zf.writestr(name, content, compress_type=zipfile.ZIP_DEFLATED)
    buffer.seek(0)
    return buffer


def write_epub(path: Path, entries: dict[str, str | bytes]) -> Path:
    """Write a zip archive with the given entries to `path`."""
    path.write_bytes(zip_bytes(entries).getvalue())
    return path


def corrupt_entry(source: io.BytesIO, name: str) -> io.BytesIO:
    """Overwrite the compressed bytes of one deflated entry with 0xFF.

    The central directory stays intact, so the entry is still listed but
    decompressing it fails.
    """
    data = bytearray(source.getvalue())
    with zipfile.ZipFile(io.BytesIO(bytes(data))) as zf:
        info = zf.getinfo(name)
    # Local file header: 30 fixed bytes, then the name and extra field.
    name_len, extra_len = struct.unpack_from("<HH", data, info.header_offset + 26)
    start = info.header_offset + 30 + name_len + extra_len
    data[start : start + info.compress_size] = b"\xff" * info.compress_size
    return io.BytesIO(bytes(data))
