# ABOUTME: Read-only access to the entries of an EPUB zip archive.
# ABOUTME: Entries are addressed by exact, case-sensitive in-archive path.

import logging
import zipfile
import zlib
from pathlib import Path
from types import TracebackType
from typing import BinaryIO

from epubmeta.formats.errors import ArchiveReadError, EntryNotFoundError

logger = logging.getLogger(__name__)


class EpubArchive:
    """A handle over an opened EPUB archive.

    Each extraction opens its own handle. Handles are not safe to share
    between concurrent extractions.
    """

    def __init__(self, zf: zipfile.ZipFile) -> None:
        self._zf = zf

    def __enter__(self) -> "EpubArchive":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self._zf.close()

    def list_entries(self) -> list[str]:
        """Return every entry name in archive order."""
        return self._zf.namelist()

    def has_entry(self, name: str) -> bool:
        try:
            self._zf.getinfo(name)
        except KeyError:
            return False
        return True

    def read_binary(self, name: str) -> bytes:
        """Return the raw bytes of an entry.

        Raises:
            EntryNotFoundError: If no entry has exactly this name.
            ArchiveReadError: If the entry exists but cannot be decompressed.
        """
        try:
            return self._zf.read(name)
        except KeyError as exc:
            raise EntryNotFoundError(name) from exc
        except (
            zipfile.BadZipFile,
            zlib.error,
            EOFError,
            NotImplementedError,
            OSError,
            RuntimeError,
        ) as exc:
            raise ArchiveReadError(f"Failed to read entry {name}: {exc}") from exc

    def read_text(self, name: str) -> str:
        """Return an entry decoded as UTF-8, dropping a leading BOM."""
        data = self.read_binary(name)
        try:
            return data.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise ArchiveReadError(f"Entry is not UTF-8 text: {name}: {exc}") from exc


def open_archive(source: BinaryIO | Path) -> EpubArchive:
    """Open a zip-format EPUB from a binary stream or a filesystem path.

    Raises:
        ArchiveReadError: If the source is not a readable zip archive.
    """
    try:
        zf = zipfile.ZipFile(source)
    except (zipfile.BadZipFile, OSError) as exc:
        raise ArchiveReadError(f"Failed to open EPUB archive: {exc}") from exc
    logger.debug("Opened archive with %d entries", len(zf.namelist()))
    return EpubArchive(zf)
