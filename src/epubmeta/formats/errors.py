# ABOUTME: Exception hierarchy for EPUB metadata extraction.
# ABOUTME: Every stage-local failure maps to exactly one subclass of EpubReadError.


class EpubReadError(Exception):
    """Raised when an EPUB file cannot be read or parsed."""


class ArchiveReadError(EpubReadError):
    """Raised when the source cannot be opened as a zip archive."""


class EntryNotFoundError(EpubReadError):
    """Raised when a named entry does not exist in the archive."""

    def __init__(self, name: str, message: str | None = None) -> None:
        self.name = name
        super().__init__(message or f"Entry not found in archive: {name}")


class MissingContainerError(EntryNotFoundError):
    """Raised when META-INF/container.xml is absent."""


class MissingRootfileError(EntryNotFoundError):
    """Raised when the path named by the container has no archive entry."""


class MalformedContainerError(EpubReadError):
    """Raised when container.xml lacks a usable rootfile declaration."""


class MalformedPackageError(EpubReadError):
    """Raised when the package document lacks a required metadata field."""


class InvalidDateError(MalformedPackageError):
    """Raised when dc:date is present but cannot be parsed."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Unparsable publication date: {value!r}")
