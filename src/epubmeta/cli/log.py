# ABOUTME: Logging setup for the epubmeta CLI.
# ABOUTME: Routes library log records through a Rich handler on stderr.

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(verbose: bool) -> None:
    """Install a Rich handler on the epubmeta logger.

    Verbose mode logs every extraction step at DEBUG; otherwise only
    warnings and above are shown.
    """
    logger = logging.getLogger("epubmeta")
    logger.handlers.clear()

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
