"""Process-wide logging setup."""

import logging

from rich.console import Console
from rich.logging import RichHandler

_configured = False


def configure_logging(level: str = "WARNING") -> None:
    """
    Configure logging once per process.

    Log records go to stderr through Rich so they never mix with command
    output written to stdout.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ...)
    """
    global _configured
    if _configured:
        logging.getLogger().setLevel(level)
        return

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=level,
        format="%(name)s: %(message)s",
        datefmt="[%X]",
        handlers=[handler],
    )
    _configured = True
