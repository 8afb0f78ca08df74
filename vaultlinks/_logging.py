"""Logging configuration for vaultlinks.

Usage in other modules:
    import logging
    log = logging.getLogger(__name__)

The CLI calls ``configure_logging`` once at startup. Records go to stderr
through rich so that stdout only ever carries command output.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

from .config import DEFAULT_LOG_LEVEL


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Attach a rich stderr handler to the ``vaultlinks`` logger.

    Repeated calls only update the level.
    """
    logger = logging.getLogger("vaultlinks")
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    if logger.handlers:
        return

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
