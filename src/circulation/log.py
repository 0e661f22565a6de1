"""Logging setup.

Log records go to stderr through Rich so they never interleave with
notification output on stdout.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

logger = logging.getLogger("circulation")


def setup_logging(level: str = "WARNING") -> None:
    """Attach a Rich handler to the package logger.

    Safe to call more than once; only the level changes on later calls.
    """
    logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)
