"""Root logger setup for the CLI. Library modules only call ``getLogger``."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "[%(name)s] %(message)s"

_configured = False


def setup_logging(level: str = "WARNING", console: Console | None = None) -> None:
    """Attach a RichHandler to the root logger. Later calls only adjust the level."""

    global _configured
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    if _configured:
        return
    _configured = True

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
