"""Central logging setup for the project."""
from __future__ import annotations
import logging
import sys
from typing import TextIO

def setup_logging(level: int | str = logging.INFO, stream: TextIO | None = None) -> None:
    """
    Configure root logger with sane defaults.

    Args:
        level: Logging level, either numeric or a name such as "DEBUG".
        stream: Destination, stdout by default.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    handler = logging.StreamHandler(stream or sys.stdout)
    fmt = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
    handler.setFormatter(logging.Formatter(fmt))
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
    # httpx logs every outbound request at INFO; keep it to warnings.
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))
