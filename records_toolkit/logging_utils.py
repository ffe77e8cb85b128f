"""Logging setup for the command line."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_DATEFMT = "%Y-%m-%dT%H:%M:%S"

logger = logging.getLogger(__name__)


def configure_logging(level: str = "WARNING", log_file: Optional[str] = None) -> None:
    """Send log records to stderr, and to ``log_file`` when given."""
    formatter = logging.Formatter(_FORMAT, datefmt=_DATEFMT)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    handlers: list[logging.Handler] = [stream_handler]

    file_error: Optional[OSError] = None
    if log_file:
        try:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(formatter)
            handlers.append(file_handler)
        except OSError as exc:
            file_error = exc

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        handlers=handlers,
        force=True,
    )
    if file_error is not None:
        logger.warning("Failed to open log file %s: %s", log_file, file_error)
