"""
Shared application logger.
"""

import logging
import sys

LOGGER_NAME = "cinematic_mirror"
_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

logger = logging.getLogger(LOGGER_NAME)


def setup_logging(level: str = "INFO") -> None:
    """Attach a stream handler to the package logger (idempotent)."""
    root = logging.getLogger(LOGGER_NAME)
    root.setLevel(level.upper())
    if any(getattr(handler, "_mirror_handler", False) for handler in root.handlers):
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    handler._mirror_handler = True  # type: ignore[attr-defined]
    root.addHandler(handler)
