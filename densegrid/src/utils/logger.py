"""Logging setup for densegrid modules and the ``grid_view`` script.

Library modules only call ``logging.getLogger(__name__)``; handlers are
attached here, once, on the ``densegrid`` logger or a caller-chosen name.
"""

from __future__ import annotations

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _handler(handler: logging.Handler) -> logging.Handler:
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    return handler


def get_logger(name: str = "densegrid", file_path: str | None = None, level: int = logging.INFO) -> logging.Logger:
    """Return ``name``'s logger at ``level`` with a stderr handler.

    ``file_path`` adds a UTF-8 file handler, creating parent directories.
    Handlers are attached only on the first call for a given name.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.addHandler(_handler(logging.StreamHandler()))
        if file_path:
            Path(file_path).parent.mkdir(parents=True, exist_ok=True)
            logger.addHandler(_handler(logging.FileHandler(file_path, encoding="utf-8")))
    logger.setLevel(level)
    return logger
