from __future__ import annotations

"""Logging helpers.

The library never configures handlers on its own. Applications decide where
records go; by default the ``foldkit`` logger carries a ``NullHandler`` so
importing the package stays silent.
"""

import logging
from typing import Optional

ROOT_LOGGER_NAME = "foldkit"


def install_null_handler() -> None:
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not any(isinstance(h, logging.NullHandler) for h in root.handlers):
        root.addHandler(logging.NullHandler())


def enable_console_logging(level: int = logging.INFO, fmt: Optional[str] = None) -> logging.Handler:
    """Attach a stream handler to the ``foldkit`` logger and return it.

    Meant for scripts and notebooks. Calling it twice adds a second handler.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(fmt or "%(asctime)s  %(levelname)-8s  %(name)s: %(message)s")
    )
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.addHandler(handler)
    root.setLevel(level)
    return handler
