"""Logging configuration for smartscrape.

Library modules only ever call ``logging.getLogger(__name__)``; handlers are
installed by the outer surfaces (CLI, API) through :func:`setup_logging`.
"""

from __future__ import annotations

import logging
import sys
from typing import Union

_ROOT_LOGGER = "smartscrape"


def setup_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """Attach a stdout handler to the ``smartscrape`` logger and set *level*.

    Calling it again only adjusts the level; handlers are never duplicated.
    """
    logger = logging.getLogger(_ROOT_LOGGER)
    logger.setLevel(level)

    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(level)
        return logger

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger
