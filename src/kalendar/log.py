# SPDX-License-Identifier: MIT

import logging

from rich.logging import RichHandler

LOGGER_NAME = "kalendar"


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """
    Route the kalendar logger through rich.

    Calling this again only updates the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())

    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        handler = RichHandler(show_path=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)
        logger.propagate = False

    return logger
