# SPDX-License-Identifier: MIT

import logging

from rich.logging import RichHandler

from kalendar.log import LOGGER_NAME, setup_logging


def test_setup_logging_installs_one_rich_handler():
    logger = setup_logging("info")
    setup_logging("DEBUG")

    handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
    assert len(handlers) == 1
    assert logger.level == logging.DEBUG
    assert logger.name == LOGGER_NAME
    assert not logger.propagate
