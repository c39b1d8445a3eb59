import logging

import pytest

from typej import TypeJ, config


@pytest.fixture
def tc():
    return TypeJ()


@pytest.fixture
def clean_logger():
    """Hand the package logger back in its import-time state after a test."""
    logger = logging.getLogger(config.LOGGER_NAME)
    yield logger
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.NOTSET)
