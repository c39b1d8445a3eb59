# logger_setup.py
import logging

from typej import config

# Library default: stay silent until the application asks for output.
app_logger = logging.getLogger(config.LOGGER_NAME)
app_logger.addHandler(logging.NullHandler())


def setup_logger(log_file=None, console=True):
    """Sets up the package logger with console and optional file output."""
    logger = logging.getLogger(config.LOGGER_NAME)
    logger.setLevel(config.LOG_LEVEL)

    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(config.LOG_FORMAT)

    # File Handler for general logs
    log_file = log_file or config.LOG_FILE_NAME
    if log_file:
        fh = logging.FileHandler(log_file, mode='a')
        fh.setLevel(config.FILE_LOG_LEVEL)
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    # Console Handler
    if console:
        ch = logging.StreamHandler()
        ch.setLevel(config.CONSOLE_LOG_LEVEL)
        ch.setFormatter(formatter)
        logger.addHandler(ch)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger
