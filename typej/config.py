# config.py
import logging

# Logger settings
LOGGER_NAME = "typej"
LOG_LEVEL = logging.DEBUG          # level of the package logger itself
CONSOLE_LOG_LEVEL = logging.DEBUG
FILE_LOG_LEVEL = logging.INFO
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Log files
LOG_FILE_NAME = None  # e.g. "thermocouple_log.txt"; None keeps logging console-only
