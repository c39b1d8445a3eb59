import logging

from typej import TC_RANGE_ERR, config
from typej.logger_setup import setup_logger


def test_range_errors_are_logged(tc, caplog):
    caplog.set_level(logging.DEBUG, logger=config.LOGGER_NAME)
    assert tc.temperature_c(100.0) == TC_RANGE_ERR
    assert tc.voltage_from_celsius(1300.0) == TC_RANGE_ERR
    messages = [r.getMessage() for r in caplog.records if r.name == config.LOGGER_NAME]
    assert any("mV reading 100.0 outside" in m for m in messages)
    assert any("temperature 1300.0 C outside" in m for m in messages)


def test_in_range_conversion_is_quiet(tc, caplog):
    caplog.set_level(logging.DEBUG, logger=config.LOGGER_NAME)
    tc.temperature_c(5.0)
    assert not caplog.records


def test_array_range_errors_are_logged(tc, caplog):
    caplog.set_level(logging.DEBUG, logger=config.LOGGER_NAME)
    tc.temperature_c_array([0.0, 80.0, 90.0])
    assert "2 of 3 mV readings outside" in caplog.text


def test_setup_logger_console(clean_logger):
    logger = setup_logger()
    assert logger is clean_logger
    assert logger.level == config.LOG_LEVEL
    assert [type(h) for h in logger.handlers] == [logging.StreamHandler]


def test_setup_logger_file(clean_logger, tmp_path):
    log_file = tmp_path / "thermocouple_log.txt"
    logger = setup_logger(log_file=log_file, console=False)
    logger.info("cold junction at 25.0 C")
    logger.debug("not written")
    for handler in logger.handlers:
        handler.flush()

    text = log_file.read_text()
    assert " - typej - INFO - cold junction at 25.0 C" in text
    assert "not written" not in text


def test_setup_logger_without_outputs(clean_logger):
    logger = setup_logger(console=False)
    assert [type(h) for h in logger.handlers] == [logging.NullHandler]


def test_setup_logger_is_idempotent(clean_logger):
    setup_logger()
    logger = setup_logger()
    assert len(logger.handlers) == 1


def test_checked_fahrenheit_bad_ambient_logged_once(tc, caplog):
    caplog.set_level(logging.DEBUG, logger=config.LOGGER_NAME)
    tc.try_temperature_f(1.0, 5000.0)
    messages = [r.getMessage() for r in caplog.records if r.name == config.LOGGER_NAME]
    assert messages == ["temperature 5000.0 F outside [-346.0, 2192.0]"]
