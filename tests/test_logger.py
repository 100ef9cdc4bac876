"""Test function configure_logging."""
import logging

from arithmetic_calculator.common.logger import configure_logging, logger


def test_configure_logging_sets_level() -> None:
    """The level name is applied case-insensitively."""
    configure_logging("debug")
    assert logger.level == logging.DEBUG


def test_configure_logging_installs_single_handler() -> None:
    """Repeated calls only update the level."""
    configure_logging("INFO")
    configure_logging("ERROR")
    assert len(logger.handlers) == 1
    assert logger.level == logging.ERROR
