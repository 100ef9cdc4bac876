"""Shared logger for the arithmetic calculator."""
import logging
import sys

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

logger: logging.Logger = logging.getLogger("arithmetic_calculator")


def configure_logging(level: str = "WARNING") -> None:
    """
    Attach a stderr handler to the package logger and set its level.

    Calling it more than once only updates the level.

    :param str level: Logging level name (e.g. "DEBUG", "INFO")

    :return: None
    """
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level.upper())
