"""Shared pytest fixtures."""
import pytest

from arithmetic_calculator.common.logger import logger


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop handlers installed by configure_logging so they never outlive a captured stream."""
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel("NOTSET")
