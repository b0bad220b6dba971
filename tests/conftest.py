"""Pytest configuration and shared fixtures."""

import logging
from datetime import date

import pytest

from festivals.domain.value_objects import Clock
from festivals.logging_config import LOGGER_NAME

TODAY = date(2022, 3, 1)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def clock(today: date) -> Clock:
    return lambda: today


@pytest.fixture
def sample_lines() -> list[str]:
    return [
        "Gazpatxo Rock : valencia: 28-02-2022 :1 :rock:punk: hiphop ",
        "black sound fest:badajoz:05-02-2022:  21:rock:  blues",
        "",
        "guitar bcn:barcelona: 28-01-2022 :  170:indie:pop:fusion",
        "  benidorm fest:benidorm:26-01-2022:3:indie: pop  :rock",
    ]


@pytest.fixture(autouse=True)
def restore_package_logger():
    logger = logging.getLogger(LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in logger.handlers[:]:
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(level)
