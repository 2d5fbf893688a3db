import logging

import pytest

from premise.config import settings
from premise.core import logger as logger_module


@pytest.fixture
def fresh_logging(monkeypatch):
    package_logger = logging.getLogger(logger_module.PACKAGE_LOGGER)
    handlers, level = list(package_logger.handlers), package_logger.level
    monkeypatch.setattr(logger_module, "_initialized", False)
    package_logger.handlers = []
    yield package_logger
    package_logger.handlers = handlers
    package_logger.setLevel(level)


def test_library_leaves_output_to_the_host(fresh_logging):
    logger_module.get_logger("premise.repositories.entity")

    assert [type(h) for h in fresh_logging.handlers] == [logging.NullHandler]


def test_stdout_handler_when_enabled(fresh_logging, monkeypatch):
    monkeypatch.setattr(settings, "log_to_stdout", True)
    monkeypatch.setattr(settings, "log_level", "DEBUG")

    logger_module.get_logger("premise.repositories.entity")

    assert logging.StreamHandler in [type(h) for h in fresh_logging.handlers]
    assert fresh_logging.level == logging.DEBUG


def test_handlers_are_attached_once(fresh_logging):
    logger_module.get_logger("premise.a")
    logger_module.get_logger("premise.b")

    assert len(fresh_logging.handlers) == 1
