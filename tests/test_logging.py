"""Tests for the shared colour logging setup."""

import logging

import colorlog
import pytest

from catalog_api.core.logging import configure_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers, root.level = handlers, level


def test_single_coloured_handler_tagged_with_service():
    configure_logging(logging.DEBUG, service="identity-api", quiet=())

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    formatter = root.handlers[0].formatter
    assert isinstance(formatter, colorlog.ColoredFormatter)
    record = logging.LogRecord("identity_api.main", logging.INFO, __file__, 1, "ready", None, None)
    assert "identity-api [identity_api.main]" in formatter.format(record)


def test_noisy_loggers_are_quietened():
    configure_logging(logging.DEBUG, service="catalog-api")

    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("httpcore").level == logging.WARNING
    assert logging.getLogger("uvicorn.access").level == logging.DEBUG
