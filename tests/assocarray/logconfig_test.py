import importlib
import logging

import pytest

import assocarray
from assocarray import logconfig
from assocarray.array import AssociativeArray


@pytest.fixture
def package_logger():
    logger = logging.getLogger("assocarray")
    level = logger.level
    handlers = list(logger.handlers)
    try:
        yield logger
    finally:
        logger.setLevel(level)
        logger.handlers = handlers


def test_trace_level_name():
    assert "TRACE" == logging.getLevelName(logconfig.TRACE)


def test_get_level_default(monkeypatch):
    monkeypatch.delenv("ASSOCARRAY_LOGGING_LEVEL", raising=False)
    assert "WARNING" == logconfig.get_level()


def test_get_level_from_env(monkeypatch):
    monkeypatch.setenv("ASSOCARRAY_LOGGING_LEVEL", "DEBUG")
    assert "DEBUG" == logconfig.get_level()


def test_get_format(monkeypatch):
    monkeypatch.delenv("ASSOCARRAY_LOGGING_FORMAT", raising=False)
    assert logconfig.DEFAULT_FORMAT == logconfig.get_format()
    monkeypatch.setenv("ASSOCARRAY_LOGGING_FORMAT", "%(message)s")
    assert "%(message)s" == logconfig.get_format()


def test_null_handler_by_default(monkeypatch):
    monkeypatch.delenv("ASSOCARRAY_USE_DEV_LOGGER", raising=False)
    assert isinstance(logconfig.get_handler(), logging.NullHandler)


def test_dev_handler(monkeypatch):
    monkeypatch.setenv("ASSOCARRAY_USE_DEV_LOGGER", "true")
    handler = logconfig.get_handler(level="DEBUG", fmt="%(message)s")
    assert isinstance(handler, logging.StreamHandler)
    assert logging.DEBUG == handler.level
    assert "%(message)s" == handler.formatter._fmt


def test_install_null_handler_once(package_logger):
    package_logger.handlers = []
    logconfig.install_null_handler()
    logconfig.install_null_handler()
    assert 1 == len(package_logger.handlers)
    assert isinstance(package_logger.handlers[0], logging.NullHandler)


def test_configure_root_logger(monkeypatch, package_logger):
    monkeypatch.delenv("ASSOCARRAY_USE_DEV_LOGGER", raising=False)
    package_logger.handlers = []
    logger = logconfig.configure_root_logger(level="INFO")
    assert logger is package_logger
    assert logging.INFO == package_logger.level
    assert 1 == len(package_logger.handlers)

    logconfig.configure_root_logger(level="INFO")
    assert 1 == len(package_logger.handlers)


def test_configure_root_logger_keeps_host_handlers(package_logger):
    host = logging.StreamHandler()
    package_logger.addHandler(host)
    logconfig.configure_root_logger(level="INFO")
    assert host in package_logger.handlers


def test_package_import_keeps_host_logging(package_logger):
    host = logging.StreamHandler()
    package_logger.setLevel(logging.DEBUG)
    package_logger.addHandler(host)

    importlib.reload(assocarray)

    assert logging.DEBUG == package_logger.level
    assert host in package_logger.handlers
    assert any(isinstance(h, logging.NullHandler) for h in package_logger.handlers)


def test_expand_logs_capacity(caplog):
    arr = AssociativeArray(1)
    arr.set("a", 1)
    with caplog.at_level(logging.DEBUG, logger="assocarray.array"):
        arr.set("b", 2)
    assert "Expanded associative array capacity from 1 to 2" in caplog.text


def test_clone_logs_at_trace(caplog):
    arr = AssociativeArray.from_coll({"a": 1})
    with caplog.at_level(logconfig.TRACE, logger="assocarray.array"):
        arr.clone()
    assert "Cloned associative array with 1 pairs" in caplog.text
