"""Tests for logging setup."""
import logging
import logging.handlers

import pytest

from davisarchive.logger import log_level, remove_handler, setup_handler


@pytest.fixture
def package_logger():
    package = logging.getLogger('davisarchive')
    level = package.level
    yield package
    package.setLevel(level)


def test_log_level():
    assert log_level(0) == logging.WARNING
    assert log_level(1) == logging.INFO
    assert log_level(2) == logging.DEBUG
    assert log_level(5) == logging.DEBUG


def test_setup_handler_configures_package_logger(package_logger):
    root = logging.getLogger('')
    root_handlers = list(root.handlers)
    root_level = root.level
    handler = setup_handler(2)
    try:
        assert handler in package_logger.handlers
        assert package_logger.level == logging.DEBUG
        assert root.handlers == root_handlers
        assert root.level == root_level
    finally:
        remove_handler(handler)
    assert handler not in package_logger.handlers


def test_log_file(package_logger, tmp_path):
    logfile = tmp_path / 'davisarchive.log'
    handler = setup_handler(0, str(logfile))
    try:
        assert isinstance(handler, logging.handlers.RotatingFileHandler)
        logging.getLogger('davisarchive.archive').warning('bad record')
        logging.getLogger('davisarchive.archive').info('not shown')
        logging.getLogger('elsewhere').warning('not ours')
        handler.flush()
    finally:
        remove_handler(handler)
    text = logfile.read_text()
    assert 'WARNING:davisarchive.archive:bad record' in text
    assert 'not shown' not in text
    assert 'not ours' not in text
