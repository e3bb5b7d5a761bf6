import logging

import pytest

from pullstream import Stream, config_logger
from pullstream._logging import get_log_level, log_level_from_str


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    converter = logging.Formatter.converter
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.Formatter.converter = converter
    logging.captureWarnings(False)


def test_log_level_from_str():
    assert log_level_from_str('debug') == logging.DEBUG
    assert log_level_from_str('WARNING') == logging.WARNING
    with pytest.raises(ValueError):
        log_level_from_str('loud')


def test_config_logger(restore_logging):
    config_logger('debug')
    assert get_log_level() == 'DEBUG'
    assert len(logging.getLogger().handlers) == 1

    config_logger(logging.ERROR)
    assert get_log_level() == 'ERROR'
    assert len(logging.getLogger().handlers) == 1


def test_config_logger_env(restore_logging, monkeypatch):
    monkeypatch.setenv('LOGLEVEL', 'warning')
    config_logger()
    assert get_log_level() == 'WARNING'

    monkeypatch.delenv('LOGLEVEL')
    config_logger()
    assert get_log_level() == 'INFO'


def test_timezone(restore_logging, capsys):
    config_logger('info', timezone='Asia/Tokyo', with_thread_name=True)
    logging.getLogger('pullstream.test').info('hello')
    err = capsys.readouterr().err
    assert 'Asia/Tokyo; INFO; pullstream.test' in err
    assert '[MainThread]  hello' in err


def test_debug_records(restore_logging, caplog):
    with caplog.at_level(logging.DEBUG, logger='pullstream'):
        Stream('ab').enumerate().to_list()
    assert any('handed over to DoubleStream' in r.getMessage() for r in caplog.records)

