"""
Configure logging, mainly the format.

A call to the function ``config_logger`` in a launching script is all that is needed to set up the logging format.
Usually the 'level' argument is the only argument one needs to customize::

  config_logger(level='debug')

If `level` is not specified, environment variable `LOGLEVEL` is used;
if that is not set, a default level (currently 'info') is used.

Do not call this in library modules.
Library modules should have ::

   logger = logging.getLogger(__name__)

and then just use ``logger`` to write logs without concern about formatting,
destination of the log message, etc.
"""

import logging
import os
import warnings
from datetime import datetime
from logging import Formatter
from typing import Optional, Union

import pytz

DEFAULT_LOG_LEVEL = 'info'


def log_level_from_str(level: str) -> int:
    '''
    `level`: 'debug', 'info', etc.
    '''
    try:
        return getattr(logging, level.upper())
    except AttributeError:
        raise ValueError(f"unknown log level {level!r}") from None


def _make_config(
    *,
    level: Union[str, int, None] = None,
    with_thread_name: bool = False,
    timezone: str = 'UTC',
    **kwargs,
) -> dict:
    if level is None:
        level = os.environ.get('LOGLEVEL', DEFAULT_LOG_LEVEL)
    if level not in (
        logging.DEBUG,
        logging.INFO,
        logging.WARNING,
        logging.ERROR,
        logging.CRITICAL,
    ):
        level = log_level_from_str(level)

    tz = pytz.timezone(timezone)

    # Assigned on the class, this becomes a method; the record's timestamp
    # is the last argument.
    def converter(*args):
        return datetime.fromtimestamp(args[-1], tz).timetuple()

    Formatter.converter = converter

    datefmt = '%Y-%m-%d %H:%M:%S'

    msg = (
        '[%(asctime)s.%(msecs)03d '
        + timezone
        + '; %(levelname)s; %(name)s, %(funcName)s, %(lineno)d]'
    )
    msg += '  '

    if with_thread_name:
        fmt = f'{msg}[%(threadName)s]  %(message)s'
    else:
        fmt = f'{msg}%(message)s'

    return dict(format=fmt, datefmt=datefmt, level=level, **kwargs)


def config_logger(
    level: Union[str, int, None] = None,
    *,
    with_thread_name: bool = False,
    timezone: str = 'UTC',
    **kwargs,
) -> None:
    """
    Parameters
    ----------
    level
        'debug', 'info', 'warning', 'error', 'critical', or the corresponding
        ``logging`` constant.
    timezone
        Name of the timezone, as known to ``pytz``, in which timestamps are shown.
    **kwargs
        Passed on to ``logging.basicConfig``.
    """
    kw = _make_config(
        level=level, with_thread_name=with_thread_name, timezone=timezone, **kwargs
    )

    rootlogger = logging.getLogger()
    if rootlogger.hasHandlers():
        rootlogger.handlers = []

    logging.basicConfig(**kw)

    logging.captureWarnings(True)
    warnings.filterwarnings('default', category=DeprecationWarning)


def get_log_level(name: Optional[str] = None) -> str:
    '''
    Return uppercase 'DEBUG', 'INFO', etc., the effective level of the named logger.
    '''
    return logging.getLevelName(logging.getLogger(name).getEffectiveLevel())
