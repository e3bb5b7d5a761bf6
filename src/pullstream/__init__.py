"""
The package ``pullstream`` provides lazily evaluated, single-pass stream processing.

A source of values (a list, a dict, a generator, a file, anything
"enumerable", possibly unlimited) is transformed through a chain of
operators (mapping, filtering, flattening, windowing, deduplication, ...)
and consumed by a terminal operation (reduction, grouping, joining,
collection into a container, statistics) without materializing
the intermediate results.

1. :class:`Stream` for single values and :class:`DoubleStream` for
   ``(key, value)`` pairs; see :mod:`pullstream.streamer`.
2. :mod:`pullstream.gatherers`: stateful many-to-many operators such as
   fixed and sliding windows and running scans.
3. :mod:`pullstream.collectors`: composable terminal reductions such as
   (nested) grouping and partitioning.
4. Sources: :class:`Range`, :func:`zip_streams`, :func:`zip_with`,
   :meth:`Stream.of`, :meth:`Stream.generate`, :meth:`Stream.iterate`.

>>> from pullstream import Stream
>>> Stream([1, 2, 2, 3, 1]).distinct().to_list()
[1, 2, 3]

To install, do

::

   python3 -m pip install pullstream
"""

__version__ = '0.3.0'


from . import collectors, errors, gatherers, streamer
from ._logging import config_logger
from .collectors import Collector
from .errors import (
    ConfigurationError,
    InvalidArgumentError,
    NotCallableError,
    NotIterableError,
    RangeStepError,
    StreamConsumedError,
    StreamError,
)
from .gatherers import Gatherer
from .streamer import (
    ABSENT,
    NOTSET,
    AbsentType,
    BaseStream,
    DoubleStream,
    Enumerable,
    Enumerator,
    Range,
    Stream,
    enumerator_of,
    to_double_stream,
    to_stream,
    zip_streams,
    zip_with,
)
