"""
The module ``pullstream.streamer`` provides lazy, single-pass stream processing.

A source of data elements goes through a series of operations.
The output from one operation becomes the input to the next operation.
These operations perform mapping (simple transformation), filtering,
flattening, windowing, deduplication, etc.
At the end, a "terminal" operation consumes the stream: it reduces,
groups, joins, or collects the elements.

To fix terminology, we'll call the main methods of the class ``Stream`` "operators" or "operations".
Each operator adds a "streamlet". The behavior of a ``Stream`` object is embodied by its chain of
streamlets, which is accessible via the public attribute ``Stream.streamlets``
(although there is little need to access it).
"Consumption" of the stream entails "pulling" at the end of the last streamlet and,
in a chain reaction, consequently pulls each data element through the entire series
of streamlets or operators. Nothing is pulled until it is needed, and nothing
is pulled more than once.


Introduction
============

Suppose we have a (possibly unlimited) source of values we want to process.
We feed this source into a :class:`Stream` object:

>>> from pullstream.streamer import Stream
>>> data_stream = Stream(range(100))

The input is often a list, but more generally, it can be any
`Iterable`_, possibly unlimited, or any :class:`~pullstream.Enumerable`.
Let's add a couple of operators:

>>> data_stream.filter(lambda x: x % 3 == 0).map(lambda x: x * 2)  # doctest: +ELLIPSIS
<pullstream._streamer.Stream object at 0x...>

Adding the operators is just "setup"--nothing runs until we start to retrieve results.
(An operator method modifies ``self``, but also returns ``self`` in the end, hence facilitating chained calls.)
A terminal operation retrieves the results:

>>> data_stream.sum()
3366

What is the expected result?

>>> sum(x * 2 for x in range(100) if x % 3 == 0)
3366

After the terminal operation, the stream is "consumed" and gone.
To go over the data again, create a new ``Stream`` from the source.

Because nothing is pulled before it is needed, an unlimited source is fine
as long as some operator ends the stream:

>>> Stream.iterate(1, lambda x: x + 1).map(lambda x: x * x).take_while(lambda x: x < 50).to_list()
[1, 4, 9, 16, 25, 36, 49]

Pairs
=====

A :class:`DoubleStream` carries ``(key, value)`` pairs. Functions given to its
operators take two arguments:

>>> from pullstream.streamer import DoubleStream
>>> DoubleStream({'x': 1, 'y': 2, 'z': 3}).retain_if(lambda k, v: v > 1).to_dict()
{'y': 2, 'z': 3}

Some operators move between the two kinds of streams:

>>> Stream('abc').enumerate().map(lambda i, c: c * (i + 1)).join('-')
'a-bb-ccc'

Operators
=========

One-to-one (will not change the elements' count or order):
    - :meth:`~Stream.map`
    - :meth:`~Stream.accumulate`
    - :meth:`~Stream.peek`

Many-to-one, one-to-many, many-to-many:
    - :meth:`~Stream.batch`
    - :meth:`~Stream.window`
    - :meth:`~Stream.flat_map`
    - :meth:`~Stream.gather`

Selection or filtering (may drop elements):
    - :meth:`~Stream.retain_if` (:meth:`~Stream.filter`)
    - :meth:`~Stream.remove_if`
    - :meth:`~Stream.distinct`
    - :meth:`~Stream.limit`
    - :meth:`~Stream.skip`
    - :meth:`~Stream.take_while`
    - :meth:`~Stream.drop_while`
    - :meth:`~Stream.tail`

Terminal:
    - :meth:`~Stream.for_each`, :meth:`~Stream.drain`
    - :meth:`~Stream.reduce`, :meth:`~Stream.sum`, :meth:`~Stream.average`,
      :meth:`~Stream.min`, :meth:`~Stream.max`, :meth:`~Stream.statistics`
    - :meth:`~Stream.find`, :meth:`~Stream.any`, :meth:`~Stream.all`, :meth:`~Stream.none`
    - :meth:`~Stream.join`, :meth:`~Stream.frequency`, :meth:`~Stream.group`,
      :meth:`~Stream.partition`
    - :meth:`~Stream.collect`, :meth:`~Stream.to_list`

All these methods preserve the order of the elements, with the only exception
:meth:`~Stream.sorted`.
"""

from ._common import ABSENT, NOTSET, AbsentType
from ._enumerator import Enumerable, Enumerator, enumerator_of
from ._sources import Range, zip_streams, zip_with
from ._streamer import BaseStream, DoubleStream, Stream, to_double_stream, to_stream

__all__ = [
    'ABSENT',
    'AbsentType',
    'BaseStream',
    'DoubleStream',
    'Enumerable',
    'Enumerator',
    'NOTSET',
    'Range',
    'Stream',
    'enumerator_of',
    'to_double_stream',
    'to_stream',
    'zip_streams',
    'zip_with',
]
