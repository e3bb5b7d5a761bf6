from __future__ import annotations

import itertools
import logging
from collections.abc import Callable
from numbers import Real
from typing import Any, Optional

from ._common import check_callable
from ._enumerator import enumerator_of
from ._stages import Source, Zipper
from ._streamer import DoubleStream, Stream
from .errors import InvalidArgumentError, RangeStepError

logger = logging.getLogger(__name__)


def _progression(start, end, step):
    # `start + i * step` rather than repeated addition, so that float
    # steps do not accumulate rounding errors.
    for i in itertools.count():
        x = start + i * step
        if (step > 0 and x > end) or (step < 0 and x < end):
            break
        yield x


class Range(Stream):
    """
    An arithmetic progression from ``start`` to ``end``, both inclusive.

    With a single argument, the range is ``1, 2, ..., start``.
    The direction is that from ``start`` to ``end``; the default step is
    ``1`` or ``-1`` accordingly. A ``step`` whose sign disagrees with the
    direction is an error. Values beyond ``end`` are never produced.

    >>> Range(5).to_list()
    [1, 2, 3, 4, 5]
    >>> Range(5, 1).to_list()
    [5, 4, 3, 2, 1]
    >>> Range(1, 10, 3).to_list()
    [1, 4, 7, 10]
    >>> Range(0, 1, 0.25).to_list()
    [0.0, 0.25, 0.5, 0.75, 1.0]
    >>> Range(1, 10, -1)
    Traceback (most recent call last):
        ...
    pullstream.errors.RangeStepError: step -1 goes the wrong way from 1 to 10
    """

    def __init__(
        self, start: Real, end: Optional[Real] = None, step: Optional[Real] = None
    ):
        if end is None:
            start, end = 1, start
        for name, v in (('start', start), ('end', end), ('step', step)):
            if v is not None and (isinstance(v, bool) or not isinstance(v, Real)):
                raise InvalidArgumentError(f"`{name}` must be a real number; got {v!r}")
        direction = (end > start) - (end < start)
        if step is None:
            step = direction or 1
        elif step == 0:
            raise RangeStepError('step must not be 0')
        elif direction and (step > 0) != (direction > 0):
            raise RangeStepError(
                f"step {step} goes the wrong way from {start} to {end}"
            )
        self.start = start
        self.end = end
        self.step = step
        logger.debug("range from %s to %s by %s", start, end, step)
        super().__init__(_progression(start, end, step))

    def __repr__(self):
        return f'{type(self).__name__}({self.start}, {self.end}, {self.step})'


def zip_streams(first: Any, second: Any, /) -> DoubleStream:
    """
    Pair up the values of two sources in lock step.
    The result ends as soon as either source is exhausted.

    >>> zip_streams([1, 2, 3], 'abcde').to_list()
    [(1, 'a'), (2, 'b'), (3, 'c')]
    """
    left = enumerator_of(first, 1)
    right = enumerator_of(second, 1)
    source = Source(left)
    return DoubleStream._from_streamlets([source, Zipper(source, right)])


def zip_with(first: Any, second: Any, func: Callable[[Any, Any], Any], /) -> Stream:
    """
    Like :func:`zip_streams`, but each pair is combined by ``func``.

    >>> zip_with([1, 2, 3], [10, 20], lambda x, y: x + y).to_list()
    [11, 22]
    """
    check_callable(func, 'func')
    left = enumerator_of(first, 1)
    right = enumerator_of(second, 1)
    source = Source(left)
    return Stream._from_streamlets([source, Zipper(source, right, func=func)])
