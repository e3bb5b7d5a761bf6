"""
Streamlets.

Each class here wraps an upstream iterable of element tuples and is itself
an iterable of element tuples. Nothing happens until ``__iter__`` is called
and the resulting generator is pulled; a generator pulls its upstream only as
many times as it needs to decide its next output.
"""

from __future__ import annotations

import functools
import logging
from collections import deque
from collections.abc import Callable, Iterable
from typing import Any, Optional

from ._common import element_value
from ._enumerator import Enumerator, enumerator_of

logger = logging.getLogger(__name__)


class Source(Iterable):
    def __init__(self, enumerator: Enumerator, /):
        self._enumerator = enumerator

    def __iter__(self):
        return iter(self._enumerator.pull, None)


class Mapper(Iterable):
    def __init__(self, instream: Iterable, func: Callable[..., Any], /):
        self._instream = instream
        self.func = func

    def __iter__(self):
        func = self.func
        for elem in self._instream:
            yield (func(*elem),)


class PairMapper(Iterable):
    """
    ``func`` returns a ``(key, value)`` pair for every element.
    """

    def __init__(self, instream: Iterable, func: Callable[..., Any], /):
        self._instream = instream
        self.func = func

    def __iter__(self):
        func = self.func
        for elem in self._instream:
            k, v = func(*elem)
            yield (k, v)


class SlotMapper(Iterable):
    # Transform one slot of a pair, leaving the other alone.
    def __init__(self, instream: Iterable, func: Callable[[Any], Any], /, slot: int):
        assert slot in (0, 1)
        self._instream = instream
        self.func = func
        self.slot = slot

    def __iter__(self):
        func = self.func
        if self.slot == 0:
            for k, v in self._instream:
                yield (func(k), v)
        else:
            for k, v in self._instream:
                yield (k, func(v))


class Filter(Iterable):
    def __init__(
        self, instream: Iterable, func: Callable[..., bool], /, keep: bool = True
    ):
        self._instream = instream
        self.func = func
        self.keep = keep

    def __iter__(self):
        func = self.func
        if self.keep:
            for elem in self._instream:
                if func(*elem):
                    yield elem
        else:
            for elem in self._instream:
                if not func(*elem):
                    yield elem


class FlatMapper(Iterable):
    """
    Each upstream element is turned into a nested source,
    which is drained completely before the next upstream element is pulled.
    """

    def __init__(
        self, instream: Iterable, func: Optional[Callable[..., Any]], /, arity: int = 1
    ):
        self._instream = instream
        self.func = func
        self.arity = arity

    def __iter__(self):
        func = self.func
        arity = self.arity
        for elem in self._instream:
            if func is None:
                nested = element_value(elem)
            else:
                nested = func(*elem)
            yield from iter(enumerator_of(nested, arity).pull, None)


class Distinct(Iterable):
    def __init__(self, instream: Iterable, key: Optional[Callable[..., Any]], /):
        self._instream = instream
        self.key = key

    def __iter__(self):
        seen = set()
        key = self.key
        for elem in self._instream:
            z = element_value(elem) if key is None else key(*elem)
            if z in seen:
                continue
            seen.add(z)
            yield elem


class Header(Iterable):
    def __init__(self, instream: Iterable, /, n: int):
        """
        Keeps the first ``n`` elements and ignores all the rest.

        Upstream is pulled at most ``n`` times.
        """
        assert n >= 0
        self._instream = instream
        self.n = n

    def __iter__(self):
        nn = self.n
        if nn == 0:
            return
        n = 0
        for elem in self._instream:
            yield elem
            n += 1
            if n >= nn:
                break


class Skipper(Iterable):
    def __init__(self, instream: Iterable, /, n: int):
        assert n >= 0
        self._instream = instream
        self.n = n

    def __iter__(self):
        n = self.n
        for elem in self._instream:
            if n > 0:
                n -= 1
                continue
            yield elem


class TakeWhile(Iterable):
    def __init__(self, instream: Iterable, func: Callable[..., bool], /):
        self._instream = instream
        self.func = func

    def __iter__(self):
        func = self.func
        for elem in self._instream:
            if not func(*elem):
                break
            yield elem


class DropWhile(Iterable):
    def __init__(self, instream: Iterable, func: Callable[..., bool], /):
        self._instream = instream
        self.func = func

    def __iter__(self):
        func = self.func
        dropping = True
        for elem in self._instream:
            if dropping:
                if func(*elem):
                    continue
                dropping = False
            yield elem


class Peeker(Iterable):
    def __init__(self, instream: Iterable, action: Callable[..., Any], /):
        self._instream = instream
        self.action = action

    def __iter__(self):
        action = self.action
        for elem in self._instream:
            action(*elem)
            yield elem


class Sorter(Iterable):
    """
    Sorting needs to see the whole input before yielding the first element.
    The sort is stable.
    """

    def __init__(
        self,
        instream: Iterable,
        /,
        comparator: Optional[Callable[[Any, Any], int]] = None,
        key: Optional[Callable[..., Any]] = None,
        reverse: bool = False,
    ):
        self._instream = instream
        self.comparator = comparator
        self.key = key
        self.reverse = reverse

    def __iter__(self):
        data = list(self._instream)
        key = self.key
        if key is not None:
            if self.comparator is not None:
                cmp_key = functools.cmp_to_key(self.comparator)
                data.sort(key=lambda elem: cmp_key(key(*elem)), reverse=self.reverse)
            else:
                data.sort(key=lambda elem: key(*elem), reverse=self.reverse)
        elif self.comparator is not None:
            cmp_key = functools.cmp_to_key(self.comparator)
            data.sort(key=lambda elem: cmp_key(element_value(elem)), reverse=self.reverse)
        else:
            data.sort(key=element_value, reverse=self.reverse)
        yield from data


class Concatenator(Iterable):
    def __init__(self, instream: Iterable, other: Enumerator, /):
        self._instream = instream
        self._other = other

    def __iter__(self):
        yield from self._instream
        yield from iter(self._other.pull, None)


class Indexer(Iterable):
    def __init__(self, instream: Iterable, /, start: int = 0):
        self._instream = instream
        self.start = start

    def __iter__(self):
        idx = self.start
        for (x,) in self._instream:
            yield (idx, x)
            idx += 1


class KeyMaker(Iterable):
    def __init__(self, instream: Iterable, func: Callable[[Any], Any], /):
        self._instream = instream
        self.func = func

    def __iter__(self):
        func = self.func
        for (x,) in self._instream:
            yield (func(x), x)


class Swapper(Iterable):
    def __init__(self, instream: Iterable, /):
        self._instream = instream

    def __iter__(self):
        for k, v in self._instream:
            yield (v, k)


class Zipper(Iterable):
    """
    Pulls the left side, then the right side, in lock step.

    Stops as soon as either side is exhausted; if the left side is exhausted,
    the right side is not pulled again.
    """

    def __init__(
        self,
        instream: Iterable,
        other: Enumerator,
        /,
        func: Optional[Callable[[Any, Any], Any]] = None,
    ):
        self._instream = instream
        self._other = other
        self.func = func

    def __iter__(self):
        pull = self._other.pull
        func = self.func
        for left in self._instream:
            right = pull()
            if right is None:
                break
            x = element_value(left)
            y = element_value(right)
            if func is None:
                yield (x, y)
            else:
                yield (func(x, y),)


class Gathering(Iterable):
    """
    Drives a :class:`~pullstream.gatherers.Gatherer`.

    Elements pushed during one ``invoke`` are forwarded downstream in order
    before ``invoke`` is called again. Once ``invoke`` returns ``False``,
    the gatherer's ``finish`` is called to flush whatever it holds,
    and the stage is done for good.
    """

    def __init__(self, instream: Iterable, gatherer, /, arity: int = 1):
        self._instream = instream
        self.gatherer = gatherer
        self.arity = arity

    def __iter__(self):
        gatherer = self.gatherer
        out_arity = gatherer.arity
        upstream = Enumerator(self._instream, self.arity)
        pending = deque()

        def push(*slots):
            if len(slots) != out_arity:
                raise TypeError(
                    f"{type(gatherer).__name__} pushes {out_arity} value(s) per element; got {len(slots)}"
                )
            pending.append(slots)

        gatherer.initialize()
        while True:
            more = gatherer.invoke(upstream, push)
            while pending:
                yield pending.popleft()
            if not more:
                break
        logger.debug(
            "gatherer %s terminated; upstream exhausted: %s",
            type(gatherer).__name__,
            upstream.exhausted,
        )
        gatherer.finish(push)
        while pending:
            yield pending.popleft()
