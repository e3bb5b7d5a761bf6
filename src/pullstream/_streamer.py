# Ownership
#
# A stream owns the chain of streamlets that feeds it. An operator that keeps
# the arity (e.g. `Stream.map`) appends a streamlet and returns the same object.
# An operator that changes the arity (e.g. `DoubleStream.map`, `Stream.enumerate`)
# hands the chain over to a new stream object and the old object is "moved";
# any further use of the old object raises `StreamConsumedError`.
#
# A stream is single-pass. Once pulling has started, no operator can be added.

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Optional

from deprecation import deprecated
from typing_extensions import Self  # In 3.11, import this from `typing`

from . import _collector
from ._collector import Collector, Statistics
from ._common import (
    ABSENT,
    DEFAULT_PAIR_DELIMITER,
    DEFAULT_PEEK_INTERVAL,
    NOTSET,
    T,
    bind,
    check_callable,
    check_count,
    check_optional_callable,
    check_str,
    element_value,
)
from ._enumerator import Enumerator, _reshape, enumerator_of
from ._gatherer import Gatherer, last, scan, window_fixed, window_sliding
from ._stages import (
    Concatenator,
    Distinct,
    DropWhile,
    Filter,
    FlatMapper,
    Gathering,
    Header,
    Indexer,
    KeyMaker,
    Mapper,
    PairMapper,
    Peeker,
    SlotMapper,
    Skipper,
    Sorter,
    Source,
    Swapper,
    TakeWhile,
    Zipper,
)
from .errors import InvalidArgumentError, StreamConsumedError

logger = logging.getLogger(__name__)


class BaseStream(Enumerator):
    """
    Machinery shared by :class:`Stream` and :class:`DoubleStream`.

    A stream is itself an :class:`~pullstream.Enumerator` of its arity,
    hence it can be pulled directly, iterated over, or used as the source
    of another stream.
    """

    arity: int = 1

    def __init__(self, instream: Any = (), /):
        """
        Parameters
        ----------
        instream
            The source of elements, possibly unlimited: any object that
            :func:`~pullstream.enumerator_of` accepts, such as a list, dict,
            str, generator, :class:`~pullstream.Enumerable`, or another stream.
        """
        self._init_chain([Source(enumerator_of(instream, self.arity))])

    def _init_chain(self, streamlets: list[Iterable]) -> None:
        self.streamlets: list[Iterable] = streamlets
        self._enumerator: Optional[Enumerator] = None
        self._moved = False

    @classmethod
    def _from_streamlets(cls, streamlets: list[Iterable]) -> Self:
        obj = cls.__new__(cls)
        obj._init_chain(streamlets)
        return obj

    # Chaining

    def _check_owned(self) -> None:
        if self._moved:
            raise StreamConsumedError(
                f"this {type(self).__name__} has been handed over to another stream"
            )

    def _check_not_started(self) -> None:
        self._check_owned()
        if self._enumerator is not None:
            raise StreamConsumedError(
                f"can not add an operator to this {type(self).__name__} after it has started"
            )

    def _chain(self, streamlet_cls, /, *args, **kwargs) -> Self:
        self._check_not_started()
        self.streamlets.append(streamlet_cls(self.streamlets[-1], *args, **kwargs))
        return self

    def _transfer(self, arity: int, streamlet_cls, /, *args, **kwargs) -> BaseStream:
        self._check_not_started()
        streamlet = streamlet_cls(self.streamlets[-1], *args, **kwargs)
        cls = _stream_class(arity)
        new = cls._from_streamlets(self.streamlets + [streamlet])
        self._moved = True
        logger.debug(
            "%s handed over to %s via %s",
            type(self).__name__,
            cls.__name__,
            streamlet_cls.__name__,
        )
        return new

    def _release(self, arity: int) -> Enumerator:
        # Give up ownership to whoever is going to pull the elements.
        self._check_owned()
        enumerator = self._enumerator
        if enumerator is None:
            enumerator = Enumerator(self.streamlets[-1], self.arity)
        self._moved = True
        return _reshape(enumerator, arity)

    # Pulling

    def _get_enumerator(self) -> Enumerator:
        self._check_owned()
        if self._enumerator is None:
            self._enumerator = Enumerator(self.streamlets[-1], self.arity)
        return self._enumerator

    def pull(self) -> Optional[tuple]:
        return self._get_enumerator().pull()

    @property
    def exhausted(self) -> bool:
        return self._enumerator is not None and self._enumerator.exhausted

    def _elements(self) -> Iterator[tuple]:
        return iter(self._get_enumerator().pull, None)

    # Intermediate operators that keep the arity

    def retain_if(self, func: Callable[..., bool], /, **kwargs) -> Self:
        """
        Keep the elements for which ``func`` returns true.

        ``func`` receives the slots of the element as positional arguments,
        that is, ``func(x)`` in a :class:`Stream` and ``func(key, value)``
        in a :class:`DoubleStream`, followed by ``**kwargs`` if any.
        """
        check_callable(func, 'func')
        return self._chain(Filter, bind(func, kwargs), keep=True)

    def filter(self, func: Callable[..., bool], /, **kwargs) -> Self:
        """
        The same as :meth:`retain_if`.
        """
        return self.retain_if(func, **kwargs)

    def remove_if(self, func: Callable[..., bool], /, **kwargs) -> Self:
        """
        Drop the elements for which ``func`` returns true.
        """
        check_callable(func, 'func')
        return self._chain(Filter, bind(func, kwargs), keep=False)

    def distinct(self, key: Optional[Callable[..., Any]] = None, /) -> Self:
        """
        Drop elements whose key has been seen before; the first occurrence wins.
        The key is the element's value unless ``key`` is given.
        Keys must be hashable.
        """
        check_optional_callable(key, 'key')
        return self._chain(Distinct, key)

    def limit(self, n: int) -> Self:
        """
        Take the first ``n`` elements and ignore the rest.
        If the entire stream has less than ``n`` elements, just take all of them.

        Upstream is pulled at most ``n`` times, hence this is safe on
        an unlimited stream.
        """
        check_count(n, 'n')
        return self._chain(Header, n)

    def skip(self, n: int) -> Self:
        """
        Drop the first ``n`` elements.
        """
        check_count(n, 'n')
        return self._chain(Skipper, n)

    def take_while(self, func: Callable[..., bool], /) -> Self:
        """
        Take elements as long as ``func`` holds; the stream ends at the first
        element for which it does not.
        """
        check_callable(func, 'func')
        return self._chain(TakeWhile, func)

    def drop_while(self, func: Callable[..., bool], /) -> Self:
        """
        Drop elements as long as ``func`` holds; from the first element
        for which it does not, everything is kept.
        """
        check_callable(func, 'func')
        return self._chain(DropWhile, func)

    def peek(
        self,
        action: Optional[Callable[..., Any]] = None,
        /,
        *,
        print_func: Optional[Callable[[str], None]] = None,
        interval: int | float = DEFAULT_PEEK_INTERVAL,
        prefix: str = '',
        suffix: str = '',
    ) -> Self:
        """
        Take a peek at the data element *before* it continues in the stream.

        If ``action`` is given, it is called with the slots of every element;
        its return value is ignored.

        Otherwise, elements are printed by ``print_func`` under conditions
        controlled by ``interval``.

        Parameters
        ----------
        print_func
            A function that will be used to print messages.
            This should take a str and return nothing.

            The default is the built-in ``print``. It's often useful
            to pass in logging function such as ``logger.info``.
        interval
            Print out the data element at this interval. The default is 1,
            that is, print every element.

            If it is a float, then it must be between 0 and 1 open-open.
            This will be take as the (target) fraction of elements that are printed.
        """
        if action is not None:
            check_callable(action, 'action')
            return self._chain(Peeker, action)

        if isinstance(interval, float):
            if not 0 < interval < 1:
                raise InvalidArgumentError(
                    f"a float `interval` must be in (0, 1); got {interval}"
                )
        else:
            check_count(interval, 'interval', minimum=1)
        check_optional_callable(print_func, 'print_func')
        if prefix:
            if not prefix.endswith(' ') and not prefix.endswith('\n'):
                prefix = prefix + ' '
        if suffix:
            if not suffix.startswith(' ') and not suffix.startswith('\n'):
                suffix = ' ' + suffix

        class Printer:
            def __init__(self):
                self._idx = 0
                self._print_func = print if print_func is None else print_func
                self._interval = interval
                self._prefix = prefix
                self._suffix = suffix

            def __call__(self, *slots):
                self._idx += 1
                if self._interval >= 1:
                    if self._idx % self._interval != 0:
                        return
                elif random.random() >= self._interval:
                    return
                self._print_func(f'{self._prefix}#{self._idx}:')
                self._print_func(f'{element_value(slots)}{self._suffix}')

        return self._chain(Peeker, Printer())

    def sorted(
        self,
        comparator: Optional[Callable[[Any, Any], int]] = None,
        /,
        *,
        key: Optional[Callable[..., Any]] = None,
        reverse: bool = False,
    ) -> Self:
        """
        Sort the elements, by natural order of the values, or by
        ``comparator(a, b)`` (negative, zero, or positive), or by ``key``.
        The sort is stable.

        .. note:: This needs to walk through the entire input stream before
            yielding the first element, hence it can't be used on an unlimited stream.
        """
        check_optional_callable(comparator, 'comparator')
        check_optional_callable(key, 'key')
        return self._chain(Sorter, comparator=comparator, key=key, reverse=reverse)

    def concat(self, other: Any, /) -> Self:
        """
        Append the elements of ``other`` after the elements of this stream.
        """
        return self._chain(Concatenator, enumerator_of(other, self.arity))

    def tail(self, n: int) -> Self:
        """
        Take the last ``n`` elements and ignore all the previous ones.
        If the entire stream has less than ``n`` elements, just take all of them.

        .. note:: ``n`` data elements need to be kept in memory, hence ``n`` should
            not be "too large" for the typical size of the data elements.
        """
        return self.gather(last(n, arity=self.arity))

    def gather(self, gatherer: Gatherer, /) -> BaseStream:
        """
        Run a :class:`~pullstream.gatherers.Gatherer` on the stream.

        The result is a :class:`Stream` or a :class:`DoubleStream` depending
        on the gatherer's ``arity``.
        """
        if not isinstance(gatherer, Gatherer):
            raise InvalidArgumentError(
                f"`gatherer` must be a Gatherer; got {type(gatherer).__name__}"
            )
        if gatherer.arity == self.arity:
            return self._chain(Gathering, gatherer, arity=self.arity)
        return self._transfer(gatherer.arity, Gathering, gatherer, arity=self.arity)

    # Terminal operators

    def for_each(self, action: Callable[..., Any], /) -> None:
        check_callable(action, 'action')
        for elem in self._elements():
            action(*elem)

    def drain(self) -> int:
        """
        Drain off the stream and return the number of elements processed.

        This method is for the side effect: the entire stream has been processed
        by all the operations and results have been taken care of, for example,
        the final operation may have saved results in a database.
        """
        n = 0
        for _ in self._elements():
            n += 1
        return n

    def count(self) -> int:
        return self.drain()

    def collect(self, collector: Collector | Callable | None = None, /):
        """
        Run a terminal reduction.

        - ``None``: return all the values in a list.
        - a :class:`~pullstream.collectors.Collector`: return its finished result.
        - any other callable: it's called with all the values as positional
          arguments, e.g. ``Stream([3, 1, 2]).collect(max)`` is ``3``.

        .. warning:: Do not collect "big data" into a list.
        """
        if collector is None:
            return [element_value(elem) for elem in self._elements()]
        if isinstance(collector, Collector):
            return collector.collect(self._elements())
        check_callable(collector, 'collector')
        return collector(*(element_value(elem) for elem in self._elements()))

    def to_list(self) -> list:
        return self.collect()

    def to_set(self) -> set:
        return self.collect(_collector.to_set())

    def reduce(self, combiner: Callable[[Any, Any], Any], identity: Any = NOTSET, /):
        """
        Fold the values from left to right with ``combiner(acc, value)``.

        If ``identity`` is given, it is the starting value. Otherwise the first
        value is, and an empty stream gives :data:`~pullstream.ABSENT`.
        ``ABSENT`` values are skipped.
        """
        check_callable(combiner, 'combiner')
        return self.collect(_collector.reducing(combiner, identity))

    def find(self, func: Optional[Callable[..., bool]] = None, /, *, default=ABSENT):
        """
        Return the first value for which ``func`` is true (or simply the first
        value if ``func`` is ``None``); ``default`` if there is none.

        This stops pulling as soon as a match is found.
        """
        check_optional_callable(func, 'func')
        for elem in self._elements():
            if func is None or func(*elem):
                return element_value(elem)
        return default

    def first(self, *, default=ABSENT):
        return self.find(default=default)

    def any(self, func: Callable[..., bool], /) -> bool:
        check_callable(func, 'func')
        for elem in self._elements():
            if func(*elem):
                return True
        return False

    def all(self, func: Callable[..., bool], /) -> bool:
        check_callable(func, 'func')
        for elem in self._elements():
            if not func(*elem):
                return False
        return True

    def none(self, func: Callable[..., bool], /) -> bool:
        return not self.any(func)

    def min(
        self,
        comparator: Optional[Callable[[Any, Any], int]] = None,
        /,
        *,
        key: Optional[Callable[..., Any]] = None,
        default=ABSENT,
    ):
        """
        The smallest value, by natural order, by ``comparator(a, b)``, or by ``key``.
        Ties keep the first one seen. ``default`` if the stream is empty.
        """
        z = self.collect(_collector.min_by(comparator, key=key))
        return default if z is ABSENT else z

    def max(
        self,
        comparator: Optional[Callable[[Any, Any], int]] = None,
        /,
        *,
        key: Optional[Callable[..., Any]] = None,
        default=ABSENT,
    ):
        """
        Counterpart of :meth:`min`.
        """
        z = self.collect(_collector.max_by(comparator, key=key))
        return default if z is ABSENT else z

    def frequency(self, classifier: Optional[Callable[..., Any]] = None, /) -> dict:
        """
        Count of elements per key; the key is the value itself by default.
        """
        return self.collect(_collector.frequency(classifier))

    def group(
        self,
        classifier: Callable[..., Any],
        downstream: Collector | Callable | None = None,
        /,
    ) -> dict:
        """
        Put the values in buckets keyed by ``classifier``.

        Each bucket is a list unless ``downstream`` is given, which is either
        a :class:`~pullstream.collectors.Collector` (possibly another grouping)
        or a function that takes the list of the bucket's values.
        """
        return self.collect(_collector.grouping_by(classifier, downstream))

    def partition(
        self,
        func: Callable[..., bool],
        downstream: Collector | Callable | None = None,
        /,
    ) -> dict:
        """
        Like :meth:`group` with the buckets ``True`` and ``False``,
        both of which are always present.
        """
        return self.collect(_collector.partitioning_by(func, downstream))


class Stream(BaseStream):
    """
    The class ``Stream`` is the "entry-point" for single-value pipelines.
    User constructs a ``Stream`` object
    by passing an `Iterable`_ (or any other enumerable source) to it,
    then calls its methods to use it.
    Most of the methods return the object itself, facilitating calls
    in a "chained" fashion, like this::

        s = Stream(...).map(...).filter(...).batch(...).flat_map(...)

    However, these methods modify the object in-place, hence the above is equivalent
    to calling the methods one by one::

        s = Stream(...)
        s.map(...)
        s.filter(...)
        s.batch(...)
        s.flat_map(...)

    Methods that change the shape of the elements into pairs, like
    :meth:`enumerate`, return a new :class:`DoubleStream` instead; after that
    the original object can't be used.
    """

    arity = 1

    @classmethod
    def of(cls, *values) -> Stream:
        """
        >>> Stream.of(1, 'a', None).to_list()
        [1, 'a', None]
        """
        return Stream(values)

    @classmethod
    def empty(cls) -> Stream:
        return Stream(())

    @classmethod
    def generate(cls, supplier: Callable[[], Any], /) -> Stream:
        """
        An unlimited stream of ``supplier()``, ``supplier()``, ...
        """
        check_callable(supplier, 'supplier')

        def gen():
            while True:
                yield supplier()

        return Stream(gen())

    @classmethod
    def iterate(
        cls,
        seed: Any,
        step: Callable[[Any], Any],
        /,
        has_next: Optional[Callable[[Any], bool]] = None,
    ) -> Stream:
        """
        The stream ``seed``, ``step(seed)``, ``step(step(seed))``, ...;
        unlimited unless ``has_next`` is given, in which case the stream ends
        before the first value for which ``has_next`` is false.

        ``step`` is called only when the next value is actually requested.

        >>> Stream.iterate(1, lambda x: x * 2).limit(5).to_list()
        [1, 2, 4, 8, 16]
        >>> Stream.iterate(1, lambda x: x + 3, lambda x: x < 10).to_list()
        [1, 4, 7]
        """
        check_callable(step, 'step')
        check_optional_callable(has_next, 'has_next')

        def gen():
            x = seed
            while has_next is None or has_next(x):
                yield x
                x = step(x)

        return Stream(gen())

    def map(self, func: Callable[[T], Any], /, **kwargs) -> Self:
        """
        Perform a simple transformation on each data element.

        This is a 1-to-1 transform from the input stream to the output stream.
        This method can neither add nor skip elements in the stream.

        If the logic needs to keep some state or history info, then define a class and implement
        its ``__call__`` method, or use :meth:`gather`.

        Parameters
        ----------
        func
            A function that takes a data element and returns a new value; the new values
            (which do not have to differ from the original) form the new stream going
            forward.
        **kwargs
            Additional keyword arguments to ``func``, after the first argument, which
            is the data element.
        """
        check_callable(func, 'func')
        return self._chain(Mapper, bind(func, kwargs))

    def flat_map(self, func: Optional[Callable[[T], Any]] = None, /) -> Self:
        """
        Replace each element by the elements of ``func(element)``, which may be
        any enumerable source (list, generator, stream, ...). Each nested source
        is drained before the next element is pulled.

        Without ``func``, the elements themselves are flattened.

        >>> Stream([[0, 1, 2], [], [3, 4]]).flat_map().to_list()
        [0, 1, 2, 3, 4]
        >>> Stream([1, 2, 3]).flat_map(lambda n: [n] * n).to_list()
        [1, 2, 2, 3, 3, 3]
        """
        check_optional_callable(func, 'func')
        return self._chain(FlatMapper, func, arity=1)

    @deprecated(
        deprecated_in='0.2.0', removed_in='0.4.0', details='Use `flat_map()` instead.'
    )
    def unbatch(self) -> Self:
        return self.flat_map()

    @deprecated(deprecated_in='0.2.0', removed_in='0.4.0', details='Use `limit` instead.')
    def head(self, n: int) -> Self:
        return self.limit(n)

    def batch(self, batch_size: int) -> Self:
        """
        Bundle elements into lists of ``batch_size``.
        The final batch may be smaller.

        >>> Stream(range(10)).batch(3).to_list()
        [[0, 1, 2], [3, 4, 5], [6, 7, 8], [9]]
        """
        return self.gather(window_fixed(batch_size))

    def window(self, size: int, *, partial: bool = False) -> Self:
        """
        Sliding windows of ``size`` consecutive elements.
        See :func:`~pullstream.gatherers.window_sliding`.
        """
        return self.gather(window_sliding(size, partial=partial))

    def accumulate(
        self, func: Callable[[Any, T], Any], initializer: Any = NOTSET, **kwargs
    ) -> Self:
        """
        This method is like "cumulative sum", but the operation is specified by ``func``, hence
        does not need to be "sum". If the last element in the output stream is ``x``
        and the upcoming element in the input stream is ``y``, then the next element in the output
        stream is

        ::

            func(x, y, **kwargs)

        If ``initializer`` is not provided, then the first element is output as is, and "accumulation" begins
        with the second element. If ``initializer`` is provided (any user-provided value, including ``None``),
        then the first element of the output stream is ``func(initializer, x0, **kwargs)``.

        Examples
        --------
        >>> Stream(range(7)).accumulate(lambda x, y: x + y, 3).to_list()
        [3, 4, 6, 9, 13, 18, 24]
        """
        check_callable(func, 'func')
        return self.gather(scan(initializer, bind(func, kwargs)))

    def enumerate(self, start: int = 0) -> DoubleStream:
        """
        Pair each value with its index.

        >>> Stream('abc').enumerate(1).to_list()
        [(1, 'a'), (2, 'b'), (3, 'c')]
        """
        return self._transfer(2, Indexer, start=start)

    def key_by(self, func: Callable[[T], Any], /) -> DoubleStream:
        """
        Pair each value ``x`` as ``(func(x), x)``.
        """
        check_callable(func, 'func')
        return self._transfer(2, KeyMaker, func)

    def map_to_double(self, func: Callable[[T], tuple], /) -> DoubleStream:
        """
        ``func`` returns a ``(key, value)`` pair for each value.

        >>> Stream(['a=1', 'b=2']).map_to_double(lambda s: s.split('=')).to_dict()
        {'a': '1', 'b': '2'}
        """
        check_callable(func, 'func')
        return self._transfer(2, PairMapper, func)

    def zip(self, other: Any, /) -> DoubleStream:
        """
        Pair values of this stream with values of ``other``, in lock step.
        The result is as long as the shorter of the two.
        """
        return self._transfer(2, Zipper, enumerator_of(other, 1))

    def zip_with(self, other: Any, func: Callable[[Any, Any], Any], /) -> Self:
        """
        Like :meth:`zip`, but the two values are combined by ``func``.
        """
        check_callable(func, 'func')
        return self._chain(Zipper, enumerator_of(other, 1), func=func)

    # Terminal operators

    def sum(self, start=0):
        """
        ``ABSENT`` values are skipped.
        """
        return self.collect(_collector.summing(start=start))

    def average(self):
        """
        Arithmetic mean; :data:`~pullstream.ABSENT` for an empty stream.
        ``ABSENT`` values are skipped.
        """
        return self.collect(_collector.averaging())

    def statistics(self) -> Statistics:
        return self.collect(_collector.summarizing())

    def join(self, delimiter: str = '', prefix: str = '', suffix: str = '') -> str:
        """
        Concatenate ``str()`` of the values. ``ABSENT`` values are skipped.

        >>> from pullstream import ABSENT
        >>> Stream([1, ABSENT, '', 3]).join(', ', '[', ']')
        '[1, , 3]'
        """
        return self.collect(_collector.joining(delimiter, prefix, suffix))

    def to_dict(
        self,
        key: Callable[[T], Any],
        value: Optional[Callable[[T], Any]] = None,
        merge: Optional[Callable[[Any, Any], Any]] = None,
    ) -> dict:
        check_callable(key, 'key')
        return self.collect(_collector.to_dict(key, value, merge))


class DoubleStream(BaseStream):
    """
    A stream of ``(key, value)`` pairs.

    Functions passed to the operators receive the two slots as two
    positional arguments, like ``func(key, value)``. Iterating over the stream,
    or collecting it, gives ``(key, value)`` tuples.

    >>> ds = DoubleStream({'a': 1, 'b': 2, 'c': 3})
    >>> ds.retain_if(lambda k, v: v != 2).map(lambda k, v: k * v).to_list()
    ['a', 'ccc']
    """

    arity = 2

    @classmethod
    def of(cls, *pairs) -> DoubleStream:
        """
        >>> DoubleStream.of(('a', 1), ('b', 2)).to_list()
        [('a', 1), ('b', 2)]
        """
        return cls._from_streamlets([Source(Enumerator((tuple(p) for p in pairs), 2))])

    def map(self, func: Callable[[Any, Any], Any], /, **kwargs) -> Stream:
        """
        Turn each pair into a single value ``func(key, value)``.
        The result is a :class:`Stream`.
        """
        check_callable(func, 'func')
        return self._transfer(1, Mapper, bind(func, kwargs))

    def map_pairs(self, func: Callable[[Any, Any], tuple], /) -> Self:
        """
        ``func(key, value)`` returns a new pair.
        """
        check_callable(func, 'func')
        return self._chain(PairMapper, func)

    def map_keys(self, func: Callable[[Any], Any], /) -> Self:
        check_callable(func, 'func')
        return self._chain(SlotMapper, func, slot=0)

    def map_values(self, func: Callable[[Any], Any], /) -> Self:
        check_callable(func, 'func')
        return self._chain(SlotMapper, func, slot=1)

    def keys(self) -> Stream:
        return self._transfer(1, Mapper, lambda k, v: k)

    def values(self) -> Stream:
        return self._transfer(1, Mapper, lambda k, v: v)

    def swap(self) -> Self:
        return self._chain(Swapper)

    def flat_map(self, func: Callable[[Any, Any], Any], /) -> Stream:
        """
        Replace each pair by the values of ``func(key, value)``.
        The result is a :class:`Stream`.
        """
        check_callable(func, 'func')
        return self._transfer(1, FlatMapper, func, arity=1)

    def zip(self, other: Any, /) -> DoubleStream:
        """
        Pair each ``(key, value)`` of this stream with a value of ``other``.
        """
        return self._chain(Zipper, enumerator_of(other, 1))

    def to_dict(
        self,
        merge: Optional[Callable[[Any, Any], Any]] = None,
    ) -> dict:
        """
        ``{key: value}``; for a repeated key, the later value wins unless
        ``merge(old, new)`` is given.
        """
        return self.collect(_collector.to_dict(merge=merge))

    def join(
        self,
        delimiter: str = '',
        prefix: str = '',
        suffix: str = '',
        *,
        pair_delimiter: str = DEFAULT_PAIR_DELIMITER,
    ) -> str:
        """
        Each pair is written as ``key=value``. An ``ABSENT`` slot is left out
        together with the ``pair_delimiter``; a pair whose both slots are
        ``ABSENT`` is skipped.

        >>> DoubleStream({'a': 1, 'b': 2}).join(', ')
        'a=1, b=2'
        >>> DoubleStream.of(('a', ABSENT), ('b', 2), (ABSENT, ABSENT)).join(', ')
        'a, b=2'
        """
        check_str(pair_delimiter, 'pair_delimiter')

        def fmt(k, v):
            if k is ABSENT:
                return ABSENT if v is ABSENT else f'{v}'
            if v is ABSENT:
                return f'{k}'
            return f'{k}{pair_delimiter}{v}'

        collector = _collector.joining(delimiter, prefix, suffix)
        return self.map(fmt).collect(collector)


_STREAM_CLASSES = {1: Stream, 2: DoubleStream}


def _stream_class(arity: int) -> type[BaseStream]:
    return _STREAM_CLASSES[arity]


@enumerator_of.register(BaseStream)
def _(obj, arity=1, /):
    return obj._release(arity)


def to_stream(obj: Any, /) -> Stream:
    return Stream(obj)


def to_double_stream(obj: Any, /) -> DoubleStream:
    return DoubleStream(obj)
