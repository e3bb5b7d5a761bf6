from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Optional

from ._common import (
    ABSENT,
    NOTSET,
    check_callable,
    check_optional_callable,
    check_str,
    element_value,
)
from ._enumerator import enumerator_of
from .errors import NotCallableError


class Collector:
    """
    A reusable recipe for a terminal reduction.

    ``supplier()`` creates a fresh accumulator; ``accumulator(acc, *slots)``
    folds one element into it; ``finisher(acc)`` turns the accumulator into
    the result (the default is to return the accumulator as is).

    ``accumulator`` either mutates ``acc`` in place and returns ``None``,
    or returns the new accumulator. Any value other than ``None`` replaces
    the accumulator.

    A collector may be called on a plain iterable; every item counts as one
    single-value element:

    >>> c = Collector(list, lambda acc, x: acc.append(x * 10))
    >>> c([1, 2, 3])
    [10, 20, 30]
    >>> counting()('abc')
    3
    """

    def __init__(
        self,
        supplier: Callable[[], Any],
        accumulator: Callable[..., Any],
        finisher: Optional[Callable[[Any], Any]] = None,
    ):
        check_callable(supplier, 'supplier')
        check_callable(accumulator, 'accumulator')
        check_optional_callable(finisher, 'finisher')
        self.supplier = supplier
        self.accumulator = accumulator
        self.finisher = finisher

    def accumulate(self, acc, *slots):
        z = self.accumulator(acc, *slots)
        if z is None:
            return acc
        return z

    def finish(self, acc):
        if self.finisher is None:
            return acc
        return self.finisher(acc)

    def collect(self, elements: Iterable[tuple]):
        # `elements` are element tuples, as they flow in a stream.
        acc = self.supplier()
        accumulate = self.accumulate
        for elem in elements:
            acc = accumulate(acc, *elem)
        return self.finish(acc)

    def __call__(self, values: Iterable, /):
        return self.collect((v,) for v in values)


def as_collector(downstream, name: str = 'downstream') -> Collector:
    """
    ``None`` means :func:`to_list`; a plain function is applied to the list
    of collected values.
    """
    if downstream is None:
        return to_list()
    if isinstance(downstream, Collector):
        return downstream
    if callable(downstream):
        return collecting_and_then(to_list(), downstream)
    raise NotCallableError(
        f"`{name}` must be a Collector or callable; got {type(downstream).__name__}"
    )


def _append(acc, *slots):
    acc.append(element_value(slots))


def _add(acc, *slots):
    acc.add(element_value(slots))


def to_list() -> Collector:
    return Collector(list, _append)


def to_tuple() -> Collector:
    return Collector(list, _append, tuple)


def to_set() -> Collector:
    return Collector(set, _add)


def to_dict(
    key: Optional[Callable[..., Any]] = None,
    value: Optional[Callable[..., Any]] = None,
    merge: Optional[Callable[[Any, Any], Any]] = None,
) -> Collector:
    """
    By default the key is the first slot and the value is the last slot
    of each element, that is, ``k: v`` for a pair and ``x: x`` for a single value.

    If ``merge`` is given, it combines the existing value with the new one
    when a key is repeated; otherwise the new value replaces the old.

    >>> from pullstream import Stream
    >>> Stream(['apple', 'bee']).collect(to_dict(value=len))
    {'apple': 5, 'bee': 3}
    """
    check_optional_callable(key, 'key')
    check_optional_callable(value, 'value')
    check_optional_callable(merge, 'merge')

    def accumulator(acc, *slots):
        k = slots[0] if key is None else key(*slots)
        v = slots[-1] if value is None else value(*slots)
        if merge is not None and k in acc:
            v = merge(acc[k], v)
        acc[k] = v

    return Collector(dict, accumulator)


def joining(delimiter: str = '', prefix: str = '', suffix: str = '') -> Collector:
    """
    Concatenate ``str()`` of the values. ``ABSENT`` values are skipped.
    """
    check_str(delimiter, 'delimiter')
    check_str(prefix, 'prefix')
    check_str(suffix, 'suffix')

    def accumulator(acc, *slots):
        x = element_value(slots)
        if x is ABSENT:
            return
        acc.append(str(x))

    return Collector(list, accumulator, lambda acc: prefix + delimiter.join(acc) + suffix)


def counting() -> Collector:
    return Collector(int, lambda n, *slots: n + 1)


def _mapped(mapper, slots):
    if mapper is None:
        return element_value(slots)
    return mapper(*slots)


def summing(mapper: Optional[Callable[..., Any]] = None, start=0) -> Collector:
    """
    ``ABSENT`` values are skipped.
    """
    check_optional_callable(mapper, 'mapper')

    def accumulator(acc, *slots):
        x = _mapped(mapper, slots)
        if x is ABSENT:
            return acc
        return acc + x

    return Collector(lambda: start, accumulator)


def averaging(mapper: Optional[Callable[..., Any]] = None) -> Collector:
    """
    Arithmetic mean of the values; ``ABSENT`` if there are none.
    ``ABSENT`` values are skipped.
    """
    check_optional_callable(mapper, 'mapper')

    def accumulator(acc, *slots):
        x = _mapped(mapper, slots)
        if x is ABSENT:
            return
        acc[0] += x
        acc[1] += 1

    def finisher(acc):
        total, n = acc
        if n == 0:
            return ABSENT
        return total / n

    return Collector(lambda: [0, 0], accumulator, finisher)


def _extreme(comparator, key, largest: bool) -> Collector:
    check_optional_callable(comparator, 'comparator')
    check_optional_callable(key, 'key')

    def accumulator(acc, *slots):
        x = element_value(slots)
        if x is ABSENT:
            return
        z = x if key is None else key(*slots)
        if acc[0] is ABSENT:
            acc[0] = x
            acc[1] = z
            return
        best = acc[1]
        # Only a strictly better candidate replaces the current one,
        # so that ties keep the first seen.
        if comparator is None:
            better = z > best if largest else z < best
        else:
            c = comparator(z, best)
            better = c > 0 if largest else c < 0
        if better:
            acc[0] = x
            acc[1] = z

    return Collector(lambda: [ABSENT, ABSENT], accumulator, lambda acc: acc[0])


def min_by(
    comparator: Optional[Callable[[Any, Any], int]] = None,
    *,
    key: Optional[Callable[..., Any]] = None,
) -> Collector:
    """
    The smallest value, by natural order, by ``comparator(a, b)`` (negative,
    zero, or positive, as in ``a - b``), or by ``key``. If both are given,
    ``comparator`` compares the keys. ``ABSENT`` if there are no values.
    """
    return _extreme(comparator, key, largest=False)


def max_by(
    comparator: Optional[Callable[[Any, Any], int]] = None,
    *,
    key: Optional[Callable[..., Any]] = None,
) -> Collector:
    """
    Counterpart of :func:`min_by`.
    """
    return _extreme(comparator, key, largest=True)


def reducing(func: Callable[[Any, Any], Any], identity: Any = NOTSET) -> Collector:
    """
    Left fold. Without ``identity``, the first value seeds the fold and an empty
    input gives ``ABSENT``. ``ABSENT`` values are skipped.
    """
    check_callable(func, 'func')

    def accumulator(acc, *slots):
        x = element_value(slots)
        if x is ABSENT:
            return
        if acc[0] is ABSENT:
            acc[0] = x
        else:
            acc[0] = func(acc[0], x)

    def supplier():
        return [ABSENT if identity is NOTSET else identity]

    return Collector(supplier, accumulator, lambda acc: acc[0])


def mapping(mapper: Callable[..., Any], downstream=None) -> Collector:
    check_callable(mapper, 'mapper')
    downstream = as_collector(downstream)

    def accumulator(acc, *slots):
        return downstream.accumulate(acc, mapper(*slots))

    return Collector(downstream.supplier, accumulator, downstream.finish)


def filtering(predicate: Callable[..., bool], downstream=None) -> Collector:
    check_callable(predicate, 'predicate')
    downstream = as_collector(downstream)

    def accumulator(acc, *slots):
        if predicate(*slots):
            return downstream.accumulate(acc, *slots)
        return acc

    return Collector(downstream.supplier, accumulator, downstream.finish)


def flat_mapping(mapper: Callable[..., Any], downstream=None) -> Collector:
    check_callable(mapper, 'mapper')
    downstream = as_collector(downstream)

    def accumulator(acc, *slots):
        for elem in iter(enumerator_of(mapper(*slots), 1).pull, None):
            acc = downstream.accumulate(acc, *elem)
        return acc

    return Collector(downstream.supplier, accumulator, downstream.finish)


def grouping_by(
    classifier: Callable[..., Any],
    downstream=None,
    *,
    factory: Callable[[], dict] = dict,
) -> Collector:
    """
    Put values in buckets by ``classifier``; each bucket is reduced by
    ``downstream`` (a :class:`Collector`, possibly another grouping,
    or a function that takes the list of the bucket's values).
    The default ``downstream`` collects a list.

    >>> from pullstream import Stream
    >>> words = ['apple', 'avocado', 'banana', 'blueberry', 'cherry']
    >>> Stream(words).collect(grouping_by(lambda w: w[0], counting()))
    {'a': 2, 'b': 2, 'c': 1}
    >>> Stream(words).collect(grouping_by(lambda w: w[0], grouping_by(len)))
    {'a': {5: ['apple'], 7: ['avocado']}, 'b': {6: ['banana'], 9: ['blueberry']}, 'c': {6: ['cherry']}}
    """
    check_callable(classifier, 'classifier')
    check_callable(factory, 'factory')
    downstream = as_collector(downstream)

    def accumulator(acc, *slots):
        k = classifier(*slots)
        try:
            bucket = acc[k]
        except KeyError:
            bucket = downstream.supplier()
        acc[k] = downstream.accumulate(bucket, *slots)

    def finisher(acc):
        for k, v in acc.items():
            acc[k] = downstream.finish(v)
        return acc

    return Collector(factory, accumulator, finisher)


def partitioning_by(predicate: Callable[..., bool], downstream=None) -> Collector:
    """
    Like :func:`grouping_by` with exactly two buckets, ``True`` and ``False``,
    both of which are always present in the result.
    """
    check_callable(predicate, 'predicate')
    downstream = as_collector(downstream)

    def supplier():
        return {True: downstream.supplier(), False: downstream.supplier()}

    def accumulator(acc, *slots):
        k = bool(predicate(*slots))
        acc[k] = downstream.accumulate(acc[k], *slots)

    def finisher(acc):
        return {k: downstream.finish(v) for k, v in acc.items()}

    return Collector(supplier, accumulator, finisher)


def frequency(classifier: Optional[Callable[..., Any]] = None) -> Collector:
    """
    Count of values per key; the key is the value itself by default.

    >>> frequency()('abracadabra')
    {'a': 5, 'b': 2, 'r': 2, 'c': 1, 'd': 1}
    """
    check_optional_callable(classifier, 'classifier')
    if classifier is None:
        return grouping_by(lambda *slots: element_value(slots), counting())
    return grouping_by(classifier, counting())


def collecting_and_then(downstream, finisher: Callable[[Any], Any]) -> Collector:
    check_callable(finisher, 'finisher')
    downstream = as_collector(downstream)
    return Collector(
        downstream.supplier,
        downstream.accumulate,
        lambda acc: finisher(downstream.finish(acc)),
    )


def teeing(first, second, merger: Callable[[Any, Any], Any]) -> Collector:
    """
    Feed every element to two collectors and merge their results.

    >>> teeing(counting(), summing(), lambda n, total: total / n)([1, 2, 3, 6])
    3.0
    """
    first = as_collector(first, 'first')
    second = as_collector(second, 'second')
    check_callable(merger, 'merger')

    def accumulator(acc, *slots):
        acc[0] = first.accumulate(acc[0], *slots)
        acc[1] = second.accumulate(acc[1], *slots)

    return Collector(
        lambda: [first.supplier(), second.supplier()],
        accumulator,
        lambda acc: merger(first.finish(acc[0]), second.finish(acc[1])),
    )


@dataclass
class Statistics:
    count: int = 0
    sum: Any = 0
    min: Any = ABSENT
    max: Any = ABSENT

    @property
    def average(self):
        if self.count == 0:
            return ABSENT
        return self.sum / self.count


def summarizing(mapper: Optional[Callable[..., Any]] = None) -> Collector:
    """
    Count, sum, min, max and average in one pass; ``ABSENT`` values are skipped.

    >>> s = summarizing()([4, 1, 7])
    >>> s.count, s.sum, s.min, s.max, s.average
    (3, 12, 1, 7, 4.0)
    """
    check_optional_callable(mapper, 'mapper')

    def accumulator(acc: Statistics, *slots):
        x = _mapped(mapper, slots)
        if x is ABSENT:
            return
        if acc.count == 0:
            acc.min = x
            acc.max = x
        else:
            if x < acc.min:
                acc.min = x
            if x > acc.max:
                acc.max = x
        acc.count += 1
        acc.sum += x

    return Collector(Statistics, accumulator)
