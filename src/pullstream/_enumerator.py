# Pull protocol
#
# An "element" is a tuple of `arity` slots (1 or 2). Stages hand elements
# to each other as tuples, so the same stage code serves single values
# (`(x,)`) and pairs (`(key, value)`).
#
# `Enumerator.pull()` returns the next element tuple, or `None` when the
# source is exhausted. Since an element is never `None`, there's no ambiguity.
#
# `Enumerator` is also a Python iterator. Iterating it gives the bare value
# for arity 1 and the `(key, value)` tuple for arity 2.

from __future__ import annotations

import functools
import itertools
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any, Optional

from ._common import check_callable, element_value
from .errors import InvalidArgumentError, NotIterableError


def _check_arity(arity) -> None:
    if arity not in (1, 2):
        raise InvalidArgumentError(f"`arity` must be 1 or 2; got {arity!r}")


class Enumerator(Iterator):
    """
    A stateful, single-pass source of elements.

    Once :meth:`pull` has returned ``None``, every later call returns ``None``
    as well; an enumerator can't be restarted. To go over the same data again,
    get a fresh enumerator from the container (see :class:`Enumerable`).
    """

    def __init__(self, elements: Iterable[tuple], arity: int = 1, /):
        """
        Parameters
        ----------
        elements
            An iterable of element tuples, each having ``arity`` slots.
        arity
            1 or 2.
        """
        _check_arity(arity)
        self.arity = arity
        self._elements: Optional[Iterator[tuple]] = iter(elements)

    @classmethod
    def from_function(
        cls, pull: Callable[[], Optional[tuple]], arity: int = 1, /
    ) -> Enumerator:
        """
        Adapt a plain pull function, which returns an element tuple
        or ``None`` when there are no more elements.

        >>> items = [3, 2, 1]
        >>> e = Enumerator.from_function(lambda: (items.pop(),) if items else None)
        >>> list(e)
        [1, 2, 3]
        """
        check_callable(pull, 'pull')
        return cls(iter(pull, None), arity)

    def pull(self) -> Optional[tuple]:
        elements = self._elements
        if elements is None:
            return None
        elem = next(elements, None)
        if elem is None:
            # Drop the source so that nothing can revive it.
            self._elements = None
        return elem

    @property
    def exhausted(self) -> bool:
        """
        ``True`` once :meth:`pull` has reported the end.
        """
        return self._elements is None

    def __iter__(self) -> Iterator:
        return self

    def __next__(self):
        elem = self.pull()
        if elem is None:
            raise StopIteration
        return element_value(elem)


class Enumerable(ABC):
    """
    Contract of a (restartable) container that can feed a stream.

    Subclasses implement :meth:`enumerator`, which may be called any number of
    times, each call producing an independent enumerator over the same data.

    >>> class Countdown(Enumerable):
    ...     def __init__(self, n):
    ...         self.n = n
    ...     def enumerator(self, arity=1):
    ...         values = range(self.n, 0, -1)
    ...         if arity == 1:
    ...             return Enumerator(((v,) for v in values), 1)
    ...         return Enumerator(enumerate(values), 2)
    >>> c = Countdown(3)
    >>> c.to_stream().to_list()
    [3, 2, 1]
    >>> c.to_double_stream().to_dict()
    {0: 3, 1: 2, 2: 1}
    """

    @abstractmethod
    def enumerator(self, arity: int = 1, /) -> Enumerator:
        raise NotImplementedError

    def to_stream(self):
        from ._streamer import Stream

        return Stream(self)

    def to_double_stream(self):
        from ._streamer import DoubleStream

        return DoubleStream(self)


def _reshape(enumerator: Enumerator, arity: int) -> Enumerator:
    if enumerator.arity == arity:
        return enumerator
    pull = enumerator.pull
    if arity == 1:
        # Pairs become values.
        return Enumerator(((elem,) for elem in iter(pull, None)), 1)
    # Values get indexed, the same as any other iterable.
    return Enumerator(zip(itertools.count(), (e[0] for e in iter(pull, None))), 2)


@functools.singledispatch
def enumerator_of(obj: Any, arity: int = 1, /) -> Enumerator:
    """
    Get an enumerator of ``arity`` over ``obj``.

    Containers are matched by type registration:

    - :class:`Enumerable`: its own :meth:`~Enumerable.enumerator`.
    - :class:`Enumerator` (and streams): the object itself, re-shaped
      if the arity differs.
    - ``Mapping``: keys for arity 1, ``(key, value)`` for arity 2.
    - any other ``Iterable`` (``list``, ``str``, files, generators, ...):
      items for arity 1, ``(index, item)`` for arity 2, the index starting at 0.

    >>> list(enumerator_of({'a': 1, 'b': 2}, 2))
    [('a', 1), ('b', 2)]
    >>> list(enumerator_of('xy', 2))
    [(0, 'x'), (1, 'y')]
    """
    raise NotIterableError(
        f"object of type {type(obj).__name__} can not be enumerated: {obj!r}"
    )


@enumerator_of.register(Iterable)
def _(obj, arity=1, /):
    _check_arity(arity)
    if arity == 1:
        return Enumerator(((x,) for x in obj), 1)
    return Enumerator(enumerate(obj), 2)


@enumerator_of.register(Mapping)
def _(obj, arity=1, /):
    _check_arity(arity)
    if arity == 1:
        return Enumerator(((k,) for k in obj), 1)
    return Enumerator(iter(obj.items()), 2)


@enumerator_of.register(Enumerator)
def _(obj, arity=1, /):
    _check_arity(arity)
    return _reshape(obj, arity)


@enumerator_of.register(Enumerable)
def _(obj, arity=1, /):
    _check_arity(arity)
    enumerator = obj.enumerator(arity)
    if not isinstance(enumerator, Enumerator):
        raise NotIterableError(
            f"{type(obj).__name__}.enumerator() returned {type(enumerator).__name__}, not an Enumerator"
        )
    return _reshape(enumerator, arity)
