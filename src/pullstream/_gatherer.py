from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Callable
from typing import Any, Optional

from ._common import (
    NOTSET,
    check_callable,
    check_count,
    check_optional_callable,
    element_value,
)
from ._enumerator import Enumerator
from .errors import InvalidArgumentError

Push = Callable[..., None]


class Gatherer(ABC):
    """
    A stateful intermediate operation that may turn any number of input
    elements into any number of output elements.

    The stage that owns a gatherer calls :meth:`initialize` once, then calls
    :meth:`invoke` repeatedly until it returns ``False``, then calls
    :meth:`finish` once. In each call to ``invoke`` the gatherer may pull
    from ``upstream`` and ``push`` downstream as many times as it likes
    (including zero times).

    ``invoke`` should return ``False`` once ``upstream.pull()`` has returned
    ``None``; it may also return ``False`` earlier to end the stream even
    though upstream has more elements.

    A gatherer carries state, hence an instance is meant for one pipeline.
    :meth:`initialize` should reset that state.

    Attributes
    ----------
    arity
        Number of values in each pushed element: 1 (the default) or 2.
    """

    arity: int = 1

    def initialize(self) -> None:
        pass

    @abstractmethod
    def invoke(self, upstream: Enumerator, push: Push, /) -> bool:
        raise NotImplementedError

    def finish(self, push: Push, /) -> None:
        pass

    @staticmethod
    def of(
        invoke: Callable[[Any, Enumerator, Push], bool],
        initializer: Optional[Callable[[], Any]] = None,
        finisher: Optional[Callable[[Any, Push], None]] = None,
        *,
        arity: int = 1,
    ) -> Gatherer:
        """
        Build a gatherer from plain functions.

        ``initializer()`` creates the state (``None`` if no initializer);
        the state is passed as the first argument to ``invoke`` and ``finisher``.

        Examples
        --------
        Pair up consecutive elements:

        >>> from pullstream import Stream
        >>> def pairs(state, upstream, push):
        ...     a = upstream.pull()
        ...     b = upstream.pull()
        ...     if a is None or b is None:
        ...         return False
        ...     push(a[0], b[0])
        ...     return True
        >>> Stream(range(7)).gather(Gatherer.of(pairs, arity=2)).to_list()
        [(0, 1), (2, 3), (4, 5)]
        """
        return FunctionGatherer(invoke, initializer, finisher, arity=arity)


class FunctionGatherer(Gatherer):
    def __init__(self, invoke, initializer=None, finisher=None, *, arity: int = 1):
        check_callable(invoke, 'invoke')
        check_optional_callable(initializer, 'initializer')
        check_optional_callable(finisher, 'finisher')
        if arity not in (1, 2):
            raise InvalidArgumentError(f"`arity` must be 1 or 2; got {arity!r}")
        self._invoke = invoke
        self._initializer = initializer
        self._finisher = finisher
        self.arity = arity
        self._state = None

    def initialize(self):
        self._state = None if self._initializer is None else self._initializer()

    def invoke(self, upstream, push, /):
        return self._invoke(self._state, upstream, push)

    def finish(self, push, /):
        if self._finisher is not None:
            self._finisher(self._state, push)


class WindowFixed(Gatherer):
    """
    See :func:`window_fixed`.
    """

    def __init__(self, size: int):
        check_count(size, 'size', minimum=1)
        self._size = size
        self._window = []

    def initialize(self):
        self._window = []

    def invoke(self, upstream, push, /):
        elem = upstream.pull()
        if elem is None:
            return False
        self._window.append(element_value(elem))
        if len(self._window) == self._size:
            push(self._window)
            self._window = []
        return True

    def finish(self, push, /):
        if self._window:
            push(self._window)
            self._window = []


class WindowSliding(Gatherer):
    """
    See :func:`window_sliding`.
    """

    def __init__(self, size: int, *, partial: bool = False):
        check_count(size, 'size', minimum=1)
        self._size = size
        self._partial = partial
        self._window = deque(maxlen=size)
        self._emitted = False

    def initialize(self):
        self._window = deque(maxlen=self._size)
        self._emitted = False

    def invoke(self, upstream, push, /):
        elem = upstream.pull()
        if elem is None:
            return False
        # A full deque drops the oldest element upon `append`.
        self._window.append(element_value(elem))
        if len(self._window) == self._size:
            push(list(self._window))
            self._emitted = True
        return True

    def finish(self, push, /):
        if self._partial and not self._emitted and self._window:
            push(list(self._window))


class Scan(Gatherer):
    """
    See :func:`scan`.
    """

    def __init__(self, initial: Any, func: Callable[[Any, Any], Any]):
        check_callable(func, 'func')
        self._initial = initial
        self._func = func
        self._acc = initial

    def initialize(self):
        self._acc = self._initial

    def invoke(self, upstream, push, /):
        elem = upstream.pull()
        if elem is None:
            return False
        x = element_value(elem)
        if self._acc is NOTSET:
            self._acc = x
        else:
            self._acc = self._func(self._acc, x)
        push(self._acc)
        return True


class Fold(Gatherer):
    """
    See :func:`fold`.
    """

    def __init__(self, initial: Any, func: Callable[[Any, Any], Any]):
        check_callable(func, 'func')
        self._initial = initial
        self._func = func
        self._acc = initial

    def initialize(self):
        self._acc = self._initial

    def invoke(self, upstream, push, /):
        elem = upstream.pull()
        if elem is None:
            return False
        self._acc = self._func(self._acc, element_value(elem))
        return True

    def finish(self, push, /):
        push(self._acc)


class Last(Gatherer):
    """
    See :func:`last`.
    """

    def __init__(self, n: int, *, arity: int = 1):
        check_count(n, 'n', minimum=1)
        if arity not in (1, 2):
            raise InvalidArgumentError(f"`arity` must be 1 or 2; got {arity!r}")
        self._n = n
        self.arity = arity
        self._data = deque(maxlen=n)

    def initialize(self):
        self._data = deque(maxlen=self._n)

    def invoke(self, upstream, push, /):
        elem = upstream.pull()
        if elem is None:
            return False
        self._data.append(elem)
        return True

    def finish(self, push, /):
        while self._data:
            push(*self._data.popleft())


class ChunkBy(Gatherer):
    """
    See :func:`chunk_by`.
    """

    arity = 2

    def __init__(self, key: Callable[[Any], Any]):
        check_callable(key, 'key')
        self._key = key
        self._current = NOTSET
        self._chunk = []

    def initialize(self):
        self._current = NOTSET
        self._chunk = []

    def invoke(self, upstream, push, /):
        elem = upstream.pull()
        if elem is None:
            return False
        x = element_value(elem)
        z = self._key(x)
        if self._chunk and z != self._current:
            push(self._current, self._chunk)
            self._chunk = []
        self._current = z
        self._chunk.append(x)
        return True

    def finish(self, push, /):
        if self._chunk:
            push(self._current, self._chunk)
            self._chunk = []


class TakeEvery(Gatherer):
    """
    See :func:`take_every`.
    """

    def __init__(self, n: int):
        check_count(n, 'n', minimum=1)
        self._n = n

    def invoke(self, upstream, push, /):
        for _ in range(self._n - 1):
            if upstream.pull() is None:
                return False
        elem = upstream.pull()
        if elem is None:
            return False
        push(element_value(elem))
        return True


def window_fixed(size: int) -> Gatherer:
    """
    Group elements into lists of ``size``; the last list may be shorter.

    >>> from pullstream import Stream
    >>> Stream(range(8)).gather(window_fixed(3)).to_list()
    [[0, 1, 2], [3, 4, 5], [6, 7]]
    """
    return WindowFixed(size)


def window_sliding(size: int, *, partial: bool = False) -> Gatherer:
    """
    Lists of ``size`` consecutive elements, the window moving by one element
    at a time.

    If the input has fewer than ``size`` elements, nothing is produced, unless
    ``partial`` is ``True``, in which case the one incomplete window is produced.

    >>> from pullstream import Stream
    >>> Stream([1, 2, 3, 4, 5, 6]).gather(window_sliding(3)).to_list()
    [[1, 2, 3], [2, 3, 4], [3, 4, 5], [4, 5, 6]]
    >>> Stream([1, 2]).gather(window_sliding(3, partial=True)).to_list()
    [[1, 2]]
    """
    return WindowSliding(size, partial=partial)


def scan(initial: Any, func: Callable[[Any, Any], Any]) -> Gatherer:
    """
    Running accumulation: after combining each element into the accumulator,
    the accumulator is pushed.

    >>> from pullstream import Stream
    >>> Stream([1, 2, 3, 4]).gather(scan(0, lambda acc, x: acc + x)).to_list()
    [1, 3, 6, 10]
    """
    return Scan(initial, func)


def fold(initial: Any, func: Callable[[Any, Any], Any]) -> Gatherer:
    """
    Like :func:`scan`, but only the final accumulator is pushed, once the input
    is exhausted.
    """
    return Fold(initial, func)


def last(n: int, *, arity: int = 1) -> Gatherer:
    """
    Keep the last ``n`` elements. Nothing is produced until the input is exhausted.
    Use ``arity=2`` on a :class:`~pullstream.DoubleStream`.
    """
    return Last(n, arity=arity)


def chunk_by(key: Callable[[Any], Any]) -> Gatherer:
    """
    **Consecutive** elements that have the same ``key`` are bundled into a list.
    This gatherer has arity 2: it produces ``(key, chunk)`` pairs.

    This is similar to the standard ``itertools.groupby``.

    >>> from pullstream import Stream
    >>> data = ['atlas', 'apple', 'bee', 'away', 'peter', 'plum']
    >>> Stream(data).gather(chunk_by(lambda x: x[0])).values().to_list()
    [['atlas', 'apple'], ['bee'], ['away'], ['peter', 'plum']]
    """
    return ChunkBy(key)


def take_every(n: int) -> Gatherer:
    """
    Keep every ``n``-th element (the ``n``-th, the ``2n``-th, ...).
    """
    return TakeEvery(n)
