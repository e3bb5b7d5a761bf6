from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, TypeVar

from .errors import InvalidArgumentError, NotCallableError

T = TypeVar('T')  # indicates input data element

DEFAULT_PAIR_DELIMITER = '='
DEFAULT_PEEK_INTERVAL = 1


class AbsentType:
    """
    Type of :data:`ABSENT`, the marker of a missing value.

    ``ABSENT`` is different from ``None`` and from empty values such as ``''``:
    those are present values that happen to be empty. ``ABSENT`` is skipped by
    :meth:`~pullstream.Stream.join`, :meth:`~pullstream.Stream.reduce`,
    :meth:`~pullstream.Stream.sum` and :meth:`~pullstream.Stream.average`,
    and is what reductions return when there is nothing to reduce.
    """

    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return 'ABSENT'

    def __bool__(self):
        return False

    def __reduce__(self):
        return (AbsentType, ())


ABSENT = AbsentType()

# Marks an argument the caller did not provide, so that `None`
# remains a legal user value.
NOTSET = object()


def element_value(elem: tuple) -> Any:
    # The "value" of an element: the bare value for arity 1,
    # the whole tuple for arity 2.
    if len(elem) == 1:
        return elem[0]
    return elem


def check_callable(func, name: str) -> None:
    if not callable(func):
        raise NotCallableError(
            f"`{name}` must be callable; got {type(func).__name__} {func!r}"
        )


def check_optional_callable(func, name: str) -> None:
    if func is not None:
        check_callable(func, name)


def check_count(n, name: str, *, minimum: int = 0) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidArgumentError(f"`{name}` must be an int; got {n!r}")
    if n < minimum:
        raise InvalidArgumentError(f"`{name}` must be >= {minimum}; got {n}")


def check_str(s, name: str) -> None:
    if not isinstance(s, str):
        raise InvalidArgumentError(f"`{name}` must be a str; got {type(s).__name__} {s!r}")


def bind(func: Callable, kwargs: dict) -> Callable:
    if kwargs:
        return functools.partial(func, **kwargs)
    return func
