"""
Gatherers are stateful intermediate operations that may turn any number of
input elements into any number of output elements, such as windowing and
running accumulation. Use them with :meth:`pullstream.Stream.gather`.

Write your own by subclassing :class:`Gatherer` or by :meth:`Gatherer.of`.
"""

from ._gatherer import (
    ChunkBy,
    Fold,
    FunctionGatherer,
    Gatherer,
    Last,
    Scan,
    TakeEvery,
    WindowFixed,
    WindowSliding,
    chunk_by,
    fold,
    last,
    scan,
    take_every,
    window_fixed,
    window_sliding,
)

__all__ = [
    'ChunkBy',
    'Fold',
    'FunctionGatherer',
    'Gatherer',
    'Last',
    'Scan',
    'TakeEvery',
    'WindowFixed',
    'WindowSliding',
    'chunk_by',
    'fold',
    'last',
    'scan',
    'take_every',
    'window_fixed',
    'window_sliding',
]
