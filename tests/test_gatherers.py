import operator

import pytest

from pullstream import DoubleStream, Stream
from pullstream.errors import InvalidArgumentError, NotCallableError
from pullstream.gatherers import (
    Gatherer,
    chunk_by,
    fold,
    last,
    scan,
    take_every,
    window_fixed,
    window_sliding,
)


def test_window_fixed():
    assert Stream(range(7)).gather(window_fixed(3)).to_list() == [
        [0, 1, 2],
        [3, 4, 5],
        [6],
    ]
    assert Stream(range(6)).gather(window_fixed(3)).to_list() == [[0, 1, 2], [3, 4, 5]]
    assert Stream([]).gather(window_fixed(3)).to_list() == []
    with pytest.raises(InvalidArgumentError):
        window_fixed(0)


def test_window_sliding():
    assert Stream([1, 2, 3, 4, 5, 6]).gather(window_sliding(3)).to_list() == [
        [1, 2, 3],
        [2, 3, 4],
        [3, 4, 5],
        [4, 5, 6],
    ]
    assert Stream(range(3)).gather(window_sliding(1)).to_list() == [[0], [1], [2]]
    assert Stream([]).gather(window_sliding(2, partial=True)).to_list() == []


def test_window_on_unlimited():
    s = Stream.iterate(0, lambda x: x + 1).gather(window_sliding(2)).limit(3)
    assert s.to_list() == [[0, 1], [1, 2], [2, 3]]


def test_scan_fold():
    assert Stream([1, 2, 3]).gather(scan(10, operator.add)).to_list() == [11, 13, 16]
    assert Stream([1, 2, 3]).gather(fold(10, operator.add)).to_list() == [16]
    assert Stream([]).gather(fold(0, operator.add)).to_list() == [0]
    with pytest.raises(NotCallableError):
        scan(0, None)


def test_last():
    assert Stream(range(10)).gather(last(3)).to_list() == [7, 8, 9]
    assert Stream(range(2)).gather(last(3)).to_list() == [0, 1]
    assert DoubleStream({'a': 1, 'b': 2}).gather(last(1, arity=2)).to_list() == [
        ('b', 2)
    ]


def test_chunk_by():
    data = ['atlas', 'apple', 'answer', 'bee', 'block', 'away', 'peter', 'plum']
    ds = Stream(data).gather(chunk_by(lambda x: x[0]))
    assert isinstance(ds, DoubleStream)
    assert ds.to_list() == [
        ('a', ['atlas', 'apple', 'answer']),
        ('b', ['bee', 'block']),
        ('a', ['away']),
        ('p', ['peter', 'plum']),
    ]


def test_take_every():
    assert Stream(range(10)).gather(take_every(3)).to_list() == [2, 5, 8]
    assert Stream(range(10)).gather(take_every(1)).count() == 10


def test_custom_gatherer():
    class Dedup(Gatherer):
        # Drop consecutive repeats.
        def initialize(self):
            self.prev = None

        def invoke(self, upstream, push):
            elem = upstream.pull()
            if elem is None:
                return False
            if elem != self.prev:
                push(*elem)
            self.prev = elem
            return True

    assert Stream([1, 1, 2, 2, 2, 1, 3, 3]).gather(Dedup()).to_list() == [1, 2, 1, 3]


def test_early_termination():
    pulled = []

    def invoke(state, upstream, push):
        elem = upstream.pull()
        if elem is None or elem[0] > 2:
            return False
        push(elem[0])
        return True

    s = Stream(range(100)).peek(pulled.append).gather(Gatherer.of(invoke))
    assert s.to_list() == [0, 1, 2]
    assert pulled == [0, 1, 2, 3]


def test_finisher():
    def initializer():
        return []

    def invoke(state, upstream, push):
        elem = upstream.pull()
        if elem is None:
            return False
        state.append(elem[0])
        return True

    def finisher(state, push):
        for x in reversed(state):
            push(x)

    g = Gatherer.of(invoke, initializer, finisher)
    assert Stream('abc').gather(g).join() == 'cba'


def test_push_many():
    def invoke(state, upstream, push):
        elem = upstream.pull()
        if elem is None:
            return False
        for _ in range(elem[0]):
            push(elem[0])
        return True

    assert Stream([0, 1, 2, 3]).gather(Gatherer.of(invoke)).to_list() == [1, 2, 2, 3, 3, 3]


def test_arity_change():
    def invoke(state, upstream, push):
        elem = upstream.pull()
        if elem is None:
            return False
        k, v = elem
        push(f'{k}:{v}')
        return True

    s = DoubleStream({'a': 1, 'b': 2}).gather(Gatherer.of(invoke))
    assert isinstance(s, Stream)
    assert s.to_list() == ['a:1', 'b:2']


def test_wrong_push():
    def invoke(state, upstream, push):
        elem = upstream.pull()
        if elem is None:
            return False
        push(elem[0], elem[0])
        return True

    s = Stream([1]).gather(Gatherer.of(invoke))
    with pytest.raises(TypeError):
        s.to_list()


def test_not_a_gatherer():
    with pytest.raises(InvalidArgumentError):
        Stream([1]).gather(lambda x: x)
    with pytest.raises(InvalidArgumentError):
        Gatherer.of(lambda s, u, p: False, arity=3)
