import operator

import pytest

from pullstream import ABSENT, DoubleStream, Stream, StreamConsumedError
from pullstream.collectors import counting, grouping_by, summing
from pullstream.errors import InvalidArgumentError


def test_double_stream():
    d = {'a': 1, 'b': 2, 'c': 3}
    assert DoubleStream(d).to_list() == [('a', 1), ('b', 2), ('c', 3)]
    assert DoubleStream(d).to_dict() == d
    assert DoubleStream(['x', 'y']).to_list() == [(0, 'x'), (1, 'y')]
    assert DoubleStream.of(('a', 1), ['b', 2]).to_list() == [('a', 1), ('b', 2)]
    assert list(DoubleStream(d)) == [('a', 1), ('b', 2), ('c', 3)]
    assert DoubleStream().count() == 0


def test_filter():
    d = {'a': 1, 'b': 2, 'c': 3, 'd': 4}
    assert DoubleStream(d).retain_if(lambda k, v: v % 2 == 0).to_dict() == {
        'b': 2,
        'd': 4,
    }
    assert DoubleStream(d).remove_if(lambda k, v: k in 'ab').to_dict() == {
        'c': 3,
        'd': 4,
    }
    assert DoubleStream(d).filter(lambda k, v, limit: v < limit, limit=2).to_list() == [
        ('a', 1)
    ]


def test_map():
    d = {'a': 1, 'b': 2}
    s = DoubleStream(d).map(lambda k, v: k * v)
    assert isinstance(s, Stream)
    assert s.to_list() == ['a', 'bb']

    assert DoubleStream(d).map_pairs(lambda k, v: (v, k)).to_dict() == {1: 'a', 2: 'b'}
    assert DoubleStream(d).map_keys(str.upper).to_dict() == {'A': 1, 'B': 2}
    assert DoubleStream(d).map_values(lambda v: v * 10).to_dict() == {'a': 10, 'b': 20}
    assert DoubleStream(d).swap().to_list() == [(1, 'a'), (2, 'b')]


def test_keys_values():
    d = {'a': 1, 'b': 2}
    assert DoubleStream(d).keys().to_list() == ['a', 'b']
    assert DoubleStream(d).values().sum() == 3


def test_flat_map():
    d = {'a': 2, 'b': 1}
    assert DoubleStream(d).flat_map(lambda k, v: [k] * v).join() == 'aab'


def test_selection():
    d = dict(zip('abcdef', range(6)))
    assert DoubleStream(d).limit(2).to_list() == [('a', 0), ('b', 1)]
    assert DoubleStream(d).skip(4).keys().join() == 'ef'
    assert DoubleStream(d).tail(2).to_list() == [('e', 4), ('f', 5)]
    assert DoubleStream(d).take_while(lambda k, v: v < 2).to_dict() == {'a': 0, 'b': 1}
    assert DoubleStream(d).drop_while(lambda k, v: k != 'e').keys().join() == 'ef'
    assert DoubleStream.of((1, 'x'), (1, 'y'), (2, 'x')).distinct(
        lambda k, v: k
    ).to_list() == [(1, 'x'), (2, 'x')]


def test_sorted():
    d = {'b': 2, 'a': 3, 'c': 1}
    assert DoubleStream(d).sorted().keys().join() == 'abc'
    assert DoubleStream(d).sorted(key=lambda k, v: v).keys().join() == 'cba'


def test_concat():
    ds = DoubleStream({'a': 1}).concat({'b': 2}).concat(DoubleStream.of(('c', 3)))
    assert ds.to_dict() == {'a': 1, 'b': 2, 'c': 3}


def test_zip():
    ds = DoubleStream({'a': 1, 'b': 2}).zip('xyz')
    assert ds.to_list() == [(('a', 1), 'x'), (('b', 2), 'y')]


def test_terminal():
    d = {'a': 1, 'b': 2, 'c': 3}
    assert DoubleStream(d).find(lambda k, v: v > 1) == ('b', 2)
    assert DoubleStream(d).find(lambda k, v: v > 5) is ABSENT
    assert DoubleStream(d).first() == ('a', 1)
    assert DoubleStream(d).any(lambda k, v: k == 'c')
    assert DoubleStream(d).all(lambda k, v: v > 0)
    assert DoubleStream(d).none(lambda k, v: v > 3)
    assert DoubleStream(d).max(key=lambda k, v: v) == ('c', 3)
    assert DoubleStream(d).min(key=lambda k, v: -v) == ('c', 3)
    assert DoubleStream(d).reduce(lambda acc, kv: acc + kv[1], 0) == 6

    seen = []
    DoubleStream(d).for_each(lambda k, v: seen.append(k + str(v)))
    assert seen == ['a1', 'b2', 'c3']


def test_collect():
    pairs = [('x', 1), ('y', 2), ('x', 3)]
    assert DoubleStream.of(*pairs).to_dict() == {'x': 3, 'y': 2}
    assert DoubleStream.of(*pairs).to_dict(operator.add) == {'x': 4, 'y': 2}
    assert DoubleStream.of(*pairs).group(lambda k, v: k) == {
        'x': [('x', 1), ('x', 3)],
        'y': [('y', 2)],
    }
    assert DoubleStream.of(*pairs).collect(
        grouping_by(lambda k, v: k, summing(lambda k, v: v))
    ) == {'x': 4, 'y': 2}
    assert DoubleStream.of(*pairs).collect(counting()) == 3
    assert DoubleStream.of(*pairs).partition(lambda k, v: v > 1, len) == {
        True: 2,
        False: 1,
    }


def test_join():
    d = {'a': 1, 'b': 2}
    assert DoubleStream(d).join(', ') == 'a=1, b=2'
    assert DoubleStream(d).join('&', '?', pair_delimiter=':') == '?a:1&b:2'
    pairs = [('a', ABSENT), ('b', 2), (ABSENT, 3), (ABSENT, ABSENT), ('c', '')]
    assert DoubleStream.of(*pairs).join(', ') == 'a, b=2, 3, c='

    pulled = []
    ds = DoubleStream(d).peek(lambda k, v: pulled.append(k))
    with pytest.raises(InvalidArgumentError):
        ds.join(', ', pair_delimiter=None)
    assert pulled == []


def test_round_trip():
    ds = Stream('abc').enumerate().map_values(str.upper)
    assert ds.values().join() == 'ABC'


def test_moved():
    ds = DoubleStream({'a': 1})
    s = ds.keys()
    with pytest.raises(StreamConsumedError):
        ds.to_dict()
    with pytest.raises(StreamConsumedError):
        ds.values()
    assert s.to_list() == ['a']


def test_stream_of_pairs():
    # A DoubleStream fed into a Stream becomes a stream of tuples.
    s = Stream(DoubleStream({'a': 1}))
    assert s.to_list() == [('a', 1)]
    # A Stream fed into a DoubleStream gets indexed.
    ds = DoubleStream(Stream('xy'))
    assert ds.to_list() == [(0, 'x'), (1, 'y')]
