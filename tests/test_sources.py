import operator

import pytest

from pullstream import (
    DoubleStream,
    Enumerator,
    InvalidArgumentError,
    Range,
    RangeStepError,
    Stream,
    zip_streams,
    zip_with,
)


def test_range():
    assert Range(1, 5).to_list() == [1, 2, 3, 4, 5]
    assert Range(5, 1).to_list() == [5, 4, 3, 2, 1]
    assert Range(1, 10, 3).to_list() == [1, 4, 7, 10]
    assert Range(1, 9, 3).to_list() == [1, 4, 7]
    assert Range(10, 1, -4).to_list() == [10, 6, 2]
    assert Range(4).to_list() == [1, 2, 3, 4]
    assert Range(3, 3).to_list() == [3]
    assert Range(3, 3, -2).to_list() == [3]
    assert Range(1, 6, step=2).to_list() == [1, 3, 5]


def test_range_float():
    assert Range(0, 0.5, 0.1).count() == 6
    assert Range(1.0, 0.0, -0.5).to_list() == [1.0, 0.5, 0.0]


def test_range_is_stream():
    r = Range(1, 10)
    assert isinstance(r, Stream)
    assert repr(r) == 'Range(1, 10, 1)'
    assert r.filter(lambda x: x % 3 == 0).to_list() == [3, 6, 9]


def test_range_factories():
    s = Range.of(1, 2)
    assert type(s) is Stream
    assert s.to_list() == [1, 2]
    assert Range.empty().to_list() == []
    assert Range.generate(lambda: 0).limit(2).to_list() == [0, 0]
    assert Range.iterate(1, lambda x: x * 3).limit(3).to_list() == [1, 3, 9]


def test_range_errors():
    with pytest.raises(RangeStepError):
        Range(1, 10, -1)
    with pytest.raises(RangeStepError):
        Range(10, 1, 2)
    with pytest.raises(ValueError):
        Range(1, 10, 0)
    with pytest.raises(InvalidArgumentError):
        Range('a', 'z')
    with pytest.raises(InvalidArgumentError):
        Range(True)


def test_zip_streams():
    ds = zip_streams([1, 2, 3], [10, 20, 30, 40, 50])
    assert isinstance(ds, DoubleStream)
    assert ds.to_list() == [(1, 10), (2, 20), (3, 30)]
    assert zip_streams('ab', range(5)).to_dict() == {'a': 0, 'b': 1}
    assert zip_streams([], [1]).to_list() == []


def test_zip_pull_order():
    pulls = []

    def source(name, n):
        for i in range(n):
            pulls.append(name)
            yield i

    assert zip_streams(source('L', 3), source('R', 5)).count() == 3
    # Left is pulled first; once it is exhausted, right is not pulled again.
    assert pulls == ['L', 'R', 'L', 'R', 'L', 'R']

    pulls.clear()
    assert zip_streams(source('L', 5), source('R', 2)).count() == 2
    assert pulls == ['L', 'R', 'L', 'R', 'L']


def test_zip_with():
    assert zip_with([1, 2, 3], [10, 20], operator.add).to_list() == [11, 22]
    assert zip_with(Range(3), Stream.of('a', 'b', 'c'), operator.mul).join(',') == (
        'a,bb,ccc'
    )
    with pytest.raises(TypeError):
        zip_with([1], [2], None)


def test_zip_unlimited():
    e = Enumerator.from_function(lambda: ('x',))
    assert zip_streams(e, 'ab').to_list() == [('x', 'a'), ('x', 'b')]
