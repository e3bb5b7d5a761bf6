import operator

import pytest

from pullstream import ABSENT, Stream
from pullstream.collectors import (
    Collector,
    Statistics,
    as_collector,
    averaging,
    collecting_and_then,
    counting,
    filtering,
    flat_mapping,
    frequency,
    grouping_by,
    joining,
    mapping,
    max_by,
    min_by,
    partitioning_by,
    reducing,
    summarizing,
    summing,
    teeing,
    to_dict,
    to_list,
    to_set,
    to_tuple,
)
from pullstream.errors import NotCallableError


def test_collector():
    def acc(total, x):
        return total + x

    c = Collector(int, acc, str)
    assert c([1, 2, 3]) == '6'
    assert Stream([1, 2, 3]).collect(c) == '6'
    # A collector is reusable.
    assert c([]) == '0'

    with pytest.raises(NotCallableError):
        Collector(list, None)


def test_mutating_accumulator():
    c = Collector(list, lambda acc, x: acc.append(x))
    assert Stream('ab').collect(c) == ['a', 'b']


def test_as_collector():
    c = as_collector(None)
    assert c([1, 2]) == [1, 2]
    c = as_collector(len)
    assert c('abc') == 3
    c = counting()
    assert as_collector(c) is c
    with pytest.raises(NotCallableError):
        as_collector(3)


def test_containers():
    assert to_list()((1, 2)) == [1, 2]
    assert to_tuple()([1, 2]) == (1, 2)
    assert to_set()([1, 1, 2]) == {1, 2}
    assert to_dict(str.upper)('ab') == {'A': 'a', 'B': 'b'}
    assert to_dict(value=len, merge=operator.add)(['aa', 'aa', 'b']) == {'aa': 4, 'b': 1}


def test_numbers():
    assert counting()(range(5)) == 5
    assert summing()([1, 2, 3]) == 6
    assert summing(len)(['a', 'bb']) == 3
    assert averaging()([1, 2]) == 1.5
    assert averaging()([]) is ABSENT
    assert averaging()([ABSENT, 4]) == 4
    assert reducing(operator.mul)([2, 3, 4]) == 24
    assert reducing(operator.mul)([]) is ABSENT
    assert reducing(operator.mul, 1)([]) == 1


def test_min_max():
    assert min_by()([3, 1, 2]) == 1
    assert max_by()([3, 1, 2]) == 3
    assert min_by()([]) is ABSENT
    assert max_by(key=abs)([-5, 3, 5]) == -5
    assert min_by(lambda a, b: len(a) - len(b))(['bb', 'a', 'c']) == 'a'
    assert max_by()([ABSENT, 1]) == 1


def test_joining():
    assert joining()('abc') == 'abc'
    assert joining('-', '<', '>')([1, ABSENT, 2]) == '<1-2>'


def test_downstream():
    assert mapping(len, summing())(['a', 'bbb']) == 4
    assert filtering(lambda x: x > 1)([1, 2, 3]) == [2, 3]
    assert filtering(lambda x: x > 1, counting())([1, 2, 3]) == 2
    assert flat_mapping(lambda x: [x, x])([1, 2]) == [1, 1, 2, 2]
    assert collecting_and_then(to_list(), len)('abc') == 3


def test_grouping():
    words = ['apple', 'avocado', 'banana', 'blueberry', 'cherry']
    assert grouping_by(lambda w: w[0])(words) == {
        'a': ['apple', 'avocado'],
        'b': ['banana', 'blueberry'],
        'c': ['cherry'],
    }
    assert grouping_by(len, mapping(lambda w: w[0], joining()))(words) == {
        5: 'a',
        7: 'a',
        6: 'bc',
        9: 'b',
    }
    nested = Stream(words).group(lambda w: w[0], grouping_by(len, counting()))
    assert nested == {'a': {5: 1, 7: 1}, 'b': {6: 1, 9: 1}, 'c': {6: 1}}


def test_grouping_preserves_order():
    data = [3, 1, 3, 2, 1]
    z = grouping_by(lambda x: x)(data)
    assert list(z) == [3, 1, 2]


def test_partitioning():
    z = partitioning_by(lambda x: x > 10)([1, 2])
    assert z == {True: [], False: [1, 2]}
    z = partitioning_by(lambda x: x % 2, summing())(range(5))
    assert z == {True: 4, False: 6}


def test_frequency():
    assert frequency()('abca') == {'a': 2, 'b': 1, 'c': 1}
    assert frequency(len)(['a', 'bb', 'cc']) == {1: 1, 2: 2}


def test_teeing():
    c = teeing(min_by(), max_by(), lambda lo, hi: hi - lo)
    assert Stream([4, 9, 1]).collect(c) == 8


def test_summarizing():
    s = summarizing()([2, 8, 5])
    assert s == Statistics(count=3, sum=15, min=2, max=8)
    assert s.average == 5
    s = summarizing(len)(['ab', 'abcd'])
    assert (s.min, s.max, s.average) == (2, 4, 3)
    s = summarizing()([])
    assert s.count == 0
    assert s.min is ABSENT
    assert s.average is ABSENT
