"""
Collectors are reusable recipes for terminal reductions.
Use them with :meth:`pullstream.Stream.collect`, or as the ``downstream``
of :meth:`~pullstream.Stream.group` and :meth:`~pullstream.Stream.partition`.
Collectors nest, e.g. a grouping whose buckets are themselves groupings.
"""

from ._collector import (
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

__all__ = [
    'Collector',
    'Statistics',
    'as_collector',
    'averaging',
    'collecting_and_then',
    'counting',
    'filtering',
    'flat_mapping',
    'frequency',
    'grouping_by',
    'joining',
    'mapping',
    'max_by',
    'min_by',
    'partitioning_by',
    'reducing',
    'summarizing',
    'summing',
    'teeing',
    'to_dict',
    'to_list',
    'to_set',
    'to_tuple',
]
