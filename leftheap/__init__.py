#! /usr/bin/env python3

"""This package provides a persistent priority queue on a leftist heap.

Heaps are values: inserting or popping returns a new heap and leaves the
old one usable, so the same heap can be shared freely, across threads too.

The ordering is given by a priority function of two arguments,
which should return a truthy value if the first one comes out first.
The default ``operator.le`` makes a min-heap.

>>> import operator
>>> heap = new([10, 9, 8], operator.ge)
>>> heap.top_or_raise()
10
>>> list(heap.insert(11) | ntop(2))
[11, 10]

"""

__version__ = '0.1.0'

from . import heap
from . import node
from . import pipes
from .heap import (
    DEFAULT_PRIORITY,
    ArityError,
    EmptyHeapError,
    Heap,
    HeapBuilder,
    HeapError,
    HeapIterator,
    NotSupportedError,
    Result,
    dump,
    insert,
    meld,
    new,
    pop_top,
    pop_top_or_raise,
    top,
    top_or_raise,
)
from .node import Node
from .pipes import drain, into, ntop


__all__ = [
    '__version__',

    # heap
    'DEFAULT_PRIORITY',
    'Heap',
    'HeapBuilder',
    'HeapIterator',
    'Result',
    'new',
    'top', 'top_or_raise',
    'pop_top', 'pop_top_or_raise',
    'insert',
    'meld',
    'dump',

    # errors
    'HeapError',
    'ArityError',
    'EmptyHeapError',
    'NotSupportedError',

    # node
    'Node',

    # pipes
    'drain',
    'ntop',
    'into',
]
