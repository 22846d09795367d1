#! /usr/bin/env python3

"""This module implements heap operations through pipe.

>>> from leftheap.heap import new
>>> list(new([3, 1, 2]) | drain)
[1, 2, 3]
>>> list(new([3, 1, 2]) | ntop(2))
[1, 2]
>>> ([5, 4, 6] | into()).top_or_raise()
4

"""

import typing as T

from pipe import Pipe

from .heap import Heap, HeapBuilder, HeapIterator


@Pipe
def drain(heap: T.Optional[Heap]) -> T.Iterator:
    """Yield elements of *heap* in priority order, popping one at a time.

    .. code:: python
        >>> import operator
        >>> from leftheap.heap import new
        >>> list(new([1, 3, 2], operator.ge) | drain)
        [3, 2, 1]

    Elements are popped only as they're requested,
    so stopping early costs nothing for the rest.
    *heap* itself is not affected.

    :heap:
        ``None`` (what ``new([])`` returns) yields nothing.
    """
    if heap is None:
        return iter(())
    return HeapIterator(heap)


@Pipe
def ntop(heap: T.Optional[Heap], n: int) -> T.Iterator:
    """Yield at most *n* elements of *heap*, in priority order.

    Unlike ``heapq.nsmallest`` nothing beyond the *n*-th element is computed.

    :n:
        Maximum number of elements. Negative is treated as zero.
    """
    if heap is None:
        return
    iterator = HeapIterator(heap)
    for _ in range(n):
        try:
            yield next(iterator)
        except StopIteration:
            return


@Pipe
def into(iterable: T.Iterable, heap: T.Optional[Heap] = None) -> Heap:
    """Fold every item of *iterable* into *heap* and return the result.

    .. code:: python
        >>> import operator
        >>> from leftheap.heap import new
        >>> heap = ['spam', 'eggs', 'ham'] | into(new(operator.ge))
        >>> list(heap)
        ['spam', 'ham', 'eggs']

    The order of *iterable* does not matter.

    :heap:
        Heap to insert into. Default is a new empty min-heap.
    """
    return HeapBuilder(heap).extend(iterable).done()
