#! /usr/bin/env python3

"""This module implements a persistent priority queue on a leftist heap.

Insertion and popping the top off the heap run in O(log n) time.
Peeking at the top runs in O(1).

No operation ever changes a heap in place.
``insert`` and ``pop_top`` return a new heap and the old one stays valid,
sharing whatever subtrees were left untouched.

A heap can be iterated over (in priority order) and filled from any
iterable, but it is not a sequence:
if you find yourself wanting indices, slices or ``in``,
you should probably use a sorted list instead.

>>> heap = new([10, 9, 8])
>>> heap.top()
Result(ok=True, value=8, detail='')
>>> value, rest = heap.pop_top_or_raise()
>>> value, list(rest), list(heap)
(8, [9, 10], [8, 9, 10])
>>> new().top()
Result(ok=False, value=None, detail='empty heap')

"""

from __future__ import annotations

import inspect
import logging
import operator
import typing as T

from tabulate import tabulate

from .node import Node, Priority, same_tree


logger = logging.getLogger(__name__)


DEFAULT_PRIORITY: Priority = operator.le
EMPTY_HEAP_DETAIL = 'empty heap'
ARITY_MESSAGE = 'priority function must have arity of 2'


class HeapError(Exception):
    """Base class of the errors raised by this package."""


class ArityError(HeapError, TypeError):
    """Priority function does not take exactly two arguments."""


class EmptyHeapError(HeapError, IndexError):
    """Top of an empty heap was requested."""


class NotSupportedError(HeapError, TypeError):
    """Operation would need a linear scan; heaps refuse to do that."""


class Result(T.NamedTuple):
    """Outcome of a query that may hit an empty heap.

    :ok:
        ``True`` if *value* holds the answer.
    :value:
        The answer, or ``None`` if not *ok*.
    :detail:
        Reason of the failure, empty if *ok*.
    """
    ok: bool
    value: T.Any = None
    detail: str = ''

    def unwrap(self) -> T.Any:
        """Return *value*, or raise ``EmptyHeapError`` if not *ok*."""
        if not self.ok:
            raise EmptyHeapError(self.detail)
        return self.value

_EMPTY = Result(False, None, EMPTY_HEAP_DETAIL)


def _binds(signature: inspect.Signature, nargs: int) -> bool:
    try:
        signature.bind(*range(nargs))
    except TypeError:
        return False
    return True

def check_arity(priority: Priority) -> None:
    """Raise ``ArityError`` unless *priority* takes exactly two arguments.

    Callables without an introspectable signature (some builtins) pass.
    """
    if not callable(priority):
        raise TypeError(f'priority function must be callable, not {priority!r}')
    try:
        signature = inspect.signature(priority)
    except (TypeError, ValueError):
        return
    if (
        _binds(signature, 2)
        and not _binds(signature, 1)
        and not _binds(signature, 3)
    ):
        return
    logger.debug('rejected priority function %r%s', priority, signature)
    raise ArityError(ARITY_MESSAGE)


class Heap(object):
    """Immutable leftist heap with a user-supplied priority function.

    Prefer ``new`` for construction;
    calling the class directly is meant for an empty heap
    (``Heap()`` or ``Heap(priority=operator.ge)``).

    ----------
    Attributes
    ----------

    :root:
        Root ``Node`` of the tree, or ``None`` for an empty heap.
    :priority:
        ``priority(a, b)`` is truthy if *a* should come out before *b*.
        Default is ``operator.le``, which makes a min-heap.
    :count:
        Number of elements, cached so that ``len`` is O(1).
    """
    __slots__ = ('_root', '_priority', '_count')

    _root: T.Optional[Node]
    _priority: Priority
    _count: int

    def __init__(
        self,
        root: T.Optional[Node] = None,
        priority: Priority = DEFAULT_PRIORITY,
        count: T.Optional[int] = None,
    ) -> None:
        if priority is not DEFAULT_PRIORITY:
            check_arity(priority)
        if count is None:
            count = 0 if root is None else root.size()
        self._root = root
        self._priority = priority
        self._count = count

    def _derive(self, root: T.Optional[Node], count: int) -> Heap:
        # Skips the arity check; priority was checked when self was built.
        heap = object.__new__(type(self))
        heap._root = root
        heap._priority = self._priority
        heap._count = count
        return heap

    @property
    def root(self) -> T.Optional[Node]:
        return self._root

    @property
    def priority(self) -> Priority:
        return self._priority

    @property
    def count(self) -> int:
        return self._count

    def __repr__(self) -> str:
        if not self._count:
            return f'{type(self).__name__}(count=0)'
        return (
            f'{type(self).__name__}(count={self._count}, '
            f'top={self._root.value!r})'
        )

    def __eq__(self, other: T.Any) -> bool:
        if not isinstance(other, Heap):
            return NotImplemented
        return (
            self._count == other._count
            and self._priority == other._priority
            and same_tree(self._root, other._root)
        )

    __hash__ = None

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._count > 0

    def __iter__(self) -> HeapIterator:
        return HeapIterator(self)

    def __contains__(self, value: T.Any) -> bool:
        raise NotSupportedError(
            'heap does not support membership testing; use a sorted list'
        )

    def __getitem__(self, key: T.Any) -> T.NoReturn:
        if isinstance(key, slice):
            raise NotSupportedError(
                'heap does not support slicing; use a sorted list'
            )
        raise NotSupportedError(
            'heap does not support indexing; use a sorted list'
        )

    def is_empty(self) -> bool:
        return self._count == 0

    def top(self) -> Result:
        """Return the top value as determined by the priority function."""
        if self._count == 0:
            return _EMPTY
        return Result(True, self._root.value)

    def top_or_raise(self) -> T.Any:
        """As ``top`` but raise ``EmptyHeapError`` for an empty heap."""
        return self.top().unwrap()

    def pop_top(self) -> Result:
        """Pop the top off the heap.

        On success *value* of the result is a tuple of the top element and
        the heap without it. This heap is left as it was.
        """
        if self._count == 0:
            return _EMPTY
        root = self._root
        rest = Node.merge(root.left, root.right, self._priority)
        return Result(True, (root.value, self._derive(rest, self._count - 1)))

    def pop_top_or_raise(self) -> T.Tuple[T.Any, Heap]:
        """As ``pop_top`` but raise ``EmptyHeapError`` for an empty heap."""
        return self.pop_top().unwrap()

    def insert(self, value: T.Any) -> Heap:
        """Return a new heap with *value* merged in."""
        root = Node.merge(self._root, Node.leaf(value), self._priority)
        return self._derive(root, self._count + 1)

    def meld(self, other: T.Optional[Heap]) -> Heap:
        """Return a new heap holding the elements of both heaps.

        Both heaps must have been built with the same priority function.
        """
        if other is None:
            return self
        if other._priority != self._priority:
            raise ValueError('cannot meld heaps of different priority functions')
        if not other._count:
            return self
        if not self._count:
            return other
        root = Node.merge(self._root, other._root, self._priority)
        return self._derive(root, self._count + other._count)

    def into(self, iterable: T.Iterable) -> Heap:
        """Insert every item of *iterable*, in whatever order they come."""
        return HeapBuilder(self).extend(iterable).done()


class HeapIterator(object):
    """Pull elements out of a heap one by one, in priority order.

    Each step pops the top off a private heap value,
    so the heap it was created from is never affected
    and nothing is computed ahead of ``next``.

    It cannot be rewound; iterate over the original heap again instead,
    which yields the same order every time.
    """
    _heap: Heap

    def __init__(self, heap: Heap) -> None:
        self._heap = heap

    def __repr__(self) -> str:
        return f'{type(self).__name__}(remaining={self._heap.count})'

    def __iter__(self) -> HeapIterator:
        return self

    def __next__(self) -> T.Any:
        if not self._heap:
            raise StopIteration
        value, self._heap = self._heap.pop_top_or_raise()
        return value

    def __len__(self) -> int:
        return self._heap.count

    def __length_hint__(self) -> int:
        return self._heap.count

    @property
    def heap(self) -> Heap:
        """Heap of the elements not yet produced."""
        return self._heap


class HeapBuilder(object):
    """Fill a heap with elements handed over one at a time.

    .. code:: python
        >>> builder = HeapBuilder(new(operator.ge))
        >>> builder.add(3).add(7).extend([1, 5]).done().top_or_raise()
        7

    :heap:
        Heap to start from. ``None`` (the "no heap" value ``new([])``
        returns) means an empty heap with the default priority function.
    """
    _heap: Heap

    _closed: bool = False

    def __init__(self, heap: T.Optional[Heap] = None) -> None:
        self._heap = Heap() if heap is None else heap

    def __repr__(self) -> str:
        state = 'closed' if self._closed else 'open'
        return f'{type(self).__name__}({self._heap!r}, {state})'

    def _check_open(self) -> None:
        if self._closed:
            raise HeapError('builder is closed')

    @property
    def heap(self) -> Heap:
        return self._heap

    @property
    def closed(self) -> bool:
        return self._closed

    def add(self, value: T.Any) -> HeapBuilder:
        self._check_open()
        self._heap = self._heap.insert(value)
        return self

    def extend(self, iterable: T.Iterable) -> HeapBuilder:
        self._check_open()
        heap = self._heap
        for value in iterable:
            heap = heap.insert(value)
        self._heap = heap
        return self

    def done(self) -> Heap:
        """Finish and return the heap built so far."""
        self._check_open()
        self._closed = True
        logger.debug('built heap of %d elements', self._heap.count)
        return self._heap

    def halt(self) -> None:
        """Abandon the collection; the heap is discarded."""
        self._check_open()
        self._closed = True


def new(*args: T.Any) -> T.Optional[Heap]:
    """Create a new heap.

    - ``new()``: empty min-heap (priority function ``operator.le``).
    - ``new(priority)``: empty heap using the callable *priority*.
    - ``new(value)``: heap containing only *value*.
    - ``new(values)``: heap of all elements of the list *values*.
    - ``new(value, priority)`` / ``new(values, priority)``: as above
      but with the given priority function.

    Only a ``list`` counts as many elements; a tuple is one element.
    An empty list gives ``None``, the "no heap" value,
    which the module-level functions treat like an empty heap.
    *priority* is not checked in that case.

    *priority* must take exactly two arguments and return a truthy value if
    the first one is higher priority than the second,
    otherwise ``ArityError`` is raised.

    .. code:: python
        >>> new([10, 9, 8], operator.ge).top_or_raise()
        10
        >>> new([]) is None
        True
        >>> new(10, lambda a: a)
        Traceback (most recent call last):
        ...
        leftheap.heap.ArityError: priority function must have arity of 2
    """
    if len(args) > 2:
        raise TypeError(f'new() takes at most 2 arguments ({len(args)} given)')
    if not args:
        return Heap()

    if len(args) == 1:
        value, = args
        if callable(value):
            return Heap(priority=value)
        return new(value, DEFAULT_PRIORITY)

    value, priority = args
    if isinstance(value, list) and not value:
        return None
    check_arity(priority)
    if isinstance(value, list):
        first, *rest = value
        return Heap(Node.leaf(first), priority, 1).into(rest)
    return Heap(Node.leaf(value), priority, 1)


def _coerce(heap: T.Optional[Heap]) -> Heap:
    return Heap() if heap is None else heap

def top(heap: T.Optional[Heap]) -> Result:
    return _coerce(heap).top()

def top_or_raise(heap: T.Optional[Heap]) -> T.Any:
    return _coerce(heap).top_or_raise()

def pop_top(heap: T.Optional[Heap]) -> Result:
    return _coerce(heap).pop_top()

def pop_top_or_raise(heap: T.Optional[Heap]) -> T.Tuple[T.Any, Heap]:
    return _coerce(heap).pop_top_or_raise()

def insert(heap: T.Optional[Heap], value: T.Any) -> Heap:
    return _coerce(heap).insert(value)

def meld(heap: T.Optional[Heap], other: T.Optional[Heap]) -> T.Optional[Heap]:
    if heap is None:
        return other
    return heap.meld(other)


def dump(heap: T.Optional[Heap]) -> str:
    """Render the tree of *heap* as a table, one row per node (pre-order).

    .. code:: python
        >>> print(dump(new([2, 1])))
        +-------+------+-------+------+
        | depth | side | value | rank |
        +-------+------+-------+------+
        |   0   | root |   1   |  1   |
        |   1   | left |   2   |  1   |
        +-------+------+-------+------+
    """
    if heap is None or heap.root is None:
        return '<empty heap>'
    rows = [
        [str(depth), side, repr(node.value), str(node.rank)]
        for depth, side, node in heap.root.walk()
    ]
    return tabulate(
        rows,
        headers=['depth', 'side', 'value', 'rank'],
        tablefmt='pretty',
        disable_numparse=True,
    )


if __name__ == '__main__':
    import doctest
    doctest.testmod()
