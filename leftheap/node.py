#! /usr/bin/env python3

"""This module implements the tree cell of a leftist heap.

A leftist heap keeps the rank (the length of the right spine) of every left
child greater than or equal to that of its right sibling.
Merging two trees therefore only ever walks down right spines,
which are at most O(log n) long.

Nodes are immutable. Merging builds new nodes along the right spine only and
reuses every untouched subtree of the inputs as is.

>>> import operator
>>> tree = None
>>> for value in [5, 3, 8, 1]:
...     tree = Node.merge(tree, Node.leaf(value), operator.le)
>>> tree.value
1
>>> tree.size()
4
>>> node_rank(None), node_rank(Node.leaf(7))
(0, 1)

"""

from __future__ import annotations

import typing as T


# typedef
Priority = T.Callable[[T.Any, T.Any], T.Any]


# Nodes deeper than this are shown as ``Node(...)`` by ``repr``.
REPR_DEPTH = 16


def node_rank(node: T.Optional[Node]) -> int:
    """Return the rank of *node*; an absent node has rank 0."""
    return 0 if node is None else node.rank


class Node(T.NamedTuple):
    """Immutable leftist heap cell.

    These are building blocks of ``leftheap.heap.Heap``;
    you should not need them unless you're writing your own container.

    :value:
        The stored element. Only the priority function looks into it.
    :rank:
        Number of nodes on the right spine, this node included.
    :left:
        Left subtree or ``None``. Its rank is never lower than *right*'s.
    :right:
        Right subtree or ``None``.
    """
    value: T.Any
    rank: int
    left: T.Optional[Node] = None
    right: T.Optional[Node] = None

    def __repr__(self) -> str:
        return _node_repr(self, REPR_DEPTH)

    @classmethod
    def leaf(cls, value: T.Any) -> Node:
        return cls(value, 1, None, None)

    @classmethod
    def make(
        cls, value: T.Any, a: T.Optional[Node], b: T.Optional[Node]
    ) -> Node:
        """Build a node over *a* and *b*, putting the higher rank on the left.

        On equal ranks *a* stays on the left.
        """
        if node_rank(a) >= node_rank(b):
            return cls(value, node_rank(b) + 1, a, b)
        else:
            return cls(value, node_rank(a) + 1, b, a)

    @classmethod
    def merge(
        cls, a: T.Optional[Node], b: T.Optional[Node], priority: Priority
    ) -> T.Optional[Node]:
        """Merge two trees into one and return the new root.

        .. code:: python
            >>> import operator
            >>> a = Node.make(2, Node.leaf(4), None)
            >>> b = Node.leaf(3)
            >>> Node.merge(a, b, operator.le)
            Node(value=2, left=Node(value=4, left=None, right=None), \
right=Node(value=3, left=None, right=None))

        :a:
        :b:
            Either may be ``None``, in which case the other one is returned
            without being copied.
        :priority:
            ``priority(x, y)`` must be truthy if *x* should be closer to the
            top than *y*. Whatever it raises goes straight to the caller.
        """
        if b is None:
            return a
        if a is None:
            return b

        if priority(a.value, b.value):
            winner, loser = a, b
        else:
            winner, loser = b, a
        return cls.make(
            winner.value,
            winner.left,
            cls.merge(winner.right, loser, priority),
        )

    def size(self) -> int:
        """Count the nodes of this tree. This is O(n)."""
        total = 0
        stack = [self]
        while stack:
            node = stack.pop()
            total += 1
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        return total

    def walk(
        self, depth: int = 0, side: str = 'root'
    ) -> T.Iterator[T.Tuple[int, str, Node]]:
        """Yield ``(depth, side, node)`` for every node, in pre-order."""
        stack = [(depth, side, self)]
        while stack:
            depth, side, node = stack.pop()
            yield depth, side, node
            # right first, so that left comes out first
            if node.right is not None:
                stack.append((depth + 1, 'right', node.right))
            if node.left is not None:
                stack.append((depth + 1, 'left', node.left))


def _node_repr(node: T.Optional[Node], depth: int) -> str:
    if node is None:
        return 'None'
    name = type(node).__name__
    if depth <= 0:
        return f'{name}(...)'
    return (
        f'{name}(value={node.value!r}, '
        f'left={_node_repr(node.left, depth - 1)}, '
        f'right={_node_repr(node.right, depth - 1)})'
    )


def same_tree(a: T.Optional[Node], b: T.Optional[Node]) -> bool:
    """Return whether two trees have equal values and ranks, node by node.

    Left spines can be as long as the tree is big,
    so this walks both trees without recursion.

    >>> tree = Node.make(1, Node.leaf(2), None)
    >>> same_tree(tree, Node.make(1, Node.leaf(2), None))
    True
    >>> same_tree(Node.leaf(1), None)
    False
    """
    stack = [(a, b)]
    while stack:
        x, y = stack.pop()
        if x is y:
            continue
        if x is None or y is None:
            return False
        if x.rank != y.rank or x.value != y.value:
            return False
        stack.append((x.right, y.right))
        stack.append((x.left, y.left))
    return True


if __name__ == '__main__':
    import doctest
    doctest.testmod()
