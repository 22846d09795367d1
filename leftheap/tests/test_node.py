import operator
import random
import unittest

from ..node import REPR_DEPTH, Node, node_rank, same_tree


def check_tree(testcase, node, priority):
    if node is None:
        return 0
    for child in (node.left, node.right):
        if child is not None:
            testcase.assertTrue(priority(node.value, child.value))
    left = check_tree(testcase, node.left, priority)
    right = check_tree(testcase, node.right, priority)
    testcase.assertGreaterEqual(left, right)
    testcase.assertEqual(node.rank, right + 1)
    return node.rank


def build(values, priority=operator.le):
    tree = None
    for value in values:
        tree = Node.merge(tree, Node.leaf(value), priority)
    return tree


class NodeTests(unittest.TestCase):
    def test_leaf(self):
        leaf = Node.leaf(3)
        self.assertEqual(leaf.rank, 1)
        self.assertIsNone(leaf.left)
        self.assertIsNone(leaf.right)
        self.assertEqual(node_rank(leaf), 1)
        self.assertEqual(node_rank(None), 0)

    def test_merge_with_absent_side_returns_other(self):
        tree = build([4, 2, 7])
        self.assertIs(Node.merge(tree, None, operator.le), tree)
        self.assertIs(Node.merge(None, tree, operator.le), tree)
        self.assertIsNone(Node.merge(None, None, operator.le))

    def test_make_keeps_left_on_equal_rank(self):
        a = Node.leaf(5)
        b = Node.leaf(6)
        node = Node.make(1, a, b)
        self.assertIs(node.left, a)
        self.assertIs(node.right, b)
        self.assertEqual(node.rank, 2)

    def test_make_swaps_lower_rank_to_right(self):
        b = Node.leaf(6)
        node = Node.make(1, None, b)
        self.assertIs(node.left, b)
        self.assertIsNone(node.right)
        self.assertEqual(node.rank, 1)

    def test_merge_reuses_winner_left_subtree(self):
        a = Node.make(1, Node.leaf(5), None)
        b = Node.leaf(3)
        merged = Node.merge(a, b, operator.le)
        self.assertEqual(merged.value, 1)
        self.assertIs(merged.left, a.left)
        self.assertIs(merged.right, b)

    def test_merge_leaves_inputs_untouched(self):
        a = build([1, 5, 9])
        b = build([2, 3])
        before = (repr(a), repr(b))
        Node.merge(a, b, operator.le)
        self.assertEqual((repr(a), repr(b)), before)

    def test_invariants_hold_after_random_merges(self):
        rng = random.Random(4)
        for priority in (operator.le, operator.ge):
            for _ in range(20):
                a = build([rng.randint(0, 50) for _ in range(rng.randint(0, 30))], priority)
                b = build([rng.randint(0, 50) for _ in range(rng.randint(0, 30))], priority)
                check_tree(self, Node.merge(a, b, priority), priority)

    def test_size(self):
        self.assertEqual(build(range(17)).size(), 17)
        self.assertEqual(Node.leaf(0).size(), 1)

    def test_priority_errors_propagate(self):
        def priority(a, b):
            raise ValueError('cannot compare')

        with self.assertRaises(ValueError):
            Node.merge(Node.leaf(1), Node.leaf(2), priority)

    def test_repr_hides_rank(self):
        self.assertEqual(
            repr(Node.leaf('x')), "Node(value='x', left=None, right=None)"
        )

    def test_walk(self):
        tree = build([2, 1, 3])
        walked = [(depth, side, node.value) for depth, side, node in tree.walk()]
        self.assertEqual(walked, [(0, 'root', 1), (1, 'left', 2), (1, 'right', 3)])

    def test_walk_deep_chain(self):
        tree = build(range(3000, 0, -1))
        walked = list(tree.walk())
        self.assertEqual(len(walked), 3000)
        self.assertEqual(walked[0][:2], (0, 'root'))
        depth, side, node = walked[-1]
        self.assertEqual((depth, side, node.value), (2999, 'left', 3000))

    def test_repr_is_bounded(self):
        text = repr(build(range(3000, 0, -1)))
        self.assertTrue(text.startswith('Node(value=1, left=Node(value=2, '))
        self.assertEqual(text.count('Node(value='), REPR_DEPTH)
        self.assertIn('Node(...)', text)

    def test_same_tree(self):
        self.assertTrue(same_tree(None, None))
        self.assertTrue(same_tree(build([3, 1, 2]), build([3, 1, 2])))
        self.assertFalse(same_tree(build([3, 1, 2]), build([3, 1, 4])))
        self.assertFalse(same_tree(build([1, 2]), None))

    def test_same_tree_deep_chain(self):
        chain = list(range(3000, 0, -1))
        self.assertTrue(same_tree(build(chain), build(chain)))
        self.assertFalse(same_tree(build(chain), build([3001] + chain[1:])))
