"""Tests for height, depth, is_balanced and rebalance.

These cover the shape queries on balanced, degenerate and empty trees,
identity-based depth lookup, and the guarantees of rebalancing.
"""

import sys
import unittest
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from orderedtreelib import OrderedTree, TreeConfig, ExecutionMode, Node
from orderedtreelib.testing import TreeInvariantChecker, random_keys

MODES = [ExecutionMode.RECURSIVE, ExecutionMode.ITERATIVE]


class ModeTestCase(unittest.TestCase):
    """Base class building trees once per execution mode."""

    def make_trees(self, keys=()):
        return [OrderedTree(keys, TreeConfig(mode=mode)) for mode in MODES]


class TestHeight(ModeTestCase):
    """Test subtree heights."""

    def test_empty_subtree_is_minus_one(self):
        """None and the empty tree both have height -1."""
        for tree in self.make_trees():
            self.assertEqual(tree.height(), -1)
            self.assertEqual(tree.height(tree.root), -1)
            self.assertEqual(tree.height(None), -1)

    def test_leaf_is_zero(self):
        """A leaf has height 0."""
        for tree in self.make_trees([1, 2, 3]):
            self.assertEqual(tree.height(tree.find(1)), 0)
            self.assertEqual(tree.height(tree.find(2)), 1)

    def test_explicit_none_child(self):
        """A missing child passed explicitly is an empty subtree."""
        for tree in self.make_trees([1, 2]):
            self.assertIsNone(tree.root.left)
            self.assertEqual(tree.height(tree.root.left), -1)
            self.assertEqual(tree.height(tree.root), 1)

    def test_height_of_chain(self):
        """n ascending inserts give height n - 1."""
        for tree in self.make_trees():
            for key in range(6):
                tree.insert(key)
            self.assertEqual(tree.height(), 5)
            self.assertEqual(tree.height(tree.find(3)), 2)


class TestDepth(ModeTestCase):
    """Test identity-based depth lookup."""

    def test_depth_matches_edge_count(self):
        """Every reachable node's depth equals its distance from the root."""
        for tree in self.make_trees(random_keys(60, seed=8)):
            for node, depth in tree.traverse("level"):
                self.assertEqual(tree.depth(node), depth)
                self.assertGreaterEqual(tree.height(node), 0)

    def test_root_depth_is_zero(self):
        for tree in self.make_trees([5, 3, 8]):
            self.assertEqual(tree.depth(tree.root), 0)

    def test_deleted_node_is_unreachable(self):
        """A removed node reports -1."""
        for tree in self.make_trees([1, 2, 3, 4, 5, 6, 7]):
            leaf = tree.find(7)
            tree.delete_item(7)
            self.assertEqual(tree.depth(leaf), -1)

    def test_removed_successor_node_is_unreachable(self):
        """Two-child deletion unlinks the successor's node object."""
        for tree in self.make_trees([1, 2, 3, 4, 5, 6, 7]):
            successor = tree.find(5)
            root = tree.root
            tree.delete_item(4)

            self.assertEqual(tree.depth(successor), -1)
            # The root node object survives with the successor's key
            self.assertIs(tree.root, root)
            self.assertEqual(tree.depth(root), 0)

    def test_foreign_node_is_unreachable(self):
        """Nodes from another tree are not found, even with an equal key."""
        for tree in self.make_trees([1, 2, 3]):
            other = OrderedTree([1, 2, 3])
            self.assertEqual(tree.depth(other.find(2)), -1)
            self.assertEqual(tree.depth(Node(2)), -1)

    def test_none_and_empty_tree(self):
        for tree in self.make_trees():
            self.assertEqual(tree.depth(None), -1)
            self.assertEqual(tree.depth(Node(1)), -1)


class TestIsBalanced(ModeTestCase):
    """Test the height-balance predicate."""

    def test_empty_tree_is_balanced(self):
        for tree in self.make_trees():
            self.assertTrue(tree.is_balanced())
            self.assertTrue(tree.isBalanced())

    def test_built_tree_is_balanced(self):
        for tree in self.make_trees(range(100)):
            self.assertTrue(tree.is_balanced())

    def test_large_inserts_unbalance(self):
        """A chain hanging off the rightmost node breaks balance."""
        for tree in self.make_trees([3, 1, 4, 1, 5, 9, 2, 6]):
            for key in (120, 130, 140):
                tree.insert(key)
            self.assertFalse(tree.is_balanced())
            # The left half is untouched
            self.assertTrue(tree.is_balanced(tree.root.left))

    def test_difference_of_one_is_allowed(self):
        for tree in self.make_trees([2, 1]):
            self.assertEqual(tree.height(tree.root.left), -1)
            self.assertEqual(tree.height(tree.root.right), 0)
            self.assertTrue(tree.is_balanced())

    def test_balanced_heights_but_unbalanced_child(self):
        """Equal heights at the root do not hide an unbalanced subtree."""
        root = Node(50,
                    Node(20, Node(10, Node(5, Node(1)))),
                    Node(80, None, Node(90, None, Node(95, None, Node(99)))))
        for tree in self.make_trees():
            tree.root = root
            self.assertEqual(tree.height(root.left), tree.height(root.right))
            self.assertFalse(tree.is_balanced())

    def test_agrees_with_definition(self):
        """Single-pass result matches the height-difference definition."""

        def balanced(tree, node):
            if node is None:
                return True
            return (abs(tree.height(node.left) - tree.height(node.right)) <= 1
                    and balanced(tree, node.left) and balanced(tree, node.right))

        for seed in range(15):
            for tree in self.make_trees():
                for key in random_keys(25, seed=seed):
                    tree.insert(key)
                self.assertEqual(tree.is_balanced(), balanced(tree, tree.root))


class TestRebalance(ModeTestCase):
    """Test rebuilding a minimum-height tree."""

    def test_rebalance_restores_balance(self):
        for tree in self.make_trees():
            for key in range(31):
                tree.insert(key)
            self.assertFalse(tree.is_balanced())

            tree.rebalance()

            self.assertTrue(tree.is_balanced())
            self.assertEqual(tree.height(), 4)
            self.assertEqual(tree.keys(), list(range(31)))
            TreeInvariantChecker(tree).assert_valid()

    def test_rebalance_keeps_key_set(self):
        for seed in range(10):
            for tree in self.make_trees(random_keys(20, seed=seed)):
                for key in random_keys(20, upper=300, seed=seed + 100):
                    tree.insert(key)
                before = set(tree)

                tree.rebalance()

                self.assertEqual(set(tree), before)
                self.assertTrue(tree.is_balanced())

    def test_rebalance_is_idempotent(self):
        """Rebalancing a balanced tree changes nothing observable."""
        for tree in self.make_trees(random_keys(40, seed=2)):
            keys_before = tree.keys()
            height_before = tree.height()

            tree.rebalance()
            tree.rebalance()

            self.assertEqual(tree.keys(), keys_before)
            self.assertEqual(tree.height(), height_before)

    def test_rebalance_empty_tree(self):
        for tree in self.make_trees():
            tree.rebalance()
            self.assertIsNone(tree.root)
            self.assertTrue(tree.is_balanced())

    def test_rebalance_after_deletes(self):
        for tree in self.make_trees(range(64)):
            for key in range(0, 64, 2):
                tree.delete_item(key)
            for key in range(100, 120):
                tree.insert(key)

            tree.rebalance()

            self.assertTrue(tree.is_balanced())
            self.assertEqual(tree.keys(), list(range(1, 64, 2)) + list(range(100, 120)))


if __name__ == '__main__':
    unittest.main()
