"""Node representation for OrderedTreeLib.

A Node is deliberately a plain data container: a key and two child links.
Navigation and ordering logic live in the adapter, the traversers and
OrderedTree itself.
"""

from typing import Any, Iterator, Optional


class Node:
    """One vertex of a binary search tree.

    Each node is owned by exactly one parent (or by the tree, for the
    root). There are no parent links, so a node knows nothing about where
    it sits in the tree.

    Equality is identity. OrderedTree.depth() locates nodes by identity,
    so two distinct nodes holding the same key never compare equal.

    Attributes:
        key: The ordered key stored in this node
        left: Root of the left subtree, or None when empty
        right: Root of the right subtree, or None when empty
    """

    __slots__ = ('key', 'left', 'right')

    def __init__(self, key: Any,
                 left: Optional['Node'] = None,
                 right: Optional['Node'] = None):
        self.key = key
        self.left = left
        self.right = right

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return self.left is None and self.right is None

    def children(self) -> Iterator['Node']:
        """Yield the non-empty children, left before right."""
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    def __repr__(self) -> str:
        return f"Node({self.key!r})"
