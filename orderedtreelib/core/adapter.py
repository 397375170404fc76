"""TreeAdapter abstraction for OrderedTreeLib.

The adapter provides the navigation logic for binary nodes, decoupling
the node representation from the traversal and collection machinery.
Traversers, collectors and the display helper only ever reach a node's
children through an adapter.
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional

from .node import Node


class TreeAdapter(ABC):
    """Abstract adapter for navigating binary trees.

    Only the two child accessors are required. Everything else has a
    default built on top of them.
    """

    @abstractmethod
    def get_left(self, node: Node) -> Optional[Node]:
        """Get the left child of a node.

        Args:
            node: The parent node

        Returns:
            Left child, or None if the left subtree is empty
        """
        pass

    @abstractmethod
    def get_right(self, node: Node) -> Optional[Node]:
        """Get the right child of a node.

        Args:
            node: The parent node

        Returns:
            Right child, or None if the right subtree is empty
        """
        pass

    def get_children(self, node: Node) -> Iterator[Node]:
        """Get an iterator of the non-empty children, left before right.

        Args:
            node: The parent node

        Returns:
            Iterator yielding child nodes
        """
        left = self.get_left(node)
        if left is not None:
            yield left
        right = self.get_right(node)
        if right is not None:
            yield right

    def is_leaf(self, node: Node) -> bool:
        """Check if a node has no children."""
        return self.get_left(node) is None and self.get_right(node) is None

    def count_children(self, node: Node) -> int:
        """Count the immediate children of a node (0, 1 or 2)."""
        return sum(1 for _ in self.get_children(node))


class NodeAdapter(TreeAdapter):
    """Adapter for the library's own Node class."""

    def get_left(self, node: Node) -> Optional[Node]:
        return node.left

    def get_right(self, node: Node) -> Optional[Node]:
        return node.right

    def get_children(self, node: Node) -> Iterator[Node]:
        return node.children()

    def is_leaf(self, node: Node) -> bool:
        return node.is_leaf()
