"""OrderedTree: an unbalanced-by-default binary search tree.

The tree stores each key at most once and keeps the binary search tree
property: every key in a node's left subtree is strictly smaller than the
node's key, and every key in its right subtree is strictly greater.

Construction produces a perfectly height-balanced tree. Later inserts and
deletes never rotate, so the shape can degrade; ``is_balanced()`` detects
that and ``rebalance()`` rebuilds a minimum-height tree from the same keys.

Example:
    >>> tree = OrderedTree([3, 1, 4, 1, 5, 9, 2, 6])
    >>> tree.keys()
    [1, 2, 3, 4, 5, 6, 9]
    >>> tree.height()
    2
    >>> for key in (120, 130, 140):
    ...     tree.insert(key)
    >>> tree.is_balanced()
    False
    >>> tree.rebalance()
    >>> tree.is_balanced()
    True
"""

import logging
from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple, Union

from .core.node import Node
from .core.adapter import NodeAdapter
from .core.traverser import TreeTraverser, create_traverser
from ._common.config import TraversalOrder, TreeConfig
from .errors import ConfigurationError, InvalidArgumentError

logger = logging.getLogger(__name__)

# Default for parameters that fall back to the root when omitted. None
# cannot serve here because None is a valid (empty) subtree.
_USE_ROOT = object()


class OrderedTree:
    """Binary search tree over unique, totally ordered keys.

    All mutating operations run to completion before returning and the
    tree has no internal locking; callers must not mutate a tree from
    several threads at once.

    Attributes:
        root: Root node, or None when the tree holds no keys
        config: TreeConfig selecting recursive or iterative algorithms
    """

    def __init__(self, keys: Iterable[Any] = (), config: Optional[TreeConfig] = None):
        """Build a balanced tree from an arbitrary collection of keys.

        Args:
            keys: Keys in any order, duplicates allowed
            config: Tree configuration (default recursive algorithms)

        Raises:
            ConfigurationError: If the configuration fails validation
        """
        self.config = config if config is not None else TreeConfig()
        errors = self.config.validate()
        if errors:
            raise ConfigurationError(errors)

        self.adapter = NodeAdapter()
        self.root: Optional[Node] = self.build_tree(keys)

    @classmethod
    def build(cls, keys: Iterable[Any], config: Optional[TreeConfig] = None) -> 'OrderedTree':
        """Create a tree from keys (same as calling the constructor)."""
        return cls(keys, config)

    # Construction

    def build_tree(self, keys: Iterable[Any]) -> Optional[Node]:
        """Build a detached, height-balanced subtree from keys.

        The keys are sorted and deduplicated, then the middle element of
        each inclusive range ``[start, end]`` becomes the subtree root,
        with ``mid = (start + end) // 2``. For an even-sized range the
        extra element therefore lands in the right half.

        Args:
            keys: Keys in any order, duplicates allowed

        Returns:
            Root of the new subtree, or None if keys is empty
        """
        ordered = sorted(keys)
        unique: List[Any] = []
        for key in ordered:
            # Equal keys are adjacent after sorting
            if not unique or unique[-1] < key:
                unique.append(key)

        logger.debug("Building tree from %d unique keys (%d given)",
                     len(unique), len(ordered))
        return self._sorted_to_bst(unique, 0, len(unique) - 1)

    def _sorted_to_bst(self, keys: List[Any], start: int, end: int) -> Optional[Node]:
        if start > end:
            return None

        mid = (start + end) // 2
        node = Node(keys[mid])
        node.left = self._sorted_to_bst(keys, start, mid - 1)
        node.right = self._sorted_to_bst(keys, mid + 1, end)
        return node

    # Mutation

    def insert(self, key: Any) -> None:
        """Insert a key as a new leaf.

        Inserting a key that is already present does nothing. The tree is
        never rebalanced here.

        Args:
            key: Key to insert
        """
        if self.config.iterative:
            self._insert_iterative(key)
        else:
            self.root = self._insert(self.root, key)

    def _insert(self, node: Optional[Node], key: Any) -> Node:
        if node is None:
            return Node(key)

        if key < node.key:
            node.left = self._insert(node.left, key)
        elif key > node.key:
            node.right = self._insert(node.right, key)

        return node

    def _insert_iterative(self, key: Any) -> None:
        if self.root is None:
            self.root = Node(key)
            return

        current = self.root
        while True:
            if key < current.key:
                if current.left is None:
                    current.left = Node(key)
                    return
                current = current.left
            elif key > current.key:
                if current.right is None:
                    current.right = Node(key)
                    return
                current = current.right
            else:
                return

    def delete_item(self, key: Any) -> None:
        """Remove a key from the tree.

        A node with at most one child is replaced by that child. A node
        with two children takes the key of its in-order successor (the
        minimum of its right subtree), and the successor is then removed
        from the right subtree. Deleting an absent key does nothing.

        Args:
            key: Key to remove
        """
        if self.config.iterative:
            self._delete_iterative(key)
        else:
            self.root = self._delete(self.root, key)

    def _delete(self, node: Optional[Node], key: Any) -> Optional[Node]:
        if node is None:
            logger.debug("delete_item: key %r not present", key)
            return None

        if key < node.key:
            node.left = self._delete(node.left, key)
        elif key > node.key:
            node.right = self._delete(node.right, key)
        else:
            if node.left is None:
                return node.right
            if node.right is None:
                return node.left

            successor = self.min_node(node.right)
            node.key = successor.key
            node.right = self._delete(node.right, successor.key)

        return node

    def _delete_iterative(self, key: Any) -> None:
        parent: Optional[Node] = None
        current = self.root
        while current is not None:
            if key < current.key:
                parent, current = current, current.left
            elif key > current.key:
                parent, current = current, current.right
            else:
                break

        if current is None:
            logger.debug("delete_item: key %r not present", key)
            return

        if current.left is not None and current.right is not None:
            successor_parent = current
            successor = current.right
            while successor.left is not None:
                successor_parent, successor = successor, successor.left

            current.key = successor.key
            # The successor has no left child
            if successor_parent is current:
                successor_parent.right = successor.right
            else:
                successor_parent.left = successor.right
            return

        replacement = current.right if current.left is None else current.left
        if parent is None:
            self.root = replacement
        elif parent.left is current:
            parent.left = replacement
        else:
            parent.right = replacement

    deleteItem = delete_item

    def rebalance(self) -> None:
        """Rebuild the tree as a minimum-height tree with the same keys."""
        keys: List[Any] = []
        self.in_order(lambda node: keys.append(node.key))

        old_root = self.root
        self.root = self.build_tree(keys)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Rebalanced %d keys: height %d -> %d",
                         len(keys), self.height(old_root), self.height(self.root))

    # Lookup

    def find(self, key: Any) -> Optional[Node]:
        """Find the node holding key.

        Args:
            key: Key to look up

        Returns:
            The matching node, or None if the key is absent
        """
        if self.config.iterative:
            current = self.root
            while current is not None:
                if key < current.key:
                    current = current.left
                elif key > current.key:
                    current = current.right
                else:
                    return current
            return None
        return self._find(self.root, key)

    def _find(self, node: Optional[Node], key: Any) -> Optional[Node]:
        if node is None:
            return None
        if key < node.key:
            return self._find(node.left, key)
        if key > node.key:
            return self._find(node.right, key)
        return node

    def min_node(self, node: Any = _USE_ROOT) -> Optional[Node]:
        """Return the leftmost (smallest-key) node of a subtree.

        Args:
            node: Subtree root (default: the tree root)

        Returns:
            Leftmost node, or None for an empty subtree
        """
        node = self._resolve(node)
        if node is None:
            return None
        while node.left is not None:
            node = node.left
        return node

    def max_node(self, node: Any = _USE_ROOT) -> Optional[Node]:
        """Return the rightmost (largest-key) node of a subtree."""
        node = self._resolve(node)
        if node is None:
            return None
        while node.right is not None:
            node = node.right
        return node

    # Traversal

    def level_order(self, callback: Callable[[Node], Any]) -> None:
        """Visit every node breadth-first, left before right.

        Raises:
            InvalidArgumentError: If callback is missing or not callable
        """
        self._visit(TraversalOrder.LEVEL, callback, 'levelOrder', self.root)

    def in_order(self, callback: Callable[[Node], Any], node: Any = _USE_ROOT) -> None:
        """Visit left subtree, node, right subtree (ascending keys).

        Raises:
            InvalidArgumentError: If callback is missing or not callable
        """
        self._visit(TraversalOrder.IN, callback, 'inOrder', node)

    def pre_order(self, callback: Callable[[Node], Any], node: Any = _USE_ROOT) -> None:
        """Visit node, left subtree, right subtree.

        Raises:
            InvalidArgumentError: If callback is missing or not callable
        """
        self._visit(TraversalOrder.PRE, callback, 'preOrder', node)

    def post_order(self, callback: Callable[[Node], Any], node: Any = _USE_ROOT) -> None:
        """Visit left subtree, right subtree, node.

        Raises:
            InvalidArgumentError: If callback is missing or not callable
        """
        self._visit(TraversalOrder.POST, callback, 'postOrder', node)

    levelOrder = level_order
    inOrder = in_order
    preOrder = pre_order
    postOrder = post_order

    def _visit(self, order: TraversalOrder, callback: Callable[[Node], Any],
               name: str, node: Any) -> None:
        if callback is None or not callable(callback):
            raise InvalidArgumentError(
                f"Callback function is required for {name} traversal."
            )
        for visited in self.traverser(order).nodes(self._resolve(node)):
            callback(visited)

    def iter_level_order(self) -> Iterator[Node]:
        """Lazily yield nodes in level order."""
        return self.traverser(TraversalOrder.LEVEL).nodes(self.root)

    def iter_in_order(self) -> Iterator[Node]:
        """Lazily yield nodes in ascending key order."""
        return self.traverser(TraversalOrder.IN).nodes(self.root)

    def iter_pre_order(self) -> Iterator[Node]:
        """Lazily yield nodes in pre-order."""
        return self.traverser(TraversalOrder.PRE).nodes(self.root)

    def iter_post_order(self) -> Iterator[Node]:
        """Lazily yield nodes in post-order."""
        return self.traverser(TraversalOrder.POST).nodes(self.root)

    def traverse(self,
                 order: Union[TraversalOrder, str] = TraversalOrder.LEVEL,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        """Yield ``(node, depth)`` pairs in the given order.

        Args:
            order: Traversal order or string alias (level, in, pre, post)
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Raises:
            InvalidArgumentError: If order is not recognized
        """
        return self.traverser(order).traverse(self.root, max_depth, min_depth)

    def traverser(self, order: Union[TraversalOrder, str]) -> TreeTraverser:
        """Create a traverser for this tree honoring the configured mode."""
        return create_traverser(order, self.adapter, self.config.mode)

    # Shape queries

    def height(self, node: Any = _USE_ROOT) -> int:
        """Height of the subtree rooted at node.

        An empty subtree has height -1, a leaf has height 0.

        Args:
            node: Subtree root (default: the tree root)
        """
        node = self._resolve(node)
        if self.config.iterative:
            return max((depth for _, depth in
                        self.traverser(TraversalOrder.LEVEL).traverse(node)),
                       default=-1)
        return self._height(node)

    def _height(self, node: Optional[Node]) -> int:
        if node is None:
            return -1
        return max(self._height(node.left), self._height(node.right)) + 1

    def depth(self, node: Optional[Node]) -> int:
        """Number of edges from the root to node.

        The node is located by identity, not by key.

        Args:
            node: A node reference

        Returns:
            Depth of node (root = 0), or -1 if node is not reachable from
            the root (already deleted, or part of another tree)
        """
        if node is None:
            return -1
        if self.config.iterative:
            for candidate, depth in self.traverser(TraversalOrder.PRE).traverse(self.root):
                if candidate is node:
                    return depth
            return -1
        return self._depth(node, self.root, 0)

    def _depth(self, node: Node, current: Optional[Node], depth: int) -> int:
        if current is None:
            return -1
        if current is node:
            return depth

        left_depth = self._depth(node, current.left, depth + 1)
        if left_depth != -1:
            return left_depth
        return self._depth(node, current.right, depth + 1)

    def is_balanced(self, node: Any = _USE_ROOT) -> bool:
        """Check that every node's subtree heights differ by at most 1.

        Heights are computed bottom-up in a single post-order pass.

        Args:
            node: Subtree root (default: the tree root)
        """
        heights = {}
        for current, _ in self.traverser(TraversalOrder.POST).traverse(self._resolve(node)):
            left_height = heights.get(id(current.left), -1)
            right_height = heights.get(id(current.right), -1)
            if abs(left_height - right_height) > 1:
                return False
            heights[id(current)] = max(left_height, right_height) + 1
        return True

    isBalanced = is_balanced

    # Container protocol

    def keys(self) -> List[Any]:
        """Return all keys in ascending order."""
        return [node.key for node in self.iter_in_order()]

    def is_empty(self) -> bool:
        """Return True if the tree holds no keys."""
        return self.root is None

    def __len__(self) -> int:
        return sum(1 for _ in self.iter_level_order())

    def __contains__(self, key: Any) -> bool:
        return self.find(key) is not None

    def __iter__(self) -> Iterator[Any]:
        for node in self.iter_in_order():
            yield node.key

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={len(self)}, height={self.height()})"

    def _resolve(self, node: Any) -> Optional[Node]:
        return self.root if node is _USE_ROOT else node
