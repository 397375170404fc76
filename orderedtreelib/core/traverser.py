"""Tree traversal strategies for OrderedTreeLib.

Traversers implement the four visiting orders of a binary tree as lazy
generators. They work through a TreeAdapter and never modify the tree.
Every depth-first order has a recursive and an explicit-stack
implementation; both yield exactly the same sequence.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, Optional, Tuple, Union

from .node import Node
from .adapter import TreeAdapter, NodeAdapter
from .._common.config import ExecutionMode, TraversalOrder
from ..errors import InvalidArgumentError


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Traversers yield ``(node, depth)`` tuples where depth is relative to
    the node the traversal started from (which has depth 0).
    """

    order: TraversalOrder

    def __init__(self, adapter: Optional[TreeAdapter] = None,
                 mode: ExecutionMode = ExecutionMode.RECURSIVE):
        """Initialize traverser with an adapter.

        Args:
            adapter: TreeAdapter for navigating the tree (default NodeAdapter)
            mode: Recursive or explicit-stack implementation
        """
        self.adapter = adapter if adapter is not None else NodeAdapter()
        self.mode = mode

    def traverse(self,
                 root: Optional[Node],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal (None yields nothing)
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        if root is None:
            return
        if self.mode == ExecutionMode.ITERATIVE:
            yield from self._traverse_iterative(root, max_depth, min_depth)
        else:
            yield from self._traverse_recursive(root, max_depth, min_depth)

    def nodes(self, root: Optional[Node]) -> Iterator[Node]:
        """Traverse the whole tree, yielding only the nodes."""
        for node, _ in self.traverse(root):
            yield node

    @abstractmethod
    def _traverse_recursive(self, root: Node, max_depth: Optional[int],
                            min_depth: int) -> Iterator[Tuple[Node, int]]:
        pass

    @abstractmethod
    def _traverse_iterative(self, root: Node, max_depth: Optional[int],
                            min_depth: int) -> Iterator[Tuple[Node, int]]:
        pass

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        """Check if a node at given depth should be yielded.

        Args:
            depth: Current depth
            min_depth: Minimum depth for yielding
            max_depth: Maximum depth for yielding

        Returns:
            True if node should be yielded
        """
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        """Check if children of node at given depth should be explored.

        Args:
            depth: Current depth
            max_depth: Maximum depth limit

        Returns:
            True if children should be explored
        """
        if max_depth is None:
            return True
        return depth < max_depth


class LevelOrderTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal.

    A FIFO queue is seeded with the root. Each dequeued node is visited,
    then its non-empty children are enqueued left before right. The queue
    already avoids recursion, so both modes share one implementation.
    """

    order = TraversalOrder.LEVEL

    def _traverse_iterative(self, root, max_depth, min_depth):
        queue: Deque[Tuple[Node, int]] = deque([(root, 0)])

        while queue:
            node, depth = queue.popleft()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                for child in self.adapter.get_children(node):
                    queue.append((child, depth + 1))

    _traverse_recursive = _traverse_iterative


class InOrderTraverser(TreeTraverser):
    """Depth-first in-order traversal: left subtree, node, right subtree.

    On a binary search tree this visits keys in ascending order.
    """

    order = TraversalOrder.IN

    def _traverse_recursive(self, root, max_depth, min_depth):
        def _visit(node: Optional[Node], depth: int) -> Iterator[Tuple[Node, int]]:
            if node is None:
                return
            explore = self._should_explore(depth, max_depth)
            if explore:
                yield from _visit(self.adapter.get_left(node), depth + 1)
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)
            if explore:
                yield from _visit(self.adapter.get_right(node), depth + 1)

        yield from _visit(root, 0)

    def _traverse_iterative(self, root, max_depth, min_depth):
        stack: List[Tuple[Node, int]] = []
        node: Optional[Node] = root
        depth = 0

        while stack or node is not None:
            if node is not None:
                # Descend as far left as allowed, remembering the path
                stack.append((node, depth))
                if self._should_explore(depth, max_depth):
                    node = self.adapter.get_left(node)
                else:
                    node = None
                depth += 1
            else:
                node, depth = stack.pop()
                if self._should_yield(depth, min_depth, max_depth):
                    yield (node, depth)
                if self._should_explore(depth, max_depth):
                    node = self.adapter.get_right(node)
                else:
                    node = None
                depth += 1


class PreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal: node, left subtree, right subtree.

    Visits parent before children. Rebuilding a tree by inserting keys in
    pre-order reproduces the same shape.
    """

    order = TraversalOrder.PRE

    def _traverse_recursive(self, root, max_depth, min_depth):
        def _visit(node: Node, depth: int) -> Iterator[Tuple[Node, int]]:
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)
            if self._should_explore(depth, max_depth):
                for child in self.adapter.get_children(node):
                    yield from _visit(child, depth + 1)

        yield from _visit(root, 0)

    def _traverse_iterative(self, root, max_depth, min_depth):
        stack: List[Tuple[Node, int]] = [(root, 0)]

        while stack:
            node, depth = stack.pop()
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)
            if self._should_explore(depth, max_depth):
                # Push right first so left is popped first
                for child in reversed(list(self.adapter.get_children(node))):
                    stack.append((child, depth + 1))


class PostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal: left subtree, right subtree, node.

    Visits children before parent. Useful for bottom-up computations such
    as subtree heights.
    """

    order = TraversalOrder.POST

    def _traverse_recursive(self, root, max_depth, min_depth):
        def _visit(node: Node, depth: int) -> Iterator[Tuple[Node, int]]:
            if self._should_explore(depth, max_depth):
                for child in self.adapter.get_children(node):
                    yield from _visit(child, depth + 1)
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

        yield from _visit(root, 0)

    def _traverse_iterative(self, root, max_depth, min_depth):
        # Each entry carries a flag telling whether its children are queued
        stack: List[Tuple[Node, int, bool]] = [(root, 0, False)]

        while stack:
            node, depth, expanded = stack.pop()
            if expanded:
                if self._should_yield(depth, min_depth, max_depth):
                    yield (node, depth)
                continue

            stack.append((node, depth, True))
            if self._should_explore(depth, max_depth):
                for child in reversed(list(self.adapter.get_children(node))):
                    stack.append((child, depth + 1, False))


_ORDER_ALIASES = {
    'level': TraversalOrder.LEVEL,
    'level_order': TraversalOrder.LEVEL,
    'bfs': TraversalOrder.LEVEL,
    'in': TraversalOrder.IN,
    'in_order': TraversalOrder.IN,
    'inorder': TraversalOrder.IN,
    'pre': TraversalOrder.PRE,
    'pre_order': TraversalOrder.PRE,
    'preorder': TraversalOrder.PRE,
    'post': TraversalOrder.POST,
    'post_order': TraversalOrder.POST,
    'postorder': TraversalOrder.POST,
}

_TRAVERSERS = {
    TraversalOrder.LEVEL: LevelOrderTraverser,
    TraversalOrder.IN: InOrderTraverser,
    TraversalOrder.PRE: PreOrderTraverser,
    TraversalOrder.POST: PostOrderTraverser,
}


def parse_order(order: Union[TraversalOrder, str]) -> TraversalOrder:
    """Parse a traversal order from an enum value or a string alias.

    Args:
        order: Order as enum or string (level, in, pre, post, ...)

    Returns:
        TraversalOrder enum value

    Raises:
        InvalidArgumentError: If the name is not recognized
    """
    if isinstance(order, TraversalOrder):
        return order

    order_lower = order.lower() if isinstance(order, str) else None
    if order_lower not in _ORDER_ALIASES:
        raise InvalidArgumentError(
            f"Unknown traversal order: {order!r}. "
            f"Choose from: {', '.join(_ORDER_ALIASES.keys())}"
        )
    return _ORDER_ALIASES[order_lower]


def create_traverser(order: Union[TraversalOrder, str],
                     adapter: Optional[TreeAdapter] = None,
                     mode: ExecutionMode = ExecutionMode.RECURSIVE) -> TreeTraverser:
    """Create a traverser instance by order.

    Args:
        order: Traversal order or one of its string aliases
        adapter: TreeAdapter for the tree structure (default NodeAdapter)
        mode: Recursive or explicit-stack implementation

    Returns:
        TreeTraverser instance

    Raises:
        InvalidArgumentError: If order name is not recognized
    """
    return _TRAVERSERS[parse_order(order)](adapter, mode)
