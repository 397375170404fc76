"""High-level API for OrderedTreeLib.

This module provides simple, functional interfaces for common read-only
operations on an OrderedTree. These functions wrap the traverser and
collector classes for ease of use in simple cases.
"""

from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple, Union

from .core.node import Node
from .core.collector import create_collector
from ._common.config import KeyRequirement, TraversalOrder
from .tree import OrderedTree


def traverse_tree(
    tree: OrderedTree,
    order: Union[TraversalOrder, str] = TraversalOrder.LEVEL,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
) -> Iterator[Node]:
    """Simple interface for tree traversal.

    Args:
        tree: Tree to traverse
        order: Traversal order (level, in, pre, post)
        max_depth: Maximum depth to traverse
        min_depth: Minimum depth before yielding nodes

    Yields:
        Nodes in the requested order

    Example:
        >>> tree = OrderedTree([5, 3, 8])
        >>> [node.key for node in traverse_tree(tree, "pre")]
        [5, 3, 8]
    """
    for node, _ in tree.traverse(order, max_depth, min_depth):
        yield node


def collect_tree_data(
    tree: OrderedTree,
    order: Union[TraversalOrder, str] = TraversalOrder.IN,
    requirement: KeyRequirement = KeyRequirement.KEY,
    collect_func: Optional[Callable[[Node, int], Any]] = None,
    **kwargs
) -> Iterator[Tuple[Node, Any]]:
    """Traverse tree and collect specified data.

    Similar to traverse_tree but yields both nodes and collected data.

    Args:
        tree: Tree to traverse
        order: Traversal order (level, in, pre, post)
        requirement: What data to collect
        collect_func: Function(node, depth) -> Any for KeyRequirement.CUSTOM
        **kwargs: max_depth / min_depth (see traverse_tree)

    Yields:
        Tuples of (node, collected_data)
    """
    collector = create_collector(requirement, tree.adapter, collect_func)
    for node, depth in tree.traverse(order, **kwargs):
        yield node, collector.collect(node, depth)


def collect_keys(tree: OrderedTree,
                 order: Union[TraversalOrder, str] = TraversalOrder.IN) -> List[Any]:
    """Collect keys in the given order (ascending by default)."""
    return [data for _, data in collect_tree_data(tree, order, KeyRequirement.KEY)]


def count_nodes(tree: OrderedTree, **kwargs) -> int:
    """Count nodes in a tree, optionally within a depth range.

    Args:
        tree: Tree to count
        **kwargs: max_depth / min_depth (see traverse_tree)

    Returns:
        Number of nodes
    """
    return sum(1 for _ in traverse_tree(tree, **kwargs))


def get_leaf_nodes(tree: OrderedTree) -> List[Node]:
    """Get all leaf nodes, left to right."""
    return [node for node in tree.iter_in_order() if node.is_leaf()]


def get_tree_stats(tree: OrderedTree) -> Dict[str, Any]:
    """Calculate statistics about the tree's shape.

    Args:
        tree: Tree to analyze

    Returns:
        Dictionary with statistics:
        - total_nodes: Total number of nodes
        - leaf_nodes: Number of leaf nodes
        - internal_nodes: Number of nodes with children
        - height: Height of the tree (-1 when empty)
        - is_balanced: Whether the tree is height-balanced
        - min_key / max_key: Smallest and largest key (None when empty)
        - depths: Count of nodes at each depth
    """
    stats: Dict[str, Any] = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'internal_nodes': 0,
        'height': -1,
        'is_balanced': tree.is_balanced(),
        'min_key': None,
        'max_key': None,
        'depths': {},
    }

    for node, info in collect_tree_data(tree, TraversalOrder.LEVEL, KeyRequirement.INFO):
        depth = info['depth']
        stats['total_nodes'] += 1
        if info['is_leaf']:
            stats['leaf_nodes'] += 1

        stats['height'] = max(stats['height'], depth)

        if depth not in stats['depths']:
            stats['depths'][depth] = 0
        stats['depths'][depth] += 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']

    smallest = tree.min_node()
    largest = tree.max_node()
    if smallest is not None:
        stats['min_key'] = smallest.key
        stats['max_key'] = largest.key

    return stats
