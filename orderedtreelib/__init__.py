"""OrderedTreeLib - Binary Search Tree with Explicit Rebalancing.

OrderedTreeLib provides an ordered binary search tree over unique keys.
Construction yields a perfectly balanced tree; inserts and deletes keep
the ordering but never rotate, and balance is restored on request.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from orderedtreelib import OrderedTree

    tree = OrderedTree([3, 1, 4, 1, 5, 9, 2, 6])
    tree.insert(7)
    tree.delete_item(4)
    tree.in_order(lambda node: print(node.key))
    if not tree.is_balanced():
        tree.rebalance()
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

import logging

__version__ = "0.1.0"

from .errors import TreeError, InvalidArgumentError, ConfigurationError
from .config import (
    ExecutionMode,
    TraversalOrder,
    KeyRequirement,
    DisplayConfig,
    TreeConfig,
)
from .core import (
    Node,
    TreeAdapter,
    NodeAdapter,
    TreeTraverser,
    LevelOrderTraverser,
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    create_traverser,
)
from .tree import OrderedTree
from .display import pretty_print, render_tree
from .api import (
    traverse_tree,
    collect_tree_data,
    collect_keys,
    count_nodes,
    get_leaf_nodes,
    get_tree_stats,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Errors
    'TreeError',
    'InvalidArgumentError',
    'ConfigurationError',
    # Config
    'ExecutionMode',
    'TraversalOrder',
    'KeyRequirement',
    'DisplayConfig',
    'TreeConfig',
    # Core
    'Node',
    'TreeAdapter',
    'NodeAdapter',
    'TreeTraverser',
    'LevelOrderTraverser',
    'InOrderTraverser',
    'PreOrderTraverser',
    'PostOrderTraverser',
    'create_traverser',
    'OrderedTree',
    # Display
    'pretty_print',
    'render_tree',
    # API
    'traverse_tree',
    'collect_tree_data',
    'collect_keys',
    'count_nodes',
    'get_leaf_nodes',
    'get_tree_stats',
]
