"""Core components: node, adapter, traversers and collectors."""

from .node import Node
from .adapter import TreeAdapter, NodeAdapter
from .traverser import (
    TreeTraverser,
    LevelOrderTraverser,
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    create_traverser,
    parse_order,
)
from .collector import (
    DataCollector,
    KeyCollector,
    FullNodeCollector,
    NodeInfoCollector,
    CustomCollector,
    create_collector,
)

__all__ = [
    'Node',
    'TreeAdapter',
    'NodeAdapter',
    'TreeTraverser',
    'LevelOrderTraverser',
    'InOrderTraverser',
    'PreOrderTraverser',
    'PostOrderTraverser',
    'create_traverser',
    'parse_order',
    'DataCollector',
    'KeyCollector',
    'FullNodeCollector',
    'NodeInfoCollector',
    'CustomCollector',
    'create_collector',
]
