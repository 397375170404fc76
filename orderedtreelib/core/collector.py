"""Data collection strategies for OrderedTreeLib.

DataCollectors define what information to extract from nodes during a
traversal, so the same traversal can produce keys, nodes, or structural
summaries depending on what the caller needs.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional

from .node import Node
from .adapter import TreeAdapter, NodeAdapter
from .._common.config import KeyRequirement
from ..errors import InvalidArgumentError


class DataCollector(ABC):
    """Abstract base class for data collection strategies."""

    def __init__(self, adapter: Optional[TreeAdapter] = None):
        """Initialize collector with an adapter.

        Args:
            adapter: TreeAdapter for additional node operations
        """
        self.adapter = adapter if adapter is not None else NodeAdapter()

    @abstractmethod
    def collect(self, node: Node, depth: int) -> Any:
        """Collect data from a node.

        Args:
            node: The node to collect data from
            depth: Current depth in traversal

        Returns:
            Collected data (type depends on collector)
        """
        pass


class KeyCollector(DataCollector):
    """Collects only node keys."""

    def collect(self, node: Node, depth: int) -> Any:
        """Return node key."""
        return node.key


class FullNodeCollector(DataCollector):
    """Collects complete node objects."""

    def collect(self, node: Node, depth: int) -> Node:
        """Return the node itself."""
        return node


class NodeInfoCollector(DataCollector):
    """Collects key, depth and child information for each node.

    Useful for tree structure analysis.
    """

    def collect(self, node: Node, depth: int) -> Dict[str, Any]:
        """Return node info with child count."""
        return {
            'key': node.key,
            'depth': depth,
            'child_count': self.adapter.count_children(node),
            'is_leaf': self.adapter.is_leaf(node),
        }


class CustomCollector(DataCollector):
    """Collector that uses a user-provided function.

    Allows custom data collection logic without subclassing.
    """

    def __init__(self, adapter: Optional[TreeAdapter],
                 collect_func: Callable[[Node, int], Any]):
        """Initialize with custom collection function.

        Args:
            adapter: TreeAdapter for tree navigation
            collect_func: Function(node, depth) -> Any
        """
        super().__init__(adapter)
        self.collect_func = collect_func

    def collect(self, node: Node, depth: int) -> Any:
        """Use custom function to collect data."""
        return self.collect_func(node, depth)


def create_collector(requirement: KeyRequirement,
                     adapter: Optional[TreeAdapter] = None,
                     collect_func: Optional[Callable[[Node, int], Any]] = None) -> DataCollector:
    """Create a collector for a data requirement.

    Args:
        requirement: What to collect from each node
        adapter: TreeAdapter for the tree structure
        collect_func: Function(node, depth) -> Any, required for CUSTOM

    Returns:
        DataCollector instance

    Raises:
        InvalidArgumentError: If CUSTOM is requested without a function
    """
    if requirement == KeyRequirement.CUSTOM:
        if collect_func is None or not callable(collect_func):
            raise InvalidArgumentError(
                "collect_func required when requirement is CUSTOM"
            )
        return CustomCollector(adapter, collect_func)

    collector_map = {
        KeyRequirement.KEY: KeyCollector,
        KeyRequirement.NODE: FullNodeCollector,
        KeyRequirement.INFO: NodeInfoCollector,
    }
    if requirement not in collector_map:
        raise InvalidArgumentError(f"Unknown key requirement: {requirement!r}")
    return collector_map[requirement](adapter)
