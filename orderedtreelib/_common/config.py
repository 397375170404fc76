"""Configuration system for OrderedTreeLib.

This module defines how users choose between the recursive and iterative
algorithms, which traversal order to use, what data to collect from
visited nodes, and how trees are drawn.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class ExecutionMode(Enum):
    """How the structural algorithms walk the tree.

    Both modes produce the same results. Recursion depth grows with tree
    height, so long runs of ascending inserts can exhaust the interpreter
    stack in RECURSIVE mode; ITERATIVE uses explicit stacks instead.
    """
    RECURSIVE = "recursive"     # Recursive helpers (default)
    ITERATIVE = "iterative"     # Explicit stack / path walking


class TraversalOrder(Enum):
    """Order in which traversals visit nodes."""
    LEVEL = "level"     # Breadth-first, left before right
    IN = "in"           # Left, node, right (ascending keys)
    PRE = "pre"         # Node, left, right
    POST = "post"       # Left, right, node


class KeyRequirement(Enum):
    """Specifies what data is collected from each visited node."""
    KEY = "key"         # Just the key (most common)
    NODE = "node"       # The Node object itself
    INFO = "info"       # Key, depth, leaf flag and child count
    CUSTOM = "custom"   # User-defined collection function


@dataclass
class DisplayConfig:
    """Glyphs used when drawing a tree sideways."""

    vertical: str = "│   "       # Continuation of a branch
    blank: str = "    "          # No continuation
    left_branch: str = "└── "    # Node hanging below its parent
    right_branch: str = "┌── "   # Node hanging above its parent

    def validate(self) -> List[str]:
        """Validate that all glyphs have the same width.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        widths = {len(self.vertical), len(self.blank),
                  len(self.left_branch), len(self.right_branch)}
        if len(widths) != 1:
            errors.append("display glyphs must all have the same width")
        return errors


@dataclass
class TreeConfig:
    """Complete configuration for an OrderedTree.

    The defaults reproduce the classic recursive algorithms. Use
    ``TreeConfig.large_dataset()`` for key sets large or skewed enough
    that recursion depth becomes a concern.
    """

    # Algorithm selection
    mode: ExecutionMode = ExecutionMode.RECURSIVE

    # Pretty printing
    display: DisplayConfig = field(default_factory=DisplayConfig)

    @classmethod
    def large_dataset(cls) -> 'TreeConfig':
        """Create config that avoids deep recursion.

        Returns:
            TreeConfig using the iterative algorithms
        """
        return cls(mode=ExecutionMode.ITERATIVE)

    @property
    def iterative(self) -> bool:
        """True when the iterative algorithms are selected."""
        return self.mode == ExecutionMode.ITERATIVE

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.mode, ExecutionMode):
            errors.append(f"mode must be an ExecutionMode, got {self.mode!r}")

        if not isinstance(self.display, DisplayConfig):
            errors.append("display must be a DisplayConfig")
        else:
            errors.extend(self.display.validate())

        return errors


__all__ = [
    'ExecutionMode',
    'TraversalOrder',
    'KeyRequirement',
    'DisplayConfig',
    'TreeConfig',
]
