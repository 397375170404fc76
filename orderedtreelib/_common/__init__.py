"""Common components shared across OrderedTreeLib modules.

This internal package contains configuration that both the core
algorithms and the outer helpers depend on. It should NOT be imported
directly by users.

Important: This package must NEVER import from core or tree to avoid
circular dependencies.
"""

# Re-export configuration components
from .config import (
    ExecutionMode,
    TraversalOrder,
    KeyRequirement,
    DisplayConfig,
    TreeConfig,
)

__all__ = [
    'ExecutionMode',
    'TraversalOrder',
    'KeyRequirement',
    'DisplayConfig',
    'TreeConfig',
]
