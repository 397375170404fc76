"""Public configuration module.

Re-exports configuration components from the _common package.
"""

from ._common.config import (
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
