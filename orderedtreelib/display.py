"""Sideways pretty printing of binary trees.

The right subtree is drawn above its parent and the left subtree below,
so reading the output top to bottom lists keys in descending order:

    │       ┌── 9
    │   ┌── 6
    │   │   └── 5
    └── 4
        │   ┌── 3
        └── 2
            └── 1
"""

from typing import Callable, List, Optional

from .core.node import Node
from .core.adapter import TreeAdapter, NodeAdapter
from ._common.config import DisplayConfig


def pretty_print(node: Optional[Node],
                 prefix: str = "",
                 is_left: bool = True,
                 writer: Callable[[str], None] = print,
                 display: Optional[DisplayConfig] = None,
                 adapter: Optional[TreeAdapter] = None) -> None:
    """Write an indented, tree-shaped rendering of a subtree.

    Visits right subtree, then the node, then the left subtree. Nothing is
    written for an empty subtree.

    Args:
        node: Subtree root to draw
        prefix: Text placed before every line of this subtree
        is_left: Whether node hangs below its parent
        writer: Function receiving each rendered line
        display: Glyphs to draw with (default DisplayConfig())
        adapter: TreeAdapter for child navigation (default NodeAdapter)
    """
    if node is None:
        return
    display = display if display is not None else DisplayConfig()
    adapter = adapter if adapter is not None else NodeAdapter()

    right = adapter.get_right(node)
    if right is not None:
        pretty_print(right,
                     prefix + (display.vertical if is_left else display.blank),
                     False, writer, display, adapter)

    writer(f"{prefix}{display.left_branch if is_left else display.right_branch}{node.key}")

    left = adapter.get_left(node)
    if left is not None:
        pretty_print(left,
                     prefix + (display.blank if is_left else display.vertical),
                     True, writer, display, adapter)


def render_tree(node: Optional[Node], display: Optional[DisplayConfig] = None) -> str:
    """Render a subtree as a single string, one node per line.

    Returns:
        The rendering, or an empty string for an empty subtree
    """
    lines: List[str] = []
    pretty_print(node, writer=lines.append, display=display)
    return "\n".join(lines)
