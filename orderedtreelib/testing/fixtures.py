"""Test fixtures for OrderedTreeLib consumers.

These helpers generate input data and verify structural invariants
without reaching into private tree state.
"""

import random
from typing import Any, Dict, List, Optional

from ..tree import OrderedTree


def random_keys(size: int, upper: int = 100, seed: Optional[int] = None) -> List[int]:
    """Generate a list of random integers in ``[0, upper)``.

    Duplicates are possible, which is what tree construction expects to
    cope with.

    Args:
        size: Number of integers to generate
        upper: Exclusive upper bound
        seed: Seed for reproducible sequences

    Returns:
        List of integers
    """
    rng = random.Random(seed)
    return [rng.randrange(upper) for _ in range(size)]


class TreeInvariantChecker:
    """Public test fixture for verifying OrderedTree invariants.

    Example:
        checker = TreeInvariantChecker(tree)
        checker.assert_valid()
        assert checker.get_summary()['is_balanced']
    """

    def __init__(self, tree: OrderedTree):
        """Initialize with the tree under test.

        Args:
            tree: OrderedTree to inspect
        """
        self._tree = tree

    def violations(self) -> List[str]:
        """Walk the tree and describe every broken invariant.

        Checks that each node is reachable exactly once (no sharing, no
        cycles) and that keys respect the strict bounds inherited from
        their ancestors, which also rules out duplicates.

        Returns:
            List of violation messages (empty if the tree is valid)
        """
        problems = []
        seen = set()
        # (node, exclusive lower bound, exclusive upper bound)
        stack = [(self._tree.root, None, None)]

        while stack:
            node, low, high = stack.pop()
            if node is None:
                continue

            if id(node) in seen:
                problems.append(f"node {node!r} is reachable more than once")
                continue
            seen.add(id(node))

            if low is not None and not low.key < node.key:
                problems.append(f"key {node.key!r} is not greater than ancestor {low.key!r}")
            if high is not None and not node.key < high.key:
                problems.append(f"key {node.key!r} is not less than ancestor {high.key!r}")

            stack.append((node.left, low, node))
            stack.append((node.right, node, high))

        return problems

    def is_valid(self) -> bool:
        """Return True if the tree satisfies all structural invariants."""
        return not self.violations()

    def assert_valid(self) -> None:
        """Raise AssertionError listing every violation, if any."""
        problems = self.violations()
        assert not problems, "Tree invariants violated:\n  " + "\n  ".join(problems)

    def get_summary(self) -> Dict[str, Any]:
        """Returns high-level tree state for testing.

        Returns:
            Dictionary containing:
            - size: Number of keys
            - height: Tree height (-1 when empty)
            - is_balanced: Result of is_balanced()
            - keys: Keys in ascending order
            - is_valid: Whether all invariants hold
        """
        keys = self._tree.keys()
        return {
            'size': len(keys),
            'height': self._tree.height(),
            'is_balanced': self._tree.is_balanced(),
            'keys': keys,
            'is_valid': self.is_valid(),
        }
