#!/usr/bin/env python3
"""
Demonstration driver for OrderedTreeLib.

Builds a tree from random integers, prints it, runs all four traversals,
unbalances it with a few large inserts, then rebalances and prints again.

Usage:
    orderedtree-demo                  # 10 random keys
    orderedtree-demo --size 20 --seed 7
    orderedtree-demo --iterative      # use the explicit-stack algorithms
"""

import argparse
import logging
import sys
from typing import Callable, List, Optional

from .config import TreeConfig
from .display import pretty_print
from .testing.fixtures import random_keys
from .tree import OrderedTree

UNBALANCING_KEYS = (120, 130, 140)


def run_demo(size: int = 10,
             seed: Optional[int] = None,
             config: Optional[TreeConfig] = None,
             writer: Callable[[str], None] = print) -> OrderedTree:
    """Run the demonstration sequence.

    Args:
        size: Number of random keys to start from
        seed: Seed for the random keys
        config: Tree configuration
        writer: Function receiving each output line

    Returns:
        The tree in its final, rebalanced state
    """
    keys = random_keys(size, seed=seed)
    writer(f"Initial Array: {keys}")

    tree = OrderedTree(keys, config)
    writer("Balanced Tree:")
    pretty_print(tree.root, writer=writer, display=tree.config.display)
    writer(f"Is Balanced: {tree.is_balanced()}")

    for title, traversal in (("Level Order", tree.level_order),
                             ("Preorder", tree.pre_order),
                             ("Inorder", tree.in_order),
                             ("Postorder", tree.post_order)):
        writer(f"{title}:")
        traversal(lambda node: writer(str(node.key)))

    writer("Unbalancing the tree...")
    for key in UNBALANCING_KEYS:
        tree.insert(key)

    writer("Tree after unbalancing:")
    pretty_print(tree.root, writer=writer, display=tree.config.display)
    writer(f"Is Balanced: {tree.is_balanced()}")

    writer("Rebalancing the tree...")
    tree.rebalance()

    writer("Balanced Tree:")
    pretty_print(tree.root, writer=writer, display=tree.config.display)
    writer(f"Is Balanced: {tree.is_balanced()}")

    writer("Final Level Order:")
    tree.level_order(lambda node: writer(str(node.key)))

    return tree


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description="OrderedTreeLib demonstration")
    parser.add_argument("--size", type=int, default=10,
                        help="number of random keys (default: 10)")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for the random keys")
    parser.add_argument("--iterative", action="store_true",
                        help="use the iterative algorithms")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log structural events")
    args = parser.parse_args(argv)

    if args.size < 0:
        parser.error("--size cannot be negative")

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format="%(levelname)s %(name)s: %(message)s")

    config = TreeConfig.large_dataset() if args.iterative else TreeConfig()
    run_demo(args.size, args.seed, config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
