"""Testing utilities for OrderedTreeLib consumers."""

from .fixtures import TreeInvariantChecker, random_keys

__all__ = ['TreeInvariantChecker', 'random_keys']
