"""Exception taxonomy for OrderedTreeLib.

The tree operations are total functions: searching for or deleting an
absent key, and asking for the height or depth of a missing node, return
sentinel values instead of raising. The exceptions below cover the few
places where a caller can hand the library something it cannot use.
"""


class TreeError(Exception):
    """Base class for all OrderedTreeLib errors."""
    pass


class InvalidArgumentError(TreeError, ValueError):
    """Raised when a required argument is missing or unusable.

    The traversal methods raise this when no visitor callback is given,
    before any node is visited.
    """
    pass


class ConfigurationError(TreeError):
    """Raised when a TreeConfig fails validation."""

    def __init__(self, errors):
        self.errors = list(errors)
        super().__init__("Invalid tree configuration: " + "; ".join(self.errors))
