"""Exception hierarchy for preordertree.

Two kinds of failure exist. Contract violations (attaching a node that
already has a parent) are programmer errors and fail fast. Lookups that find
nothing are not errors at all: navigation returns ``None`` instead.
"""

from typing import Any


class TreeError(Exception):
    """Base class for all preordertree errors."""
    pass


class InvariantViolation(TreeError, AssertionError):
    """Raised when a structural invariant of the tree would be broken.

    Subclasses AssertionError so it reads as the contract check it is, but
    unlike a bare ``assert`` it still fires under ``python -O``.
    """
    pass


class NodeAlreadyAttachedError(InvariantViolation):
    """Raised when attaching a node that already has a parent."""

    def __init__(self, child: Any, current_parent: Any):
        self.child = child
        self.current_parent = current_parent
        super().__init__(
            f"Node {child} already has parent {current_parent}; "
            f"a node can only be attached once"
        )


class ConfigurationError(TreeError, ValueError):
    """Raised when a TraversalConfig fails validation."""
    pass


class CyclicAttachError(InvariantViolation):
    """Raised when attaching a node below itself or one of its descendants."""

    def __init__(self, child: Any, target: Any):
        self.child = child
        self.target = target
        super().__init__(
            f"Cannot attach node {child} under {target}: "
            f"{child} is {target} or one of its ancestors"
        )
