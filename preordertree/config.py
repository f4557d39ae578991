"""Configuration for preordertree navigation.

This module defines where the pre-order cache lives and how traversals are
rendered. Configuration is programmatic; nothing is read from the
environment.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List


class CacheScope(Enum):
    """Where the single-slot pre-order cache is kept.

    Every scope recomputes the cached sequence only when navigation starts
    from a root node, except FRESH, which keeps nothing.
    """
    PROCESS = "process"   # One slot shared by every tree in the process
    TREE = "tree"         # One slot per tree, keyed by its root
    FRESH = "fresh"       # No stored state, always flatten from the root


@dataclass
class TraversalConfig:
    """Settings for a PreOrderNavigator."""

    cache_scope: CacheScope = CacheScope.PROCESS
    max_cached_trees: int = 128  # Bound on the TREE scope registry
    separator: str = ","         # Joins values in visit_all_nodes

    @classmethod
    def process_wide(cls) -> 'TraversalConfig':
        """Create config sharing one cache across the whole process."""
        return cls(cache_scope=CacheScope.PROCESS)

    @classmethod
    def per_tree(cls, max_trees: int = 128) -> 'TraversalConfig':
        """Create config keeping a separate cache for each tree.

        Args:
            max_trees: Number of trees remembered before the least
                recently used one is evicted

        Returns:
            TraversalConfig with TREE scope
        """
        return cls(cache_scope=CacheScope.TREE, max_cached_trees=max_trees)

    @classmethod
    def always_fresh(cls) -> 'TraversalConfig':
        """Create config that never reuses a previous traversal."""
        return cls(cache_scope=CacheScope.FRESH)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.cache_scope, CacheScope):
            errors.append(f"cache_scope must be a CacheScope, got {self.cache_scope!r}")

        if not isinstance(self.max_cached_trees, int) or self.max_cached_trees <= 0:
            errors.append("max_cached_trees must be a positive integer")

        if not isinstance(self.separator, str):
            errors.append("separator must be a string")

        return errors
