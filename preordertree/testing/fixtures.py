"""Test fixtures for preordertree consumers.

Builders for the reference trees, plus a helper that exposes cache state
for assertions without reaching into private attributes.
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from ..cache import PreOrderCache, get_process_cache
from ..core.node import Node

# A shape is either a bare value (a leaf) or (value, [child shapes]).
TreeShape = Union[int, Tuple[int, Sequence[Any]]]


def build_tree(shape: TreeShape) -> Node:
    """Build a Node tree from a nested shape.

    Example:
        >>> root = build_tree((1, [(2, [3, 4]), 5]))
        >>> [child.value for child in root.children]
        [2, 5]
    """
    if isinstance(shape, int):
        return Node(shape)
    value, children = shape
    return Node(value, *(build_tree(child) for child in children))


def sample_tree() -> Node:
    """1 -> [2 -> [3, 4], 5 -> [6, 7]]"""
    return build_tree((1, [(2, [3, 4]), (5, [6, 7])]))


def unbalanced_tree() -> Node:
    """1 -> [2, 3, 4 -> [5 -> [6]], 7 -> [8, 9]]"""
    return build_tree((1, [2, 3, (4, [(5, [6])]), (7, [8, 9])]))


def unbalanced_tree_two() -> Node:
    """1 -> [2, 3 -> [4], 5 -> [6, 7 -> [8]], 9 -> [10]]"""
    return build_tree((1, [2, (3, [4]), (5, [6, (7, [8])]), (9, [10])]))


def find_by_value(root: Node, value: int) -> Optional[Node]:
    """Depth-first search for the first node holding value."""
    if root.value == value:
        return root
    for child in root.children:
        found = find_by_value(child, value)
        if found is not None:
            return found
    return None


class CacheTestHelper:
    """Public test fixture for cache verification.

    Example:
        helper = CacheTestHelper()          # process-wide slot
        next_node(root)
        assert helper.get_summary()['state'] == 'populated'
        assert helper.cached_values() == [1, 2, 3]
    """

    def __init__(self, cache: Optional[PreOrderCache] = None):
        """Initialize with a cache slot (defaults to the process-wide one)."""
        self._cache = cache if cache is not None else get_process_cache()

    def get_summary(self) -> Dict[str, Any]:
        """Returns high-level cache state for testing.

        Returns:
            Dictionary containing:
            - state: 'empty' or 'populated'
            - size: Number of cached nodes
            - root_value: Value of the root the cache was built from
            - refresh_count: How many times the slot has been recomputed
        """
        root = self._cache.root
        return {
            'state': 'empty' if self._cache.is_empty else 'populated',
            'size': len(self._cache),
            'root_value': root.value if root is not None else None,
            'refresh_count': self._cache.refresh_count,
        }

    def cached_values(self) -> List[int]:
        return self._cache.values()

    def is_cached(self, node: Node) -> bool:
        """Check if this exact node (by identity) is in the cache."""
        return self._cache.index_of(node) is not None
