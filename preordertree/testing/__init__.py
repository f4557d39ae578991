"""Testing utilities for preordertree consumers."""

from .fixtures import (
    CacheTestHelper,
    build_tree,
    find_by_value,
    sample_tree,
    unbalanced_tree,
    unbalanced_tree_two,
)

__all__ = [
    'CacheTestHelper',
    'build_tree',
    'find_by_value',
    'sample_tree',
    'unbalanced_tree',
    'unbalanced_tree_two',
]
