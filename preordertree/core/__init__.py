"""Core abstractions for preordertree.

This package holds the tree data structure, the adapter that navigates it,
and the pre-order traverser.
"""

from .node import Node
from .adapter import TreeAdapter, NodeAdapter
from .traverser import PreOrderTraverser, flatten_pre_order

__all__ = [
    "Node",
    "TreeAdapter",
    "NodeAdapter",
    "PreOrderTraverser",
    "flatten_pre_order",
]
