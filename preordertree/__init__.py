"""preordertree - pre-order navigation of in-memory trees.

Build a tree of integer-valued nodes, then step through it in pre-order:

    from preordertree import Node, next_node

    root = Node(1, Node(2, Node(3), Node(4)), Node(5, Node(6), Node(7)))
    node = root
    while node is not None:
        print(node)
        node = next_node(node)

Traversals are cached. Starting from a root recomputes the cache, every
other query reuses it. See PreOrderNavigator and CacheScope to keep a cache
per tree or to skip caching.
"""

__version__ = "0.1.0"

from .core.node import Node
from .core.adapter import TreeAdapter, NodeAdapter
from .core.traverser import PreOrderTraverser, flatten_pre_order
from .cache import (
    PreOrderCache,
    TreeCacheRegistry,
    get_process_cache,
    reset_process_cache,
)
from .config import CacheScope, TraversalConfig
from .navigator import PreOrderNavigator
from .exceptions import (
    TreeError,
    InvariantViolation,
    NodeAlreadyAttachedError,
    CyclicAttachError,
    ConfigurationError,
)
from .api import (
    next_node,
    visit_all_nodes,
    iter_pre_order,
    pre_order,
    siblings,
    is_root,
)

__all__ = [
    "__version__",
    # Core
    'Node',
    'TreeAdapter',
    'NodeAdapter',
    'PreOrderTraverser',
    'flatten_pre_order',
    # Cache
    'PreOrderCache',
    'TreeCacheRegistry',
    'get_process_cache',
    'reset_process_cache',
    # Config
    'CacheScope',
    'TraversalConfig',
    'PreOrderNavigator',
    # Errors
    'TreeError',
    'InvariantViolation',
    'NodeAlreadyAttachedError',
    'CyclicAttachError',
    'ConfigurationError',
    # API
    'next_node',
    'visit_all_nodes',
    'iter_pre_order',
    'pre_order',
    'siblings',
    'is_root',
]
