"""High-level API for preordertree.

Plain functions over a module-level PreOrderNavigator that uses the
process-wide cache. These reproduce the classic behaviour: traversing from
a root refreshes the shared cache, and every other query reads it as is.
Build a PreOrderNavigator directly for per-tree or always-fresh caching.
"""

from typing import Iterator, List, Optional, Set

from .core.node import Node
from .core.traverser import flatten_pre_order
from .navigator import PreOrderNavigator

_default_navigator = PreOrderNavigator()


def next_node(node: Node) -> Optional[Node]:
    """Return the node after node in pre-order, or None.

    Example:
        >>> root = Node(1, Node(2), Node(3))
        >>> next_node(root).value
        2
    """
    return _default_navigator.next(node)


def visit_all_nodes(root: Node) -> str:
    """Render the pre-order traversal from root as comma-joined values.

    Example:
        >>> visit_all_nodes(Node(1, Node(2, Node(3)), Node(4)))
        '1,2,3,4'
    """
    return _default_navigator.visit_all_nodes(root)


def iter_pre_order(start: Node) -> Iterator[Node]:
    """Yield start and every node reached by repeated next_node calls."""
    return _default_navigator.walk(start)


def pre_order(root: Node) -> List[Node]:
    """Flatten root's subtree without touching any cache."""
    return flatten_pre_order(root)


def siblings(node: Node) -> Set[Node]:
    return node.siblings()


def is_root(node: Node) -> bool:
    return node.is_root()
