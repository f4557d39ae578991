"""TreeAdapter abstraction for preordertree.

The adapter supplies navigation (children, parent) to the traverser, so the
traversal algorithm does not reach into node internals. NodeAdapter is the
adapter for the in-memory Node type.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterator, Optional

from .node import Node


class TreeAdapter(ABC):
    """Abstract adapter for navigating a tree structure.

    Subclasses provide get_children and get_parent; siblings and root
    lookup are derived from those two.
    """

    @abstractmethod
    def get_children(self, node: Any) -> Iterator[Any]:
        """Get an iterator of child nodes, in order.

        Args:
            node: The parent node

        Returns:
            Iterator yielding child nodes
        """
        pass

    @abstractmethod
    def get_parent(self, node: Any) -> Optional[Any]:
        """Get the parent node of the given node.

        Args:
            node: The child node

        Returns:
            Parent node or None if node is root
        """
        pass

    def get_root(self, node: Any) -> Any:
        """Walk up to the root of the tree containing node."""
        current = node
        while True:
            parent = self.get_parent(current)
            if parent is None:
                return current
            current = parent

    def get_siblings(self, node: Any) -> Iterator[Any]:
        """Get siblings of the given node (excluding the node itself).

        Siblings are compared by identity, not by value.

        Args:
            node: The node to get siblings for

        Returns:
            Iterator yielding sibling nodes in child order
        """
        parent = self.get_parent(node)
        if parent is None:
            return
        for child in self.get_children(parent):
            if child is not node:
                yield child


class NodeAdapter(TreeAdapter):
    """Adapter for preordertree.Node trees."""

    def get_children(self, node: Node) -> Iterator[Node]:
        return iter(node.children)

    def get_parent(self, node: Node) -> Optional[Node]:
        return node.parent

    def get_root(self, node: Node) -> Node:
        return node.root()
