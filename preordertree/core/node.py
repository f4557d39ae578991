"""Node type for preordertree.

A Node owns its children (an ordered list) and keeps a plain back-reference
to its parent for upward navigation. Traversal logic lives elsewhere: the
node is a data container plus the structural operations that keep the
parent/children relation consistent.
"""

import logging
from typing import Iterable, Optional, Set, Tuple

from ..exceptions import CyclicAttachError, NodeAlreadyAttachedError

logger = logging.getLogger(__name__)


class Node:
    """A node in an arbitrary-arity tree of integer values.

    Children are supplied positionally, so trees read the way they nest::

        root = Node(1,
                    Node(2, Node(3), Node(4)),
                    Node(5, Node(6), Node(7)))

    Equality and hashing are inherited from ``object``, i.e. by identity.
    Two nodes holding the same value are different nodes.
    """

    __slots__ = ("_value", "_children", "_parent")

    def __init__(self, value: int, *children: "Node"):
        """Create a node and attach the given children in order.

        Args:
            value: Integer payload of the node
            *children: Parentless nodes to attach as initial children

        Raises:
            TypeError: If value is not an int
            NodeAlreadyAttachedError: If any child already has a parent
        """
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(
                f"Node value must be an int, got {type(value).__name__}"
            )
        self._value = value
        self._children = []
        self._parent = None
        self.attach_all(children)

    @property
    def value(self) -> int:
        return self._value

    @property
    def parent(self) -> Optional["Node"]:
        """Parent node, or None for the root."""
        return self._parent

    @property
    def children(self) -> Tuple["Node", ...]:
        """Direct children in attachment order (empty tuple for a leaf)."""
        return tuple(self._children)

    def attach(self, child: "Node") -> "Node":
        """Append child to this node and make this node its parent.

        Args:
            child: A node that has no parent yet

        Returns:
            The attached child, for chaining

        Raises:
            NodeAlreadyAttachedError: If child already has a parent
            CyclicAttachError: If child is this node or one of its ancestors
        """
        if child._parent is not None:
            logger.debug("Refusing to attach %s: already a child of %s",
                         child, child._parent)
            raise NodeAlreadyAttachedError(child, child._parent)

        ancestor = self
        while ancestor is not None:
            if ancestor is child:
                logger.debug("Refusing to attach %s below itself", child)
                raise CyclicAttachError(child, self)
            ancestor = ancestor._parent

        self._children.append(child)
        child._parent = self
        return child

    def attach_all(self, children: Iterable["Node"]) -> None:
        """Attach each child in order.

        Stops at the first failure. Children attached before the failing
        one stay attached.
        """
        for child in children:
            self.attach(child)

    def siblings(self) -> Set["Node"]:
        """Return the other children of this node's parent.

        Exclusion is by identity, so a sibling sharing this node's value is
        still returned. The root has no siblings.
        """
        if self._parent is None:
            return set()
        return {child for child in self._parent._children if child is not self}

    def is_root(self) -> bool:
        return self._parent is None

    def is_leaf(self) -> bool:
        return not self._children

    def root(self) -> "Node":
        """Walk parent links up to the root of this node's tree."""
        current = self
        while current._parent is not None:
            current = current._parent
        return current

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(value={self._value!r}, children={len(self._children)})"
