"""Pre-order traversal for preordertree.

The traverser walks a tree depth-first, visiting each node before its
children and the children left to right. It works through a TreeAdapter,
so it does not depend on the concrete node type.
"""

from typing import Any, Iterator, List, Optional, Set, Tuple

from .adapter import NodeAdapter, TreeAdapter


class PreOrderTraverser:
    """Depth-first pre-order traversal strategy.

    Visits parent before children. A child is only descended into if it has
    not been visited yet, compared by identity. On a proper tree the check
    never triggers; it keeps the walk finite if a root has been attached
    somewhere below itself.
    """

    def __init__(self, adapter: Optional[TreeAdapter] = None):
        """Initialize traverser with an adapter.

        Args:
            adapter: TreeAdapter for navigating the tree (defaults to
                NodeAdapter)
        """
        self.adapter = adapter or NodeAdapter()

    def traverse(self,
                 root: Any,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Any, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        visited: Set[int] = set()

        def _traverse_recursive(node: Any, depth: int) -> Iterator[Tuple[Any, int]]:
            visited.add(id(node))

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                for child in self.adapter.get_children(node):
                    if id(child) in visited:
                        continue
                    yield from _traverse_recursive(child, depth + 1)

        yield from _traverse_recursive(root, 0)

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        if max_depth is None:
            return True
        return depth < max_depth


def flatten_pre_order(root: Any, adapter: Optional[TreeAdapter] = None) -> List[Any]:
    """Return every node reachable from root, in pre-order.

    Args:
        root: Node to start from; it is always the first element
        adapter: TreeAdapter to navigate with (defaults to NodeAdapter)

    Returns:
        List of nodes, root first
    """
    traverser = PreOrderTraverser(adapter)
    return [node for node, _ in traverser.traverse(root)]
