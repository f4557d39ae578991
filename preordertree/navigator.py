"""PreOrderNavigator: "next node in pre-order" queries for preordertree.

The navigator answers next/visit_all_nodes/walk against a pre-order cache
chosen by TraversalConfig.cache_scope:

- PROCESS: the process-wide slot. Starting from any root recomputes it;
  starting from a non-root node reuses whatever it holds, which may belong
  to a different tree or be empty.
- TREE: a slot per tree. A non-root node is answered from its own tree's
  slot, or not at all if that tree never traversed from its root.
- FRESH: every query flattens the node's tree from its root.
"""

from typing import Any, Iterator, Optional

from .cache import PreOrderCache, TreeCacheRegistry, get_process_cache
from .config import CacheScope, TraversalConfig
from .core.adapter import NodeAdapter, TreeAdapter
from .exceptions import ConfigurationError


class PreOrderNavigator:
    """Navigate a tree in pre-order using a configurable cache scope.

    Example:
        >>> navigator = PreOrderNavigator(TraversalConfig.per_tree())
        >>> node = root
        >>> while node is not None:
        ...     print(node)
        ...     node = navigator.next(node)
    """

    def __init__(self,
                 config: Optional[TraversalConfig] = None,
                 adapter: Optional[TreeAdapter] = None):
        """Create a navigator.

        Args:
            config: Traversal configuration (defaults to PROCESS scope)
            adapter: TreeAdapter used for flattening and root lookup

        Raises:
            ConfigurationError: If config fails validation
        """
        self.config = config or TraversalConfig()
        config_errors = self.config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.adapter = adapter or NodeAdapter()
        self._registry = None
        if self.config.cache_scope == CacheScope.TREE:
            self._registry = TreeCacheRegistry(
                max_trees=self.config.max_cached_trees,
                adapter=self.adapter,
            )

    def next(self, node: Any) -> Optional[Any]:
        """Return the node following node in pre-order.

        If node is a root, its tree is traversed first. Returns None when
        node is the last node of the cached sequence or is not in it.
        """
        return self._prepare(node).next_after(node)

    def visit_all_nodes(self, root: Any) -> str:
        """Render the pre-order sequence as separator-joined values.

        From a root this recomputes the sequence; from any other node it
        renders what the cache currently holds for that node.
        """
        sequence = self._prepare(root).sequence
        return self.config.separator.join(str(node) for node in sequence)

    def walk(self, start: Any) -> Iterator[Any]:
        """Yield start, then each successive next() until None."""
        node = start
        while node is not None:
            yield node
            node = self.next(node)

    def cache_for(self, node: Any) -> Optional[PreOrderCache]:
        """Return the stored cache slot that answers queries about node.

        Always None for FRESH scope, and None for TREE scope when node's
        tree has not been traversed yet.
        """
        scope = self.config.cache_scope
        if scope == CacheScope.PROCESS:
            return get_process_cache()
        if scope == CacheScope.TREE:
            return self._registry.lookup(self.adapter.get_root(node))
        return None

    def _prepare(self, node: Any) -> PreOrderCache:
        """Return the slot to answer from, refreshing it if node is a root."""
        scope = self.config.cache_scope

        if scope == CacheScope.FRESH:
            cache = PreOrderCache(self.adapter)
            cache.refresh(self.adapter.get_root(node))
            return cache

        is_root = self.adapter.get_parent(node) is None

        if scope == CacheScope.TREE:
            if is_root:
                return self._registry.refresh(node)
            cache = self._registry.lookup(self.adapter.get_root(node))
            return cache if cache is not None else PreOrderCache(self.adapter)

        cache = get_process_cache()
        if is_root:
            cache.refresh(node, self.adapter)
        return cache
