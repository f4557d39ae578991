"""Pre-order cache storage for preordertree.

A PreOrderCache is a single slot: either Empty, or Populated with the
pre-order sequence of one tree and the root it was computed from. The slot
is refreshed only when a traversal starts from a root node and is never
invalidated by mutation, so a tree changed after its last traversal is
answered from the old sequence until its root traverses again.

Two homes for the slot exist:

- the process-wide slot (get_process_cache), shared by every tree
- TreeCacheRegistry, one slot per tree in a bounded LRU keyed by root

Neither is thread-safe.
"""

import logging
from typing import Any, List, Optional, Tuple

from cachetools import LRUCache

from .core.adapter import TreeAdapter
from .core.traverser import flatten_pre_order

logger = logging.getLogger(__name__)


class PreOrderCache:
    """Single-slot cache of one tree's pre-order sequence."""

    def __init__(self, adapter: Optional[TreeAdapter] = None):
        self._adapter = adapter
        self._sequence: Tuple[Any, ...] = ()
        self._root: Optional[Any] = None
        self.refresh_count = 0

    @property
    def sequence(self) -> Tuple[Any, ...]:
        """Cached nodes in pre-order (empty tuple while Empty)."""
        return self._sequence

    @property
    def root(self) -> Optional[Any]:
        """Root the sequence was computed from, or None while Empty."""
        return self._root

    @property
    def is_empty(self) -> bool:
        return self._root is None

    def refresh(self, root: Any, adapter: Optional[TreeAdapter] = None) -> Tuple[Any, ...]:
        """Recompute the sequence from root and store it.

        Args:
            root: Node to flatten from
            adapter: Adapter for this refresh only (defaults to the one the
                cache was created with)

        Returns:
            The new cached sequence
        """
        self._sequence = tuple(flatten_pre_order(root, adapter or self._adapter))
        self._root = root
        self.refresh_count += 1
        logger.debug("Cached pre-order sequence of %d nodes from root %s",
                     len(self._sequence), root)
        return self._sequence

    def clear(self) -> None:
        """Return the slot to the Empty state and reset its refresh count."""
        if self._root is not None:
            logger.debug("Clearing pre-order cache for root %s", self._root)
        self._sequence = ()
        self._root = None
        self.refresh_count = 0

    def index_of(self, node: Any) -> Optional[int]:
        """Position of node in the sequence by identity, or None."""
        for index, candidate in enumerate(self._sequence):
            if candidate is node:
                return index
        return None

    def next_after(self, node: Any) -> Optional[Any]:
        """Node following node in the sequence.

        Returns None when node is the last element or is not cached at all.
        """
        index = self.index_of(node)
        if index is None or index + 1 >= len(self._sequence):
            return None
        return self._sequence[index + 1]

    def values(self) -> List[Any]:
        """Values of the cached nodes, in order."""
        return [node.value for node in self._sequence]

    def __len__(self) -> int:
        return len(self._sequence)

    def __repr__(self) -> str:
        state = "empty" if self.is_empty else f"root={self._root}, size={len(self._sequence)}"
        return f"{self.__class__.__name__}({state})"


_process_cache = PreOrderCache()


def get_process_cache() -> PreOrderCache:
    """Return the process-wide pre-order cache slot."""
    return _process_cache


def reset_process_cache() -> None:
    """Clear the process-wide slot back to Empty."""
    _process_cache.clear()


class _EvictionLoggingLRUCache(LRUCache):

    def popitem(self):
        key, value = super().popitem()
        logger.debug("Evicted cached traversal of root %s", value.root)
        return key, value


class TreeCacheRegistry:
    """One PreOrderCache per tree, keyed by root identity.

    Entries hold their root, so an entry's key (the root's id) cannot be
    reused by another object while the entry is alive. The least recently
    used tree is dropped once max_trees is exceeded.
    """

    def __init__(self, max_trees: int = 128, adapter: Optional[TreeAdapter] = None):
        self._adapter = adapter
        self._caches = _EvictionLoggingLRUCache(maxsize=max_trees)

    def lookup(self, root: Any) -> Optional[PreOrderCache]:
        """Return the slot for root's tree, or None if it never traversed."""
        cache = self._caches.get(id(root))
        if cache is None or cache.root is not root:
            return None
        return cache

    def refresh(self, root: Any) -> PreOrderCache:
        """Recompute the slot for root's tree, creating it if needed."""
        cache = self.lookup(root)
        if cache is None:
            cache = PreOrderCache(self._adapter)
            self._caches[id(root)] = cache
        cache.refresh(root)
        return cache

    def clear(self) -> None:
        self._caches.clear()

    def __len__(self) -> int:
        return len(self._caches)

    def __contains__(self, root: Any) -> bool:
        return self.lookup(root) is not None
