"""A fixed-capacity least-recently-used cache of integer keys and values."""

from __future__ import annotations

import logging
from collections import OrderedDict

logger = logging.getLogger(__name__)


class LRUCache:
    """Cache that evicts the least recently used entry once over capacity."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        self._entries: OrderedDict[int, int] = OrderedDict()

    def get(self, key: int) -> int:
        """Value stored under ``key`` (marking it most recent), or -1 if absent."""
        if key not in self._entries:
            logger.debug("[R] key %d not found", key)
            return -1
        self._entries.move_to_end(key)
        value = self._entries[key]
        logger.debug("[R] key %d found with value %d", key, value)
        return value

    def put(self, key: int, value: int) -> None:
        """Store ``value`` under ``key``, evicting the oldest entry if over capacity."""
        if key in self._entries:
            self._entries[key] = value
            self._entries.move_to_end(key)
            logger.debug("[U] key %d updated to %d", key, value)
            return
        self._entries[key] = value
        logger.debug("[C] key %d added with value %d", key, value)
        if len(self._entries) > self.capacity:
            old_key, old_value = self._entries.popitem(last=False)
            logger.debug("[D] key %d evicted with value %d", old_key, old_value)

    def __len__(self) -> int:
        return len(self._entries)