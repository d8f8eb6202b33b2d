"""Least-recently-used cache bounded by approximate serialized size in bytes."""

import json
import logging
from collections import OrderedDict

from geoplaces.config import DEFAULT_CACHE_SIZE

logger = logging.getLogger(__name__)


class LRUCache:
    """Maps keys to values, evicting the least recently used entries when full.

    A single entry larger than max_size still gets stored after everything
    else has been evicted, so current_size can exceed max_size in that case.
    Not safe for concurrent use.
    """

    def __init__(self, max_size=DEFAULT_CACHE_SIZE):
        if max_size <= 0:
            raise ValueError(f'Cache size must be positive, got {max_size}')
        self.max_size = max_size
        self.current_size = 0
        self._entries = OrderedDict()  # key -> (value, size)

    def __len__(self):
        return len(self._entries)

    def __contains__(self, key):
        return key in self._entries

    @staticmethod
    def estimate_size(value):
        """Rough byte size: two bytes per character of the compact JSON encoding."""
        return len(json.dumps(value, separators=(',', ':'))) * 2

    def get(self, key):
        """Return the cached value and mark it most recently used, or None."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        self._entries.move_to_end(key)
        return entry[0]

    def set(self, key, value):
        size = self.estimate_size(value)
        self.remove(key)

        while self.current_size + size > self.max_size and self._entries:
            oldest, (_, oldest_size) = self._entries.popitem(last=False)
            self.current_size -= oldest_size
            logger.debug(f'Evicted {oldest!r} ({oldest_size} bytes)')

        self._entries[key] = (value, size)
        self.current_size += size

    def remove(self, key):
        entry = self._entries.pop(key, None)
        if entry is not None:
            self.current_size -= entry[1]

    def clear(self):
        self._entries.clear()
        self.current_size = 0

    def stats(self):
        return {
            'entry_count': len(self._entries),
            'current_size': self.current_size,
            'capacity': self.max_size,
            'utilization_percent': round(100 * self.current_size / self.max_size, 2),
        }
