"""
Map-shaped view over a LazyList of pairs.

The view stores nothing itself: every lookup scans the underlying list and
every update edits it. put() shadows older entries by inserting in front,
so the list behaves like an association list.
"""

import logging
from collections.abc import MutableMapping

from wrappers import Pair, as_pair

logger = logging.getLogger(__name__)


class LazyMapView(MutableMapping):
    """
    MutableMapping backed by a LazyList of Pair(key, value).

    Lookups stop at the first matching pair, so they terminate on an
    infinite list as long as the key is eventually found. len() counts
    pairs, shadowed duplicates included.
    """

    def __init__(self, seq):
        self._seq = seq

    def _find(self, key):
        """Position and value of the first pair for key, or (-1, None)."""
        for position, element in enumerate(self._seq):
            first, second = as_pair(element)
            if first == key:
                return position, second
        return -1, None

    def __getitem__(self, key):
        position, value = self._find(key)
        if position < 0:
            raise KeyError(key)
        return value

    def __setitem__(self, key, value):
        self.put(key, value)

    def __delitem__(self, key):
        position, _ = self._find(key)
        if position < 0:
            raise KeyError(key)
        self._seq.remove_at(position)

    def __iter__(self):
        for element in self._seq:
            yield as_pair(element)[0]

    def __len__(self):
        return len(self._seq)

    def __contains__(self, key):
        return self._find(key)[0] >= 0

    def contains_key(self, key) -> bool:
        return key in self

    def contains_value(self, value) -> bool:
        return any(as_pair(element)[1] == value for element in self._seq)

    def put(self, key, value) -> None:
        """Insert Pair(key, value) in front; older pairs for key stay but are shadowed."""
        self._seq.insert(0, Pair(key, value))

    def put_all(self, mapping) -> None:
        for key, value in mapping.items():
            self.put(key, value)

    def remove(self, key):
        """Remove the first pair for key and return its value, or None if there is none."""
        position, value = self._find(key)
        if position < 0:
            return None
        self._seq.remove_at(position)
        return value

    def clear(self):
        self._seq.clear()
        logger.debug("Map view cleared its LazyList")

    def __repr__(self):
        return f"LazyMapView({self._seq!r})"
