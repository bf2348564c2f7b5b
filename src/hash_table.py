"""
Separate-chaining hash table with pluggable hash and equality functions.

Every operation maps a key to ``hash_fn(key, bucket_count)``, then scans that
bucket's chain with ``equal_fn`` to find the matching entry. The bucket count
never changes in place: ``rehash`` builds a new table and retires this one.

Caller obligations, not checked here:
    - ``hash_fn(key, n)`` returns an int in ``[0, n)`` and is deterministic.
    - Keys that ``equal_fn`` considers equal hash to the same bucket.
Breaking either makes lookups miss entries that are present.

``None`` is the "absent" result of ``get``, ``insert`` and ``remove``. A
stored ``None`` value is therefore indistinguishable from a missing key
through those calls; use ``contains`` when it matters.
"""

import logging

from chain import Chain

logger = logging.getLogger(__name__)

DEFAULT_BUCKET_COUNT = 101
USE_DEFAULT = -1
HASH_BASE = 127


class TableDestroyedError(RuntimeError):
    """Raised when a table is used after ``destroy`` or ``rehash``."""


def _as_bytes(key):
    if isinstance(key, str):
        return key.encode("utf-8")
    if isinstance(key, (bytes, bytearray, memoryview)):
        return bytes(key)
    raise TypeError(
        f"default hash/equality need str or bytes keys, got {type(key).__name__}"
    )


def default_hash(key, n):
    """Polynomial rolling hash of the key's bytes, base 127, reduced mod n."""
    result = 0
    for byte in _as_bytes(key):
        result = (result * HASH_BASE + byte) % n
    return result


def default_equal(a, b):
    return _as_bytes(a) == _as_bytes(b)


class Entry:
    __slots__ = ("key", "value")

    def __init__(self, key, value):
        self.key = key
        self.value = value

    def __repr__(self):
        return f"Entry({self.key!r}, {self.value!r})"


class HashTable:
    def __init__(self, bucket_count=USE_DEFAULT, hash_fn=None, equal_fn=None):
        if not isinstance(bucket_count, int) or isinstance(bucket_count, bool):
            raise TypeError("bucket_count must be an integer")
        if bucket_count == USE_DEFAULT:
            bucket_count = DEFAULT_BUCKET_COUNT
        elif bucket_count <= 0:
            raise ValueError("bucket_count must be positive or -1 for the default")
        self._bucket_count = bucket_count
        self._hash = default_hash if hash_fn is None else hash_fn
        self._equal = default_equal if equal_fn is None else equal_fn
        self._buckets = [Chain() for _ in range(bucket_count)]
        logger.debug(f"Created hash table with {bucket_count} buckets")

    def _live_buckets(self):
        if self._buckets is None:
            raise TableDestroyedError("hash table has been destroyed or rehashed")
        return self._buckets

    def _chain_for(self, key):
        buckets = self._live_buckets()
        return buckets[self._hash(key, self._bucket_count)]

    def _matches(self, entry, key):
        return self._equal(entry.key, key)

    def _retire(self):
        self._buckets = None

    @property
    def bucket_count(self):
        return self._bucket_count

    def destroy(self, key_cleanup=None, value_cleanup=None):
        """Empty every bucket and retire the table.

        Each surviving key and value is passed to its cleanup callback, when
        one is given, before the entry is dropped. If a callback raises, the
        exception propagates, the remaining entries are dropped without
        cleanup and the table is still retired.
        """
        buckets = self._live_buckets()
        removed = 0
        try:
            for chain in buckets:
                while not chain.is_empty():
                    entry = chain.remove_at(0)
                    removed += 1
                    if key_cleanup is not None:
                        key_cleanup(entry.key)
                    if value_cleanup is not None:
                        value_cleanup(entry.value)
                chain.destroy()
        finally:
            self._retire()
        logger.info(f"Destroyed hash table ({self._bucket_count} buckets, {removed} entries)")

    def is_empty(self):
        for chain in self._live_buckets():
            if not chain.is_empty():
                return False
        return True

    def size(self):
        """Count entries across all buckets. Recomputed on every call."""
        return sum(len(chain) for chain in self._live_buckets())

    def get(self, key):
        chain = self._chain_for(key)
        index = chain.find(self._matches, key)
        if index is None:
            return None
        return chain.get_at(index).value

    def contains(self, key):
        chain = self._chain_for(key)
        return chain.find(self._matches, key) is not None

    def insert(self, key, value):
        """Store ``value`` under ``key`` and return the value it replaced.

        On a replace the existing entry keeps its original key object; the
        ``key`` passed here is not retained.
        """
        chain = self._chain_for(key)
        index = chain.find(self._matches, key)
        if index is not None:
            entry = chain.get_at(index)
            old_value = entry.value
            entry.value = value
            return old_value
        chain.append(Entry(key, value))
        return None

    def remove(self, key):
        chain = self._chain_for(key)
        index = chain.find(self._matches, key)
        if index is None:
            return None
        return chain.remove_at(index).value

    def keys(self):
        result = []
        for chain in self._live_buckets():
            for entry in chain:
                result.append(entry.key)
        return result

    def values(self):
        result = []
        for chain in self._live_buckets():
            for entry in chain:
                result.append(entry.value)
        return result

    def items(self):
        result = []
        for chain in self._live_buckets():
            for entry in chain:
                result.append((entry.key, entry.value))
        return result

    def bucket_lengths(self):
        return [len(chain) for chain in self._live_buckets()]

    def load_factor(self):
        return self.size() / self._bucket_count

    def rehash(self, new_bucket_count):
        """Move every entry into a new table with ``new_bucket_count`` buckets.

        Returns the new table and retires this one. Keys and values are moved,
        never cleaned up. A non-positive count is a no-op that returns
        ``self``.
        """
        buckets = self._live_buckets()
        if new_bucket_count <= 0:
            return self
        new_table = HashTable(new_bucket_count, self._hash, self._equal)
        moved = 0
        for chain in buckets:
            for entry in chain:
                new_table.insert(entry.key, entry.value)
                moved += 1
        for chain in buckets:
            chain.destroy()
        self._retire()
        logger.info(
            f"Rehashed {moved} entries from {self._bucket_count} to {new_bucket_count} buckets"
        )
        return new_table

    def copy(self):
        """Create a copy of this HashTable.

        Note: keys and values are shared with the original, not copied.
        """
        clone = HashTable(self._bucket_count, self._hash, self._equal)
        for chain in self._live_buckets():
            for entry in chain:
                clone.insert(entry.key, entry.value)
        return clone

    def __len__(self):
        return self.size()

    def __contains__(self, key):
        return self.contains(key)

    def __getitem__(self, key):
        chain = self._chain_for(key)
        index = chain.find(self._matches, key)
        if index is None:
            raise KeyError(key)
        return chain.get_at(index).value

    def __setitem__(self, key, value):
        self.insert(key, value)

    def __delitem__(self, key):
        if not self.contains(key):
            raise KeyError(key)
        self.remove(key)

    def __iter__(self):
        for chain in self._live_buckets():
            for entry in chain:
                yield entry.key

    def __repr__(self):
        if self._buckets is None:
            return "HashTable(<destroyed>)"
        pairs = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"HashTable({{{pairs}}})"
