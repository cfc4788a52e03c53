"""A hash table of integer keys that resolves collisions by chaining."""

from __future__ import annotations


class ChainedHashTable:
    """Fixed number of buckets, each holding its keys in insertion order."""

    def __init__(self, buckets: int) -> None:
        if buckets < 1:
            raise ValueError("a hash table needs at least one bucket")
        self._table: list[list[int]] = [[] for _ in range(buckets)]

    @property
    def buckets(self) -> int:
        """Number of buckets."""
        return len(self._table)

    def bucket_index(self, key: int) -> int:
        """Bucket that ``key`` maps to: ``key`` modulo the bucket count."""
        return key % len(self._table)

    def insert(self, key: int) -> None:
        """Append ``key`` to the end of its bucket; duplicates are kept."""
        self._table[self.bucket_index(key)].append(key)

    def delete(self, key: int) -> bool:
        """Remove the first occurrence of ``key``; return whether one was found."""
        chain = self._table[self.bucket_index(key)]
        try:
            chain.remove(key)
        except ValueError:
            return False
        return True

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        return key in self._table[self.bucket_index(key)]

    def __len__(self) -> int:
        return sum(len(chain) for chain in self._table)

    def render(self) -> str:
        """One line per bucket: its index followed by `` --> key`` for each key."""
        lines = (
            str(index) + "".join(f" --> {key}" for key in chain)
            for index, chain in enumerate(self._table)
        )
        return "".join(f"{line}\n" for line in lines)