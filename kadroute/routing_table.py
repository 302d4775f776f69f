"""Kademlia routing table made of k-buckets indexed by shared id prefix."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Generic, TypeVar

__all__ = ["RoutingTable", "DEFAULT_K_BUCKET_SIZE", "DEFAULT_BIT_SIZE"]

DEFAULT_K_BUCKET_SIZE = 20
DEFAULT_BIT_SIZE = 160

_log = logging.getLogger(__name__)

P = TypeVar("P")


class RoutingTable(Generic[P]):
    """Keeps track of peers and finds the known peers closest to an id.

    Ids are non-negative integers of ``bit_size`` bits; bit 0 is the most
    significant one. Bucket ``i`` holds the peers whose id first differs from
    our own at bit ``i``.
    """

    def __init__(
        self,
        my_id: int,
        k_bucket_size: int = DEFAULT_K_BUCKET_SIZE,
        bit_size: int = DEFAULT_BIT_SIZE,
    ) -> None:
        if bit_size <= 0:
            raise ValueError("bit size must be > 0")
        if k_bucket_size <= 0:
            raise ValueError("k_bucket size must be > 0")
        self._bit_size = bit_size
        self._my_id = self._check_id(my_id)
        self._k_bucket_size = k_bucket_size
        self._buckets: list[list[tuple[int, P]]] = [[] for _ in range(bit_size)]
        self._peer_count = 0
        self._largest_bucket_index = 0
        _log.debug("routing table created with id %x", self._my_id)

    @property
    def my_id(self) -> int:
        return self._my_id

    @property
    def k_bucket_size(self) -> int:
        return self._k_bucket_size

    @property
    def bit_size(self) -> int:
        return self._bit_size

    def __len__(self) -> int:
        return self._peer_count

    def push(self, peer_id: int, peer: P) -> bool:
        """Register a peer; return False if it is known or its bucket is full."""
        peer_id = self._check_id(peer_id)
        index = self._bucket_index(peer_id)
        bucket = self._buckets[index]

        if len(bucket) == self._k_bucket_size:
            self._update_largest_bucket_index(index)
            if index != self._largest_bucket_index:
                return False

        if any(known_id == peer_id for known_id, _ in bucket):
            return False

        bucket.append((peer_id, peer))
        self._peer_count += 1
        return True

    def remove(self, peer_id: int) -> bool:
        """Remove a peer; return False if it was not known."""
        peer_id = self._check_id(peer_id)
        bucket = self._buckets[self._bucket_index(peer_id)]
        for position, (known_id, _) in enumerate(bucket):
            if known_id == peer_id:
                del bucket[position]
                self._peer_count -= 1
                return True
        return False

    def find(self, id_to_find: int) -> Iterator[tuple[int, P]]:
        """Yield ``(id, peer)`` pairs from the closest to ``id_to_find`` to the farthest."""
        id_to_find = self._check_id(id_to_find)
        start = max(self._lowest_bucket_index(), self._bucket_index(id_to_find))
        return self._walk_down_from(start)

    def __iter__(self) -> Iterator[tuple[int, P]]:
        return self._walk_down_from(self._bit_size - 1)

    def __str__(self) -> str:
        width = (self._bit_size + 3) // 4
        lines = [
            "{",
            f'\t"id": {self._my_id:0{width}x},',
            f'\t"peer_count": {self._peer_count},',
            f'\t"k_bucket_size": {self._k_bucket_size},',
            '\t"k_buckets": ',
        ]
        for index, bucket in enumerate(self._buckets):
            lines += [
                "\t{",
                f'\t\t"index": {index},',
                f'\t\t"bit_value": {self._bit(self._my_id, index)},',
                f'\t\t"peer_count": {len(bucket)}',
                "\t}",
            ]
        lines.append("}")
        return "\n".join(lines) + "\n"

    def _walk_down_from(self, start: int) -> Iterator[tuple[int, P]]:
        for index in range(start, -1, -1):
            yield from tuple(self._buckets[index])

    def _check_id(self, value: int) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"id must be an int, not {type(value).__name__}")
        if not 0 <= value < (1 << self._bit_size):
            raise ValueError(f"id {value} does not fit in {self._bit_size} bits")
        return value

    def _bit(self, value: int, index: int) -> int:
        return (value >> (self._bit_size - 1 - index)) & 1

    def _bucket_index(self, id_to_find: int) -> int:
        # Index of the first bit that differs from our own id.
        diff = id_to_find ^ self._my_id
        if diff == 0:
            return self._bit_size - 1
        return min(self._bit_size - diff.bit_length(), self._bit_size - 1)

    def _lowest_bucket_index(self) -> int:
        index, last = 0, len(self._buckets) - 1
        peer_count = 0
        while index != last and peer_count <= self._k_bucket_size:
            peer_count += len(self._buckets[index])
            index += 1
        return index

    def _update_largest_bucket_index(self, index: int) -> None:
        if len(self._buckets[self._largest_bucket_index]) <= self._k_bucket_size:
            self._largest_bucket_index = index