"""Mapping from byte-sequence keys to stored values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from typing import Any

__all__ = ["ValueStore", "hash_key"]

_MASK = (1 << 64) - 1
_GOLDEN = 0x9E3779B9


def _as_key(key: Any) -> bytes:
    if isinstance(key, (bytes, bytearray, memoryview)):
        return bytes(key)
    if isinstance(key, (str, int)):
        raise TypeError(f"key must be a byte sequence, not {type(key).__name__}")
    try:
        return bytes(key)
    except TypeError as exc:
        raise TypeError(f"key must be a byte sequence, not {type(key).__name__}") from exc


def hash_key(key: Iterable[int]) -> int:
    """Combine the bytes of ``key`` into a 64-bit hash."""
    seed = 0
    for byte in _as_key(key):
        seed ^= (byte + _GOLDEN + ((seed << 6) & _MASK) + (seed >> 2)) & _MASK
    return seed


class ValueStore(MutableMapping):
    """Dictionary whose keys are byte sequences, normalised to ``bytes``."""

    def __init__(self, items: Mapping | Iterable[tuple[Any, Any]] | None = None) -> None:
        self._data: dict[bytes, Any] = {}
        if items is not None:
            self.update(items)

    def __getitem__(self, key: Any) -> Any:
        return self._data[_as_key(key)]

    def __setitem__(self, key: Any, value: Any) -> None:
        self._data[_as_key(key)] = value

    def __delitem__(self, key: Any) -> None:
        del self._data[_as_key(key)]

    def __iter__(self) -> Iterator[bytes]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        try:
            return _as_key(key) in self._data
        except (TypeError, ValueError):
            return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"