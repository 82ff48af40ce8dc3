"""A growable byte buffer with explicit, doubling capacity management."""

from __future__ import annotations

from typing import Iterable

SIZE_MAX = 2**64 - 1
_EXPAND_MULTIPLIER = 2


class TypeOverflowError(OverflowError):
    """Raised when a size computation would overflow its native width."""


class Buffer:
    """Byte storage whose capacity grows by doubling as data is added."""

    def __init__(self, initial_capacity: int) -> None:
        if initial_capacity < 0:
            raise ValueError("initial capacity must not be negative")
        self._data = bytearray()
        self._capacity = initial_capacity

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __repr__(self) -> str:
        return f"Buffer(len={len(self._data)}, capacity={self._capacity})"

    @property
    def capacity(self) -> int:
        """The number of bytes the buffer can hold before it must grow."""
        return self._capacity

    def expand(self, needed: int) -> None:
        """Ensure room for ``needed`` more bytes, doubling capacity as required."""
        if needed < 0:
            raise ValueError("needed must not be negative")
        required = len(self._data) + needed
        if required <= self._capacity:
            return

        new_cap = max(self._capacity, 1)
        while required > new_cap:
            if new_cap > SIZE_MAX // _EXPAND_MULTIPLIER:
                raise TypeOverflowError("buffer capacity would overflow")
            new_cap *= _EXPAND_MULTIPLIER
        self._capacity = new_cap

    def putc(self, c: int) -> None:
        """Append a single byte."""
        if not 0 <= c <= 0xFF:
            raise ValueError("byte value must be in range 0..255")
        self.expand(1)
        self._data.append(c)

    def clear(self) -> None:
        """Drop all content while keeping the current capacity."""
        self._data.clear()

    def _append(self, data: bytes | bytearray | memoryview | Iterable[int]) -> None:
        chunk = bytes(data)
        self.expand(len(chunk))
        self._data.extend(chunk)

    def _patch(self, offset: int, data: bytes) -> None:
        if offset < 0 or offset + len(data) > len(self._data):
            raise IndexError("patch outside of written data")
        self._data[offset : offset + len(data)] = data