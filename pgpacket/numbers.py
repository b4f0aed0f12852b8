"""Reading of packet bytes and fixed-width big-endian numbers."""

from __future__ import annotations

from typing import ClassVar


class ByteReader:
    """Consumes bytes from the front of a buffer."""

    def __init__(self, data) -> None:
        self._data = bytes(data)
        self._offset = 0

    def __len__(self) -> int:
        return len(self._data) - self._offset

    def empty(self) -> bool:
        """Return True when every byte has been consumed."""
        return len(self) == 0

    def read_bytes(self, count: int) -> bytes:
        """Consume and return the next *count* bytes."""
        if count < 0:
            raise ValueError("count must not be negative")
        if count > len(self):
            raise IndexError(f"Cannot read {count} bytes, only {len(self)} left")
        chunk = self._data[self._offset:self._offset + count]
        self._offset += count
        return chunk

    def read_number(self, width: int) -> int:
        """Consume a big-endian unsigned number of *width* bytes."""
        if width <= 0:
            raise ValueError("width must be a positive number of bytes")
        return int.from_bytes(self.read_bytes(width), "big")


class FixedNumber:
    """An unsigned number stored in a fixed number of big-endian octets."""

    WIDTH: ClassVar[int]

    __slots__ = ("_value",)

    def __init__(self, value: int = 0) -> None:
        width = getattr(type(self), "WIDTH", None)
        if width is None:
            raise TypeError("FixedNumber must be used through a sized subclass")
        number = int(value)
        if not 0 <= number < (1 << (8 * width)):
            raise ValueError(f"{number} does not fit in {width} unsigned bytes")
        self._value = number

    @classmethod
    def decode(cls, reader: ByteReader) -> FixedNumber:
        """Read a number of this width from *reader*."""
        return cls(reader.read_number(cls.WIDTH))

    @classmethod
    def size(cls) -> int:
        """Return the number of bytes used in encoded form."""
        return cls.WIDTH

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __eq__(self, other) -> bool:
        if isinstance(other, FixedNumber):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value})"

    def encode(self, writer) -> None:
        """Write the number to *writer*."""
        writer.push(self._value, self.WIDTH)


class Uint8(FixedNumber):
    """One-byte unsigned number."""

    __slots__ = ()
    WIDTH = 1


class Uint16(FixedNumber):
    """Two-byte unsigned number."""

    __slots__ = ()
    WIDTH = 2


class Uint32(FixedNumber):
    """Four-byte unsigned number."""

    __slots__ = ()
    WIDTH = 4


class Uint64(FixedNumber):
    """Eight-byte unsigned number."""

    __slots__ = ()
    WIDTH = 8