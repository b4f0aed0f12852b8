"""Multiprecision integers in the packet wire format (bit count plus big-endian bytes)."""

from __future__ import annotations

from .numbers import ByteReader, Uint16

_MAX_BITS = 0xFFFF


class MultiprecisionInteger:
    """An unsigned integer stored as a two-byte bit count followed by its bytes."""

    __slots__ = ("_bits", "_data")

    def __init__(self, data=b"") -> None:
        stripped = bytes(data).lstrip(b"\x00")
        bits = int.from_bytes(stripped, "big").bit_length()
        if bits > _MAX_BITS:
            raise ValueError(f"Integer of {bits} bits is too large to encode")
        self._bits = bits
        self._data = stripped

    @classmethod
    def decode(cls, reader: ByteReader) -> MultiprecisionInteger:
        """Read the bit count and the bytes it covers from *reader*."""
        bits = int(Uint16.decode(reader))
        data = reader.read_bytes((bits + 7) // 8)
        result = cls.__new__(cls)
        result._bits = bits
        result._data = data
        return result

    @classmethod
    def from_int(cls, value: int) -> MultiprecisionInteger:
        """Build from a non-negative Python integer."""
        if value < 0:
            raise ValueError("Multiprecision integers cannot be negative")
        return cls(value.to_bytes((value.bit_length() + 7) // 8, "big"))

    def bits(self) -> int:
        """Return the stored bit count."""
        return self._bits

    def data(self) -> bytes:
        """Return the big-endian bytes of the number."""
        return self._data

    def size(self) -> int:
        """Return the number of bytes used in encoded form."""
        return Uint16.size() + len(self._data)

    def __int__(self) -> int:
        return int.from_bytes(self._data, "big")

    def __eq__(self, other) -> bool:
        if isinstance(other, MultiprecisionInteger):
            return self._data == other._data
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._data)

    def __repr__(self) -> str:
        return f"MultiprecisionInteger({self._data.hex()!r})"

    def encode(self, writer) -> None:
        """Write the bit count and the bytes to *writer*."""
        Uint16(self._bits).encode(writer)
        writer.insert_blob(self._data)