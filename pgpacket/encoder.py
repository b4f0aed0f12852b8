"""Encoding of packet data into a pre-allocated, writable byte buffer."""

from __future__ import annotations

import operator
from collections.abc import Iterable


class EncoderOverflowError(IndexError):
    """Raised when a write would go beyond the end of the buffer or a byte."""


class MaskedBitsError(ValueError):
    """Raised when a value does not fit in the bits that are still free."""


class RangeEncoder:
    """Writes big-endian numbers, bit fields and blobs into a fixed buffer.

    Bits inserted with :meth:`insert_bits` are queued in a partial byte; a
    following :meth:`push` merges them into the most significant bits of the
    first byte of the number, provided those bits of the number are clear.
    """

    def __init__(self, buffer) -> None:
        view = memoryview(buffer)
        if view.readonly:
            raise TypeError("RangeEncoder needs a writable buffer")
        self._buffer = view.cast("B") if view.format != "B" else view
        self._size = 0
        self._current = 0
        self._skip_bits = 0

    def flush(self) -> None:
        """Write out a partially filled byte; bit operations restart at a fresh byte."""
        if self._skip_bits > 0:
            self._buffer[self._size] = self._current
            self._size += 1
            self._current = 0
            self._skip_bits = 0

    def size(self) -> int:
        """Return the number of bytes written so far."""
        return self._size

    def insert_bits(self, count: int, value: int) -> RangeEncoder:
        """Queue *count* bits holding *value*; a write may not cross a byte boundary."""
        if value < 0 or value > (1 << count) - 1:
            raise MaskedBitsError("Cannot encode value, too large for given bit-size")
        if count + self._skip_bits > 8:
            raise EncoderOverflowError(
                "Cannot encode value, bit-wise operation may not cross byte boundaries"
            )
        if self._size >= len(self._buffer):
            raise EncoderOverflowError("Buffer too small for inserting bits")

        self._current |= value << (8 - self._skip_bits - count)

        if count + self._skip_bits == 8:
            self._buffer[self._size] = self._current
            self._current = 0
            self._size += 1
            self._skip_bits = 0
        else:
            self._skip_bits += count
        return self

    def push(self, value, width: int) -> RangeEncoder:
        """Write an unsigned integer (or integer enum) of *width* bytes, big-endian."""
        if width <= 0:
            raise ValueError("width must be a positive number of bytes")
        number = operator.index(value)

        if len(self._buffer) < self._size + width:
            raise EncoderOverflowError("Buffer too small for inserting number")

        maximum = (1 << (8 * width)) - 1
        if number < 0 or number > maximum:
            raise MaskedBitsError(f"Cannot insert number, {number} does not fit in {width} bytes")
        if number & (maximum >> self._skip_bits) != number:
            raise MaskedBitsError("Cannot insert number, masked bits are set")

        result = (self._current << (8 * (width - 1))) | number
        self._buffer[self._size:self._size + width] = result.to_bytes(width, "big")

        self._size += width
        self._current = 0
        self._skip_bits = 0
        return self

    def push_all(self, values: Iterable, width: int) -> RangeEncoder:
        """Push every value; if any push fails the encoder state is left untouched."""
        saved = (self._size, self._current, self._skip_bits)
        try:
            for value in values:
                self.push(value, width)
        except Exception:
            self._size, self._current, self._skip_bits = saved
            raise
        return self

    def insert_blob(self, data) -> RangeEncoder:
        """Write a run of bytes, merging queued bits into the first one."""
        blob = bytes(data)
        if not blob:
            return self
        if len(self._buffer) < self._size + len(blob):
            raise EncoderOverflowError("Buffer too small for inserting blob")

        self.push(blob[0], 1)
        rest = blob[1:]
        self._buffer[self._size:self._size + len(rest)] = rest
        self._size += len(rest)
        return self