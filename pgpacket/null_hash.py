"""A pass-through "hash" that returns the data it was given as the digest."""

from __future__ import annotations


class NullHashError(ValueError):
    """Raised when a NullHash gets too much input or too little for a digest."""


class NullHash:
    """Collects at most ``digest_size`` bytes and hands them back as the digest.

    Useful where a signature primitive insists on hashing but the hash has
    already been computed elsewhere.
    """

    name = "NullHash"

    def __init__(self, digest_size: int = 32) -> None:
        if digest_size < 0:
            raise ValueError("digest size must not be negative")
        self._digest_size = digest_size
        self._buffer = bytearray()

    def digest_size(self) -> int:
        """Return the maximum digest size."""
        return self._digest_size

    def update(self, data) -> None:
        """Append *data* to the bytes that will be returned as the digest."""
        chunk = bytes(data)
        space_left = self._digest_size - len(self._buffer)
        if len(chunk) > space_left:
            raise NullHashError(
                f"Input to NullHash too large: given {len(chunk)} "
                f"while only space left for {space_left}"
            )
        self._buffer += chunk

    def truncated_final(self, size: int) -> bytes:
        """Return the first *size* input bytes and start a new cycle."""
        if size < 0 or size > self._digest_size:
            raise ValueError(
                f"{self.name}: truncated digest size {size} "
                f"exceeds the maximum digest size {self._digest_size}"
            )
        if len(self._buffer) < size:
            raise NullHashError("Not enough hash input provided to satisfy request")
        result = bytes(self._buffer[:size])
        self._buffer.clear()
        return result