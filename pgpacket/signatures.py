"""Algorithm-specific signature values."""

from __future__ import annotations

from dataclasses import dataclass

from .mpi import MultiprecisionInteger
from .numbers import ByteReader


@dataclass(frozen=True)
class DsaSignature:
    """DSA signature: the r and s values."""

    r: MultiprecisionInteger
    s: MultiprecisionInteger

    @classmethod
    def decode(cls, reader: ByteReader) -> "DsaSignature":
        """Read r and s from *reader*."""
        r = MultiprecisionInteger.decode(reader)
        s = MultiprecisionInteger.decode(reader)
        return cls(r, s)

    def size(self) -> int:
        """Return the number of bytes used in encoded form."""
        return self.r.size() + self.s.size()

    def encode(self, writer) -> None:
        """Write r and s to *writer*."""
        self.r.encode(writer)
        self.s.encode(writer)


@dataclass(frozen=True)
class RsaSignature:
    """RSA signature: the value m**d mod n."""

    s: MultiprecisionInteger

    @classmethod
    def decode(cls, reader: ByteReader) -> "RsaSignature":
        """Read the signature value from *reader*."""
        return cls(MultiprecisionInteger.decode(reader))

    def size(self) -> int:
        """Return the number of bytes used in encoded form."""
        return self.s.size()

    def encode(self, writer) -> None:
        """Write the signature value to *writer*."""
        self.s.encode(writer)