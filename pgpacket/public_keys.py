"""Algorithm-specific public and secret key material."""

from __future__ import annotations

from dataclasses import dataclass

from .curve_oid import CurveOid
from .mpi import MultiprecisionInteger
from .numbers import ByteReader


@dataclass(frozen=True)
class DsaPublicKey:
    """DSA public key: prime p, group order q, generator g and public value y."""

    p: MultiprecisionInteger
    q: MultiprecisionInteger
    g: MultiprecisionInteger
    y: MultiprecisionInteger

    @classmethod
    def decode(cls, reader: ByteReader) -> "DsaPublicKey":
        """Read p, q, g and y from *reader*."""
        p = MultiprecisionInteger.decode(reader)
        q = MultiprecisionInteger.decode(reader)
        g = MultiprecisionInteger.decode(reader)
        y = MultiprecisionInteger.decode(reader)
        return cls(p, q, g, y)

    def size(self) -> int:
        """Return the number of bytes used in encoded form."""
        return self.p.size() + self.q.size() + self.g.size() + self.y.size()

    def encode(self, writer) -> None:
        """Write p, q, g and y to *writer*."""
        for part in (self.p, self.q, self.g, self.y):
            part.encode(writer)


@dataclass(frozen=True)
class EcdsaPublicKey:
    """ECDSA public key: the curve identifier and the public curve point Q."""

    curve: CurveOid
    point: MultiprecisionInteger

    @classmethod
    def decode(cls, reader: ByteReader) -> "EcdsaPublicKey":
        """Read the curve identifier and the public point from *reader*."""
        curve = CurveOid.decode(reader)
        point = MultiprecisionInteger.decode(reader)
        return cls(curve, point)

    def size(self) -> int:
        """Return the number of bytes used in encoded form."""
        return self.curve.size() + self.point.size()

    def encode(self, writer) -> None:
        """Write the curve identifier and the public point to *writer*."""
        self.curve.encode(writer)
        self.point.encode(writer)


@dataclass(frozen=True)
class EddsaPublicKey:
    """EdDSA public key: the curve identifier and the public curve point Q."""

    curve: CurveOid
    point: MultiprecisionInteger

    @classmethod
    def decode(cls, reader: ByteReader) -> "EddsaPublicKey":
        """Read the curve identifier and the public point from *reader*."""
        curve = CurveOid.decode(reader)
        point = MultiprecisionInteger.decode(reader)
        return cls(curve, point)

    def size(self) -> int:
        """Return the number of bytes used in encoded form."""
        return self.curve.size() + self.point.size()

    def encode(self, writer) -> None:
        """Write the curve identifier and the public point to *writer*."""
        self.curve.encode(writer)
        self.point.encode(writer)


@dataclass(frozen=True)
class ElgamalPublicKey:
    """ElGamal public key: prime p, group generator g and public value y."""

    p: MultiprecisionInteger
    g: MultiprecisionInteger
    y: MultiprecisionInteger

    @classmethod
    def decode(cls, reader: ByteReader) -> "ElgamalPublicKey":
        """Read p, g and y from *reader*."""
        p = MultiprecisionInteger.decode(reader)
        g = MultiprecisionInteger.decode(reader)
        y = MultiprecisionInteger.decode(reader)
        return cls(p, g, y)

    def size(self) -> int:
        """Return the number of bytes used in encoded form."""
        return self.p.size() + self.g.size() + self.y.size()

    def encode(self, writer) -> None:
        """Write p, g and y to *writer*."""
        for part in (self.p, self.g, self.y):
            part.encode(writer)


@dataclass(frozen=True)
class ElgamalSecretKey:
    """ElGamal secret key: the secret exponent x."""

    x: MultiprecisionInteger

    @classmethod
    def decode(cls, reader: ByteReader) -> "ElgamalSecretKey":
        """Read the secret exponent from *reader*."""
        return cls(MultiprecisionInteger.decode(reader))

    def size(self) -> int:
        """Return the number of bytes used in encoded form."""
        return self.x.size()

    def encode(self, writer) -> None:
        """Write the secret exponent to *writer*."""
        self.x.encode(writer)


@dataclass(frozen=True)
class RsaPublicKey:
    """RSA public key: modulus n and encryption exponent e."""

    n: MultiprecisionInteger
    e: MultiprecisionInteger

    @classmethod
    def decode(cls, reader: ByteReader) -> "RsaPublicKey":
        """Read n and e from *reader*."""
        n = MultiprecisionInteger.decode(reader)
        e = MultiprecisionInteger.decode(reader)
        return cls(n, e)

    def size(self) -> int:
        """Return the number of bytes used in encoded form."""
        return self.n.size() + self.e.size()

    def encode(self, writer) -> None:
        """Write n and e to *writer*."""
        self.n.encode(writer)
        self.e.encode(writer)