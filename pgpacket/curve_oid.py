"""Curve object identifiers as stored in elliptic-curve key material."""

from __future__ import annotations

from .numbers import ByteReader, Uint8

_MAX_LENGTH = 0xFF


class CurveOid:
    """An elliptic-curve object identifier: a length octet followed by the OID bytes."""

    __slots__ = ("_data",)

    def __init__(self, data=b"") -> None:
        raw = bytes(data)
        if len(raw) > _MAX_LENGTH:
            raise ValueError(f"Curve identifier of {len(raw)} bytes is too long to encode")
        self._data = raw

    @classmethod
    def decode(cls, reader: ByteReader) -> CurveOid:
        """Parse a length-prefixed identifier."""
        return cls(reader.read_bytes(int(Uint8.decode(reader))))

    @classmethod
    def ed25519(cls) -> CurveOid:
        """The Ed25519 curve."""
        return cls(bytes.fromhex("2b06010401da470f01"))

    @classmethod
    def curve_25519(cls) -> CurveOid:
        """Curve25519."""
        return cls(bytes.fromhex("2b060104019755010501"))

    @classmethod
    def ecdsa(cls) -> CurveOid:
        """NIST P-256, as used for ECDSA."""
        return cls(bytes.fromhex("2a8648ce3d030107"))

    def data(self) -> bytes:
        """The raw identifier, without its length octet."""
        return self._data

    def size(self) -> int:
        """Length octet plus identifier bytes."""
        return Uint8.size() + len(self._data)

    def __eq__(self, other) -> bool:
        return self._data == other._data if isinstance(other, CurveOid) else NotImplemented

    def __hash__(self) -> int:
        return hash((CurveOid, self._data))

    def __repr__(self) -> str:
        return f"CurveOid({self._data.hex()!r})"

    def encode(self, writer) -> None:
        """Emit the length octet, then the identifier."""
        Uint8(len(self._data)).encode(writer)
        writer.insert_blob(self._data)