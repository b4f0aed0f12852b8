"""Signature subpackets: length prefix, type octet and a type-specific body."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import ClassVar

from .key_flag import KeyFlag
from .numbers import ByteReader, FixedNumber, Uint8, Uint32

_MAX_LENGTH = 0xFFFFFFFF


class SubpacketType(enum.IntEnum):
    """The type octet of a signature subpacket."""

    SIGNATURE_CREATION_TIME = 2
    SIGNATURE_EXPIRATION_TIME = 3
    EXPORTABLE_CERTIFICATION = 4
    TRUST_SIGNATURE = 5
    REGULAR_EXPRESSION = 6
    REVOCABLE = 7
    KEY_EXPIRATION_TIME = 9
    PREFERRED_SYMMETRIC_ALGORITHMS = 11
    REVOCATION_KEY = 12
    ISSUER = 16
    NOTATION_DATA = 20
    PREFERRED_HASH_ALGORITHMS = 21
    PREFERRED_COMPRESSION_ALGORITHMS = 22
    KEY_SERVER_PREFERENCES = 23
    PREFERRED_KEY_SERVER = 24
    PRIMARY_USER_ID = 25
    POLICY_URI = 26
    KEY_FLAGS = 27
    SIGNERS_USER_ID = 28
    REASON_FOR_REVOCATION = 29
    FEATURES = 30
    SIGNATURE_TARGET = 31
    EMBEDDED_SIGNATURE = 32
    ISSUER_FINGERPRINT = 33


class SubpacketMismatchError(ValueError):
    """Raised when the data does not fit the subpacket type it is decoded as."""


def _check_length(length: int) -> None:
    if not 0 <= length <= _MAX_LENGTH:
        raise ValueError(f"Subpacket length {length} cannot be encoded")


def length_size(length: int) -> int:
    """Return the number of octets used to encode a subpacket *length*."""
    _check_length(length)
    if length < 192:
        return 1
    if length < 8384:
        return 2
    return 5


def encode_length(length: int, writer) -> None:
    """Write a subpacket *length* in the one, two or five octet form."""
    _check_length(length)
    if length < 192:
        writer.push(length, 1)
    elif length < 8384:
        offset = length - 192
        writer.push((offset >> 8) + 192, 1)
        writer.push(offset & 0xFF, 1)
    else:
        writer.push(0xFF, 1)
        writer.push(length, 4)


def decode_length(reader: ByteReader) -> int:
    """Read a subpacket length in the one, two or five octet form."""
    first = reader.read_number(1)
    if first < 192:
        return first
    if first < 255:
        second = reader.read_number(1)
        return ((first - 192) << 8) + second + 192
    return reader.read_number(4)


def _require_exhausted(reader: ByteReader) -> None:
    if not reader.empty():
        raise SubpacketMismatchError("Incorrect subpacket type detected")


class _Subpacket(ABC):
    """Common framing: length (covering type and body), type octet, body."""

    __slots__ = ()

    type: ClassVar[SubpacketType]

    @abstractmethod
    def _payload(self) -> bytes:
        """Return the encoded body that follows the type octet."""

    def size(self) -> int:
        """Return the number of bytes used in encoded form."""
        body = len(self._payload()) + 1
        return body + length_size(body)

    def encode(self, writer) -> None:
        """Write length, type and body to *writer*."""
        payload = self._payload()
        encode_length(len(payload) + 1, writer)
        writer.push(int(self.type), 1)
        writer.insert_blob(payload)

    def __eq__(self, other) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return int(self.type) == int(other.type) and self._payload() == other._payload()

    def __hash__(self) -> int:
        return hash((type(self), int(self.type), self._payload()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._payload().hex()!r})"


class Issuer(_Subpacket):
    """The eight-octet key id of the key that made the signature."""

    __slots__ = ("_data",)

    type = SubpacketType.ISSUER
    DATA_SIZE: ClassVar[int] = 8

    def __init__(self, data) -> None:
        raw = bytes(data)
        if len(raw) != self.DATA_SIZE:
            raise ValueError(f"Issuer needs exactly {self.DATA_SIZE} bytes, got {len(raw)}")
        self._data = raw

    @classmethod
    def decode(cls, reader: ByteReader) -> Issuer:
        """Read the key id from *reader*."""
        return cls(reader.read_bytes(cls.DATA_SIZE))

    def data(self) -> bytes:
        """Return the key id bytes."""
        return self._data

    def size(self) -> int:
        """Return the number of bytes used in encoded form."""
        return super().size()

    def encode(self, writer) -> None:
        """Write the subpacket to *writer*."""
        super().encode(writer)

    def _payload(self) -> bytes:
        return self._data


class IssuerFingerprint(_Subpacket):
    """The version-4 fingerprint of the key that made the signature."""

    __slots__ = ("_data",)

    type = SubpacketType.ISSUER_FINGERPRINT
    FINGERPRINT_SIZE: ClassVar[int] = 20
    VERSION: ClassVar[int] = 4

    def __init__(self, data) -> None:
        raw = bytes(data)
        if len(raw) != self.FINGERPRINT_SIZE:
            raise ValueError(
                f"Fingerprint needs exactly {self.FINGERPRINT_SIZE} bytes, got {len(raw)}"
            )
        self._data = raw

    @classmethod
    def decode(cls, reader: ByteReader) -> IssuerFingerprint:
        """Read the key version and fingerprint from *reader*."""
        version = reader.read_number(1)
        if version != cls.VERSION:
            raise SubpacketMismatchError(
                f"Expected key version {cls.VERSION}, found {version}"
            )
        return cls(reader.read_bytes(cls.FINGERPRINT_SIZE))

    def data(self) -> bytes:
        """Return the fingerprint bytes."""
        return self._data

    def size(self) -> int:
        """Return the number of bytes used in encoded form."""
        return super().size()

    def encode(self, writer) -> None:
        """Write the subpacket to *writer*."""
        super().encode(writer)

    def _payload(self) -> bytes:
        return bytes([self.VERSION]) + self._data


class KeyFlags(_Subpacket):
    """A one-octet set of key flags."""

    __slots__ = ("_flags",)

    type = SubpacketType.KEY_FLAGS

    def __init__(self, *args) -> None:
        flags = 0
        for flag in args:
            flags |= int(flag)
        self._flags = Uint8(flags)

    @classmethod
    def decode(cls, reader: ByteReader) -> KeyFlags:
        """Read the flags octet; the reader must then be exhausted."""
        flags = Uint8.decode(reader)
        _require_exhausted(reader)
        return cls(int(flags))

    def is_set(self, flag) -> bool:
        """Return whether *flag* (a KeyFlag or bit mask) is set."""
        return bool(int(flag) & int(self._flags))

    def size(self) -> int:
        """Return the number of bytes used in encoded form."""
        return super().size()

    def encode(self, writer) -> None:
        """Write the subpacket to *writer*."""
        super().encode(writer)

    def _payload(self) -> bytes:
        return bytes([int(self._flags)])

    def __repr__(self) -> str:
        names = [flag.name for flag in KeyFlag if self.is_set(flag)]
        return f"KeyFlags({int(self._flags):#04x}: {', '.join(names)})"


class NumericSubpacket(_Subpacket):
    """A subpacket holding a single fixed-width number."""

    __slots__ = ("_value",)

    number_type: ClassVar[type[FixedNumber]]

    def __init__(self, value) -> None:
        number_type = getattr(type(self), "number_type", None)
        if number_type is None:
            raise TypeError("NumericSubpacket must be used through a concrete subclass")
        self._value = number_type(value)

    @classmethod
    def decode(cls, reader: ByteReader) -> NumericSubpacket:
        """Read the number; the reader must then be exhausted."""
        value = cls.number_type.decode(reader)
        _require_exhausted(reader)
        return cls(int(value))

    def data(self) -> int:
        """Return the stored number."""
        return int(self._value)

    def size(self) -> int:
        """Return the number of bytes used in encoded form."""
        return super().size()

    def encode(self, writer) -> None:
        """Write the subpacket to *writer*."""
        super().encode(writer)

    def _payload(self) -> bytes:
        return int(self._value).to_bytes(self._value.size(), "big")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self._value)})"


class SignatureCreationTime(NumericSubpacket):
    """Time the signature was made, in seconds since the epoch."""

    __slots__ = ()
    type = SubpacketType.SIGNATURE_CREATION_TIME
    number_type = Uint32


class SignatureExpirationTime(NumericSubpacket):
    """Seconds after creation at which the signature expires."""

    __slots__ = ()
    type = SubpacketType.SIGNATURE_EXPIRATION_TIME
    number_type = Uint32


class ExportableCertification(NumericSubpacket):
    """Whether the certification may be exported."""

    __slots__ = ()
    type = SubpacketType.EXPORTABLE_CERTIFICATION
    number_type = Uint8


class Revocable(NumericSubpacket):
    """Whether the signature may be revoked."""

    __slots__ = ()
    type = SubpacketType.REVOCABLE
    number_type = Uint8


class PrimaryUserId(NumericSubpacket):
    """Whether the user id is the primary one."""

    __slots__ = ()
    type = SubpacketType.PRIMARY_USER_ID
    number_type = Uint8


class KeyExpirationTime(NumericSubpacket):
    """Seconds after key creation at which the key expires."""

    __slots__ = ()
    type = SubpacketType.KEY_EXPIRATION_TIME
    number_type = Uint32


class UnknownSubpacket(_Subpacket):
    """A subpacket of a type without dedicated handling; keeps its raw body."""

    __slots__ = ("_type", "_data")

    def __init__(self, type, data) -> None:
        number = int(type)
        if not 0 <= number <= 0xFF:
            raise ValueError(f"Subpacket type {number} does not fit in one octet")
        try:
            self._type = SubpacketType(number)
        except ValueError:
            self._type = number
        self._data = bytes(data)

    @classmethod
    def decode(cls, type, reader: ByteReader) -> UnknownSubpacket:
        """Take every remaining byte of *reader* as the body."""
        return cls(type, reader.read_bytes(len(reader)))

    @property
    def type(self):
        """The subpacket type."""
        return self._type

    def data(self) -> bytes:
        """Return the raw body."""
        return self._data

    def size(self) -> int:
        """Return the number of bytes used in encoded form."""
        return super().size()

    def encode(self, writer) -> None:
        """Write the subpacket to *writer*."""
        super().encode(writer)

    def _payload(self) -> bytes:
        return self._data

    def __repr__(self) -> str:
        return f"UnknownSubpacket({int(self._type)}, {self._data.hex()!r})"