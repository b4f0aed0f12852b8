# pgpacket

Building blocks for reading and writing OpenPGP (RFC 4880) packet data in
pure Python, with no third-party dependencies.

## What is in the package

- `pgpacket.encoder.RangeEncoder` writes into a fixed-size, writable buffer
  (for example a `bytearray`):
  - `push(value, width)` writes an unsigned integer or integer enum of `width`
    bytes, big-endian;
  - `push_all(values, width)` pushes several values and leaves the encoder
    untouched if any of them fails;
  - `insert_bits(count, value)` queues bits in a partial byte, and
    `flush()` writes out a partially filled byte;
  - `insert_blob(data)` writes a run of bytes;
  - `size()` gives the number of bytes written so far.

  Queued bits are merged into the first byte of the next `push` or
  `insert_blob`. `EncoderOverflowError` (an `IndexError`) is raised when the
  buffer is full or a bit write would cross a byte boundary.
  `MaskedBitsError` (a `ValueError`) is raised when a value does not fit in
  the bits that are still free.
- `pgpacket.numbers`: `ByteReader` consumes bytes from the front of a buffer
  with `read_number(width)` and `read_bytes(count)`, and raises `IndexError`
  when too few bytes are left. The fixed-width unsigned numbers are `Uint8`,
  `Uint16`, `Uint32` and `Uint64`.
- `pgpacket.mpi.MultiprecisionInteger`: OpenPGP multiprecision integers.
  Leading zero bytes are stripped and the bit count is worked out for you.
  `from_int` builds one from a Python `int`, and `int()` converts it back.
- `pgpacket.curve_oid.CurveOid`: curve object identifiers, including
  `CurveOid.ed25519()`, `CurveOid.curve_25519()` and `CurveOid.ecdsa()`
  (NIST P-256).
- `pgpacket.public_keys`: the frozen dataclasses `RsaPublicKey`,
  `DsaPublicKey`, `ElgamalPublicKey`, `ElgamalSecretKey`, `EcdsaPublicKey`
  and `EddsaPublicKey`.
- `pgpacket.signatures`: `RsaSignature` and `DsaSignature`.
- `pgpacket.subpackets`: signature subpackets.
  - `Issuer` and `IssuerFingerprint` (a version-4 fingerprint).
  - `KeyFlags`.
  - The numeric subpackets `SignatureCreationTime`,
    `SignatureExpirationTime`, `ExportableCertification`, `Revocable`,
    `PrimaryUserId` and `KeyExpirationTime`.
  - `UnknownSubpacket`, which keeps the raw body of any other type.
  - The `SubpacketType` enum and the length helpers `encode_length`,
    `decode_length` and `length_size`.

  `KeyFlags.decode` and the numeric subpackets' `decode` raise
  `SubpacketMismatchError` if bytes are left in the reader afterwards.
  `IssuerFingerprint.decode` raises it if the key version is not 4.
- `pgpacket.key_flag.KeyFlag`: the key flags, each with a `description()`.
  The function `key_flag_description(flag)` gives the same description.
- `pgpacket.null_hash.NullHash`: a pass-through "hash" for data that has
  already been hashed. `update` collects at most `digest_size` bytes.
  `truncated_final(size)` hands back the first `size` of them and starts a
  new cycle. It raises `NullHashError` on too much input or too little.

Every encodable object has three methods:

- `size()` gives the number of bytes it takes up when encoded.
- `encode(writer)` writes it to a `RangeEncoder`.
- The class method `decode(reader)` reads it back from a `ByteReader`.

For a subpacket, `decode` reads only the body. The caller reads the length
and the type octet first. `UnknownSubpacket.decode(type, reader)` takes the
type as its first argument and uses every remaining byte as the body.

## Example

```python
from pgpacket.encoder import RangeEncoder
from pgpacket.numbers import ByteReader
from pgpacket.mpi import MultiprecisionInteger

value = MultiprecisionInteger(bytes([0x1F, 0x13, 0x37]))
assert value.bits() == 21

buffer = bytearray(value.size())
writer = RangeEncoder(buffer)
value.encode(writer)
assert bytes(buffer) == bytes([0x00, 0x15, 0x1F, 0x13, 0x37])

decoded = MultiprecisionInteger.decode(ByteReader(bytes(buffer)))
assert decoded == value
```

Subpackets are encoded with their length and type prefix:

```python
from pgpacket.encoder import RangeEncoder
from pgpacket.numbers import ByteReader
from pgpacket.subpackets import KeyFlags, SubpacketType, decode_length
from pgpacket.key_flag import KeyFlag

flags = KeyFlags(KeyFlag.CERTIFICATION, KeyFlag.SIGNING)
buffer = bytearray(flags.size())
flags.encode(RangeEncoder(buffer))
assert bytes(buffer) == bytes([0x02, SubpacketType.KEY_FLAGS, 0x03])

reader = ByteReader(bytes(buffer))
assert decode_length(reader) == 2
assert reader.read_number(1) == SubpacketType.KEY_FLAGS
assert KeyFlags.decode(reader) == flags
```

## What the package does not do

The package handles the pieces that packets are made of, but not whole
packets. It has no packet headers and no parser for complete key or
signature packets. It does not create or verify signatures, and it does not
hold secret key material other than `ElgamalSecretKey`. There are no ECDSA
or EdDSA signature values and no embedded-signature subpacket. There is no
command-line tool.

## Installation

```
pip install .
```

## Running the tests

```
pip install .[test]
pytest
```