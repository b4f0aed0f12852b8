import pytest

from pgpacket.curve_oid import CurveOid
from pgpacket.encoder import RangeEncoder
from pgpacket.numbers import ByteReader

ALL_CURVES = [CurveOid.ed25519(), CurveOid.curve_25519(), CurveOid.ecdsa()]


def _encode(oid):
    buffer = bytearray(oid.size())
    encoder = RangeEncoder(buffer)
    oid.encode(encoder)
    return bytes(buffer[: encoder.size()])


def test_ed25519_wire_bytes():
    assert _encode(CurveOid.ed25519()) == bytes(
        [9, 0x2B, 0x06, 0x01, 0x04, 0x01, 0xDA, 0x47, 0x0F, 0x01]
    )


@pytest.mark.parametrize("oid", ALL_CURVES)
def test_round_trip(oid):
    encoded = _encode(oid)
    assert len(encoded) == oid.size()
    reader = ByteReader(encoded)
    decoded = CurveOid.decode(reader)
    assert decoded == oid
    assert reader.empty()


def test_size_counts_length_octet():
    assert CurveOid.ed25519().size() == 10
    assert CurveOid.curve_25519().size() == 11
    assert CurveOid.ecdsa().size() == 9
    assert CurveOid([1, 2, 3]).size() == 4


def test_length_prefix_matches_data():
    encoded = _encode(CurveOid.ecdsa())
    assert encoded[0] == len(CurveOid.ecdsa().data())
    assert encoded[1:] == CurveOid.ecdsa().data()


def test_equality_and_hash():
    assert CurveOid.ed25519() == CurveOid.ed25519()
    assert hash(CurveOid.ed25519()) == hash(CurveOid.ed25519())
    assert CurveOid.ed25519() != CurveOid.curve_25519()
    assert CurveOid.ecdsa() != CurveOid.curve_25519()


def test_data_is_kept():
    oid = CurveOid([1, 2, 3])
    assert oid.data() == bytes([1, 2, 3])


def test_empty_oid_round_trip():
    oid = CurveOid()
    encoded = _encode(oid)
    assert encoded == b"\x00"
    assert CurveOid.decode(ByteReader(encoded)) == oid


def test_decode_truncated_raises():
    encoded = _encode(CurveOid.ed25519())
    with pytest.raises(IndexError):
        CurveOid.decode(ByteReader(encoded[:-1]))


def test_too_long_raises():
    with pytest.raises(ValueError):
        CurveOid(bytes(256))


def test_encode_into_small_buffer_raises():
    encoder = RangeEncoder(bytearray(3))
    with pytest.raises(IndexError):
        CurveOid.ed25519().encode(encoder)