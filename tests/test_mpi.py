import pytest
from hypothesis import given, strategies as st

from pgpacket.encoder import RangeEncoder
from pgpacket.mpi import MultiprecisionInteger
from pgpacket.numbers import ByteReader, Uint16


def test_default_empty():
    mi = MultiprecisionInteger()
    assert mi.size() == 2
    assert len(mi.data()) == 0


def test_decode():
    data = bytes([0, 21, 0x1F, 0x13, 0x37])
    mi1 = MultiprecisionInteger.decode(ByteReader(data))
    mi2 = MultiprecisionInteger(data[2:5])
    assert mi1 == mi2
    assert mi1.bits() == 21


def test_equality():
    mi1 = MultiprecisionInteger(bytes([1, 2, 3]))
    mi2 = MultiprecisionInteger(bytes([4, 5, 6]))
    mi3 = MultiprecisionInteger(bytes([1, 2]))
    mi4 = MultiprecisionInteger(bytes([1, 2, 3, 4]))

    assert mi1 == mi1
    assert mi1 != mi2
    assert mi1 != mi3
    assert mi1 != mi4


@pytest.mark.parametrize("data", [bytes([1, 2, 3]), b""])
def test_assignment(data):
    mi = MultiprecisionInteger(data)
    assert mi.data() == data
    assert mi.size() == len(data) + 2


@pytest.mark.parametrize(
    "data",
    [
        [],
        [1, 2, 3, 4],
        [0, 2, 3, 4],
        [0, 0, 0xFF, 4, 5, 6, 7],
    ],
)
def test_vector_constructor(data):
    zero_bytes = len(data) - len(bytes(data).lstrip(b"\x00"))
    mi = MultiprecisionInteger(data)
    assert mi == MultiprecisionInteger(bytes(data))
    assert mi.size() == 2 + len(data) - zero_bytes


@pytest.mark.parametrize("zeros", range(8))
def test_computed_bits(zeros):
    data = bytes([0xFF >> zeros, 12, 34])
    mi = MultiprecisionInteger(data)

    dest = bytearray(8)
    mi.encode(RangeEncoder(dest))

    assert Uint16.decode(ByteReader(dest)) == 8 - zeros + 16


@pytest.mark.parametrize("i", range(7))
def test_zero_stripping(i):
    data = bytes(i) + b"\xff" * (6 - i)
    mi = MultiprecisionInteger(data)

    dest = bytearray(8)
    mi.encode(RangeEncoder(dest))

    assert Uint16.decode(ByteReader(dest)) == 8 * (6 - i)


@given(st.binary(max_size=64))
def test_encode_decode_round_trip(data):
    mi = MultiprecisionInteger(data)
    dest = bytearray(mi.size())
    encoder = RangeEncoder(dest)
    mi.encode(encoder)
    assert encoder.size() == mi.size()

    reader = ByteReader(dest)
    decoded = MultiprecisionInteger.decode(reader)
    assert decoded == mi
    assert decoded.bits() == mi.bits()
    assert reader.empty()


@given(st.integers(min_value=0, max_value=1 << 600))
def test_from_int_round_trip(value):
    mi = MultiprecisionInteger.from_int(value)
    assert int(mi) == value
    assert mi.bits() == value.bit_length()


def test_from_int_rejects_negative():
    with pytest.raises(ValueError):
        MultiprecisionInteger.from_int(-1)


def test_too_many_bits_rejected():
    with pytest.raises(ValueError):
        MultiprecisionInteger(b"\x01" + bytes(8192))


def test_decode_truncated_input_raises():
    with pytest.raises(IndexError):
        MultiprecisionInteger.decode(ByteReader(bytes([0, 21, 0x1F])))


def test_hash_follows_equality():
    a = MultiprecisionInteger(bytes([0, 7, 8]))
    b = MultiprecisionInteger(bytes([7, 8]))
    assert a == b
    assert hash(a) == hash(b)