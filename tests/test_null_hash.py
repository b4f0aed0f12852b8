import pytest

from pgpacket.null_hash import NullHash, NullHashError


def _fed(digest_size, *chunks):
    hasher = NullHash(digest_size)
    for chunk in chunks:
        hasher.update(chunk)
    return hasher


def test_default_digest_size():
    assert NullHash().digest_size() == 32
    assert NullHash(20).digest_size() == 20


@pytest.mark.parametrize(
    "digest_size, chunks, length, expected",
    [
        (32, [b"abc"], 3, b"abc"),
        (8, [b"\x01\x02", b"\x03\x04\x05"], 5, b"\x01\x02\x03\x04\x05"),
        (32, [bytes(range(10))], 4, bytes(range(4))),
        (32, [bytes(range(32))], 32, bytes(range(32))),
        (32, [], 0, b""),
    ],
)
def test_returns_input(digest_size, chunks, length, expected):
    assert _fed(digest_size, *chunks).truncated_final(length) == expected


def test_too_much_input():
    hasher = _fed(4, b"ab")
    with pytest.raises(NullHashError):
        hasher.update(b"cde")


@pytest.mark.parametrize(
    "digest_size, chunks, length, error",
    [
        (4, [b"abcd"], 5, ValueError),
        (32, [b"ab"], 3, NullHashError),
    ],
)
def test_invalid_final(digest_size, chunks, length, error):
    with pytest.raises(error):
        _fed(digest_size, *chunks).truncated_final(length)


def test_final_resets():
    hasher = _fed(4, b"abcd")
    assert hasher.truncated_final(4) == b"abcd"
    with pytest.raises(NullHashError):
        hasher.truncated_final(1)
    hasher.update(b"wxyz")
    assert hasher.truncated_final(2) == b"wx"