import base64
import zlib

import pytest

from rl2020.bitset import BitSet
from rl2020.codec import MAX_DECODED_SIZE, pack, unpack
from rl2020.constants import MAX_LIST_SIZE, MIN_LIST_SIZE
from rl2020.errors import DecodeError


def test_pack_format():
    bs = BitSet.new(16)
    bs.set_bit(10, True)
    encoded = pack(bs)
    # standard, padded base64 of a plain zlib stream
    raw = zlib.decompress(base64.b64decode(encoded, validate=True))
    assert raw == bs.to_bytes()
    assert len(encoded) % 4 == 0
    assert encoded.isascii()


def test_pack_deterministic():
    assert pack(BitSet.new(16)) == pack(BitSet.new(16))


@pytest.mark.parametrize("size", range(MIN_LIST_SIZE, MAX_LIST_SIZE + 1))
def test_round_trip(size):
    bs = BitSet.new(size)
    for i in range(0, bs.len_bits(), 4099):
        bs.set_bit(i, True)
    bs.set_bit(bs.len_bits() - 1, True)
    back = unpack(pack(bs))
    assert back == bs
    assert len(back) == size * 1024


def test_round_trip_trailing_zeros():
    bs = BitSet.new(128)
    bs.set_bit(0, True)
    back = unpack(pack(bs))
    assert len(back) == 128 * 1024
    assert back.to_bytes()[1:] == bytes(128 * 1024 - 1)


def test_round_trip_dense():
    bs = BitSet(bytes(range(256)) * 64)
    assert unpack(pack(bs)) == bs


@pytest.mark.parametrize("encoded", ["%%%", "abc", "eJzz\n", "ñññ="])
def test_unpack_bad_base64(encoded):
    with pytest.raises(DecodeError, match="base64"):
        unpack(encoded)


def test_unpack_bad_zlib():
    with pytest.raises(DecodeError, match="zlib"):
        unpack(base64.b64encode(b"definitely not zlib").decode())


def test_unpack_truncated():
    compressed = zlib.compress(bytes(16 * 1024))
    for cut in (2, len(compressed) // 2, len(compressed) - 1):
        with pytest.raises(DecodeError):
            unpack(base64.b64encode(compressed[:cut]).decode())


def test_unpack_url_safe_alphabet_rejected():
    bs = BitSet(bytes(range(256)) * 64)
    encoded = pack(bs)
    urlsafe = encoded.replace("+", "-").replace("/", "_")
    if urlsafe != encoded:
        with pytest.raises(DecodeError):
            unpack(urlsafe)


def test_unpack_largest_accepted_output():
    back = unpack(pack(BitSet.new(MAX_LIST_SIZE + 1)))
    assert len(back) == MAX_DECODED_SIZE


def test_unpack_refuses_oversized_output():
    # a few kilobytes of token that would inflate to 16 MiB
    bomb = base64.b64encode(zlib.compress(bytes(16 * 1024 * 1024), 9)).decode()
    with pytest.raises(DecodeError, match="inflates past"):
        unpack(bomb)
    with pytest.raises(DecodeError):
        unpack(base64.b64encode(zlib.compress(bytes(MAX_DECODED_SIZE + 1))).decode())
