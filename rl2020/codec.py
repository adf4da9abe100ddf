"""
Pack a bit set into the encodedList token and back.

The token is the zlib compressed bit set, base64 encoded with the
standard, padded alphabet.
"""

import base64
import binascii
import zlib

from rl2020.bitset import BitSet
from rl2020.constants import KILOBYTE, MAX_LIST_SIZE
from rl2020.errors import DecodeError

# one kilobyte over the largest list, so oversized lists still reach the size check
MAX_DECODED_SIZE = (MAX_LIST_SIZE + 1) * KILOBYTE


def pack(bitset: BitSet) -> str:
    compressed = zlib.compress(bitset.to_bytes())
    return base64.b64encode(compressed).decode("ascii")


def unpack(encoded: str) -> BitSet:
    """
    Decode an encodedList token. The zlib stream is read to the end,
    the output length only depends on the compressed content, up to
    MAX_DECODED_SIZE bytes.
    """
    try:
        compressed = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError, TypeError) as err:
        raise DecodeError(f"encoded list is not valid base64: {err}") from err
    d = zlib.decompressobj()
    try:
        raw = d.decompress(compressed, MAX_DECODED_SIZE + 1)
        if len(raw) > MAX_DECODED_SIZE:
            raise DecodeError(f"encoded list inflates past {MAX_DECODED_SIZE} bytes")
        raw += d.flush()
    except zlib.error as err:
        raise DecodeError(f"encoded list is not a valid zlib stream: {err}") from err
    if not d.eof:
        raise DecodeError("encoded list is not a valid zlib stream: truncated")
    return BitSet(raw)
