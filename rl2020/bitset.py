"""
Fixed size bit set backing a revocation list.

Bit ``i`` lives in byte ``i // 8`` at offset ``i % 8``, least significant
bit first. Existing encoded lists depend on this ordering.
"""

from typing import Union

from rl2020.constants import KILOBYTE


class BitSet:
    data: bytearray

    def __init__(self, data: Union[bytes, bytearray]):
        self.data = bytearray(data)

    @classmethod
    def new(cls, size_kb: int) -> "BitSet":
        """
        Allocate a zeroed bit set of size_kb kilobytes
        """
        return cls(bytearray(size_kb * KILOBYTE))

    def get_bit(self, index: int) -> bool:
        return self.data[index >> 3] & (1 << (index & 7)) != 0

    def set_bit(self, index: int, value: bool):
        i = index >> 3
        if value:
            self.data[i] |= 1 << (index & 7)
        else:
            self.data[i] &= ~(1 << (index & 7)) & 0xFF

    def len_bits(self) -> int:
        """
        Number of bits, that is the number of credentials the set can track
        """
        return 8 * len(self.data)

    def size(self) -> int:
        """
        Size of the bit set in kilobytes
        """
        return len(self.data) // KILOBYTE

    def to_bytes(self) -> bytes:
        return bytes(self.data)

    def __len__(self):
        return len(self.data)

    def __eq__(self, other):
        if not isinstance(other, BitSet):
            return NotImplemented
        return self.data == other.data

    def __repr__(self):
        return f"BitSet(size={self.size()}kb)"
