"""
Fixed-length membership vector.

One bit per card position. Index builders hand these out as the value
side of their mappings, and the record reconstructor uses one to track
which required fields were supplied.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=True)
class BitVector:
    """
    A fixed-length vector of bits backed by a Python int.

    Attributes:
        size: Number of addressable positions (0..size-1)
        bits: Integer whose bit ``n`` is set when position ``n`` is a member
    """

    size: int
    bits: int = 0

    @classmethod
    def from_positions(cls, size: int, positions: Iterable[int]) -> "BitVector":
        """Build a vector of `size` with the given positions set."""
        vector = cls(size)
        for position in positions:
            vector.set(position)
        return vector

    def _check(self, position: int) -> None:
        if not 0 <= position < self.size:
            raise IndexError(f"position {position} out of range for vector of size {self.size}")

    def set(self, position: int) -> None:
        """Mark a position as a member. Setting an already set bit is a no-op."""
        self._check(position)
        self.bits |= 1 << position

    def __contains__(self, position: int) -> bool:
        return 0 <= position < self.size and bool(self.bits >> position & 1)

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[bool]:
        for position in range(self.size):
            yield bool(self.bits >> position & 1)

    def __and__(self, other: "BitVector") -> "BitVector":
        self._same_size(other)
        return BitVector(self.size, self.bits & other.bits)

    def __or__(self, other: "BitVector") -> "BitVector":
        self._same_size(other)
        return BitVector(self.size, self.bits | other.bits)

    def _same_size(self, other: "BitVector") -> None:
        if self.size != other.size:
            raise ValueError(f"cannot combine vectors of size {self.size} and {other.size}")

    def count(self) -> int:
        """Number of set positions."""
        return self.bits.bit_count()

    def any(self) -> bool:
        return self.bits != 0

    def all(self) -> bool:
        return self.bits == (1 << self.size) - 1

    def positions(self) -> list[int]:
        """Set positions in ascending order."""
        return [n for n in range(self.size) if self.bits >> n & 1]

    def missing(self) -> list[int]:
        """Unset positions in ascending order."""
        return [n for n in range(self.size) if not self.bits >> n & 1]

    def to_list(self) -> list[bool]:
        return list(self)
