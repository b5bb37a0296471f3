from __future__ import annotations

from typing import Iterable, Iterator, Optional

from lonelyedges.config import MAX_SET_SIZE


class BitSet:
    """
    Fixed-capacity set of integers in [0, capacity), stored as the bits of an int.

    Set algebra returns new sets; only add/remove mutate in place.
    Indices outside the capacity are a configuration error (ValueError):
    callers are expected to validate bounds before building sets.
    """

    __slots__ = ("bits", "capacity")

    def __init__(self, bits: int = 0, capacity: int = MAX_SET_SIZE):
        if bits < 0 or bits >> capacity:
            raise ValueError(f"bits {bits:#x} do not fit in a set of capacity {capacity}")
        self.bits = bits
        self.capacity = capacity

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def empty(cls, capacity: int = MAX_SET_SIZE) -> BitSet:
        return cls(0, capacity)

    @classmethod
    def singleton(cls, i: int, capacity: int = MAX_SET_SIZE) -> BitSet:
        _check_index(i, capacity)
        return cls(1 << i, capacity)

    @classmethod
    def full(cls, n: int, capacity: int = MAX_SET_SIZE) -> BitSet:
        """The set {0, ..., n-1}."""
        if n < 0 or n > capacity:
            raise ValueError(f"cannot represent {n} elements with capacity {capacity}")
        return cls((1 << n) - 1, capacity)

    @classmethod
    def from_iterable(cls, items: Iterable[int], capacity: int = MAX_SET_SIZE) -> BitSet:
        bits = 0
        for i in items:
            _check_index(i, capacity)
            bits |= 1 << i
        return cls(bits, capacity)

    # ------------------------------------------------------------------
    # Set algebra
    # ------------------------------------------------------------------

    def union(self, other: BitSet) -> BitSet:
        return BitSet(self.bits | other.bits, self.capacity)

    def intersection(self, other: BitSet) -> BitSet:
        return BitSet(self.bits & other.bits, self.capacity)

    def difference(self, other: BitSet) -> BitSet:
        return BitSet(self.bits & ~other.bits, self.capacity)

    def complement(self, n: int) -> BitSet:
        """Complement within {0, ..., n-1}."""
        return BitSet.full(n, self.capacity).difference(self)

    __or__ = union
    __and__ = intersection
    __sub__ = difference

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add(self, i: int) -> None:
        _check_index(i, self.capacity)
        self.bits |= 1 << i

    def remove(self, i: int) -> None:
        _check_index(i, self.capacity)
        self.bits &= ~(1 << i)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def __contains__(self, i: int) -> bool:
        return 0 <= i < self.capacity and bool((self.bits >> i) & 1)

    def __len__(self) -> int:
        return self.bits.bit_count()

    def __bool__(self) -> bool:
        return self.bits != 0

    def __iter__(self) -> Iterator[int]:
        bits = self.bits
        while bits:
            low = bits & -bits
            yield low.bit_length() - 1
            bits ^= low

    def first(self) -> Optional[int]:
        """Least element, or None for the empty set."""
        if not self.bits:
            return None
        return (self.bits & -self.bits).bit_length() - 1

    def copy(self) -> BitSet:
        return BitSet(self.bits, self.capacity)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitSet):
            return NotImplemented
        return self.bits == other.bits

    # mutable, so not hashable
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"BitSet({{{', '.join(str(i) for i in self)}}})"


def _check_index(i: int, capacity: int) -> None:
    if not 0 <= i < capacity:
        raise ValueError(f"index {i} outside set capacity {capacity}")
