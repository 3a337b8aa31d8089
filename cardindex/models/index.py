"""
Card index container.

An index maps a key (a name prefix, a category) to the BitVector of card
positions having it. Positions refer to the collection the index was built
from; the index records that collection's size and generation so a lookup
against a since-mutated collection can be refused.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from cardindex.models.bitvector import BitVector
from cardindex.models.collection import CardCollection
from cardindex.models.failure import StaleIndexError

K = TypeVar("K")


@dataclass
class CardIndex(Generic[K]):
    """
    Mapping from key to card positions.

    Attributes:
        size: Collection length at build time; every vector has this size
        generation: Collection generation at build time
        entries: key -> BitVector
    """

    size: int
    generation: int
    entries: dict[K, BitVector] = field(default_factory=dict)

    def mark(self, key: K, position: int) -> None:
        """Add `position` to the vector of `key`, creating it if new."""
        vector = self.entries.get(key)
        if vector is None:
            vector = BitVector(self.size)
            self.entries[key] = vector
        vector.set(position)

    def __getitem__(self, key: K) -> BitVector:
        return self.entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[K]:
        return iter(self.entries)

    def keys(self) -> list[K]:
        return list(self.entries)

    def get(self, key: K) -> BitVector:
        """Vector for `key`, or an empty vector if no card has it."""
        vector = self.entries.get(key)
        if vector is None:
            return BitVector(self.size)
        return BitVector(vector.size, vector.bits)

    def is_fresh(self, collection: CardCollection) -> bool:
        return collection.generation == self.generation and len(collection) == self.size

    def check_fresh(self, collection: CardCollection) -> None:
        """
        Raises:
            StaleIndexError: If `collection` changed since this index was built
        """
        if not self.is_fresh(collection):
            raise StaleIndexError(
                built_size=self.size,
                built_generation=self.generation,
                size=len(collection),
                generation=collection.generation,
            )

    def lookup(self, key: K, collection: CardCollection) -> BitVector:
        """Like `get`, but refuses to answer for a stale index."""
        self.check_fresh(collection)
        return self.get(key)
