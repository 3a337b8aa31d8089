from collections.abc import Iterator
from dataclasses import dataclass, field

from cardindex.models.card import GenericCard


@dataclass
class CardCollection:
    """
    An ordered list of cards.

    A card's position in the list is the key every index uses. Indexes are
    not maintained on mutation: after `append` the caller must rebuild them.
    `generation` is bumped on every mutation so stale indexes can be detected.
    """

    cards: list[GenericCard] = field(default_factory=list)
    generation: int = 0

    @classmethod
    def empty(cls) -> "CardCollection":
        """Create a collection with no cards."""
        return cls()

    def append(self, other: "CardCollection") -> None:
        """
        Move every card of `other` to the end of this collection.

        `other` is left empty. No deduplication and no id check is done.

        Raises:
            ValueError: If `other` is this collection
        """
        if other is self:
            raise ValueError("cannot append a collection to itself")
        self.cards.extend(other.cards)
        other.cards.clear()
        self.generation += 1
        other.generation += 1

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[GenericCard]:
        return iter(self.cards)

    def __getitem__(self, position: int) -> GenericCard:
        return self.cards[position]
