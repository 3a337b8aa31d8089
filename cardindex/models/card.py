from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Attribute:
    """
    A single untyped fact about a card.

    Attributes:
        name: Property name as it appears in the export (e.g., "Card Number")
        value: Raw string value
    """

    name: str
    value: str


@dataclass(frozen=True, slots=True)
class GenericCard:
    """
    A card as exported, before any typing.

    Attributes:
        id: Card GUID from the export. Assumed unique, never checked.
        name: Display name, free text, may contain accented characters
        attributes: Ordered property list. Duplicate names are allowed.
    """

    id: str
    name: str
    attributes: tuple[Attribute, ...] = field(default_factory=tuple)

    def values(self, name: str) -> list[str]:
        """All values of attributes called `name`, in export order."""
        return [attribute.value for attribute in self.attributes if attribute.name == name]

    def with_attribute(self, name: str, value: str) -> "GenericCard":
        """Return a copy with one more attribute appended."""
        return GenericCard(
            id=self.id,
            name=self.name,
            attributes=(*self.attributes, Attribute(name=name, value=value)),
        )
