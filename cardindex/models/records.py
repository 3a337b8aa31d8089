"""
Typed card records.

Fixed-shape projections of a GenericCard's attributes. They are built on
demand by cardindex.services.reconstructor and never mutated afterwards.
"""

from dataclasses import dataclass

from cardindex.models.category import Category, Sphere


@dataclass(frozen=True, slots=True)
class HeroCard:
    """
    A hero card.

    Attributes:
        card_number: Collector number within the set
        quantity: Copies in the product
        card_type: Always Category.HERO
        sphere: Sphere of influence
        traits: Trait words without their trailing period (e.g., ("Rohan", "Warrior"))
        cost: Threat cost
        willpower: Willpower stat
        attack: Attack stat
        defense: Defense stat
        health: Hit points
        text: Rules text
        set_name: Name of the set the card was exported from
    """

    card_number: int
    quantity: int
    card_type: Category
    sphere: Sphere
    traits: tuple[str, ...]
    cost: int
    willpower: int
    attack: int
    defense: int
    health: int
    text: str
    set_name: str


@dataclass(frozen=True, slots=True)
class AttachmentCard:
    """An attachment card."""

    card_number: int
    quantity: int
    card_type: Category
    sphere: Sphere
    traits: tuple[str, ...]
    cost: int
    text: str
    set_name: str


@dataclass(frozen=True, slots=True)
class SideQuestCard:
    """A player side quest."""

    card_number: int
    quantity: int
    card_type: Category
    sphere: Sphere
    cost: int
    victory_points: int
    text: str
    set_name: str
