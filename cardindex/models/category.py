"""
Closed vocabularies used by the card data.

The OCTGN exports only ever use a fixed set of ``Type`` and ``Sphere``
display strings. Both vocabularies are closed: a value outside the table
means the table is out of date, not that the card is malformed.
"""

from enum import Enum


class Category(str, Enum):
    """Card type tags, valued by their display string in the set export."""

    ATTACHMENT = "Attachment"
    HERO = "Hero"
    SIDE_QUEST = "Side Quest"
    EVENT = "Event"
    ALLY = "Ally"
    OBJECTIVE = "Objective"
    ENEMY = "Enemy"
    LOCATION = "Location"
    TREACHERY = "Treachery"
    QUEST = "Quest"
    RULES = "Rules"
    NIGHTMARE = "Nightmare"
    TREASURE = "Treasure"
    CAMPAIGN = "Campaign"
    OBJECTIVE_ALLY = "Objective Ally"
    SHIP_ENEMY = "Ship-Enemy"
    CONTRACT = "Contract"


class Sphere(str, Enum):
    """Sphere of influence of a player card."""

    SPIRIT = "Spirit"
    LORE = "Lore"
    LEADERSHIP = "Leadership"
    TACTICS = "Tactics"


# Type value flagging engine-only cards. Not a category.
INTERNAL_TYPE = "Internal"

CATEGORY_BY_DISPLAY: dict[str, Category] = {category.value: category for category in Category}

SPHERE_BY_DISPLAY: dict[str, Sphere] = {sphere.value: sphere for sphere in Sphere}


def lookup_category(value: str) -> Category | None:
    """
    Resolve a ``Type`` display string to its Category.

    Returns:
        The Category, or None if the value is not in the vocabulary.
        The caller decides how severe an unknown value is.
    """
    return CATEGORY_BY_DISPLAY.get(value)


def parse_sphere(value: str) -> Sphere:
    """
    Parse a ``Sphere`` display string.

    Raises:
        ValueError: If the value is not a known sphere
    """
    sphere = SPHERE_BY_DISPLAY.get(value)
    if sphere is None:
        raise ValueError(f"{value!r} is not a sphere")
    return sphere
