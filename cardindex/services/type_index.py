"""
Category index.

Maps each Category to the cards having a ``Type`` attribute of that value.
"""

import logging

from cardindex.models.category import INTERNAL_TYPE, Category, lookup_category
from cardindex.models.collection import CardCollection
from cardindex.models.failure import UnknownCategoryError
from cardindex.models.index import CardIndex

logger = logging.getLogger(__name__)

TYPE_ATTRIBUTE = "Type"

TypeIndex = CardIndex[Category]


def build_type_index(collection: CardCollection) -> TypeIndex:
    """
    Build the category index over a collection.

    Every ``Type`` attribute of a card contributes, so a card with two types
    is in both vectors. ``Internal`` is a marker and contributes nothing.

    Args:
        collection: Cards to index. Positions in the result refer to it.

    Returns:
        TypeIndex mapping categories to positions. Categories no card has
        are absent.

    Raises:
        UnknownCategoryError: If any ``Type`` value is outside the vocabulary.
            The whole build is aborted; a partial index would silently drop
            cards from category filters.
    """
    index: TypeIndex = CardIndex(size=len(collection), generation=collection.generation)

    for position, card in enumerate(collection):
        for value in card.values(TYPE_ATTRIBUTE):
            if value == INTERNAL_TYPE:
                continue

            category = lookup_category(value)
            if category is None:
                logger.error(
                    "Unknown card type %r on card %r (id %s, position %d)",
                    value,
                    card.name,
                    card.id,
                    position,
                )
                raise UnknownCategoryError(value=value, card_id=card.id, card_name=card.name)

            index.mark(category, position)

    logger.debug("Built type index: %d categories over %d cards", len(index), len(collection))
    return index
