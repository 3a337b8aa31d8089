"""
Name prefix index.

Maps every prefix of every normalized name word to the cards having a word
that starts with it. Typing "fe" finds "Fearless Scout"; typing "wes" finds
"Rally the West", since each word of a name is indexed on its own.
"""

import logging

from cardindex.models.collection import CardCollection
from cardindex.models.index import CardIndex
from cardindex.services.normalizer import normalize

logger = logging.getLogger(__name__)

NameIndex = CardIndex[str]


def name_tokens(name: str) -> list[str]:
    """
    Normalized words of a display name.

    Splits on single spaces. Empty words (from doubled spaces, or words that
    normalize to nothing such as a lone quotation mark) are dropped.
    """
    tokens = (normalize(word) for word in name.split(" "))
    return [token for token in tokens if token]


def token_prefixes(token: str) -> list[str]:
    """
    Every non-empty prefix of `token`, longest first.

    "wes" -> ["wes", "we", "w"]
    """
    return [token[: len(token) - cut] for cut in range(len(token))]


def build_name_index(collection: CardCollection) -> NameIndex:
    """
    Build the prefix index over a collection.

    Args:
        collection: Cards to index. Positions in the result refer to it.

    Returns:
        NameIndex mapping each prefix to the positions of matching cards.
        Only valid until the collection is next mutated.
    """
    index: NameIndex = CardIndex(size=len(collection), generation=collection.generation)

    for position, card in enumerate(collection):
        for token in name_tokens(card.name):
            for prefix in token_prefixes(token):
                index.mark(prefix, position)

    logger.debug("Built name index: %d keys over %d cards", len(index), len(collection))
    return index


def search_names(index: NameIndex, query: str) -> list[int]:
    """
    Positions of cards with a name word starting with `query`.

    The query is normalized the same way names are. Multi-word queries
    match cards having a word for each query word.
    """
    tokens = name_tokens(query)
    if not tokens:
        return []

    result = index.get(tokens[0])
    for token in tokens[1:]:
        result = result & index.get(token)
    return result.positions()
