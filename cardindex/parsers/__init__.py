from cardindex.parsers.octgn import (
    OctgnCard,
    OctgnProperty,
    OctgnSet,
    collection_from_set,
    fetch_set,
    load_set_file,
    parse_octgn_set,
    parse_set_collection,
)

__all__ = [
    "OctgnCard",
    "OctgnProperty",
    "OctgnSet",
    "collection_from_set",
    "fetch_set",
    "load_set_file",
    "parse_octgn_set",
    "parse_set_collection",
]
