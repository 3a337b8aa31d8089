"""
cardindex services.

Normalization, index construction and typed record reconstruction.
"""

from cardindex.services.name_index import (
    NameIndex,
    build_name_index,
    name_tokens,
    search_names,
    token_prefixes,
)
from cardindex.services.normalizer import normalize
from cardindex.services.reconstructor import (
    ATTACHMENT_SHAPE,
    HERO_SHAPE,
    SHAPES,
    SIDE_QUEST_SHAPE,
    CardFailure,
    FieldSpec,
    ReconstructionReport,
    RecordShape,
    reconstruct,
    reconstruct_many,
    to_generic,
)
from cardindex.services.type_index import TypeIndex, build_type_index

__all__ = [
    "ATTACHMENT_SHAPE",
    "CardFailure",
    "FieldSpec",
    "HERO_SHAPE",
    "NameIndex",
    "ReconstructionReport",
    "RecordShape",
    "SHAPES",
    "SIDE_QUEST_SHAPE",
    "TypeIndex",
    "build_name_index",
    "build_type_index",
    "name_tokens",
    "normalize",
    "reconstruct",
    "reconstruct_many",
    "search_names",
    "to_generic",
    "token_prefixes",
]
