from cardindex.models.bitvector import BitVector
from cardindex.models.card import Attribute, GenericCard
from cardindex.models.category import (
    INTERNAL_TYPE,
    Category,
    Sphere,
    lookup_category,
    parse_sphere,
)
from cardindex.models.collection import CardCollection
from cardindex.models.failure import (
    FailureDetail,
    FailureKind,
    KnownError,
    RecordError,
    RecordValidationError,
    SetDecodeError,
    StaleIndexError,
    UnknownCategoryError,
    UnknownFieldError,
)
from cardindex.models.index import CardIndex
from cardindex.models.records import AttachmentCard, HeroCard, SideQuestCard

__all__ = [
    "AttachmentCard",
    "Attribute",
    "BitVector",
    "CardCollection",
    "CardIndex",
    "Category",
    "FailureDetail",
    "FailureKind",
    "GenericCard",
    "HeroCard",
    "INTERNAL_TYPE",
    "KnownError",
    "RecordError",
    "RecordValidationError",
    "SetDecodeError",
    "SideQuestCard",
    "Sphere",
    "StaleIndexError",
    "UnknownCategoryError",
    "UnknownFieldError",
    "lookup_category",
    "parse_sphere",
]
