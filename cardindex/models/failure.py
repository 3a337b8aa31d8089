"""
Failure classification for set ingestion.

Every error the library raises on purpose is a KnownError carrying a
FailureKind, so callers can branch on the kind and report a FailureDetail
without parsing messages.

Two severities exist:
- Vocabulary errors (unknown category, unknown field) mean a lookup table
  is out of date with the source data. Index construction aborts.
- Record errors (missing field, invalid value) are per-card. The caller
  decides whether to skip, log or abort the batch.
"""

from enum import Enum

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Input document failures
    DECODE_ERROR = "decode_error"

    # Closed vocabulary violations
    UNKNOWN_CATEGORY = "unknown_category"
    UNKNOWN_FIELD = "unknown_field"

    # Per-card record failures
    MISSING_REQUIRED = "missing_required"
    INVALID_VALUE = "invalid_value"

    # Index used against a collection that changed since build
    STALE_INDEX = "stale_index"


class FailureDetail(BaseModel):
    """Detailed information about a failure."""

    kind: FailureKind = Field(
        ...,
        description="Classification of the failure",
    )
    message: str = Field(
        ...,
        description="Explanation of what went wrong",
    )
    detail: str | None = Field(
        default=None,
        description="Additional technical detail (optional)",
    )
    suggestion: str | None = Field(
        default=None,
        description="Suggested fix",
    )


class KnownError(Exception):
    """
    Base class for exceptions that represent known, explainable failures.

    Subclass this for errors where the library knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        super().__init__(message)

    def to_detail(self) -> FailureDetail:
        """Convert to a FailureDetail."""
        return FailureDetail(
            kind=self.kind,
            message=self.message,
            detail=self.detail,
            suggestion=self.suggestion,
        )


class SetDecodeError(KnownError):
    """Raised when a set export cannot be decoded."""

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(
            kind=FailureKind.DECODE_ERROR,
            message=message,
            detail=detail,
            suggestion="Check that the file is a complete OCTGN set.xml export.",
        )


class UnknownCategoryError(KnownError):
    """
    Raised when a ``Type`` value is outside the category vocabulary.

    Not a per-card problem: the Category table must be extended.
    """

    def __init__(self, value: str, card_id: str, card_name: str):
        self.value = value
        self.card_id = card_id
        self.card_name = card_name
        super().__init__(
            kind=FailureKind.UNKNOWN_CATEGORY,
            message=f"'{value}' is not a known card type (card '{card_name}', id {card_id})",
            detail=value,
            suggestion="Add the value to cardindex.models.category.Category.",
        )


class StaleIndexError(KnownError):
    """Raised when an index is queried against a collection changed since the build."""

    def __init__(self, built_size: int, built_generation: int, size: int, generation: int):
        self.built_size = built_size
        self.built_generation = built_generation
        self.size = size
        self.generation = generation
        super().__init__(
            kind=FailureKind.STALE_INDEX,
            message=(
                f"Index was built for {built_size} cards (generation {built_generation}) "
                f"but the collection now has {size} cards (generation {generation})"
            ),
            suggestion="Rebuild the index after appending to the collection.",
        )


class RecordError(KnownError):
    """Base class for failures reconstructing a typed record from a card."""

    def __init__(
        self,
        kind: FailureKind,
        card_id: str,
        card_name: str,
        shape: str,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
    ):
        self.card_id = card_id
        self.card_name = card_name
        self.shape = shape
        super().__init__(kind=kind, message=message, detail=detail, suggestion=suggestion)


class UnknownFieldError(RecordError):
    """
    Raised when a card carries an attribute the record shape does not know.

    The field vocabulary of a shape is closed; this is never ignored.
    """

    def __init__(self, card_id: str, card_name: str, shape: str, attribute: str):
        self.attribute = attribute
        super().__init__(
            kind=FailureKind.UNKNOWN_FIELD,
            card_id=card_id,
            card_name=card_name,
            shape=shape,
            message=f"Cannot parse '{attribute}' for {shape} card '{card_name}' (id {card_id})",
            detail=attribute,
            suggestion=f"Add '{attribute}' to the {shape} record shape or fix the source data.",
        )


class RecordValidationError(RecordError):
    """
    Raised when required fields are missing or values fail to convert.

    Attributes:
        missing: Attribute names that were never supplied, in shape order
        invalid: (attribute, raw value, reason) for each failed conversion
    """

    def __init__(
        self,
        card_id: str,
        card_name: str,
        shape: str,
        missing: tuple[str, ...] = (),
        invalid: tuple[tuple[str, str, str], ...] = (),
    ):
        self.missing = missing
        self.invalid = invalid

        problems: list[str] = []
        if missing:
            problems.append("missing " + ", ".join(missing))
        for attribute, value, reason in invalid:
            problems.append(f"invalid {attribute}={value!r} ({reason})")

        super().__init__(
            kind=FailureKind.MISSING_REQUIRED if missing else FailureKind.INVALID_VALUE,
            card_id=card_id,
            card_name=card_name,
            shape=shape,
            message=f"Error in {shape} card parsing for '{card_name}' (id {card_id})",
            detail="; ".join(problems),
            suggestion="Fix the listed properties in the set export.",
        )

    @property
    def invalid_fields(self) -> tuple[str, ...]:
        return tuple(attribute for attribute, _, _ in self.invalid)
