"""
Typed record reconstruction.

Projects a GenericCard's attribute bag onto a fixed record shape. A shape
lists its attributes in order, each with a converter from the raw string
and back. Reconstruction is strict:

- every attribute of the card must belong to the shape (UnknownFieldError),
- every attribute of the shape must be supplied at least once,
- every supplied value must convert.

Missing and invalid fields are collected and reported together in one
RecordValidationError so the source data can be fixed in one pass.
"""

import logging
import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, Field

from cardindex.models.bitvector import BitVector
from cardindex.models.card import Attribute, GenericCard
from cardindex.models.category import Category, Sphere, parse_sphere
from cardindex.models.collection import CardCollection
from cardindex.models.failure import FailureDetail, RecordValidationError, UnknownFieldError
from cardindex.models.records import AttachmentCard, HeroCard, SideQuestCard
from cardindex.services.type_index import build_type_index

logger = logging.getLogger(__name__)

R = TypeVar("R")

# Card stats are stored in a byte in the exports.
SMALL_INT_MAX = 255

_DIGITS = re.compile(r"[0-9]+")


# =============================================================================
# CONVERTERS
# =============================================================================


def parse_small_int(value: str) -> int:
    """
    Parse an unsigned integer in 0..255.

    Raises:
        ValueError: If the value is not plain ASCII digits or is too large
    """
    if not _DIGITS.fullmatch(value):
        raise ValueError(f"{value!r} is not an unsigned integer")
    number = int(value)
    if number > SMALL_INT_MAX:
        raise ValueError(f"{number} is larger than {SMALL_INT_MAX}")
    return number


def parse_traits(value: str) -> tuple[str, ...]:
    """
    Split a traits line into trait words.

    The export writes traits as "Rohan. Warrior." so the last character of
    each word is dropped. A trait written without its period loses its last
    letter; that is the export's convention, not something to fix here. An
    empty line is no traits, the inverse of render_traits(()).
    """
    if not value:
        return ()
    return tuple(word[:-1] for word in value.split(" "))


def render_traits(traits: tuple[str, ...]) -> str:
    return " ".join(f"{trait}." for trait in traits)


def parse_text(value: str) -> str:
    return value


def _category_parser(category: Category) -> Callable[[str], Category]:
    # The shape fixes the category; the raw Type value only has to be present.
    def parse(value: str) -> Category:
        return category

    return parse


def _render_enum(value: Category | Sphere) -> str:
    return value.value


# =============================================================================
# SHAPES
# =============================================================================


@dataclass(frozen=True)
class FieldSpec:
    """
    One required attribute of a record shape.

    Attributes:
        attribute: Property name in the export (e.g., "Card Number")
        field: Record field it fills (e.g., "card_number")
        parse: Raw string -> field value. Raises ValueError on bad input.
        render: Field value -> raw string, the inverse of parse
    """

    attribute: str
    field: str
    parse: Callable[[str], Any]
    render: Callable[[Any], str] = str


@dataclass(frozen=True)
class RecordShape(Generic[R]):
    """A record type together with the attributes that fill it."""

    name: str
    record_type: type[R]
    category: Category
    fields: tuple[FieldSpec, ...] = field(default_factory=tuple)

    def slot(self, attribute: str) -> tuple[int, FieldSpec] | None:
        """Position and spec of `attribute`, or None if the shape lacks it."""
        for position, spec in enumerate(self.fields):
            if spec.attribute == attribute:
                return position, spec
        return None

    def attributes(self) -> list[str]:
        return [spec.attribute for spec in self.fields]


def _int_field(attribute: str, field_name: str) -> FieldSpec:
    return FieldSpec(attribute=attribute, field=field_name, parse=parse_small_int)


def _type_field(category: Category) -> FieldSpec:
    return FieldSpec(
        attribute="Type",
        field="card_type",
        parse=_category_parser(category),
        render=_render_enum,
    )


_SPHERE_FIELD = FieldSpec(
    attribute="Sphere", field="sphere", parse=parse_sphere, render=_render_enum
)
_TRAITS_FIELD = FieldSpec(
    attribute="Traits", field="traits", parse=parse_traits, render=render_traits
)
_TEXT_FIELD = FieldSpec(attribute="Text", field="text", parse=parse_text)
_SET_FIELD = FieldSpec(attribute="Set", field="set_name", parse=parse_text)


HERO_SHAPE: RecordShape[HeroCard] = RecordShape(
    name="hero",
    record_type=HeroCard,
    category=Category.HERO,
    fields=(
        _int_field("Card Number", "card_number"),
        _int_field("Quantity", "quantity"),
        _type_field(Category.HERO),
        _TRAITS_FIELD,
        _int_field("Cost", "cost"),
        _int_field("Willpower", "willpower"),
        _int_field("Attack", "attack"),
        _int_field("Defense", "defense"),
        _int_field("Health", "health"),
        _SPHERE_FIELD,
        _TEXT_FIELD,
        _SET_FIELD,
    ),
)

ATTACHMENT_SHAPE: RecordShape[AttachmentCard] = RecordShape(
    name="attachment",
    record_type=AttachmentCard,
    category=Category.ATTACHMENT,
    fields=(
        _int_field("Card Number", "card_number"),
        _int_field("Quantity", "quantity"),
        _type_field(Category.ATTACHMENT),
        _SPHERE_FIELD,
        _TRAITS_FIELD,
        _int_field("Cost", "cost"),
        _TEXT_FIELD,
        _SET_FIELD,
    ),
)

SIDE_QUEST_SHAPE: RecordShape[SideQuestCard] = RecordShape(
    name="side quest",
    record_type=SideQuestCard,
    category=Category.SIDE_QUEST,
    fields=(
        _int_field("Card Number", "card_number"),
        _int_field("Quantity", "quantity"),
        _type_field(Category.SIDE_QUEST),
        _SPHERE_FIELD,
        _int_field("Cost", "cost"),
        _int_field("Victory Points", "victory_points"),
        _TEXT_FIELD,
        _SET_FIELD,
    ),
)

SHAPES: dict[Category, RecordShape[Any]] = {
    shape.category: shape for shape in (HERO_SHAPE, ATTACHMENT_SHAPE, SIDE_QUEST_SHAPE)
}


# =============================================================================
# RECONSTRUCTION
# =============================================================================


def reconstruct(card: GenericCard, shape: RecordShape[R]) -> R:
    """
    Build a typed record from a card's attributes.

    A duplicated attribute is applied again; the last value wins.

    Args:
        card: The card to project
        shape: Target record shape

    Returns:
        A new record of `shape.record_type`

    Raises:
        UnknownFieldError: On the first attribute the shape does not know
        RecordValidationError: If fields are missing or values do not convert
    """
    present = BitVector(len(shape.fields))
    values: dict[str, Any] = {}
    invalid: dict[str, tuple[str, str, str]] = {}

    for attribute in card.attributes:
        slot = shape.slot(attribute.name)
        if slot is None:
            raise UnknownFieldError(
                card_id=card.id,
                card_name=card.name,
                shape=shape.name,
                attribute=attribute.name,
            )

        position, spec = slot
        present.set(position)
        try:
            values[spec.field] = spec.parse(attribute.value)
        except ValueError as e:
            values.pop(spec.field, None)
            invalid[spec.attribute] = (spec.attribute, attribute.value, str(e))
        else:
            invalid.pop(spec.attribute, None)

    missing = tuple(shape.fields[position].attribute for position in present.missing())
    if missing or invalid:
        raise RecordValidationError(
            card_id=card.id,
            card_name=card.name,
            shape=shape.name,
            missing=missing,
            invalid=tuple(invalid.values()),
        )

    return shape.record_type(**values)


def to_generic(record: R, shape: RecordShape[R], card_id: str, name: str) -> GenericCard:
    """
    Turn a typed record back into a GenericCard.

    Attributes come out in shape order. reconstruct() of the result gives
    back an equal record.
    """
    return GenericCard(
        id=card_id,
        name=name,
        attributes=tuple(
            Attribute(name=spec.attribute, value=spec.render(getattr(record, spec.field)))
            for spec in shape.fields
        ),
    )


# =============================================================================
# BATCH
# =============================================================================


class CardFailure(BaseModel):
    """A card that could not be reconstructed."""

    position: int = Field(..., description="Position of the card in the collection")
    card_id: str
    card_name: str
    missing: list[str] = Field(default_factory=list)
    invalid: list[str] = Field(default_factory=list)
    failure: FailureDetail


@dataclass
class ReconstructionReport(Generic[R]):
    """
    Outcome of reconstructing many cards.

    Attributes:
        shape: Name of the record shape
        records: Position -> record, for every card that succeeded
        failures: One entry per card that failed
    """

    shape: str
    records: dict[int, R] = field(default_factory=dict)
    failures: list[CardFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


def reconstruct_many(
    collection: CardCollection,
    shape: RecordShape[R],
    positions: Iterable[int] | None = None,
    on_error: Literal["skip", "raise"] = "skip",
) -> ReconstructionReport[R]:
    """
    Reconstruct every card of the shape's category.

    Args:
        collection: Cards to read
        shape: Target record shape
        positions: Cards to reconstruct. Defaults to every card whose
            ``Type`` is the shape's category.
        on_error: "skip" records failed cards in the report and continues,
            "raise" re-raises the first RecordValidationError

    Returns:
        ReconstructionReport with the records and the failures

    Raises:
        RecordValidationError: If on_error is "raise" and a card fails
        UnknownFieldError: Always propagated, the shape vocabulary is stale
        UnknownCategoryError: When selecting by type hits an unknown type
    """
    if positions is None:
        positions = build_type_index(collection).get(shape.category).positions()

    report: ReconstructionReport[R] = ReconstructionReport(shape=shape.name)

    for position in positions:
        card = collection[position]
        try:
            report.records[position] = reconstruct(card, shape)
        except RecordValidationError as e:
            if on_error == "raise":
                raise
            logger.warning("Skipping card %r (id %s): %s", card.name, card.id, e.detail)
            report.failures.append(
                CardFailure(
                    position=position,
                    card_id=card.id,
                    card_name=card.name,
                    missing=list(e.missing),
                    invalid=list(e.invalid_fields),
                    failure=e.to_detail(),
                )
            )

    logger.info(
        "Reconstructed %d %s cards, %d failed",
        len(report.records),
        shape.name,
        len(report.failures),
    )
    return report
