"""
Decoder for OCTGN set exports.

OCTGN game definitions ship one ``set.xml`` per product:

    <set version="1.0.0" gameVersion="2.3.6.0" gameId="..." id="..." name="The Black Serpent">
      <cards>
        <card id="..." name="Fastred">
          <property name="Card Number" value="81"/>
          ...
        </card>
      </cards>
    </set>

The decoded tree is validated with pydantic, then turned into a
CardCollection in which every card also carries a ``Set`` attribute naming
its set.
"""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from cardindex.config import settings
from cardindex.models.card import Attribute, GenericCard
from cardindex.models.collection import CardCollection
from cardindex.models.failure import SetDecodeError

logger = logging.getLogger(__name__)

SET_ATTRIBUTE = "Set"


class OctgnProperty(BaseModel):
    """A ``<property name value/>`` element."""

    name: str
    value: str


class OctgnCard(BaseModel):
    """A ``<card>`` element and its properties."""

    id: str
    name: str
    properties: list[OctgnProperty] = Field(default_factory=list)

    def to_generic(self) -> GenericCard:
        return GenericCard(
            id=self.id,
            name=self.name,
            attributes=tuple(Attribute(name=p.name, value=p.value) for p in self.properties),
        )


class OctgnSet(BaseModel):
    """The ``<set>`` root element."""

    model_config = ConfigDict(populate_by_name=True)

    version: str
    game_version: str = Field(default="", alias="gameVersion")
    game_id: str = Field(default="", alias="gameId")
    id: str
    name: str
    cards: list[OctgnCard] = Field(default_factory=list)


def _strip_declaration(text: str) -> str:
    # Exports declare standalone="true", which expat rejects.
    text = text.lstrip("\ufeff").lstrip()
    if text.startswith("<?xml"):
        end = text.find("?>")
        if end != -1:
            text = text[end + 2 :]
    return text


def parse_octgn_set(text: str) -> OctgnSet:
    """
    Decode the text of an OCTGN ``set.xml``.

    Args:
        text: XML document, with or without its declaration line

    Returns:
        The validated set tree

    Raises:
        SetDecodeError: If the XML is malformed or required attributes are missing
    """
    try:
        root = ET.fromstring(_strip_declaration(text))
    except ET.ParseError as e:
        raise SetDecodeError("Set export is not well-formed XML", detail=str(e)) from e

    if root.tag != "set":
        raise SetDecodeError(f"Expected a <set> root element, found <{root.tag}>")

    cards = [
        {
            **card.attrib,
            "properties": [dict(prop.attrib) for prop in card.iter("property")],
        }
        for card in root.iterfind("cards/card")
    ]

    try:
        octgn_set = OctgnSet.model_validate({**root.attrib, "cards": cards})
    except ValidationError as e:
        raise SetDecodeError("Set export is missing required attributes", detail=str(e)) from e

    logger.debug("Decoded set %r with %d cards", octgn_set.name, len(octgn_set.cards))
    return octgn_set


def collection_from_set(octgn_set: OctgnSet) -> CardCollection:
    """
    Build a CardCollection from a decoded set.

    Each card gets a trailing ``Set`` attribute holding the set name, so
    cards stay attributable after collections are concatenated.
    """
    return CardCollection(
        cards=[
            card.to_generic().with_attribute(SET_ATTRIBUTE, octgn_set.name)
            for card in octgn_set.cards
        ]
    )


def parse_set_collection(text: str) -> CardCollection:
    """Convenience function: decode set XML directly to a CardCollection."""
    return collection_from_set(parse_octgn_set(text))


def load_set_file(path: Path) -> CardCollection:
    """
    Load a ``set.xml`` from disk.

    Raises:
        FileNotFoundError: If the file doesn't exist
        SetDecodeError: If the file is not a valid set export
    """
    with open(path, encoding="utf-8") as f:
        text = f.read()
    return parse_set_collection(text)


def fetch_set(url: str, client: httpx.Client | None = None) -> str:
    """
    Download the text of a ``set.xml``.

    Args:
        url: Address of the raw XML file
        client: Optional httpx client for connection reuse

    Returns:
        Raw XML text

    Raises:
        httpx.HTTPError: If the request fails
    """
    headers = {"User-Agent": settings.user_agent}

    if client is None:
        response = httpx.get(
            url,
            headers=headers,
            timeout=settings.http_timeout,
            follow_redirects=True,
        )
    else:
        response = client.get(url, headers=headers)

    response.raise_for_status()
    return response.text
