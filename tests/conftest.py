from collections.abc import Callable

import pytest

from cardindex.models.card import Attribute, GenericCard
from cardindex.models.collection import CardCollection
from cardindex.parsers.octgn import parse_set_collection

BLACK_SERPENT_XML = """<?xml version="1.0" encoding="UTF-8" standalone="true"?>
<set version="1.0.0" gameVersion="2.3.6.0" gameId="a21af4e8-be4b-4cda-a6b6-534f9717391f" id="4ce33205-d863-4f24-a0c1-c03104cf1091" name="The Black Serpent" xmlns:noNamespaceSchemaLocation="CardSet.xsd">
    <cards>
        <card id="d87344c3-d234-44c8-89b1-249f5c88bfab" name="Fastred">
            <property name="Card Number" value="81"/>
            <property name="Quantity" value="1"/>
            <property name="Type" value="Hero"/>
            <property name="Sphere" value="Spirit"/>
            <property name="Traits" value="Rohan. Warrior."/>
            <property name="Cost" value="9"/>
            <property name="Willpower" value="1"/>
            <property name="Attack" value="2"/>
            <property name="Defense" value="3"/>
            <property name="Health" value="3"/>
            <property name="Text" value="Response: After Fastred defends an enemy attack, return that enemy to the staging area to reduce your threat by 2. (Limit once per phase.)"/>
        </card>
        <card id="168c62d8-bb38-4258-9d2b-6b46aef6c700" name="Fearless Scout">
            <property name="Card Number" value="86"/>
            <property name="Quantity" value="3"/>
            <property name="Type" value="Attachment"/>
            <property name="Sphere" value="Spirit"/>
            <property name="Traits" value="Skill."/>
            <property name="Cost" value="1"/>
            <property name="Text" value="Attach to a hero. Limit 1 per hero. Attached hero gains the Scout trait. Response: After you play Fearless Scout from your hand, draw a card."/>
        </card>
        <card id="97d09901-724d-4932-ac51-59df1ef1dbec" name="Rally the West" size="PlayerQuestCard">
            <property name="Card Number" value="87"/>
            <property name="Quantity" value="3"/>
            <property name="Type" value="Side Quest"/>
            <property name="Sphere" value="Spirit"/>
            <property name="Cost" value="1"/>
            <property name="Victory Points" value="1"/>
            <property name="Text" value="“Foes and fire are before you, and your homes far behind.” -Theoden, The Return of the King Limit 1 copy of Rally the West in the victory display."/>
        </card>
    </cards>
</set>"""


@pytest.fixture
def black_serpent_xml() -> str:
    """OCTGN export of three cards from The Black Serpent."""
    return BLACK_SERPENT_XML


@pytest.fixture
def black_serpent() -> CardCollection:
    """The Black Serpent sample set as a collection."""
    return parse_set_collection(BLACK_SERPENT_XML)


@pytest.fixture
def make_card() -> Callable[..., GenericCard]:
    """Factory building a card from (name, value) attribute pairs."""

    def factory(card_id: str, name: str, *attributes: tuple[str, str]) -> GenericCard:
        return GenericCard(
            id=card_id,
            name=name,
            attributes=tuple(Attribute(name=n, value=v) for n, v in attributes),
        )

    return factory
