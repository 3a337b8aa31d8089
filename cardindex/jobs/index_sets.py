"""
Index one or more OCTGN set exports.

Loads every set given on the command line (files, directories of
``*.xml`` files, or http(s) URLs), concatenates them into one collection,
builds the name and type indexes and prints the matching cards.

    python -m cardindex.jobs.index_sets sets/ --prefix fe --type Attachment
"""

import argparse
import logging
from pathlib import Path

import httpx

from cardindex.config import settings
from cardindex.models.category import lookup_category
from cardindex.models.collection import CardCollection
from cardindex.models.failure import KnownError
from cardindex.parsers.octgn import fetch_set, load_set_file, parse_set_collection
from cardindex.services.name_index import build_name_index, search_names
from cardindex.services.reconstructor import HERO_SHAPE, reconstruct_many
from cardindex.services.type_index import build_type_index

logger = logging.getLogger(__name__)


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def resolve_sources(sources: list[str]) -> list[str]:
    """
    Expand directories into the set files they contain.

    With no sources, scans settings.data_dir.
    """
    if not sources:
        sources = [str(settings.data_dir)]

    resolved: list[str] = []
    for source in sources:
        if not _is_url(source) and Path(source).is_dir():
            resolved.extend(str(path) for path in sorted(Path(source).rglob("*.xml")))
        else:
            resolved.append(source)
    return resolved


def load_collection(sources: list[str], client: httpx.Client | None = None) -> CardCollection:
    """
    Load and concatenate every source, in order.

    Raises:
        SetDecodeError: If a source is not a valid set export
        FileNotFoundError: If a file source doesn't exist
        httpx.HTTPError: If a URL source cannot be fetched
    """
    collection = CardCollection.empty()

    for source in sources:
        if _is_url(source):
            loaded = parse_set_collection(fetch_set(source, client=client))
        else:
            loaded = load_set_file(Path(source))
        logger.info("Loaded %d cards from %s", len(loaded), source)
        collection.append(loaded)

    return collection


def run(
    sources: list[str],
    prefix: str | None = None,
    type_name: str | None = None,
    heroes: bool = False,
) -> int:
    """
    Load, index and report. Returns a process exit code.
    """
    category = None
    if type_name is not None:
        category = lookup_category(type_name)
        if category is None:
            logger.error("Unknown card type %r", type_name)
            return 2

    try:
        collection = load_collection(resolve_sources(sources))
        name_index = build_name_index(collection)
        type_index = build_type_index(collection)
    except (KnownError, OSError, httpx.HTTPError) as e:
        logger.error("Failed to index sets: %s", e)
        return 1

    logger.info(
        "Indexed %d cards: %d name prefixes, %d card types",
        len(collection),
        len(name_index),
        len(type_index),
    )

    if prefix is not None or category is not None:
        positions = set(range(len(collection)))
        if prefix is not None:
            positions &= set(search_names(name_index, prefix))
        if category is not None:
            positions &= set(type_index.get(category).positions())

        for position in sorted(positions):
            card = collection[position]
            print(f"{position}\t{card.id}\t{card.name}")

    if heroes:
        try:
            report = reconstruct_many(collection, HERO_SHAPE, on_error="skip")
        except KnownError as e:
            logger.error("Failed to read hero cards: %s", e)
            return 1

        for position, hero in sorted(report.records.items()):
            print(
                f"{position}\t{collection[position].name}\t{hero.sphere.value}\t"
                f"{hero.willpower}/{hero.attack}/{hero.defense}/{hero.health}"
            )
        for failure in report.failures:
            print(f"{failure.position}\t{failure.card_name}\tERROR\t{failure.failure.detail}")

    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Index OCTGN set exports")
    parser.add_argument(
        "sources",
        nargs="*",
        help="set.xml files, directories or URLs (default: configured data directory)",
    )
    parser.add_argument("--prefix", help="Show cards with a name word starting with this")
    parser.add_argument("--type", dest="type_name", help='Show cards of this type (e.g., "Hero")')
    parser.add_argument(
        "--heroes",
        action="store_true",
        help="Read every hero card and report the ones that fail",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    return run(args.sources, prefix=args.prefix, type_name=args.type_name, heroes=args.heroes)


if __name__ == "__main__":
    raise SystemExit(main())
