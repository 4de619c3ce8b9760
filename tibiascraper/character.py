"""
Character page -> CharacterRecord.

    sections = iter_sections(soup)             # (heading, container) in page order
    results  = dispatch_sections(soup)         # (heading, extractor result), stops on sentinel/error
    record   = assemble_record(results)        # fold into one record

parse_character() chains the three and applies the empty-identity check.
"""
import logging
from dataclasses import replace
from typing import Callable, Dict, Iterator, List, Tuple, Union

from bs4 import BeautifulSoup, NavigableString, ParserRejectedMarkup, Tag

from .errors import CharacterNotFound, MalformedDocument, StructuralParseError
from .fields import ACCOUNT_INFORMATION, CHARACTER_INFORMATION, FieldPatch, extract_fields
from .lists import (
    ACCOUNT_ACHIEVEMENTS,
    ACCOUNT_BADGES,
    CHARACTER_DEATHS,
    CHARACTERS,
    extract_achievements,
    extract_badges,
    extract_deaths,
    extract_other_characters,
)
from .models import AccountInfo, CharacterRecord, GuildMembership, Identity

NOT_FOUND_SENTINEL = "Could not find character"
SECTION_SEL = ".TableContainer"
HEADING_SEL = "div.Text"

EXTRACTORS: Dict[str, Callable[[Tag], object]] = {
    CHARACTER_INFORMATION: lambda c: extract_fields(c, CHARACTER_INFORMATION),
    ACCOUNT_INFORMATION: lambda c: extract_fields(c, ACCOUNT_INFORMATION),
    ACCOUNT_BADGES: extract_badges,
    ACCOUNT_ACHIEVEMENTS: extract_achievements,
    CHARACTER_DEATHS: extract_deaths,
    CHARACTERS: extract_other_characters,
}


def load_document(page_html: Union[str, bytes]) -> BeautifulSoup:
    if not isinstance(page_html, (str, bytes)):
        raise MalformedDocument(f"expected HTML text, got {type(page_html).__name__}")
    try:
        return BeautifulSoup(page_html, "lxml")
    except ParserRejectedMarkup as e:
        raise MalformedDocument(f"parser rejected the page: {e}") from e


def section_heading(container: Tag) -> str:
    node = container.select_one(HEADING_SEL)
    if node is None:
        raise StructuralParseError("section without a div.Text heading", rule="section heading")
    first = next(iter(node.children), None)
    if not isinstance(first, NavigableString):
        raise StructuralParseError("section heading has no text", rule="section heading")
    return str(first).strip()


def iter_sections(soup: BeautifulSoup) -> Iterator[Tuple[str, Tag]]:
    for container in soup.select(SECTION_SEL):
        yield section_heading(container), container


def dispatch_sections(soup: BeautifulSoup) -> List[Tuple[str, object]]:
    results: List[Tuple[str, object]] = []
    for heading, container in iter_sections(soup):
        if heading == NOT_FOUND_SENTINEL:
            raise CharacterNotFound("tibia.com reports the character does not exist")
        extractor = EXTRACTORS.get(heading)
        if extractor is None:
            logging.debug("Skipping unknown section %r", heading)
            continue
        results.append((heading, extractor(container)))
    return results


def assemble_record(results: List[Tuple[str, object]]) -> CharacterRecord:
    identity: Dict[str, object] = {}
    account: Dict[str, object] = {}
    guild: Dict[str, object] = {}
    record = CharacterRecord()

    for heading, result in results:
        if isinstance(result, FieldPatch):
            identity.update(result.identity)
            account.update(result.account)
            guild.update(result.guild)
            record.houses.extend(result.houses)
        elif heading == ACCOUNT_BADGES:
            record.badges.extend(result)
        elif heading == ACCOUNT_ACHIEVEMENTS:
            record.achievements.extend(result)
        elif heading == CHARACTER_DEATHS:
            record.deaths.extend(result)
        elif heading == CHARACTERS:
            record.other_characters.extend(result)

    return replace(
        record,
        identity=Identity(**identity),
        account=AccountInfo(**account),
        guild=GuildMembership(**guild),
    )


def parse_character(page_html: Union[str, bytes]) -> CharacterRecord:
    soup = load_document(page_html)
    record = assemble_record(dispatch_sections(soup))

    # Some names (e.g. "tíbia") break the lookup on tibia.com without the
    # "Could not find character" box, leaving an empty information table.
    if record.identity == Identity():
        raise CharacterNotFound("character page carried no character information")

    logging.debug(
        "Parsed %s: %d deaths, %d achievements, %d other characters",
        record.identity.name, len(record.deaths), len(record.achievements), len(record.other_characters),
    )
    return record
