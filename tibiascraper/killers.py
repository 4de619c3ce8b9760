import logging
import re
from functools import lru_cache
from pathlib import Path
from typing import FrozenSet, List

from .config import BASE
from .models import KillParticipant
from .sanitize import remove_html_tags, sanitize_string

CREATURES_WITH_OF_PATH = Path(__file__).resolve().parent / "data" / "creatures_with_of.txt"

TRADED_MARKER = " (traded)"
SUMMON_RE = re.compile(r"(an? .+) of ([^<]+)")


@lru_cache(maxsize=1)
def creatures_with_of() -> FrozenSet[str]:
    names = set()
    for line in CREATURES_WITH_OF_PATH.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if line and not line.startswith("#"):
            names.add(line)
    logging.debug("Loaded %d creature names containing 'of'", len(names))
    return frozenset(names)


def is_creature_with_of(token: str) -> bool:
    bare = token
    for article in ("an ", "a "):
        if bare.startswith(article):
            bare = bare[len(article):]
            break
    return bare in creatures_with_of()


def split_killer_list(fragment: str) -> List[str]:
    """
    "X, Y and Z" -> ["X", "Y", "Z"]

    Only the last comma token is split on " and ", so an "and" inside an
    earlier token is left alone.
    """
    tokens = fragment.split(", ")
    head, sep, tail = tokens[-1].rpartition(" and ")
    if sep:
        tokens[-1] = head
        tokens.append(tail)
    return tokens


def parse_participant(token: str) -> KillParticipant:
    player = traded = False
    summon = None
    data = token

    if TRADED_MARKER in data:
        player = traded = True
        data = data.replace(TRADED_MARKER, "")

    # links to a character profile on tibia.com mean a player
    if BASE in data:
        player = True
        data = remove_html_tags(data)

    if (data.startswith("a ") or data.startswith("an ")) and not is_creature_with_of(data):
        m = SUMMON_RE.match(data)
        if m:
            summon = m.group(1)
            data = m.group(2)

    return KillParticipant(name=sanitize_string(data), player=player, traded=traded, summon=summon)


def parse_killer_list(fragment: str) -> List[KillParticipant]:
    return [parse_participant(tok) for tok in split_killer_list(fragment)]
