"""
Repeated-row sections of the character page.

Every section is governed by one regex rule applied to the inner HTML of a
row (line breaks removed). The rules are tied to tibia.com's exact markup,
so each lives in its own constant and has its own fixture in the tests.
"""
import logging
import re
from typing import List

from bs4 import Tag

from .errors import StructuralParseError
from .killers import parse_killer_list
from .models import Achievement, Badge, DeathEvent, KillParticipant, OtherCharacterRef
from .sanitize import (
    normalize_datetime,
    remove_html_tags,
    remove_linebreaks,
    sanitize_escaped_string,
    sanitize_string,
    to_int,
)

ACCOUNT_BADGES = "Account Badges"
ACCOUNT_ACHIEVEMENTS = "Account Achievements"
CHARACTER_DEATHS = "Character Deaths"
CHARACTERS = "Characters"

ROW_SEL = ".TableContentContainer tr"
BADGE_SEL = ".TableContentContainer tr td span[style]"

NO_BADGES = "There are no account badges set to be displayed for this character."
TRADED_MARKER = " (traded)"
MAIN_CHARACTER_MARKER = "Main Character"
ONLINE_MARKER = '<b class="green">online</b>'
DELETED_MARKER = "deleted"
CIPSOFT_MEMBER = "CipSoft Member"
GRADE_MARKER = "achievement-grade-symbol"
SECRET_MARKER = "achievement-secret-symbol"
ASSIST_SPLIT = ". Assisted by "

# js quotes come through either literal or as &#39; depending on the serializer
_Q = r"(?:'|&#39;)"
BADGE_RE = re.compile(
    r"\(this\), " + _Q + r"(.*?)(?<!\\)" + _Q + r", " + _Q + r"(.*?)(?<!\\)" + _Q + r",.*?\).*?src=\"(.*?)\""
)
ACHIEVEMENT_RE = re.compile(r"<td class=\"[a-zA-Z0-9_. -]+\">(.*?)</td><td>(.*?)</td>")
DEATH_RE = re.compile(r"<td[^>]*>(.*?)</td><td[^>]*>(.*) at Level ([0-9]+) by (.*)\.</td>")
OTHER_CHARACTER_RE = re.compile(
    r"<td[^>]*><nobr>[0-9]+\..(.*?)</nobr></td><td[^>]*><nobr>(.*?)</nobr></td><td[^>]*>(.*?)</td>"
)


def _row_html(row: Tag) -> str:
    return remove_linebreaks(row.decode_contents())


# ------------ Badges -------------

def parse_badge(fragment: str) -> Badge:
    m = BADGE_RE.search(fragment)
    if not m:
        raise StructuralParseError(f"badge rule did not match: {fragment[:120]!r}", ACCOUNT_BADGES, "badge")
    return Badge(
        name=sanitize_escaped_string(m.group(1)),
        description=sanitize_escaped_string(m.group(2)),
        icon_url=m.group(3),
    )


def extract_badges(container: Tag) -> List[Badge]:
    badges: List[Badge] = []
    for span in container.select(BADGE_SEL):
        fragment = _row_html(span)
        if sanitize_string(fragment) == NO_BADGES:
            continue
        badges.append(parse_badge(fragment))
    return badges


# ------------ Achievements -------------

def parse_achievement(fragment: str):
    """Returns an Achievement, or None for rows that are not achievements."""
    m = ACHIEVEMENT_RE.search(fragment)
    if not m:
        return None
    grades, name_markup = m.group(1), sanitize_escaped_string(m.group(2))
    return Achievement(
        name=name_markup.split("<img")[0].strip(),
        grade=grades.count(GRADE_MARKER),
        secret=SECRET_MARKER in name_markup,
    )


def extract_achievements(container: Tag) -> List[Achievement]:
    out: List[Achievement] = []
    for row in container.select(ROW_SEL):
        ach = parse_achievement(_row_html(row))
        if ach is not None:
            out.append(ach)
    return out


# ------------ Deaths -------------

def parse_death(fragment: str):
    """Returns a DeathEvent, or None when the row is not a death entry."""
    fragment = fragment.replace(".<br/>Assisted by", ". Assisted by")
    m = DEATH_RE.search(fragment)
    if not m:
        return None
    when, description, level, killers_html = m.groups()

    reason = sanitize_string(remove_html_tags(f"{description} at Level {level} by {killers_html}."))

    assists: List[KillParticipant] = []
    if ASSIST_SPLIT in killers_html:
        killers_html, _, assists_html = killers_html.partition(ASSIST_SPLIT)
        assists = parse_killer_list(assists_html)

    return DeathEvent(
        time=normalize_datetime(remove_html_tags(when), CHARACTER_DEATHS, "death"),
        level=to_int(level, CHARACTER_DEATHS, "death"),
        killers=parse_killer_list(killers_html),
        assists=assists,
        reason=reason,
    )


def extract_deaths(container: Tag) -> List[DeathEvent]:
    deaths: List[DeathEvent] = []
    for row in container.select(ROW_SEL):
        death = parse_death(_row_html(row))
        if death is None:
            logging.debug("Skipping non-death row in %s", CHARACTER_DEATHS)
            continue
        deaths.append(death)
    return deaths


# ------------ Other characters -------------

def parse_other_character(fragment: str):
    m = OTHER_CHARACTER_RE.search(fragment)
    if not m:
        return None
    name, world, status = m.groups()

    traded = TRADED_MARKER in name
    if traded:
        name = name.replace(TRADED_MARKER, "")

    main = MAIN_CHARACTER_MARKER in name
    if main:
        name = name.split("<")[0].strip()

    return OtherCharacterRef(
        name=sanitize_string(name),
        world=sanitize_string(world),
        status="online" if ONLINE_MARKER in status else "offline",
        deleted=DELETED_MARKER in status,
        main=main,
        traded=traded,
        position=CIPSOFT_MEMBER if CIPSOFT_MEMBER in status else None,
    )


def extract_other_characters(container: Tag) -> List[OtherCharacterRef]:
    out: List[OtherCharacterRef] = []
    for row in container.select(ROW_SEL):
        ref = parse_other_character(_row_html(row))
        if ref is not None:
            out.append(ref)
    return out
