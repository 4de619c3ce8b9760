import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple
from urllib.parse import parse_qs, urlparse

from bs4 import NavigableString, Tag

from .errors import StructuralParseError
from .models import HouseOwnership
from .sanitize import normalize_date, normalize_datetime, sanitize_string, to_int

CHARACTER_INFORMATION = "Character Information"
ACCOUNT_INFORMATION = "Account Information"

ROW_SEL = ".TableContentContainer tr"
LABEL_SEL = "td[class^='Label']"

TRADED_MARKER = " (traded)"
DELETION_MARKER = ", will be deleted at "
GUILD_RANK_SUFFIX = " of the "
HOUSE_PAID_MARKER = "is paid until "
NEVER_LOGGED_IN = "never logged in"
NO_LOYALTY_TITLE = "(no title)"

TITLE_RE = re.compile(r"(.*) \(([0-9]+).*")


@dataclass
class FieldPatch:
    """Values read from one label/value section, keyed by the sub-record they belong to."""
    identity: Dict[str, object] = field(default_factory=dict)
    account: Dict[str, object] = field(default_factory=dict)
    guild: Dict[str, object] = field(default_factory=dict)
    houses: List[HouseOwnership] = field(default_factory=list)


def normalize_label(text: str) -> str:
    return sanitize_string(text).rstrip(":").strip()


def _leading_text(cell: Tag) -> str:
    for child in cell.children:
        if isinstance(child, NavigableString):
            return str(child)
        return child.get_text()
    return ""


def _cut_markup(text: str) -> str:
    return text.split("<")[0].strip()


def _split_list(text: str) -> List[str]:
    return [p.strip() for p in sanitize_string(text).split(", ") if p.strip()]


# ------------ Label handlers -------------
# Each handler gets (patch, value cell, leading text of the value cell, section name).

def _name(patch: FieldPatch, cell: Tag, text: str, section: str) -> None:
    name = _cut_markup(text)
    if DELETION_MARKER in name:
        name, _, when = name.partition(DELETION_MARKER)
        patch.identity["deletion_date"] = normalize_datetime(when.strip(), section, "Name")
    if TRADED_MARKER in text:
        patch.identity["traded"] = True
        name = name.replace(TRADED_MARKER, "")
    patch.identity["name"] = sanitize_string(name)


def _former_names(patch: FieldPatch, cell: Tag, text: str, section: str) -> None:
    patch.identity["former_names"] = _split_list(text)


def _former_worlds(patch: FieldPatch, cell: Tag, text: str, section: str) -> None:
    patch.identity["former_worlds"] = _split_list(text)


def _title(patch: FieldPatch, cell: Tag, text: str, section: str) -> None:
    m = TITLE_RE.match(sanitize_string(text))
    if not m:
        raise StructuralParseError(f"title row did not match: {text!r}", section, "Title")
    patch.identity["title"] = m.group(1)
    patch.identity["unlocked_titles"] = int(m.group(2))


def _copy_to(key: str) -> Callable[[FieldPatch, Tag, str, str], None]:
    def handler(patch: FieldPatch, cell: Tag, text: str, section: str) -> None:
        patch.identity[key] = sanitize_string(text)
    return handler


def _int_to(key: str, label: str) -> Callable[[FieldPatch, Tag, str, str], None]:
    def handler(patch: FieldPatch, cell: Tag, text: str, section: str) -> None:
        patch.identity[key] = to_int(text, section, label)
    return handler


def _married_to(patch: FieldPatch, cell: Tag, text: str, section: str) -> None:
    link = cell.find("a")
    if link is None:
        raise StructuralParseError("no link in 'Married To' row", section, "Married To")
    patch.identity["married_to"] = sanitize_string(link.get_text())


def _house(patch: FieldPatch, cell: Tag, text: str, section: str) -> None:
    link = cell.find("a")
    if link is None or not link.get("href"):
        raise StructuralParseError("no house link", section, "House")
    href = link["href"]
    ids = parse_qs(urlparse(href).query).get("houseid")
    if not ids:
        raise StructuralParseError(f"no houseid in {href!r}", section, "House")

    trailing = cell.contents[-1]
    if not isinstance(trailing, NavigableString):
        raise StructuralParseError("house row has no trailing text", section, "House")
    trailing = str(trailing)
    opened, closed = trailing.find("("), trailing.find(")")
    paid_at = trailing.find(HOUSE_PAID_MARKER)
    if opened < 0 or closed < opened or paid_at < 0:
        raise StructuralParseError(f"unexpected house text {trailing!r}", section, "House")

    patch.houses.append(HouseOwnership(
        name=sanitize_string(link.get_text()),
        town=sanitize_string(trailing[opened + 1:closed]),
        paid=normalize_date(trailing[paid_at + len(HOUSE_PAID_MARKER):], section, "House"),
        house_id=to_int(ids[0], section, "House"),
    ))


def _guild(patch: FieldPatch, cell: Tag, text: str, section: str) -> None:
    rank = text.replace("\xa0", " ")
    if rank.endswith(GUILD_RANK_SUFFIX):
        rank = rank[:-len(GUILD_RANK_SUFFIX)]
    patch.guild["rank"] = rank.strip()

    # rank text, then <a>guild name</a>; the name is the link's last text node
    link = cell.find("a")
    if link is None:
        raise StructuralParseError("guild link not found", section, "Guild Membership")
    names = [s for s in link.find_all(string=True) if sanitize_string(str(s))]
    if not names:
        raise StructuralParseError("guild name not found", section, "Guild Membership")
    patch.guild["name"] = sanitize_string(str(names[-1]))


def _last_login(patch: FieldPatch, cell: Tag, text: str, section: str) -> None:
    if sanitize_string(text) != NEVER_LOGGED_IN:
        patch.identity["last_login"] = normalize_datetime(text, section, "Last Login")


def _comment(patch: FieldPatch, cell: Tag, text: str, section: str) -> None:
    parts: List[str] = []
    for node in cell.children:
        if isinstance(node, Tag):
            if node.name == "br":
                continue
            parts.append(node.get_text())
        else:
            parts.append(str(node))
    comment = "".join(parts)
    if comment:
        patch.identity["comment"] = comment


def _loyalty_title(patch: FieldPatch, cell: Tag, text: str, section: str) -> None:
    title = sanitize_string(text)
    if title != NO_LOYALTY_TITLE:
        patch.account["loyalty_title"] = title


def _created(patch: FieldPatch, cell: Tag, text: str, section: str) -> None:
    patch.account["created"] = normalize_datetime(text, section, "Created")


def _position(patch: FieldPatch, cell: Tag, text: str, section: str) -> None:
    position = sanitize_string(_cut_markup(text))
    if section == ACCOUNT_INFORMATION:
        patch.account["position"] = position
    else:
        patch.identity["position"] = position


LABEL_HANDLERS: Dict[str, Callable[[FieldPatch, Tag, str, str], None]] = {
    "Name": _name,
    "Former Names": _former_names,
    "Sex": _copy_to("sex"),
    "Title": _title,
    "Vocation": _copy_to("vocation"),
    "Level": _int_to("level", "Level"),
    "Achievement Points": _int_to("achievement_points", "Achievement Points"),
    "World": _copy_to("world"),
    "Former World": _former_worlds,
    "Former Worlds": _former_worlds,
    "Residence": _copy_to("residence"),
    "Account Status": _copy_to("account_status"),
    "Married To": _married_to,
    "House": _house,
    "Guild Membership": _guild,
    "Last Login": _last_login,
    "Comment": _comment,
    "Loyalty Title": _loyalty_title,
    "Created": _created,
    "Position": _position,
}


def _label_and_value(row: Tag, section: str) -> Tuple[Tag, Tag]:
    label_td = row.select_one(LABEL_SEL)
    if label_td is None:
        raise StructuralParseError("row without a label cell", section, "label row")
    value_td = label_td.find_next_sibling("td")
    if value_td is None:
        raise StructuralParseError(f"label {label_td.get_text()!r} has no value cell", section, "label row")
    return label_td, value_td


def extract_fields(container: Tag, section: str) -> FieldPatch:
    """
    Walk the label/value rows of "Character Information" or "Account Information".
    Unknown labels are logged and skipped; anything else missing raises.
    """
    patch = FieldPatch()
    for row in container.select(ROW_SEL):
        label_td, value_td = _label_and_value(row, section)
        label = normalize_label(label_td.get_text())
        text = _leading_text(value_td)

        handler: Optional[Callable] = LABEL_HANDLERS.get(label)
        if handler is None:
            logging.debug("LEFT OVER in %s: `%s` = `%s`", section, label, text)
            continue
        handler(patch, value_td, text, section)
    return patch
