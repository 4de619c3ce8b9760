import html
import re
from datetime import datetime, timedelta, timezone

from .errors import StructuralParseError

TAG_RE = re.compile(r"<[^>]*>")
NBSP_ENTITIES = ("&#160;", "&nbsp;", "\xa0")

# tibia.com prints server time (Europe/Berlin) labelled CET or CEST
TZ_OFFSETS = {
    "CET": timezone(timedelta(hours=1)),
    "CEST": timezone(timedelta(hours=2)),
    "UTC": timezone.utc,
}
DATETIME_FORMAT = "%b %d %Y, %H:%M:%S"
DATE_FORMAT = "%b %d %Y"


def _condense_spaces(s: str) -> str:
    return re.sub(r"\s+", " ", s).strip()


def _replace_nbsp(s: str) -> str:
    for ent in NBSP_ENTITIES:
        s = s.replace(ent, " ")
    return s


def sanitize_string(s: str) -> str:
    """Decode entities, turn non-breaking spaces into spaces and condense whitespace."""
    return _condense_spaces(_replace_nbsp(html.unescape(_replace_nbsp(s or ""))))


def sanitize_escaped_string(s: str) -> str:
    # names inside js-ish markup come through as "Allow Cookies\'"
    return html.unescape(s or "").replace("\\'", "'")


def remove_html_tags(s: str) -> str:
    return TAG_RE.sub("", s or "")


def remove_linebreaks(s: str) -> str:
    return (s or "").replace("\r", "").replace("\n", "")


def to_int(text: str, section: str = "", rule: str = "integer") -> int:
    digits = re.sub(r"[^0-9]", "", _replace_nbsp(text or ""))
    if not digits:
        raise StructuralParseError(f"expected a number, got {text!r}", section, rule)
    return int(digits)


def normalize_datetime(text: str, section: str = "", rule: str = "datetime") -> str:
    """
    "Jan 10 2024, 12:34:56 CET" -> "2024-01-10T11:34:56Z"
    """
    clean = sanitize_string(text)
    stamp, _, tz_name = clean.rpartition(" ")
    tz = TZ_OFFSETS.get(tz_name)
    if not stamp or tz is None:
        raise StructuralParseError(f"unrecognized timestamp {text!r}", section, rule)
    try:
        dt = datetime.strptime(stamp, DATETIME_FORMAT).replace(tzinfo=tz)
    except ValueError as e:
        raise StructuralParseError(f"unrecognized timestamp {text!r}: {e}", section, rule) from e
    return dt.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def normalize_date(text: str, section: str = "", rule: str = "date") -> str:
    """
    "Jan 10 2024" -> "2024-01-10"
    """
    clean = sanitize_string(text)
    try:
        return datetime.strptime(clean, DATE_FORMAT).strftime("%Y-%m-%d")
    except ValueError as e:
        raise StructuralParseError(f"unrecognized date {text!r}", section, rule) from e
