import pytest

from tibiascraper.errors import StructuralParseError
from tibiascraper.sanitize import (
    normalize_date,
    normalize_datetime,
    remove_html_tags,
    remove_linebreaks,
    sanitize_escaped_string,
    sanitize_string,
    to_int,
)


class TestStrings:
    def test_sanitize_string_handles_nbsp_and_entities(self) -> None:
        assert sanitize_string("Red&#160;Rose") == "Red Rose"
        assert sanitize_string("Red\xa0Rose ") == "Red Rose"
        assert sanitize_string("Bread &amp; Butter") == "Bread & Butter"

    def test_sanitize_escaped_string(self) -> None:
        assert sanitize_escaped_string("Ship\\'s Kobold") == "Ship's Kobold"
        assert sanitize_escaped_string("Ship&#39;s Kobold") == "Ship's Kobold"

    def test_remove_html_tags(self) -> None:
        assert remove_html_tags('by <a href="x">Tom</a>.') == "by Tom."

    def test_remove_linebreaks(self) -> None:
        assert remove_linebreaks("a\r\nb\nc") == "abc"


class TestNumbers:
    def test_thousands_separator(self) -> None:
        assert to_int("1,024") == 1024

    def test_not_a_number(self) -> None:
        with pytest.raises(StructuralParseError):
            to_int("n/a", "Character Information", "Level")


class TestDates:
    def test_cet(self) -> None:
        assert normalize_datetime("Jan\xa010\xa02024,\xa012:34:56\xa0CET") == "2024-01-10T11:34:56Z"

    def test_cest(self) -> None:
        assert normalize_datetime("Jul 01 2013, 20:00:00 CEST") == "2013-07-01T18:00:00Z"

    def test_unknown_zone(self) -> None:
        with pytest.raises(StructuralParseError):
            normalize_datetime("Jul 01 2013, 20:00:00 PST")

    def test_date(self) -> None:
        assert normalize_date("Jan&#160;10&#160;2024") == "2024-01-10"

    def test_bad_date(self) -> None:
        with pytest.raises(StructuralParseError):
            normalize_date("sometime")
