"""Unit tests for the key:value tag text format."""

from access.domain.tags import format_tags, parse_tags
from access.domain.value_objects import AccessTag


class TestParseTags:
    def test_parses_one_pair_per_line(self):
        tags = parse_tags("cost_center:4410\nticket:IT-1234")

        assert tags == [
            AccessTag(key="cost_center", value="4410"),
            AccessTag(key="ticket", value="IT-1234"),
        ]

    def test_splits_on_first_colon_only(self):
        tags = parse_tags("url:https://example.com:8443/path")

        assert tags == [AccessTag(key="url", value="https://example.com:8443/path")]

    def test_strips_whitespace(self):
        assert parse_tags("  region :  emea  ") == [
            AccessTag(key="region", value="emea")
        ]

    def test_skips_blank_and_malformed_lines(self):
        text = "\n\nno colon here\n:orphan value\nkept:yes\n   \n"

        assert parse_tags(text) == [AccessTag(key="kept", value="yes")]

    def test_empty_text_yields_no_tags(self):
        assert parse_tags("") == []


class TestFormatTags:
    def test_formats_in_order(self):
        tags = [AccessTag(key="b", value="2"), AccessTag(key="a", value="1")]

        assert format_tags(tags) == "b:2\na:1"

    def test_no_tags_formats_empty(self):
        assert format_tags([]) == ""

    def test_parse_recovers_formatted_tags(self):
        tags = [
            AccessTag(key="cost_center", value="4410"),
            AccessTag(key="note", value="a:b"),
        ]

        assert parse_tags(format_tags(tags)) == tags
