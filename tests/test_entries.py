"""Tests for core entry logic."""

import pytest

from jotbook.core.entries import (
    Entry,
    ValidationError,
    create_entry,
    format_tags,
    parse_tags,
)


class TestParseTags:
    def test_splits_on_commas_with_whitespace(self):
        assert parse_tags("travel ,  outdoors,food") == {"travel", "outdoors", "food"}

    def test_empty_input_gives_no_tags(self):
        assert parse_tags("") == frozenset()
        assert parse_tags("   ") == frozenset()

    def test_drops_empty_tokens(self):
        assert parse_tags("a, , b,") == {"a", "b"}

    def test_collapses_duplicates(self):
        assert parse_tags("a, a, b") == {"a", "b"}

    def test_case_sensitive(self):
        assert parse_tags("Work, work") == {"Work", "work"}

    def test_keeps_inner_spaces(self):
        assert parse_tags("road trip, day off") == {"road trip", "day off"}


class TestFormatTags:
    def test_sorted_and_joined(self):
        assert format_tags(frozenset({"b", "a", "c"})) == "a, b, c"

    def test_empty(self):
        assert format_tags(frozenset()) == ""


class TestCreateEntry:
    def test_trims_fields(self):
        entry = create_entry("  Trip ", " Went hiking  ", "travel, outdoors")
        assert entry == Entry("Trip", "Went hiking", frozenset({"travel", "outdoors"}))

    def test_no_tags(self):
        entry = create_entry("Title", "Body")
        assert entry.tags == frozenset()

    @pytest.mark.parametrize(
        "title,content",
        [("", "Body"), ("Title", ""), ("   ", "Body"), ("Title", "\t "), ("", "")],
    )
    def test_empty_title_or_content_rejected(self, title, content):
        with pytest.raises(ValidationError, match="cannot be empty"):
            create_entry(title, content, "tag")

    @pytest.mark.parametrize(
        "title,content,tags",
        [
            ("Two\nlines", "Body", ""),
            ("Title", "First\nSecond", ""),
            ("Title", "Body", "a\nb"),
            ("Title", "Carriage\rreturn", ""),
        ],
    )
    def test_line_breaks_rejected(self, title, content, tags):
        with pytest.raises(ValidationError, match="line breaks"):
            create_entry(title, content, tags)

    def test_trailing_newline_is_trimmed_not_rejected(self):
        entry = create_entry("Title\n", "Body\n")
        assert entry.title == "Title"
        assert entry.content == "Body"

    def test_trailing_newline_in_tags_is_trimmed_not_rejected(self):
        entry = create_entry("Title", "Body", "travel\n")
        assert entry.tags == {"travel"}


class TestEntry:
    def test_has_tag_exact(self):
        entry = Entry("T", "C", frozenset({"Work"}))
        assert entry.has_tag("Work") is True
        assert entry.has_tag("work") is False

    def test_tags_line(self):
        entry = Entry("T", "C", frozenset({"z", "a"}))
        assert entry.tags_line == "a, z"

    def test_frozen(self):
        entry = Entry("T", "C")
        with pytest.raises(AttributeError):
            entry.title = "Other"
