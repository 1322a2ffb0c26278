"""Functional core - pure business logic with no I/O."""

from .entries import Entry, ValidationError, create_entry, parse_tags, format_tags
from .store import EntryStore, OutOfRange
from .query import ALL_TAGS, search, filter_by_tag, distinct_tags, tag_choices

__all__ = [
    # Entries
    "Entry",
    "ValidationError",
    "create_entry",
    "parse_tags",
    "format_tags",
    # Store
    "EntryStore",
    "OutOfRange",
    # Query
    "ALL_TAGS",
    "search",
    "filter_by_tag",
    "distinct_tags",
    "tag_choices",
]
