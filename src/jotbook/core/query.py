"""Search and tag filtering over entries.

Pure functions - no I/O. Results keep the order of the input sequence.
"""

from typing import Iterable

from .entries import Entry

ALL_TAGS = "All"


def matches(entry: Entry, query: str) -> bool:
    """Case-insensitive substring match on the title or any tag."""
    needle = query.lower()
    if needle in entry.title.lower():
        return True
    return any(needle in tag.lower() for tag in entry.tags)


def search(entries: Iterable[Entry], query: str) -> list[Entry]:
    """Entries whose title or tags contain query, in input order."""
    return [e for e in entries if matches(e, query)]


def filter_by_tag(entries: Iterable[Entry], tag: str) -> list[Entry]:
    """Entries carrying tag exactly, or every entry for the ALL_TAGS sentinel."""
    if tag == ALL_TAGS:
        return list(entries)
    return [e for e in entries if e.has_tag(tag)]


def distinct_tags(entries: Iterable[Entry]) -> set[str]:
    """Union of all tags across entries."""
    tags: set[str] = set()
    for entry in entries:
        tags.update(entry.tags)
    return tags


def tag_choices(entries: Iterable[Entry]) -> list[str]:
    """Filter selector contents: the ALL_TAGS sentinel, then sorted tags."""
    return [ALL_TAGS, *sorted(distinct_tags(entries))]
