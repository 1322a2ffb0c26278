"""Pure entry domain logic - no I/O dependencies."""

import re
from dataclasses import dataclass, field

TAG_SPLIT = re.compile(r"\s*,\s*")


class ValidationError(ValueError):
    """Raised when an entry cannot be built from user input."""


@dataclass(frozen=True)
class Entry:
    """A journal entry: title, free-text content and a set of tags."""

    title: str
    content: str
    tags: frozenset[str] = field(default_factory=frozenset)

    def has_tag(self, tag: str) -> bool:
        """Exact, case-sensitive tag membership."""
        return tag in self.tags

    @property
    def tags_line(self) -> str:
        return format_tags(self.tags)


def parse_tags(tags_raw: str) -> frozenset[str]:
    """
    Parse a comma-separated tag string.

    Whitespace around commas is ignored and empty tokens are dropped, so
    "a, b," gives {"a", "b"} and "" gives no tags.
    """
    return frozenset(t for t in TAG_SPLIT.split(tags_raw.strip()) if t.strip())


def format_tags(tags: frozenset[str] | set[str]) -> str:
    """Join tags with ", " in sorted order."""
    return ", ".join(sorted(tags))


def create_entry(title: str, content: str, tags_raw: str = "") -> Entry:
    """
    Build an Entry from raw user input.

    Raises ValidationError if title or content is empty after trimming, or if
    any field contains a line break.
    """
    title = title.strip()
    content = content.strip()

    if not title or not content:
        raise ValidationError("Title and content cannot be empty")

    for name, value in (("title", title), ("content", content), ("tags", tags_raw.strip())):
        if "\n" in value or "\r" in value:
            raise ValidationError(f"The {name} cannot contain line breaks")

    return Entry(title=title, content=content, tags=parse_tags(tags_raw))
