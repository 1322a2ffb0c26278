"""Shared workflow layer between the CLI and the journal core.

One method per user action. Every mutation that should be durable is saved
in the same call; a failed save is reported but the in-memory change stays.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from .adapters.export import export_entries
from .adapters.flat_file import FlatFileRepository
from .config import Config
from .core.entries import Entry, create_entry, format_tags
from .core.query import distinct_tags, filter_by_tag, search, tag_choices
from .core.store import EntryStore
from .ports.entry_repo import EntryRepository

logger = logging.getLogger(__name__)


@dataclass
class EntryDraft:
    """Fields of an entry handed back to the user for re-editing."""

    title: str
    content: str
    tags_raw: str

    @classmethod
    def from_entry(cls, entry: Entry) -> "EntryDraft":
        return cls(title=entry.title, content=entry.content, tags_raw=format_tags(entry.tags))


class Journal:
    """
    Command interface over a single EntryStore.

    The store is empty until load() is called.
    """

    def __init__(self, repository: EntryRepository):
        self.repository = repository
        self.store = EntryStore()

    def load(self) -> None:
        """Replace the in-memory entries with the persisted ones."""
        self.store = self.repository.load()

    def save(self) -> None:
        """Persist every entry, overwriting the previous file."""
        self.repository.save(self.store)

    def create_entry(self, title: str, content: str, tags_raw: str = "") -> int:
        """Validate, append and save a new entry. Returns its position."""
        entry = create_entry(title, content, tags_raw)
        position = self.store.append(entry)
        logger.info(f"Added entry {entry.title!r} at position {position}")
        self.save()
        return position

    def list_entries(self) -> list[Entry]:
        return self.store.all()

    def get_entry(self, position: int) -> Entry:
        return self.store.get(position)

    def search(self, query: str) -> list[Entry]:
        return search(self.store.all(), query)

    def filter_by_tag(self, tag: str) -> list[Entry]:
        return filter_by_tag(self.store.all(), tag)

    def tags(self) -> set[str]:
        return distinct_tags(self.store.all())

    def tag_choices(self) -> list[str]:
        return tag_choices(self.store.all())

    def delete(self, position: int) -> Entry:
        """Remove the entry at position and save."""
        entry = self.store.remove_at(position)
        logger.info(f"Deleted entry {entry.title!r} from position {position}")
        self.save()
        return entry

    def update_entry(self, position: int, title: str, content: str, tags_raw: str = "") -> Entry:
        """Replace the entry at position in place and save. Returns the old entry."""
        # A bad position is reported before bad fields.
        current = self.store.get(position)
        entry = create_entry(title, content, tags_raw)
        self.store.replace_at(position, entry)
        logger.info(f"Replaced entry {current.title!r} at position {position}")
        self.save()
        return current

    def begin_edit(self, position: int) -> EntryDraft:
        """
        Take the entry at position out of the journal for re-editing.

        The entry is removed immediately and is only restored by a later
        create_entry() with the edited fields. Nothing is saved here, but the
        removal is written out by the next save, so an edit that is never
        finished loses the entry.
        """
        entry = self.store.remove_at(position)
        logger.info(f"Editing entry {entry.title!r}, removed from position {position}")
        return EntryDraft.from_entry(entry)

    def export(self, path: Path | str) -> int:
        """Write a readable dump of all entries to path."""
        return export_entries(self.store.all(), path)


def get_repository(config: Config) -> FlatFileRepository:
    """Resolve the journal file from config."""
    return FlatFileRepository(
        config.journal_path,
        separator=config.separator,
        strict=config.strict_separator,
    )


def open_journal(config: Config) -> Journal:
    """Build a Journal for the configured file and load it."""
    journal = Journal(get_repository(config))
    journal.load()
    return journal
