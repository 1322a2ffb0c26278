"""In-memory ordered collection of entries."""

from typing import Iterable, Iterator

from .entries import Entry


class OutOfRange(IndexError):
    """Raised when a position does not refer to a current entry."""

    def __init__(self, position: int, size: int):
        self.position = position
        self.size = size
        if size:
            super().__init__(f"No entry at position {position} (valid: 0-{size - 1})")
        else:
            super().__init__(f"No entry at position {position} (journal is empty)")


class EntryStore:
    """
    Ordered entries for the current session.

    Position is the only identity: removing an entry shifts every later
    entry down by one, so positions must not be kept across mutations.
    """

    def __init__(self, entries: Iterable[Entry] = ()):
        self._entries: list[Entry] = list(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.all())

    def __repr__(self) -> str:
        return f"EntryStore({len(self._entries)} entries)"

    def _check(self, position: int) -> None:
        if not 0 <= position < len(self._entries):
            raise OutOfRange(position, len(self._entries))

    def append(self, entry: Entry) -> int:
        """Add an entry at the end. Returns its position."""
        self._entries.append(entry)
        return len(self._entries) - 1

    def get(self, position: int) -> Entry:
        self._check(position)
        return self._entries[position]

    def remove_at(self, position: int) -> Entry:
        """Remove and return the entry at position."""
        self._check(position)
        return self._entries.pop(position)

    def replace_at(self, position: int, entry: Entry) -> Entry:
        """Replace the entry at position. Returns the previous entry."""
        self._check(position)
        previous = self._entries[position]
        self._entries[position] = entry
        return previous

    def all(self) -> list[Entry]:
        """Snapshot of entries in current order."""
        return list(self._entries)
