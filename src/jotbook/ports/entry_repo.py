"""Entry repository interface."""

from typing import Protocol

from jotbook.core.store import EntryStore


class EntryRepository(Protocol):
    """Interface for loading and saving the whole journal."""

    def load(self) -> EntryStore:
        """Load all entries. Returns an empty store if nothing is persisted."""
        ...

    def save(self, store: EntryStore) -> None:
        """Persist all entries, replacing whatever was stored before."""
        ...
