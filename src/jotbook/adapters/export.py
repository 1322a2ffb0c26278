"""Human-readable export of journal entries."""

import logging
from pathlib import Path

from jotbook.core.entries import Entry, format_tags

from .flat_file import DEFAULT_SEPARATOR, StorageError

logger = logging.getLogger(__name__)


def format_entry(entry: Entry) -> str:
    """Render one entry with field headers."""
    return (
        f"Title: {entry.title}\n"
        f"Content: {entry.content}\n"
        f"Tags: {format_tags(entry.tags)}\n"
    )


def export_entries(entries: list[Entry], path: Path | str) -> int:
    """
    Write entries to path in a readable layout.

    The output is meant for people and cannot be loaded back as a journal.
    Returns the number of entries written.
    """
    path = Path(path).expanduser()
    try:
        with path.open("w", encoding="utf-8") as f:
            for entry in entries:
                f.write(format_entry(entry))
                f.write(f"{DEFAULT_SEPARATOR}\n")
    except OSError as e:
        raise StorageError("export to", path, e) from e

    logger.debug(f"Exported {len(entries)} entries to {path}")
    return len(entries)
