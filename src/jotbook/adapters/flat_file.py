"""Flat-file entry storage adapter.

Each entry is stored as four lines:

    <title>
    <content>
    <tag1, tag2, ...>
    -----
"""

import logging
from pathlib import Path
from typing import Iterator, TextIO

from jotbook.core.entries import Entry, format_tags, parse_tags
from jotbook.core.store import EntryStore

logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR = "-----"


class StorageError(OSError):
    """Raised when the journal file cannot be read or written."""

    def __init__(self, action: str, path: Path, cause: Exception):
        self.path = path
        self.cause = cause
        reason = getattr(cause, "strerror", None) or cause
        super().__init__(f"Could not {action} {path}: {reason}")


class RecordFormatError(ValueError):
    """Raised in strict mode when a record is malformed."""

    def __init__(self, line_number: int, problem: str):
        self.line_number = line_number
        super().__init__(f"Line {line_number}: {problem}")


class RecordReader:
    """
    Stateful reader for the four-line record format.

    A missing line is always treated as end of input: a partial trailing
    record is dropped instead of raising. Records with a blank title or
    content are skipped, or rejected in strict mode.
    """

    def __init__(self, stream: TextIO, separator: str = DEFAULT_SEPARATOR, strict: bool = False):
        self.stream = stream
        self.separator = separator
        self.strict = strict
        self.line_number = 0
        self.truncated = False
        self.skipped = 0

    def _next_line(self) -> str | None:
        line = self.stream.readline()
        if not line:
            return None
        self.line_number += 1
        return line.rstrip("\r\n")

    def _malformed(self, problem: str) -> None:
        if self.strict:
            raise RecordFormatError(self.line_number, problem)
        logger.warning(f"Line {self.line_number}: {problem}")

    def read_record(self) -> Entry | None:
        """Read the next valid entry, or None at end of input."""
        while True:
            title = self._next_line()
            if title is None:
                return None

            content = self._next_line()
            tags_line = self._next_line() if content is not None else None
            if content is None or tags_line is None:
                logger.warning(
                    f"Discarding incomplete record at end of file (line {self.line_number})"
                )
                self.truncated = True
                return None

            separator = self._next_line()
            if separator is not None and separator != self.separator:
                self._malformed(
                    f"expected separator {self.separator!r}, found {separator!r}; skipping it"
                )

            if not title.strip() or not content.strip():
                self._malformed("record with blank title or content; skipping it")
                self.skipped += 1
                continue

            return Entry(title=title, content=content, tags=parse_tags(tags_line))

    def __iter__(self) -> Iterator[Entry]:
        while (entry := self.read_record()) is not None:
            yield entry


def write_records(stream: TextIO, entries: list[Entry], separator: str = DEFAULT_SEPARATOR) -> None:
    """Write entries in the four-line record format."""
    for entry in entries:
        stream.write(f"{entry.title}\n")
        stream.write(f"{entry.content}\n")
        stream.write(f"{format_tags(entry.tags)}\n")
        stream.write(f"{separator}\n")


class FlatFileRepository:
    """
    Flat-file journal storage.

    Implements EntryRepository protocol. The whole journal lives in one text
    file which is rewritten on every save.
    """

    def __init__(self, path: Path | str, separator: str = DEFAULT_SEPARATOR, strict: bool = False):
        self.path = Path(path).expanduser()
        self.separator = separator
        self.strict = strict

    def load(self) -> EntryStore:
        """Load all entries. A missing file gives an empty store."""
        if not self.path.exists():
            logger.debug(f"No journal file at {self.path}, starting empty")
            return EntryStore()

        try:
            with self.path.open("r", encoding="utf-8") as f:
                reader = RecordReader(f, separator=self.separator, strict=self.strict)
                store = EntryStore(reader)
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError("read", self.path, e) from e

        logger.debug(f"Loaded {len(store)} entries from {self.path}")
        return store

    def save(self, store: EntryStore) -> None:
        """Rewrite the journal file with every entry in the store."""
        entries = store.all()
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8") as f:
                write_records(f, entries, separator=self.separator)
        except OSError as e:
            raise StorageError("write", self.path, e) from e

        logger.debug(f"Saved {len(entries)} entries to {self.path}")
