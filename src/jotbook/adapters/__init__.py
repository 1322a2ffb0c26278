"""Adapters - I/O implementations of ports."""

from .flat_file import FlatFileRepository, RecordReader, RecordFormatError, StorageError
from .export import export_entries

__all__ = [
    "FlatFileRepository",
    "RecordReader",
    "RecordFormatError",
    "StorageError",
    "export_entries",
]
