from __future__ import annotations

from pathlib import Path
from typing import Protocol

from .table import KeyValueTable


class KeyValueFileStore(Protocol):
    """
    Minimal persistence interface: the whole table is read or written in one call.
    """

    def load(self, path: Path) -> KeyValueTable:
        """Load and return the full table (empty when the file is missing)."""
        ...

    def save(self, path: Path, table: KeyValueTable) -> None:
        """Persist the full table, replacing any previous file content."""
        ...
