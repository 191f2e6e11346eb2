from __future__ import annotations

from pathlib import Path

from .disk_store import DiskLineStore
from .interfaces import KeyValueFileStore
from .records import Entry
from .table import KeyValueTable


class Store:
    """
    The key/value store for one session.

    Owns the in-memory table and the path of its persistence file. Mutations
    only touch memory; nothing reaches disk until save() is called.
    """

    def __init__(self, path: Path, file_store: KeyValueFileStore | None = None):
        self._path = Path(path)
        self._file_store = file_store or DiskLineStore()
        self._table = KeyValueTable()

    @classmethod
    def open(cls, path: Path, file_store: KeyValueFileStore | None = None) -> "Store":
        store = cls(path, file_store)
        store.load()
        return store

    @property
    def path(self) -> Path:
        return self._path

    def set(self, key: str, value: str) -> None:
        self._table.set(key, value)

    def get(self, key: str) -> str | None:
        return self._table.get(key)

    def delete(self, key: str) -> bool:
        return self._table.delete(key)

    def keys(self) -> list[str]:
        return self._table.keys()

    def items(self) -> list[tuple[str, str]]:
        return self._table.items()

    def entries(self) -> list[Entry]:
        return self._table.entries()

    def load(self) -> int:
        """Replace the in-memory contents with the file's. Returns the entry count."""
        self._table = self._file_store.load(self._path)
        return len(self._table)

    def save(self) -> None:
        self._file_store.save(self._path, self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, key: object) -> bool:
        return key in self._table
