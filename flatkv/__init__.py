from __future__ import annotations

from .disk_store import DiskLineStore
from .errors import PersistenceError
from .interfaces import KeyValueFileStore
from .records import Entry
from .store import Store
from .table import KeyValueTable

__version__ = "0.1.0"

__all__ = [
    "DiskLineStore",
    "Entry",
    "KeyValueFileStore",
    "KeyValueTable",
    "PersistenceError",
    "Store",
    "__version__",
]
