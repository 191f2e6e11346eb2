from __future__ import annotations

from pathlib import Path


class PersistenceError(OSError):
    """Reading or writing the persistence file failed."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason
