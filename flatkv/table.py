from __future__ import annotations

from .records import Entry


class KeyValueTable:
    """In-memory key -> value map. Last write wins."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def delete(self, key: str) -> bool:
        if key not in self._data:
            return False
        del self._data[key]
        return True

    def keys(self) -> list[str]:
        return list(self._data.keys())

    def items(self) -> list[tuple[str, str]]:
        return list(self._data.items())

    def entries(self) -> list[Entry]:
        # no validation: in-memory text may hold characters pydantic rejects
        return [Entry.model_construct(key=k, value=v) for k, v in self._data.items()]

    def to_dict(self) -> dict[str, str]:
        return dict(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data
