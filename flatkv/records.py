from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Entry(BaseModel):
    """One key/value pair. Both sides are arbitrary text, empty allowed."""

    model_config = ConfigDict(frozen=True, strict=True)

    key: str
    value: str
