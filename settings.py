from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_log_level(name: str, default: str) -> str:
    raw = (os.getenv(name) or default).strip().upper()
    # unknown level names fall back to the default
    if not isinstance(logging.getLevelName(raw), int):
        return default
    return raw


@dataclass(frozen=True)
class Settings:
    # Persistence
    db_path: Path

    # Logging
    log_level: str

    # Dispatcher
    delete_reports_miss: bool
    prompt: str


def get_settings() -> Settings:
    db_path = Path(os.getenv("KV_DB_PATH", "data/flatkv.tsv")).expanduser()
    log_level = _env_log_level("KV_LOG_LEVEL", "WARNING")

    # Off by default: DELETE always answers "Deleted".
    delete_reports_miss = _env_bool("KV_DELETE_REPORTS_MISS", False)

    prompt = os.getenv("KV_PROMPT", "> ")

    return Settings(
        db_path=db_path,
        log_level=log_level,
        delete_reports_miss=delete_reports_miss,
        prompt=prompt,
    )
