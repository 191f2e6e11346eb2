from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable


def temp_path_for(path: Path) -> Path:
    return path.with_suffix(path.suffix + ".tmp")


def read_lines(path: Path) -> list[bytes] | None:
    """
    Read raw lines from disk, line breaks stripped.

    Returns None for a missing file. Every other OSError propagates.
    """
    try:
        with path.open("rb") as f:
            return [line.rstrip(b"\r\n") for line in f]
    except FileNotFoundError:
        return None


def atomic_write_lines(path: Path, lines: Iterable[str]) -> None:
    """
    Atomically write text lines to disk by writing to a temp file then replacing.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = temp_path_for(path)
    try:
        with tmp_path.open("w", encoding="utf-8", newline="\n") as f:
            for line in lines:
                f.write(line)
                f.write("\n")
            f.flush()
            os.fsync(f.fileno())
        tmp_path.replace(path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
