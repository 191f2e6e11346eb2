from __future__ import annotations

import logging
from pathlib import Path

from .errors import PersistenceError
from .file_io import atomic_write_lines, read_lines
from .interfaces import KeyValueFileStore
from .line_format import MalformedLineError, decode_line, encode_entry
from .table import KeyValueTable

logger = logging.getLogger(__name__)


class DiskLineStore(KeyValueFileStore):
    """
    Stores a whole key/value table in a line-oriented text file.

    - A missing file loads as an empty table.
    - Malformed lines are skipped and logged; the rest of the file still loads.
    - Saves overwrite the file atomically, keys in sorted order.
    """

    def __init__(self, sort_keys: bool = True):
        self._sort_keys = sort_keys

    def load(self, path: Path) -> KeyValueTable:
        table = KeyValueTable()
        try:
            raw_lines = read_lines(path)
        except OSError as e:
            raise PersistenceError(path, e.strerror or repr(e)) from e

        if raw_lines is None:
            logger.info("STORE LOAD: %s does not exist, starting empty", path)
            return table

        skipped = 0
        for lineno, raw in enumerate(raw_lines, start=1):
            if not raw:
                continue
            try:
                entry = decode_line(raw.decode("utf-8"))
            except (UnicodeDecodeError, MalformedLineError) as e:
                skipped += 1
                logger.warning("STORE LOAD: skipping malformed line %d in %s: %s", lineno, path, e)
                continue
            table.set(entry.key, entry.value)

        logger.info("STORE LOAD: %d entries from %s (%d skipped)", len(table), path, skipped)
        return table

    def save(self, path: Path, table: KeyValueTable) -> None:
        items = table.items()
        if self._sort_keys:
            items.sort(key=lambda kv: kv[0])
        try:
            atomic_write_lines(path, (encode_entry(k, v) for k, v in items))
        except OSError as e:
            raise PersistenceError(path, e.strerror or repr(e)) from e
        except UnicodeEncodeError as e:
            # lone surrogates (e.g. from surrogateescape stdin) have no UTF-8 form
            raise PersistenceError(path, f"cannot encode {e.object[e.start:e.end]!r} as UTF-8") from e
        logger.info("STORE SAVE: %d entries to %s", len(items), path)


def load(path: Path) -> KeyValueTable:
    return DiskLineStore().load(path)


def save(path: Path, table: KeyValueTable) -> None:
    DiskLineStore().save(path, table)
