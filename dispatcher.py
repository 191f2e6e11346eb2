# dispatcher.py
from __future__ import annotations

import logging

from pydantic import BaseModel

from flatkv import PersistenceError, Store

logger = logging.getLogger(__name__)

OK = "OK"
NIL = "(nil)"
DELETED = "Deleted"
KEY_NOT_FOUND = "Key not found"
BYE = "Bye!"
UNKNOWN_COMMAND = "Unknown command"


class CommandResult(BaseModel):
    # None means nothing to print (blank input).
    output: str | None = None
    exit: bool = False


class Dispatcher:
    """
    Turns one line of user input into a Store call and the text to show for it.

    SET key value   -> OK
    GET key         -> value or (nil)
    DELETE key      -> Deleted
    EXIT            -> saves, then Bye!
    """

    def __init__(self, store: Store, *, delete_reports_miss: bool = False):
        self._store = store
        self._delete_reports_miss = delete_reports_miss

    @property
    def store(self) -> Store:
        return self._store

    def execute(self, line: str) -> CommandResult:
        parts = line.strip().split(maxsplit=1)
        if not parts:
            return CommandResult()

        command = parts[0].upper()
        rest = parts[1] if len(parts) > 1 else ""
        args = rest.split()

        if command == "SET":
            # value is the remainder of the line after the key
            kv = rest.split(maxsplit=1)
            if len(kv) != 2:
                return CommandResult(output=UNKNOWN_COMMAND)
            return self._set(kv[0], kv[1])
        if command == "GET" and len(args) == 1:
            return self._get(args[0])
        if command == "DELETE" and len(args) == 1:
            return self._delete(args[0])
        if command == "EXIT":
            return self.exit()

        logger.debug("DISPATCH: rejected input %r", line)
        return CommandResult(output=UNKNOWN_COMMAND)

    def exit(self) -> CommandResult:
        try:
            self._store.save()
        except PersistenceError as e:
            logger.error("DISPATCH: save failed for %s: %s", e.path, e.reason)
            return CommandResult(output=f"(error) save failed: {e.reason}")
        return CommandResult(output=BYE, exit=True)

    def _set(self, key: str, value: str) -> CommandResult:
        self._store.set(key, value)
        return CommandResult(output=OK)

    def _get(self, key: str) -> CommandResult:
        value = self._store.get(key)
        return CommandResult(output=NIL if value is None else value)

    def _delete(self, key: str) -> CommandResult:
        removed = self._store.delete(key)
        if not removed and self._delete_reports_miss:
            return CommandResult(output=KEY_NOT_FOUND)
        return CommandResult(output=DELETED)
