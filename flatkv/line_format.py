"""
Line format for the persistence file.

Each entry is one line: ``<key>\\t<value>``. Backslash, tab, newline and
carriage return inside keys and values are escaped so a line never contains
a raw delimiter or line break of its own.
"""

from __future__ import annotations

from .records import Entry

DELIMITER = "\t"

_ESCAPES = {
    "\\": "\\\\",
    "\t": "\\t",
    "\n": "\\n",
    "\r": "\\r",
}
_UNESCAPES = {
    "\\": "\\",
    "t": "\t",
    "n": "\n",
    "r": "\r",
}


class MalformedLineError(ValueError):
    pass


def escape(text: str) -> str:
    return "".join(_ESCAPES.get(ch, ch) for ch in text)


def unescape(text: str) -> str:
    out: list[str] = []
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch != "\\":
            out.append(ch)
            i += 1
            continue
        if i + 1 >= n:
            raise MalformedLineError("trailing backslash")
        nxt = text[i + 1]
        if nxt not in _UNESCAPES:
            raise MalformedLineError(f"unknown escape \\{nxt}")
        out.append(_UNESCAPES[nxt])
        i += 2
    return "".join(out)


def encode_entry(key: str, value: str) -> str:
    """Serialize one entry, without the trailing newline."""
    return f"{escape(key)}{DELIMITER}{escape(value)}"


def decode_line(line: str) -> Entry:
    """
    Parse one line (trailing line break already stripped).

    Splits at the first raw tab. Raises MalformedLineError when there is no
    delimiter or an escape sequence is invalid.
    """
    raw_key, sep, raw_value = line.partition(DELIMITER)
    if not sep:
        raise MalformedLineError("missing delimiter")
    return Entry(key=unescape(raw_key), value=unescape(raw_value))
