"""String helpers: concatenation, searching, comparison, conversion and quoting."""

from __future__ import annotations

import re
from itertools import takewhile
from typing import Iterable, Optional, Sequence

_WHITESPACE = " \t\n\v\f\r"

_INTEGER_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)[ \t\n\v\f\r]*")
_REAL_RE = re.compile(
    r"[ \t\n\v\f\r]*"
    r"([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))"
    r"[ \t\n\v\f\r]*",
    re.IGNORECASE,
)

_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    '"': '\\"',
    "\\": "\\\\",
}

_HTML_ENTITIES = {"&": "&amp;", "<": "&lt;", ">": "&gt;"}


def _require(value: Optional[str], where: str) -> str:
    if value is None:
        raise TypeError(f"{where}: String value is None")
    return value


def concat(s1: str, s2: str) -> str:
    """Return the concatenation of two strings."""
    if s1 is None or s2 is None:
        raise TypeError("concat: None string passed as an argument")
    return s1 + s2


def char_at(s: str, i: int) -> str:
    """Return the character at index ``i``; index ``len(s)`` yields ``'\\0'``."""
    s = _require(s, "char_at")
    if i < 0 or i > len(s):
        raise IndexError("char_at: Index is out of range")
    return s[i] if i < len(s) else "\0"


def substring(s: str, p1: int, p2: int) -> str:
    """Return the characters from ``p1`` to ``p2`` inclusive, clamped to the string."""
    s = _require(s, "substring")
    p1 = max(p1, 0)
    p2 = min(p2, len(s) - 1)
    if p2 < p1:
        return ""
    return s[p1:p2 + 1]


def char_to_string(ch: str) -> str:
    """Return a one-character string holding ``ch``."""
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError("char_to_string: argument must be a single character")
    return ch


def string_length(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(_require(s, "string_length"))


def copy_string(s: str) -> str:
    """Return a copy of ``s``."""
    return str(_require(s, "copy_string"))


def string_equal(s1: str, s2: str) -> bool:
    """Return True if the two strings are identical."""
    if s1 is None or s2 is None:
        raise TypeError("string_equal: String value is None")
    return s1 == s2


def string_equal_ignore_case(s1: str, s2: str) -> bool:
    """Return True if the strings are equal when case is ignored."""
    if s1 is None or s2 is None:
        raise TypeError("string_equal_ignore_case: String value is None")
    return len(s1) == len(s2) and all(
        a.lower() == b.lower() for a, b in zip(s1, s2)
    )


def string_compare(s1: str, s2: str) -> int:
    """Return -1, 0 or +1 as ``s1`` sorts before, equal to or after ``s2``."""
    if s1 is None or s2 is None:
        raise TypeError("string_compare: String value is None")
    return (s1 > s2) - (s1 < s2)


def starts_with(s1: str, s2: str) -> bool:
    """Return True if ``s1`` begins with ``s2``."""
    return s1.startswith(s2)


def ends_with(s1: str, s2: str) -> bool:
    """Return True if ``s1`` ends with ``s2``."""
    return s1.endswith(s2)


def find_char(ch: str, text: str, start: int = 0) -> int:
    """Return the first index of ``ch`` in ``text`` at or after ``start``, or -1."""
    text = _require(text, "find_char")
    start = max(start, 0)
    if start > len(text):
        return -1
    return text.find(ch, start)


def find_string(s: str, text: str, start: int = 0) -> int:
    """Return the first index of ``s`` in ``text`` at or after ``start``, or -1."""
    s = _require(s, "find_string")
    text = _require(text, "find_string")
    start = max(start, 0)
    if start > len(text):
        return -1
    return text.find(s, start)


def find_last_char(ch: str, text: str) -> int:
    """Return the last index of ``ch`` in ``text``, or -1."""
    return _require(text, "find_last_char").rfind(ch)


def find_last_string(s: str, text: str) -> int:
    """Return the last index of ``s`` in ``text``, or -1."""
    s = _require(s, "find_last_string")
    return _require(text, "find_last_string").rfind(s)


def to_lower_case(s: str) -> str:
    """Return ``s`` with every letter in lower case."""
    return _require(s, "to_lower_case").lower()


def to_upper_case(s: str) -> str:
    """Return ``s`` with every letter in upper case."""
    return _require(s, "to_upper_case").upper()


def integer_to_string(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(int(n))


def string_to_integer(s: str) -> int:
    """Parse ``s`` as an integer, allowing surrounding white space only."""
    s = _require(s, "string_to_integer")
    match = _INTEGER_RE.fullmatch(s)
    if match is None:
        raise ValueError(f"string_to_integer: Illegal number {s}")
    return int(match.group(1))


def real_to_string(d: float) -> str:
    """Return ``d`` formatted in the ``%G`` style with a two-digit exponent."""
    return "%G" % d


def string_to_real(s: str) -> float:
    """Parse ``s`` as a real number, allowing surrounding white space only."""
    s = _require(s, "string_to_real")
    match = _REAL_RE.fullmatch(s)
    if match is None:
        raise ValueError(f"string_to_real: Illegal number {s}")
    return float(match.group(1))


def trim(s: str) -> str:
    """Return ``s`` without leading and trailing white space."""
    return _require(s, "trim").strip(_WHITESPACE)


def _quote_char(ch: str) -> str:
    if ch in _ESCAPES:
        return _ESCAPES[ch]
    if 32 <= ord(ch) < 127:
        return ch
    return "".join(f"\\{byte:03o}" for byte in ch.encode("utf-8"))


def quote_string(s: str) -> str:
    """Return ``s`` as a double-quoted literal with special characters escaped."""
    s = _require(s, "quote_string")
    return '"' + "".join(_quote_char(ch) for ch in s) + '"'


def quote_html(s: str) -> str:
    """Return ``s`` with ``&``, ``<`` and ``>`` replaced by HTML entities."""
    s = _require(s, "quote_html")
    return "".join(_HTML_ENTITIES.get(ch, ch) for ch in s)


def _live_entries(array: Iterable[Optional[str]]) -> Iterable[str]:
    return takewhile(lambda item: item is not None, array)


def string_array_length(array: Optional[Sequence[Optional[str]]]) -> int:
    """Return the number of entries before the first ``None`` (0 for ``None``)."""
    if array is None:
        return 0
    return sum(1 for _ in _live_entries(array))


def search_string_array(s: str, array: Optional[Sequence[Optional[str]]]) -> int:
    """Return the index of ``s`` among the entries before the first ``None``, or -1."""
    if array is None:
        return -1
    for index, item in enumerate(_live_entries(array)):
        if string_equal(s, item):
            return index
    return -1