"""A growable character buffer with printf-style appending."""

from __future__ import annotations

from typing import Any, Iterator, List

MAX_NUMBER_DIGITS = 30

_INTEGER_CONVERSIONS = frozenset("dioux" "X")
_REAL_CONVERSIONS = frozenset("aefgAEFG")
_IGNORED_FLAGS = frozenset("+-# hzjt")


def _next_arg(args: Iterator[Any], fmt: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise ValueError(f"printf_capacity: not enough arguments for {fmt!r}") from None


def printf_capacity(fmt: str, *args: Any) -> int:
    """Return a character count large enough to hold ``fmt`` expanded with ``args``.

    The bound is guaranteed to be adequate but is not necessarily tight.
    """
    remaining = iter(args)
    capacity = 0
    in_format = False
    dot_seen = False
    width = -1
    precision = -1
    lcount = 0
    for ch in fmt:
        if not in_format:
            if ch == "%":
                in_format = True
                dot_seen = False
                width = -1
                precision = -1
                lcount = 0
            else:
                capacity += 1
            continue
        if ch.isdigit() and ch.isascii():
            digit = int(ch)
            if dot_seen:
                precision = 10 * max(precision, 0) + digit
            else:
                width = 10 * max(width, 0) + digit
        elif ch == "*":
            value = int(_next_arg(remaining, fmt))
            if dot_seen:
                precision = value
            else:
                width = value
        elif ch == ".":
            dot_seen = True
            precision = 0
        elif ch in _IGNORED_FLAGS:
            pass
        elif ch == "l":
            lcount += 1
        elif ch == "%":
            capacity += 1
            in_format = False
        elif ch in _INTEGER_CONVERSIONS or ch in _REAL_CONVERSIONS:
            _next_arg(remaining, fmt)
            capacity += max(MAX_NUMBER_DIGITS, width)
            in_format = False
        elif ch == "c":
            _next_arg(remaining, fmt)
            capacity += 1 + lcount
            in_format = False
        elif ch == "s":
            text = str(_next_arg(remaining, fmt))
            if precision >= 0:
                capacity += precision
            else:
                length = max(len(text), width)
                if lcount > 0:
                    length *= 2
                capacity += length
            in_format = False
    return capacity


class StringBuffer:
    """A string that grows by appending characters, strings or formatted text."""

    def __init__(self) -> None:
        self._chars: List[str] = []

    def push_char(self, ch: str) -> None:
        """Append the single character ``ch``."""
        if not isinstance(ch, str) or len(ch) != 1:
            raise ValueError("push_char: argument must be a single character")
        self._chars.append(ch)

    def pop_char(self) -> str:
        """Remove and return the last character."""
        if not self._chars:
            raise IndexError("pop_char: StringBuffer is empty")
        return self._chars.pop()

    def append(self, s: str) -> None:
        """Append the string ``s``."""
        if s is None:
            raise TypeError("append: String value is None")
        self._chars.extend(s)

    def printf(self, fmt: str, *args: Any) -> None:
        """Append ``fmt`` expanded printf-style with ``args``."""
        self._chars.extend(fmt % args)

    def clear(self) -> None:
        """Remove every character."""
        self._chars.clear()

    def __len__(self) -> int:
        return len(self._chars)

    def __bool__(self) -> bool:
        return bool(self._chars)

    def __str__(self) -> str:
        return "".join(self._chars)

    def __repr__(self) -> str:
        return f"StringBuffer({str(self)!r})"