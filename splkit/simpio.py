"""Line-oriented input helpers: reading lines and prompting for numbers."""

from __future__ import annotations

import re
import sys
import weakref
from typing import Callable, List, Optional, Pattern, TextIO, TypeVar

T = TypeVar("T")

_WS = "[ \t\n\v\f\r]*"
_INTEGER_RE = re.compile(_WS + r"([+-]?[0-9]+)" + _WS + r"(.)?", re.DOTALL)
_REAL_RE = re.compile(
    _WS
    + r"([+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    + r"|inf(?:inity)?|nan))"
    + _WS
    + r"(.)?",
    re.DOTALL | re.IGNORECASE,
)

_pending: "weakref.WeakKeyDictionary[TextIO, str]" = weakref.WeakKeyDictionary()


def _read_char(stream: TextIO) -> str:
    if stream in _pending:
        return _pending.pop(stream)
    return stream.read(1)


def _consume_line_feed(stream: TextIO) -> None:
    """Swallow a ``\\n`` that follows a ``\\r``; leave any other character unread."""
    if stream not in _pending and stream.seekable():
        position = stream.tell()
        if stream.read(1) != "\n":
            stream.seek(position)
        return
    ch = _read_char(stream)
    if ch and ch != "\n":
        _pending[stream] = ch


def read_line(stream: TextIO) -> Optional[str]:
    """Read one line from ``stream`` without its terminator.

    Any of ``\\n``, ``\\r`` or ``\\r\\n`` ends a line.  Returns None when the
    stream is already at end of file.
    """
    chars: List[str] = []
    while True:
        ch = _read_char(stream)
        if ch == "\n" or ch == "":
            break
        if ch == "\r":
            _consume_line_feed(stream)
            break
        chars.append(ch)
    if not chars and ch == "":
        return None
    return "".join(chars)


def get_line(stream: Optional[TextIO] = None) -> Optional[str]:
    """Read one line from ``stream``, standard input by default."""
    return read_line(sys.stdin if stream is None else stream)


def _prompt_number(
    stream: Optional[TextIO],
    out: Optional[TextIO],
    where: str,
    pattern: Pattern[str],
    convert: Callable[[str], T],
    request: str,
) -> T:
    sink = sys.stdout if out is None else out
    while True:
        line = get_line(stream)
        if line is None:
            raise EOFError(f"{where}: unexpected end of file")
        match = pattern.match(line)
        if match is None:
            sink.write(f"{request}\n")
        elif match.group(2) is not None:
            sink.write(f"Unexpected character: '{match.group(2)}'\n")
        else:
            return convert(match.group(1))
        sink.write("Retry: ")


def get_integer(stream: Optional[TextIO] = None, out: Optional[TextIO] = None) -> int:
    """Read lines until one holds a single integer, and return it.

    Complaints and retry prompts are written to ``out`` (standard output by default).
    """
    return _prompt_number(
        stream, out, "get_integer", _INTEGER_RE, int, "Please enter an integer"
    )


def get_long(stream: Optional[TextIO] = None, out: Optional[TextIO] = None) -> int:
    """Read lines until one holds a single integer, and return it."""
    return _prompt_number(
        stream, out, "get_long", _INTEGER_RE, int, "Please enter an integer"
    )


def get_real(stream: Optional[TextIO] = None, out: Optional[TextIO] = None) -> float:
    """Read lines until one holds a single real number, and return it."""
    return _prompt_number(
        stream, out, "get_real", _REAL_RE, float, "Please enter a real number"
    )


def read_lines_from_stream(stream: TextIO) -> List[str]:
    """Read every remaining line of ``stream`` into a list."""
    return list(iter(lambda: read_line(stream), None))


def read_lines_from_file(filename: str) -> List[str]:
    """Read every line of the named file; ``"-"`` means standard input."""
    if filename == "-":
        return read_lines_from_stream(sys.stdin)
    try:
        infile = open(filename, "r", encoding="utf-8", newline="")
    except OSError as exc:
        raise OSError(f"read_lines_from_file: Can't open {filename}") from exc
    with infile:
        return read_lines_from_stream(infile)