"""A small reporter for module self-tests that prints failures and totals."""

from __future__ import annotations

import sys
from typing import Any, Callable, Optional, TextIO

from splkit.strlib import quote_string


def _starts_with_type_cast(value: str) -> bool:
    if not value.startswith("("):
        return False
    for i, ch in enumerate(value[1:], start=1):
        if ch == ")":
            return i > 1 and i + 1 < len(value)
        if not (ch.isascii() and ch.isalpha()):
            return False
    return False


def classify_value_type(value: str) -> str:
    """Classify the text of an expected value by the kind of comparison it needs.

    Returns one letter: ``N`` (null), ``B`` (boolean), ``C`` (character),
    ``I`` (integer), ``D`` (real), ``S`` (string) or ``P`` (other cast value).
    """
    if value == "NULL":
        return "N"
    if value in ("true", "false") or value.startswith("(bool)"):
        return "B"
    if value.startswith("'") or value.startswith("(char)"):
        return "C"
    if value.startswith("(int)"):
        return "I"
    if value.startswith("(double)"):
        return "D"
    if value.startswith("(string)"):
        return "S"
    if _starts_with_type_cast(value):
        return "P"
    kind = "I"
    for ch in value:
        if ch in ".Ee":
            kind = "D"
        elif not (ch.isascii() and ch.isdigit()) and ch not in "+-":
            return "S"
    return kind


def _kind_of(expected: Any) -> str:
    if expected is None:
        return "N"
    if isinstance(expected, bool):
        return "B"
    if isinstance(expected, int):
        return "I"
    if isinstance(expected, float):
        return "D"
    if isinstance(expected, str):
        return "S"
    return "P"


def _string_text(value: Any) -> str:
    return quote_string(value) if isinstance(value, str) else repr(value)


class TestReport:
    """Collects the results of checks made while testing one module at a time."""

    __test__ = False

    def __init__(self, out: Optional[TextIO] = None, verbose: bool = False) -> None:
        self.out = sys.stdout if out is None else out
        self.verbose = verbose
        self.indentation = 0
        self.error_count = 0
        self.module_name: Optional[str] = None
        self._last_module: Optional[str] = None
        self._first = True

    def test_module(self, name: str, fn: Callable[[], Any]) -> int:
        """Run ``fn`` as the tests of module ``name`` and return its error count.

        A leading ``test`` is dropped from the name.  ``fn`` takes no arguments.
        """
        self.module_name = name[4:] if name.startswith("test") else name
        self.indentation = 0
        self.error_count = 0
        fn()
        plural = "" if self.error_count == 1 else "s"
        self.out.write(
            f"Module {self.module_name}: {self.error_count} error{plural}\n"
        )
        return self.error_count

    def check(self, expression: str, actual: Any, expected: Any) -> bool:
        """Compare ``actual`` with ``expected`` and report the outcome.

        ``expression`` is the text shown for the check.  Returns True on success.
        """
        kind = _kind_of(expected)
        if kind == "N":
            passed = actual is None
            shown, got = "NULL", str(actual)
        elif kind == "B":
            passed = bool(actual) == expected
            shown = "true" if expected else "false"
            got = "true" if actual else "false"
        elif kind == "I":
            passed = actual == expected
            shown, got = str(expected), str(actual)
        elif kind == "D":
            passed = actual == expected
            shown = "%g" % expected
            got = "%g" % actual if isinstance(actual, (int, float)) else repr(actual)
        elif kind == "S":
            passed = actual == expected
            shown, got = _string_text(expected), _string_text(actual)
        else:
            passed = actual is expected
            shown, got = repr(expected), repr(actual)
        self._report(passed, expression, shown, got)
        return passed

    def report_error(self, msg: Optional[str]) -> None:
        """Count an error, printing ``msg`` unless it is None."""
        if msg is not None:
            self._display_header()
            self.out.write(f"?? {self._indent()}{msg} ??\n")
        self.error_count += 1

    def report_message(self, msg: str) -> None:
        """Print ``msg`` when verbose reporting is on."""
        if self.verbose:
            self._display_header()
            self.out.write(f"   {self._indent()}{msg}\n")

    def adjust_indentation(self, delta: int) -> None:
        """Change the indentation of report lines by ``delta`` spaces."""
        self.indentation += delta

    def _indent(self) -> str:
        return " " * max(self.indentation, 0)

    def _display_header(self) -> None:
        if self.module_name != self._last_module:
            if not self._first:
                self.out.write("\n")
            self.out.write(f"Testing {self.module_name}:\n")
            self._last_module = self.module_name
            self._first = False

    def _report(self, passed: bool, expression: str, shown: str, got: str) -> None:
        if passed:
            if self.verbose:
                self._display_header()
                self.out.write(f"   {self._indent()}{expression} -> {shown}\n")
            return
        self._display_header()
        self.out.write(
            f"?? {self._indent()}{expression} -> {got} (should be {shown}) ??\n"
        )
        self.error_count += 1