"""A last-in, first-out stack of arbitrary values."""

from __future__ import annotations

from typing import Any, Iterator, List


class Stack:
    """A stack whose elements are removed in the reverse order of insertion."""

    def __init__(self) -> None:
        self._elements: List[Any] = []

    def push(self, element: Any) -> None:
        """Place ``element`` on top of the stack."""
        self._elements.append(element)

    def pop(self) -> Any:
        """Remove and return the top element."""
        if not self._elements:
            raise IndexError("pop: Stack is empty")
        return self._elements.pop()

    def peek(self) -> Any:
        """Return the top element without removing it."""
        if not self._elements:
            raise IndexError("peek: Stack is empty")
        return self._elements[-1]

    def clear(self) -> None:
        """Remove every element."""
        self._elements.clear()

    def copy(self) -> "Stack":
        """Return a shallow copy of the stack."""
        duplicate = Stack()
        duplicate._elements = list(self._elements)
        return duplicate

    def __len__(self) -> int:
        return len(self._elements)

    def __bool__(self) -> bool:
        return bool(self._elements)

    def __iter__(self) -> Iterator[Any]:
        """Yield the elements from the top of the stack to the bottom."""
        return reversed(self._elements)

    def __repr__(self) -> str:
        return f"Stack({self._elements!r})"