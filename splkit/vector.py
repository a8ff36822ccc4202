"""An array-like indexed collection with range-checked access."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, List, Optional


class Vector:
    """An ordered collection whose indices run from 0 to ``len(vector) - 1``.

    Unlike a list, negative indices are rejected rather than counted from the end.
    """

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._elements: List[Any] = [] if items is None else list(items)

    def _check_index(self, index: int, where: str) -> None:
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeError(f"{where}: Index must be an integer")
        if index < 0 or index >= len(self._elements):
            raise IndexError(f"{where}: Index value out of range")

    def add(self, value: Any) -> None:
        """Append ``value`` to the end of the vector."""
        self._elements.append(value)

    def insert(self, index: int, value: Any) -> None:
        """Insert ``value`` before position ``index``; ``index`` may equal the length."""
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeError("insert: Index must be an integer")
        if index < 0 or index > len(self._elements):
            raise IndexError("insert: Index value out of range")
        self._elements.insert(index, value)

    def remove(self, index: int) -> None:
        """Delete the element at position ``index``."""
        self._check_index(index, "remove")
        del self._elements[index]

    def clear(self) -> None:
        """Remove every element."""
        self._elements.clear()

    def copy(self) -> "Vector":
        """Return a shallow copy; the elements themselves are shared."""
        return Vector(self._elements)

    def to_list(self) -> List[Any]:
        """Return a new list holding the elements in order."""
        return list(self._elements)

    def __getitem__(self, index: int) -> Any:
        self._check_index(index, "get")
        return self._elements[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._check_index(index, "set")
        self._elements[index] = value

    def __len__(self) -> int:
        return len(self._elements)

    def __bool__(self) -> bool:
        return bool(self._elements)

    def __iter__(self) -> Iterator[Any]:
        """Iterate over a snapshot of the elements taken when iteration starts."""
        return iter(list(self._elements))

    def __repr__(self) -> str:
        return f"Vector({self._elements!r})"