"""A binary search tree keyed by values of a declared base type."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Iterator, Optional, Tuple

from splkit.cmpfn import CompareFn, compare_for_type


class TraversalOrder(enum.Enum):
    """The order in which nodes are visited."""

    PREORDER = "preorder"
    INORDER = "inorder"
    POSTORDER = "postorder"


@dataclass(eq=False)
class BSTNode:
    """A tree node holding a key, an associated value and two children."""

    key: Any
    value: Any = None
    left: Optional["BSTNode"] = None
    right: Optional["BSTNode"] = None

    @property
    def key_string(self) -> str:
        """A string representation of the key."""
        return str(self.key)

    def __repr__(self) -> str:
        return f"BSTNode(key={self.key!r}, value={self.value!r})"


class BST:
    """A binary search tree whose nodes are ordered by a three-way comparison."""

    def __init__(self, base_type: str, compare: Optional[CompareFn] = None) -> None:
        self.base_type = base_type
        self.compare: CompareFn = (
            compare if compare is not None else compare_for_type(base_type)
        )
        self.root: Optional[BSTNode] = None
        self._count = 0

    def _locate(self, key: Any) -> Tuple[Optional[BSTNode], Optional[BSTNode], int]:
        """Return the matching node (or None), its parent and the last comparison."""
        parent: Optional[BSTNode] = None
        node = self.root
        sign = 0
        while node is not None:
            sign = self.compare(key, node.key)
            if sign == 0:
                return node, parent, sign
            parent = node
            node = node.left if sign < 0 else node.right
        return None, parent, sign

    def find(self, key: Any) -> Optional[BSTNode]:
        """Return the node holding ``key``, or None if there is none."""
        return self._locate(key)[0]

    def insert(self, key: Any) -> BSTNode:
        """Return the node for ``key``, creating it if the key is not present."""
        node, parent, sign = self._locate(key)
        if node is not None:
            return node
        node = BSTNode(key)
        if parent is None:
            self.root = node
        elif sign < 0:
            parent.left = node
        else:
            parent.right = node
        self._count += 1
        return node

    def remove(self, key: Any) -> None:
        """Remove the node holding ``key``; do nothing if it is absent."""
        node, parent, _ = self._locate(key)
        if node is None:
            return
        if node.left is None:
            replacement = node.right
        elif node.right is None:
            replacement = node.left
        else:
            succ_parent = node
            succ = node.right
            while succ.left is not None:
                succ_parent = succ
                succ = succ.left
            if succ_parent is not node:
                succ_parent.left = succ.right
                succ.right = node.right
            succ.left = node.left
            replacement = succ
        if parent is None:
            self.root = replacement
        elif parent.left is node:
            parent.left = replacement
        else:
            parent.right = replacement
        node.left = node.right = None
        self._count -= 1

    def clear(self) -> None:
        """Remove every node."""
        self.root = None
        self._count = 0

    def copy(self) -> "BST":
        """Return a tree of the same shape with new nodes sharing keys and values."""
        duplicate = BST(self.base_type, self.compare)
        duplicate._count = self._count
        if self.root is None:
            return duplicate
        duplicate.root = BSTNode(self.root.key, self.root.value)
        pending = [(self.root, duplicate.root)]
        while pending:
            source, target = pending.pop()
            if source.left is not None:
                target.left = BSTNode(source.left.key, source.left.value)
                pending.append((source.left, target.left))
            if source.right is not None:
                target.right = BSTNode(source.right.key, source.right.value)
                pending.append((source.right, target.right))
        return duplicate

    def nodes(self, order: TraversalOrder = TraversalOrder.INORDER) -> Iterator[BSTNode]:
        """Yield the nodes in the given traversal order."""
        order = TraversalOrder(order)
        if order is TraversalOrder.PREORDER:
            return self._preorder()
        if order is TraversalOrder.INORDER:
            return self._inorder()
        return self._postorder()

    def _preorder(self) -> Iterator[BSTNode]:
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def _inorder(self) -> Iterator[BSTNode]:
        stack = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def _postorder(self) -> Iterator[BSTNode]:
        stack = []
        last: Optional[BSTNode] = None
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            top = stack[-1]
            if top.right is not None and top.right is not last:
                node = top.right
            else:
                stack.pop()
                yield top
                last = top

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._count > 0

    def __iter__(self) -> Iterator[Any]:
        """Yield the keys in ascending order."""
        return (node.key for node in self._inorder())

    def __contains__(self, key: Any) -> bool:
        return self.find(key) is not None

    def __repr__(self) -> str:
        return f"BST({self.base_type!r}, {list(self)!r})"