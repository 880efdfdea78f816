"""A binary search tree whose items are ordered by comparison and looked up by key.

Items must support ``<`` and ``>`` against each other and expose a ``key``
attribute (a string) that agrees with that ordering.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class EmptyCollectionError(Exception):
    """Raised when an operation needs at least one item but the collection is empty."""

    def __init__(self, message: str = "Collection is empty.") -> None:
        super().__init__(message)


@dataclass
class _Node(Generic[T]):
    data: T
    left: Optional["_Node[T]"] = None
    right: Optional["_Node[T]"] = None


def _key_of(item: Any) -> str:
    return item.key


class BSTree(Generic[T]):
    """An unbalanced binary search tree with replace-on-duplicate insertion."""

    def __init__(self) -> None:
        self._root: Optional[_Node[T]] = None
        self._count = 0

    def insert(self, data: T) -> None:
        """Insert ``data``; an item equal to an existing one replaces it."""
        if self._root is None:
            self._root = _Node(data)
            self._count += 1
            return
        node = self._root
        while True:
            if data < node.data:
                if node.left is None:
                    node.left = _Node(data)
                    self._count += 1
                    return
                node = node.left
            elif data > node.data:
                if node.right is None:
                    node.right = _Node(data)
                    self._count += 1
                    return
                node = node.right
            else:
                node.data = data
                return

    def _locate(self, key: str) -> tuple[Optional[_Node[T]], Optional[_Node[T]]]:
        """Return (node, parent) for ``key``; node is None when absent."""
        parent: Optional[_Node[T]] = None
        node = self._root
        while node is not None:
            node_key = _key_of(node.data)
            if key == node_key:
                return node, parent
            parent = node
            node = node.left if key < node_key else node.right
        return None, parent

    def _replace_child(
        self, parent: Optional[_Node[T]], old: _Node[T], new: Optional[_Node[T]]
    ) -> None:
        if parent is None:
            self._root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def remove(self, key: str) -> None:
        """Remove the item with ``key`` if present; do nothing otherwise."""
        node, parent = self._locate(key)
        if node is None:
            return
        if node.left is not None and node.right is not None:
            # Copy the in-order successor into this node, then unlink the successor.
            succ_parent = node
            succ = node.right
            while succ.left is not None:
                succ_parent = succ
                succ = succ.left
            node.data = succ.data
            if succ_parent is node:
                succ_parent.right = succ.right
            else:
                succ_parent.left = succ.right
        else:
            child = node.left if node.left is not None else node.right
            self._replace_child(parent, node, child)
        self._count -= 1

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        node, _ = self._locate(key)
        return node is not None

    def find(self, key: str) -> Optional[T]:
        """Return the item with ``key``, or None if there is none."""
        node, _ = self._locate(key)
        return node.data if node is not None else None

    def find_min(self) -> T:
        """Return the smallest item; raise EmptyCollectionError if empty."""
        if self._root is None:
            raise EmptyCollectionError()
        node = self._root
        while node.left is not None:
            node = node.left
        return node.data

    def find_max(self) -> T:
        """Return the largest item; raise EmptyCollectionError if empty."""
        if self._root is None:
            raise EmptyCollectionError()
        node = self._root
        while node.right is not None:
            node = node.right
        return node.data

    def clear(self) -> None:
        """Remove every item."""
        self._root = None
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        return self.inorder()

    def inorder(self) -> Iterator[T]:
        """Yield items in sorted order."""
        stack: list[_Node[T]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right

    def preorder(self) -> Iterator[T]:
        """Yield items node first, then left subtree, then right subtree."""
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node.data
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def postorder(self) -> Iterator[T]:
        """Yield items left subtree first, then right subtree, then node."""
        reversed_order: list[T] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            reversed_order.append(node.data)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        yield from reversed(reversed_order)

    @staticmethod
    def _format(items: Iterator[T]) -> str:
        return "".join(f"{item} " for item in items)

    def format_inorder(self) -> str:
        """Each item in sorted order, each followed by a space."""
        return self._format(self.inorder())

    def format_preorder(self) -> str:
        """Each item in preorder, each followed by a space."""
        return self._format(self.preorder())

    def format_postorder(self) -> str:
        """Each item in postorder, each followed by a space."""
        return self._format(self.postorder())

    def __str__(self) -> str:
        if self._count == 0:
            return "Empty tree\n"
        return self.format_inorder()