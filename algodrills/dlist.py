"""A linked list addressed by position."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class _Node:
    val: int
    next: _Node | None = None


class LinkedList:
    """A singly linked list with positional insertion and deletion.

    Inserting or deleting at an out-of-range index leaves the list unchanged.
    """

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def _node_at(self, index: int) -> _Node:
        node = self._head
        for _ in range(index):
            node = node.next
        return node

    def get(self, index: int) -> int:
        """Return the value at ``index``; raise IndexError when out of range."""
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range for size {self._size}")
        return self._node_at(index).val

    def add_at_head(self, val: int) -> None:
        """Insert ``val`` before the first element."""
        self._head = _Node(val, self._head)
        self._size += 1

    def add_at_tail(self, val: int) -> None:
        """Append ``val`` after the last element."""
        if self._head is None:
            self._head = _Node(val)
        else:
            self._node_at(self._size - 1).next = _Node(val)
        self._size += 1

    def add_at_index(self, index: int, val: int) -> None:
        """Insert ``val`` so that it ends up at ``index``; index may equal the length."""
        if not 0 <= index <= self._size:
            return
        if index == 0:
            self.add_at_head(val)
            return
        prev = self._node_at(index - 1)
        prev.next = _Node(val, prev.next)
        self._size += 1

    def delete_at_index(self, index: int) -> None:
        """Remove the element at ``index`` if it exists."""
        if not 0 <= index < self._size:
            return
        if index == 0:
            self._head = self._head.next
        else:
            prev = self._node_at(index - 1)
            prev.next = prev.next.next
        self._size -= 1