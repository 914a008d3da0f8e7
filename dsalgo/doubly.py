"""Doubly linked list with a sentinel header node."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class _Node:
    __slots__ = ("data", "next", "prev")

    def __init__(self, data: int = 0) -> None:
        self.data = data
        self.next: _Node = self
        self.prev: _Node = self


class DoublyLinkedList:
    """Integers linked both ways around a sentinel header."""

    def __init__(self, items: Iterable[int] = ()) -> None:
        self._header = _Node()
        for item in items:
            self.insert_last(item)

    def _link_between(self, item: int, prev: _Node, nxt: _Node) -> None:
        node = _Node(item)
        node.prev, node.next = prev, nxt
        prev.next = node
        nxt.prev = node

    def insert_first(self, item: int) -> None:
        """Put item at the front."""
        self._link_between(item, self._header, self._header.next)

    def insert_last(self, item: int) -> None:
        """Put item at the end."""
        self._link_between(item, self._header.prev, self._header)

    def search(self, item: int) -> int | None:
        """Position of the first element equal to item, or None."""
        for index, value in enumerate(self):
            if value == item:
                return index
        return None

    def __iter__(self) -> Iterator[int]:
        node = self._header.next
        while node is not self._header:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[int]:
        node = self._header.prev
        while node is not self._header:
            yield node.data
            node = node.prev

    def __str__(self) -> str:
        return "".join(f"[{value}] -> " for value in self) + "NULL"

    def format_reverse(self) -> str:
        """The elements from last to first, labelled."""
        body = "".join(f"[{value}] -> " for value in reversed(self))
        return f"Print List Reverse: {body}NULL"

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"