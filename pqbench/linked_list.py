"""Priority queue kept as a singly linked list sorted by priority."""

from __future__ import annotations

import os
from collections.abc import Iterator

from pqbench.element import Element


class _Node:
    __slots__ = ("value", "priority", "next")

    def __init__(self, value: int, priority: int, next_node: _Node | None = None):
        self.value = value
        self.priority = priority
        self.next = next_node


class LinkedList:
    """Linked list kept in non-increasing priority order.

    Elements with equal priority keep their insertion order.
    """

    def __init__(self) -> None:
        self._head: _Node | None = None

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def insert(self, value: int, priority: int) -> None:
        """Insert after every element whose priority is at least ``priority``."""
        head = self._head
        if head is None or priority > head.priority:
            self._head = _Node(value, priority, head)
            return
        current = head
        while current.next is not None and current.next.priority >= priority:
            current = current.next
        current.next = _Node(value, priority, current.next)

    def extract_max(self) -> Element:
        """Remove and return the element with the highest priority."""
        head = self._head
        if head is None:
            raise IndexError("Queue is empty")
        self._head = head.next
        return Element(head.value, head.priority)

    def peek(self) -> Element:
        """Return the element with the highest priority without removing it."""
        head = self._head
        if head is None:
            raise IndexError("Queue is empty")
        return Element(head.value, head.priority)

    def modify_key(self, value: int, new_priority: int) -> None:
        """Give the first element holding ``value`` a new priority."""
        previous: _Node | None = None
        for node in self._nodes():
            if node.value == value:
                if previous is None:
                    self._head = node.next
                else:
                    previous.next = node.next
                self.insert(value, new_priority)
                return
            previous = node
        raise KeyError(value)

    def is_empty(self) -> bool:
        return self._head is None

    def copy(self) -> LinkedList:
        """Return an independent list with the same contents."""
        clone = LinkedList()
        tail: _Node | None = None
        for node in self._nodes():
            fresh = _Node(node.value, node.priority)
            if tail is None:
                clone._head = fresh
            else:
                tail.next = fresh
            tail = fresh
        return clone

    def save_to_file(self, path: str | os.PathLike[str]) -> None:
        """Write one ``value priority`` line per element, in queue order."""
        with open(path, "w", encoding="ascii") as handle:
            for node in self._nodes():
                handle.write(f"{node.value} {node.priority}\n")

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Element]:
        for node in self._nodes():
            yield Element(node.value, node.priority)

    def __str__(self) -> str:
        body = "".join(f"{item} " for item in self)
        return f"Queue (value:priority): {body}"