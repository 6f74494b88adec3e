"""Array-backed binary max-heap keyed on element priority."""

from __future__ import annotations

from collections.abc import Iterator

from pqbench.element import Element


def _parent(index: int) -> int:
    return (index - 1) // 2


class BinaryHeap:
    """A max-heap: the element with the highest priority is at the root."""

    def __init__(self) -> None:
        self._items: list[Element] = []

    def _swap(self, i: int, j: int) -> None:
        items = self._items
        items[i], items[j] = items[j], items[i]

    def _sift_up(self, index: int) -> None:
        items = self._items
        while index > 0 and items[_parent(index)].priority < items[index].priority:
            parent = _parent(index)
            self._swap(index, parent)
            index = parent

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            largest = index
            left = 2 * index + 1
            right = left + 1
            if left < size and items[left].priority > items[largest].priority:
                largest = left
            if right < size and items[right].priority > items[largest].priority:
                largest = right
            if largest == index:
                return
            self._swap(index, largest)
            index = largest

    def _find_index(self, value: int) -> int:
        return next(
            (i for i, item in enumerate(self._items) if item.value == value), -1
        )

    def insert(self, value: int, priority: int) -> None:
        """Add a value with the given priority."""
        self._items.append(Element(value, priority))
        self._sift_up(len(self._items) - 1)

    def extract_max(self) -> Element:
        """Remove and return the element with the highest priority."""
        if not self._items:
            raise IndexError("Heap is empty!")
        last = self._items.pop()
        if not self._items:
            return last
        top = self._items[0]
        self._items[0] = last
        self._sift_down(0)
        return top

    def peek(self) -> Element:
        """Return the element with the highest priority without removing it."""
        if not self._items:
            raise IndexError("Heap is empty!")
        return self._items[0]

    def modify_key(self, value: int, new_priority: int) -> None:
        """Change the priority of the first element holding ``value``."""
        index = self._find_index(value)
        if index == -1:
            raise KeyError(value)
        old_priority = self._items[index].priority
        self._items[index] = Element(value, new_priority)
        if new_priority > old_priority:
            self._sift_up(index)
        else:
            self._sift_down(index)

    def is_empty(self) -> bool:
        return not self._items

    def copy(self) -> BinaryHeap:
        """Return an independent heap with the same contents."""
        clone = BinaryHeap()
        clone._items = list(self._items)
        return clone

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Element]:
        """Yield elements in their array (level) order."""
        return iter(list(self._items))

    def __str__(self) -> str:
        body = "".join(f"{item} " for item in self._items)
        return f"Heap (value:priority): {body}"