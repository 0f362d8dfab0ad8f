"""A singly linked list with index-based access and comparator sorting."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any

Comparator = Callable[[Any, Any], int]


class _Node:
    __slots__ = ("element", "next")

    def __init__(self, element: Any, next_node: _Node | None = None) -> None:
        self.element = element
        self.next = next_node


class LinkedList:
    """An ordered collection stored as a chain of nodes.

    Indices are never negative: an index outside ``0 <= index < len(self)``
    raises :class:`IndexError`.
    """

    def __init__(self, iterable: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._size = 0
        for element in iterable:
            self.append(element)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.element
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _check_index(self, index: int) -> None:
        if not isinstance(index, int):
            raise TypeError(f"list indices must be integers, not {type(index).__name__}")
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range for list of length {self._size}")

    def _node_at(self, index: int) -> _Node:
        self._check_index(index)
        node = self._head
        for _ in range(index):
            node = node.next
        return node

    def __getitem__(self, index: int) -> Any:
        return self._node_at(index).element

    def __setitem__(self, index: int, element: Any) -> None:
        self._node_at(index).element = element

    def __contains__(self, element: Any) -> bool:
        return any(item is element or item == element for item in self)

    def append(self, element: Any) -> None:
        """Add an element at the end."""
        self.insert(self._size, element)

    def insert(self, index: int, element: Any) -> None:
        """Insert an element so that it ends up at ``index``; ``index`` may equal the length."""
        if not isinstance(index, int):
            raise TypeError(f"list indices must be integers, not {type(index).__name__}")
        if not 0 <= index <= self._size:
            raise IndexError(f"insert index {index} out of range for list of length {self._size}")
        if index == 0:
            self._head = _Node(element, self._head)
        else:
            previous = self._node_at(index - 1)
            previous.next = _Node(element, previous.next)
        self._size += 1

    def remove_at(self, index: int) -> None:
        """Remove the element at ``index``."""
        self._check_index(index)
        if index == 0:
            self._head = self._head.next
        else:
            previous = self._node_at(index - 1)
            previous.next = previous.next.next
        self._size -= 1

    def pop(self, index: int) -> Any:
        """Remove the element at ``index`` and return it."""
        element = self[index]
        self.remove_at(index)
        return element

    def clear(self) -> None:
        """Remove every element."""
        self._head = None
        self._size = 0

    def index_of(self, element: Any) -> int:
        """Return the index of the first occurrence of ``element``."""
        for position, item in enumerate(self):
            if item is element or item == element:
                return position
        raise ValueError(f"{element!r} is not in list")

    def is_empty(self) -> bool:
        return self._size == 0

    def contains_all(self, other: LinkedList) -> bool:
        """True when both lists have the same length and every element of ``other`` is here."""
        if len(self) != len(other):
            return False
        return all(element in self for element in other)

    def sub_list(self, start: int, stop: int) -> LinkedList:
        """Return a new list holding the elements from ``start`` up to, not including, ``stop``."""
        if not (0 <= start <= self._size and 0 <= stop <= self._size):
            raise IndexError(
                f"sub-list bounds {start}:{stop} out of range for list of length {self._size}"
            )
        result = LinkedList()
        if start < stop:
            for position, element in enumerate(self):
                if position >= stop:
                    break
                if position >= start:
                    result.append(element)
        return result

    def clone(self) -> LinkedList:
        """Return a shallow copy."""
        return self.sub_list(0, self._size)

    def sort(self, compare: Comparator, ascending: bool = True) -> None:
        """Sort in place with a three-way comparator returning negative, zero or positive.

        Uses an exchange sort, so elements that compare equal may change order.
        """
        if compare is None or not callable(compare):
            raise TypeError("compare must be a callable")
        nodes = []
        node = self._head
        while node is not None:
            nodes.append(node)
            node = node.next
        for i, first in enumerate(nodes[:-1]):
            for second in nodes[i + 1:]:
                outcome = compare(second.element, first.element)
                if (outcome < 0) if ascending else (outcome > 0):
                    first.element, second.element = second.element, first.element