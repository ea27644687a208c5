"""A singly linked list of arbitrary values."""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass
class Node:
    """One link of the list."""

    data: Any
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list with cheap insertion at both ends."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def push_front(self, data: Any) -> Node:
        """Insert ``data`` at the front and return its node."""
        node = Node(data, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, data: Any) -> Node:
        """Append ``data`` at the end and return its node."""
        node = Node(data)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Optional[Node]:
        """The final node, or ``None`` when the list is empty."""
        return self._tail

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.data

    def for_each(self, f: Optional[Callable[[Any], Any]]) -> None:
        """Call ``f`` on every value in order; nothing happens without ``f``."""
        if f is None:
            return
        for data in self:
            f(data)

    def map(self, f: Callable[[Any], Any]) -> "LinkedList":
        """A new list holding ``f`` applied to every value."""
        if f is None:
            raise TypeError("a mapping function is required")
        return LinkedList(f(data) for data in self)

    def clear(self) -> None:
        """Remove every node."""
        node = self.head
        while node is not None:
            following = node.next
            node.next = None
            node = following
        self.head = None
        self._tail = None
        self._size = 0

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"