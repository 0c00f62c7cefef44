"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One link of a :class:`LinkedList`."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list reached through its head node.

    The list is built from ``Node`` objects. Its contents are given to the
    constructor, appended in order.
    """

    def __init__(self, *args: Any) -> None:
        self.head: Optional[Node] = None
        for content in args:
            self.add_back(Node(content))

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def add_front(self, node: Optional[Node]) -> None:
        """Make ``node`` the new head.

        On a non-empty list the node's own ``next`` is replaced by the old head.
        """
        if node is None:
            return
        if self.head is not None:
            node.next = self.head
        self.head = node

    def add_back(self, node: Optional[Node]) -> None:
        """Attach ``node``, together with any nodes it links to, after the last node."""
        if node is None:
            return
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node

    def last(self) -> Optional[Node]:
        """Return the last node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Optional[Callable[[Any], Any]]) -> None:
        """Pass every content to ``delete`` in order and empty the list.

        Without a ``delete`` callable the list is left untouched.
        """
        if delete is None or self.head is None:
            return
        node = self.head
        while node is not None:
            following = node.next
            delete(node.content)
            node.next = None
            node = following
        self.head = None

    def iterate(self, f: Optional[Callable[[Any], Any]]) -> None:
        """Call ``f`` on each content in order."""
        if f is None:
            return
        for content in self:
            f(content)

    def map(self, f: Callable[[Any], Any], delete: Callable[[Any], Any]) -> "LinkedList":
        """Return a new list holding ``f(content)`` for each content.

        If ``f`` fails part way, the contents already produced are passed to
        ``delete`` and the error propagates.
        """
        if f is None or delete is None:
            raise TypeError("map needs both a mapping and a delete callable")
        result = LinkedList()
        tail: Optional[Node] = None
        try:
            for content in self:
                node = Node(f(content))
                if tail is None:
                    result.head = node
                else:
                    tail.next = node
                tail = node
        except Exception:
            result.clear(delete)
            raise
        return result

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({', '.join(map(repr, self))})"