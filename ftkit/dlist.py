"""A doubly linked list with head and tail pointers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass(eq=False, repr=False)
class DListNode:
    """One element of a :class:`DList`."""

    content: Any
    next: Optional["DListNode"] = None
    prev: Optional["DListNode"] = None

    def __repr__(self) -> str:
        return f"DListNode({self.content!r})"


class DList:
    """A doubly linked list of :class:`DListNode` objects."""

    def __init__(self) -> None:
        self.length = 0
        self.head: Optional[DListNode] = None
        self.tail: Optional[DListNode] = None

    def detach_node(self, node: DListNode) -> DListNode:
        """Unlink ``node`` from the list and return it with its links cleared."""
        if node is None:
            raise TypeError("detach_node needs a node")
        if not self.length:
            raise IndexError("detach from an empty list")
        if node.prev is not None:
            node.prev.next = node.next
        if node.next is not None:
            node.next.prev = node.prev
        if self.head is node:
            self.head = node.next
        if self.tail is node:
            self.tail = node.prev
        self.length -= 1
        node.next = None
        node.prev = None
        return node

    def push(self, node: DListNode) -> None:
        """Append ``node`` after the tail."""
        if node is None:
            raise TypeError("push needs a node")
        node.next = None
        node.prev = self.tail
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self.length += 1

    def push_head(self, node: DListNode) -> None:
        """Insert ``node`` before the head."""
        if node is None:
            raise TypeError("push_head needs a node")
        node.prev = None
        node.next = self.head
        if self.head is None:
            self.tail = node
        else:
            self.head.prev = node
        self.head = node
        self.length += 1

    def __len__(self) -> int:
        return self.length

    def __iter__(self) -> Iterator[Any]:
        """Yield contents from head to tail."""
        node = self.head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"DList([{', '.join(map(repr, self))}])"