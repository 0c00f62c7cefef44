"""A doubly linked stack of arbitrary contents, with rotation and transfer operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

EqualFn = Callable[[Any, Any], Any]


@dataclass(eq=False, repr=False)
class StackNode:
    """One element of a :class:`Stack`; ``prev`` points towards the bottom."""

    content: Any
    next: Optional["StackNode"] = None
    prev: Optional["StackNode"] = None

    def __repr__(self) -> str:
        return f"StackNode({self.content!r})"


class Stack:
    """A stack built from :class:`StackNode` objects linked in both directions."""

    def __init__(self) -> None:
        self.length = 0
        self.bottom: Optional[StackNode] = None
        self.top: Optional[StackNode] = None

    def push(self, node: StackNode) -> None:
        """Place ``node`` on top of the stack."""
        if node is None:
            raise TypeError("push needs a node")
        node.next = None
        node.prev = self.top
        if not self.length:
            self.bottom = node
        else:
            self.top.next = node
        self.top = node
        self.length += 1

    def pop(self) -> StackNode:
        """Remove and return the top node."""
        if self.top is None:
            raise IndexError("pop from an empty stack")
        return self.detach_node(self.top)

    def detach_node(self, node: StackNode) -> StackNode:
        """Unlink ``node`` from the stack and return it with its links cleared."""
        if node is None:
            raise TypeError("detach_node needs a node")
        if not self.length:
            raise IndexError("detach from an empty stack")
        if node.prev is not None:
            node.prev.next = node.next
        if node.next is not None:
            node.next.prev = node.prev
        if self.top is node:
            self.top = node.prev
        if self.bottom is node:
            self.bottom = node.next
        self.length -= 1
        node.next = None
        node.prev = None
        return node

    def swap_first_node(self) -> bool:
        """Exchange the two top nodes; False when there are fewer than two."""
        if self.length < 2:
            return False
        self.push(self.detach_node(self.top.prev))
        return True

    def rotate(self, reverse: bool = False) -> bool:
        """Move the top node to the bottom, or the bottom to the top when ``reverse``.

        Returns False when there are fewer than two nodes.
        """
        if self.length < 2:
            return False
        if reverse:
            self.push(self.detach_node(self.bottom))
            return True
        node = self.detach_node(self.top)
        node.next = self.bottom
        self.bottom.prev = node
        self.bottom = node
        self.length += 1
        return True

    def transfer_top(self, other: "Stack") -> bool:
        """Pop the top node and push it onto ``other``; False when this stack is empty."""
        if other is None:
            raise TypeError("transfer_top needs a target stack")
        if not self.length:
            return False
        other.push(self.pop())
        return True

    def includes(self, content: Any, is_equal: EqualFn) -> bool:
        """Tell whether any node's content matches ``content`` under ``is_equal``.

        The search works inwards from the top and the bottom at once.
        """
        if not self.length:
            return False
        top, bottom = self.top, self.bottom
        for _ in range((self.length + 1) // 2):
            if is_equal(top.content, content):
                return True
            if top is not bottom and is_equal(bottom.content, content):
                return True
            if top.prev is not None:
                top = top.prev
            if bottom.next is not None:
                bottom = bottom.next
        return False

    def push_unique(self, node: StackNode, is_equal: EqualFn) -> bool:
        """Push ``node`` unless an equal content is already on the stack."""
        if self.includes(node.content, is_equal):
            return False
        self.push(node)
        return True

    def destroy(self, delete: Optional[Callable[[Any], Any]]) -> None:
        """Pop every node, top first, handing each content to ``delete``."""
        while self.length:
            node = self.pop()
            if delete is not None:
                delete(node.content)

    def __len__(self) -> int:
        return self.length

    def __iter__(self) -> Iterator[Any]:
        """Yield contents from top to bottom."""
        node = self.top
        while node is not None:
            yield node.content
            node = node.prev

    def __repr__(self) -> str:
        return f"Stack([{', '.join(map(repr, self))}])"