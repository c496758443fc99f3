"""A doubly linked list with head and tail references."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(eq=False)
class DListNode:
    """One node of a :class:`DoublyLinkedList`."""

    content: Any
    next: Optional[DListNode] = field(default=None, repr=False)
    prev: Optional[DListNode] = field(default=None, repr=False)
    _owner: Optional[DoublyLinkedList] = field(
        default=None, init=False, repr=False
    )


class DoublyLinkedList:
    """A doubly linked list keeping its length, head and tail."""

    def __init__(self) -> None:
        self.length = 0
        self.head: Optional[DListNode] = None
        self.tail: Optional[DListNode] = None

    def _adopt(self, node: DListNode) -> None:
        if not isinstance(node, DListNode):
            raise TypeError("expected a DListNode")
        if node._owner is not None:
            raise ValueError("node already belongs to a list")
        node._owner = self

    def push(self, node: DListNode) -> DListNode:
        """Append ``node`` at the tail and return it."""
        self._adopt(node)
        node.next = None
        node.prev = self.tail
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self.length += 1
        return node

    def push_head(self, node: DListNode) -> DListNode:
        """Insert ``node`` at the head and return it."""
        self._adopt(node)
        node.prev = None
        node.next = self.head
        if self.head is None:
            self.tail = node
        else:
            self.head.prev = node
        self.head = node
        self.length += 1
        return node

    def detach(self, node: DListNode) -> DListNode:
        """Unlink ``node`` from this list and return it."""
        if not isinstance(node, DListNode) or node._owner is not self:
            raise ValueError("node does not belong to this list")
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
        node._owner = None
        return node

    def index(self, idx: int) -> Optional[DListNode]:
        """Return the node at position ``idx`` from the head, or None."""
        if idx < 0 or idx >= self.length:
            return None
        node = self.head
        for _ in range(idx):
            node = node.next
        return node

    def __len__(self) -> int:
        return self.length

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.content
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self.tail
        while node is not None:
            yield node.content
            node = node.prev

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"