"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class ListNode:
    """One link of a :class:`LinkedList`."""

    content: Any
    next: Optional[ListNode] = None


def _require_node(node: object) -> ListNode:
    if not isinstance(node, ListNode):
        raise TypeError("expected a ListNode")
    return node


class LinkedList:
    """A singly linked list, reachable from its head node."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[ListNode] = None
        tail: Optional[ListNode] = None
        for item in items:
            node = ListNode(item)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[ListNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def add_front(self, node: ListNode) -> None:
        """Make ``node`` the new head of the list."""
        node = _require_node(node)
        if self.head is not None:
            node.next = self.head
        self.head = node

    def add_back(self, node: ListNode) -> None:
        """Attach ``node``, together with any nodes after it, at the end."""
        node = _require_node(node)
        last = self.last()
        if last is None:
            self.head = node
        else:
            last.next = node

    def last(self) -> Optional[ListNode]:
        """Return the last node, or None when the list is empty."""
        last = None
        for last in self._nodes():
            pass
        return last

    def clear(self, delete: Optional[Callable[[Any], None]] = None) -> None:
        """Remove every node, passing each content to ``delete`` in order."""
        node = self.head
        self.head = None
        while node is not None:
            following = node.next
            node.next = None
            if delete is not None:
                delete(node.content)
            node = following

    def iterate(self, f: Callable[[Any], Any]) -> None:
        """Call ``f`` on each content, head first."""
        for content in self:
            f(content)

    def map(
        self,
        f: Callable[[Any], Any],
        delete: Optional[Callable[[Any], None]] = None,
    ) -> LinkedList:
        """Return a new list holding ``f(content)`` for each content.

        If ``f`` raises, the contents already produced are passed to
        ``delete`` and the exception propagates.
        """
        result = LinkedList()
        tail: Optional[ListNode] = None
        try:
            for content in self:
                node = ListNode(f(content))
                if tail is None:
                    result.head = node
                else:
                    tail.next = node
                tail = node
        except BaseException:
            result.clear(delete)
            raise
        return result

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"