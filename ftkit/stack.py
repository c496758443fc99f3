"""A stack built on doubly linked nodes, with rotation and transfer operations."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any, Optional

EqualityTest = Callable[[Any, Any], bool]


@dataclass(eq=False)
class StackNode:
    """One node of a :class:`Stack`; ``prev`` points towards the bottom."""

    content: Any
    next: Optional[StackNode] = field(default=None, repr=False)
    prev: Optional[StackNode] = field(default=None, repr=False)
    _owner: Optional[Stack] = field(default=None, init=False, repr=False)


class Stack:
    """A stack keeping its length, its top node and its bottom node."""

    def __init__(self) -> None:
        self.length = 0
        self.top: Optional[StackNode] = None
        self.bottom: Optional[StackNode] = None

    def _adopt(self, node: StackNode) -> None:
        if not isinstance(node, StackNode):
            raise TypeError("expected a StackNode")
        if node._owner is not None:
            raise ValueError("node already belongs to a stack")
        node._owner = self

    def push(self, node: StackNode) -> bool:
        """Place ``node`` on top of the stack."""
        self._adopt(node)
        node.next = None
        node.prev = self.top
        if self.top is None:
            self.bottom = node
        else:
            self.top.next = node
        self.top = node
        self.length += 1
        return True

    def pop(self) -> Optional[StackNode]:
        """Remove and return the top node, or None when the stack is empty."""
        if self.top is None:
            return None
        return self.detach(self.top)

    def detach(self, node: StackNode) -> StackNode:
        """Unlink ``node`` from wherever it sits in this stack and return it."""
        if not isinstance(node, StackNode) or node._owner is not self:
            raise ValueError("node does not belong to this stack")
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
        node._owner = None
        return node

    def swap_first(self) -> bool:
        """Swap the two topmost nodes; False if there are fewer than two."""
        if self.length < 2:
            return False
        self.push(self.detach(self.top.prev))
        return True

    def rotate(self, reverse: bool = False) -> bool:
        """Move the top node to the bottom, or the bottom node to the top.

        Returns False, changing nothing, if there are fewer than two nodes.
        """
        if self.length < 2:
            return False
        if reverse:
            self.push(self.detach(self.bottom))
            return True
        node = self.detach(self.top)
        node._owner = self
        node.next = self.bottom
        self.bottom.prev = node
        self.bottom = node
        self.length += 1
        return True

    def transfer_top(self, other: Stack) -> bool:
        """Move the top node of this stack onto ``other``; False if empty."""
        if not isinstance(other, Stack):
            raise TypeError("expected a Stack")
        if not self.length:
            return False
        node = self.pop()
        try:
            other.push(node)
        except BaseException:
            self.push(node)
            raise
        return True

    def includes(self, content: Any, is_equal: EqualityTest = operator.eq) -> bool:
        """True if some node's content is equal to ``content``.

        ``is_equal`` is called as ``is_equal(node_content, content)``; the
        search works inwards from both ends of the stack.
        """
        top, bottom = self.top, self.bottom
        start, end = 0, self.length - 1
        while start <= end:
            if is_equal(top.content, content):
                return True
            if top is not bottom and is_equal(bottom.content, content):
                return True
            if top.prev is not None:
                top = top.prev
            if bottom.next is not None:
                bottom = bottom.next
            start += 1
            end -= 1
        return False

    def push_unique(
        self, node: StackNode, is_equal: EqualityTest = operator.eq
    ) -> bool:
        """Push ``node`` unless an equal content is already present."""
        if not isinstance(node, StackNode):
            raise TypeError("expected a StackNode")
        if self.includes(node.content, is_equal):
            return False
        return self.push(node)

    def destroy(self, delete: Optional[Callable[[Any], None]] = None) -> bool:
        """Pop every node, passing each content to ``delete``, top first."""
        while self.length:
            node = self.pop()
            if delete is not None:
                delete(node.content)
        return True

    def __len__(self) -> int:
        return self.length

    def __iter__(self) -> Iterator[Any]:
        """Yield contents from the top down to the bottom."""
        node = self.top
        while node is not None:
            yield node.content
            node = node.prev

    def __repr__(self) -> str:
        return f"Stack({list(self)!r})"