"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class Node:
    """One link of a list: its content and the node after it."""

    content: Any
    next: Node | None = None


class LinkedList:
    """A singly linked list built from :class:`Node` links."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self.head: Node | None = None
        for item in items or ():
            self.push_back(item)

    def push_front(self, content: Any) -> Node:
        """Put ``content`` at the front of the list and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Put ``content`` at the end of the list and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def last(self) -> Node | None:
        """The final node, or ``None`` for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def iterate(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every content, front to back."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any]) -> LinkedList:
        """A new list holding ``func(content)`` for every content."""
        return LinkedList(func(content) for content in self)

    def clear(self, deleter: Callable[[Any], Any] | None = None) -> None:
        """Empty the list, handing each content to ``deleter`` first."""
        node = self.head
        self.head = None
        while node is not None:
            following = node.next
            if deleter is not None:
                deleter(node.content)
            node.next = None
            node = following

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"