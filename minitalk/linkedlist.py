"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Node:
    """One link of a list: its content and the node after it."""

    content: Any
    next: Optional[Node] = None


Deleter = Optional[Callable[[Any], None]]


class LinkedList:
    """A singly linked list that hands contents to a deleter when it drops them."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for item in items:
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the start and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append ``content`` at the end and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def last(self) -> Optional[Node]:
        """The final node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def remove_first(self, deleter: Deleter = None) -> None:
        """Unlink the first node and pass its content to ``deleter``.

        Raises IndexError when the list is empty.
        """
        if self.head is None:
            raise IndexError("remove_first from an empty list")
        node = self.head
        self.head = node.next
        node.next = None
        if deleter is not None:
            deleter(node.content)

    def clear(self, deleter: Deleter = None) -> None:
        """Drop every node, passing each content to ``deleter`` in order."""
        node = self.head
        self.head = None
        while node is not None:
            following = node.next
            node.next = None
            if deleter is not None:
                deleter(node.content)
            node = following

    def for_each(self, func: Callable[[Any], None]) -> None:
        """Call ``func`` on every content in order."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any], deleter: Deleter = None) -> LinkedList:
        """Return a new list of ``func(content)`` for every content.

        If ``func`` returns None for any content, the contents built so far
        are passed to ``deleter`` and ValueError is raised.
        """
        result = LinkedList()
        for content in self:
            mapped = func(content)
            if mapped is None:
                result.clear(deleter)
                raise ValueError(f"mapping function returned None for {content!r}")
            result.push_back(mapped)
        return result