"""A circular doubly linked list of named nodes."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional, TextIO


@dataclass(eq=False)
class Node:
    """A named node linked to its neighbours."""

    name: str
    next: Optional[Node] = field(default=None, repr=False)
    prev: Optional[Node] = field(default=None, repr=False)


class CircleList:
    """A circular doubly linked list; new nodes go just before the head."""

    def __init__(self, items: Iterable[str] = ()) -> None:
        self.head: Optional[Node] = None
        self._size = 0
        self.add_items(items)

    def add_node(self, node: Node) -> Node:
        """Append a node at the end of the circle."""
        if self.head is None:
            node.prev = node.next = node
            self.head = node
        else:
            tail = self.head.prev
            tail.next = node
            node.prev = tail
            node.next = self.head
            self.head.prev = node
        self._size += 1
        return node

    def add_items(self, items: Iterable[str]) -> None:
        """Append a node for each name."""
        for name in items:
            self.add_node(Node(name))

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        for _ in range(self._size):
            yield node
            node = node.next

    def get_node(self, name: str) -> Optional[Node]:
        """Return the first node with this name, or None."""
        return next((node for node in self._nodes() if node.name == name), None)

    def delete_node(self, name: str) -> bool:
        """Unlink the first node with this name; return whether one was found."""
        node = self.get_node(name)
        if node is None:
            return False
        if self._size == 1:
            self.head = None
        else:
            node.prev.next = node.next
            node.next.prev = node.prev
            if node is self.head:
                self.head = node.next
        node.prev = node.next = None
        self._size -= 1
        return True

    def show(self, out: Optional[TextIO] = None) -> None:
        """Write each name on its own line, starting at the head."""
        out = sys.stdout if out is None else out
        for name in self:
            print(name, file=out)

    def __iter__(self) -> Iterator[str]:
        return (node.name for node in self._nodes())

    def __len__(self) -> int:
        return self._size