"""Priority queue kept as a singly linked list ordered by priority."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterator, Optional, TextIO

EMPTY_MESSAGE = "Kolejka jest pusta!"


class EmptyQueueError(IndexError):
    """Raised when reading from or removing from an empty queue."""


@dataclass(eq=False)
class Node:
    """One entry of the queue."""

    value: int
    priority: int
    next: Optional["Node"] = None

    def __str__(self) -> str:
        return f"({self.value}, priorytet: {self.priority})"


class LinkedPriorityQueue:
    """Queue where higher priorities come first; equal priorities keep insertion order."""

    def __init__(self) -> None:
        self._head: Optional[Node] = None
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._head is not None

    def _nodes(self) -> Iterator[Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[tuple[int, int]]:
        """Yield (value, priority) pairs from the front of the queue."""
        for node in self._nodes():
            yield node.value, node.priority

    def is_empty(self) -> bool:
        return self._head is None

    def push(self, value: int, priority: int) -> None:
        """Insert behind every entry whose priority is at least ``priority``."""
        new_node = Node(value, priority)
        self._count += 1

        if self._head is None or priority > self._head.priority:
            new_node.next = self._head
            self._head = new_node
            return

        current = self._head
        while current.next is not None and current.next.priority >= priority:
            current = current.next
        new_node.next = current.next
        current.next = new_node

    def pop(self) -> int:
        """Remove the front entry and return its value."""
        if self._head is None:
            raise EmptyQueueError(EMPTY_MESSAGE)
        node = self._head
        self._head = node.next
        self._count -= 1
        return node.value

    def peek(self) -> int:
        """Return the value at the front without removing it."""
        if self._head is None:
            raise EmptyQueueError(EMPTY_MESSAGE)
        return self._head.value

    def change_priority(self, value: int, new_priority: int) -> bool:
        """Give the first entry holding ``value`` a new priority.

        Returns False when no entry holds ``value``.
        """
        previous: Optional[Node] = None
        for node in self._nodes():
            if node.value == value:
                break
            previous = node
        else:
            return False

        if previous is None:
            self._head = node.next
        else:
            previous.next = node.next
        self._count -= 1

        self.push(node.value, new_priority)
        return True

    def describe(self) -> str:
        """Return a one-line text description of the queue contents."""
        if self._head is None:
            return "Kolejka jest pusta."
        entries = " -> ".join(str(node) for node in self._nodes())
        return f"Kolejka zawiera {self._count} elementów: {entries}"

    def show(self, file: Optional[TextIO] = None) -> None:
        """Print the description of the queue."""
        print(self.describe(), file=file if file is not None else sys.stdout)