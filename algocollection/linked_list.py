"""A singly linked list of values with positional and value-based edits."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """One cell of a singly linked list."""

    data: Any
    next: Node | None = None


class LinkedList:
    """Singly linked list.

    Value-based operations act on the first node holding the given value;
    positions are 1-based.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def _find(self, target: Any) -> tuple[Node | None, Node]:
        """Return ``(previous, node)`` for the first node holding ``target``."""
        previous: Node | None = None
        for node in self._nodes():
            if node.data == target:
                return previous, node
            previous = node
        raise ValueError(f"{target!r} is not in the list")

    def _node_at(self, position: int) -> Node:
        for index, node in enumerate(self._nodes(), start=1):
            if index == position:
                return node
        raise IndexError(f"position {position} out of range 1..{self._size}")

    def insert_head(self, value: Any) -> None:
        """Put ``value`` at the front."""
        self.head = Node(value, self.head)
        self._size += 1

    def append(self, value: Any) -> None:
        """Put ``value`` at the end."""
        new = Node(value)
        if self.head is None:
            self.head = new
        else:
            tail = self.head
            while tail.next is not None:
                tail = tail.next
            tail.next = new
        self._size += 1

    def insert_before(self, target: Any, value: Any) -> None:
        """Insert ``value`` just before the first node holding ``target``."""
        previous, node = self._find(target)
        if previous is None:
            self.insert_head(value)
            return
        previous.next = Node(value, node)
        self._size += 1

    def insert_after(self, target: Any, value: Any) -> None:
        """Insert ``value`` just after the first node holding ``target``."""
        _, node = self._find(target)
        node.next = Node(value, node.next)
        self._size += 1

    def insert_at(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at ``position`` (1 to len + 1)."""
        if not 1 <= position <= self._size + 1:
            raise IndexError(f"position {position} out of range 1..{self._size + 1}")
        if position == 1:
            self.insert_head(value)
            return
        previous = self._node_at(position - 1)
        previous.next = Node(value, previous.next)
        self._size += 1

    def delete_head(self) -> Any:
        """Remove and return the first value."""
        if self.head is None:
            raise IndexError("delete from an empty list")
        removed = self.head
        self.head = removed.next
        self._size -= 1
        return removed.data

    def delete_tail(self) -> Any:
        """Remove and return the last value."""
        if self.head is None:
            raise IndexError("delete from an empty list")
        if self.head.next is None:
            return self.delete_head()
        previous = self.head
        while previous.next is not None and previous.next.next is not None:
            previous = previous.next
        removed = previous.next
        previous.next = None
        self._size -= 1
        return removed.data

    def delete_before(self, target: Any) -> Any:
        """Remove and return the value just before the first ``target``."""
        previous, _ = self._find(target)
        if previous is None:
            raise ValueError(f"no node before {target!r}")
        if previous is self.head:
            return self.delete_head()
        before = self.head
        while before.next is not previous:
            before = before.next
        before.next = previous.next
        self._size -= 1
        return previous.data

    def delete_after(self, target: Any) -> Any:
        """Remove and return the value just after the first ``target``."""
        _, node = self._find(target)
        removed = node.next
        if removed is None:
            raise ValueError(f"no node after {target!r}")
        node.next = removed.next
        self._size -= 1
        return removed.data

    def delete_at(self, position: int) -> Any:
        """Remove and return the value at ``position`` (1-based)."""
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} out of range 1..{self._size}")
        if position == 1:
            return self.delete_head()
        previous = self._node_at(position - 1)
        removed = previous.next
        previous.next = removed.next
        self._size -= 1
        return removed.data

    def reverse(self) -> None:
        """Reverse the list in place by relinking nodes iteratively."""
        previous: Node | None = None
        current = self.head
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self.head = previous

    def reverse_recursive(self) -> None:
        """Reverse the list in place by relinking nodes recursively."""

        def _reverse(node: Node | None) -> Node | None:
            if node is None or node.next is None:
                return node
            new_head = _reverse(node.next)
            node.next.next = node
            node.next = None
            return new_head

        self.head = _reverse(self.head)

    def display(self) -> str:
        """Render as ``a->b->...->NULL``."""
        return "".join(f"{value}->" for value in self) + "NULL"