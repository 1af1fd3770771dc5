"""A singly linked list of values and a short demonstration of it."""

import argparse
from dataclasses import dataclass
from typing import Any, Optional

DEMO_SIZE = 10


@dataclass
class _Node:
    data: Any
    next: Optional["_Node"] = None


class LinkedList:
    """A singly linked list."""

    def __init__(self, values=()):
        self._head = None
        tail = None
        for value in values:
            node = _Node(value)
            if tail is None:
                self._head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self):
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self):
        return (node.data for node in self._nodes())

    def __len__(self):
        return sum(1 for _ in self._nodes())

    def __repr__(self):
        return f"LinkedList({list(self)!r})"

    def middle(self):
        """Return the middle value; of two middles, the second."""
        if self._head is None:
            raise IndexError("middle of an empty list")
        slow = fast = self._head
        while fast is not None and fast.next is not None:
            fast = fast.next.next
            slow = slow.next
        return slow.data

    def prepend(self, value):
        """Put ``value`` at the front."""
        self._head = _Node(value, self._head)

    def append(self, value):
        """Put ``value`` at the end."""
        node = _Node(value)
        if self._head is None:
            self._head = node
            return
        last = self._head
        while last.next is not None:
            last = last.next
        last.next = node

    def insert_after(self, position, value):
        """Insert ``value`` after the node at 1-based ``position``.

        Positions below 1 insert after the first node.
        """
        if self._head is None:
            raise IndexError("insert into an empty list")
        current = self._head
        for _ in range(position - 1):
            current = current.next
            if current is None:
                raise IndexError(f"position {position} is out of range")
        current.next = _Node(value, current.next)

    def remove(self, value):
        """Remove the first node holding ``value``; return its index, or None if absent."""
        previous = None
        for index, node in enumerate(self._nodes()):
            if node.data == value:
                if previous is None:
                    self._head = node.next
                else:
                    previous.next = node.next
                return index
            previous = node
        return None

    def clear(self):
        """Remove every node."""
        self._head = None

    def insert_sorted(self, value):
        """Insert ``value`` after the last node not greater than it."""
        if self._head is None or self._head.data > value:
            self.prepend(value)
            return
        current = self._head
        while current.next is not None and current.next.data <= value:
            current = current.next
        current.next = _Node(value, current.next)

    def positions(self, value):
        """Return the 1-based positions at which ``value`` occurs."""
        return [pos for pos, data in enumerate(self, start=1) if data == value]

    def format(self):
        """Return the values each followed by a comma."""
        return "".join(f"{data}," for data in self)


def create_list(size):
    """Return a list holding 0 to ``size - 1``."""
    return LinkedList(range(size))


def _display(items):
    print(items.format() if items else "No Link list ")


def _middle(items):
    print(f"Middle Data = {items.middle()}")


def _count(items):
    print(f"Number of Node = {len(items)}")


def _remove(items, value):
    if not items:
        print("No lInk List")
        return
    size = len(items)
    index = items.remove(value)
    if index == 0:
        print("Only one node" if size == 1 else "Deleting Head Node")
    elif index is not None and index == size - 1:
        print("Deleting Last Node ")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Linked list demonstration.")
    parser.parse_args(argv)
    items = create_list(DEMO_SIZE)
    _display(items)
    _middle(items)
    _count(items)
    items.prepend(-1)
    _display(items)
    _middle(items)
    _count(items)
    _count(items)
    items.append(10)
    _display(items)
    _middle(items)
    _count(items)
    _count(items)
    items.insert_after(5, -3)
    _display(items)
    _middle(items)
    _count(items)
    _count(items)
    _remove(items, 10)
    _display(items)
    _count(items)
    items.clear()
    print("Link List deleted")
    _display(items)
    _count(items)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())