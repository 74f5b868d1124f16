"""A singly linked list with positional insertion and removal."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from itertools import islice
from typing import Any, Iterable, Iterator, Optional, TextIO


@dataclass
class _Node:
    value: Any
    next: Optional["_Node"] = None


class LinkedList:
    """A singly linked list of values.

    Out-of-range positions given to ``add`` and ``drop`` are ignored;
    out-of-range reads and writes through indexing raise ``IndexError``.
    """

    def __init__(self, values: Optional[Iterable[Any]] = None) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        if values is not None:
            for value in values:
                self.add_last(value)

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.value

    def _node_at(self, pos: int) -> Optional[_Node]:
        if not isinstance(pos, int) or isinstance(pos, bool):
            raise TypeError(f"position must be an integer, not {type(pos).__name__}")
        if 0 <= pos < self._size:
            return next(islice(self._nodes(), pos, None))
        return None

    def __getitem__(self, pos: int) -> Any:
        node = self._node_at(pos)
        if node is None:
            raise IndexError("access out of range")
        return node.value

    def __setitem__(self, pos: int, value: Any) -> None:
        node = self._node_at(pos)
        if node is None:
            raise IndexError("access out of range")
        node.value = value

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def show(self, file: Optional[TextIO] = None) -> None:
        """Write every value followed by a space, then a newline."""
        out = sys.stdout if file is None else file
        out.write("".join(f"{value} " for value in self) + "\n")

    def clear(self) -> None:
        """Remove every node."""
        self._head = None
        self._tail = None
        self._size = 0

    def add_first(self, value: Any) -> None:
        """Insert ``value`` at the front."""
        node = _Node(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def add_last(self, value: Any) -> None:
        """Append ``value`` at the end."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def add(self, value: Any, pos: int) -> None:
        """Insert ``value`` before the element at ``pos``.

        Position 0 always inserts at the front; any other position must name
        an existing element, otherwise nothing happens.
        """
        if pos == 0:
            self.add_first(value)
            return
        previous = self._node_at(pos - 1) if 0 < pos < self._size else None
        if previous is None:
            return
        previous.next = _Node(value, previous.next)
        self._size += 1

    def drop_first(self) -> None:
        """Remove the first element, if any."""
        if self._head is None:
            return
        self._head = self._head.next
        if self._head is None:
            self._tail = None
        self._size -= 1

    def drop_last(self) -> None:
        """Remove the last element, if any."""
        if self._head is None:
            return
        if self._head.next is None:
            self.clear()
            return
        penultimate = self._node_at(self._size - 2)
        assert penultimate is not None
        penultimate.next = None
        self._tail = penultimate
        self._size -= 1

    def drop(self, pos: int) -> None:
        """Remove the element at ``pos``; out-of-range positions are ignored."""
        if pos == 0:
            self.drop_first()
            return
        previous = self._node_at(pos - 1) if 0 < pos < self._size else None
        if previous is None or previous.next is None:
            return
        removed = previous.next
        previous.next = removed.next
        if removed is self._tail:
            self._tail = previous
        self._size -= 1