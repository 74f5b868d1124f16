"""A short walk through the linked list operations."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence, TextIO

from chainlist.linkedlist import LinkedList

N_NODES = 10


def run(out: Optional[TextIO] = None) -> None:
    """Build a list, edit it step by step and print it after each step."""
    out = sys.stdout if out is None else out
    items = LinkedList()
    for i in range(N_NODES):
        items.add_first(i)
        items.add_last(i)
    items.show(out)

    items.add(1, 0)
    items.show(out)
    items.add(1, 20)
    items.show(out)
    items.add(0, 15)
    items.show(out)

    items.drop_first()
    items.show(out)
    items.drop_last()
    items.show(out)
    items.drop(4)
    items.show(out)

    out.write(f"elem 1: {items[1]}\n")
    items[1] = 0
    out.write(f"elem 1: {items[1]}\n")
    items.show(out)

    items.clear()
    items.show(out)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="chainlist-demo",
        description="Show the linked list operations step by step.",
    )
    parser.parse_args(argv)
    run(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())