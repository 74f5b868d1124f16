# chainlist

A small singly linked list for Python. Values are held in a chain of nodes and
can be added or removed at the front, at the back, or at a given position.

## Installation

```
pip install .
```

## Usage

```python
from chainlist.linkedlist import LinkedList

items = LinkedList([1, 2, 3])
items.add_first(0)     # 0 1 2 3
items.add_last(4)      # 0 1 2 3 4
items.add(9, 2)        # 0 1 9 2 3 4

items.drop_first()     # 1 9 2 3 4
items.drop_last()      # 1 9 2 3
items.drop(1)          # 1 2 3

print(len(items))      # 3
print(items[1])        # 2
items[1] = 7
print(list(items))     # [1, 7, 3]
print(items)           # 1 7 3

items.show()           # writes "1 7 3 " and a newline to standard output
items.clear()
print(len(items))      # 0
```

`LinkedList()` with no argument starts empty. `show(file)` writes to any text
stream; without an argument it writes to standard output.

Positional rules:

- `add(value, pos)` inserts before the element at `pos` when `pos` is 0 or
  smaller than the current length. Any other position leaves the list
  unchanged, so it never appends; use `add_last` for that.
- `drop(pos)` removes the element at `pos` when `pos` is 0 or a valid index.
  Any other position does nothing.
- `drop_first` and `drop_last` do nothing on an empty list.
- Indexing with `[]` raises `IndexError` for a position outside the list,
  negative positions included, and `TypeError` for a position that is not an
  integer. Slices are not supported.

## Demonstration

The bundled demonstration builds a list, inserts and removes values, reads and
overwrites an element, and prints the list after each step:

```
chainlist-demo
```

The command takes no options besides `--help`. The same steps can be run from
code with `chainlist.demo.run(out)`, which writes to any text stream
(standard output when `out` is omitted).

## Running the tests

```
pip install ".[test]"
pytest
```