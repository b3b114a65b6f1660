# dstructs

Classic linear data structures and the algorithms built on them, written as
ordinary Python classes and functions. Positions in the list types run from
1; bad positions raise `IndexError`, and missing predecessors or successors
raise `ValueError`.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and run `pytest`:

```
pip install .[test]
pytest
```

## What is inside

Linear lists

- `dstructs.seqlist`: `SequenceList`, an array-backed list, along with
  `union` (append to one list the elements of another that it lacks),
  `merge_by_position` and `merge_by_pointer` (merge two non-decreasing lists
  into a new one).
- `dstructs.linkedlist`: `LinkedList`, a singly linked list with a head node.
  `LinkedList.from_head_insertion` (reverse order) and
  `LinkedList.from_tail_insertion` (input order) read integers from a text
  stream. `merge` relinks a sorted list into another sorted one and leaves
  the second empty.
- `dstructs.staticlist`: `StaticLinkedList`, a list whose nodes are cells of a
  shared `Space` linked by cursors. `difference` builds the symmetric
  difference (A-B)∪(B-A) in such a space.
- `dstructs.dlinkedlist`: `DoublyCircularList`, a doubly linked circular list;
  `node_at` gives the `DNode` at a position.
- `dstructs.extlist`: `ExtLinkedList`, a linked list keeping head, tail and
  length, with node-level operations such as `insert_first`, `delete_first`,
  `append`, `remove`, `insert_before` and `insert_after`.
- `dstructs.mergeelist`: `merge`, `compare_values` and `create_ascending`,
  which work on `ExtLinkedList`.
- `dstructs.polynomial`: `Polynomial` made of `Term` values in ascending
  exponent order, with `add`, `from_stream` and printing such as
  `7 + 3x + 9x^8`.

Stacks and queues

- `dstructs.seqstack`: `SequenceStack`.
- `dstructs.conversion`: `to_octal`, decimal to octal with a leading `0`.
- `dstructs.lineedit`: `line_edit`, a line editor where `#` erases one
  character, `@` erases the current line and a NUL character ends the input.
- `dstructs.expression`: `evaluate`, operator-precedence evaluation of
  expressions with single-digit operands, ended by `#` or by the end of the
  text; malformed input raises `ExpressionError`.
- `dstructs.hanoi`: `hanoi`, which returns the list of `Move` steps.
- `dstructs.maze`: `Maze`, a grid maze that can be generated at random and
  searched exhaustively with a stack by `find_path`.
- `dstructs.linkqueue`: `LinkQueue`, a linked queue.
- `dstructs.cylqueue`: `CircularQueue`, a ring buffer holding at most
  `maxsize - 1` elements; enqueueing on a full queue raises `OverflowError`.
- `dstructs.bank`: `BankSimulation`, a discrete-event simulation of customers
  queueing at bank windows (four by default) over a working day.

`dstructs.scanner.scan` reads `%c`, `%d`, `%f` and `%s` values from a text
stream, skipping characters that are not ASCII, and returns them as a list.

## Examples

```python
from dstructs.seqlist import SequenceList, union
from dstructs.expression import evaluate
from dstructs.conversion import to_octal
from dstructs.hanoi import hanoi

la = SequenceList([5, 2, 1, 3, 9])
lb = SequenceList([7, 2, 6, 9, 11, 3, 10])
union(la, lb)
print(list(la))              # [5, 2, 1, 3, 9, 7, 6, 11, 10]

print(evaluate("(2+3)*4#"))  # 20
print(to_octal(1348))        # 02504

for move in hanoi(3, "x", "y", "z"):
    print(move)
```

## Commands

```
dstructs-maze [--size N] [--ratio RATIO] [--seed SEED]
dstructs-bank [--seed SEED] [--close-time MINUTES] [--windows N]
```

`dstructs-maze` draws a random maze in the terminal (clearing the screen with
ANSI escape codes), waits for Enter, shows the search step by step and asks
whether to start again. `dstructs-bank` runs one simulated day and prints the
number of customers and their average stay.

## What it does not do

The list, stack and queue types are libraries only: there is no interactive
command for trying them out, and nothing is saved to disk.