# minids

A handful of small, self-contained data structures:

- `minids.mini_stack.MiniStack` is a stack with a fixed capacity. It raises
  `StackOverflowError` when it is full and `StackUnderflowError` when it is
  empty.
- `minids.mini_queue.MiniQueue` is a fixed-capacity first-in, first-out
  queue. It raises `QueueOverflowError` and `QueueUnderflowError`.
- `minids.mini_list.MiniList` is a sequence with cheap access to both ends.
  It has a stable `sort()`, `unique()` for collapsing adjacent duplicates,
  and the module-level helpers `merge()` and `compare()`.
- `minids.listsort.listsort` is a merge sort on linked `Element` nodes. The
  lists can be straight or circular, singly or doubly linked.
- `minids.binary_trees.depth` gives the depth of a `Node` below a given
  root by following parent links.

The package has no runtime dependencies.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

### Stacks and queues

A stack or queue holds at most its capacity. The capacity is ten unless you
pass another positive number. A negative capacity raises `ValueError`.

```python
from minids.mini_stack import MiniStack
from minids.mini_queue import MiniQueue

stack = MiniStack(2)
stack.push(11)
stack.push(12)
stack.top()      # 12
stack.pop()      # 12
len(stack)       # 1

queue = MiniQueue(3)
for value in (1, 2, 3):
    queue.push(value)
queue.pop()      # 1
queue.push(4)    # the freed room is reused
queue.front()    # 2
queue.back()     # 4
```

`copy.copy()` of a `MiniQueue` gives an independent queue with the same
capacity and items.

### Lists

`MiniList` accepts any iterable. It supports `push_front`, `push_back`,
`pop_front`, `pop_back`, `front`, `back`, `swap`, `clear` and `copy.copy()`.
Reading or popping an empty list raises `IndexError`.

`max_size()` reports a nominal limit of 1000. The list does not enforce it.

```python
from minids.mini_list import MiniList, compare, merge

numbers = MiniList([5, 1, 4, 3, 2])
numbers.sort()
list(numbers)                                          # [1, 2, 3, 4, 5]

runs = MiniList([1, 1, 1, 2, 3])
runs.unique()
list(runs)                                             # [1, 2, 3]

list(merge(MiniList([1, 3, 5]), MiniList([2, 4, 6])))  # [1, 2, 3, 4, 5, 6]

compare(MiniList([1, 2, 3]), MiniList([1, 2]))         # 1
MiniList([1, 2, 3]) < MiniList([4, 5, 6])              # True
```

- `merge()` expects both inputs to be sorted. When two elements are equal,
  it takes the one from the right-hand list first.
- Lists compare element by element. When one list is a prefix of the other,
  the shorter one is the smaller.

### Sorting linked nodes

```python
from minids.listsort import build_list, check_list, listsort, to_values

head = build_list("gcielbmhdjfak", is_circular=True, is_double=True)
head = listsort(head, is_circular=True, is_double=True)
"".join(to_values(head))   # "abcdefghijklm"
check_list(head, 13, is_circular=True, is_double=True, check_ordering=True)
# "[abcdefghijklm]"
```

`check_list` verifies the following and raises `ValueError` naming the
first problem it finds:

- the node count
- the tail link
- the backward links
- optionally, strictly increasing order

### Tree depth

```python
from minids.binary_trees import Node, depth

root = Node()
child = Node(parent=root)
root.left = child
grandchild = Node(parent=child)
child.right = grandchild

depth(root, grandchild)   # 2
depth(root, None)         # -1
```

`depth(root, node)` counts the parent steps from `node` up to `root`. It
returns `-1` when `node` is missing or `root` is not one of its ancestors.

## Command

`minids-listsort [CASE ...]` takes each string, links its characters into a
list and sorts it. It does this in every linkage mode (straight or circular,
singly or doubly linked) and checks the list before and after sorting. It
prints each result and then a pass/fail summary.

With no arguments, it uses three 13-letter samples. It exits with status 1
if any case fails.

## What it does not do

The package offers no hash table or key/value lookup. It has no login or
password checking. It includes no command for timing the containers.