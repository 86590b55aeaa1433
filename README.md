# dsprimer

Compact implementations of classic data structures and sorting algorithms,
meant to be easy to read as well as to use. The package has no dependencies
outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsprimer.array_stack` | `ArrayStack`, a stack with a fixed capacity (100 by default) |
| `dsprimer.list_stack` | `ListStack`, an unbounded stack built from linked nodes |
| `dsprimer.circular_queue` | `CircularQueue`, a ring-buffer queue of `size` slots holding at most `size - 1` items (100 slots by default) |
| `dsprimer.list_queue` | `ListQueue`, an unbounded queue built from linked nodes |
| `dsprimer.array_list` | `ArrayList`, a bounded list with a cursor for traversal and removal |
| `dsprimer.sorting` | `bubble_sort` and `selection_sort` |
| `dsprimer.binary_tree` | `TreeNode` and the `preorder`, `inorder` and `postorder` traversals |
| `dsprimer.search_tree` | `BinarySearchTree` with `insert`, `search`, `remove` and `show_all` |
| `dsprimer.circular_list` | `CircularList`, a circular singly linked list whose cursor wraps around |
| `dsprimer.doubly_linked_list` | `DoublyLinkedList`, which grows at its head and is walked both ways |
| `dsprimer.linked_list` | `LinkedList`, a linked list with a cursor and an optional sort rule |
| `dsprimer.hash_table` | `Table`, a fixed-size hash table, plus `Person` and `SlotStatus` |

Operations that cannot proceed raise an exception rather than return a
sentinel: popping, peeking or dequeuing an empty container, or moving a cursor
past the last item, raises `IndexError`; pushing onto a full `ArrayStack`,
inserting into a full `ArrayList` or enqueuing into a full `CircularQueue`
raises `OverflowError`.

## Examples

### Stacks and queues

```python
from dsprimer.array_stack import ArrayStack

stack = ArrayStack(100)
for n in (1, 2, 3, 4, 5):
    stack.push(n)

while not stack.is_empty():
    print(stack.pop(), end=" ")   # 5 4 3 2 1
```

```python
from dsprimer.list_queue import ListQueue

queue = ListQueue()
for n in (1, 2, 3):
    queue.enqueue(n)
print(queue.dequeue())   # 1
print(queue.peek())      # 2
print(len(queue))        # 2
```

### Walking a list with its cursor

`first()` puts the cursor on the first item, `next()` advances it and raises
`IndexError` when there is nothing further, and `remove()` deletes the item
under the cursor:

```python
from dsprimer.array_list import ArrayList

items = ArrayList(100)
for n in (11, 11, 22, 22, 33):
    items.insert(n)

try:
    value = items.first()
    while True:
        if value == 22:
            items.remove()
        value = items.next()
except IndexError:
    pass

print(list(items))   # [11, 11, 33]
```

`LinkedList` inserts at the front unless a sort rule is set. The rule
`comp(d1, d2)` returns true when `d1` belongs before `d2`:

```python
from dsprimer.linked_list import LinkedList

plain = LinkedList()
for n in (1, 2, 3):
    plain.insert(n)
print(list(plain))    # [3, 2, 1]

ordered = LinkedList()
ordered.set_sort_rule(lambda a, b: a < b)
for n in (3, 1, 2):
    ordered.insert(n)
print(list(ordered))  # [1, 2, 3]
```

`CircularList` adds with `insert` (at the end) or `insert_front`, and its
cursor wraps around past the last item:

```python
from dsprimer.circular_list import CircularList

ring = CircularList()
for n in (3, 4, 5):
    ring.insert(n)
ring.insert_front(2)
ring.insert_front(1)

print(ring.first(), [ring.next() for _ in range(6)])   # 1 [2, 3, 4, 5, 1, 2]
```

`DoublyLinkedList` adds at its head and moves the cursor with `next()` and
`previous()`:

```python
from dsprimer.doubly_linked_list import DoublyLinkedList

dll = DoublyLinkedList()
for n in (1, 2, 3):
    dll.insert(n)
print(dll.first(), dll.next(), dll.next(), dll.previous())   # 3 2 1 2
```

### Sorting

Both functions return a new ascending list and leave their input alone:

```python
from dsprimer.sorting import bubble_sort, selection_sort

print(bubble_sort([3, 2, 4, 1]))      # [1, 2, 3, 4]
print(selection_sort([3, 2, 4, 1]))   # [1, 2, 3, 4]
```

### Trees

```python
from dsprimer.binary_tree import TreeNode, inorder, postorder, preorder

root = TreeNode(1)
root.left, root.right = TreeNode(2), TreeNode(3)
root.left.left = TreeNode(4)

print(list(preorder(root)))    # [1, 2, 4, 3]
print(list(inorder(root)))     # [4, 2, 1, 3]
print(list(postorder(root)))   # [4, 2, 3, 1]
```

`BinarySearchTree` keeps unique keys; inserting a key already present does
nothing. `search` returns the node or `None`, `remove` returns a detached node
holding the removed key or `None`, and iteration yields keys in order.
`show_all` prints the keys on one line and returns that line.

```python
from dsprimer.search_tree import BinarySearchTree

tree = BinarySearchTree()
for n in (5, 8, 1, 6, 4, 9, 3, 2, 7):
    tree.insert(n)

print(6 in tree)      # True
tree.remove(8)
print(list(tree))     # [1, 2, 3, 4, 5, 6, 7, 9]
tree.show_all()       # prints: 1 2 3 4 5 6 7 9
```

### Hash table

```python
from dsprimer.hash_table import Person, Table

table = Table(lambda key: key % 100, 100)
person = Person(20120003, "Lee", "Seoul")
table.insert(person.ssn, person)
print(table.search(20120003).describe())
print(table.delete(20120003).name)   # Lee
print(table.search(20120003))        # None
```

`Person` requires `name` and `addr` to be shorter than 50 characters. The hash
function must return an index inside the table, or `ValueError` is raised.

## Limitations

- `Table` does not resolve collisions: keys whose hashes are equal share one
  slot, and a later insert overwrites the earlier one.
- `DoublyLinkedList` and `CircularList` have no removal by value and
  `DoublyLinkedList` has no removal at all.
- The package is a library only; it provides no command-line program.