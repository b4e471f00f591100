# bstpqueue

A priority queue kept in a binary search tree ordered by integer priority.
Lower numbers come out first. Values that share a priority are kept together
in one tree node, in the order they were added, so the queue is stable.

The tree is not rebalanced: enqueueing priorities in sorted order gives a
tree as deep as the number of distinct priorities.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from bstpqueue.priorityqueue import PriorityQueue

pq = PriorityQueue()
pq.enqueue("Dolores", 5)
pq.enqueue("Bernard", 4)
pq.enqueue("Ford", 2)
pq.enqueue("Curry", 2)

len(pq)          # 4
pq.peek()        # "Ford"
list(pq)         # [(2, "Ford"), (2, "Curry"), (4, "Bernard"), (5, "Dolores")]
print(pq)        # one "<priority> value: <value>" line per entry, in order

pq.dequeue()     # "Ford"
pq.dequeue()     # "Curry"

other = pq.copy()
other == pq      # True: same entries in the same tree shape
pq.clear()
bool(pq)         # False
```

`PriorityQueue` offers:

- `enqueue(value, priority)` — add a value with an integer priority.
- `dequeue()` — remove and return the value with the lowest priority number;
  among equal priorities, the one added first.
- `peek()` — return what `dequeue()` would return, without removing it.
- `clear()` — remove every entry.
- `copy()` — an independent queue with the same entries and tree shape.
- `len(pq)` and `bool(pq)` — the number of entries, and whether there are any.
- Iteration — `(priority, value)` pairs from the lowest priority to the
  highest, without removing anything.
- `str(pq)` — each entry on its own line as `<priority> value: <value>`,
  every line ending in a newline; an empty queue gives an empty string.

`peek()` and `dequeue()` on an empty queue raise `IndexError`.

Two queues compare equal when they hold the same number of entries and their
trees have the same shape, with the same priority and the same values, in the
same order, at each node. Two queues with the same entries built up in a
different order may therefore compare unequal. Queues are not hashable.

## Demo

`bstpqueue.demo.main` enqueues a fixed set of names and prints the queue in
priority order. It is installed as a command:

```
bstpqueue-demo
```

It takes no options.