# prioqueue

A priority queue kept as a singly linked list that is always in order, together
with a small benchmark that times its basic operations.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Using the queue

`LinkedPriorityQueue` in `prioqueue.linked_queue` keeps its entries sorted by
priority, highest first. Entries with the same priority leave in the order they
arrived.

```python
from prioqueue.linked_queue import LinkedPriorityQueue, EmptyQueueError

queue = LinkedPriorityQueue()
queue.push(10, 2)
queue.push(20, 5)
queue.push(30, 5)

queue.peek()                   # 20: highest priority, pushed first
len(queue)                     # 3
list(queue)                    # [(20, 5), (30, 5), (10, 2)]

queue.change_priority(10, 9)   # True: 10 now goes to the front
queue.change_priority(99, 1)   # False: no such value

queue.pop()                    # 10: removed and returned
print(queue.describe())        # Kolejka zawiera 2 elementów: (20, priorytet: 5) -> (30, priorytet: 5)
queue.show()                   # the same text, printed to standard output
```

- `push(value, priority)` puts the new entry behind every entry whose priority
  is at least as high.
- `pop()` removes the front entry and returns its value; `peek()` returns it
  without removing it. On an empty queue both raise `EmptyQueueError`, a
  subclass of `IndexError`, with the message `Kolejka jest pusta!`.
- `change_priority(value, new_priority)` finds the first entry with that value,
  takes it out and pushes it back with the new priority. It returns `True` if
  it found one and `False` otherwise.
- Iterating over the queue yields `(value, priority)` pairs from front to back
  without removing anything.
- An empty queue is falsy and `is_empty()` returns `True`.
- `describe()` returns a one-line description (in Polish), `Kolejka jest pusta.`
  for an empty queue; `show(file)` prints it to `file`, or to standard output
  when `file` is omitted or `None`. Each entry is shown by `Node.__str__` as
  `(value, priorytet: priority)`.

## Benchmark

```
prioqueue-benchmark
```

For each queue size (by default 100, 1000, 10000 and 50000) it fills a queue
with entries of random priority from 1 to 100, then times `push`, `pop`,
`peek`, `change_priority` and `len`, by default 1000 calls of each, and prints
the average time of one call in nanoseconds. Finally it writes the averages to
a CSV file with the columns `Rozmiar`, `LinkedList-Push`, `LinkedList-Pop`,
`LinkedList-Peek`, `LinkedList-ChangeP` and `LinkedList-Size`, one row per
size. If the file cannot be written, an error message goes to standard error.

Options:

- `--sizes N [N ...]`: the queue sizes to benchmark
- `--num-tests N`: how many times each operation is called
- `--output PATH`: the CSV file, `wyniki_testow_kolejek.csv` by default
- `--seed N`: seed for the random priorities

The same steps are available from Python in `prioqueue.benchmark`:
`benchmark_size(size, num_tests, rng)` returns one `BenchmarkResult`,
`run_benchmarks(sizes, num_tests, rng)` returns a list of them, and
`save_results_csv(results, path)` writes them out. `random_value(low, high,
rng)` returns a random integer between `low` and `high` inclusive.
`benchmark_size` raises `ValueError` when the size or the number of calls is
below 1.

## What it does not do

The package has only the linked-list queue. There is no heap-based priority
queue, so the benchmark times this one queue alone and does not compare it
against any other implementation.