# pqbench

Two priority queues that hold integer values with integer priorities, and a
small interactive benchmark that times their operations.

- `pqbench.binary_heap.BinaryHeap` is a binary max-heap stored in a list.
- `pqbench.linked_list.LinkedList` is a singly linked list kept sorted by
  priority, highest first. Among equal priorities, elements come out in the
  order they went in.

Both offer the same operations: `insert`, `extract_max`, `peek`,
`modify_key`, `is_empty`, `copy` and `len()`. Iterating over a queue yields
`pqbench.element.Element` objects (a frozen dataclass with `value` and
`priority`) in storage order: level order for the heap, priority order for
the list.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the queues

```python
from pqbench.binary_heap import BinaryHeap
from pqbench.linked_list import LinkedList

heap = BinaryHeap()
heap.insert(42, 7)
heap.insert(13, 10)
heap.insert(99, 3)

top = heap.peek()           # Element(value=13, priority=10)
heap.modify_key(99, 50)     # raise 99 to the top
first = heap.extract_max()  # Element(value=99, priority=50)
print(len(heap))            # 2
print(heap)                 # Heap (value:priority): (13:10) (42:7)

queue = LinkedList()
queue.insert(1, 5)
queue.insert(2, 5)
queue.save_to_file("queue.txt")  # one "value priority" line per element
```

- `extract_max` and `peek` raise `IndexError` on an empty queue.
- `modify_key` looks up the first element holding the given value and gives
  it a new priority; it raises `KeyError` if no element holds that value.
- `copy` returns an independent queue with the same contents.
- `LinkedList.save_to_file` writes the elements in queue order, one
  `value priority` line each.

## Filling queues with data

`pqbench.data_generator` works with either queue:

```python
import random
from pqbench.binary_heap import BinaryHeap
from pqbench.data_generator import fill_random, fill_from_file, prepare_copies

heap = BinaryHeap()
fill_random(heap, 1000, random.Random(1))  # values 0..300000, priorities 0..10*size
copies = prepare_copies(heap, 100)         # 100 independent copies

other = BinaryHeap()
count = fill_from_file(other, "queue.txt") # number of pairs inserted
```

`fill_random` uses a fresh `random.Random` when no generator is passed.
`fill_from_file` reads whitespace-separated `value priority` pairs and stops
at the first token that is not an integer or at an unpaired trailing value.
`prepare_copies` raises `ValueError` for a negative count.

## Timing

`pqbench.timer.Timer` is a stopwatch that accumulates elapsed time in
nanoseconds across start/stop pairs. Starting a running timer or stopping a
stopped one raises `pqbench.timer.TimerError`; `running` tells whether it is
running and `reset()` clears it. It also works as a context manager:

```python
from pqbench.timer import Timer

timer = Timer()
for _ in range(100):
    with timer:
        heap.peek()
print(timer.result() // 100, "ns per call")
```

## The benchmark command

```
pqbench [--data-dir DIR] [--copies N]
```

The command reads its answers from standard input, so it can be used
interactively or fed from a pipe. It asks:

1. which structure to test: `1` for the list, `2` for the heap;
2. how to fill it: `1` to generate random data (it then asks for a size),
   `2` to load one of twenty data files, numbered 1 to 20, named
   `DataBase5k.txt`, `DataBase10k.txt`, ... `DataBase100k.txt` in the folder
   given by `--data-dir` (default `DataBase`);
3. which operation to time: `1` insert, `2` extract-max, `3` peek,
   `4` modify-key, `5` return-size. Insert and modify-key then ask for a
   value and a priority.

It builds `--copies` copies of the filled queue (default 100), runs the
operation once on each copy and prints the average time per call in
nanoseconds. An operation that fails on a copy (an empty queue, a value not
present) prints a message and still counts towards the timing.

The same run from a script, using `pqbench.cli.run_benchmark`:

```python
from pqbench.cli import Operation, run_benchmark

average_ns = run_benchmark(copies, Operation.PEEK)
```

`pqbench.cli.dataset_path(folder, file_number)` returns the path of a
numbered data file and raises `ValueError` outside 1–20.

## What the package does not do

No data files come with the package. To benchmark with loaded data, place
files named `DataBase<N>k.txt` in the data folder yourself; one way to make
them is to fill a `LinkedList` with `fill_random` and call `save_to_file`.
A missing file is reported as `Failed to open file.` and the benchmark then
runs on an empty queue.