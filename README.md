# education

A collection of small, readable implementations of classic algorithms and
data structures, intended for study. It has no dependencies beyond the
standard library.

## What is inside

| Module | Contents |
| --- | --- |
| `education.gcd` | `gcd(u, v)`: binary (Stein's) greatest common divisor |
| `education.power` | `ipow(base, power)`: exponentiation by squaring for a float base and integer power |
| `education.binary_search` | `binary_search(arr, elem)`: index of `elem` in a sorted sequence, or `None` |
| `education.primes` | `is_prime(num, cache)`, `count_primes(num)` (trial division) and `get_primes(num)` (linear sieve) |
| `education.stack` | `Stack`: a LIFO stack built on singly linked nodes |
| `education.queue_two_stacks` | `Queue`: a FIFO queue built from two stacks |
| `education.priority_queue` | `Priority` (`LOW`, `NORMAL`, `HIGH`) and `PQueue`: a queue served highest priority first |
| `education.priority_queue_sort` | `PQueueSort`: a single queue whose elements carry a priority |
| `education.sorting` | `Sort` (bubble, selection, insertion, heap, quick and merge sort) and `gen_arr(length)` |
| `education.demos` | `main(argv=None)`: the demonstrations behind the `education-demos` command |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Usage

```python
from education.binary_search import binary_search
from education.gcd import gcd
from education.power import ipow
from education.primes import count_primes, get_primes
from education.stack import Stack
from education.queue_two_stacks import Queue
from education.priority_queue import PQueue, Priority
from education.sorting import Sort, gen_arr

binary_search([1, 2, 3, 4, 5], 4)   # 3
binary_search([1, 2, 3, 4, 5], 9)   # None

gcd(1234567890, 2)          # 2
ipow(2.0, 10)               # 1024.0
get_primes(20)              # [2, 3, 5, 7, 11, 13, 17, 19]
count_primes(20)            # 8

stack = Stack([1, 2])
stack.push(23)
stack.pop()                 # 23
list(stack)                 # [2, 1], top first

queue = Queue()
queue.enqueue(1)
queue.enqueue(2)
queue.dequeue()             # 1

pq = PQueue()
pq.enqueue(Priority.NORMAL, 23)
pq.enqueue(Priority.HIGH, 27)
pq.dequeue()                # 27

data = gen_arr(30)
Sort(data).mergesort()      # sorts `data` in place, prints it and returns it
```

Notes on behaviour:

- `pop` and `dequeue` return `None` on an empty container.
- `gcd` returns the other argument when one of them is zero, and raises
  `ValueError` for negative arguments otherwise.
- `ipow` returns `1.0` for a power of zero or below.
- `count_primes` counts the primes up to `abs(num)` and raises `ValueError`
  when `num` is zero; `get_primes` returns those primes in ascending order.
- `PQueueSort` records each value's priority, but values leave in the order
  they arrived; the priority does not reorder them. Use `PQueue` when
  higher priorities should be served first.
- Each `Sort` method sorts the wrapped sequence ascending in place, prints
  the algorithm's name followed by the result, and returns the sequence.

## Demonstrations

The package ships a command that runs small demonstrations of the
algorithms and data structures:

```
education-demos
```

With no arguments every demonstration runs. Name one or more to run only
those: `binary_search`, `gcd`, `power`, `primes`, `queue_with_priorities`,
`sorting`, `stack`.

```
education-demos gcd stack
```

The same is available as `python -m education.demos`.