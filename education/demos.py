"""Small command-line demonstrations of the package's algorithms."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence
from typing import Optional

from education.binary_search import binary_search
from education.gcd import gcd
from education.power import ipow
from education.primes import count_primes
from education.priority_queue import PQueue, Priority
from education.sorting import Sort, gen_arr
from education.stack import Stack


def _demo_binary_search() -> Optional[int]:
    arr = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11]
    elem = 10
    index = binary_search(arr, elem)
    if index is None:
        print("Nothing found")
    else:
        print(f"Gotcha: {elem}=={arr[index]}")
    return index


def _demo_gcd() -> int:
    u, v = 1234567890, 2
    result = gcd(u, v)
    print(result)
    return result


def _demo_power() -> float:
    base, exponent = 1.000001, 1_000_000
    result = ipow(base, exponent)
    print(result)
    return result


def _demo_primes() -> int:
    limit = 100_000
    count = count_primes(limit)
    print(count)
    return count


def _demo_queue_with_priorities() -> list[Optional[int]]:
    pq: PQueue[int] = PQueue()
    pq.enqueue(Priority.NORMAL, 23)
    pq.enqueue(Priority.LOW, 55)
    pq.enqueue(Priority.HIGH, 27)
    pq.enqueue(Priority.LOW, 58)
    pq.enqueue(Priority.LOW, 21)
    results = [pq.dequeue() for _ in range(6)]
    for item in results:
        print(item)
    return results


def _demo_sorting() -> None:
    for method in ("bubble", "selection", "insertion", "heapsort", "quicksort", "mergesort"):
        getattr(Sort(gen_arr(30)), method)()


def _demo_stack() -> list[Optional[int]]:
    stack: Stack[int] = Stack()
    stack.push(23)
    stack.push(34)
    results = [stack.pop() for _ in range(3)]
    for item in results:
        print(item)
    return results


DEMOS: dict[str, Callable[[], object]] = {
    "binary_search": _demo_binary_search,
    "gcd": _demo_gcd,
    "power": _demo_power,
    "primes": _demo_primes,
    "queue_with_priorities": _demo_queue_with_priorities,
    "sorting": _demo_sorting,
    "stack": _demo_stack,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the named demonstrations, or all of them when none are named."""
    parser = argparse.ArgumentParser(description="Run algorithm demonstrations.")
    parser.add_argument("demos", nargs="*", choices=sorted(DEMOS), metavar="DEMO",
                        help=f"one of: {', '.join(DEMOS)}")
    args = parser.parse_args(argv)
    for name in args.demos or DEMOS:
        DEMOS[name]()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())