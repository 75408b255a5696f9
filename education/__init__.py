"""Classic algorithms and data structures, implemented for study."""

__version__ = "0.1.0"

__all__ = [
    "binary_search",
    "demos",
    "gcd",
    "power",
    "primes",
    "priority_queue",
    "priority_queue_sort",
    "queue_two_stacks",
    "sorting",
    "stack",
]