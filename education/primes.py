"""Prime counting by trial division and a linear sieve."""

from collections.abc import Sequence
from math import isqrt


def is_prime(num: int, cache: Sequence[int]) -> bool:
    """Test ``num`` against the known primes in ``cache``.

    ``cache`` holds 1 followed by the primes found so far, in order.  The
    first ``isqrt(|num|) - 1`` primes after the leading 1 are tried as
    divisors; if the cache runs out first the number is not declared prime.
    """
    for i in range(1, isqrt(abs(num))):
        if i >= len(cache) or num % cache[i] == 0:
            return False
    return True


def count_primes(num: int) -> int:
    """Count the primes from 1 up to ``|num|`` inclusive."""
    limit = abs(num)
    if limit == 0:
        raise ValueError("count_primes needs a non-zero bound")
    cache: list[int] = []
    for candidate in range(1, limit + 1):
        if is_prime(candidate, cache):
            cache.append(candidate)
    # The cache starts with 1, which is not a prime.
    return len(cache) - 1


def get_primes(num: int) -> list[int]:
    """Return every prime from 2 up to ``|num|``, ascending."""
    limit = abs(num)
    least_factor: dict[int, int] = {}
    primes: list[int] = []

    for k in range(2, limit + 1):
        if k not in least_factor:
            least_factor[k] = k
            primes.append(k)
        lp_k = least_factor[k]
        for p in primes:
            if p > lp_k or p * k > limit:
                break
            least_factor[p * k] = p
    return primes