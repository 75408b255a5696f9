import pytest

from education.primes import count_primes, get_primes, is_prime


def test_get_primes_small():
    assert get_primes(30) == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


def test_count_primes_hundred():
    assert count_primes(100) == 25


@pytest.mark.parametrize("n", [1, 2, 3, 4, 10, 49, 97, 100, 500, 1000])
def test_count_matches_sieve(n):
    assert count_primes(n) == len(get_primes(n))


@pytest.mark.parametrize("n", [7, 50, 300])
def test_negative_bound_uses_absolute_value(n):
    assert count_primes(-n) == count_primes(n)
    assert get_primes(-n) == get_primes(n)


def test_sieve_strictly_increasing():
    primes = get_primes(2000)
    assert all(a < b for a, b in zip(primes, primes[1:]))


def test_sieve_results_have_no_smaller_prime_factor():
    primes = get_primes(1000)
    coprime_to_earlier = [
        p for index, p in enumerate(primes) if all(p % q for q in primes[:index])
    ]
    assert coprime_to_earlier == primes
    assert len(primes) == 168


def test_sieve_below_two_is_empty():
    assert get_primes(1) == []
    assert get_primes(0) == []


def test_count_zero_rejected():
    with pytest.raises(ValueError):
        count_primes(0)


def test_is_prime_with_cache():
    cache = [1, 2, 3, 5, 7]
    assert is_prime(11, cache) is True
    assert is_prime(9, cache) is False
    assert is_prime(25, cache) is False


def test_is_prime_runs_out_of_cache():
    assert is_prime(101, [1]) is False