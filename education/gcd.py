"""Greatest common divisor by the binary (Stein's) algorithm."""


def _trailing_zeros(value: int) -> int:
    return (value & -value).bit_length() - 1


def gcd(u: int, v: int) -> int:
    """Return the greatest common divisor of ``u`` and ``v``.

    If either argument is zero the other one is returned unchanged.
    Otherwise both must be positive.
    """
    if u == 0:
        return v
    if v == 0:
        return u
    if u < 0 or v < 0:
        raise ValueError("gcd is defined here for non-negative integers only")

    i = _trailing_zeros(u)
    u >>= i
    j = _trailing_zeros(v)
    v >>= j
    k = min(i, j)

    while True:
        if u > v:
            u, v = v, u
        v -= u
        if v == 0:
            return u << k
        v >>= _trailing_zeros(v)