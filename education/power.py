"""Exponentiation by squaring for floats and integer exponents."""


def ipow(base: float, power: int) -> float:
    """Raise ``base`` to a non-negative integer ``power``.

    Exponents of zero or below give 1.0.
    """
    result = 1.0
    while power > 1:
        if power % 2 == 1:
            result *= base
        base *= base
        power //= 2
    if power > 0:
        result *= base
    return result