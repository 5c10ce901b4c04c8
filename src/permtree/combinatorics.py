"""
Utils for the factorial number system.
"""

from typing import Sequence, Tuple

# Largest number of symbols a permutation tree is built over.
# 10! leaves is already ~3.6M nodes at the last level.
MAX_SYMBOLS = 10


def factorial(n: int) -> int:
    """
    Computes n!, bounded by `MAX_SYMBOLS`.

    Args:
        n: a non-negative integer, at most `MAX_SYMBOLS`.
    Returns:
        n!, with 0! = 1.
    """
    if not 0 <= n <= MAX_SYMBOLS:
        raise ValueError(f"n must be in [0, {MAX_SYMBOLS}], got {n}")
    value = 1
    for i in range(2, n + 1):
        value *= i
    return value


def factorials(n: int) -> Tuple[int, ...]:
    """
    Returns the factorials 0!, 1!, ..., (n-1)!.
    """
    if not 0 <= n <= MAX_SYMBOLS:
        raise ValueError(f"n must be in [0, {MAX_SYMBOLS}], got {n}")
    values = []
    value = 1
    for i in range(n):
        if i > 0:
            value *= i
        values.append(value)
    return tuple(values)


def integer_to_factoradic(length: int, index: int) -> Tuple[int, ...]:
    """
    Decomposes `index` into digits of the factorial number system,
    most significant digit first.

    The digit at position i (counting from the least significant end)
    is in [0, i], so the digits can be used directly as positions
    into a shrinking pool of symbols.

    Based on https://2ality.com/2013/03/permutations.html.

    Args:
        length: the number of digits, i.e. the number of symbols.
        index: a zero-based index in [0, length!).
    """
    bases = factorials(length)
    if not 0 <= index < factorial(length):
        raise ValueError(f"index must be in [0, {length}!), got {index}")
    digits = []
    for base in reversed(bases):
        digits.append(index // base)
        index = index % base
    return tuple(digits)


def factoradic_to_integer(digits: Sequence[int]) -> int:
    """
    Inverse of `integer_to_factoradic`.

    Args:
        digits: factorial number system digits, most significant first.
    """
    bases = factorials(len(digits))
    index = 0
    for digit, base, position in zip(
        digits, reversed(bases), reversed(range(len(digits)))
    ):
        if not 0 <= digit <= position:
            raise ValueError(
                f"Digit {digit} out of range [0, {position}] for position {position}"
            )
        index += digit * base
    return index


def lehmer_code(pool: Sequence, permutation: Sequence) -> Tuple[int, ...]:
    """
    Computes the digits that select `permutation` out of `pool`,
    removing each selected element before the next pick.
    """
    if len(pool) != len(permutation):
        raise ValueError(
            f"Permutation has {len(permutation)} elements, pool has {len(pool)}"
        )
    available = list(pool)
    digits = []
    for element in permutation:
        try:
            position = available.index(element)
        except ValueError as err:
            raise ValueError(f"{element!r} is not in the pool") from err
        digits.append(position)
        del available[position]
    return tuple(digits)
