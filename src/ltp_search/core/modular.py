"""Modular arithmetic primitives used by the primality test.

Every intermediate product is reduced modulo ``modulus`` before the next
multiplication, so operands never exceed ``modulus - 1`` and products stay
below ``modulus ** 2``.
"""

from __future__ import annotations


def mod_mul(a: int, b: int, modulus: int) -> int:
    """Return (a * b) % modulus with both operands reduced first."""
    return ((a % modulus) * (b % modulus)) % modulus


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """Compute (base ** exponent) % modulus by binary exponentiation.

    Scans the exponent from its least significant bit, squaring the base at
    each step and folding it into the result for every set bit.

    Args:
        base: Non-negative base.
        exponent: Non-negative exponent. An exponent of 0 yields ``1 % modulus``.
        modulus: Positive modulus.

    Returns:
        The modular power in [0, modulus).

    Raises:
        ValueError: If modulus < 1 or exponent < 0.
    """
    if modulus < 1:
        raise ValueError(f"Modulus must be >= 1, got {modulus}")
    if exponent < 0:
        raise ValueError(f"Exponent must be >= 0, got {exponent}")

    result = 1 % modulus
    base = base % modulus

    while exponent > 0:
        if exponent & 1:
            result = mod_mul(result, base, modulus)
        base = mod_mul(base, base, modulus)
        exponent >>= 1

    return result
