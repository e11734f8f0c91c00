"""Digit-level helpers for left-truncatable primes."""

from __future__ import annotations

from typing import Dict, List

import numpy as np

from ltp_search.core.primality import is_prime


def left_truncations(n: int) -> List[int]:
    """Return n followed by every value obtained by stripping leading digits.

    Example: 3137 -> [3137, 137, 37, 7]

    Raises:
        ValueError: If n < 1.
    """
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")

    digits = str(n)
    return [int(digits[i:]) for i in range(len(digits))]


def is_left_truncatable(n: int) -> bool:
    """Check whether n is a left-truncatable prime.

    Numbers containing a zero digit are rejected: stripping a digit in front
    of a zero would drop two digits at once.
    """
    if n < 2 or "0" in str(n):
        return False
    return all(is_prime(t) for t in left_truncations(n))


def digit_length_counts(values: np.ndarray) -> Dict[int, int]:
    """Count values by number of decimal digits.

    Args:
        values: Array of positive integers.

    Returns:
        Mapping from digit length to how many values have that length.
    """
    values = np.asarray(values, dtype=np.int64)
    if len(values) == 0:
        return {}

    lengths = np.char.str_len(values.astype(str))
    unique, counts = np.unique(lengths, return_counts=True)
    return {int(k): int(c) for k, c in zip(unique, counts)}
