"""Reference prime generation for cross-checking the Miller-Rabin tester.

Trial division and a NumPy Sieve of Eratosthenes. Both are slow compared to
the witness-based test but are simple enough to trust as an oracle.
"""

from __future__ import annotations

import numpy as np


def trial_division_is_prime(n: int) -> bool:
    """Check if a single number is prime.

    Uses 6k +/- 1 optimization for efficiency.

    Args:
        n: Number to check.

    Returns:
        True if n is prime, False otherwise.
    """
    if n < 2:
        return False
    if n == 2:
        return True
    if n == 3:
        return True
    if n % 2 == 0:
        return False
    if n % 3 == 0:
        return False

    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6

    return True


def _numpy_sieve(limit: int) -> np.ndarray:
    is_prime = np.ones(limit + 1, dtype=bool)
    is_prime[0] = False
    is_prime[1] = False

    for i in range(2, int(np.sqrt(limit)) + 1):
        if is_prime[i]:
            is_prime[i*i::i] = False

    return is_prime


def sieve_primes(limit: int) -> np.ndarray:
    """Generate all prime numbers up to and including limit.

    Args:
        limit: Upper bound for prime generation (inclusive).

    Returns:
        Array of prime numbers up to limit.

    Raises:
        ValueError: If limit is less than 2.
    """
    if limit < 2:
        raise ValueError(f"Limit must be >= 2, got {limit}")

    return np.nonzero(_numpy_sieve(limit))[0].astype(np.int64)


def sieve_mask(limit: int) -> np.ndarray:
    """Generate a boolean mask where mask[i] is True if i is prime.

    Args:
        limit: Size of the mask (0 to limit-1).

    Returns:
        Boolean array of length limit.
    """
    if limit < 0:
        raise ValueError(f"Limit must be >= 0, got {limit}")
    if limit < 3:
        return np.zeros(limit, dtype=bool)

    return _numpy_sieve(limit - 1)
