"""Deterministic Miller-Rabin primality testing.

The Miller-Rabin test is probabilistic in general, but for n below known
bounds a fixed set of witnesses gives a correct answer for every input.
``WITNESS_TABLE`` lists those bounds in ascending order together with the
witnesses that make the test exact below them. Inputs at or beyond the last
bound have no witness set and are rejected.

Witness sets from:
    http://en.wikipedia.org/wiki/Miller%E2%80%93Rabin_primality_test
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple, Union

import numpy as np

from ltp_search.core.modular import mod_mul, mod_pow
from ltp_search.errors import UnsupportedMagnitudeError


@dataclass(frozen=True)
class WitnessSet:
    """Miller-Rabin bases that are exact for every odd n < limit."""
    limit: int
    witnesses: Tuple[int, ...]


@dataclass(frozen=True)
class UnsupportedRange:
    """Selection result for values with no deterministic witness set."""
    value: int
    ceiling: int


WitnessSelection = Union[WitnessSet, UnsupportedRange]


WITNESS_TABLE: Tuple[WitnessSet, ...] = (
    WitnessSet(2_047, (2,)),
    WitnessSet(1_373_653, (2, 3)),
    WitnessSet(9_080_191, (31, 73)),
    WitnessSet(25_326_001, (2, 3, 5)),
    WitnessSet(4_759_123_141, (2, 7, 61)),
    WitnessSet(2_152_302_898_747, (2, 3, 5, 7, 11)),
    WitnessSet(3_474_749_660_383, (2, 3, 5, 7, 11, 13)),
    WitnessSet(341_550_071_728_321, (2, 3, 5, 7, 11, 13, 17)),
    WitnessSet(3_825_123_056_546_413_051, (2, 3, 5, 7, 11, 13, 17, 19, 23)),
)

SUPPORTED_CEILING = WITNESS_TABLE[-1].limit


def select_witnesses(n: int) -> WitnessSelection:
    """Pick the smallest witness set that is exact for n.

    Returns:
        The matching WitnessSet, or UnsupportedRange when n is at or above
        ``SUPPORTED_CEILING``.
    """
    for entry in WITNESS_TABLE:
        if n < entry.limit:
            return entry
    return UnsupportedRange(value=n, ceiling=SUPPORTED_CEILING)


def decompose(n: int) -> Tuple[int, int]:
    """Split n into (d, s) with n == d * 2**s and d odd.

    Raises:
        ValueError: If n < 1.
    """
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")

    d, s = n, 0
    while d % 2 == 0:
        d >>= 1
        s += 1
    return d, s


def miller_rabin(n: int, witnesses: Sequence[int]) -> bool:
    """Run the Miller-Rabin witness loop on odd n > 2.

    Args:
        n: Odd number to test.
        witnesses: Bases to try; all of them must pass for n to be prime.

    Returns:
        False as soon as one witness proves n composite, True otherwise.
    """
    d, s = decompose(n - 1)

    for g in reversed(witnesses):
        x = mod_pow(g, d, n)
        if x == 1 or x == n - 1:
            continue

        for _ in range(s - 1):
            x = mod_mul(x, x, n)
            if x == 1:
                return False
            if x == n - 1:
                break
        else:
            return False

    return True


def is_prime(n: int) -> bool:
    """Deterministic primality test.

    Args:
        n: Number to check.

    Returns:
        True if n is prime, False otherwise.

    Raises:
        UnsupportedMagnitudeError: If n >= SUPPORTED_CEILING.
    """
    if n <= 1:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False

    selection = select_witnesses(n)
    if isinstance(selection, UnsupportedRange):
        raise UnsupportedMagnitudeError(selection.value, selection.ceiling)

    return miller_rabin(n, selection.witnesses)


def is_prime_array(numbers: Iterable[int]) -> np.ndarray:
    """Apply is_prime to every element.

    Args:
        numbers: Integers to check.

    Returns:
        Boolean array where True indicates prime.
    """
    values = [int(n) for n in numbers]
    return np.fromiter((is_prime(n) for n in values), dtype=bool, count=len(values))
