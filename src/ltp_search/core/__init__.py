"""Core arithmetic: modular primitives, primality testing and reference sieve."""

from ltp_search.core.modular import mod_mul, mod_pow
from ltp_search.core.primality import (
    SUPPORTED_CEILING,
    WITNESS_TABLE,
    UnsupportedRange,
    WitnessSet,
    is_prime,
    is_prime_array,
    miller_rabin,
    select_witnesses,
)
from ltp_search.core.sieve import sieve_mask, sieve_primes, trial_division_is_prime
from ltp_search.core.truncation import (
    digit_length_counts,
    is_left_truncatable,
    left_truncations,
)

__all__ = [
    "mod_mul",
    "mod_pow",
    "SUPPORTED_CEILING",
    "WITNESS_TABLE",
    "UnsupportedRange",
    "WitnessSet",
    "is_prime",
    "is_prime_array",
    "miller_rabin",
    "select_witnesses",
    "sieve_mask",
    "sieve_primes",
    "trial_division_is_prime",
    "digit_length_counts",
    "is_left_truncatable",
    "left_truncations",
]
