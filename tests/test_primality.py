"""Tests for deterministic Miller-Rabin primality testing."""

import numpy as np
import pytest

from ltp_search.core.primality import (
    SUPPORTED_CEILING,
    WITNESS_TABLE,
    UnsupportedRange,
    WitnessSet,
    decompose,
    is_prime,
    is_prime_array,
    miller_rabin,
    select_witnesses,
)
from ltp_search.core.sieve import sieve_mask, trial_division_is_prime
from ltp_search.errors import UnsupportedMagnitudeError


class TestIsPrime:
    """Tests for is_prime function."""

    def test_small_primes(self):
        """Test known small primes."""
        small_primes = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31]
        for p in small_primes:
            assert is_prime(p), f"{p} should be prime"

    def test_small_composites(self):
        """Test known small composites."""
        composites = [4, 6, 8, 9, 10, 12, 14, 15, 16, 18, 20]
        for c in composites:
            assert not is_prime(c), f"{c} should not be prime"

    def test_edge_cases(self):
        """Test edge cases."""
        assert not is_prime(0)
        assert not is_prime(1)
        assert is_prime(2)
        assert not is_prime(-5)

    def test_matches_trial_division(self):
        """Test agreement with trial division for 0..10000."""
        for n in range(0, 10001):
            assert is_prime(n) == trial_division_is_prime(n), f"mismatch at {n}"

    def test_matches_sieve(self):
        """Test agreement with the sieve across the first witness boundaries."""
        limit = 30_000
        mask = sieve_mask(limit)
        result = is_prime_array(range(limit))
        np.testing.assert_array_equal(result, mask)

    def test_strong_pseudoprimes_rejected(self):
        """Test composites that fool the witness set of the row below them."""
        # 2047 = 23 * 89 passes base 2; 1373653 passes {2, 3};
        # 25326001 passes {2, 3, 5}; 3215031751 passes {2, 3, 5, 7};
        # 4759123141 = 48781 * 97561 passes {2, 7, 61}.
        for n in [2047, 1_373_653, 9_080_191, 25_326_001, 3_215_031_751, 4_759_123_141]:
            assert not is_prime(n), f"{n} should not be prime"

    def test_large_primes(self):
        """Test primes in the upper witness rows."""
        for p in [999_962_683, 999_999_937, 4_294_967_291, 9_999_999_967]:
            assert is_prime(p), f"{p} should be prime"

    def test_large_composites(self):
        """Test composites in the upper witness rows."""
        assert not is_prime(999_962_683 * 3)
        assert not is_prime(65_537 * 65_539)
        assert not is_prime(2_152_302_898_747)
        assert not is_prime(3_474_749_660_383)
        assert not is_prime(341_550_071_728_321)

    def test_unsupported_magnitude(self):
        """Test that values at the ceiling raise instead of guessing."""
        with pytest.raises(UnsupportedMagnitudeError) as exc_info:
            is_prime(SUPPORTED_CEILING)
        assert exc_info.value.value == SUPPORTED_CEILING
        assert exc_info.value.ceiling == SUPPORTED_CEILING

        with pytest.raises(ArithmeticError):
            is_prime(SUPPORTED_CEILING + 2)

    def test_even_above_ceiling_is_composite(self):
        """Test that even numbers are rejected before witness selection."""
        assert not is_prime(SUPPORTED_CEILING + 1)


class TestSelectWitnesses:
    """Tests for select_witnesses function."""

    def test_table_rows(self):
        """Test the witness set chosen for each magnitude."""
        assert select_witnesses(3).witnesses == (2,)
        assert select_witnesses(2_046).witnesses == (2,)
        assert select_witnesses(2_047).witnesses == (2, 3)
        assert select_witnesses(1_373_653).witnesses == (31, 73)
        assert select_witnesses(9_080_191).witnesses == (2, 3, 5)
        assert select_witnesses(25_326_001).witnesses == (2, 7, 61)
        assert select_witnesses(4_759_123_141).witnesses == (2, 3, 5, 7, 11)

    def test_table_ascending(self):
        """Test that limits are strictly ascending."""
        limits = [entry.limit for entry in WITNESS_TABLE]
        assert limits == sorted(limits)
        assert len(set(limits)) == len(limits)

    def test_ceiling_below_64_bits(self):
        """Test that the supported range fits in an unsigned 64-bit integer."""
        assert SUPPORTED_CEILING < 2**64

    def test_unsupported_variant(self):
        """Test the explicit out-of-range result."""
        selection = select_witnesses(SUPPORTED_CEILING)
        assert isinstance(selection, UnsupportedRange)
        assert not isinstance(selection, WitnessSet)
        assert selection.value == SUPPORTED_CEILING

    def test_witness_set_immutable(self):
        """Test that witness sets cannot be modified."""
        entry = select_witnesses(101)
        with pytest.raises(AttributeError):
            entry.witnesses = (5,)


class TestDecompose:
    """Tests for decompose function."""

    def test_values(self):
        """Test known decompositions."""
        assert decompose(1) == (1, 0)
        assert decompose(2) == (1, 1)
        assert decompose(12) == (3, 2)
        assert decompose(2_046) == (1_023, 1)
        assert decompose(1 << 20) == (1, 20)

    def test_invalid(self):
        """Test that non-positive input raises error."""
        with pytest.raises(ValueError):
            decompose(0)


class TestMillerRabin:
    """Tests for miller_rabin function."""

    def test_base_two_pseudoprime(self):
        """Test that 2047 passes base 2 alone but not base 3."""
        assert miller_rabin(2047, (2,))
        assert not miller_rabin(2047, (3,))
        assert not miller_rabin(2047, (2, 3))

    def test_prime_passes_all_witnesses(self):
        """Test that primes pass any witness set."""
        for p in (101, 7919, 104_729):
            assert miller_rabin(p, (2, 3, 5, 7, 11))

    def test_three_mod_four(self):
        """Test composites with a single factor of two in n - 1."""
        assert not miller_rabin(15, (2,))
        assert miller_rabin(19, (2,))


class TestIsPrimeArray:
    """Tests for is_prime_array function."""

    def test_mixed_array(self):
        """Test array with mix of primes and composites."""
        numbers = np.array([2, 3, 4, 5, 6, 7, 8, 9, 10])
        expected = np.array([True, True, False, True, False, True, False, False, False])

        result = is_prime_array(numbers)
        np.testing.assert_array_equal(result, expected)

    def test_empty_array(self):
        """Test empty array."""
        result = is_prime_array(np.array([], dtype=np.int64))
        assert len(result) == 0
        assert result.dtype == bool
