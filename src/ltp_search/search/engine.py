"""Generative search for left-truncatable primes.

Every LTP with k+1 digits is a k-digit LTP with one nonzero digit prepended,
so LTPs can be produced by extending shorter ones instead of testing every
integer. The search keeps the extendable LTPs of the current length in a ring
buffer and, for each order (position of the prepended digit):

1. Fixes the window of records that are live when the order starts.
2. For leading digits 1..9, and each window record in buffer order, tests
   ``record + digit * 10**order``.
3. Counts every prime candidate. A candidate is stored for the next order
   only if some ``candidate + v * 10**(order + 1)`` (v in 1..9) is prime;
   otherwise it is a terminal LTP and is dropped after counting.

Within an order the window is ascending and the leading digit dominates the
value, so candidates come out in ascending numeric order. Window records are
peeked for digits 1..8 and popped on digit 9, which frees their slots while
the order finishes.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterator, Optional

import numpy as np

from ltp_search.core.primality import is_prime
from ltp_search.errors import InvalidIndexError, SearchExhaustedError
from ltp_search.search.config import SearchConfig
from ltp_search.search.ring_buffer import RingBuffer

LEADING_DIGITS = range(1, 10)


@dataclass
class SearchStats:
    """Counters collected during one search."""
    orders_completed: int = 0
    candidates_tested: int = 0
    primes_found: int = 0
    records_stored: int = 0
    terminal_discarded: int = 0
    peak_buffer_size: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class SearchResult:
    """The LTP at a position together with the search counters."""
    index: int
    value: int
    stats: SearchStats = field(default_factory=SearchStats)


def is_extendable(value: int, multiplier: int) -> bool:
    """Check whether prepending one digit at ``multiplier`` yields a prime.

    Args:
        value: An LTP with fewer digits than ``multiplier``.
        multiplier: Power of ten of the digit position to fill.

    Returns:
        True at the first prime ``value + v * multiplier``, v ascending in 1..9.
    """
    return any(is_prime(value + v * multiplier) for v in LEADING_DIGITS)


class LtpSearchEngine:
    """Produce left-truncatable primes in ascending order.

    Each call builds its own buffer, so results never depend on earlier
    calls.

    Attributes:
        config: Seeds, buffer capacity and range limits.
    """

    def __init__(self, config: Optional[SearchConfig] = None):
        self.config = config if config is not None else SearchConfig()

    def _check_index(self, index: int) -> None:
        if not 1 <= index <= self.config.max_index:
            raise InvalidIndexError(index, self.config.max_index)

    def iter_ltps(self, stats: Optional[SearchStats] = None) -> Iterator[int]:
        """Yield LTPs in ascending order: the seeds, then one order at a time.

        A candidate is yielded before its extensions are probed, so a caller
        that stops at a given LTP never pays for probing it.

        Args:
            stats: Optional counters updated while iterating.

        Raises:
            BufferExhaustionError: If live records exceed the buffer capacity.
        """
        if stats is None:
            stats = SearchStats()

        seeds = self.config.seeds
        buffer = RingBuffer(self.config.capacity, seeds)
        stats.peak_buffer_size = buffer.peak

        for seed in seeds:
            stats.primes_found += 1
            yield seed

        for order in range(1, self.config.max_order + 1):
            multiplier = 10 ** order
            next_multiplier = multiplier * 10
            window = len(buffer)
            last_digit = LEADING_DIGITS[-1]

            for digit in LEADING_DIGITS:
                for offset in range(window):
                    if digit == last_digit:
                        record = buffer.pop()
                    else:
                        record = buffer.peek(offset)

                    candidate = record + digit * multiplier
                    stats.candidates_tested += 1
                    if not is_prime(candidate):
                        continue

                    stats.primes_found += 1
                    yield candidate

                    if is_extendable(candidate, next_multiplier):
                        buffer.push(candidate)
                        stats.records_stored += 1
                        stats.peak_buffer_size = max(stats.peak_buffer_size, buffer.peak)
                    else:
                        stats.terminal_discarded += 1

            stats.orders_completed += 1

    def search(self, index: int) -> SearchResult:
        """Find the LTP at a 1-based position and report search counters.

        Raises:
            InvalidIndexError: If index is outside [1, config.max_index].
            SearchExhaustedError: If config.max_order is reached first.
        """
        self._check_index(index)

        stats = SearchStats()
        count = 0
        for value in self.iter_ltps(stats):
            count += 1
            if count == index:
                return SearchResult(index=index, value=value, stats=stats)

        raise SearchExhaustedError(index, self.config.max_order, count)

    def find(self, index: int) -> int:
        """Return the LTP at a 1-based position (1 -> 2, 5 -> 13)."""
        return self.search(index).value

    def generate(self, count: int) -> np.ndarray:
        """Return the first ``count`` LTPs as an int64 array.

        Raises:
            InvalidIndexError: If count is outside [1, config.max_index].
            SearchExhaustedError: If config.max_order is reached first.
        """
        self._check_index(count)

        values = np.empty(count, dtype=np.int64)
        filled = 0
        for value in self.iter_ltps():
            values[filled] = value
            filled += 1
            if filled == count:
                return values

        raise SearchExhaustedError(count, self.config.max_order, filled)


def find_ltp(index: int) -> int:
    """Return the LTP at a 1-based position using the default configuration."""
    return LtpSearchEngine().find(index)


def generate_ltps(count: int) -> np.ndarray:
    """Return the first ``count`` LTPs using the default configuration."""
    return LtpSearchEngine().generate(count)
