"""Exception hierarchy for left-truncatable prime search.

All errors raised by the search engine derive from LtpSearchError so callers
can catch them in one place. Each subclass also derives from the closest
builtin exception, so generic ``except ValueError`` style handlers keep working.
"""

from __future__ import annotations


class LtpSearchError(Exception):
    """Base class for search errors."""


class InvalidIndexError(LtpSearchError, ValueError):
    """Requested LTP position lies outside the supported range."""

    def __init__(self, index: int, max_index: int):
        super().__init__(f"Index must be in [1, {max_index}], got {index}")
        self.index = index
        self.max_index = max_index


class UnsupportedMagnitudeError(LtpSearchError, ArithmeticError):
    """Primality candidate beyond the deterministic witness table."""

    def __init__(self, value: int, ceiling: int):
        super().__init__(
            f"No deterministic witness set for {value} (supported: n < {ceiling})"
        )
        self.value = value
        self.ceiling = ceiling


class BufferExhaustionError(LtpSearchError, RuntimeError):
    """Ring buffer is full and a live record would be overwritten."""

    def __init__(self, capacity: int):
        super().__init__(f"Ring buffer full ({capacity} live records)")
        self.capacity = capacity


class SearchExhaustedError(LtpSearchError, RuntimeError):
    """Order safety bound reached before the requested LTP was produced."""

    def __init__(self, index: int, max_order: int, found: int):
        super().__init__(
            f"LTP #{index} not reached within {max_order} orders "
            f"(only {found} LTPs generated)"
        )
        self.index = index
        self.max_order = max_order
        self.found = found
