"""ltp_search - left-truncatable prime generator with deterministic Miller-Rabin testing."""

__version__ = "0.1.0"

from ltp_search.core.primality import is_prime
from ltp_search.core.truncation import is_left_truncatable
from ltp_search.errors import (
    BufferExhaustionError,
    InvalidIndexError,
    LtpSearchError,
    SearchExhaustedError,
    UnsupportedMagnitudeError,
)
from ltp_search.search.config import SearchConfig
from ltp_search.search.engine import LtpSearchEngine, find_ltp, generate_ltps

__all__ = [
    "is_prime",
    "is_left_truncatable",
    "BufferExhaustionError",
    "InvalidIndexError",
    "LtpSearchError",
    "SearchExhaustedError",
    "UnsupportedMagnitudeError",
    "SearchConfig",
    "LtpSearchEngine",
    "find_ltp",
    "generate_ltps",
]
