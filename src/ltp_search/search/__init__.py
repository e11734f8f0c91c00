"""Generative left-truncatable prime search."""

from ltp_search.search.config import (
    DEFAULT_CAPACITY,
    DEFAULT_MAX_ORDER,
    DEFAULT_SEEDS,
    MAX_SUPPORTED_INDEX,
    SearchConfig,
)
from ltp_search.search.engine import (
    LtpSearchEngine,
    SearchResult,
    SearchStats,
    find_ltp,
    generate_ltps,
    is_extendable,
)
from ltp_search.search.ring_buffer import RingBuffer

__all__ = [
    "DEFAULT_CAPACITY",
    "DEFAULT_MAX_ORDER",
    "DEFAULT_SEEDS",
    "MAX_SUPPORTED_INDEX",
    "SearchConfig",
    "LtpSearchEngine",
    "SearchResult",
    "SearchStats",
    "find_ltp",
    "generate_ltps",
    "is_extendable",
    "RingBuffer",
]
