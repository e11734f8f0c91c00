"""Search configuration.

The defaults reproduce the classic generator: seeds {2, 3, 5, 7}, a 680-slot
ring buffer and positions 1..2166 (every LTP of up to nine digits).

The capacity must exceed the number of extendable LTPs that are live at the
same time. Records of the current order stay live until they are read for
the last prepended digit, so the buffer briefly holds most of one order plus
the extendable LTPs found so far in the next. Up to position 2166 that peak
is 676 records.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Tuple

DEFAULT_SEEDS: Tuple[int, ...] = (2, 3, 5, 7)
DEFAULT_CAPACITY = 680
MAX_SUPPORTED_INDEX = 2166
DEFAULT_MAX_ORDER = 9


@dataclass(frozen=True)
class SearchConfig:
    """Parameters for LtpSearchEngine."""
    seeds: Tuple[int, ...] = DEFAULT_SEEDS
    capacity: int = DEFAULT_CAPACITY
    max_index: int = MAX_SUPPORTED_INDEX
    max_order: int = DEFAULT_MAX_ORDER   # Last order (prefix position) tried

    def __post_init__(self):
        seeds = tuple(int(s) for s in self.seeds)
        object.__setattr__(self, "seeds", seeds)

        if not seeds:
            raise ValueError("At least one seed is required")
        if any(s < 2 or s > 9 for s in seeds):
            raise ValueError(f"Seeds must be single-digit values >= 2, got {seeds}")
        if list(seeds) != sorted(set(seeds)):
            raise ValueError(f"Seeds must be strictly ascending, got {seeds}")
        if self.capacity <= len(seeds):
            raise ValueError(
                f"Capacity must exceed the seed count ({len(seeds)}), got {self.capacity}"
            )
        if self.max_index < 1:
            raise ValueError(f"max_index must be >= 1, got {self.max_index}")
        if self.max_order < 1:
            raise ValueError(f"max_order must be >= 1, got {self.max_order}")

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["seeds"] = list(self.seeds)
        return d

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'SearchConfig':
        kwargs = {k: v for k, v in d.items() if k in cls.__dataclass_fields__}
        if "seeds" in kwargs:
            kwargs["seeds"] = tuple(kwargs["seeds"])
        return cls(**kwargs)
