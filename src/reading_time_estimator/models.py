from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class EstimationResult:
    """Outcome of a single reading-time estimation."""

    reading_time: float
    word_count: int
    sentence_count: int
    syllable_count: int
    flesch_kincaid_index: float

    def to_dict(self) -> dict[str, Any]:
        """Return a flat, JSON-serializable mapping of the result fields."""
        return dict(asdict(self))


@dataclass(frozen=True, slots=True)
class StreamTotals:
    """Aggregate counts collected while streaming a line source."""

    words: int
    sentences: int
    syllables: int
