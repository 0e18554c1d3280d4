from __future__ import annotations

import logging
import math
from concurrent.futures import ThreadPoolExecutor
from typing import List, Sequence

from .errors import InvalidInputError
from .syllables import sum_syllables

LOGGER = logging.getLogger(__name__)


def validate_worker_count(worker_count: int) -> None:
    """Reject worker counts that cannot drive a pool."""
    if worker_count < 1:
        raise InvalidInputError(f"worker_count must be >= 1, got {worker_count}.")


def chunk_words(words: Sequence[str], worker_count: int) -> List[List[str]]:
    """
    Split ``words`` into ``worker_count`` contiguous chunks.

    Every chunk but the trailing ones holds ``ceil(len(words) / worker_count)``
    words; trailing chunks may be shorter or empty.
    """
    validate_worker_count(worker_count)
    chunk_size = math.ceil(len(words) / worker_count)
    chunks: List[List[str]] = []
    for idx in range(worker_count):
        start = min(idx * chunk_size, len(words))
        end = min(start + chunk_size, len(words))
        chunks.append(list(words[start:end]))
    return chunks


def count_syllables_parallel(words: Sequence[str], worker_count: int) -> int:
    """Sum syllables over ``words`` using one pool task per chunk."""
    chunks = chunk_words(words, worker_count)
    with ThreadPoolExecutor(
        max_workers=worker_count, thread_name_prefix="syllables"
    ) as executor:
        futures = [executor.submit(sum_syllables, chunk) for chunk in chunks]
        # result() re-raises any worker failure in the caller.
        partial_sums = [future.result() for future in futures]
    LOGGER.debug(
        "Counted syllables across %d chunks: %s", len(partial_sums), partial_sums
    )
    return sum(partial_sums)
