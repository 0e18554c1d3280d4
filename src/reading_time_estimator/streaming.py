"""
Line-oriented estimation that never materializes the whole text.

The calling thread acts as the single reader: it keeps word and sentence
totals in source order and hands each non-blank line to a fixed pool of
worker threads that count syllables. Sentence boundaries are detected per
line, so a sentence that wraps onto the next line is counted twice; the
whole-text path does not share this behavior.
"""

from __future__ import annotations

import logging
import queue
import threading
from typing import Iterable, List

from .models import StreamTotals
from .parallel import validate_worker_count
from .syllables import sum_syllables
from .tokenization import count_sentences, tokenize_words

LOGGER = logging.getLogger(__name__)

_STOP = object()


def process_lines(lines: Iterable[str], worker_count: int) -> StreamTotals:
    """
    Count words, sentences and syllables over ``lines``.

    Errors raised while iterating ``lines`` propagate unchanged once the
    workers have shut down. A failure inside a worker is re-raised here.
    """
    validate_worker_count(worker_count)
    # Bounded so the reader cannot run ahead of busy workers.
    line_queue: queue.Queue[object] = queue.Queue(maxsize=worker_count)
    results: queue.Queue[int | Exception] = queue.Queue()
    workers = [
        threading.Thread(
            target=_syllable_worker,
            args=(worker_id, line_queue, results),
            name=f"syllable-worker-{worker_id}",
            daemon=True,
        )
        for worker_id in range(worker_count)
    ]
    for worker in workers:
        worker.start()

    total_words = 0
    total_sentences = 0
    try:
        for raw_line in lines:
            line = raw_line.strip()
            if not line:
                LOGGER.debug("Skipping empty line")
                continue
            total_words += len(tokenize_words(line))
            total_sentences += count_sentences(line)
            LOGGER.debug(
                "Totals after line: words=%d sentences=%d",
                total_words,
                total_sentences,
            )
            line_queue.put(line)
    finally:
        for _ in workers:
            line_queue.put(_STOP)
        for worker in workers:
            worker.join()
        LOGGER.debug("All %d syllable workers finished", len(workers))

    total_syllables = _drain_results(results)
    return StreamTotals(
        words=total_words, sentences=total_sentences, syllables=total_syllables
    )


def _syllable_worker(
    worker_id: int,
    line_queue: queue.Queue[object],
    results: queue.Queue[int | Exception],
) -> None:
    LOGGER.debug("Worker %d started", worker_id)
    failed = False
    while True:
        item = line_queue.get()
        if item is _STOP:
            break
        if failed:
            # Keep consuming so the reader never blocks on a dead worker.
            continue
        try:
            partial = sum_syllables(tokenize_words(str(item)))
        except Exception as exc:
            LOGGER.error("Worker %d failed: %s", worker_id, exc)
            results.put(exc)
            failed = True
            continue
        LOGGER.debug("Worker %d counted %d syllables", worker_id, partial)
        results.put(partial)
    LOGGER.debug("Worker %d finished", worker_id)


def _drain_results(results: queue.Queue[int | Exception]) -> int:
    partial_sums: List[int] = []
    while True:
        try:
            item = results.get_nowait()
        except queue.Empty:
            break
        if isinstance(item, Exception):
            raise item
        partial_sums.append(item)
    return sum(partial_sums)
