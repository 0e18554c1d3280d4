import threading
import time
from typing import Iterator, List

import pytest

from reading_time_estimator.errors import InvalidInputError
from reading_time_estimator.models import StreamTotals
from reading_time_estimator.streaming import process_lines


def test_process_lines_counts_and_skips_blank_lines():
    totals = process_lines(["The cat sat.", "", "   ", "  The dog ran.  "], 2)

    assert totals.words == 6
    assert totals.sentences == 2
    assert totals.syllables == 6


def test_process_lines_detects_sentences_per_line():
    """A sentence wrapped across lines is counted once per line."""
    totals = process_lines(["The cat", "sat. The dog ran."], 3)
    assert totals.sentences == 3
    assert totals.words == 6


def test_process_lines_with_more_workers_than_lines():
    totals = process_lines(["One line only."], 16)
    assert totals.words == 3
    assert totals.syllables == 6


def test_process_lines_propagates_reader_errors():
    def failing_lines() -> Iterator[str]:
        yield "First line is fine."
        raise OSError("disk went away")

    with pytest.raises(OSError, match="disk went away"):
        process_lines(failing_lines(), 2)


def test_process_lines_reraises_worker_errors(monkeypatch: pytest.MonkeyPatch):
    def broken_sum(words: object) -> int:
        raise RuntimeError("worker exploded")

    monkeypatch.setattr("reading_time_estimator.streaming.sum_syllables", broken_sum)
    with pytest.raises(RuntimeError, match="worker exploded"):
        process_lines(["a line.", "another line.", "a third line."], 2)


def test_process_lines_rejects_zero_workers():
    with pytest.raises(InvalidInputError):
        process_lines(["text."], 0)


def test_process_lines_blocks_reader_while_workers_are_busy(
    monkeypatch: pytest.MonkeyPatch,
):
    """The reader stalls once every worker is busy and the line queue is full."""
    release = threading.Event()

    def held_sum(words: List[str]) -> int:
        release.wait(timeout=5)
        return len(words)

    monkeypatch.setattr("reading_time_estimator.streaming.sum_syllables", held_sum)

    yielded: List[int] = []

    def lines() -> Iterator[str]:
        for idx in range(50):
            yielded.append(idx)
            yield "Word."

    worker_count = 2
    outcome: dict[str, StreamTotals] = {}
    reader = threading.Thread(
        target=lambda: outcome.update(totals=process_lines(lines(), worker_count))
    )
    reader.start()
    time.sleep(0.3)
    in_flight = len(yielded)
    release.set()
    reader.join(timeout=5)

    # Held by workers, queued, and the one line the reader is blocked on.
    assert in_flight <= 2 * worker_count + 1
    assert not reader.is_alive()
    assert outcome["totals"].words == 50
    assert outcome["totals"].syllables == 50
