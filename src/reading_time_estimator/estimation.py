from __future__ import annotations

import logging
import math
import os
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, TextIO, Union

from .errors import InvalidInputError, SourceReadError
from .models import EstimationResult
from .parallel import count_syllables_parallel, validate_worker_count
from .scoring import flesch_kincaid_index
from .streaming import process_lines
from .tokenization import count_sentences, count_words

LOGGER = logging.getLogger(__name__)

HARD_TEXT_THRESHOLD = 60.0
HARD_TEXT_SPEED_FACTOR = 0.8
VISUALS_TIME_FACTOR = 1.1

LineSource = Union[str, os.PathLike[str], TextIO]


def estimate_reading_time(
    word_count: int,
    fk_index: float,
    reading_speed: float,
    has_visuals: bool,
) -> float:
    """Return minutes needed to read ``word_count`` words, rounded to 2 decimals."""
    adjusted_speed = reading_speed
    if fk_index < HARD_TEXT_THRESHOLD:
        adjusted_speed *= HARD_TEXT_SPEED_FACTOR
        LOGGER.debug("Adjusting reading speed for complex text: %.2f", adjusted_speed)

    reading_time = word_count / adjusted_speed
    if has_visuals:
        reading_time *= VISUALS_TIME_FACTOR
        LOGGER.debug("Adjusting reading time for visuals")

    # Half away from zero; reading_time is never negative.
    return math.floor(reading_time * 100 + 0.5) / 100


def build_result(
    word_count: int,
    sentence_count: int,
    syllable_count: int,
    reading_speed: float,
    has_visuals: bool,
) -> EstimationResult:
    """Score the aggregate counts and wrap them into an EstimationResult."""
    fk_index = flesch_kincaid_index(word_count, sentence_count, syllable_count)
    result = EstimationResult(
        reading_time=estimate_reading_time(
            word_count, fk_index, reading_speed, has_visuals
        ),
        word_count=word_count,
        sentence_count=sentence_count,
        syllable_count=syllable_count,
        flesch_kincaid_index=fk_index,
    )
    LOGGER.info("Final result: %s", result)
    return result


def estimate_parallel(
    text: str,
    reading_speed: float,
    has_visuals: bool,
    worker_count: int,
) -> EstimationResult:
    """
    Estimate reading time for an in-memory text.

    Syllables are counted by ``worker_count`` pool tasks, each owning a
    contiguous chunk of the word list. Raises InvalidInputError before any
    task is started when the text has no words or no sentences.
    """
    _validate_parameters(reading_speed, worker_count)
    word_count, words = count_words(text)
    sentence_count = count_sentences(text)
    if word_count == 0 or sentence_count == 0:
        raise InvalidInputError("text is empty or invalid")

    syllable_count = count_syllables_parallel(words, worker_count)
    return build_result(
        word_count, sentence_count, syllable_count, reading_speed, has_visuals
    )


def estimate_from_source(
    source: LineSource,
    reading_speed: float,
    has_visuals: bool,
    worker_count: int,
) -> EstimationResult:
    """
    Estimate reading time by streaming ``source`` line by line.

    ``source`` is either a filesystem path, opened and closed by this call, or
    an already open text stream that stays owned by the caller.
    """
    _validate_parameters(reading_speed, worker_count)
    with _open_lines(source) as lines:
        try:
            totals = process_lines(lines, worker_count)
        except UnicodeDecodeError as exc:
            raise InvalidInputError(f"source is not valid UTF-8 text: {exc}") from exc
        except OSError as exc:
            LOGGER.error("Error reading source: %s", exc)
            raise SourceReadError(f"Unable to read source: {exc}") from exc

    if totals.words == 0 or totals.sentences == 0:
        raise InvalidInputError("text is empty or invalid")
    return build_result(
        totals.words, totals.sentences, totals.syllables, reading_speed, has_visuals
    )


def estimate_from_file(
    path: str | Path,
    reading_speed: float,
    has_visuals: bool,
    worker_count: int,
) -> EstimationResult:
    """Stream the file at ``path`` through estimate_from_source."""
    return estimate_from_source(Path(path), reading_speed, has_visuals, worker_count)


def read_text(path: str | Path) -> str:
    """Read a UTF-8 file into one string, joining its lines with spaces."""
    try:
        with Path(path).open("r", encoding="utf-8") as handle:
            return "".join(line.rstrip("\r\n") + " " for line in handle)
    except UnicodeDecodeError as exc:
        raise InvalidInputError(f"{path} is not valid UTF-8 text: {exc}") from exc
    except OSError as exc:
        raise SourceReadError(f"Unable to read {path}: {exc}") from exc


@contextmanager
def _open_lines(source: LineSource) -> Iterator[TextIO]:
    if isinstance(source, (str, os.PathLike)):
        LOGGER.info("Opening file: %s", source)
        try:
            handle = open(source, "r", encoding="utf-8")
        except OSError as exc:
            LOGGER.error("Error opening file %s: %s", source, exc)
            raise SourceReadError(f"Unable to open {source}: {exc}") from exc
        with handle:
            yield handle
        return
    yield source


def _validate_parameters(reading_speed: float, worker_count: int) -> None:
    if reading_speed <= 0:
        raise InvalidInputError(f"reading_speed must be > 0, got {reading_speed}.")
    validate_worker_count(worker_count)
