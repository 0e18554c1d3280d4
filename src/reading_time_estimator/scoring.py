from __future__ import annotations

EASIEST_SCORE = 100.0
MIN_WORDS = 3
MIN_SENTENCES = 2


def flesch_kincaid_index(
    words_count: float, sentences_count: float, syllables_count: float
) -> float:
    """
    Compute the Flesch reading-ease index from aggregate counts.

    Empty input scores 0. Inputs too short for the ratios to mean anything
    (fewer than three words or a single sentence) score as maximally easy.
    The formula result is not clamped.
    """
    if words_count == 0 or sentences_count == 0:
        return 0.0
    if words_count < MIN_WORDS or sentences_count < MIN_SENTENCES:
        return EASIEST_SCORE
    return (
        206.835
        - 1.015 * (words_count / sentences_count)
        - 84.6 * (syllables_count / words_count)
    )
