"""Heuristic syllable estimation for Latin and Cyrillic words.

The counter walks vowel runs rather than consulting a dictionary. Russian
words get two extra rules: yotated vowels (е, ё, ю, я) after a consonant open
a new syllable, and "й" after a vowel closes one. Latin words get the usual
"-le" and "-es"/"-ed" corrections.
"""

from __future__ import annotations

import re
from typing import Iterable

RUSSIAN_VOWELS = frozenset("аеёиоуыэюя")
ENGLISH_VOWELS = frozenset("aeiouy")
ALL_VOWELS = RUSSIAN_VOWELS | ENGLISH_VOWELS
YOTATED_VOWELS = frozenset("еёюя")
SHORT_I = "й"

CYRILLIC_PATTERN = re.compile(
    "[\u0400-\u04FF\u0500-\u052F\u1C80-\u1C8F\u1D2B\u1D78\u2DE0-\u2DFF\uA640-\uA69F"
    "\uFE2E-\uFE2F\U0001E030-\U0001E08F]"
)


def is_russian_word(word: str) -> bool:
    """Return True if ``word`` contains at least one Cyrillic character."""
    return CYRILLIC_PATTERN.search(word) is not None


def count_syllables(word: str) -> int:
    """
    Estimate the number of syllables in a single word.

    The result is always at least 1, including for words without vowels.
    """
    word = word.lower()
    is_russian = is_russian_word(word)
    vowels = RUSSIAN_VOWELS if is_russian else ENGLISH_VOWELS

    syllables = 0
    last_was_vowel = False
    last_char = ""

    for idx, char in enumerate(word):
        if char in vowels:
            if not last_was_vowel or (
                is_russian and char in YOTATED_VOWELS and last_char not in ALL_VOWELS
            ):
                syllables += 1
            last_was_vowel = True
        else:
            if (
                is_russian
                and char == SHORT_I
                and idx > 0
                and word[idx - 1] in ALL_VOWELS
            ):
                syllables += 1
            last_was_vowel = False
        last_char = char

    if not is_russian:
        if word.endswith("le") and len(word) > 2 and word[-3] not in vowels:
            syllables += 1
        if word.endswith(("es", "ed")) and syllables > 1:
            syllables -= 1

    return max(syllables, 1)


def sum_syllables(words: Iterable[str]) -> int:
    """Total the estimated syllables over ``words``."""
    return sum(count_syllables(word) for word in words)
