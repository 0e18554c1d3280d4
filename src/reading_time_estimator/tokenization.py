from __future__ import annotations

import re
from typing import List, Tuple

# Letters and digits, optionally joined by single hyphens ("well-known").
WORD_PATTERN = re.compile(r"[^\W_]+(?:-[^\W_]+)*", re.UNICODE)
SENTENCE_END_PATTERN = re.compile(r"[.!?]+\s*")


def tokenize_words(text: str) -> List[str]:
    """Return the words of ``text`` in left-to-right order."""
    return WORD_PATTERN.findall(text)


def count_words(text: str) -> Tuple[int, List[str]]:
    """Return the number of words in ``text`` together with the words themselves."""
    words = tokenize_words(text)
    return len(words), words


def count_sentences(text: str) -> int:
    """Count sentence spans separated by runs of terminal punctuation."""
    stripped = text.strip()
    if not stripped:
        return 0
    return sum(1 for span in SENTENCE_END_PATTERN.split(stripped) if span.strip())
