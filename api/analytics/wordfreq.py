"""
Word-frequency utilities.

Normalization: lower-case, drop every character that is not an ASCII letter
or whitespace, then split on whitespace runs. "Don't" becomes "dont" and
"state-of-the-art" becomes "stateoftheart".
"""

from __future__ import annotations

import re
from collections import Counter

DEFAULT_MIN_REPEATS = 3

_NON_WORD_RE = re.compile(r"[^a-z\s]")


def count_words(text: str) -> dict[str, int]:
    cleaned = _NON_WORD_RE.sub("", (text or "").lower())
    # str.split() without arguments never yields empty tokens.
    return dict(Counter(cleaned.split()))


def has_repeated_word(text: str, min_count: int = DEFAULT_MIN_REPEATS) -> bool:
    return any(count >= min_count for count in count_words(text).values())


def filter_repeated(rows: list[dict], *, min_count: int = DEFAULT_MIN_REPEATS, field: str = "text") -> list[dict]:
    return [row for row in rows if has_repeated_word(str(row.get(field) or ""), min_count)]
