"""Shared helpers for theme word normalization."""

from __future__ import annotations

import re
from typing import Iterable, List

from ..core.constants import MIN_WORD_LENGTH

WORD_RE = re.compile(r"[^A-Z]")


def clean_word(text: str) -> str:
    """Return ``text`` upper-cased with everything outside ``A``-``Z`` removed."""

    if not text:
        return ""
    return WORD_RE.sub("", text.upper())


def clean_words(words: Iterable[str], min_length: int = MIN_WORD_LENGTH) -> List[str]:
    """Normalize a word list, dropping short entries and later duplicates."""

    cleaned: List[str] = []
    seen: set[str] = set()
    for raw in words:
        word = clean_word(raw)
        if len(word) < min_length or word in seen:
            continue
        seen.add(word)
        cleaned.append(word)
    return cleaned


__all__ = ["clean_word", "clean_words"]
