"""Random selection of the working word set for one puzzle."""

from __future__ import annotations

from typing import List, Sequence

from ..core.constants import MAX_WORDS
from ..core.models import RandomSource
from .normalization import clean_words
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def sample_words(words: Sequence[str], rng: RandomSource, max_count: int = MAX_WORDS) -> List[str]:
    """Shuffle ``words`` and return up to ``max_count`` normalized entries."""

    if max_count < 0:
        raise ValueError("max_count must not be negative")
    pool = clean_words(words)
    rng.shuffle(pool)
    selected = pool[:max_count]
    LOGGER.debug("Sampled %s of %s theme words: %s", len(selected), len(pool), selected)
    return selected
