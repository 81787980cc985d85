"""Theme word sources: the bundled catalog and an optional Gemini source."""

from __future__ import annotations

import json
from typing import Callable, List, Optional, Protocol, Sequence

from ..core.models import Theme
from ..io.gemini_client import GeminiClient
from ..utils.logger import get_logger
from .catalog import DEFAULT_CATALOG, find_theme
from .normalization import clean_words


LOGGER = get_logger(__name__)


class ThemeSource(Protocol):
    """Protocol implemented by every theme word provider."""

    def fetch(self, name: str, limit: int = 20) -> Theme:
        ...


class CatalogThemeSource:
    """Looks themes up in a fixed catalog."""

    def __init__(self, catalog: Sequence[Theme] = DEFAULT_CATALOG) -> None:
        self.catalog = list(catalog)

    def fetch(self, name: str, limit: int = 20) -> Theme:
        theme = find_theme(name, self.catalog)
        return Theme(name=theme.name, words=tuple(theme.words[:limit]))


class GeminiThemeSource:
    """Asks Gemini for simple, familiar words about a theme."""

    PROMPT = (
        "You are writing a daily word-search puzzle for older adults. "
        "Theme: '{theme}'. "
        "Return a SINGLE JSON object with a \"words\" array of {limit} distinct, "
        "familiar English words related to the theme. "
        "Every word must be a single word of {min_length} to {max_length} letters A-Z, "
        "with no spaces, hyphens or proper names."
    )

    def __init__(
        self,
        client_factory: Callable[[], GeminiClient] = GeminiClient,
        min_length: int = 3,
        max_length: int = 10,
    ) -> None:
        self.client_factory = client_factory
        self.min_length = min_length
        self.max_length = max_length

    def fetch(self, name: str, limit: int = 20) -> Theme:
        prompt = self.PROMPT.format(
            theme=name, limit=limit, min_length=self.min_length, max_length=self.max_length
        )
        text = self.client_factory().generate_text(prompt, json_output=True)
        words = [
            word
            for word in clean_words(self._parse_words(text), min_length=self.min_length)
            if len(word) <= self.max_length
        ]
        LOGGER.info("Gemini produced %s usable words for '%s'", len(words), name)
        return Theme(name=name, words=tuple(words[:limit]))

    @staticmethod
    def _parse_words(text: str) -> List[str]:
        """Accept a JSON object, a JSON list, or JSON lines with a ``word`` key."""

        stripped = (text or "").strip()
        if stripped.startswith("```"):
            lines = stripped.splitlines()
            inner = lines[1:-1] if lines[-1].strip().startswith("```") else lines[1:]
            stripped = "\n".join(inner).strip()
        try:
            data = json.loads(stripped)
        except json.JSONDecodeError:
            data = None

        if isinstance(data, dict):
            data = data.get("words", [])
        if isinstance(data, list):
            entries = [item.get("word") if isinstance(item, dict) else item for item in data]
            return [entry for entry in entries if isinstance(entry, str)]

        words: List[str] = []
        for line in stripped.splitlines():
            line = line.strip().strip(",")
            if not line:
                continue
            try:
                entry = json.loads(line)
            except json.JSONDecodeError:
                continue
            if isinstance(entry, dict) and isinstance(entry.get("word"), str):
                words.append(entry["word"])
        if not words:
            LOGGER.warning("Could not parse any words from Gemini response")
        return words


def merge_theme_sources(
    primary: Optional[ThemeSource],
    fallbacks: Sequence[ThemeSource],
    name: str,
    limit: int = 20,
) -> Optional[Theme]:
    """Return the first non-empty theme from the primary then the fallbacks."""

    sources: List[ThemeSource] = ([primary] if primary else []) + list(fallbacks)
    for source in sources:
        try:
            theme = source.fetch(name, limit=limit)
        except Exception as exc:
            LOGGER.warning("Theme source %s failed for '%s': %s", type(source).__name__, name, exc)
            continue
        if theme.words:
            return theme
        LOGGER.warning("Theme source %s returned no words for '%s'", type(source).__name__, name)
    return None
