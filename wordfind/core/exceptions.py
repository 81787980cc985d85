"""Custom exception hierarchy for word find generation."""


class WordFindError(Exception):
    """Base exception for puzzle failures."""


class CatalogError(WordFindError):
    """Raised when a theme catalog is empty or cannot be parsed."""


class ValidationError(WordFindError):
    """Raised when the puzzle integrity checks fail."""
