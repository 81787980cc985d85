"""Theme catalog and the daily theme rotation."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Sequence

from ..core.exceptions import CatalogError
from ..core.models import Theme
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


DEFAULT_THEME_WORDS = {
    "Animals": ["CAT", "DOG", "BIRD", "FISH", "LION", "BEAR", "WOLF", "DEER", "MOLE", "HARE"],
    "Garden": ["ROSE", "TULIP", "DAISY", "SEED", "SOIL", "HOSE", "RAKE", "SHOVEL", "BLOOM", "WEED"],
    "Kitchen": ["SPOON", "FORK", "KNIFE", "PLATE", "BOWL", "OVEN", "KETTLE", "LADLE", "PAN", "CUP"],
    "Weather": ["RAIN", "SNOW", "WIND", "CLOUD", "STORM", "SUNNY", "FOG", "HAIL", "FROST", "BREEZE"],
    "Fruit": ["APPLE", "PEAR", "GRAPE", "LEMON", "MANGO", "PLUM", "PEACH", "CHERRY", "KIWI", "MELON"],
    "Ocean": ["WAVE", "SHELL", "CORAL", "WHALE", "CRAB", "TIDE", "SAND", "SHARK", "REEF", "SQUID"],
    "Music": ["PIANO", "DRUM", "FLUTE", "SONG", "NOTE", "CHOIR", "BANJO", "HARP", "TUBA", "VIOLIN"],
    "Colors": ["RED", "BLUE", "GREEN", "YELLOW", "PURPLE", "ORANGE", "PINK", "BROWN", "BLACK", "WHITE"],
    "Birds": ["ROBIN", "EAGLE", "OWL", "CROW", "DOVE", "SWAN", "HAWK", "WREN", "FINCH", "HERON"],
    "Trees": ["OAK", "PINE", "MAPLE", "BIRCH", "ELM", "CEDAR", "ASH", "WILLOW", "SPRUCE", "ALDER"],
    "Breakfast": ["EGGS", "TOAST", "BACON", "JAM", "OATS", "JUICE", "COFFEE", "TEA", "WAFFLE", "HONEY"],
    "Family": ["MOTHER", "FATHER", "SISTER", "BROTHER", "AUNT", "UNCLE", "COUSIN", "NIECE", "NEPHEW", "BABY"],
    "Travel": ["TRAIN", "PLANE", "SHIP", "MAP", "TICKET", "HOTEL", "BEACH", "BAGS", "ROAD", "TRIP"],
    "Sports": ["GOLF", "TENNIS", "SOCCER", "RUGBY", "HOCKEY", "BOWLING", "SWIM", "SKI", "DARTS", "POLO"],
    "Farm": ["COW", "PIG", "HEN", "GOAT", "SHEEP", "BARN", "HAY", "TRACTOR", "HORSE", "DUCK"],
    "Seasons": ["SPRING", "SUMMER", "AUTUMN", "WINTER", "HARVEST", "BLOSSOM", "LEAVES", "SNOWMAN", "SUN", "THAW"],
    "Home": ["DOOR", "WINDOW", "ROOF", "SOFA", "CHAIR", "TABLE", "LAMP", "RUG", "STAIRS", "PORCH"],
    "Body": ["HEART", "HAND", "KNEE", "ELBOW", "SPINE", "ANKLE", "LUNG", "NOSE", "WRIST", "SHOULDER"],
    "Health": ["WALK", "SLEEP", "WATER", "STRETCH", "REST", "SMILE", "NURSE", "DOCTOR", "VITAMIN", "BALANCE"],
    "Baking": ["FLOUR", "SUGAR", "BUTTER", "YEAST", "DOUGH", "CAKE", "PIE", "BREAD", "COOKIE", "MUFFIN"],
    "Insects": ["ANT", "BEE", "WASP", "MOTH", "BEETLE", "CRICKET", "FLY", "GNAT", "LADYBUG", "FIREFLY"],
    "Vegetables": ["CARROT", "PEA", "BEAN", "CORN", "ONION", "POTATO", "CELERY", "SQUASH", "BEET", "LEEK"],
    "Crafts": ["KNIT", "SEW", "YARN", "QUILT", "NEEDLE", "THREAD", "BUTTON", "FABRIC", "PAINT", "GLUE"],
    "Space": ["STAR", "MOON", "COMET", "PLANET", "ORBIT", "GALAXY", "ROCKET", "MARS", "VENUS", "SATURN"],
    "Games": ["CHESS", "CARDS", "BINGO", "DICE", "PUZZLE", "CHECKERS", "DOMINO", "POKER", "TRIVIA", "BRIDGE"],
    "Town": ["BANK", "PARK", "SCHOOL", "CHURCH", "LIBRARY", "BAKERY", "MARKET", "POST", "CAFE", "STREET"],
    "Clothing": ["HAT", "COAT", "SCARF", "GLOVES", "SOCKS", "SHIRT", "DRESS", "BOOTS", "VEST", "SWEATER"],
    "Holidays": ["PARADE", "GIFT", "CANDLE", "FEAST", "TURKEY", "WREATH", "CAROL", "PICNIC", "BANNER", "CARD"],
    "Flowers": ["LILY", "IRIS", "POPPY", "ORCHID", "VIOLET", "PANSY", "ASTER", "LILAC", "DAHLIA", "PEONY"],
    "Nature": ["RIVER", "LAKE", "HILL", "VALLEY", "MEADOW", "FOREST", "CREEK", "STONE", "CAVE", "MOSS"],
}


def build_catalog(entries: Mapping[str, Iterable[str]]) -> List[Theme]:
    """Build an ordered catalog from a ``{name: words}`` mapping."""

    return [Theme(name=name, words=tuple(words)) for name, words in entries.items()]


DEFAULT_CATALOG: List[Theme] = build_catalog(DEFAULT_THEME_WORDS)


def select_theme(day_of_month: int, catalog: Sequence[Theme]) -> Theme:
    """Return the theme for ``day_of_month``, rotating through the catalog.

    Day 1 maps to the first theme and the rotation wraps once the catalog is
    exhausted, so a catalog shorter than the month repeats within it.
    """

    if not catalog:
        raise CatalogError("Theme catalog is empty")
    if not 1 <= day_of_month <= 31:
        raise ValueError(f"Day of month must be within 1-31, got {day_of_month}")
    index = (day_of_month - 1) % len(catalog)
    theme = catalog[index]
    LOGGER.debug("Day %s selects theme #%s '%s'", day_of_month, index, theme.name)
    return theme


def find_theme(name: str, catalog: Sequence[Theme]) -> Theme:
    """Look a theme up by name, case-insensitively."""

    key = (name or "").strip().lower()
    for theme in catalog:
        if theme.name.lower() == key:
            return theme
    raise CatalogError(
        f"Theme '{name}' is not in the catalog (known: {[t.name for t in catalog]})"
    )


def parse_catalog(data: Any) -> List[Theme]:
    """Convert decoded JSON (a list of ``{name, words}`` objects) to themes."""

    if not isinstance(data, list):
        raise CatalogError("Catalog must be a JSON list of {name, words} objects")
    themes: List[Theme] = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise CatalogError(f"Catalog entry #{index} is not an object")
        name = item.get("name")
        words = item.get("words")
        if not isinstance(name, str) or not name.strip():
            raise CatalogError(f"Catalog entry #{index} is missing a name")
        if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
            raise CatalogError(f"Catalog entry '{name}' must list its words as strings")
        themes.append(Theme(name=name.strip(), words=tuple(words)))
    if not themes:
        raise CatalogError("Theme catalog is empty")
    return themes


def load_catalog(path: Path | str) -> List[Theme]:
    """Load a catalog from a JSON file."""

    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise CatalogError(f"Catalog file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise CatalogError(f"Catalog file {path} is not valid JSON: {exc}") from exc
    themes = parse_catalog(data)
    LOGGER.info("Loaded %s themes from %s", len(themes), path)
    return themes


__all__ = [
    "DEFAULT_CATALOG",
    "DEFAULT_THEME_WORDS",
    "build_catalog",
    "find_theme",
    "load_catalog",
    "parse_catalog",
    "select_theme",
]
