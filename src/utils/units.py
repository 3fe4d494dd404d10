"""
Unit and item-name normalization for ingredients and grocery items.
"""
import re

from src.services.constants import (
    UNIT_SYNONYMS,
    MEASURE_WORDS,
    ITEM_DESCRIPTORS
)

_DESCRIPTOR_PATTERN = re.compile(r'^(?:' + '|'.join(ITEM_DESCRIPTORS) + r')\s+')


def normalize_unit(unit: str) -> str:
    """
    Map a unit token to its canonical form.

    Args:
        unit: Raw unit token (e.g. "Tbsp", "g", "pieces")

    Returns:
        Canonical unit (e.g. "tablespoons", "grams", "" for counts).
        Unknown tokens are returned lower-cased and trimmed.

    Example:
        >>> normalize_unit("lbs")
        'pounds'
    """
    cleaned = ' '.join(unit.lower().strip().rstrip('.').split())
    return UNIT_SYNONYMS.get(cleaned, cleaned)


def is_unit_word(token: str) -> bool:
    """Check whether a token names a unit or a quantity word like "pinch"."""
    cleaned = token.lower().strip().rstrip('.,')
    return (
        cleaned in UNIT_SYNONYMS
        or cleaned in UNIT_SYNONYMS.values()
        or cleaned in MEASURE_WORDS
    ) and cleaned != ''


def normalize_item_name(name: str) -> str:
    """
    Reduce an item name to the base name used as a de-duplication key.

    Descriptor and comma stripping run before the plural "s" is removed.
    Plural removal is naive: one trailing "s" is dropped unless the word ends
    in "ss" (so "glass" stays intact), and irregular plurals are not handled.

    Args:
        name: Item name (e.g. "Fresh Tomatoes (ripe), diced")

    Returns:
        Normalized base name (e.g. "tomatoe")
    """
    cleaned = name.lower()
    cleaned = re.sub(r'\s*\([^)]*\)', '', cleaned)
    cleaned = re.sub(r'\s*\[[^\]]*\]', '', cleaned)
    cleaned = cleaned.split(',')[0]
    cleaned = ' '.join(cleaned.split())

    while _DESCRIPTOR_PATTERN.match(cleaned):
        cleaned = _DESCRIPTOR_PATTERN.sub('', cleaned, count=1)

    cleaned = re.sub(r'(?<!s)s$', '', cleaned)
    return cleaned.strip()
