"""
Ingredient name normalization.

Turns a raw ingredient phrase ("2 tbsp minced garlic") into a canonical
display name ("Garlic") by stripping measurement vocabulary and quantities,
then resolving what remains through the alias table.
"""

import re
import string
from typing import Mapping

from .aliases import ALIAS_SCAN_ORDER, INGREDIENT_ALIASES, MEASUREMENT_WORDS

_MEASUREMENT_RE = re.compile(
    r"(?<![\w'])(?:" + "|".join(re.escape(w) for w in MEASUREMENT_WORDS) + r")\.?(?![\w'])"
)
_LEADING_QUANTITY_RE = re.compile(r"^[\d\s/.,½¼¾⅓⅔⅛⅜⅝⅞–-]+")
_LEADING_OF_RE = re.compile(r"^of\s+")
_PARENTHETICAL_RE = re.compile(r"\([^)]*\)?")
_WHITESPACE_RE = re.compile(r"\s+")
_PUNCTUATION_RE = re.compile(r"[^\w\s'-]")
_EDGE_PUNCTUATION = " ,.;:-–*•"


def clean_ingredient_phrase(line: str) -> str:
    """
    Lowercased phrase with measurements, quantities and asides removed.

    "2 tbsp minced garlic (about 4 cloves)" -> "minced garlic"
    """
    text = line.lower().strip()
    text = _PARENTHETICAL_RE.sub(" ", text)
    text = _MEASUREMENT_RE.sub(" ", text)
    text = _WHITESPACE_RE.sub(" ", text).strip()
    text = _LEADING_QUANTITY_RE.sub("", text)
    text = _LEADING_OF_RE.sub("", text)
    return text.strip(_EDGE_PUNCTUATION)


def _scan_order(aliases: Mapping[str, str]) -> tuple[str, ...]:
    if aliases is INGREDIENT_ALIASES:
        return ALIAS_SCAN_ORDER
    return tuple(sorted(aliases, key=lambda key: (-len(key), key)))


def _scan_aliases(phrase: str, aliases: Mapping[str, str]) -> str | None:
    # Token-bounded so "oil" never matches inside "boil"
    padded = " " + " ".join(_PUNCTUATION_RE.sub(" ", phrase).split()) + " "
    for key in _scan_order(aliases):
        if f" {key} " in padded:
            return aliases[key]
    return None


def normalize_ingredient(line: str, aliases: Mapping[str, str] = INGREDIENT_ALIASES) -> str:
    """
    Canonical display name for one ingredient line.

    Resolution order: exact alias, longest alias contained in the phrase
    (ties broken alphabetically), otherwise the cleaned phrase title-cased.
    An empty result falls back to the trimmed input.
    """
    phrase = clean_ingredient_phrase(line)
    if not phrase:
        return line.strip()

    exact = aliases.get(phrase)
    if exact:
        return exact

    contained = _scan_aliases(phrase, aliases)
    if contained:
        return contained

    return string.capwords(phrase)


def normalize_ingredients(lines: list[str]) -> list[str]:
    """Element-wise normalize_ingredient, keeping order and duplicates."""
    return [normalize_ingredient(line) for line in lines]
