"""
Recipe Draft - Food Catalog Matcher.

Maps imported ingredient lines onto canonical food catalog names.

Each line runs through an ordered cascade of match strategies; the first
strategy that finds a catalog entry wins. A canonical name is handed out at
most once per call. A later line whose best match is already taken keeps
its normalized name instead, so no ingredient is ever dropped.
"""

import logging
import re
from typing import Callable

from recipe_draft.models import MatchedIngredient

from .aliases import MEASUREMENT_WORDS
from .catalog import FOOD_CATALOG, CatalogEntry, FoodCatalog
from .normalizer import clean_ingredient_phrase, normalize_ingredient
from .parser import parse_ingredient_line

logger = logging.getLogger(__name__)

STOP_WORDS = frozenset({
    "a", "an", "and", "or", "of", "the", "to", "for", "with", "into", "in",
    "at", "plus", "more", "if", "each", "per",
    "fresh", "freshly", "large", "medium", "small", "whole", "extra",
    "chopped", "diced", "minced", "sliced", "grated", "shredded", "crushed",
    "peeled", "cubed", "halved", "quartered", "trimmed", "softened", "melted",
    "divided", "packed", "finely", "roughly", "thinly", "lightly", "cut",
    "room", "temperature", "cold", "warm", "hot", "cooked", "uncooked",
    "drained", "rinsed", "beaten", "sifted", "taste", "needed", "optional",
    "garnish", "serving",
}) | frozenset(w for w in MEASUREMENT_WORDS if " " not in w)

# Single-word strategies ignore words this short
_MIN_WORD_CHARS = 3
# Partial containment only considers entries longer than this
_MIN_PARTIAL_CHARS = 3

_WORD_RE = re.compile(r"[^\W\d_][\w'-]*")
_PUNCTUATION_RE = re.compile(r"[^\w\s'-]")

MatchStrategy = Callable[[str, list[str], FoodCatalog], CatalogEntry | None]


def _singular(word: str) -> str:
    if word.endswith("ies") and len(word) > 4:
        return word[:-3] + "y"
    if word.endswith("oes"):
        return word[:-2]
    if word.endswith("s") and not word.endswith("ss") and len(word) > 3:
        return word[:-1]
    return word


def _lookup(catalog: FoodCatalog, phrase: str) -> CatalogEntry | None:
    """Exact lookup, then with the last word singularized."""
    entry = catalog.get(phrase)
    if entry is None:
        words = phrase.split()
        if words:
            entry = catalog.get(" ".join(words[:-1] + [_singular(words[-1])]))
    return entry


def content_words(phrase: str) -> list[str]:
    """Words of a cleaned phrase with stop words and measurements removed."""
    return [w for w in _WORD_RE.findall(phrase) if w not in STOP_WORDS]


# =============================================================================
# Strategies
# =============================================================================


def match_multi_word(phrase: str, words: list[str], catalog: FoodCatalog) -> CatalogEntry | None:
    """Adjacent content-word pairs equal to, or contained in, an entry."""
    pairs = [f"{a} {b}" for a, b in zip(words, words[1:])]
    for pair in pairs:
        entry = _lookup(catalog, pair)
        if entry:
            return entry
    # Shortest entry containing the pair is the least specific guess
    for pair in pairs:
        for entry in reversed(catalog.by_length):
            if f" {pair} " in f" {entry.key} ":
                return entry
    return None


def match_exact(phrase: str, words: list[str], catalog: FoodCatalog) -> CatalogEntry | None:
    """Entry equal to the phrase, else the longest token-bounded entry in it."""
    entry = _lookup(catalog, phrase)
    if entry:
        return entry
    padded = f" {phrase} "
    singular = " " + " ".join(_singular(w) for w in phrase.split()) + " "
    for entry in catalog.by_length:
        key = f" {entry.key} "
        if key in padded or key in singular:
            return entry
    return None


def match_fuzzy_word(phrase: str, words: list[str], catalog: FoodCatalog) -> CatalogEntry | None:
    """A single content word equal to, containing, or contained in an entry."""
    candidates = [w for w in words if len(w) >= _MIN_WORD_CHARS]
    for word in candidates:
        entry = _lookup(catalog, word)
        if entry:
            return entry
    for word in candidates:
        for entry in catalog.by_length:
            if " " not in entry.key and len(entry.key) > _MIN_PARTIAL_CHARS and entry.key in word:
                return entry
    for word in candidates:
        if len(word) <= _MIN_PARTIAL_CHARS:
            continue
        for entry in reversed(catalog.by_length):
            if word in entry.key.split():
                return entry
    return None


def match_partial(phrase: str, words: list[str], catalog: FoodCatalog) -> CatalogEntry | None:
    """Longest entry of more than three characters anywhere in the phrase."""
    for entry in catalog.by_length:
        if len(entry.key) > _MIN_PARTIAL_CHARS and entry.key in phrase:
            return entry
    return None


MATCH_STRATEGIES: tuple[tuple[str, MatchStrategy], ...] = (
    ("multi_word", match_multi_word),
    ("exact", match_exact),
    ("fuzzy_word", match_fuzzy_word),
    ("partial", match_partial),
)


# =============================================================================
# Public API
# =============================================================================


def find_catalog_entry(
    line: str,
    catalog: FoodCatalog = FOOD_CATALOG,
) -> tuple[str, CatalogEntry] | None:
    """Run the strategy cascade for one line; (strategy name, entry) or None."""
    phrase = " ".join(_PUNCTUATION_RE.sub(" ", clean_ingredient_phrase(line)).split())
    if not phrase:
        return None
    words = content_words(phrase)
    for name, strategy in MATCH_STRATEGIES:
        entry = strategy(phrase, words, catalog)
        if entry is not None:
            return name, entry
    return None


def match_ingredient(
    line: str,
    catalog: FoodCatalog = FOOD_CATALOG,
    taken: set[str] | None = None,
) -> MatchedIngredient:
    """
    Match a single line.

    `taken` holds lowercased canonical names already handed out; a match
    on one of them is suppressed and the line keeps its normalized name.
    The set is updated in place when a new name is matched.
    """
    amount = parse_ingredient_line(line)
    ingredient = MatchedIngredient(
        raw=line,
        normalized=normalize_ingredient(line),
        quantity=amount.quantity,
        unit=amount.unit,
    )

    found = find_catalog_entry(line, catalog)
    if found is None:
        logger.debug(f"No catalog match for {line!r}")
        return ingredient

    strategy, entry = found
    if taken is not None:
        if entry.key in taken:
            logger.debug(f"Suppressed duplicate match {entry.name!r} for {line!r}")
            return ingredient
        taken.add(entry.key)

    ingredient.canonical = entry.name
    ingredient.strategy = strategy
    ingredient.catalog_group = entry.group
    return ingredient


def match_ingredients(
    lines: list[str],
    catalog: FoodCatalog = FOOD_CATALOG,
) -> list[MatchedIngredient]:
    """
    Match every ingredient line of one recipe against the catalog.

    Output has one entry per input line, in input order. No canonical name
    appears twice and every canonical name is a catalog member.
    """
    taken: set[str] = set()
    matched = [match_ingredient(line, catalog, taken) for line in lines]
    hits = sum(1 for m in matched if m.canonical)
    logger.info(f"Matched {hits}/{len(lines)} ingredients to the food catalog")
    return matched
