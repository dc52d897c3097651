"""Difficulty estimation and label normalization."""

import re
from types import MappingProxyType

from recipe_draft.models import Difficulty

ADVANCED_TECHNIQUES = (
    "sous vide", "flambé", "flambe", "temper", "confit", "braise", "deglaze",
    "fold", "proof", "knead", "reduce", "clarify", "blanch", "julienne",
    "brunoise", "chiffonade", "supreme",
)

LONG_WAIT_MARKERS = ("overnight", "24 hour")
SHORT_WAIT_MARKERS = ("rest", "chill")

EXPERT_THRESHOLD = 5
INTERMEDIATE_THRESHOLD = 2

DIFFICULTY_LABELS = MappingProxyType({
    "easy": Difficulty.BASIC,
    "beginner": Difficulty.BASIC,
    "basic": Difficulty.BASIC,
    "simple": Difficulty.BASIC,
    "medium": Difficulty.INTERMEDIATE,
    "moderate": Difficulty.INTERMEDIATE,
    "intermediate": Difficulty.INTERMEDIATE,
    "hard": Difficulty.EXPERT,
    "difficult": Difficulty.EXPERT,
    "advanced": Difficulty.EXPERT,
    "expert": Difficulty.EXPERT,
})


def _fold(text: str) -> str:
    # flambé and flambe are one technique
    return text.lower().replace("é", "e")


def _inflected(word: str) -> re.Pattern:
    """Whole-word pattern for a verb or noun plus its usual endings."""
    if word.endswith("y"):
        endings = r"(?:y|ies|ied|ying)"
    elif word.endswith("e"):
        endings = r"(?:e|es|ed|ing)"
    else:
        return re.compile(rf"\b{re.escape(word)}(?:s|es|ed|ing)?\b")
    return re.compile(rf"\b{re.escape(word[:-1])}{endings}\b")


_TECHNIQUE_PATTERNS = MappingProxyType({
    name: _inflected(name) for name in dict.fromkeys(map(_fold, ADVANCED_TECHNIQUES))
})
_LONG_WAIT_PATTERNS = tuple(_inflected(marker) for marker in LONG_WAIT_MARKERS)
# "the rest of the sugar" is a quantity, not a resting time
_SHORT_WAIT_PATTERNS = (
    re.compile(r"\brest(?:s|ed|ing)?\b(?!\s+of\b)"),
    _inflected("chill"),
)


def technique_hits(instructions_text: str) -> int:
    """Number of distinct advanced techniques mentioned."""
    text = _fold(instructions_text)
    return sum(1 for pattern in _TECHNIQUE_PATTERNS.values() if pattern.search(text))


def difficulty_score(ingredient_count: int, instruction_count: int, instructions_text: str) -> int:
    score = 0

    if ingredient_count > 15:
        score += 2
    elif ingredient_count > 10:
        score += 1

    if instruction_count > 10:
        score += 2
    elif instruction_count > 6:
        score += 1

    hits = technique_hits(instructions_text)
    if hits >= 3:
        score += 3
    elif hits >= 1:
        score += 1

    text = instructions_text.lower()
    if any(pattern.search(text) for pattern in _LONG_WAIT_PATTERNS):
        score += 2
    elif any(pattern.search(text) for pattern in _SHORT_WAIT_PATTERNS):
        score += 1

    return score


def estimate_difficulty(
    ingredient_count: int,
    instruction_count: int,
    instructions_text: str,
) -> Difficulty:
    """
    Estimate how demanding a recipe is from its size and technique.

    Long ingredient lists, many steps, advanced techniques and long waits
    each add to a score; 5 or more is Expert, 2 or more Intermediate.
    """
    score = difficulty_score(ingredient_count, instruction_count, instructions_text)
    if score >= EXPERT_THRESHOLD:
        return Difficulty.EXPERT
    if score >= INTERMEDIATE_THRESHOLD:
        return Difficulty.INTERMEDIATE
    return Difficulty.BASIC


def normalize_difficulty(label: str | None) -> Difficulty | None:
    """Map a label found on the page ("Easy", "Advanced") to a Difficulty."""
    if not label:
        return None
    return DIFFICULTY_LABELS.get(label.strip().lower())
