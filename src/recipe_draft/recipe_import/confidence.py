"""Confidence scoring for extracted recipe drafts."""

from types import MappingProxyType

from recipe_draft.models import ParsedRecipe

# Field -> weight; a field scores when it is populated
FIELD_WEIGHTS = MappingProxyType({
    "name": 1.0,
    "description": 0.5,
    "prep_time": 1.0,
    "cook_time": 1.0,
    "servings": 1.0,
    "ingredients": 1.5,
    "instructions": 1.5,
    "difficulty": 0.5,
})

MAX_SCORE = sum(FIELD_WEIGHTS.values())


def _populated(value) -> bool:
    if value is None:
        return False
    if isinstance(value, (str, list)):
        return bool(value)
    return True


def score_confidence(recipe: ParsedRecipe) -> float:
    """
    Share of weighted fields the extractor managed to fill, in [0, 1].

    Advisory only: a low score never fails an import.
    """
    achieved = sum(
        weight
        for field_name, weight in FIELD_WEIGHTS.items()
        if _populated(getattr(recipe, field_name))
    )
    return min(1.0, max(0.0, achieved / MAX_SCORE))
