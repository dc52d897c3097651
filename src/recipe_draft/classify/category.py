"""
Recipe Draft - Category classification.

Files an imported recipe under one of the fixed course categories. Signals
are tried strongest first:

1. the page's own recipeCategory, through an alias table
2. schema keywords, through the same table
3. keywords in the recipe name, in category priority order
4. weighted keyword hits across the ingredient lines
5. the cuisine family
6. Main
"""

import logging
import re
from types import MappingProxyType
from typing import Iterable, Mapping

from recipe_draft.models import RecipeCategory

logger = logging.getLogger(__name__)

# Minimum ingredient score before the ingredient signal is trusted
INGREDIENT_SCORE_THRESHOLD = 4


# =============================================================================
# Reference Data
# =============================================================================

CATEGORY_ALIASES: Mapping[str, RecipeCategory] = MappingProxyType({
    "breakfast": RecipeCategory.BREAKFAST,
    "brunch": RecipeCategory.BREAKFAST,
    "breakfast and brunch": RecipeCategory.BREAKFAST,
    "starter": RecipeCategory.STARTER,
    "starters": RecipeCategory.STARTER,
    "appetizer": RecipeCategory.STARTER,
    "appetizers": RecipeCategory.STARTER,
    "appetiser": RecipeCategory.STARTER,
    "appetisers": RecipeCategory.STARTER,
    "hors d'oeuvre": RecipeCategory.STARTER,
    "hors d'oeuvres": RecipeCategory.STARTER,
    "snack": RecipeCategory.STARTER,
    "snacks": RecipeCategory.STARTER,
    "main": RecipeCategory.MAIN,
    "mains": RecipeCategory.MAIN,
    "main course": RecipeCategory.MAIN,
    "main dish": RecipeCategory.MAIN,
    "entree": RecipeCategory.MAIN,
    "entrée": RecipeCategory.MAIN,
    "dinner": RecipeCategory.MAIN,
    "lunch": RecipeCategory.MAIN,
    "side": RecipeCategory.SIDE,
    "sides": RecipeCategory.SIDE,
    "side dish": RecipeCategory.SIDE,
    "side dishes": RecipeCategory.SIDE,
    "salad": RecipeCategory.SIDE,
    "salads": RecipeCategory.SIDE,
    "soup": RecipeCategory.SOUP,
    "soups": RecipeCategory.SOUP,
    "stew": RecipeCategory.SOUP,
    "stews": RecipeCategory.SOUP,
    "soups and stews": RecipeCategory.SOUP,
    "dessert": RecipeCategory.DESSERT,
    "desserts": RecipeCategory.DESSERT,
    "baking": RecipeCategory.DESSERT,
    "sweets": RecipeCategory.DESSERT,
    "cookies": RecipeCategory.DESSERT,
    "cakes": RecipeCategory.DESSERT,
    "drink": RecipeCategory.DRINK,
    "drinks": RecipeCategory.DRINK,
    "beverage": RecipeCategory.DRINK,
    "beverages": RecipeCategory.DRINK,
    "cocktail": RecipeCategory.DRINK,
    "cocktails": RecipeCategory.DRINK,
    "smoothie": RecipeCategory.DRINK,
    "smoothies": RecipeCategory.DRINK,
})

# Checked in this order; the first keyword found in the name wins
NAME_KEYWORDS: tuple[tuple[RecipeCategory, tuple[str, ...]], ...] = (
    (RecipeCategory.BREAKFAST, (
        "breakfast", "brunch", "pancake", "waffle", "omelet", "omelette",
        "french toast", "granola", "oatmeal", "porridge", "frittata",
        "scrambled", "muffin", "hash brown",
    )),
    (RecipeCategory.DESSERT, (
        "dessert", "cookie", "cake", "brownie", "blondie", "pudding",
        "ice cream", "cheesecake", "tiramisu", "fudge", "mousse", "sorbet",
        "cobbler", "crumble", "macaron", "panna cotta", "custard", "biscotti",
    )),
    (RecipeCategory.SOUP, (
        "soup", "stew", "chowder", "bisque", "gazpacho", "minestrone",
        "consommé", "consomme",
    )),
    (RecipeCategory.DRINK, (
        "smoothie", "cocktail", "lemonade", "latte", "milkshake", "sangria",
        "mojito", "punch", "iced coffee", "hot chocolate",
    )),
    (RecipeCategory.STARTER, (
        "appetizer", "appetiser", "starter", "bruschetta", "crostini",
        "canape", "canapé", "guacamole", "hummus", "deviled egg", "nachos",
        "spring roll",
    )),
    (RecipeCategory.SIDE, (
        "side dish", "coleslaw", "mashed potato", "garlic bread", "pilaf",
        "roasted vegetables", "fries", "salad",
    )),
)

# keyword -> (category, weight); matched as whole words, plural allowed
INGREDIENT_KEYWORDS: Mapping[str, tuple[RecipeCategory, int]] = MappingProxyType({
    "egg": (RecipeCategory.BREAKFAST, 1),
    "bacon": (RecipeCategory.BREAKFAST, 2),
    "maple syrup": (RecipeCategory.BREAKFAST, 2),
    "oats": (RecipeCategory.BREAKFAST, 2),
    "granola": (RecipeCategory.BREAKFAST, 2),
    "yogurt": (RecipeCategory.BREAKFAST, 1),
    "flour": (RecipeCategory.DESSERT, 1),
    "sugar": (RecipeCategory.DESSERT, 2),
    "butter": (RecipeCategory.DESSERT, 1),
    "chocolate": (RecipeCategory.DESSERT, 2),
    "cocoa": (RecipeCategory.DESSERT, 2),
    "vanilla": (RecipeCategory.DESSERT, 2),
    "baking powder": (RecipeCategory.DESSERT, 1),
    "baking soda": (RecipeCategory.DESSERT, 1),
    "broth": (RecipeCategory.SOUP, 3),
    "stock": (RecipeCategory.SOUP, 3),
    "bouillon": (RecipeCategory.SOUP, 3),
    "vodka": (RecipeCategory.DRINK, 3),
    "rum": (RecipeCategory.DRINK, 3),
    "gin": (RecipeCategory.DRINK, 3),
    "tequila": (RecipeCategory.DRINK, 3),
    "ice": (RecipeCategory.DRINK, 1),
    "juice": (RecipeCategory.DRINK, 1),
    "chicken": (RecipeCategory.MAIN, 2),
    "beef": (RecipeCategory.MAIN, 2),
    "pork": (RecipeCategory.MAIN, 2),
    "lamb": (RecipeCategory.MAIN, 2),
    "turkey": (RecipeCategory.MAIN, 2),
    "steak": (RecipeCategory.MAIN, 2),
    "salmon": (RecipeCategory.MAIN, 2),
    "shrimp": (RecipeCategory.MAIN, 2),
    "fish": (RecipeCategory.MAIN, 2),
    "tofu": (RecipeCategory.MAIN, 2),
})

_INGREDIENT_PATTERNS = tuple(
    (re.compile(rf"\b{re.escape(keyword)}(?:s|es)?\b"), category, weight)
    for keyword, (category, weight) in INGREDIENT_KEYWORDS.items()
)

CUISINE_FAMILIES: Mapping[str, RecipeCategory] = MappingProxyType({
    "italian": RecipeCategory.MAIN,
    "french": RecipeCategory.MAIN,
    "american": RecipeCategory.MAIN,
    "mexican": RecipeCategory.MAIN,
    "indian": RecipeCategory.MAIN,
    "thai": RecipeCategory.MAIN,
    "chinese": RecipeCategory.MAIN,
})

# Tie-break for equal ingredient scores
_PRIORITY = (
    RecipeCategory.BREAKFAST,
    RecipeCategory.DESSERT,
    RecipeCategory.SOUP,
    RecipeCategory.DRINK,
    RecipeCategory.STARTER,
    RecipeCategory.SIDE,
    RecipeCategory.MAIN,
)


# =============================================================================
# Signals
# =============================================================================


def category_from_label(label: str | None) -> RecipeCategory | None:
    """Resolve a free-text category label ("Main Course", "Desserts")."""
    if not label:
        return None
    text = " ".join(label.lower().split())
    if text in CATEGORY_ALIASES:
        return CATEGORY_ALIASES[text]
    padded = f" {text} "
    for alias in sorted(CATEGORY_ALIASES, key=lambda a: (-len(a), a)):
        if f" {alias} " in padded:
            return CATEGORY_ALIASES[alias]
    return None


def category_from_name(name: str | None) -> RecipeCategory | None:
    if not name:
        return None
    text = name.lower()
    for category, keywords in NAME_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            return category
    return None


def score_ingredients(ingredients: Iterable[str]) -> dict[RecipeCategory, int]:
    """Sum keyword weights per category over every ingredient line."""
    scores: dict[RecipeCategory, int] = {}
    for line in ingredients:
        text = line.lower()
        for pattern, category, weight in _INGREDIENT_PATTERNS:
            if pattern.search(text):
                scores[category] = scores.get(category, 0) + weight
    return scores


def category_from_ingredients(ingredients: Iterable[str]) -> RecipeCategory | None:
    scores = score_ingredients(ingredients)
    if not scores:
        return None
    best = max(scores.items(), key=lambda item: (item[1], -_PRIORITY.index(item[0])))
    if best[1] >= INGREDIENT_SCORE_THRESHOLD:
        return best[0]
    return None


def category_from_cuisine(cuisine: str | None) -> RecipeCategory | None:
    if not cuisine:
        return None
    text = cuisine.lower()
    for family, category in CUISINE_FAMILIES.items():
        if family in text:
            return category
    return None


# =============================================================================
# Public API
# =============================================================================


def classify_category(
    schema_category: str | list[str] | None,
    name: str | None,
    ingredients: list[str],
    cuisine: str | None = None,
    keywords: list[str] | None = None,
) -> RecipeCategory:
    """
    Classify a recipe into a course category.

    Args:
        schema_category: recipeCategory value(s) from structured data
        name: Recipe name
        ingredients: Raw ingredient lines
        cuisine: recipeCuisine, if known
        keywords: Schema keywords, if any

    Returns:
        The first category any signal produces, Main if none does
    """
    labels = [schema_category] if isinstance(schema_category, str) else (schema_category or [])
    for label in labels:
        category = category_from_label(label)
        if category:
            logger.debug(f"Category from schema label {label!r}: {category.value}")
            return category

    for keyword in keywords or []:
        category = category_from_label(keyword)
        if category:
            logger.debug(f"Category from keyword {keyword!r}: {category.value}")
            return category

    for signal, value in (
        (category_from_name, name),
        (category_from_ingredients, ingredients),
        (category_from_cuisine, cuisine),
    ):
        category = signal(value)
        if category:
            logger.debug(f"Category from {signal.__name__}: {category.value}")
            return category

    return RecipeCategory.MAIN
