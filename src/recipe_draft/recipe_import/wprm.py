"""
WP Recipe Maker extraction.

Many WordPress food blogs render recipes with the WP Recipe Maker plugin,
whose markup tags every field with a `wprm-recipe-*` class. Reading those
classes directly is more reliable than the generic fallbacks.
"""

import logging

from bs4 import BeautifulSoup, Tag

from recipe_draft.models import ExtractionMethod, ParsedRecipe

from .heuristics import extract_instructions
from .html_text import make_soup, normalize_html, tag_text
from .normalizer import dedupe_lines

logger = logging.getLogger(__name__)

WPRM_CONFIDENCE = 0.95

_MARKERS = ("wprm-recipe", "wp-recipe-maker")

_NAME = ".wprm-recipe-name"
_PREP_MINUTES = ".wprm-recipe-prep_time-minutes"
_COOK_MINUTES = ".wprm-recipe-cook_time-minutes"
_PREP_DATA = '[class*="wprm-recipe-prep"][data-minutes]'
_COOK_DATA = '[class*="wprm-recipe-cook"][data-minutes]'
_SERVINGS = ".wprm-recipe-servings[data-recipe]"
_SERVINGS_DATA = '[class*="wprm-recipe-servings"][data-servings]'
_CUISINE = ".wprm-recipe-cuisine"
_COURSE = ".wprm-recipe-course"

_INGREDIENT_ITEM = "li.wprm-recipe-ingredient"
_INGREDIENT_PARTS = ("amount", "unit", "name", "notes")
_INSTRUCTION_ITEM = "li.wprm-recipe-instruction"
_INSTRUCTION_TEXT = ".wprm-recipe-instruction-text"

MIN_INSTRUCTION_CHARS = 10
SERVINGS_RANGE = (1, 100)


def _first(soup: BeautifulSoup | Tag, selector: str) -> str | None:
    return tag_text(soup.select_one(selector)) or None


def _int_or_none(value: str | None) -> int | None:
    value = (value or "").strip()
    return int(value) if value.isdigit() else None


def _minutes(soup: BeautifulSoup, text_selector: str, data_selector: str) -> int | None:
    """Minutes from the visible number, else from a data-minutes attribute."""
    minutes = _int_or_none(_first(soup, text_selector))
    if minutes is None:
        tag = soup.select_one(data_selector)
        minutes = _int_or_none(tag.get("data-minutes") if tag else None)
    return minutes


def _servings(soup: BeautifulSoup) -> int | None:
    servings = _int_or_none(_first(soup, _SERVINGS))
    if servings is None:
        tag = soup.select_one(_SERVINGS_DATA)
        servings = _int_or_none(tag.get("data-servings") if tag else None)
    if servings is not None and not SERVINGS_RANGE[0] <= servings <= SERVINGS_RANGE[1]:
        return None
    return servings


def is_wprm_page(html: str) -> bool:
    return any(marker in html for marker in _MARKERS)


def extract_card_ingredients(html: str | BeautifulSoup) -> list[str]:
    """Ingredient lines rebuilt as "amount unit name, notes"."""
    soup = make_soup(html) if isinstance(html, str) else html
    ingredients: list[str] = []
    for item in soup.select(_INGREDIENT_ITEM):
        parts = {part: _first(item, f".wprm-recipe-ingredient-{part}") for part in _INGREDIENT_PARTS}
        line = " ".join(p for p in (parts["amount"], parts["unit"], parts["name"]) if p)
        if parts["notes"]:
            line = f"{line}, {parts['notes']}" if line else parts["notes"]
        if line:
            ingredients.append(line)
    return dedupe_lines(ingredients)


def extract_card_instructions(html: str | BeautifulSoup) -> list[str]:
    soup = make_soup(html) if isinstance(html, str) else html
    steps: list[str] = []
    for item in soup.select(_INSTRUCTION_ITEM):
        step = _first(item, _INSTRUCTION_TEXT)
        if step and len(step) >= MIN_INSTRUCTION_CHARS:
            steps.append(step)
    return dedupe_lines(steps)


def extract_wprm(html: str) -> ParsedRecipe | None:
    """
    Extract a recipe from WP Recipe Maker markup.

    Returns None unless the card yields a name, ingredients and
    instructions. When only the instructions are missing from the card they
    are taken from the heuristic extractor.
    """
    if not html or not is_wprm_page(html):
        return None

    soup = make_soup(html)
    recipe = ParsedRecipe(
        name=_first(soup, _NAME),
        ingredients=extract_card_ingredients(soup),
        instructions=extract_card_instructions(soup),
        prep_time=_minutes(soup, _PREP_MINUTES, _PREP_DATA),
        cook_time=_minutes(soup, _COOK_MINUTES, _COOK_DATA),
        servings=_servings(soup),
        cuisine=_first(soup, _CUISINE),
        category=_first(soup, _COURSE),
        confidence=WPRM_CONFIDENCE,
        method=ExtractionMethod.WPRM,
    )

    if not recipe.name or not recipe.ingredients:
        logger.debug("WPRM markup present but name or ingredients missing")
        return None

    if not recipe.instructions:
        recipe.instructions = extract_instructions(normalize_html(html))
        if not recipe.instructions:
            logger.debug("WPRM card has no instructions and no fallback steps")
            return None
        logger.info("WPRM card without steps; using heuristic instructions")

    logger.info(f"Found WPRM recipe card: {recipe.name}")
    return recipe
