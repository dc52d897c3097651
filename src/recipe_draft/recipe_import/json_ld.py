"""JSON-LD/Schema.org Recipe extraction."""

import json
import logging
import re
from typing import Any

import extruct
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .html_text import decode_entities, make_soup
from .normalizer import (
    DEFAULT_SERVINGS,
    extract_image_url,
    extract_instructions_text,
    normalize_ingredients,
    parse_servings,
)

logger = logging.getLogger(__name__)

_LD_JSON_TYPE_RE = re.compile(r"^\s*application/ld\+json\s*$", re.IGNORECASE)

# Recipe objects assigned to JavaScript variables on pages without JSON-LD
_JS_RECIPE_PATTERNS = [
    re.compile(r"var\s+recipe\s*=\s*(\{.+?\});", re.IGNORECASE | re.DOTALL),
    re.compile(r"window\.recipe\s*=\s*(\{.+?\});", re.IGNORECASE | re.DOTALL),
]

# Blocks shorter than this cannot hold a recipe
_MIN_BLOCK_CHARS = 10


def _first_text(value: Any) -> str | None:
    """Resolve string-or-list-of-strings to a single stripped string."""
    if isinstance(value, list):
        value = next((v for v in value if isinstance(v, str) and v.strip()), None)
    if isinstance(value, dict):
        value = value.get("name")
    if isinstance(value, str) and value.strip():
        return " ".join(decode_entities(value).split())
    return None


def _text_list(value: Any) -> list[str]:
    """Resolve string-or-array (comma separated strings allowed) to a list."""
    if isinstance(value, str):
        value = value.split(",")
    if not isinstance(value, list):
        return []
    return [v.strip() for v in value if isinstance(v, str) and v.strip()]


class SchemaRecipe(BaseModel):
    """
    Schema.org Recipe as found in the wild.

    Every polymorphic field is resolved to one concrete type here so that
    downstream code never inspects raw JSON shapes again.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str | None = None
    description: str | None = None
    image_url: str | None = Field(default=None, alias="image")
    ingredients: list[str] = Field(default_factory=list, alias="recipeIngredient")
    instructions: list[str] = Field(default_factory=list, alias="recipeInstructions")
    prep_time: str | None = Field(default=None, alias="prepTime")
    cook_time: str | None = Field(default=None, alias="cookTime")
    total_time: str | None = Field(default=None, alias="totalTime")
    servings: int = Field(default=DEFAULT_SERVINGS, alias="recipeYield")
    categories: list[str] = Field(default_factory=list, alias="recipeCategory")
    cuisine: str | None = Field(default=None, alias="recipeCuisine")
    keywords: list[str] = Field(default_factory=list)
    difficulty: str | None = None

    @field_validator("name", "description", "difficulty", mode="before")
    @classmethod
    def _text(cls, value: Any) -> str | None:
        return _first_text(value)

    @field_validator("prep_time", "cook_time", "total_time", mode="before")
    @classmethod
    def _duration(cls, value: Any) -> str | None:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(int(value))
        return _first_text(value)

    @field_validator("image_url", mode="before")
    @classmethod
    def _image(cls, value: Any) -> str | None:
        return extract_image_url(value)

    @field_validator("ingredients", mode="before")
    @classmethod
    def _ingredients(cls, value: Any) -> list[str]:
        return normalize_ingredients(value)

    @field_validator("instructions", mode="before")
    @classmethod
    def _instructions(cls, value: Any) -> list[str]:
        return extract_instructions_text(value)

    @field_validator("servings", mode="before")
    @classmethod
    def _servings(cls, value: Any) -> int:
        return parse_servings(value)

    @field_validator("categories", "keywords", mode="before")
    @classmethod
    def _text_lists(cls, value: Any) -> list[str]:
        return _text_list(value)

    @field_validator("cuisine", mode="before")
    @classmethod
    def _cuisine(cls, value: Any) -> str | None:
        return _first_text(value)

    @property
    def has_usable_fields(self) -> bool:
        """True when the candidate carries any of the mandatory fields."""
        return bool(self.name or self.ingredients or self.instructions)


def _is_recipe_type(value: Any) -> bool:
    if isinstance(value, str):
        return value == "Recipe"
    if isinstance(value, list):
        return "Recipe" in value
    return False


def _may_be_recipe(item: dict) -> bool:
    # Untyped objects are given the benefit of the doubt
    return "@type" not in item or _is_recipe_type(item["@type"])


def _decode_single(data: Any) -> SchemaRecipe | None:
    """Strategy 1: the block itself is the Recipe."""
    if not isinstance(data, dict) or not _may_be_recipe(data):
        return None
    recipe = SchemaRecipe.model_validate(data)
    return recipe if recipe.name else None


def _decode_array(data: Any) -> SchemaRecipe | None:
    """Strategy 2: an array of objects; first one with a name wins."""
    if not isinstance(data, list):
        return None
    for item in data:
        if not isinstance(item, dict) or not _may_be_recipe(item):
            continue
        try:
            recipe = SchemaRecipe.model_validate(item)
        except ValidationError as e:
            logger.debug(f"Skipping array entry: {e}")
            continue
        if recipe.name:
            return recipe
    return None


def _decode_graph(data: Any) -> SchemaRecipe | None:
    """Strategy 3: a wrapper object with a @graph list of typed nodes."""
    if not isinstance(data, dict):
        return None
    graph = data.get("@graph")
    if not isinstance(graph, list):
        return None
    for item in graph:
        if not isinstance(item, dict) or not _is_recipe_type(item.get("@type")):
            continue
        try:
            recipe = SchemaRecipe.model_validate(item)
        except ValidationError as e:
            logger.debug(f"Skipping @graph Recipe node: {e}")
            continue
        if recipe.name:
            return recipe
    return None


_DECODE_STRATEGIES = (_decode_single, _decode_array, _decode_graph)


def decode_block(raw_json: str) -> SchemaRecipe | None:
    """
    Decode one JSON-LD block into a SchemaRecipe.

    Tries each decode strategy in order. Malformed JSON and failed
    validation are swallowed so the caller can move on to the next block.
    """
    try:
        data = json.loads(raw_json)
    except (json.JSONDecodeError, ValueError) as e:
        logger.debug(f"JSON-LD block is not valid JSON: {e}")
        return None

    for strategy in _DECODE_STRATEGIES:
        try:
            recipe = strategy(data)
        except (ValidationError, TypeError) as e:
            logger.debug(f"{strategy.__name__} failed: {e}")
            continue
        if recipe is not None:
            return recipe
    return None


def find_json_ld_blocks(html: str) -> list[str]:
    """Return the stripped contents of every ld+json script tag."""
    soup = make_soup(html)
    return [
        (tag.string or "").strip()
        for tag in soup.find_all("script", attrs={"type": _LD_JSON_TYPE_RE})
    ]


def extract_structured(html: str) -> SchemaRecipe | None:
    """
    Extract the first decodable Schema.org Recipe from a page.

    Falls back to recipe objects assigned to JavaScript variables when the
    page has no JSON-LD at all, then to schema.org microdata. Returns None
    if nothing decodes.
    """
    if not html:
        return None

    blocks = find_json_ld_blocks(html)
    logger.debug(f"Found {len(blocks)} JSON-LD script tags")

    if not blocks:
        return _extract_from_script_variables(html) or extract_microdata(html)

    for index, block in enumerate(blocks, start=1):
        if len(block) <= _MIN_BLOCK_CHARS:
            logger.debug(f"Skipping JSON-LD block #{index}: too short")
            continue
        recipe = decode_block(block)
        if recipe is not None:
            logger.info(f"Found recipe in JSON-LD block #{index}: {recipe.name}")
            return recipe

    logger.debug("No valid recipe found in any JSON-LD block")
    return extract_microdata(html)


def _extract_from_script_variables(html: str) -> SchemaRecipe | None:
    scripts = [tag.string for tag in make_soup(html).find_all("script") if tag.string]
    for pattern in _JS_RECIPE_PATTERNS:
        for script in scripts:
            match = pattern.search(script)
            if not match:
                continue
            recipe = decode_block(match.group(1))
            if recipe is not None:
                logger.info(f"Found recipe in script variable: {recipe.name}")
                return recipe
    return None


def extract_microdata(html: str, base_url: str | None = None) -> SchemaRecipe | None:
    """First named Recipe among the page's schema.org microdata items."""
    if not html or "itemscope" not in html.lower():
        return None

    try:
        data = extruct.extract(
            html,
            base_url=base_url,
            syntaxes=["microdata"],
            uniform=True,
            errors="log",
        )
    except Exception as e:
        logger.warning(f"Microdata extraction failed: {e}")
        return None

    items = [
        item for item in data.get("microdata", [])
        if isinstance(item, dict) and _is_recipe_type(item.get("@type"))
    ]
    logger.debug(f"Found {len(items)} microdata Recipe items")

    recipe = _decode_array(items)
    if recipe is not None:
        logger.info(f"Found recipe in microdata: {recipe.name}")
    return recipe
