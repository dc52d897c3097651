"""Main recipe import orchestration."""

import logging
import re
from typing import Awaitable, Callable
from urllib.parse import urlparse

import httpx

from recipe_draft.classify import classify_category, estimate_difficulty, normalize_difficulty
from recipe_draft.ingredients.matcher import match_ingredients
from recipe_draft.models import (
    ExtractionMethod,
    ExtractionResult,
    ImportErrorKind,
    ImportFailure,
    ParsedRecipe,
    RawPage,
)

from .confidence import score_confidence
from .fetcher import FetchError, fetch_page
from .heuristics import extract_heuristic
from .html_text import normalize_html
from .json_ld import SchemaRecipe, extract_structured
from .normalizer import dedupe_lines, parse_duration
from .wprm import extract_wprm

logger = logging.getLogger(__name__)

FetchPage = Callable[[str], Awaitable[RawPage]]

# Default fallback message when an import fails
DEFAULT_FALLBACK_MESSAGE = (
    "Copy the recipe text from the website and enter it manually. "
    "Anything that was found can still be used as a starting point."
)

REQUIRED_FIELDS = ("name", "ingredients", "instructions")


async def import_from(url: str, fetch: FetchPage = fetch_page) -> ExtractionResult:
    """
    Import a recipe draft from a URL.

    Extraction pipeline:
    1. Validate URL format
    2. Fetch the page (the only step that awaits)
    3. Reject non-2xx responses and bodies that are not UTF-8
    4. Extract, match ingredients, classify (see parse_page)

    Nothing is retried; a failure is final for this call.

    Args:
        url: The URL of the recipe page to import
        fetch: Async callable returning a RawPage for a URL

    Returns:
        ExtractionResult with the draft on success, an ImportFailure otherwise
    """
    validation_error = _validate_url(url)
    if validation_error:
        return _failed(ImportFailure(kind=ImportErrorKind.INVALID_RESPONSE, message=validation_error))

    url = url.strip()
    logger.info(f"Fetching {url}")
    try:
        raw = await fetch(url)
    except (FetchError, httpx.HTTPError) as e:
        logger.info(f"Fetch failed for {url}: {e}")
        return _failed(ImportFailure(kind=ImportErrorKind.INVALID_RESPONSE, message=str(e)))

    if not 200 <= raw.status_code < 300:
        logger.info(f"Non-success status for {url}: HTTP {raw.status_code}")
        return _failed(ImportFailure(
            kind=ImportErrorKind.INVALID_RESPONSE,
            message=f"Failed to fetch page: HTTP {raw.status_code}",
        ))

    return parse_page(raw)


def parse_page(raw: RawPage) -> ExtractionResult:
    """
    Turn a fetched page into a recipe draft. Synchronous, no I/O.

    Sources are tried in order: WP Recipe Maker card, JSON-LD, then the
    heuristic line extractor. A structured draft missing a mandatory field
    has it filled from the heuristic extractor when the page text has it.
    The draft must end up with a name, ingredients and instructions;
    otherwise the failure names the first missing field.
    """
    try:
        html = raw.body.decode("utf-8")
    except UnicodeDecodeError as e:
        logger.info(f"Page is not valid UTF-8: {raw.url}")
        return _failed(ImportFailure(
            kind=ImportErrorKind.INVALID_ENCODING,
            message=f"Page is not valid UTF-8 text ({e.reason} at byte {e.start})",
        ))

    try:
        outcome = _build_recipe(html, raw.url)
    except Exception as e:
        logger.exception(f"Unexpected error parsing {raw.url}")
        return _failed(ImportFailure(
            kind=ImportErrorKind.PARSE_FAILURE,
            message=f"Could not parse recipe page: {e}",
        ))

    if isinstance(outcome, ImportFailure):
        logger.info(f"Import failed for {raw.url}: {outcome.message}")
        return _failed(outcome)

    logger.info(f"Imported {outcome.name!r} via {outcome.method.value} (confidence {outcome.confidence:.2f})")
    return ExtractionResult(success=True, method=outcome.method, recipe=outcome)


def _build_recipe(html: str, url: str | None) -> ParsedRecipe | ImportFailure:
    labels: list[str] = []
    keywords: list[str] = []

    recipe = extract_wprm(html)
    if recipe is None:
        schema = extract_structured(html)
        if schema is not None and schema.has_usable_fields:
            recipe = recipe_from_schema(schema)
            labels, keywords = schema.categories, schema.keywords
            if first_missing_field(recipe):
                backfill_required(recipe, extract_heuristic(html, normalize_html(html)))
        else:
            logger.info("No structured data; falling back to heuristic extraction")
            recipe = extract_heuristic(html, normalize_html(html))

    missing = first_missing_field(recipe)
    if missing:
        return ImportFailure.missing(missing)

    recipe.source_url = url
    recipe.matched_ingredients = match_ingredients(recipe.ingredients)

    if not labels and recipe.category:
        labels = [recipe.category]
    recipe.category = classify_category(
        labels,
        recipe.name,
        recipe.ingredients,
        recipe.cuisine,
        keywords,
    ).value

    difficulty = normalize_difficulty(recipe.difficulty) or estimate_difficulty(
        len(recipe.ingredients),
        len(recipe.instructions),
        " ".join(recipe.instructions),
    )
    recipe.difficulty = difficulty.value
    return recipe


def recipe_from_schema(schema: SchemaRecipe) -> ParsedRecipe:
    """Map a decoded Schema.org Recipe onto a draft and score it."""
    recipe = ParsedRecipe(
        name=schema.name,
        description=schema.description,
        ingredients=dedupe_lines(schema.ingredients),
        instructions=dedupe_lines(schema.instructions),
        prep_time=parse_duration(schema.prep_time),
        cook_time=parse_duration(schema.cook_time) or parse_duration(schema.total_time),
        servings=schema.servings,
        difficulty=schema.difficulty,
        cuisine=schema.cuisine,
        category=schema.categories[0] if schema.categories else None,
        image_url=schema.image_url,
        method=ExtractionMethod.JSON_LD,
    )
    recipe.confidence = score_confidence(recipe)
    return recipe


def _is_empty(value) -> bool:
    return not value or (isinstance(value, str) and not value.strip())


def first_missing_field(recipe: ParsedRecipe) -> str | None:
    """First of name, ingredients, instructions that is empty."""
    for field_name in REQUIRED_FIELDS:
        if _is_empty(getattr(recipe, field_name)):
            return field_name
    return None


def backfill_required(recipe: ParsedRecipe, fallback: ParsedRecipe) -> list[str]:
    """
    Fill empty mandatory fields of a structured draft from the heuristic one.

    Fields the structured data did provide are never replaced. The
    confidence is rescored when anything was filled.

    Returns:
        Names of the fields that were filled
    """
    filled = []
    for field_name in REQUIRED_FIELDS:
        value = getattr(fallback, field_name)
        if _is_empty(getattr(recipe, field_name)) and not _is_empty(value):
            setattr(recipe, field_name, value)
            filled.append(field_name)

    if filled:
        recipe.confidence = score_confidence(recipe)
        logger.info(f"Filled {', '.join(filled)} from page text")
    return filled


def _failed(error: ImportFailure) -> ExtractionResult:
    return ExtractionResult(
        success=False,
        method=ExtractionMethod.FAILED,
        error=error,
        fallback_message=DEFAULT_FALLBACK_MESSAGE,
    )


def _validate_url(url: str) -> str | None:
    """
    Validate URL format.

    Returns error message if invalid, None if valid.
    """
    if not url or not url.strip():
        return "URL is required"

    url = url.strip()

    if not re.match(r"^https?://", url, re.IGNORECASE):
        return "URL must start with http:// or https://"

    try:
        parsed = urlparse(url)
    except ValueError:
        return "Invalid URL format"
    if not parsed.netloc:
        return "Invalid URL format"

    return None
