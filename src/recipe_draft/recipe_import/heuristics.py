"""
Recipe Draft - Heuristic line extraction.

Fallback extractor for pages without usable structured data. Works on the
normalized text line by line: section headers scope where ingredients and
instructions are looked for, and each candidate line is classified with
simple keyword rules. Every field is extracted independently; a field that
cannot be found is left empty.
"""

import logging
import re
import string
from typing import Callable

from recipe_draft.ingredients.normalizer import normalize_ingredient
from recipe_draft.models import ExtractionMethod, ParsedRecipe

from .confidence import score_confidence
from .html_text import iter_raw_lines, make_soup, normalize_html, tag_text, text_lines
from .normalizer import clean_step

logger = logging.getLogger(__name__)


# =============================================================================
# Vocabulary
# =============================================================================

INGREDIENT_INDICATORS = (
    "cup", "tbsp", "tsp", "oz", "lb", "gram", "kg", "ml", "liter",
    "clove", "pinch", "dash", "sprig", "bunch", "piece", "slice",
    "diced", "chopped", "sliced", "minced", "crushed", "grated",
)

ACTION_VERBS = (
    "add", "mix", "stir", "cook", "bake", "heat", "boil", "simmer",
    "chop", "dice", "slice", "pour", "place", "remove", "combine",
    "preheat", "transfer", "serve", "garnish", "season", "prepare",
    "whisk", "fry", "roast", "grill", "drain", "blend", "beat",
    "toast", "melt", "spread", "toss",
)

INGREDIENT_HEADERS = ("ingredient",)
INSTRUCTION_HEADERS = ("instruction", "method", "direction")

INGREDIENT_SECTION_ENDS = INSTRUCTION_HEADERS + ("notes", "nutrition", "calories:")
INGREDIENT_SECTION_END_PREFIXES = ("prep time", "cook time", "total time")
INSTRUCTION_SECTION_ENDS = ("notes", "nutrition", "calories:")
INSTRUCTION_SECTION_END_PREFIXES = ("did you make",)

DIFFICULTY_WORDS = (
    "easy", "medium", "moderate", "hard", "difficult",
    "beginner", "intermediate", "advanced",
)

_INDICATOR_RE = re.compile(r"\b(?:" + "|".join(INGREDIENT_INDICATORS) + r")", re.IGNORECASE)
_ACTION_VERB_RE = re.compile(r"\b(?:" + "|".join(ACTION_VERBS) + r")\b", re.IGNORECASE)
_DIGIT_RE = re.compile(r"\d")
_BULLET_RE = re.compile(r"^[•\-*–·]\s*")
_LIST_NUMBER_RE = re.compile(r"^\d+\.(?!\d)\s*")

# "Name | Site" and "Name - Site"; a bar splits even unspaced, dashes only when spaced
_SITE_SUFFIX_RE = re.compile(r"\s*\|\s*|\s+[\-–—]\s+")

_TIME_LABELS = {
    "prep": r"prep(?:aration)?",
    "cook": r"(?:cook(?:ing)?|bake)",
    "total": r"total",
}
_TIME_VALUE = (
    r"\s+time:?\s*(\d+)\s*(hours?|hrs?|minutes?|mins?)\b"
    r"(?:\s*(\d+)\s*(?:minutes?|mins?)\b)?"
)
_TIME_PATTERNS = {
    kind: re.compile(rf"\b{label}{_TIME_VALUE}", re.IGNORECASE)
    for kind, label in _TIME_LABELS.items()
}

_SERVINGS_PATTERNS = (
    re.compile(r"\bserves:?\s*(\d+)", re.IGNORECASE),
    re.compile(r"\bservings:?\s*(\d+)", re.IGNORECASE),
    re.compile(r"\byield:?\s*(\d+)\s*servings", re.IGNORECASE),
    re.compile(r"\bmakes:?\s*(\d+)\s*servings", re.IGNORECASE),
)

_DIFFICULTY_PATTERNS = tuple(
    (word, re.compile(rf"\b(?:difficulty|level):?\s*{word}\b", re.IGNORECASE))
    for word in DIFFICULTY_WORDS
)

MAX_NAME_CHARS = 100
MAX_HEADER_CHARS = 50
MAX_BLANK_LINES = 3
MAX_DESCRIPTION_LINES = 3
_DESCRIPTION_CHARS = (30, 300)
_INGREDIENT_CHARS = (3, 200)
_INSTRUCTION_CHARS = (10, 500)
_EDGE_PUNCTUATION = " ,.;:-–*•"


# =============================================================================
# Line Classification
# =============================================================================


def _capitalized(line: str) -> str:
    return string.capwords(" ".join(line.split()).strip(_EDGE_PUNCTUATION))


def is_ingredient_line(line: str) -> bool:
    """
    Does this line look like an ingredient?

    True for a line of sensible length that mentions a unit or prep word,
    that the ingredient normalizer rewrites, or that contains a quantity.
    """
    line = line.strip()
    if not _INGREDIENT_CHARS[0] <= len(line) < _INGREDIENT_CHARS[1]:
        return False
    if _INDICATOR_RE.search(line):
        return True
    normalized = normalize_ingredient(line)
    if normalized and normalized != _capitalized(line):
        return True
    return bool(_DIGIT_RE.search(line))


def is_instruction_line(line: str) -> bool:
    """A line of sensible length that uses a cooking action verb."""
    line = line.strip()
    if not _INSTRUCTION_CHARS[0] <= len(line) < _INSTRUCTION_CHARS[1]:
        return False
    return bool(_ACTION_VERB_RE.search(line))


def clean_ingredient_line(line: str) -> str:
    line = _BULLET_RE.sub("", line.strip())
    return _LIST_NUMBER_RE.sub("", line).strip()


def clean_instruction_line(line: str) -> str:
    return clean_step(_BULLET_RE.sub("", line.strip()))


# =============================================================================
# Sections
# =============================================================================


def _is_header(line: str, keywords: tuple[str, ...]) -> bool:
    lower = line.lower()
    return len(line) < MAX_HEADER_CHARS and any(k in lower for k in keywords)


def _ends_section(line: str, keywords: tuple[str, ...], prefixes: tuple[str, ...]) -> bool:
    lower = line.lower()
    return any(k in lower for k in keywords) or lower.startswith(prefixes)


def _scan_section(
    text: str,
    opens: tuple[str, ...],
    other_opens: tuple[str, ...],
    ends: tuple[str, ...],
    end_prefixes: tuple[str, ...],
    accept: Callable[[str], bool],
    clean: Callable[[str], str],
    repeat_limit: int,
) -> list[str]:
    """
    Collect accepted lines from the section opened by a header.

    The section closes on the other section's header, on a run of blank
    lines, or on a closing keyword once at least one item was found. A
    second opening header after more than `repeat_limit` items is taken to
    be a repeated copy of the section and also ends the scan.
    """
    items: list[str] = []
    seen: set[str] = set()
    in_section = False
    blank_run = 0

    for line in iter_raw_lines(text):
        if not line:
            if in_section and items:
                blank_run += 1
                if blank_run >= MAX_BLANK_LINES:
                    break
            continue
        blank_run = 0

        if _is_header(line, opens):
            if len(items) > repeat_limit:
                break
            in_section = True
            continue

        if not in_section:
            continue

        if _is_header(line, other_opens):
            if items:
                break
            in_section = False
            continue

        if items and _ends_section(line, ends, end_prefixes):
            break

        if accept(line):
            cleaned = clean(line)
            key = cleaned.lower()
            if cleaned and key not in seen:
                seen.add(key)
                items.append(cleaned)

    return items


def extract_ingredients(text: str) -> list[str]:
    """Ingredient lines from the section under an "Ingredients" header."""
    return _scan_section(
        text,
        opens=INGREDIENT_HEADERS,
        other_opens=INSTRUCTION_HEADERS,
        ends=INGREDIENT_SECTION_ENDS,
        end_prefixes=INGREDIENT_SECTION_END_PREFIXES,
        accept=is_ingredient_line,
        clean=clean_ingredient_line,
        repeat_limit=5,
    )


def extract_instructions(text: str) -> list[str]:
    """Steps from the section under an "Instructions"/"Method" header."""
    return _scan_section(
        text,
        opens=INSTRUCTION_HEADERS,
        other_opens=INGREDIENT_HEADERS,
        ends=INSTRUCTION_SECTION_ENDS,
        end_prefixes=INSTRUCTION_SECTION_END_PREFIXES,
        accept=is_instruction_line,
        clean=clean_instruction_line,
        repeat_limit=3,
    )


# =============================================================================
# Fields
# =============================================================================


def extract_name(html: str, text: str) -> str | None:
    """Page title without its site suffix, else the first <h1>, else the first short line."""
    soup = make_soup(html or "")

    title = _SITE_SUFFIX_RE.split(tag_text(soup.find("title")), maxsplit=1)[0].strip()
    if title and len(title) < MAX_NAME_CHARS:
        return title

    heading = tag_text(soup.find("h1"))
    if heading and len(heading) < MAX_NAME_CHARS:
        return heading

    return next((line for line in text_lines(text) if len(line) < MAX_NAME_CHARS), None)


def extract_description(text: str, name: str | None = None) -> str | None:
    """Up to three prose lines between the name and the first ingredient."""
    lines = text_lines(text)
    start = 1
    if name:
        for index, line in enumerate(lines):
            if line.lower() == name.lower():
                start = index + 1
                break

    picked: list[str] = []
    low, high = _DESCRIPTION_CHARS
    for line in lines[start:]:
        if "ingredient" in line.lower() or is_ingredient_line(line):
            break
        if low < len(line) < high and not line.startswith(("-", "•", "*")):
            picked.append(line)
        if len(picked) >= MAX_DESCRIPTION_LINES:
            break

    return " ".join(picked).strip() or None


def extract_time(text: str, kind: str) -> int | None:
    """
    Minutes for a labelled time ("prep", "cook" or "total").

    "Prep Time: 15 minutes" -> 15
    "Cook time 1 hour 30 min" -> 90
    """
    match = _TIME_PATTERNS[kind].search(text)
    if not match:
        return None
    value = int(match.group(1))
    if match.group(2).lower().startswith("h"):
        return value * 60 + int(match.group(3) or 0)
    return value


def extract_servings(text: str) -> int | None:
    for pattern in _SERVINGS_PATTERNS:
        match = pattern.search(text)
        if match and int(match.group(1)) > 0:
            return int(match.group(1))
    return None


def extract_difficulty(text: str) -> str | None:
    """Difficulty label after "Difficulty:" or "Level:", capitalized."""
    for word, pattern in _DIFFICULTY_PATTERNS:
        if pattern.search(text):
            return word.capitalize()
    return None


# =============================================================================
# Public API
# =============================================================================


def extract_heuristic(html: str, text: str | None = None) -> ParsedRecipe:
    """
    Extract whatever recipe fields the page text yields.

    Args:
        html: The raw page, used for the <title>/<h1> name lookup
        text: The normalized page text; derived from html when omitted

    Returns:
        A partial ParsedRecipe with its confidence score set
    """
    if text is None:
        text = normalize_html(html)

    name = extract_name(html, text)
    recipe = ParsedRecipe(
        name=name,
        description=extract_description(text, name),
        ingredients=extract_ingredients(text),
        instructions=extract_instructions(text),
        prep_time=extract_time(text, "prep"),
        cook_time=extract_time(text, "cook") or extract_time(text, "total"),
        servings=extract_servings(text),
        difficulty=extract_difficulty(text),
        method=ExtractionMethod.HEURISTIC,
    )
    recipe.confidence = score_confidence(recipe)

    logger.info(
        f"Heuristic extraction: name={recipe.name!r}, "
        f"{len(recipe.ingredients)} ingredients, {len(recipe.instructions)} steps, "
        f"confidence={recipe.confidence:.2f}"
    )
    return recipe
