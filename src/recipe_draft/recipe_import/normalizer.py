"""Normalization utilities for recipe data."""

import re

from .html_text import decode_entities, fragment_text

DEFAULT_SERVINGS = 4

_DURATION_RE = re.compile(
    r"^P(?:(\d+)D)?(?:T(?:(\d+(?:\.\d+)?)H)?(?:(\d+(?:\.\d+)?)M)?(?:\d+(?:\.\d+)?S)?)?$",
    re.IGNORECASE,
)
_LEADING_DIGITS_RE = re.compile(r"\d+")
_STEP_PREFIX_RE = re.compile(r"^(?:step\s*\d+\s*[:.)]?|\d+\s*[:.)](?!\d))\s*", re.IGNORECASE)


def parse_duration(duration: str | int | None) -> int | None:
    """
    Parse ISO 8601 duration to minutes.

    Examples:
        PT30M -> 30
        PT1H -> 60
        PT1H30M -> 90
        P0DT2H15M -> 135
    """
    if not duration:
        return None

    # Handle already-integer values
    if isinstance(duration, int):
        return duration

    text = str(duration).strip()
    match = _DURATION_RE.match(text)
    if not match:
        # Try parsing as plain number
        try:
            return int(text)
        except (ValueError, TypeError):
            return None

    days = int(match.group(1) or 0)
    hours = float(match.group(2) or 0)
    minutes = float(match.group(3) or 0)
    total = int(round(days * 24 * 60 + hours * 60 + minutes))
    return total or None


def parse_servings(recipe_yield: str | int | list | None) -> int:
    """
    Parse recipe yield to a serving count.

    The first digit run of a string wins; anything unparseable falls back
    to DEFAULT_SERVINGS.

    Examples:
        "4 servings" -> 4
        "Serves 6" -> 6
        8 -> 8
        ["12", "12 cookies"] -> 12
        None -> 4
    """
    if isinstance(recipe_yield, bool):
        return DEFAULT_SERVINGS

    if isinstance(recipe_yield, int):
        return recipe_yield if recipe_yield > 0 else DEFAULT_SERVINGS

    if isinstance(recipe_yield, float):
        return int(recipe_yield) if recipe_yield >= 1 else DEFAULT_SERVINGS

    if isinstance(recipe_yield, list):
        for item in recipe_yield:
            if isinstance(item, (int, str)) and not isinstance(item, bool):
                return parse_servings(item)
        return DEFAULT_SERVINGS

    if isinstance(recipe_yield, str):
        match = _LEADING_DIGITS_RE.search(recipe_yield)
        if match and int(match.group(0)) > 0:
            return int(match.group(0))

    return DEFAULT_SERVINGS


def clean_step(text: str) -> str:
    """Strip markup, entities and leading step numbering from one step."""
    text = fragment_text(text)
    return _STEP_PREFIX_RE.sub("", text).strip()


def extract_instructions_text(instructions: list | dict | str | None) -> list[str]:
    """
    Extract instruction text from various formats.

    Handles:
        - Newline-joined strings (one step per line)
        - List of strings
        - List of HowToStep dicts with 'text' field
        - HowToSection dicts nesting steps under 'itemListElement'
    """
    if not instructions:
        return []

    if isinstance(instructions, str):
        steps = (clean_step(line) for line in instructions.splitlines())
        return [s for s in steps if s]

    if isinstance(instructions, dict):
        nested = instructions.get("itemListElement")
        if nested:
            return extract_instructions_text(nested)
        text = instructions.get("text") or instructions.get("name") or ""
        if isinstance(text, str):
            return extract_instructions_text(text)
        return []

    if isinstance(instructions, list):
        result = []
        for item in instructions:
            result.extend(extract_instructions_text(item))
        return result

    return []


def normalize_ingredients(ingredients: list | str | None) -> list[str]:
    """
    Normalize ingredients to list of strings.

    Handles:
        - List of strings
        - List of dicts with 'name' or 'text' field
        - A single newline-joined string
    """
    if not ingredients:
        return []

    if isinstance(ingredients, str):
        ingredients = ingredients.splitlines()

    result = []
    for item in ingredients:
        if isinstance(item, dict):
            item = item.get("text") or item.get("name") or ""
        if isinstance(item, str):
            text = " ".join(decode_entities(item).split())
            if text:
                result.append(text)

    return result


def dedupe_lines(lines: list[str]) -> list[str]:
    """Drop case-insensitive repeats, keeping first-seen order."""
    seen: set[str] = set()
    result = []
    for line in lines:
        key = line.lower()
        if key not in seen:
            seen.add(key)
            result.append(line)
    return result


def extract_image_url(image: str | dict | list | None) -> str | None:
    """
    Extract image URL from various formats.

    Handles:
        - Plain URL string
        - Dict with 'url' field
        - List of images (take first)
    """
    if not image:
        return None

    if isinstance(image, str):
        return image if image.startswith("http") else None

    if isinstance(image, dict):
        url = image.get("url") or image.get("@url") or image.get("contentUrl")
        if isinstance(url, str) and url.startswith("http"):
            return url

    if isinstance(image, list) and len(image) > 0:
        return extract_image_url(image[0])

    return None
