"""
Recipe Draft - Ingredient line parsing.

Splits an ingredient line into quantity, unit and the remaining text so
matched ingredients can carry an amount alongside their catalog name.
"""

import re
from dataclasses import dataclass

UNICODE_FRACTIONS = {
    "½": 0.5,
    "⅓": 1 / 3,
    "⅔": 2 / 3,
    "¼": 0.25,
    "¾": 0.75,
    "⅛": 0.125,
    "⅜": 0.375,
    "⅝": 0.625,
    "⅞": 0.875,
}

_GLYPHS = "".join(UNICODE_FRACTIONS)

# One amount: "1 1/2", "1½", "1/2", "1.5", "½"
_AMOUNT = rf"(?:\d+\s+\d+/\d+|\d+\s*[{_GLYPHS}]|\d+/\d+|\d+(?:\.\d+)?|[{_GLYPHS}])"
_QUANTITY_RE = re.compile(rf"^({_AMOUNT})(?:\s*(?:-|–|to)\s*({_AMOUNT}))?\s*")
_UNIT_RE = re.compile(r"^([a-zA-Z]+)\.?\s*(?:of\s+)?(.*)$", re.DOTALL)

UNIT_ALIASES = {
    "pounds": "lb",
    "pound": "lb",
    "lbs": "lb",
    "ounces": "oz",
    "ounce": "oz",
    "grams": "g",
    "gram": "g",
    "kilograms": "kg",
    "kilogram": "kg",
    "liters": "l",
    "liter": "l",
    "litres": "l",
    "litre": "l",
    "milliliters": "ml",
    "milliliter": "ml",
    "cups": "cup",
    "tablespoons": "tbsp",
    "tablespoon": "tbsp",
    "tbs": "tbsp",
    "tbsps": "tbsp",
    "teaspoons": "tsp",
    "teaspoon": "tsp",
    "tsps": "tsp",
    "pieces": "piece",
    "cloves": "clove",
    "slices": "slice",
    "cans": "can",
    "packages": "package",
    "bags": "bag",
    "boxes": "box",
    "pinches": "pinch",
    "dashes": "dash",
    "bunches": "bunch",
    "heads": "head",
    "sprigs": "sprig",
    "pints": "pint",
    "quarts": "quart",
    "gallons": "gallon",
    "handfuls": "handful",
    "sticks": "stick",
}

KNOWN_UNITS = frozenset(UNIT_ALIASES) | frozenset(UNIT_ALIASES.values()) | {
    "tbsp", "tsp", "oz", "lb", "g", "kg", "ml", "l",
}


@dataclass(frozen=True)
class IngredientQuantity:
    """Parsed amount of one ingredient line."""

    quantity: float | None
    unit: str | None
    name: str


def clean_unit(unit: str) -> str:
    """
    Clean and normalize a unit string.

    Args:
        unit: Raw unit input (e.g., "LBS", "Tablespoons", "tsp")

    Returns:
        Normalized unit (lowercase, short or singular form)
    """
    unit = unit.lower().strip().rstrip(".")
    return UNIT_ALIASES.get(unit, unit)


def parse_amount(text: str) -> float | None:
    """
    Parse a single amount token.

    Examples:
        "2" -> 2.0
        "1/2" -> 0.5
        "1 1/2" -> 1.5
        "1½" -> 1.5
        "½" -> 0.5
    """
    text = text.strip()
    if not text:
        return None

    whole = 0.0
    if text[-1] in UNICODE_FRACTIONS:
        whole = float(text[:-1].strip() or 0)
        return whole + UNICODE_FRACTIONS[text[-1]]

    parts = text.split()
    if len(parts) == 2:
        whole = float(parts[0])
        text = parts[1]

    if "/" in text:
        numerator, denominator = text.split("/", 1)
        if float(denominator) == 0:
            return None
        return whole + float(numerator) / float(denominator)

    return whole + float(text)


def parse_ingredient_line(line: str) -> IngredientQuantity:
    """
    Extract quantity and unit from an ingredient line.

    Ranges ("2-3 cloves") are averaged. Returns quantity None when the line
    does not start with an amount.

    Examples:
        "3 lbs chicken" -> (3.0, "lb", "chicken")
        "1 1/2 cups flour" -> (1.5, "cup", "flour")
        "2-3 cloves garlic" -> (2.5, "clove", "garlic")
        "salt to taste" -> (None, None, "salt to taste")
    """
    text = " ".join(line.split())
    match = _QUANTITY_RE.match(text)
    if not match:
        return IngredientQuantity(quantity=None, unit=None, name=text)

    low = parse_amount(match.group(1))
    high = parse_amount(match.group(2)) if match.group(2) else None
    if low is not None and high is not None:
        quantity = (low + high) / 2
    else:
        quantity = low
    remaining = text[match.end():].strip()

    unit_match = _UNIT_RE.match(remaining)
    if unit_match and unit_match.group(1).lower() in KNOWN_UNITS:
        return IngredientQuantity(
            quantity=quantity,
            unit=clean_unit(unit_match.group(1)),
            name=unit_match.group(2).strip(),
        )

    return IngredientQuantity(quantity=quantity, unit=None, name=remaining)
