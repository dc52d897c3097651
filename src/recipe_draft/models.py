"""Data models shared by the import pipeline."""

from dataclasses import dataclass, field
from enum import Enum


class ExtractionMethod(str, Enum):
    """Method used to extract recipe data."""

    WPRM = "wprm"
    JSON_LD = "json_ld"
    HEURISTIC = "heuristic"
    FAILED = "failed"


class ImportErrorKind(str, Enum):
    """Terminal failure categories for a single import attempt."""

    INVALID_RESPONSE = "invalid_response"
    INVALID_ENCODING = "invalid_encoding"
    MISSING_REQUIRED_DATA = "missing_required_data"
    PARSE_FAILURE = "parse_failure"


class RecipeCategory(str, Enum):
    """Course a recipe is filed under."""

    BREAKFAST = "Breakfast"
    STARTER = "Starter"
    MAIN = "Main"
    SIDE = "Side"
    SOUP = "Soup"
    DESSERT = "Dessert"
    DRINK = "Drink"


class Difficulty(str, Enum):
    """Effort level shown to the cook."""

    BASIC = "Basic"
    INTERMEDIATE = "Intermediate"
    EXPERT = "Expert"


@dataclass
class RawPage:
    """The raw HTTP response for a single URL fetch."""

    url: str
    status_code: int
    body: bytes


@dataclass
class ImportFailure:
    """Why an import attempt could not produce a draft."""

    kind: ImportErrorKind
    message: str
    field: str | None = None

    @classmethod
    def missing(cls, field_name: str) -> "ImportFailure":
        return cls(
            kind=ImportErrorKind.MISSING_REQUIRED_DATA,
            message=f"Recipe is missing required field: {field_name}",
            field=field_name,
        )

    def __str__(self) -> str:
        return self.message


@dataclass
class MatchedIngredient:
    """A raw ingredient line paired with its food catalog entry, if any."""

    raw: str
    normalized: str
    canonical: str | None = None
    strategy: str | None = None
    catalog_group: str | None = None
    quantity: float | None = None
    unit: str | None = None

    @property
    def display_name(self) -> str:
        """Catalog name when matched, otherwise the normalized line."""
        return self.canonical or self.normalized


@dataclass
class ParsedRecipe:
    """Extracted recipe draft ready for user review."""

    name: str | None = None
    description: str | None = None
    ingredients: list[str] = field(default_factory=list)
    instructions: list[str] = field(default_factory=list)
    prep_time: int | None = None  # minutes
    cook_time: int | None = None  # minutes
    servings: int | None = None
    difficulty: str | None = None
    cuisine: str | None = None
    category: str | None = None
    confidence: float = 0.0
    source_url: str | None = None
    image_url: str | None = None
    matched_ingredients: list[MatchedIngredient] = field(default_factory=list)
    method: ExtractionMethod = ExtractionMethod.HEURISTIC


@dataclass
class ExtractionResult:
    """Result of recipe extraction attempt."""

    success: bool
    method: ExtractionMethod
    recipe: ParsedRecipe | None = None
    error: ImportFailure | None = None
    fallback_message: str | None = None
