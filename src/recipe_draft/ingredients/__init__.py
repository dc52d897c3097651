"""Ingredient normalization and food catalog matching."""

from .catalog import FOOD_CATALOG, CatalogEntry, FoodCatalog
from .matcher import match_ingredients
from .normalizer import normalize_ingredient, normalize_ingredients
from .parser import IngredientQuantity, parse_ingredient_line

__all__ = [
    "FOOD_CATALOG",
    "CatalogEntry",
    "FoodCatalog",
    "match_ingredients",
    "normalize_ingredient",
    "normalize_ingredients",
    "IngredientQuantity",
    "parse_ingredient_line",
]
