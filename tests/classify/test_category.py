"""Tests for course category classification."""

from recipe_draft.classify.category import (
    category_from_cuisine,
    category_from_ingredients,
    category_from_label,
    category_from_name,
    classify_category,
    score_ingredients,
)
from recipe_draft.models import RecipeCategory


class TestLabels:
    """Tests for free-text category labels."""

    def test_exact_alias(self):
        assert category_from_label("Main Course") == RecipeCategory.MAIN
        assert category_from_label("Side Dishes") == RecipeCategory.SIDE

    def test_alias_inside_label(self):
        assert category_from_label("Easy Dessert Recipes") == RecipeCategory.DESSERT

    def test_unknown_label(self):
        assert category_from_label("Weeknight") is None
        assert category_from_label(None) is None


class TestSignals:
    """Tests for name, ingredient and cuisine signals."""

    def test_name_keywords_in_priority_order(self):
        assert category_from_name("Breakfast Cookie") == RecipeCategory.BREAKFAST
        assert category_from_name("Chocolate Cake") == RecipeCategory.DESSERT
        assert category_from_name("Chewy Oat Cookies") == RecipeCategory.DESSERT
        assert category_from_name("Beef Stew") == RecipeCategory.SOUP
        assert category_from_name("Roast Chicken") is None

    def test_ingredient_scores(self):
        scores = score_ingredients(["4 cups chicken broth", "1 cup vegetable stock"])
        assert scores[RecipeCategory.SOUP] == 6
        assert scores[RecipeCategory.MAIN] == 2

    def test_plural_keywords_match(self):
        assert score_ingredients(["2 eggs"]) == {RecipeCategory.BREAKFAST: 1}

    def test_ingredient_threshold(self):
        assert category_from_ingredients(["1 egg"]) is None
        assert category_from_ingredients(
            ["1 cup sugar", "2 tbsp butter", "1 cup flour", "2 eggs"]
        ) == RecipeCategory.DESSERT

    def test_cuisine_family(self):
        assert category_from_cuisine("Thai") == RecipeCategory.MAIN
        assert category_from_cuisine("Martian") is None


class TestClassifyCategory:
    """Tests for the full signal cascade."""

    def test_schema_label_first(self):
        assert classify_category("Dessert", "Breakfast Burrito", []) == RecipeCategory.DESSERT

    def test_first_resolvable_label_in_list(self):
        assert classify_category(["Weeknight", "Appetizer", "Snack"], None, []) == RecipeCategory.STARTER

    def test_keywords_after_labels(self):
        assert classify_category(None, "Thing", [], keywords=["breakfast"]) == RecipeCategory.BREAKFAST

    def test_name_before_ingredients(self):
        ingredients = ["4 cups chicken broth", "1 cup vegetable stock"]
        assert classify_category(None, "Breakfast Cookie", ingredients) == RecipeCategory.BREAKFAST

    def test_ingredients_when_name_is_silent(self):
        ingredients = ["4 cups chicken broth", "1 cup vegetable stock"]
        assert classify_category(None, "Grandma's Favorite", ingredients) == RecipeCategory.SOUP

    def test_defaults_to_main(self):
        assert classify_category(None, None, []) == RecipeCategory.MAIN
