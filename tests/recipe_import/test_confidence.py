"""Tests for confidence scoring."""

from recipe_draft.models import ParsedRecipe
from recipe_draft.recipe_import.confidence import FIELD_WEIGHTS, MAX_SCORE, score_confidence


class TestScoreConfidence:
    """Tests for score_confidence."""

    def test_weights_sum_to_eight(self):
        assert MAX_SCORE == 8.0
        assert set(FIELD_WEIGHTS) == {
            "name", "description", "prep_time", "cook_time",
            "servings", "ingredients", "instructions", "difficulty",
        }

    def test_empty_recipe_scores_zero(self):
        assert score_confidence(ParsedRecipe()) == 0.0

    def test_name_only(self):
        assert score_confidence(ParsedRecipe(name="Soup")) == 0.125

    def test_mandatory_fields_and_servings(self):
        recipe = ParsedRecipe(
            name="Test Soup",
            ingredients=["2 cups broth"],
            instructions=["Boil broth."],
            servings=4,
        )
        assert score_confidence(recipe) == 0.625

    def test_every_field_scores_one(self):
        recipe = ParsedRecipe(
            name="Soup",
            description="Warm and simple.",
            prep_time=5,
            cook_time=20,
            servings=2,
            ingredients=["1 carrot"],
            instructions=["Boil."],
            difficulty="Easy",
        )
        assert score_confidence(recipe) == 1.0

    def test_empty_values_do_not_count(self):
        recipe = ParsedRecipe(name="", description="", ingredients=[], instructions=[])
        assert score_confidence(recipe) == 0.0

    def test_adding_a_field_never_lowers_the_score(self):
        recipe = ParsedRecipe(name="Soup")
        before = score_confidence(recipe)
        recipe.ingredients = ["1 carrot"]
        assert score_confidence(recipe) > before

    def test_zero_minutes_still_populated(self):
        assert score_confidence(ParsedRecipe(prep_time=0)) == 0.125
