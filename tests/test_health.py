"""Basic health check tests."""


def test_import_recipe_draft():
    """Test that recipe_draft package can be imported."""
    import recipe_draft
    assert recipe_draft.__version__ == "0.1.0"


def test_import_models():
    """Test that shared models can be imported."""
    from recipe_draft.models import (
        ExtractionMethod,
        ImportErrorKind,
        ImportFailure,
        ParsedRecipe,
    )

    failure = ImportFailure.missing("instructions")
    assert failure.kind == ImportErrorKind.MISSING_REQUIRED_DATA
    assert str(failure) == "Recipe is missing required field: instructions"
    assert ParsedRecipe().method == ExtractionMethod.HEURISTIC


def test_import_public_api():
    """Test that the pipeline entry points are exported."""
    from recipe_draft.classify import classify_category, estimate_difficulty, normalize_difficulty
    from recipe_draft.ingredients import FOOD_CATALOG, match_ingredients, normalize_ingredient
    from recipe_draft.recipe_import import import_from, parse_page

    assert callable(import_from)
    assert callable(parse_page)
    assert callable(classify_category)
    assert callable(estimate_difficulty)
    assert callable(normalize_difficulty)
    assert callable(match_ingredients)
    assert normalize_ingredient("minced garlic") == "Garlic"
    assert len(FOOD_CATALOG) > 0
