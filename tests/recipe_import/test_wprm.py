"""Tests for WP Recipe Maker card extraction."""

from recipe_draft.models import ExtractionMethod
from recipe_draft.recipe_import.wprm import (
    WPRM_CONFIDENCE,
    extract_card_ingredients,
    extract_card_instructions,
    extract_wprm,
    is_wprm_page,
)


def _card(body: str, name: str = "Toast") -> str:
    return (
        '<div class="wprm-recipe-container">'
        f'<h2 class="wprm-recipe-name">{name}</h2>'
        f"{body}"
        "</div>"
    )


BREAD = (
    '<ul><li class="wprm-recipe-ingredient">'
    '<span class="wprm-recipe-ingredient-name">bread</span>'
    "</li></ul>"
)


class TestExtractWprm:
    """Tests for extract_wprm."""

    def test_full_card(self, wprm_html):
        recipe = extract_wprm(wprm_html)

        assert recipe is not None
        assert recipe.method == ExtractionMethod.WPRM
        assert recipe.confidence == WPRM_CONFIDENCE
        assert recipe.name == "Lemon Pancakes"
        assert recipe.ingredients == ["2 cups flour", "1 lemon, zested"]
        assert recipe.instructions == [
            "Whisk the flour and lemon zest together.",
            "Cook on a hot griddle until golden.",
        ]
        assert recipe.prep_time == 10
        assert recipe.cook_time == 20
        assert recipe.servings == 6
        assert recipe.category == "Breakfast"
        assert recipe.cuisine == "American"

    def test_not_a_wprm_page(self, soup_html):
        assert not is_wprm_page(soup_html)
        assert extract_wprm(soup_html) is None

    def test_missing_name(self):
        html = '<div class="wprm-recipe-container">' + BREAD + "</div>"
        assert extract_wprm(html) is None

    def test_missing_ingredients(self):
        assert extract_wprm(_card("<p>Nothing listed</p>")) is None

    def test_steps_taken_from_page_text(self):
        html = _card(BREAD) + "<h3>Instructions</h3><p>Bake the bread until golden.</p>"
        recipe = extract_wprm(html)

        assert recipe is not None
        assert recipe.instructions == ["Bake the bread until golden."]

    def test_no_steps_anywhere(self):
        assert extract_wprm(_card(BREAD)) is None

    def test_card_lines_deduplicated(self):
        step = (
            '<li class="wprm-recipe-instruction">'
            '<div class="wprm-recipe-instruction-text">Toast the bread well.</div>'
            "</li>"
        )
        html = _card(BREAD.replace(">bread<", ">Bread<") + BREAD + "<ul>" + step + step + "</ul>")
        recipe = extract_wprm(html)

        assert recipe.ingredients == ["Bread"]
        assert recipe.instructions == ["Toast the bread well."]

    def test_data_attribute_fallbacks(self):
        html = _card(
            BREAD
            + '<span class="wprm-recipe-prep-time" data-minutes="25"></span>'
            + '<span class="wprm-recipe-servings" data-servings="500"></span>'
            + "<h3>Instructions</h3><p>Bake the bread until golden.</p>"
        )
        recipe = extract_wprm(html)

        assert recipe.prep_time == 25
        assert recipe.servings is None


class TestCardIngredients:
    """Tests for ingredient line assembly."""

    def test_notes_only(self):
        html = (
            '<li class="wprm-recipe-ingredient">'
            '<span class="wprm-recipe-ingredient-notes">to serve</span>'
            "</li>"
        )
        assert extract_card_ingredients(html) == ["to serve"]

    def test_repeated_lines_dropped(self):
        assert extract_card_ingredients(BREAD + BREAD) == ["bread"]

    def test_repeats_dropped_ignoring_case(self):
        html = BREAD.replace(">bread<", ">Bread<") + BREAD
        assert extract_card_ingredients(html) == ["Bread"]


class TestCardInstructions:
    """Tests for instruction list assembly."""

    def test_repeated_steps_dropped(self):
        step = (
            '<li class="wprm-recipe-instruction">'
            '<div class="wprm-recipe-instruction-text">Toast the bread well.</div>'
            "</li>"
        )
        assert extract_card_instructions(step + step) == ["Toast the bread well."]

    def test_short_steps_skipped(self):
        html = (
            '<li class="wprm-recipe-instruction">'
            '<div class="wprm-recipe-instruction-text">Serve.</div>'
            "</li>"
        )
        assert extract_card_instructions(html) == []

    def test_markup_inside_step(self):
        html = (
            '<li class="wprm-recipe-instruction">'
            '<div class="wprm-recipe-instruction-text"><p>Fold in the <strong>egg</strong> whites.</p></div>'
            "</li>"
        )
        assert extract_card_instructions(html) == ["Fold in the egg whites."]
