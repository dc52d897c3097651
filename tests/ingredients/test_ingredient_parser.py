"""Tests for ingredient quantity parsing."""

import pytest

from recipe_draft.ingredients.parser import clean_unit, parse_amount, parse_ingredient_line


class TestCleanUnit:
    """Tests for unit normalization."""

    def test_aliases(self):
        assert clean_unit("LBS") == "lb"
        assert clean_unit("Tablespoons") == "tbsp"
        assert clean_unit("tsp.") == "tsp"

    def test_unknown_unit_passes_through(self):
        assert clean_unit("Bunch") == "bunch"
        assert clean_unit("handful") == "handful"


class TestParseAmount:
    """Tests for single amount tokens."""

    def test_forms(self):
        assert parse_amount("2") == 2.0
        assert parse_amount("1/2") == 0.5
        assert parse_amount("1 1/2") == 1.5
        assert parse_amount("1½") == 1.5
        assert parse_amount("½") == 0.5
        assert parse_amount("0.75") == 0.75

    def test_zero_denominator(self):
        assert parse_amount("1/0") is None

    def test_empty(self):
        assert parse_amount("") is None


class TestParseIngredientLine:
    """Tests for parse_ingredient_line."""

    @pytest.mark.parametrize(
        "line, quantity, unit, name",
        [
            ("3 lbs chicken", 3.0, "lb", "chicken"),
            ("1 1/2 cups flour", 1.5, "cup", "flour"),
            ("½ tsp salt", 0.5, "tsp", "salt"),
            ("1½ cups milk", 1.5, "cup", "milk"),
            ("2 cups of water", 2.0, "cup", "water"),
            ("2 large eggs", 2.0, None, "large eggs"),
        ],
    )
    def test_quantity_and_unit(self, line, quantity, unit, name):
        parsed = parse_ingredient_line(line)
        assert parsed.quantity == pytest.approx(quantity)
        assert parsed.unit == unit
        assert parsed.name == name

    def test_ranges_are_averaged(self):
        assert parse_ingredient_line("2-3 cloves garlic").quantity == 2.5
        assert parse_ingredient_line("2-3 cloves garlic").unit == "clove"
        assert parse_ingredient_line("2 to 4 tomatoes").quantity == 3.0

    def test_no_leading_amount(self):
        parsed = parse_ingredient_line("salt to taste")
        assert parsed.quantity is None
        assert parsed.unit is None
        assert parsed.name == "salt to taste"

    def test_whitespace_collapsed(self):
        assert parse_ingredient_line("  2   cups   rice ").name == "rice"
