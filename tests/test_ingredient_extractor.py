"""
Tests for the line classifier and ingredient extractor.

Each matcher in the precedence list is exercised on its own, followed by
bullet handling, unit canonicalization, and header selection for blocks.
"""

import pytest

from domain.schemas.meal_text_schemas import Ingredient
from services.ingredient_extractor import (
    INGREDIENT_MATCHERS,
    classify,
    extract_ingredient,
    match_line,
)
from services.meal_segmenter import RawBlock


# =============================================================================
# MATCHER PRECEDENCE
# =============================================================================


def test_matchers_are_in_documented_order():
    assert [m.tag for m in INGREDIENT_MATCHERS] == [
        "amount_unit_attached",
        "amount_unit_spaced",
        "amount_count",
        "name_only",
    ]


@pytest.mark.parametrize(
    "text, tag",
    [
        ("175g of Jasmine Rice", "amount_unit_attached"),
        ("100.75g turkey breast", "amount_unit_attached"),
        ("2 cups of oats", "amount_unit_spaced"),
        ("6 oz chicken breast", "amount_unit_spaced"),
        ("4 eggs", "amount_count"),
        ("1.5 banana (150g)", "amount_count"),
        ("chicken wrap", "name_only"),
        ("1/2 avocado", "name_only"),
    ],
)
def test_match_line_picks_expected_matcher(text, tag):
    matcher, _ = match_line(text)
    assert matcher.tag == tag


# =============================================================================
# EXTRACTION
# =============================================================================


@pytest.mark.parametrize(
    "line, expected",
    [
        ("-175g of Jasmine Rice", Ingredient(name="Jasmine Rice", amount="175", unit="g")),
        ("-2 cups of oats", Ingredient(name="oats", amount="2", unit="cups")),
        ("-1 cup of almond milk", Ingredient(name="almond milk", amount="1", unit="cup")),
        ("-0.5 cup of blueberries", Ingredient(name="blueberries", amount="0.5", unit="cup")),
        ("-2 tbsp of honey", Ingredient(name="honey", amount="2", unit="tbsp")),
        ("-1 lb of mixed vegetables", Ingredient(name="mixed vegetables", amount="1", unit="lb")),
        ("-250ml of protein shake", Ingredient(name="protein shake", amount="250", unit="ml")),
        ("-2 pieces of sourdough bread", Ingredient(name="sourdough bread", amount="2", unit="pieces")),
        ("•2 slices of sourdough bread", Ingredient(name="sourdough bread", amount="2", unit="slices")),
        ("-4 eggs", Ingredient(name="eggs", amount="4", unit="unit")),
        ("-chicken wrap", Ingredient(name="chicken wrap", amount=None, unit=None)),
        ("-1 tbsp. olive oil", Ingredient(name="olive oil", amount="1", unit="tbsp")),
        ("-6 oz. chicken breast", Ingredient(name="chicken breast", amount="6", unit="oz")),
        ("-2 cups, chopped kale", Ingredient(name="chopped kale", amount="2", unit="cups")),
        ("-1 tsp. of cinnamon", Ingredient(name="cinnamon", amount="1", unit="tsp")),
        ("-100g. cooked rice", Ingredient(name="cooked rice", amount="100", unit="g")),
        ("-200g: chicken thighs", Ingredient(name="chicken thighs", amount="200", unit="g")),
        ("-1 cup (cooked) quinoa", Ingredient(name="(cooked) quinoa", amount="1", unit="cup")),
    ],
)
def test_extract_ingredient_patterns(line, expected):
    assert extract_ingredient(line) == expected


def test_extract_preserves_decimal_precision():
    """
    Verifies:
    - Decimal amounts are kept exactly as written, no rounding
    """
    ingredient = extract_ingredient("-175.5g of jasmine rice")

    assert ingredient.amount == "175.5"
    assert ingredient.unit == "g"
    assert ingredient.name == "jasmine rice"

    assert extract_ingredient("-150.25g of lean ground beef").amount == "150.25"


def test_extract_keeps_trailing_parenthetical_in_name():
    """
    Verifies:
    - Only the leading quantity drives amount/unit
    - "(100g)" stays in the display name
    """
    ingredient = extract_ingredient("-1 banana (100g)")

    assert ingredient.name == "banana (100g)"
    assert ingredient.amount == "1"
    assert ingredient.unit == "unit"


def test_extract_unit_is_case_insensitive_and_lowercased():
    assert extract_ingredient("-200G of Chicken").unit == "g"
    assert extract_ingredient("-2 TBSP of Olive Oil").unit == "tbsp"
    assert extract_ingredient("-1 Cups of Rice").unit == "cups"


def test_extract_spelled_out_units_canonicalize():
    assert extract_ingredient("-200 grams of chicken").unit == "g"
    assert extract_ingredient("-2 tablespoons of peanut butter").unit == "tbsp"
    assert extract_ingredient("-1 pound of ground turkey").unit == "lb"
    assert extract_ingredient("-2 lbs potatoes").unit == "lb"


def test_extract_unit_needs_word_boundary():
    """
    Verifies:
    - "2 lemons" and "2 large eggs" are counts, not litres
    """
    assert extract_ingredient("-2 lemons") == Ingredient(name="lemons", amount="2", unit="unit")
    assert extract_ingredient("-2 large eggs") == Ingredient(name="large eggs", amount="2", unit="unit")


def test_extract_preserves_name_case():
    assert extract_ingredient("-150g of Lean ground beef").name == "Lean ground beef"


def test_extract_collapses_inner_whitespace():
    assert extract_ingredient("-  100g   of   cooked    broccoli  ").name == "cooked broccoli"


@pytest.mark.parametrize("line", ["-", "•", "  -   ", "", "   "])
def test_extract_returns_none_for_empty_lines(line):
    assert extract_ingredient(line) is None


@pytest.mark.parametrize("bullet", ["-", "•", "*", "–", "·"])
def test_extract_accepts_all_bullet_styles(bullet):
    assert extract_ingredient(f"{bullet} 4 eggs") == Ingredient(name="eggs", amount="4", unit="unit")


def test_extract_without_bullet():
    assert extract_ingredient("175g of Jasmine Rice") == Ingredient(
        name="Jasmine Rice", amount="175", unit="g"
    )


# =============================================================================
# CLASSIFICATION
# =============================================================================


def test_classify_uses_forced_header():
    block = RawBlock(index=0, header="Meal 1", lines=("-4 eggs", "-1 banana"))

    classified = classify(block)

    assert classified.header == "Meal 1"
    assert classified.ingredient_lines == ("-4 eggs", "-1 banana")
    assert [i.name for i in classified.ingredients] == ["eggs", "banana"]


def test_classify_first_unbulleted_line_is_header():
    block = RawBlock(index=2, lines=("Post-workout shake", "-250ml of milk", "-1 scoop whey"))

    classified = classify(block)

    assert classified.index == 2
    assert classified.header == "Post-workout shake"
    assert len(classified.ingredients) == 2


def test_classify_bulleted_first_line_means_no_header():
    block = RawBlock(index=0, lines=("-rice", "-beans"))

    classified = classify(block)

    assert classified.header is None
    assert [i.name for i in classified.ingredients] == ["rice", "beans"]


def test_classify_mixed_bullets_keep_order():
    """
    Verifies:
    - "-" and "•" lines in one block parse into one list, in input order
    """
    block = RawBlock(
        index=0,
        header="Meal 3",
        lines=("-100.75g turkey breast", "•250ml of coconut water", "-150g of sweet potato"),
    )

    names = [i.name for i in classify(block).ingredients]

    assert names == ["turkey breast", "coconut water", "sweet potato"]


def test_classify_drops_empty_ingredient_lines():
    block = RawBlock(index=0, header="Meal 1", lines=("-rice", "-", "•", "-eggs"))

    classified = classify(block)

    assert [i.name for i in classified.ingredients] == ["rice", "eggs"]
