"""Meal namer and result aggregator."""

from __future__ import annotations

from typing import List, Sequence

from domain.schemas.meal_text_schemas import Ingredient, Meal, ParseResult
from services.meal_categorizer import CategorizedMeal

# Ingredients that contribute to a synthesized meal name
NAME_INGREDIENT_LIMIT = 3


def join_names(names: Sequence[str]) -> str:
    """Join display names as "a", "a and b", or "a, b, and c"."""
    if not names:
        return ""
    if len(names) == 1:
        return names[0]
    if len(names) == 2:
        return f"{names[0]} and {names[1]}"
    return f"{', '.join(names[:-1])}, and {names[-1]}"


def synthesize_name(ingredients: Sequence[Ingredient], position: int) -> str:
    """
    Build a meal name from its first ingredients.

    Args:
        ingredients: parsed ingredients in input order
        position: 0-based position of the meal in the parse

    Returns:
        e.g. "Jasmine Rice, Lean ground beef, and cooked broccoli", or
        "Untitled Meal N" when there are no ingredients
    """
    names = [i.name for i in ingredients[:NAME_INGREDIENT_LIMIT]]
    if not names:
        return f"Untitled Meal {position + 1}"
    return join_names(names)


def name_meal(meal: CategorizedMeal) -> Meal:
    title = (meal.title or "").strip()
    return Meal(
        meal_name=title or synthesize_name(meal.ingredients, meal.position),
        category=meal.category,
        ingredients=meal.ingredients,
    )


def name_and_assemble(meals: Sequence[CategorizedMeal]) -> ParseResult:
    """Name every meal and wrap them, in input order, into a ParseResult."""
    named: List[Meal] = [name_meal(m) for m in meals]
    return ParseResult(
        meals=tuple(named),
        count=len(named),
        meals_per_day=len(named),
        days=1,
        total_ingredients=sum(len(m.ingredients) for m in named),
    )
