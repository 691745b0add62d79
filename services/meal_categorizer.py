"""Meal categorizer - breakfast/lunch/dinner/snack assignment."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from domain.enums import CATEGORY_ROTATION, MealCategory
from domain.schemas.meal_text_schemas import Ingredient
from services.ingredient_extractor import ClassifiedBlock
from services.meal_text_vocab import parse_header


@dataclass(frozen=True)
class CategorizedMeal:
    position: int
    category: MealCategory
    title: Optional[str]
    ingredients: Tuple[Ingredient, ...]
    explicit_category: bool = False


def positional_category(position: int) -> MealCategory:
    """Default category for the meal at a 0-based position; clamps at snack."""
    return CATEGORY_ROTATION[min(max(position, 0), len(CATEGORY_ROTATION) - 1)]


def categorize(blocks: Sequence[ClassifiedBlock]) -> List[CategorizedMeal]:
    """
    Assign a category to every block, preserving order.

    An explicit prefix ("Lunch: ...", "Meal 2 - Lunch") wins. Anything else,
    including prefixes we don't recognize, gets the positional default.
    """
    meals: List[CategorizedMeal] = []
    for position, block in enumerate(blocks):
        info = parse_header(block.header) if block.header else None

        if info is not None and info.category is not None:
            category, explicit = info.category, True
        else:
            category, explicit = positional_category(position), False

        meals.append(
            CategorizedMeal(
                position=position,
                category=category,
                title=info.title if info is not None else None,
                ingredients=block.ingredients,
                explicit_category=explicit,
            )
        )
    return meals
