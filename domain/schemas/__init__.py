"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.meal_text_schemas import (
    Ingredient,
    Meal,
    ParseResult,
    ParseFailure,
    ParseMealsRequest,
    ManualMealPlanRequest,
    PlanMeal,
    MealPlanDocument,
)

__all__ = [
    # Parse result schemas
    "Ingredient",
    "Meal",
    "ParseResult",
    "ParseFailure",
    # Request schemas
    "ParseMealsRequest",
    "ManualMealPlanRequest",
    # Plan document schemas
    "PlanMeal",
    "MealPlanDocument",
]
