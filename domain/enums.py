"""
Domain enums for the MealText application.
"""

import enum


class MealCategory(str, enum.Enum):
    """Meal-time label attached to every parsed meal"""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


# Default order used when a meal carries no explicit category prefix
CATEGORY_ROTATION = (
    MealCategory.BREAKFAST,
    MealCategory.LUNCH,
    MealCategory.DINNER,
    MealCategory.SNACK,
)
