"""Schemas for meal text parsing results and manual meal plan documents"""

from typing import List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from domain.enums import MealCategory


class Ingredient(BaseModel):
    """One food item decomposed from an ingredient line"""

    name: str = Field(..., min_length=1, description="Display name, case preserved")
    amount: Optional[str] = Field(None, description="Leading quantity exactly as written")
    unit: Optional[str] = Field(None, description="Canonical lower-case unit token")

    model_config = {"frozen": True}

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("ingredient name must not be blank")
        return v


class Meal(BaseModel):
    """A single parsed meal"""

    meal_name: str = Field(..., min_length=1, alias="mealName")
    category: MealCategory
    ingredients: Tuple[Ingredient, ...] = Field(default_factory=tuple)

    model_config = {"frozen": True, "populate_by_name": True}


class ParseResult(BaseModel):
    """Structured output of one parse call"""

    meals: Tuple[Meal, ...] = Field(default_factory=tuple)
    count: int = Field(..., ge=0)
    meals_per_day: int = Field(..., ge=0, alias="mealsPerDay")
    days: int = Field(default=1, ge=1)
    total_ingredients: int = Field(default=0, ge=0, alias="totalIngredients")

    model_config = {"frozen": True, "populate_by_name": True}


class ParseFailure(BaseModel):
    """Reason a parse call produced no result"""

    reason: str

    model_config = {"frozen": True}


# =============================================================================
# Request schemas
# =============================================================================


class ParseMealsRequest(BaseModel):
    """Body of the parse endpoint"""

    text: str = Field(..., description="Freeform meal plan text")


class ManualMealPlanRequest(BaseModel):
    """Parsed (and possibly edited) meals to assemble into a plan document"""

    plan_name: str = Field(default="", alias="planName")
    meals: List[Meal] = Field(default_factory=list)
    fitness_goal: Optional[str] = Field(None, alias="fitnessGoal")

    model_config = {"populate_by_name": True}


# =============================================================================
# Plan document schemas
# =============================================================================


class PlanMeal(BaseModel):
    """A meal placed at a day/slot position inside a plan document"""

    day: int = Field(..., ge=1)
    meal_number: int = Field(..., ge=1, alias="mealNumber")
    meal_type: MealCategory = Field(..., alias="mealType")
    meal_name: str = Field(..., alias="mealName")
    manual: bool = True
    ingredients: Tuple[Ingredient, ...] = Field(default_factory=tuple)

    model_config = {"frozen": True, "populate_by_name": True}


class MealPlanDocument(BaseModel):
    """Plan payload in the shape the persistence collaborator stores"""

    plan_name: str = Field(..., alias="planName")
    days: int = Field(..., ge=1)
    meals_per_day: int = Field(..., ge=1, alias="mealsPerDay")
    fitness_goal: str = Field(..., alias="fitnessGoal")
    meals: Tuple[PlanMeal, ...]

    model_config = {"frozen": True, "populate_by_name": True}
