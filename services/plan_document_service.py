"""Plan document service - shapes parsed meals into a storable meal plan document."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from app.config import settings
from app.exceptions import ServiceValidationError
from domain.schemas.meal_text_schemas import (
    Meal,
    MealPlanDocument,
    ParseResult,
    PlanMeal,
)

logger = logging.getLogger("mealtext.plan_document")


class PlanDocumentService:
    """
    Builds the {planName, days, mealsPerDay, fitnessGoal, meals} document a
    persistence collaborator stores. Nothing here stores anything.

    Days are demarcated by the caller: one list of meals (or one ParseResult)
    per day.
    """

    @staticmethod
    def _validate(plan_name: str, day_count: int, meal_count: int) -> str:
        name = (plan_name or "").strip()
        if not name:
            raise ServiceValidationError(
                "Plan name is required", code="PLAN_NAME_REQUIRED"
            )
        if day_count == 0 or meal_count == 0:
            raise ServiceValidationError(
                "At least one meal is required", code="MEALS_REQUIRED"
            )
        return name

    @staticmethod
    def _place(day: int, meals: Sequence[Meal]) -> List[PlanMeal]:
        return [
            PlanMeal(
                day=day,
                meal_number=number,
                meal_type=meal.category,
                meal_name=meal.meal_name,
                ingredients=meal.ingredients,
            )
            for number, meal in enumerate(meals, start=1)
        ]

    @staticmethod
    def build_document(
        plan_name: str,
        meals: Sequence[Meal],
        fitness_goal: Optional[str] = None,
    ) -> MealPlanDocument:
        """
        Build a single-day plan document.

        Args:
            plan_name: display name of the plan (required, trimmed)
            meals: meals in the order they are eaten
            fitness_goal: defaults to settings.default_fitness_goal

        Raises:
            ServiceValidationError: blank plan name or no meals
        """
        return PlanDocumentService.compose_days(plan_name, [list(meals)], fitness_goal)

    @staticmethod
    def compose_days(
        plan_name: str,
        days: Sequence[Sequence[Meal] | ParseResult],
        fitness_goal: Optional[str] = None,
    ) -> MealPlanDocument:
        """
        Build a multi-day plan document, one entry of `days` per day.

        Each entry may be a ParseResult or a plain list of meals. Meals are
        numbered from 1 within their day; mealsPerDay is the largest day.
        """
        day_meals: List[Sequence[Meal]] = [
            d.meals if isinstance(d, ParseResult) else d for d in days
        ]
        total = sum(len(m) for m in day_meals)
        name = PlanDocumentService._validate(plan_name, len(day_meals), total)

        placed: List[PlanMeal] = []
        for day, meals in enumerate(day_meals, start=1):
            placed.extend(PlanDocumentService._place(day, meals))

        document = MealPlanDocument(
            plan_name=name,
            days=len(day_meals),
            meals_per_day=max(len(m) for m in day_meals),
            fitness_goal=fitness_goal or settings.default_fitness_goal,
            meals=tuple(placed),
        )
        logger.info(
            "Built plan document '%s': days=%d, meals=%d", name, document.days, total
        )
        return document
