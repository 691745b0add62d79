"""
Meal text routes - parse trainer-written meal plans and shape plan documents.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, status

from api.responses import APIResponse
from app.config import settings
from app.exceptions import ServiceValidationError
from domain.schemas.meal_text_schemas import (
    ManualMealPlanRequest,
    MealPlanDocument,
    ParseMealsRequest,
    ParseResult,
)
from services.meal_text_parser import parse
from services.plan_document_service import PlanDocumentService

router = APIRouter(prefix="/trainer", tags=["Manual Meal Plans"])
logger = logging.getLogger("mealtext.api.meal_text")


@router.post(
    "/parse-manual-meals",
    response_model=APIResponse[ParseResult],
    status_code=status.HTTP_200_OK,
)
def parse_manual_meals(body: ParseMealsRequest):
    """
    Parse freeform meal plan text into meals and ingredients.

    Accepts both layouts trainers use:
    - simple: one "Breakfast: ..." / "Lunch: ..." line per meal
    - structured: "Meal 1" blocks with bulleted ingredient lines

    Empty text yields 400 EMPTY_INPUT.
    """
    if len(body.text) > settings.max_input_chars:
        raise ServiceValidationError(
            "Meal text is too long",
            details={"max_chars": settings.max_input_chars, "received": len(body.text)},
            code="INPUT_TOO_LARGE",
        )

    result = parse(body.text)
    logger.info(
        "Parsed %d meals (%d ingredients)", result.count, result.total_ingredients
    )
    return APIResponse[ParseResult](
        success=True,
        message=f"{result.count} meals detected and categorized",
        data=result,
    )


@router.post(
    "/manual-meal-plan/document",
    response_model=APIResponse[MealPlanDocument],
    status_code=status.HTTP_200_OK,
)
def build_manual_meal_plan_document(body: ManualMealPlanRequest):
    """
    Shape parsed (and possibly edited) meals into a single-day plan document.

    The document is returned for the caller to store; blank planName or an
    empty meal list yields 400.
    """
    document = PlanDocumentService.build_document(
        body.plan_name, body.meals, fitness_goal=body.fitness_goal
    )
    return APIResponse[MealPlanDocument](
        success=True,
        message="Meal plan document built.",
        data=document,
    )
