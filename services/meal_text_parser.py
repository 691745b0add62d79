"""
Meal text parser - entry point for turning freeform meal plan text into meals.

Pipeline:
1. Segment the text into per-meal blocks
2. Classify each block's header and extract its ingredients
3. Categorize meals (explicit prefix, else positional default)
4. Name meals and assemble the ParseResult

Every stage is a pure function over the previous stage's output. All working
state is local to one parse() call.
"""

import logging

from domain.schemas.meal_text_schemas import ParseResult
from services.ingredient_extractor import classify
from services.meal_categorizer import categorize
from services.meal_namer import name_and_assemble
from services.meal_segmenter import segment

logger = logging.getLogger("mealtext.parser")


def parse(text: str) -> ParseResult:
    """
    Parse a trainer's meal plan text.

    Args:
        text: Freeform text, e.g. "Meal 1\\n-175g of Jasmine Rice\\n-4 eggs"

    Returns:
        ParseResult with meals in input order, count, mealsPerDay and days (1)

    Raises:
        EmptyInputError: if the text is empty or whitespace-only
    """
    blocks = segment(text)
    classified = [classify(block) for block in blocks]
    result = name_and_assemble(categorize(classified))

    logger.debug(
        "parsed %d meals with %d ingredients", result.count, result.total_ingredients
    )
    return result
