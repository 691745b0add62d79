"""Services package - Meal text parsing pipeline and plan document assembly"""

from services.meal_text_parser import parse
from services.plan_document_service import PlanDocumentService

# Note: the pipeline stages (segmenter, extractor, categorizer, namer) are
# plain functions imported from their own modules

__all__ = [
    "parse",
    "PlanDocumentService",
]
