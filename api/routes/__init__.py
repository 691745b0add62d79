"""API routes package"""

from . import health, meal_text

__all__ = ["health", "meal_text"]
