"""
Domain layer - Meal text value objects, schemas, and enums.
"""

from domain import enums, schemas

__all__ = ["enums", "schemas"]
