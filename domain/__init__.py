"""
Domain layer - Business entities, schemas, mappers, and enums.
"""

from domain import enums, mappers, schemas

__all__ = ["enums", "mappers", "schemas"]
