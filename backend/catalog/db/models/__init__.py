"""Database models package."""
from catalog.db.models.product import Product

__all__ = ["Product"]
