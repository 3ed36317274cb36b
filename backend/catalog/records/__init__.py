"""Product records and their field rules."""
from catalog.records.product import ProductRecord
from catalog.utils.product_validator import FieldViolation, ValidationError

__all__ = ["ProductRecord", "FieldViolation", "ValidationError"]
