"""Persist product records after they pass normalization and validation."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from catalog.db.models.product import Product
from catalog.records.product import ProductRecord
from catalog.utils.product_validator import PRODUCT_FIELDS, ValidationError

logger = logging.getLogger(__name__)


def _prepare(record: ProductRecord) -> None:
    try:
        record.validate_and_normalize()
    except ValidationError as e:
        logger.warning(f"Rejected product record: {e}")
        raise


def _commit(db: Session, product: Product, action: str) -> Product:
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Database error {action} product: {e}", exc_info=True)
        raise
    db.refresh(product)
    return product


def create_product(db: Session, record: ProductRecord) -> Product:
    """Insert a new product row; nothing is written if the record is invalid.

    ``created_at`` and ``updated_at`` are filled in by the database and copied
    back onto ``record``.
    """
    _prepare(record)

    product = Product(**record.stored_fields())
    db.add(product)
    _commit(db, product, "creating")
    record.created_at = product.created_at
    record.updated_at = product.updated_at

    logger.info(f"Created product {product.id} ({product.name!r})")
    return product


def update_product(db: Session, product_id: int, **changes: Any) -> Product:
    """Apply partial changes to a stored product and commit them.

    The merged record is normalized and validated again before anything is
    written, so an invalid change leaves the stored row untouched.
    """
    unknown = set(changes) - set(PRODUCT_FIELDS)
    if unknown:
        raise TypeError(f"Unknown product field(s): {', '.join(sorted(unknown))}")

    product = db.get(Product, product_id)
    if product is None:
        raise LookupError(f"Product {product_id} not found")

    record = ProductRecord.from_model(product)
    for name, value in changes.items():
        setattr(record, name, value)
    _prepare(record)

    for name, value in record.stored_fields().items():
        setattr(product, name, value)
    _commit(db, product, "updating")

    logger.info(f"Updated product {product_id}")
    return product


def get_product(db: Session, product_id: int) -> Product | None:
    return db.get(Product, product_id)
