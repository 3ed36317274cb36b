"""SQLAlchemy model for product records."""

from sqlalchemy import Boolean, CheckConstraint, Column, Integer, Numeric, String, func
from sqlalchemy.types import DateTime

from catalog.db.base import Base
from catalog.utils.product_validator import (
    CATEGORIES,
    DESCRIPTION_MAX_LENGTH,
    NAME_MAX_LENGTH,
    PRICE_MAX,
)


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True)
    name = Column(String(NAME_MAX_LENGTH), nullable=False)
    description = Column(String(DESCRIPTION_MAX_LENGTH), nullable=False)
    # Two places is the stored precision; rounding happens before insert.
    price = Column(Numeric(10, 2, asdecimal=True), nullable=False)
    category = Column(String(32), nullable=False, index=True)
    in_stock = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    __table_args__ = (
        CheckConstraint(
            f"price >= 0 AND price <= {PRICE_MAX}", name="ck_products_price_range"
        ),
        CheckConstraint(
            "category IN ({})".format(", ".join(f"'{c}'" for c in CATEGORIES)),
            name="ck_products_category",
        ),
    )

    def __repr__(self) -> str:
        return f"<Product id={self.id} name={self.name!r} price={self.price}>"
