"""Pydantic models describing Product payloads."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field, computed_field

from catalog.utils.product_validator import format_price


class ProductBase(BaseModel):
    name: str
    description: str
    price: Decimal = Field(..., description="Stored with two decimal places")
    category: str = Field(..., description="Electronics|Clothing|Home|Books|Other")
    in_stock: bool = True


class ProductRead(ProductBase):
    """Response shape for a stored product, including the display price."""

    id: int
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}

    @computed_field
    @property
    def formatted_price(self) -> str:
        return format_price(self.price)
