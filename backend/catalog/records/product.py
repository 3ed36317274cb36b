"""In-memory product record: normalization, validation and the derived price label."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import TYPE_CHECKING, Any

from catalog.utils.product_validator import (
    PRODUCT_FIELDS,
    clean_text,
    coerce_bool,
    format_price,
    normalize_price,
    validate_fields,
)

if TYPE_CHECKING:
    from catalog.db.models.product import Product


@dataclass
class ProductRecord:
    """One product as supplied by a caller, before and after it is checked.

    A record starts out transient. ``validate()`` (or ``validate_and_normalize()``)
    flips ``validated`` on when every rule passes; assigning any stored field
    afterwards flips it back off.
    """

    name: Any = None
    description: Any = None
    price: Any = None
    category: Any = None
    in_stock: Any = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    validated: bool = field(default=False, init=False, compare=False, repr=False)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in PRODUCT_FIELDS:
            object.__setattr__(self, "validated", False)
        object.__setattr__(self, name, value)

    def normalize(self) -> ProductRecord:
        """Trim text, round the price to cents and default ``in_stock``."""
        self.name = clean_text(self.name)
        self.description = clean_text(self.description)
        self.price = normalize_price(self.price)
        self.in_stock = coerce_bool(self.in_stock)
        return self

    def validate(self) -> ProductRecord:
        """Check every field rule; raises ValidationError listing all violations."""
        validate_fields(self.stored_fields())
        object.__setattr__(self, "validated", True)
        return self

    def validate_and_normalize(self) -> ProductRecord:
        """Normalize first so the rounded price is the one that gets bound-checked."""
        return self.normalize().validate()

    def formatted_price(self) -> str | None:
        return format_price(self.price)

    def stored_fields(self) -> dict[str, Any]:
        return {name: getattr(self, name) for name in PRODUCT_FIELDS}

    def to_dict(self, include_derived: bool = False) -> dict[str, Any]:
        data = self.stored_fields()
        data["created_at"] = self.created_at
        data["updated_at"] = self.updated_at
        if include_derived:
            data["formatted_price"] = self.formatted_price()
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ProductRecord:
        """Build a record from ``to_dict`` output; derived and unknown keys are ignored."""
        known = {f.name for f in fields(cls) if f.init}
        return cls(**{key: value for key, value in data.items() if key in known})

    @classmethod
    def from_model(cls, product: Product) -> ProductRecord:
        return cls(
            name=product.name,
            description=product.description,
            price=product.price,
            category=product.category,
            in_stock=product.in_stock,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )
