"""Tests for the Product response payload."""

from decimal import Decimal

from catalog.api.schemas.product import ProductRead
from catalog.services.product_store import create_product


def test_read_model_includes_formatted_price(db, widget):
    product = create_product(db, widget)

    payload = ProductRead.model_validate(product)

    assert payload.id == product.id
    assert payload.price == Decimal("20.00")
    assert payload.in_stock is True
    assert payload.formatted_price == "$20.00"
    assert payload.model_dump()["formatted_price"] == "$20.00"


def test_json_round_trip_preserves_stored_fields(db, widget):
    payload = ProductRead.model_validate(create_product(db, widget))

    restored = ProductRead.model_validate_json(payload.model_dump_json())

    assert restored.model_dump(exclude={"formatted_price"}) == payload.model_dump(
        exclude={"formatted_price"}
    )
    assert restored.formatted_price == "$20.00"


def test_formatted_price_is_recomputed_not_read_back():
    payload = ProductRead.model_validate(
        {
            "id": 7,
            "name": "Novel",
            "description": "Paperback",
            "price": "9",
            "category": "Books",
            "formatted_price": "$0.00",
        }
    )

    assert payload.formatted_price == "$9.00"
    assert payload.in_stock is True
