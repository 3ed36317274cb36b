"""Validate product fields and normalize them before storage."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500
PRICE_MIN = Decimal("0")
PRICE_MAX = Decimal("1000000")
PRICE_QUANTUM = Decimal("0.01")
CURRENCY_SYMBOL = "$"
CATEGORIES = ("Electronics", "Clothing", "Home", "Books", "Other")

# Spellings accepted for in_stock besides real booleans; matched exactly.
_TRUE_VALUES = {"true", "1", "yes"}
_FALSE_VALUES = {"false", "0", "no"}


@dataclass(frozen=True)
class FieldViolation:
    field: str
    message: str


class ValidationError(ValueError):
    """Raised when a product record breaks one or more field rules."""

    def __init__(self, violations: list[FieldViolation]):
        self.violations = list(violations)
        super().__init__("; ".join(v.message for v in self.violations))

    @property
    def messages(self) -> list[str]:
        return [v.message for v in self.violations]

    def for_field(self, field: str) -> list[str]:
        return [v.message for v in self.violations if v.field == field]


def clean_text(value: Any) -> Any:
    """Trim strings; numbers are cast to text first, anything else passes through."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float, Decimal)):
        value = str(value)
    return value.strip() if isinstance(value, str) else value


def to_decimal(value: Any) -> Decimal | None:
    """Return a finite Decimal for numeric input, or None when it is not a number."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, int):
        number = Decimal(value)
    elif isinstance(value, float):
        # repr keeps 19.999 as 19.999 instead of its binary expansion
        number = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            number = Decimal(value.strip())
        except InvalidOperation:
            return None
    else:
        return None
    return number if number.is_finite() else None


def _round_price(number: Decimal) -> Decimal:
    try:
        rounded = number.quantize(PRICE_QUANTUM, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        # Too many digits to quantize; the bound check rejects it anyway.
        return number
    return rounded.copy_abs() if rounded.is_zero() else rounded


def normalize_price(value: Any) -> Any:
    """Round a price to two places, half-up. Non-numeric input is returned as is."""
    number = to_decimal(value)
    if number is None:
        return value
    return _round_price(number)


def format_price(value: Any) -> str | None:
    """Render a price as ``$`` plus exactly two decimals, e.g. ``$19.50``."""
    number = to_decimal(value)
    if number is None:
        return None
    rounded = _round_price(number)
    if rounded.as_tuple().exponent != PRICE_QUANTUM.as_tuple().exponent:
        return f"{CURRENCY_SYMBOL}{number:.2f}"
    return f"{CURRENCY_SYMBOL}{rounded:f}"


def coerce_bool(value: Any, default: bool = True) -> Any:
    """Cast boolean-like input; unrecognized values are returned unchanged."""
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        if value in _TRUE_VALUES:
            return True
        if value in _FALSE_VALUES:
            return False
    return value


def _present(value: Any) -> bool:
    value = clean_text(value)
    return isinstance(value, str) and value != ""


def _price_present(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip() != ""
    return value is not None


def _max_length(limit: int) -> Callable[[Any], bool]:
    def check(value: Any) -> bool:
        return len(clean_text(value)) <= limit

    return check


def _is_number(value: Any) -> bool:
    return to_decimal(value) is not None


def _price_at_least(bound: Decimal) -> Callable[[Any], bool]:
    return lambda value: to_decimal(value) >= bound


def _price_at_most(bound: Decimal) -> Callable[[Any], bool]:
    return lambda value: to_decimal(value) <= bound


def _in_cents(value: Any) -> bool:
    number = to_decimal(value)
    return _round_price(number) == number


def _valid_category(value: Any) -> bool:
    # Exact match only; categories are not trimmed or case-folded.
    return isinstance(value, str) and value in CATEGORIES


def _boolean_like(value: Any) -> bool:
    return isinstance(coerce_bool(value), bool)


Rule = tuple[str, Callable[[Any], bool], str]

# Evaluated top to bottom; a field stops at its first failing rule.
# Price rules see the raw value, so an unrounded price fails until normalize() runs.
PRODUCT_RULES: tuple[Rule, ...] = (
    ("name", _present, "Product name is required"),
    (
        "name",
        _max_length(NAME_MAX_LENGTH),
        f"Product name cannot exceed {NAME_MAX_LENGTH} characters",
    ),
    ("description", _present, "Product description is required"),
    (
        "description",
        _max_length(DESCRIPTION_MAX_LENGTH),
        f"Description cannot exceed {DESCRIPTION_MAX_LENGTH} characters",
    ),
    ("price", _price_present, "Product price is required"),
    ("price", _is_number, "Product price must be a number"),
    ("price", _price_at_least(PRICE_MIN), "Price must be a positive number"),
    ("price", _price_at_most(PRICE_MAX), "Price cannot exceed 1,000,000"),
    ("price", _in_cents, "Price cannot have more than 2 decimal places"),
    ("category", _present, "Product category is required"),
    ("category", _valid_category, "Please select a valid category"),
    ("in_stock", _boolean_like, "In-stock flag must be true or false"),
)

PRODUCT_FIELDS = ("name", "description", "price", "category", "in_stock")


def check_fields(values: Mapping[str, Any]) -> list[FieldViolation]:
    """Collect violations in rule order, at most one per field."""
    violations: list[FieldViolation] = []
    failed: set[str] = set()
    for field, check, message in PRODUCT_RULES:
        if field in failed:
            continue
        if not check(values.get(field)):
            failed.add(field)
            violations.append(FieldViolation(field, message))
    return violations


def validate_fields(values: Mapping[str, Any]) -> None:
    """Raise ValidationError carrying every violation found in ``values``."""
    violations = check_fields(values)
    if violations:
        raise ValidationError(violations)
