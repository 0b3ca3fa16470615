"""Shared domain validation utilities."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Optional

from src.shared.exception.exceptions import ValidationError


CENT = Decimal('0.01')
MIN_PRICE = CENT
# Largest value a Numeric(12, 2) price column holds
MAX_PRICE = Decimal('9999999999.99')
# Largest value a 32-bit INTEGER column holds
MAX_QUANTITY = 2_147_483_647
NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100


def to_money(value: Any) -> Decimal:
    """Convert to a 2-place Decimal; floats go through str() so 0.1 stays 0.10."""
    if isinstance(value, bool):
        raise ValidationError('Amount must be a number', field='price')
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        raise ValidationError('Amount must be a number', field='price') from None
    if not amount.is_finite():
        raise ValidationError('Amount must be a finite number', field='price')
    try:
        return amount.quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise ValidationError('Amount is too large', field='price') from None


def strip_text(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


def strip_optional_text(value: Optional[str]) -> str:
    return value.strip() if isinstance(value, str) else ''


class StringValidators:
    """attrs validators for text fields."""

    @staticmethod
    def validate_length(
        value: Any, field_name: str, min_length: int = NAME_MIN_LENGTH, max_length: int = NAME_MAX_LENGTH
    ) -> None:
        label = field_name.replace('_', ' ').capitalize()
        if not isinstance(value, str):
            raise ValidationError(f'{label} must be a string', field=field_name)
        if len(value) < min_length:
            raise ValidationError(
                f'{label} must be at least {min_length} characters', field=field_name
            )
        if len(value) > max_length:
            raise ValidationError(
                f'{label} must not exceed {max_length} characters', field=field_name
            )

    @staticmethod
    def validate_name(_instance: Any, attribute: Any, value: str) -> None:
        StringValidators.validate_length(value, attribute.name)

    @staticmethod
    def validate_required(_instance: Any, attribute: Any, value: str) -> None:
        label = attribute.name.replace('_', ' ').capitalize()
        if not isinstance(value, str) or not value:
            raise ValidationError(f'{label} is required', field=attribute.name)


class NumericValidators:
    """attrs validators for quantities and prices."""

    @staticmethod
    def ensure_int(value: Any, field_name: str) -> None:
        label = field_name.replace('_', ' ').capitalize()
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(f'{label} must be a whole number', field=field_name)

    @staticmethod
    def validate_non_negative_int(_instance: Any, attribute: Any, value: int) -> None:
        NumericValidators.ensure_int(value, attribute.name)
        if value < 0:
            label = attribute.name.replace('_', ' ').capitalize()
            raise ValidationError(f'{label} must be 0 or greater', field=attribute.name)
        if value > MAX_QUANTITY:
            label = attribute.name.replace('_', ' ').capitalize()
            raise ValidationError(f'{label} must not exceed {MAX_QUANTITY}', field=attribute.name)

    @staticmethod
    def validate_positive_int(_instance: Any, attribute: Any, value: int) -> None:
        NumericValidators.validate_quantity(value, attribute.name)

    @staticmethod
    def validate_quantity(value: Any, field_name: str = 'quantity') -> None:
        NumericValidators.ensure_int(value, field_name)
        if value < 1:
            label = field_name.replace('_', ' ').capitalize()
            raise ValidationError(f'{label} must be at least 1', field=field_name)

    @staticmethod
    def validate_price(_instance: Any, attribute: Any, value: Decimal) -> None:
        if value < MIN_PRICE:
            raise ValidationError(f'Price must be at least ${MIN_PRICE}', field=attribute.name)
        if value > MAX_PRICE:
            raise ValidationError(f'Price must not exceed ${MAX_PRICE}', field=attribute.name)

    @staticmethod
    def validate_non_negative_amount(_instance: Any, attribute: Any, value: Decimal) -> None:
        if value < 0:
            label = attribute.name.replace('_', ' ').capitalize()
            raise ValidationError(f'{label} must be 0 or greater', field=attribute.name)
