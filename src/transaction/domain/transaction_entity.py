"""Transaction entity: an immutable record of one sale."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

import attrs

from src.shared.domain.clock import utc_now
from src.shared.domain.validators import NumericValidators, StringValidators, to_money


@attrs.define(frozen=True)
class Transaction:
    user_id: int = attrs.field(validator=attrs.validators.instance_of(int))
    product_id: Optional[int] = attrs.field(
        validator=attrs.validators.optional(attrs.validators.instance_of(int))
    )
    product_name: str = attrs.field(validator=StringValidators.validate_required)
    quantity: int = attrs.field(validator=NumericValidators.validate_positive_int)
    unit_price: Decimal = attrs.field(
        converter=to_money, validator=NumericValidators.validate_non_negative_amount
    )
    total_amount: Decimal = attrs.field(
        converter=to_money, validator=NumericValidators.validate_non_negative_amount
    )
    created_at: datetime = attrs.field(factory=utc_now)
    id: Optional[int] = None

    @classmethod
    def record_sale(
        cls,
        *,
        user_id: int,
        product_id: int,
        product_name: str,
        unit_price: Decimal,
        quantity: int,
    ) -> 'Transaction':
        NumericValidators.validate_quantity(quantity)

        price = to_money(unit_price)
        return cls(
            user_id=user_id,
            product_id=product_id,
            product_name=product_name,
            quantity=quantity,
            unit_price=price,
            total_amount=to_money(price * quantity),
            created_at=utc_now(),
            id=None,
        )
