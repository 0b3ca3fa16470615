"""Product entity."""

from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

import attrs

from src.product.domain.stock_status import StockStatus, classify_stock
from src.shared.domain.clock import utc_now
from src.shared.domain.validators import (
    NumericValidators,
    StringValidators,
    strip_text,
    to_money,
)


@attrs.define
class Product:
    user_id: int = attrs.field(validator=attrs.validators.instance_of(int))
    name: str = attrs.field(converter=strip_text, validator=StringValidators.validate_name)
    price: Decimal = attrs.field(converter=to_money, validator=NumericValidators.validate_price)
    stock_quantity: int = attrs.field(validator=NumericValidators.validate_non_negative_int)
    supplier_id: Optional[int] = attrs.field(
        default=None, validator=attrs.validators.optional(attrs.validators.instance_of(int))
    )
    supplier_name: Optional[str] = None
    created_at: datetime = attrs.field(factory=utc_now)
    updated_at: datetime = attrs.field(factory=utc_now)
    id: Optional[int] = None

    @property
    def stock_status(self) -> StockStatus:
        return classify_stock(self.stock_quantity)

    @property
    def stock_value(self) -> Decimal:
        return self.price * self.stock_quantity

    @classmethod
    def create(
        cls,
        *,
        user_id: int,
        name: str,
        price: Decimal,
        stock_quantity: int,
        supplier_id: Optional[int] = None,
    ) -> 'Product':
        now = utc_now()
        return cls(
            user_id=user_id,
            name=name,
            price=price,
            stock_quantity=stock_quantity,
            supplier_id=supplier_id,
            created_at=now,
            updated_at=now,
            id=None,
        )

    def apply_changes(self, **changes: Any) -> 'Product':
        """Evolve with the provided fields only; an explicit supplier_id=None detaches."""
        return attrs.evolve(self, updated_at=utc_now(), **changes)
