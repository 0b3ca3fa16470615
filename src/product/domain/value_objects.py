"""Value Objects for the product context."""

from decimal import Decimal
from typing import Iterable, Optional, Tuple

import attrs

from src.product.domain.product_entity import Product
from src.product.domain.stock_status import StockStatus, StockStatusFilter, classify_stock
from src.shared.domain.validators import to_money


@attrs.define(frozen=True)
class ProductFilter:
    user_id: int
    search: Optional[str] = None
    stock_status: StockStatusFilter = StockStatusFilter.ALL
    supplier_id: Optional[int] = None

    @property
    def search_term(self) -> Optional[str]:
        term = (self.search or '').strip()
        return term or None


@attrs.define(frozen=True)
class ProductStats:
    total_products: int = 0
    total_units: int = 0
    total_value: Decimal = Decimal('0.00')
    low_stock_count: int = 0
    out_of_stock_count: int = 0

    @classmethod
    def from_inventory(cls, rows: Iterable[Tuple[Decimal, int]]) -> 'ProductStats':
        total_products = total_units = low_stock_count = out_of_stock_count = 0
        total_value = Decimal('0.00')
        for price, stock_quantity in rows:
            total_products += 1
            total_units += stock_quantity
            total_value += to_money(price) * stock_quantity
            status = classify_stock(stock_quantity)
            if status == StockStatus.LOW_STOCK:
                low_stock_count += 1
            elif status == StockStatus.OUT_OF_STOCK:
                out_of_stock_count += 1
        return cls(
            total_products=total_products,
            total_units=total_units,
            total_value=to_money(total_value),
            low_stock_count=low_stock_count,
            out_of_stock_count=out_of_stock_count,
        )


@attrs.define(frozen=True)
class SellResult:
    product: Product
    sold: int
    total_amount: Decimal
    transaction_id: int
