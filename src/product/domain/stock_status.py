"""Stock status classification, shared by filtering, stats and low-stock alerts."""

from enum import Enum
from typing import Optional, Tuple

from src.shared.exception.exceptions import ValidationError


LOW_STOCK_THRESHOLD = 5


class StockStatus(str, Enum):
    IN_STOCK = 'in-stock'
    LOW_STOCK = 'low-stock'
    OUT_OF_STOCK = 'out-of-stock'


class StockStatusFilter(str, Enum):
    ALL = 'all'
    IN_STOCK = StockStatus.IN_STOCK.value
    LOW_STOCK = StockStatus.LOW_STOCK.value
    OUT_OF_STOCK = StockStatus.OUT_OF_STOCK.value


def stock_status_bounds(
    status: StockStatus, threshold: int = LOW_STOCK_THRESHOLD
) -> Tuple[int, Optional[int]]:
    """Quantity range [lower, upper) for a status; upper None means unbounded."""
    if status == StockStatus.OUT_OF_STOCK:
        return 0, 1
    if status == StockStatus.LOW_STOCK:
        return 1, threshold
    return threshold, None


def classify_stock(quantity: int, threshold: int = LOW_STOCK_THRESHOLD) -> StockStatus:
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValidationError('Stock quantity must be a whole number', field='stock_quantity')
    if quantity < 0:
        raise ValidationError('Stock quantity must be 0 or greater', field='stock_quantity')
    for status in (StockStatus.OUT_OF_STOCK, StockStatus.LOW_STOCK, StockStatus.IN_STOCK):
        lower, upper = stock_status_bounds(status, threshold)
        if quantity >= lower and (upper is None or quantity < upper):
            return status
    return StockStatus.IN_STOCK
