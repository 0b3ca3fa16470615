from datetime import datetime
from typing import List, Optional

from pydantic import ConfigDict

from src.shared.port.schema_types import CamelModel, Money
from src.transaction.domain.period import DateRange
from src.transaction.domain.sales_report import DailySales, TransactionStats
from src.transaction.domain.transaction_entity import Transaction


class TransactionResponse(CamelModel):
    id: int
    product_id: Optional[int] = None
    product_name: str
    quantity: int
    unit_price: Money
    total_amount: Money
    created_at: datetime

    @classmethod
    def from_entity(cls, transaction: Transaction) -> 'TransactionResponse':
        if transaction.id is None:
            raise ValueError('Transaction ID should not be None after persistence.')

        return cls(
            id=transaction.id,
            product_id=transaction.product_id,
            product_name=transaction.product_name,
            quantity=transaction.quantity,
            unit_price=transaction.unit_price,
            total_amount=transaction.total_amount,
            created_at=transaction.created_at,
        )

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'id': 42,
                'productId': 1,
                'productName': 'Blue Widget',
                'quantity': 3,
                'unitPrice': 19.99,
                'totalAmount': 59.97,
                'createdAt': '2024-03-04T10:15:00Z',
            }
        }
    )


class TransactionListResponse(CamelModel):
    transactions: List[TransactionResponse]


class TransactionStatsResponse(CamelModel):
    total_revenue: Money
    total_transactions: int
    total_items_sold: int
    average_order_value: Money

    @classmethod
    def from_stats(cls, stats: TransactionStats) -> 'TransactionStatsResponse':
        return cls(
            total_revenue=stats.total_revenue,
            total_transactions=stats.total_transactions,
            total_items_sold=stats.total_items_sold,
            average_order_value=stats.average_order_value,
        )


class DailySalesResponse(CamelModel):
    date: str
    total_amount: Money
    transaction_count: int
    items_sold: int

    @classmethod
    def from_daily(cls, daily: DailySales) -> 'DailySalesResponse':
        return cls(
            date=daily.date,
            total_amount=daily.total_amount,
            transaction_count=daily.transaction_count,
            items_sold=daily.items_sold,
        )


class PeriodResponse(CamelModel):
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None

    @classmethod
    def from_range(cls, date_range: DateRange) -> 'PeriodResponse':
        return cls(start_date=date_range.start, end_date=date_range.end)


class DailySalesListResponse(CamelModel):
    daily_sales: List[DailySalesResponse]
    period: PeriodResponse


class SalesReportResponse(CamelModel):
    transactions: List[TransactionResponse]
    stats: TransactionStatsResponse
    daily_sales: List[DailySalesResponse]
    period: PeriodResponse
