"""Sales aggregation over a set of transactions."""

from collections import defaultdict
from decimal import Decimal
from typing import Dict, Iterable, List

import attrs

from src.shared.domain.clock import ensure_utc
from src.shared.domain.validators import to_money
from src.transaction.domain.period import DateRange
from src.transaction.domain.transaction_entity import Transaction


ZERO = Decimal('0.00')


@attrs.define(frozen=True)
class TransactionStats:
    total_revenue: Decimal = ZERO
    total_transactions: int = 0
    total_items_sold: int = 0
    average_order_value: Decimal = ZERO


@attrs.define(frozen=True)
class DailySales:
    date: str
    total_amount: Decimal
    transaction_count: int
    items_sold: int


@attrs.define(frozen=True)
class SalesReport:
    transactions: List[Transaction]
    stats: TransactionStats
    daily_sales: List[DailySales]
    period: DateRange


def day_key(transaction: Transaction) -> str:
    return ensure_utc(transaction.created_at).strftime('%Y-%m-%d')  # type: ignore[union-attr]


def summarize(transactions: Iterable[Transaction]) -> TransactionStats:
    total_revenue = ZERO
    count = items = 0
    for transaction in transactions:
        total_revenue += transaction.total_amount
        count += 1
        items += transaction.quantity

    if count == 0:
        return TransactionStats()

    return TransactionStats(
        total_revenue=total_revenue,
        total_transactions=count,
        total_items_sold=items,
        average_order_value=to_money(total_revenue / count),
    )


def daily_breakdown(transactions: Iterable[Transaction]) -> List[DailySales]:
    """One row per UTC day that has sales, newest day first."""
    amounts: Dict[str, Decimal] = defaultdict(lambda: ZERO)
    counts: Dict[str, int] = defaultdict(int)
    items: Dict[str, int] = defaultdict(int)

    for transaction in transactions:
        key = day_key(transaction)
        amounts[key] += transaction.total_amount
        counts[key] += 1
        items[key] += transaction.quantity

    return [
        DailySales(
            date=key,
            total_amount=amounts[key],
            transaction_count=counts[key],
            items_sold=items[key],
        )
        for key in sorted(amounts, reverse=True)
    ]


def build_report(transactions: List[Transaction], period: DateRange) -> SalesReport:
    """Every section is computed from the same rows, restricted to the period."""
    in_period = [t for t in transactions if period.contains(t.created_at)]
    return SalesReport(
        transactions=in_period,
        stats=summarize(in_period),
        daily_sales=daily_breakdown(in_period),
        period=period,
    )
