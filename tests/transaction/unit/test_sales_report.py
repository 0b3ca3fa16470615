from datetime import datetime, timedelta, timezone
from decimal import Decimal

import attrs
import pytest

from src.transaction.domain.period import DateRange
from src.transaction.domain.sales_report import (
    TransactionStats,
    build_report,
    daily_breakdown,
    summarize,
)
from src.transaction.domain.transaction_entity import Transaction


UTC = timezone.utc


def make_sale(price: str, quantity: int, at: datetime, name: str = 'Blue Widget') -> Transaction:
    transaction = Transaction.record_sale(
        user_id=1, product_id=1, product_name=name, unit_price=Decimal(price), quantity=quantity
    )
    return attrs.evolve(transaction, created_at=at)


@pytest.mark.unit
class TestSummarize:
    def test_empty_set_has_zero_average(self):
        stats = summarize([])

        assert stats == TransactionStats()
        assert stats.average_order_value == Decimal('0.00')

    def test_totals_and_average(self):
        at = datetime(2024, 3, 13, 12, tzinfo=UTC)
        sales = [make_sale('10.00', 1, at), make_sale('10.00', 1, at), make_sale('5.00', 2, at)]

        stats = summarize(sales)

        assert stats.total_revenue == Decimal('30.00')
        assert stats.total_transactions == 3
        assert stats.total_items_sold == 4
        assert stats.average_order_value == Decimal('10.00')

    def test_average_is_rounded_half_up(self):
        at = datetime(2024, 3, 13, tzinfo=UTC)
        sales = [make_sale('0.01', 1, at), make_sale('0.02', 1, at)]

        assert summarize(sales).average_order_value == Decimal('0.02')


@pytest.mark.unit
class TestDailyBreakdown:
    def test_groups_by_utc_day_newest_first(self):
        day = datetime(2024, 3, 12, tzinfo=UTC)
        sales = [
            make_sale('1.00', 1, day + timedelta(hours=1)),
            make_sale('2.00', 3, day + timedelta(hours=23, minutes=59)),
            make_sale('4.00', 1, day + timedelta(days=1)),
        ]

        breakdown = daily_breakdown(sales)

        assert [d.date for d in breakdown] == ['2024-03-13', '2024-03-12']
        assert breakdown[1].total_amount == Decimal('7.00')
        assert breakdown[1].transaction_count == 2
        assert breakdown[1].items_sold == 4

    def test_same_day_sales_form_one_entry(self):
        day = datetime(2024, 3, 12, 9, tzinfo=UTC)
        sales = [
            make_sale('10.00', 1, day),
            make_sale('20.00', 1, day + timedelta(hours=2)),
            make_sale('5.00', 1, day + timedelta(hours=5)),
        ]

        breakdown = daily_breakdown(sales)

        assert len(breakdown) == 1
        assert breakdown[0].date == '2024-03-12'
        assert breakdown[0].total_amount == Decimal('35.00')
        assert breakdown[0].transaction_count == 3

    def test_non_utc_timestamps_group_by_their_utc_day(self):
        plus_two = timezone(timedelta(hours=2))
        sale = make_sale('1.00', 1, datetime(2024, 3, 13, 1, 0, tzinfo=plus_two))

        assert daily_breakdown([sale])[0].date == '2024-03-12'

    def test_days_without_sales_are_omitted(self):
        sales = [
            make_sale('1.00', 1, datetime(2024, 3, 1, tzinfo=UTC)),
            make_sale('1.00', 1, datetime(2024, 3, 5, tzinfo=UTC)),
        ]
        assert len(daily_breakdown(sales)) == 2


@pytest.mark.unit
class TestBuildReport:
    def test_daily_totals_sum_to_revenue(self):
        start = datetime(2024, 3, 1, tzinfo=UTC)
        sales = [make_sale('3.33', i % 4 + 1, start + timedelta(hours=7 * i)) for i in range(20)]

        report = build_report(sales, DateRange())

        assert sum(d.total_amount for d in report.daily_sales) == report.stats.total_revenue
        assert sum(d.transaction_count for d in report.daily_sales) == len(sales)
        assert report.transactions == sales

    def test_rows_outside_the_period_are_left_out(self):
        period = DateRange(
            start=datetime(2024, 3, 10, tzinfo=UTC),
            end=datetime(2024, 3, 16, 23, 59, 59, tzinfo=UTC),
        )
        inside = make_sale('2.00', 1, datetime(2024, 3, 12, tzinfo=UTC))
        sales = [
            make_sale('9.00', 1, datetime(2024, 3, 9, 23, 59, tzinfo=UTC)),
            inside,
            make_sale('9.00', 1, datetime(2024, 3, 17, tzinfo=UTC)),
        ]

        report = build_report(sales, period)

        assert report.transactions == [inside]
        assert report.stats.total_revenue == Decimal('2.00')
        assert [d.date for d in report.daily_sales] == ['2024-03-12']
