"""Transaction query and reporting use cases."""

from typing import List, Optional

from fastapi import Depends

from src.shared.exception.exceptions import NotFoundError, ValidationError
from src.shared.logging.loguru_io import Logger
from src.shared.service.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.transaction.domain.period import DateRange
from src.transaction.domain.sales_report import (
    DailySales,
    SalesReport,
    TransactionStats,
    build_report,
    daily_breakdown,
    summarize,
)
from src.transaction.domain.transaction_entity import Transaction
from src.transaction.domain.value_objects import TransactionFilter


RECENT_LIMIT_DEFAULT = 10
RECENT_LIMIT_MAX = 100


class ListTransactionsUseCase:
    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)):
        return cls(uow)

    @Logger.io
    async def list_transactions(self, transaction_filter: TransactionFilter) -> List[Transaction]:
        async with self.uow:
            transactions = await self.uow.transactions.find_many(transaction_filter)
        return transactions

    @Logger.io
    async def recent(self, *, user_id: int, limit: int = RECENT_LIMIT_DEFAULT) -> List[Transaction]:
        if isinstance(limit, bool) or not 1 <= limit <= RECENT_LIMIT_MAX:
            raise ValidationError(
                f'Limit must be between 1 and {RECENT_LIMIT_MAX}', field='limit'
            )

        async with self.uow:
            transactions = await self.uow.transactions.recent(user_id=user_id, limit=limit)
        return transactions


class GetTransactionUseCase:
    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)):
        return cls(uow)

    @Logger.io
    async def get_by_id(self, *, transaction_id: int, user_id: int) -> Transaction:
        async with self.uow:
            transaction = await self.uow.transactions.get_by_id(
                transaction_id=transaction_id, user_id=user_id
            )

        if not transaction:
            raise NotFoundError('Transaction', transaction_id)
        return transaction


class SalesReportUseCase:
    """Statistics and daily breakdown, always computed over one filtered set."""

    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)):
        return cls(uow)

    async def _load(self, transaction_filter: TransactionFilter) -> List[Transaction]:
        async with self.uow:
            transactions = await self.uow.transactions.find_many(transaction_filter)
        return transactions

    @Logger.io
    async def stats(self, *, user_id: int, date_range: DateRange) -> TransactionStats:
        transactions = await self._load(TransactionFilter(user_id=user_id, date_range=date_range))
        return summarize(transactions)

    @Logger.io
    async def daily_sales(self, *, user_id: int, date_range: DateRange) -> List[DailySales]:
        transactions = await self._load(TransactionFilter(user_id=user_id, date_range=date_range))
        return daily_breakdown(transactions)

    @Logger.io
    async def report(
        self, *, user_id: int, date_range: DateRange, search: Optional[str] = None
    ) -> SalesReport:
        transactions = await self._load(
            TransactionFilter(user_id=user_id, date_range=date_range, search=search)
        )
        return build_report(transactions, date_range)
