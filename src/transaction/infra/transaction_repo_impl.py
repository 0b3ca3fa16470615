"""Transaction repository implementation."""

from typing import List, Optional

from sqlalchemy import select, update as sql_update
from sqlalchemy.ext.asyncio import AsyncSession

from src.shared.config.db_setting import like_pattern
from src.shared.domain.clock import ensure_utc
from src.shared.logging.loguru_io import Logger
from src.transaction.domain.transaction_entity import Transaction
from src.transaction.domain.transaction_repo import TransactionRepo
from src.transaction.domain.value_objects import TransactionFilter
from src.transaction.infra.transaction_model import TransactionModel


class TransactionRepoImpl(TransactionRepo):
    def __init__(self, session: AsyncSession):
        self.session = session

    @staticmethod
    def _to_entity(db_transaction: TransactionModel) -> Transaction:
        return Transaction(
            user_id=db_transaction.user_id,
            product_id=db_transaction.product_id,
            product_name=db_transaction.product_name,
            quantity=db_transaction.quantity,
            unit_price=db_transaction.unit_price,
            total_amount=db_transaction.total_amount,
            created_at=ensure_utc(db_transaction.created_at),  # type: ignore[arg-type]
            id=db_transaction.id,
        )

    @Logger.io
    async def create(self, transaction: Transaction) -> Transaction:
        db_transaction = TransactionModel(
            user_id=transaction.user_id,
            product_id=transaction.product_id,
            product_name=transaction.product_name,
            quantity=transaction.quantity,
            unit_price=transaction.unit_price,
            total_amount=transaction.total_amount,
            created_at=transaction.created_at,
        )
        self.session.add(db_transaction)
        await self.session.flush()

        return TransactionRepoImpl._to_entity(db_transaction)

    @Logger.io
    async def get_by_id(self, *, transaction_id: int, user_id: int) -> Optional[Transaction]:
        result = await self.session.execute(
            select(TransactionModel).where(
                TransactionModel.id == transaction_id, TransactionModel.user_id == user_id
            )
        )
        db_transaction = result.scalar_one_or_none()
        if not db_transaction:
            return None

        return TransactionRepoImpl._to_entity(db_transaction)

    @Logger.io
    async def find_many(self, transaction_filter: TransactionFilter) -> List[Transaction]:
        stmt = select(TransactionModel).where(TransactionModel.user_id == transaction_filter.user_id)

        date_range = transaction_filter.date_range
        if date_range.start is not None:
            stmt = stmt.where(TransactionModel.created_at >= date_range.start)
        if date_range.end is not None:
            stmt = stmt.where(TransactionModel.created_at <= date_range.end)

        if term := transaction_filter.search_term:
            stmt = stmt.where(TransactionModel.product_name.ilike(like_pattern(term), escape='\\'))

        if transaction_filter.product_id is not None:
            stmt = stmt.where(TransactionModel.product_id == transaction_filter.product_id)

        stmt = stmt.order_by(TransactionModel.created_at.desc(), TransactionModel.id.desc())
        result = await self.session.execute(stmt)

        return [TransactionRepoImpl._to_entity(row) for row in result.scalars().all()]

    @Logger.io
    async def recent(self, *, user_id: int, limit: int) -> List[Transaction]:
        result = await self.session.execute(
            select(TransactionModel)
            .where(TransactionModel.user_id == user_id)
            .order_by(TransactionModel.created_at.desc(), TransactionModel.id.desc())
            .limit(limit)
        )

        return [TransactionRepoImpl._to_entity(row) for row in result.scalars().all()]

    @Logger.io
    async def detach_product(self, *, product_id: int, user_id: int) -> int:
        stmt = (
            sql_update(TransactionModel)
            .where(TransactionModel.product_id == product_id, TransactionModel.user_id == user_id)
            .values(product_id=None)
            .returning(TransactionModel.id)
        )
        result = await self.session.execute(stmt)
        return len(result.all())
