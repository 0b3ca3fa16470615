import asyncio
from decimal import Decimal

from fastapi_users.password import PasswordHelper
import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import async_sessionmaker

from src.product.use_case.product_use_case import CreateProductUseCase, GetProductUseCase
from src.product.use_case.sell_product_use_case import SellProductUseCase
from src.shared.exception.exceptions import InsufficientStockError, OperationFailedError
from src.shared.service.unit_of_work import SqlAlchemyUnitOfWork
from src.transaction.infra.transaction_model import TransactionModel
from src.user.domain.user_model import User
from tests.shared.utils import new_test_engine
from tests.util_constant import DEFAULT_PASSWORD, TEST_OWNER_EMAIL


STOCK = 5
BUYERS = 12


@pytest.mark.integration
class TestConcurrentSell:
    async def test_parallel_sells_never_oversell(self):
        engine = new_test_engine()
        session_maker = async_sessionmaker(engine, expire_on_commit=False)

        try:
            async with session_maker() as session:
                user = User(
                    email=TEST_OWNER_EMAIL,
                    name='Owner',
                    hashed_password=PasswordHelper().hash(DEFAULT_PASSWORD),
                    is_active=True,
                    is_superuser=False,
                    is_verified=True,
                )
                session.add(user)
                await session.commit()
                user_id = user.id

            async with session_maker() as session:
                product = await CreateProductUseCase(SqlAlchemyUnitOfWork(session)).create(
                    user_id=user_id, name='Hot Item', price=Decimal('4.00'), stock_quantity=STOCK
                )

            async def buy():
                async with session_maker() as session:
                    return await SellProductUseCase(SqlAlchemyUnitOfWork(session)).sell(
                        product_id=product.id, user_id=user_id, quantity=1
                    )

            results = await asyncio.gather(*(buy() for _ in range(BUYERS)), return_exceptions=True)

            failures = [r for r in results if isinstance(r, Exception)]
            successes = [r for r in results if not isinstance(r, Exception)]
            assert all(isinstance(f, (InsufficientStockError, OperationFailedError)) for f in failures)
            assert 1 <= len(successes) <= STOCK

            async with session_maker() as session:
                current = await GetProductUseCase(SqlAlchemyUnitOfWork(session)).get_by_id(
                    product_id=product.id, user_id=user_id
                )
                recorded = await session.scalar(
                    select(func.count()).select_from(TransactionModel).where(
                        TransactionModel.product_id == product.id
                    )
                )

            assert current.stock_quantity == STOCK - len(successes)
            assert recorded == len(successes)
            assert len({s.transaction_id for s in successes}) == len(successes)
        finally:
            await engine.dispose()
