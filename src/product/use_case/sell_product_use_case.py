"""Sell product use case."""

from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError

from src.product.domain.value_objects import SellResult
from src.shared.domain.validators import NumericValidators
from src.shared.exception.exceptions import OperationFailedError
from src.shared.logging.loguru_io import Logger
from src.shared.service.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.transaction.domain.transaction_entity import Transaction


class SellProductUseCase:
    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)):
        return cls(uow)

    @Logger.io
    async def sell(self, *, product_id: int, user_id: int, quantity: int) -> SellResult:
        NumericValidators.validate_quantity(quantity)

        try:
            async with self.uow:
                # Stock decrement and sale record commit together or not at all
                product = await self.uow.products.decrement_stock_atomically(
                    product_id=product_id, user_id=user_id, quantity=quantity
                )
                transaction = Transaction.record_sale(
                    user_id=user_id,
                    product_id=product_id,
                    product_name=product.name,
                    unit_price=product.price,
                    quantity=quantity,
                )
                recorded = await self.uow.transactions.create(transaction)
                await self.uow.commit()
        except SQLAlchemyError as e:
            Logger.base.error(f'Sell of product {product_id} failed: {e}')
            raise OperationFailedError('sell product', reason=str(e)) from e

        if recorded.id is None:
            raise OperationFailedError('sell product', reason='transaction id missing after insert')

        return SellResult(
            product=product,
            sold=quantity,
            total_amount=recorded.total_amount,
            transaction_id=recorded.id,
        )
