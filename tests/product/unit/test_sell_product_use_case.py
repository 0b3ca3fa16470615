"""
SellProductUseCase unit tests
"""

from decimal import Decimal

import attrs
import pytest
from sqlalchemy.exc import OperationalError

from src.product.domain.product_entity import Product
from src.product.use_case.sell_product_use_case import SellProductUseCase
from src.shared.exception.exceptions import (
    InsufficientStockError,
    NotFoundError,
    OperationFailedError,
    ValidationError,
)
from src.transaction.domain.transaction_entity import Transaction


@pytest.mark.unit
class TestSellProductUseCase:
    @pytest.fixture
    def use_case(self, mock_uow):
        return SellProductUseCase(mock_uow)

    @pytest.fixture
    def product_after_sale(self):
        product = Product.create(
            user_id=1, name='Blue Widget', price=Decimal('10.005'), stock_quantity=7
        )
        return attrs.evolve(product, id=11)

    @pytest.fixture
    def persist_transaction(self, mock_uow):
        async def _create(transaction: Transaction) -> Transaction:
            return attrs.evolve(transaction, id=99)

        mock_uow.transactions.create.side_effect = _create

    async def test_sell_records_transaction_and_commits(
        self, use_case, mock_uow, product_after_sale, persist_transaction
    ):
        # Arrange
        mock_uow.products.decrement_stock_atomically.return_value = product_after_sale

        # Act
        result = await use_case.sell(product_id=11, user_id=1, quantity=3)

        # Assert
        mock_uow.products.decrement_stock_atomically.assert_awaited_once_with(
            product_id=11, user_id=1, quantity=3
        )
        recorded: Transaction = mock_uow.transactions.create.await_args.args[0]
        assert recorded.product_id == 11
        assert recorded.product_name == 'Blue Widget'
        assert recorded.unit_price == Decimal('10.01')
        assert recorded.total_amount == Decimal('30.03')
        mock_uow.commit.assert_awaited_once()

        assert result.product is product_after_sale
        assert result.sold == 3
        assert result.total_amount == Decimal('30.03')
        assert result.transaction_id == 99

    @pytest.mark.parametrize('quantity', [0, -2, 1.5, True, '3', None])
    async def test_invalid_quantity_fails_before_any_io(self, use_case, mock_uow, quantity):
        with pytest.raises(ValidationError) as exc_info:
            await use_case.sell(product_id=11, user_id=1, quantity=quantity)

        assert exc_info.value.field == 'quantity'
        mock_uow.__aenter__.assert_not_awaited()
        mock_uow.products.decrement_stock_atomically.assert_not_awaited()

    async def test_insufficient_stock_records_nothing(self, use_case, mock_uow):
        mock_uow.products.decrement_stock_atomically.side_effect = InsufficientStockError(
            available=2, requested=5
        )

        with pytest.raises(InsufficientStockError) as exc_info:
            await use_case.sell(product_id=11, user_id=1, quantity=5)

        assert str(exc_info.value) == 'Insufficient stock. Available: 2, Requested: 5'
        mock_uow.transactions.create.assert_not_awaited()
        mock_uow.commit.assert_not_awaited()

    async def test_unknown_product_is_not_found(self, use_case, mock_uow):
        mock_uow.products.decrement_stock_atomically.side_effect = NotFoundError('Product', 404)

        with pytest.raises(NotFoundError) as exc_info:
            await use_case.sell(product_id=404, user_id=1, quantity=1)

        assert exc_info.value.message == "Product with ID '404' not found"
        mock_uow.transactions.create.assert_not_awaited()

    async def test_persistence_failure_becomes_operation_failed(
        self, use_case, mock_uow, product_after_sale
    ):
        mock_uow.products.decrement_stock_atomically.return_value = product_after_sale
        mock_uow.transactions.create.side_effect = OperationalError(
            'INSERT INTO transaction', {}, Exception('disk I/O error')
        )

        with pytest.raises(OperationFailedError) as exc_info:
            await use_case.sell(product_id=11, user_id=1, quantity=1)

        assert exc_info.value.status_code == 500
        assert exc_info.value.message == 'Failed to sell product'
        assert 'disk I/O error' not in exc_info.value.message
        mock_uow.commit.assert_not_awaited()
        mock_uow.__aexit__.assert_awaited_once()
