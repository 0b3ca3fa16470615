from decimal import Decimal
from unittest.mock import Mock

import attrs
import pytest

from src.product.domain.product_entity import Product
from src.product.use_case.product_use_case import (
    CreateProductUseCase,
    DeleteProductUseCase,
    ListProductsUseCase,
    UpdateProductUseCase,
)
from src.shared.exception.exceptions import NotFoundError, ValidationError


@pytest.fixture
def stored_product():
    product = Product.create(user_id=1, name='Blue Widget', price=Decimal('5'), stock_quantity=3)
    return attrs.evolve(product, id=1, supplier_id=2)


@pytest.mark.unit
class TestCreateProductUseCase:
    async def test_rejects_supplier_of_another_user(self, mock_uow):
        mock_uow.suppliers.get_by_id.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            await CreateProductUseCase(mock_uow).create(
                user_id=1, name='Blue Widget', price=Decimal('5'), supplier_id=2
            )

        assert exc_info.value.message == "Supplier with ID '2' not found"
        mock_uow.suppliers.get_by_id.assert_awaited_once_with(supplier_id=2, user_id=1)
        mock_uow.products.create.assert_not_awaited()

    async def test_invalid_fields_never_reach_the_repository(self, mock_uow):
        with pytest.raises(ValidationError):
            await CreateProductUseCase(mock_uow).create(user_id=1, name='X', price=Decimal('5'))

        mock_uow.products.create.assert_not_awaited()

    async def test_creates_without_supplier(self, mock_uow, stored_product):
        mock_uow.products.create.return_value = stored_product

        created = await CreateProductUseCase(mock_uow).create(
            user_id=1, name='Blue Widget', price=Decimal('5'), stock_quantity=3
        )

        assert created is stored_product
        mock_uow.suppliers.get_by_id.assert_not_awaited()
        mock_uow.commit.assert_awaited_once()


@pytest.mark.unit
class TestUpdateProductUseCase:
    async def test_missing_product_is_not_found(self, mock_uow):
        mock_uow.products.get_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await UpdateProductUseCase(mock_uow).update(product_id=5, user_id=1, name='New name')

        mock_uow.products.update.assert_not_awaited()

    async def test_explicit_null_supplier_detaches_without_lookup(self, mock_uow, stored_product):
        mock_uow.products.get_by_id.return_value = stored_product
        mock_uow.products.update.side_effect = lambda product: product

        updated = await UpdateProductUseCase(mock_uow).update(
            product_id=1, user_id=1, supplier_id=None
        )

        assert updated.supplier_id is None
        mock_uow.suppliers.get_by_id.assert_not_awaited()


@pytest.mark.unit
class TestDeleteProductUseCase:
    async def test_detaches_sales_before_deleting(self, mock_uow, stored_product):
        calls = Mock()
        mock_uow.products.get_by_id.return_value = stored_product
        mock_uow.transactions.detach_product.side_effect = lambda **kw: calls.detach(**kw)
        mock_uow.products.delete.side_effect = lambda **kw: calls.delete(**kw)

        await DeleteProductUseCase(mock_uow).delete(product_id=1, user_id=1)

        assert [c[0] for c in calls.mock_calls] == ['detach', 'delete']
        mock_uow.commit.assert_awaited_once()


@pytest.mark.unit
class TestListProductsUseCase:
    @pytest.mark.parametrize('limit', [0, 101, True])
    async def test_low_stock_limit_is_bounded(self, mock_uow, limit):
        with pytest.raises(ValidationError):
            await ListProductsUseCase(mock_uow).low_stock(user_id=1, limit=limit)
