"""Product use cases."""

from decimal import Decimal
from typing import Any, List, Optional

from fastapi import Depends

from src.product.domain.product_entity import Product
from src.product.domain.stock_status import StockStatusFilter
from src.product.domain.value_objects import ProductFilter, ProductStats
from src.shared.exception.exceptions import NotFoundError, ValidationError
from src.shared.logging.loguru_io import Logger
from src.shared.service.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.supplier.domain.value_objects import SupplierRef


LOW_STOCK_LIMIT_DEFAULT = 5
LOW_STOCK_LIMIT_MAX = 100


async def ensure_supplier_owned(uow: AbstractUnitOfWork, supplier_id: Optional[int], user_id: int):
    if supplier_id is None:
        return
    supplier = await uow.suppliers.get_by_id(supplier_id=supplier_id, user_id=user_id)
    if not supplier:
        raise NotFoundError('Supplier', supplier_id)


class CreateProductUseCase:
    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)):
        return cls(uow)

    @Logger.io
    async def create(
        self,
        *,
        user_id: int,
        name: str,
        price: Decimal,
        stock_quantity: int = 0,
        supplier_id: Optional[int] = None,
    ) -> Product:
        product = Product.create(
            user_id=user_id,
            name=name,
            price=price,
            stock_quantity=stock_quantity,
            supplier_id=supplier_id,
        )

        async with self.uow:
            await ensure_supplier_owned(self.uow, supplier_id, user_id)
            created_product = await self.uow.products.create(product)
            await self.uow.commit()

        return created_product


class UpdateProductUseCase:
    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)):
        return cls(uow)

    @Logger.io
    async def update(self, *, product_id: int, user_id: int, **changes: Any) -> Product:
        async with self.uow:
            product = await self.uow.products.get_by_id(product_id=product_id, user_id=user_id)
            if not product:
                raise NotFoundError('Product', product_id)

            if 'supplier_id' in changes:
                await ensure_supplier_owned(self.uow, changes['supplier_id'], user_id)

            updated_product = await self.uow.products.update(product.apply_changes(**changes))
            if not updated_product:
                raise NotFoundError('Product', product_id)
            await self.uow.commit()

        return updated_product


class DeleteProductUseCase:
    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)):
        return cls(uow)

    @Logger.io
    async def delete(self, *, product_id: int, user_id: int) -> None:
        async with self.uow:
            product = await self.uow.products.get_by_id(product_id=product_id, user_id=user_id)
            if not product:
                raise NotFoundError('Product', product_id)

            # Past sales keep their product_name snapshot
            await self.uow.transactions.detach_product(product_id=product_id, user_id=user_id)
            await self.uow.products.delete(product_id=product_id, user_id=user_id)
            await self.uow.commit()


class GetProductUseCase:
    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)):
        return cls(uow)

    @Logger.io
    async def get_by_id(self, *, product_id: int, user_id: int) -> Product:
        async with self.uow:
            product = await self.uow.products.get_by_id(product_id=product_id, user_id=user_id)

        if not product:
            raise NotFoundError('Product', product_id)
        return product


class ListProductsUseCase:
    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)):
        return cls(uow)

    @Logger.io
    async def list_products(
        self,
        *,
        user_id: int,
        search: Optional[str] = None,
        stock_status: StockStatusFilter = StockStatusFilter.ALL,
        supplier_id: Optional[int] = None,
    ) -> List[Product]:
        product_filter = ProductFilter(
            user_id=user_id,
            search=search,
            stock_status=StockStatusFilter(stock_status),
            supplier_id=supplier_id,
        )
        async with self.uow:
            products = await self.uow.products.find_many(product_filter)
        return products

    @Logger.io
    async def low_stock(self, *, user_id: int, limit: int = LOW_STOCK_LIMIT_DEFAULT) -> List[Product]:
        if isinstance(limit, bool) or not 1 <= limit <= LOW_STOCK_LIMIT_MAX:
            raise ValidationError(
                f'Limit must be between 1 and {LOW_STOCK_LIMIT_MAX}', field='limit'
            )

        async with self.uow:
            products = await self.uow.products.get_low_stock(user_id=user_id, limit=limit)
        return products

    @Logger.io
    async def suppliers(self, *, user_id: int) -> List[SupplierRef]:
        async with self.uow:
            suppliers = await self.uow.products.get_suppliers(user_id=user_id)
        return suppliers


class ProductStatsUseCase:
    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)):
        return cls(uow)

    @Logger.io
    async def stats(self, *, user_id: int) -> ProductStats:
        async with self.uow:
            stats = await self.uow.products.get_stats(user_id=user_id)
        return stats
