"""Product repository implementation."""

from typing import Any, List, Optional

from sqlalchemy import and_, delete as sql_delete, or_, select, update as sql_update
from sqlalchemy.ext.asyncio import AsyncSession

from src.product.domain.product_entity import Product
from src.product.domain.product_repo import ProductRepo
from src.product.domain.stock_status import (
    LOW_STOCK_THRESHOLD,
    StockStatus,
    StockStatusFilter,
    stock_status_bounds,
)
from src.product.domain.value_objects import ProductFilter, ProductStats
from src.product.infra.product_model import ProductModel
from src.shared.config.db_setting import like_pattern
from src.shared.domain.clock import ensure_utc, utc_now
from src.shared.domain.validators import MAX_QUANTITY
from src.shared.exception.exceptions import InsufficientStockError, NotFoundError
from src.shared.logging.loguru_io import Logger
from src.supplier.domain.value_objects import SupplierRef
from src.supplier.infra.supplier_model import SupplierModel


def stock_status_condition(status: StockStatus, column: Any = ProductModel.stock_quantity):
    lower, upper = stock_status_bounds(status)
    if upper is None:
        return column >= lower
    return and_(column >= lower, column < upper)


class ProductRepoImpl(ProductRepo):
    def __init__(self, session: AsyncSession):
        self.session = session

    @staticmethod
    def _to_entity(db_product: ProductModel, supplier_name: Optional[str] = None) -> Product:
        return Product(
            user_id=db_product.user_id,
            name=db_product.name,
            price=db_product.price,
            stock_quantity=db_product.stock_quantity,
            supplier_id=db_product.supplier_id,
            supplier_name=supplier_name,
            created_at=ensure_utc(db_product.created_at),  # type: ignore[arg-type]
            updated_at=ensure_utc(db_product.updated_at),  # type: ignore[arg-type]
            id=db_product.id,
        )

    @staticmethod
    def _select_with_supplier():
        return (
            select(ProductModel, SupplierModel.name)
            .outerjoin(
                SupplierModel,
                and_(
                    SupplierModel.id == ProductModel.supplier_id,
                    SupplierModel.user_id == ProductModel.user_id,
                ),
            )
            .execution_options(populate_existing=True)
        )

    @Logger.io
    async def create(self, product: Product) -> Product:
        db_product = ProductModel(
            user_id=product.user_id,
            name=product.name,
            price=product.price,
            stock_quantity=product.stock_quantity,
            supplier_id=product.supplier_id,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )
        self.session.add(db_product)
        await self.session.flush()

        created = await self.get_by_id(product_id=db_product.id, user_id=product.user_id)
        if created is None:
            raise NotFoundError('Product', db_product.id)
        return created

    @Logger.io
    async def get_by_id(self, *, product_id: int, user_id: int) -> Optional[Product]:
        result = await self.session.execute(
            self._select_with_supplier().where(
                ProductModel.id == product_id, ProductModel.user_id == user_id
            )
        )
        row = result.one_or_none()
        if row is None:
            return None

        db_product, supplier_name = row
        return ProductRepoImpl._to_entity(db_product, supplier_name)

    @Logger.io
    async def update(self, product: Product) -> Optional[Product]:
        stmt = (
            sql_update(ProductModel)
            .where(ProductModel.id == product.id, ProductModel.user_id == product.user_id)
            .values(
                name=product.name,
                price=product.price,
                stock_quantity=product.stock_quantity,
                supplier_id=product.supplier_id,
                updated_at=product.updated_at,
            )
            .returning(ProductModel.id)
        )

        result = await self.session.execute(stmt)
        updated_id = result.scalar_one_or_none()
        if updated_id is None:
            return None

        return await self.get_by_id(product_id=updated_id, user_id=product.user_id)

    @Logger.io
    async def delete(self, *, product_id: int, user_id: int) -> bool:
        stmt = (
            sql_delete(ProductModel)
            .where(ProductModel.id == product_id, ProductModel.user_id == user_id)
            .returning(ProductModel.id)
        )

        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    @Logger.io
    async def find_many(self, product_filter: ProductFilter) -> List[Product]:
        stmt = self._select_with_supplier().where(ProductModel.user_id == product_filter.user_id)

        if term := product_filter.search_term:
            pattern = like_pattern(term)
            stmt = stmt.where(
                or_(
                    ProductModel.name.ilike(pattern, escape='\\'),
                    SupplierModel.name.ilike(pattern, escape='\\'),
                )
            )

        if product_filter.stock_status != StockStatusFilter.ALL:
            stmt = stmt.where(
                stock_status_condition(StockStatus(product_filter.stock_status.value))
            )

        if product_filter.supplier_id is not None:
            stmt = stmt.where(ProductModel.supplier_id == product_filter.supplier_id)

        stmt = stmt.order_by(ProductModel.created_at.desc(), ProductModel.id.desc())
        result = await self.session.execute(stmt)

        return [ProductRepoImpl._to_entity(db_product, name) for db_product, name in result.all()]

    @Logger.io
    async def get_stats(self, *, user_id: int) -> ProductStats:
        result = await self.session.execute(
            select(ProductModel.price, ProductModel.stock_quantity).where(
                ProductModel.user_id == user_id
            )
        )
        return ProductStats.from_inventory(result.all())

    @Logger.io
    async def get_low_stock(self, *, user_id: int, limit: int) -> List[Product]:
        _, low_stock_upper = stock_status_bounds(StockStatus.LOW_STOCK, LOW_STOCK_THRESHOLD)
        stmt = (
            self._select_with_supplier()
            .where(ProductModel.user_id == user_id, ProductModel.stock_quantity < low_stock_upper)
            .order_by(ProductModel.stock_quantity.asc(), ProductModel.name.asc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)

        return [ProductRepoImpl._to_entity(db_product, name) for db_product, name in result.all()]

    @Logger.io
    async def get_suppliers(self, *, user_id: int) -> List[SupplierRef]:
        stmt = (
            select(SupplierModel.id, SupplierModel.name)
            .join(ProductModel, ProductModel.supplier_id == SupplierModel.id)
            .where(ProductModel.user_id == user_id, SupplierModel.user_id == user_id)
            .distinct()
            .order_by(SupplierModel.name.asc())
        )
        result = await self.session.execute(stmt)

        return [SupplierRef(id=supplier_id, name=name) for supplier_id, name in result.all()]

    @Logger.io
    async def clear_supplier(self, *, supplier_id: int, user_id: int) -> int:
        stmt = (
            sql_update(ProductModel)
            .where(ProductModel.supplier_id == supplier_id, ProductModel.user_id == user_id)
            .values(supplier_id=None, updated_at=utc_now())
            .returning(ProductModel.id)
        )
        result = await self.session.execute(stmt)
        return len(result.all())

    @Logger.io
    async def decrement_stock_atomically(
        self, *, product_id: int, user_id: int, quantity: int
    ) -> Product:
        if quantity > MAX_QUANTITY:
            # No stock column can hold this much; the driver would overflow binding it
            current = await self.get_by_id(product_id=product_id, user_id=user_id)
            if current is None:
                raise NotFoundError('Product', product_id)
            raise InsufficientStockError(available=current.stock_quantity, requested=quantity)

        # Single conditional UPDATE: concurrent sells can never drive stock below zero
        stmt = (
            sql_update(ProductModel)
            .where(
                ProductModel.id == product_id,
                ProductModel.user_id == user_id,
                ProductModel.stock_quantity >= quantity,
            )
            .values(
                stock_quantity=ProductModel.stock_quantity - quantity,
                updated_at=utc_now(),
            )
            .returning(ProductModel.id)
        )

        result = await self.session.execute(stmt)
        updated_id = result.scalar_one_or_none()

        current = await self.get_by_id(product_id=product_id, user_id=user_id)
        if current is None:
            raise NotFoundError('Product', product_id)
        if updated_id is None:
            raise InsufficientStockError(available=current.stock_quantity, requested=quantity)

        return current
