"""Product repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from src.product.domain.product_entity import Product
from src.product.domain.value_objects import ProductFilter, ProductStats
from src.supplier.domain.value_objects import SupplierRef


class ProductRepo(ABC):
    @abstractmethod
    async def create(self, product: Product) -> Product:
        pass

    @abstractmethod
    async def get_by_id(self, *, product_id: int, user_id: int) -> Optional[Product]:
        pass

    @abstractmethod
    async def update(self, product: Product) -> Optional[Product]:
        pass

    @abstractmethod
    async def delete(self, *, product_id: int, user_id: int) -> bool:
        pass

    @abstractmethod
    async def find_many(self, product_filter: ProductFilter) -> List[Product]:
        pass

    @abstractmethod
    async def get_stats(self, *, user_id: int) -> ProductStats:
        pass

    @abstractmethod
    async def get_low_stock(self, *, user_id: int, limit: int) -> List[Product]:
        pass

    @abstractmethod
    async def get_suppliers(self, *, user_id: int) -> List[SupplierRef]:
        pass

    @abstractmethod
    async def decrement_stock_atomically(
        self, *, product_id: int, user_id: int, quantity: int
    ) -> Product:
        """Decrement only if enough stock remains; raises NotFoundError or InsufficientStockError."""
        pass

    @abstractmethod
    async def clear_supplier(self, *, supplier_id: int, user_id: int) -> int:
        """Detach a deleted supplier from every product that references it."""
        pass
