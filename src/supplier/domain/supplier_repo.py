"""Supplier repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from src.supplier.domain.value_objects import SupplierRef
from src.supplier.domain.supplier_entity import Supplier


class SupplierRepo(ABC):
    @abstractmethod
    async def create(self, supplier: Supplier) -> Supplier:
        pass

    @abstractmethod
    async def get_by_id(self, *, supplier_id: int, user_id: int) -> Optional[Supplier]:
        pass

    @abstractmethod
    async def update(self, supplier: Supplier) -> Optional[Supplier]:
        pass

    @abstractmethod
    async def delete(self, *, supplier_id: int, user_id: int) -> bool:
        pass

    @abstractmethod
    async def find_many(self, *, user_id: int, search: Optional[str] = None) -> List[Supplier]:
        pass

    @abstractmethod
    async def list_names(self, *, user_id: int) -> List[SupplierRef]:
        pass
