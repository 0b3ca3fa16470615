"""Transaction repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from src.transaction.domain.transaction_entity import Transaction
from src.transaction.domain.value_objects import TransactionFilter


class TransactionRepo(ABC):
    @abstractmethod
    async def create(self, transaction: Transaction) -> Transaction:
        pass

    @abstractmethod
    async def get_by_id(self, *, transaction_id: int, user_id: int) -> Optional[Transaction]:
        pass

    @abstractmethod
    async def find_many(self, transaction_filter: TransactionFilter) -> List[Transaction]:
        pass

    @abstractmethod
    async def recent(self, *, user_id: int, limit: int) -> List[Transaction]:
        pass

    @abstractmethod
    async def detach_product(self, *, product_id: int, user_id: int) -> int:
        """Null out product_id on past sales of a deleted product; the name snapshot stays."""
        pass
