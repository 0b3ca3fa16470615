"""Supplier use cases."""

from typing import List, Optional

from fastapi import Depends

from src.shared.exception.exceptions import NotFoundError
from src.shared.logging.loguru_io import Logger
from src.shared.service.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.supplier.domain.supplier_entity import Supplier
from src.supplier.domain.value_objects import SupplierRef


class CreateSupplierUseCase:
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
        contact_person: str,
        email: str,
        phone: str,
        address: Optional[str] = None,
    ) -> Supplier:
        supplier = Supplier.create(
            user_id=user_id,
            name=name,
            contact_person=contact_person,
            email=email,
            phone=phone,
            address=address,
        )

        async with self.uow:
            created_supplier = await self.uow.suppliers.create(supplier)
            await self.uow.commit()

        return created_supplier


class GetSupplierUseCase:
    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)):
        return cls(uow)

    @Logger.io
    async def get_by_id(self, *, supplier_id: int, user_id: int) -> Supplier:
        async with self.uow:
            supplier = await self.uow.suppliers.get_by_id(supplier_id=supplier_id, user_id=user_id)

        if not supplier:
            raise NotFoundError('Supplier', supplier_id)
        return supplier


class ListSuppliersUseCase:
    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)):
        return cls(uow)

    @Logger.io
    async def list_suppliers(self, *, user_id: int, search: Optional[str] = None) -> List[Supplier]:
        async with self.uow:
            suppliers = await self.uow.suppliers.find_many(user_id=user_id, search=search)
        return suppliers

    @Logger.io
    async def list_names(self, *, user_id: int) -> List[SupplierRef]:
        async with self.uow:
            names = await self.uow.suppliers.list_names(user_id=user_id)
        return names


class UpdateSupplierUseCase:
    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)):
        return cls(uow)

    @Logger.io
    async def update(
        self,
        *,
        supplier_id: int,
        user_id: int,
        name: Optional[str] = None,
        contact_person: Optional[str] = None,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        address: Optional[str] = None,
    ) -> Supplier:
        async with self.uow:
            supplier = await self.uow.suppliers.get_by_id(supplier_id=supplier_id, user_id=user_id)
            if not supplier:
                raise NotFoundError('Supplier', supplier_id)

            # Update only provided fields
            changed = supplier.apply_changes(
                name=name,
                contact_person=contact_person,
                email=email,
                phone=phone,
                address=address,
            )

            updated_supplier = await self.uow.suppliers.update(changed)
            if not updated_supplier:
                raise NotFoundError('Supplier', supplier_id)
            await self.uow.commit()

        return updated_supplier


class DeleteSupplierUseCase:
    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)):
        return cls(uow)

    @Logger.io
    async def delete(self, *, supplier_id: int, user_id: int) -> None:
        async with self.uow:
            supplier = await self.uow.suppliers.get_by_id(supplier_id=supplier_id, user_id=user_id)
            if not supplier:
                raise NotFoundError('Supplier', supplier_id)

            # Products keep existing without a supplier
            await self.uow.products.clear_supplier(supplier_id=supplier_id, user_id=user_id)
            await self.uow.suppliers.delete(supplier_id=supplier_id, user_id=user_id)
            await self.uow.commit()
