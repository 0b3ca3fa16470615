"""Supplier repository implementation."""

from typing import List, Optional

from sqlalchemy import delete as sql_delete, or_, select, update as sql_update
from sqlalchemy.ext.asyncio import AsyncSession

from src.shared.config.db_setting import like_pattern
from src.shared.domain.clock import ensure_utc
from src.shared.exception.exceptions import NotFoundError
from src.shared.logging.loguru_io import Logger
from src.supplier.domain.supplier_entity import Supplier
from src.supplier.domain.supplier_repo import SupplierRepo
from src.supplier.domain.value_objects import SupplierRef
from src.supplier.infra.supplier_model import SupplierModel


class SupplierRepoImpl(SupplierRepo):
    def __init__(self, session: AsyncSession):
        self.session = session

    @staticmethod
    def _to_entity(db_supplier: SupplierModel) -> Supplier:
        return Supplier(
            user_id=db_supplier.user_id,
            name=db_supplier.name,
            contact_person=db_supplier.contact_person,
            email=db_supplier.email,
            phone=db_supplier.phone,
            address=db_supplier.address,
            created_at=ensure_utc(db_supplier.created_at),  # type: ignore[arg-type]
            updated_at=ensure_utc(db_supplier.updated_at),  # type: ignore[arg-type]
            id=db_supplier.id,
        )

    @Logger.io
    async def create(self, supplier: Supplier) -> Supplier:
        db_supplier = SupplierModel(
            user_id=supplier.user_id,
            name=supplier.name,
            contact_person=supplier.contact_person,
            email=supplier.email,
            phone=supplier.phone,
            address=supplier.address,
            created_at=supplier.created_at,
            updated_at=supplier.updated_at,
        )
        self.session.add(db_supplier)
        await self.session.flush()
        await self.session.refresh(db_supplier)

        return SupplierRepoImpl._to_entity(db_supplier)

    @Logger.io
    async def get_by_id(self, *, supplier_id: int, user_id: int) -> Optional[Supplier]:
        result = await self.session.execute(
            select(SupplierModel)
            .where(SupplierModel.id == supplier_id, SupplierModel.user_id == user_id)
            .execution_options(populate_existing=True)
        )
        db_supplier = result.scalar_one_or_none()
        if not db_supplier:
            return None

        return SupplierRepoImpl._to_entity(db_supplier)

    @Logger.io
    async def update(self, supplier: Supplier) -> Optional[Supplier]:
        if supplier.id is None:
            raise NotFoundError('Supplier')

        stmt = (
            sql_update(SupplierModel)
            .where(SupplierModel.id == supplier.id, SupplierModel.user_id == supplier.user_id)
            .values(
                name=supplier.name,
                contact_person=supplier.contact_person,
                email=supplier.email,
                phone=supplier.phone,
                address=supplier.address,
                updated_at=supplier.updated_at,
            )
            .returning(SupplierModel.id)
        )

        result = await self.session.execute(stmt)
        if result.scalar_one_or_none() is None:
            return None

        return await self.get_by_id(supplier_id=supplier.id, user_id=supplier.user_id)

    @Logger.io
    async def delete(self, *, supplier_id: int, user_id: int) -> bool:
        stmt = (
            sql_delete(SupplierModel)
            .where(SupplierModel.id == supplier_id, SupplierModel.user_id == user_id)
            .returning(SupplierModel.id)
        )

        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    @Logger.io
    async def find_many(self, *, user_id: int, search: Optional[str] = None) -> List[Supplier]:
        stmt = select(SupplierModel).where(SupplierModel.user_id == user_id)

        term = (search or '').strip()
        if term:
            pattern = like_pattern(term)
            stmt = stmt.where(
                or_(
                    SupplierModel.name.ilike(pattern, escape='\\'),
                    SupplierModel.contact_person.ilike(pattern, escape='\\'),
                    SupplierModel.email.ilike(pattern, escape='\\'),
                )
            )

        stmt = stmt.order_by(SupplierModel.name.asc(), SupplierModel.id.asc())
        result = await self.session.execute(stmt)

        return [SupplierRepoImpl._to_entity(db_supplier) for db_supplier in result.scalars().all()]

    @Logger.io
    async def list_names(self, *, user_id: int) -> List[SupplierRef]:
        result = await self.session.execute(
            select(SupplierModel.id, SupplierModel.name)
            .where(SupplierModel.user_id == user_id)
            .order_by(SupplierModel.name.asc())
        )

        return [SupplierRef(id=supplier_id, name=name) for supplier_id, name in result.all()]
