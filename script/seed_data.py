#!/usr/bin/env python3
"""
Database Seed Script
Populate demo data into the database

Features:
1. Create User - one store owner account
2. Create Suppliers and Products - a small catalogue spread across stock levels
3. Record Sales - run the sell use case so stock and transactions stay consistent
"""

import asyncio
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from fastapi_users.password import PasswordHelper
from sqlalchemy import select

from src.product.use_case.product_use_case import CreateProductUseCase
from src.product.use_case.sell_product_use_case import SellProductUseCase
from src.shared.config.db_setting import async_session_maker, create_db_and_tables, engine
from src.shared.service.unit_of_work import SqlAlchemyUnitOfWork
from src.supplier.use_case.supplier_use_case import CreateSupplierUseCase
from src.user.domain.user_model import User


DEFAULT_EMAIL = 'owner@simplestock.com'
DEFAULT_PASSWORD = 'P@ssw0rd'


@dataclass
class ProductConfig:
    name: str
    price: Decimal
    stock_quantity: int
    supplier: Optional[str] = None
    sales: tuple[int, ...] = ()


SUPPLIERS = [
    {
        'name': 'Acme Supply',
        'contact_person': 'Jane Doe',
        'email': 'jane@acme.com',
        'phone': '+1 555 0100',
    },
    {
        'name': 'Globex Parts',
        'contact_person': 'Hank Scorpio',
        'email': 'hank@globex.com',
        'phone': '+1 555 0101',
    },
]

PRODUCTS = [
    ProductConfig('Blue Widget', Decimal('19.99'), 40, 'Acme Supply', sales=(3, 2)),
    ProductConfig('Red Widget', Decimal('21.50'), 6, 'Acme Supply', sales=(2,)),
    ProductConfig('Steel Bolt', Decimal('0.35'), 500, 'Globex Parts', sales=(100, 50)),
    ProductConfig('Gear Assembly', Decimal('149.00'), 1, 'Globex Parts', sales=(1,)),
    ProductConfig('Gift Card', Decimal('25.00'), 10),
]


async def create_owner() -> int:
    print('👤 Creating store owner...')
    async with async_session_maker() as session:
        existing = await session.execute(select(User).where(User.email == DEFAULT_EMAIL))
        user = existing.scalar_one_or_none()
        if user:
            print(f'   ⏭️  Already exists: ID={user.id}')
            return user.id

        user = User(
            email=DEFAULT_EMAIL,
            name='Store Owner',
            hashed_password=PasswordHelper().hash(DEFAULT_PASSWORD),
            is_active=True,
            is_superuser=False,
            is_verified=True,
        )
        session.add(user)
        await session.commit()
        print(f'   ✅ Created owner: ID={user.id}, Email={user.email}')
        return user.id


async def create_catalogue(user_id: int) -> None:
    print('🏭 Creating suppliers...')
    supplier_ids: dict[str, int] = {}
    for config in SUPPLIERS:
        async with async_session_maker() as session:
            use_case = CreateSupplierUseCase(SqlAlchemyUnitOfWork(session))
            supplier = await use_case.create(user_id=user_id, **config)
        supplier_ids[supplier.name] = supplier.id  # type: ignore[assignment]
        print(f'   ✅ Supplier ID={supplier.id}, Name={supplier.name}')

    print('📦 Creating products and recording sales...')
    for config in PRODUCTS:
        async with async_session_maker() as session:
            product = await CreateProductUseCase(SqlAlchemyUnitOfWork(session)).create(
                user_id=user_id,
                name=config.name,
                price=config.price,
                stock_quantity=config.stock_quantity,
                supplier_id=supplier_ids[config.supplier] if config.supplier else None,
            )

        for quantity in config.sales:
            async with async_session_maker() as session:
                result = await SellProductUseCase(SqlAlchemyUnitOfWork(session)).sell(
                    product_id=product.id,  # type: ignore[arg-type]
                    user_id=user_id,
                    quantity=quantity,
                )
            product = result.product

        print(
            f'   ✅ Product ID={product.id}, Name={product.name}, '
            f'Stock={product.stock_quantity} ({product.stock_status.value})'
        )


async def main():
    print('🌱 Starting data seeding...')
    print('=' * 50)

    try:
        await create_db_and_tables()
        user_id = await create_owner()
        await create_catalogue(user_id)
        print('=' * 50)
        print('🌱 Data seeding completed!')
        print(f'📋 Login: {DEFAULT_EMAIL} / {DEFAULT_PASSWORD}')
    except Exception as e:
        print(f'❌ Seeding failed: {e}')
        raise
    finally:
        await engine.dispose()


if __name__ == '__main__':
    asyncio.run(main())
