#!/usr/bin/env python3
"""
Database Reset Script
Drop and recreate every SimpleStock table

Notes:
- This script only resets the schema, it does not seed data
- To seed demo data, run `python script/seed_data.py`
"""

import asyncio

from sqlalchemy import inspect

from src.shared.config.core_setting import settings
from src.shared.config.db_setting import Base, engine, import_models


def _table_names(sync_conn) -> list[str]:
    return inspect(sync_conn).get_table_names()


async def drop_and_recreate_tables() -> None:
    import_models()
    print(f'Database: {settings.DATABASE_URL_ASYNC.split("@")[-1]}')

    async with engine.begin() as conn:
        print('🗑️ Dropping tables...')
        await conn.run_sync(Base.metadata.drop_all)

        print('🏗️ Creating tables...')
        await conn.run_sync(Base.metadata.create_all)

        tables = await conn.run_sync(_table_names)
        print(f'   📊 Tables: {", ".join(sorted(tables))}')


async def main():
    print('🔄 Starting database reset...')
    print('=' * 50)

    try:
        await drop_and_recreate_tables()
        print('=' * 50)
        print('✅ Database reset completed!')
        print('💡 To seed demo data, run: python script/seed_data.py')
    except Exception as e:
        print(f'❌ Reset failed: {e}')
        raise
    finally:
        await engine.dispose()


if __name__ == '__main__':
    asyncio.run(main())
