from typing import Any, AsyncGenerator, Dict

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from src.shared.config.core_setting import settings
from src.shared.logging.loguru_io import Logger


def engine_options(database_url: str) -> Dict[str, Any]:
    if database_url.startswith('sqlite'):
        # Concurrent writers wait on the file lock instead of failing immediately
        return {'connect_args': {'timeout': 30}}
    return {
        'pool_size': 20,
        'max_overflow': 20,
        'pool_timeout': 30,
        'pool_recycle': 3600,
        'pool_pre_ping': True,
    }


def build_engine(database_url: str) -> AsyncEngine:
    return create_async_engine(
        database_url,
        echo=False,
        future=True,
        **engine_options(database_url),
    )


engine = build_engine(settings.DATABASE_URL_ASYNC)

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    pass


def import_models() -> None:
    """Register every table on Base.metadata."""
    from src.product.infra.product_model import ProductModel  # noqa: F401
    from src.supplier.infra.supplier_model import SupplierModel  # noqa: F401
    from src.transaction.infra.transaction_model import TransactionModel  # noqa: F401
    from src.user.domain.user_model import User  # noqa: F401


async def create_db_and_tables(target: AsyncEngine = engine) -> None:
    import_models()
    async with target.begin() as conn:
        await conn.run_sync(Base.metadata.create_all, checkfirst=True)
    Logger.base.info('Database tables ensured')


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    async with async_session_maker() as session:
        yield session


def like_pattern(term: str) -> str:
    """Wrap a search term for ILIKE ... ESCAPE '\\' so % and _ match literally."""
    escaped = term.replace('\\', '\\\\').replace('%', '\\%').replace('_', '\\_')
    return f'%{escaped}%'
