import os
from pathlib import Path
import tempfile

from fastapi.testclient import TestClient
import pytest
from sqlalchemy import text


# Tests run against a throwaway SQLite file instead of PostgreSQL
_test_db_dir = Path(tempfile.mkdtemp(prefix='simplestock_test_'))
TEST_DATABASE_URL = f'sqlite+aiosqlite:///{_test_db_dir / "test.db"}'
os.environ['DATABASE_URL'] = TEST_DATABASE_URL
os.environ['DEBUG'] = 'true'

# Override LOG_DIR to use test log directory
test_log_dir = Path(__file__).parent / 'test_log'
test_log_dir.mkdir(exist_ok=True)
os.environ['LOG_DIR'] = str(test_log_dir)

from src.main import app  # noqa: E402
from src.shared.config.db_setting import Base, import_models  # noqa: E402
from tests.shared.utils import create_and_login_user, new_test_engine  # noqa: E402
from tests.util_constant import (  # noqa: E402
    ANOTHER_OWNER_EMAIL,
    ANOTHER_OWNER_NAME,
    TEST_OWNER_EMAIL,
    TEST_OWNER_NAME,
)


TABLES_IN_DELETE_ORDER = ['transaction', 'product', 'supplier', 'user']


async def setup_test_database():
    import_models()
    engine = new_test_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    await engine.dispose()


async def clean_all_tables():
    engine = new_test_engine()
    try:
        async with engine.begin() as conn:
            for table in TABLES_IN_DELETE_ORDER:
                await conn.execute(text(f'DELETE FROM "{table}"'))
    finally:
        await engine.dispose()


def pytest_sessionstart(session):
    import asyncio

    asyncio.run(setup_test_database())


@pytest.fixture(autouse=True)
async def clean_database():
    await clean_all_tables()
    yield


@pytest.fixture(scope='session')
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def clear_client_cookies(client):
    """Start every test logged out."""
    client.cookies.clear()
    yield
    client.cookies.clear()


@pytest.fixture
def owner(client):
    """Registered and logged-in store owner; the client carries its cookie."""
    return create_and_login_user(client, TEST_OWNER_EMAIL, TEST_OWNER_NAME)


@pytest.fixture
def login_as_another_owner(client):
    def _login():
        return create_and_login_user(client, ANOTHER_OWNER_EMAIL, ANOTHER_OWNER_NAME)

    return _login


# Common test fixtures for unit tests
@pytest.fixture
def mock_uow():
    """Mock unit of work for testing."""
    from unittest.mock import AsyncMock, Mock

    uow = Mock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=None)
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    uow.products = Mock()
    uow.products.get_by_id = AsyncMock()
    uow.products.create = AsyncMock()
    uow.products.update = AsyncMock()
    uow.products.delete = AsyncMock(return_value=True)
    uow.products.decrement_stock_atomically = AsyncMock()
    uow.products.clear_supplier = AsyncMock(return_value=0)
    uow.suppliers = Mock()
    uow.suppliers.get_by_id = AsyncMock()
    uow.suppliers.create = AsyncMock()
    uow.suppliers.delete = AsyncMock(return_value=True)
    uow.transactions = Mock()
    uow.transactions.create = AsyncMock()
    uow.transactions.find_many = AsyncMock(return_value=[])
    uow.transactions.detach_product = AsyncMock(return_value=0)
    return uow
