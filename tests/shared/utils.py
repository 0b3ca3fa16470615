from typing import Any, Dict, Optional

from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from src.shared.config.core_setting import settings
from src.shared.config.db_setting import engine_options
from tests.route_constant import (
    PRODUCT_BASE,
    PRODUCT_SELL,
    SUPPLIER_BASE,
    USER_CREATE,
    USER_LOGIN,
)
from tests.util_constant import DEFAULT_PASSWORD, TEST_SUPPLIER


def new_test_engine() -> AsyncEngine:
    """A private engine on the test database, for code running outside the app's event loop."""
    url = settings.DATABASE_URL_ASYNC
    return create_async_engine(url, **engine_options(url))


def assert_response_status(response, expected_status: int, message: str | None = None):
    assert response.status_code == expected_status, (
        message or f'Expected {expected_status}, got {response.status_code}: {response.text}'
    )


def create_user(
    client: TestClient, email: str, password: str = DEFAULT_PASSWORD, name: str = 'Test User'
) -> Dict[str, Any] | None:
    response = client.post(USER_CREATE, json={'email': email, 'password': password, 'name': name})
    if response.status_code == 201:
        return response.json()
    elif response.status_code == 400:  # User already exists
        return None
    else:
        assert_response_status(response, 201, 'Failed to create user')
        return None


def login_user(client: TestClient, email: str, password: str = DEFAULT_PASSWORD) -> Any:
    """Helper function to login a user and set cookies."""
    login_response = client.post(
        USER_LOGIN,
        data={'username': email, 'password': password},
        headers={'Content-Type': 'application/x-www-form-urlencoded'},
    )
    assert login_response.status_code == 200, f'Login failed: {login_response.text}'
    if 'fastapiusersauth' in login_response.cookies:
        client.cookies.set('fastapiusersauth', login_response.cookies['fastapiusersauth'])
    return login_response


def create_and_login_user(client: TestClient, email: str, name: str = 'Test User') -> Dict[str, Any]:
    create_user(client, email, DEFAULT_PASSWORD, name)
    client.cookies.clear()
    return login_user(client, email).json()


def create_supplier(client: TestClient, **overrides: Any) -> Dict[str, Any]:
    response = client.post(SUPPLIER_BASE, json={**TEST_SUPPLIER, **overrides})
    assert_response_status(response, 201, 'Failed to create supplier')
    return response.json()


def create_product(
    client: TestClient,
    name: str = 'Blue Widget',
    price: float = 10.0,
    stock_quantity: int = 10,
    supplier_id: Optional[int] = None,
) -> Dict[str, Any]:
    payload: Dict[str, Any] = {'name': name, 'price': price, 'stockQuantity': stock_quantity}
    if supplier_id is not None:
        payload['supplierId'] = supplier_id
    response = client.post(PRODUCT_BASE, json=payload)
    assert_response_status(response, 201, 'Failed to create product')
    return response.json()


def sell_product(client: TestClient, product_id: int, quantity: Any):
    return client.post(PRODUCT_SELL.format(product_id=product_id), json={'quantity': quantity})
