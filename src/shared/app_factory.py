"""
Shared FastAPI App Factory

Builds the application for both the server entrypoint and the test client.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.product.port.product_controller import router as product_router
from src.shared.config.core_setting import settings
from src.shared.constant.route_constant import (
    HEALTH,
    PRODUCT_BASE,
    SUPPLIER_BASE,
    TRANSACTION_BASE,
    USER_BASE,
)
from src.shared.exception.exception_handlers import register_exception_handlers
from src.shared.middleware.request_logging import RequestLoggingMiddleware
from src.supplier.port.supplier_controller import router as supplier_router
from src.transaction.port.transaction_controller import router as transaction_router
from src.user.port.user_controller import router as user_router


def create_app(
    *,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]],
    description: str = 'Inventory, suppliers and sales for small businesses',
) -> FastAPI:
    app = FastAPI(
        title=settings.PROJECT_NAME,
        description=description,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(RequestLoggingMiddleware)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    register_exception_handlers(app)

    app.include_router(user_router, prefix=USER_BASE, tags=['user'])
    app.include_router(product_router, prefix=PRODUCT_BASE, tags=['product'])
    app.include_router(supplier_router, prefix=SUPPLIER_BASE, tags=['supplier'])
    app.include_router(transaction_router, prefix=TRANSACTION_BASE, tags=['transaction'])

    _register_common_endpoints(app)

    return app


def _register_common_endpoints(app: FastAPI) -> None:
    @app.get(HEALTH)
    async def health_check() -> dict[str, str]:
        """Health check endpoint for container orchestration."""
        return {'status': 'healthy', 'service': settings.PROJECT_NAME}
