"""SimpleStock API entrypoint."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.shared.app_factory import create_app
from src.shared.config.db_setting import create_db_and_tables, engine
from src.shared.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    Logger.base.info('🚀 [SimpleStock] Starting up...')

    await create_db_and_tables()
    Logger.base.info('🗄️  [SimpleStock] Database ready')

    yield

    Logger.base.info('🛑 [SimpleStock] Shutting down...')
    await engine.dispose()
    Logger.base.info('👋 [SimpleStock] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
