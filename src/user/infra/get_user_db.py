from typing import AsyncGenerator

from fastapi import Depends
from fastapi_users_db_sqlalchemy import SQLAlchemyUserDatabase
from sqlalchemy.ext.asyncio import AsyncSession

from src.shared.config.db_setting import get_async_session
from src.user.domain.user_model import User


async def get_user_db(
    session: AsyncSession = Depends(get_async_session),
) -> AsyncGenerator[SQLAlchemyUserDatabase, None]:
    """fastapi-users storage adapter over the request's session."""
    yield SQLAlchemyUserDatabase(session, User)
