"""User manager for FastAPI Users integration."""
# https://fastapi-users.github.io/fastapi-users/latest/configuration/user-manager/

from typing import Optional, Union

from fastapi import Depends, Request
from fastapi_users import BaseUserManager, IntegerIDMixin, InvalidPasswordException

from src.shared.config.core_setting import settings
from src.shared.logging.loguru_io import Logger
from src.user.domain.user_model import User
from src.user.infra.get_user_db import get_user_db
from src.user.port.user_schema import UserCreate


MIN_PASSWORD_LENGTH = 8


class UserManager(IntegerIDMixin, BaseUserManager[User, int]):
    reset_password_token_secret = settings.RESET_PASSWORD_TOKEN_SECRET.get_secret_value()
    verification_token_secret = settings.VERIFICATION_TOKEN_SECRET.get_secret_value()

    async def validate_password(self, password: str, user: Union[UserCreate, User]) -> None:
        if len(password) < MIN_PASSWORD_LENGTH:
            raise InvalidPasswordException(
                reason=f'Password should be at least {MIN_PASSWORD_LENGTH} characters'
            )
        if user.email and user.email.lower() in password.lower():
            raise InvalidPasswordException(reason='Password should not contain e-mail')

    @Logger.io
    async def on_after_register(self, user: User, request: Optional[Request] = None):
        Logger.base.info(f'User {user.id} registered')

    async def on_after_login(self, user: User, request: Optional[Request] = None, response=None):
        Logger.base.info(f'User {user.id} logged in')


async def get_user_manager(user_db=Depends(get_user_db)):
    yield UserManager(user_db)
