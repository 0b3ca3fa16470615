"""User routers."""

from fastapi import APIRouter, Depends, Response, status
from fastapi.security import OAuth2PasswordRequestForm

from src.shared.config.core_setting import settings
from src.shared.exception.exceptions import DomainError
from src.shared.logging.loguru_io import Logger
from src.shared.service.jwt_auth_service import COOKIE_NAME, auth_backend, current_active_user
from src.user.domain.user_model import User
from src.user.port.user_schema import UserCreate, UserPublic
from src.user.use_case.manager import get_user_manager


router = APIRouter()


@router.post('', response_model=UserPublic, status_code=status.HTTP_201_CREATED)
@Logger.io
async def register_user(
    user_create: UserCreate,
    user_manager=Depends(get_user_manager),
):
    user = await user_manager.create(user_create, safe=True, request=None)
    return UserPublic(id=user.id, email=user.email, name=user.name)


@router.post('/login', response_model=UserPublic)
@Logger.io
async def login(
    response: Response,
    credentials: OAuth2PasswordRequestForm = Depends(),
    user_manager=Depends(get_user_manager),
    strategy=Depends(auth_backend.get_strategy),
):
    user = await user_manager.authenticate(credentials)

    if user is None or not user.is_active:
        raise DomainError('LOGIN_BAD_CREDENTIALS')

    token = await strategy.write_token(user)
    response.set_cookie(
        key=COOKIE_NAME,
        value=token,
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        httponly=True,
        samesite='lax',
        secure=not settings.DEBUG,
    )
    await user_manager.on_after_login(user)

    return UserPublic(id=user.id, email=user.email, name=user.name)


@router.post('/logout', status_code=status.HTTP_204_NO_CONTENT)
async def logout(response: Response, current_user: User = Depends(current_active_user)):
    response.delete_cookie(key=COOKIE_NAME, httponly=True, samesite='lax')
    Logger.base.info(f'User {current_user.id} logged out')
    return None


@router.get('/me', response_model=UserPublic)
async def get_me(current_user: User = Depends(current_active_user)):
    return UserPublic(id=current_user.id, email=current_user.email, name=current_user.name)
