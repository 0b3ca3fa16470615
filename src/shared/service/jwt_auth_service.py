from fastapi_users import FastAPIUsers
from fastapi_users.authentication import (
    AuthenticationBackend,
    CookieTransport,
    JWTStrategy,
)

from src.shared.config.core_setting import settings
from src.user.domain.user_model import User
from src.user.use_case.manager import get_user_manager


COOKIE_NAME = 'fastapiusersauth'


class JWTAuthService:
    def __init__(self):
        lifetime_seconds = settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60
        self.cookie_transport = CookieTransport(
            cookie_name=COOKIE_NAME,
            cookie_max_age=lifetime_seconds,
            cookie_secure=not settings.DEBUG,
            cookie_httponly=True,
            cookie_samesite='lax',
        )
        self.jwt_strategy: JWTStrategy = JWTStrategy(
            secret=settings.SECRET_KEY.get_secret_value(),
            lifetime_seconds=lifetime_seconds,
            algorithm=settings.ALGORITHM,
        )
        self.auth_backend = AuthenticationBackend(
            name='cookie',
            transport=self.cookie_transport,
            get_strategy=self.get_strategy,
        )

    def get_strategy(self) -> JWTStrategy:
        return self.jwt_strategy


jwt_auth_service = JWTAuthService()

auth_backend = jwt_auth_service.auth_backend

fastapi_users = FastAPIUsers[User, int](
    get_user_manager,
    [auth_backend],
)

current_active_user = fastapi_users.current_user(active=True)
