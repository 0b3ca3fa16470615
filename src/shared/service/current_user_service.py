from fastapi import Depends

from src.shared.auth.current_user_info import CurrentUserInfo
from src.shared.exception.exceptions import AuthenticationError
from src.shared.service.jwt_auth_service import current_active_user
from src.user.domain.user_model import User


def get_current_user_info(current_user: User = Depends(current_active_user)) -> CurrentUserInfo:
    if current_user.id is None:
        raise AuthenticationError('User ID is missing')
    return CurrentUserInfo(user_id=current_user.id, email=current_user.email)
