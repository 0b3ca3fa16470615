import attrs


@attrs.define(frozen=True)
class CurrentUserInfo:
    """Owner identity handed to use cases - keeps the User model out of other contexts"""

    user_id: int
    email: str
