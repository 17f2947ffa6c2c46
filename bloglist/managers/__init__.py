from bloglist.managers.password_manager import PasswordHasher
from bloglist.managers.token_manager import USER_ID_CLAIM, TokenManager

__all__ = ["USER_ID_CLAIM", "PasswordHasher", "TokenManager"]
