"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    DuplicateUsernameError,
    InvalidCredentialsError,
)
from .user_registration import register_user
from .user_authentication import authenticate_user
from .user_lookup import get_user_by_id, get_user_by_username

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'DuplicateUsernameError',
    'InvalidCredentialsError',
    # Services
    'register_user',
    'authenticate_user',
    'get_user_by_id',
    'get_user_by_username',
]
