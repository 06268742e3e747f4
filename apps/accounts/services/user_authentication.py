"""User authentication service."""

import logging

from django.db import transaction
from django.contrib.auth import get_user_model
from django.utils import timezone

from .exceptions import InvalidCredentialsError

User = get_user_model()

logger = logging.getLogger(__name__)


@transaction.atomic
def authenticate_user(*, username: str, password: str) -> User:
    """
    Authenticate user with username and password.

    Uses select_for_update() to prevent race conditions when updating last_login.

    Args:
        username: User's username
        password: User's password

    Returns:
        Authenticated User instance

    Raises:
        InvalidCredentialsError: If credentials are invalid
    """
    try:
        user = (
            User.objects
            .select_for_update()
            .get(username=username)
        )
    except User.DoesNotExist:
        # Run the hasher anyway so unknown usernames cost the same time
        User().set_password(password)
        logger.warning("Failed login for unknown user %s", username)
        raise InvalidCredentialsError("Invalid credentials")

    if not user.check_password(password) or not user.is_active:
        logger.warning("Failed login for user %s", username)
        raise InvalidCredentialsError("Invalid credentials")

    user.last_login = timezone.now()
    user.save(update_fields=['last_login'])

    return user
