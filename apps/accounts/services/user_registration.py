"""User registration service."""

import logging

from django.db import transaction, IntegrityError
from django.contrib.auth import get_user_model

from ..models import UserRole
from .exceptions import DuplicateUsernameError

User = get_user_model()

logger = logging.getLogger(__name__)


def register_user(
    *,
    username: str,
    password: str,
    role: str = UserRole.USER
) -> User:
    """
    Register a new user.

    The username is checked before insert; the unique constraint on
    ``users.username`` catches registrations that race past the check.

    Args:
        username: Unique username
        password: Plain password (will be hashed)
        role: 'user' or 'admin'

    Returns:
        Created User instance

    Raises:
        DuplicateUsernameError: If the username already exists
    """
    if User.objects.filter(username=username).exists():
        raise DuplicateUsernameError("Username already exists")

    try:
        with transaction.atomic():
            user = User.objects.create_user(
                username=username,
                password=password,
                role=role,
            )
    except IntegrityError:
        raise DuplicateUsernameError("Username already exists")

    logger.info("Registered user %s (id=%s, role=%s)", user.username, user.id, user.role)
    return user
