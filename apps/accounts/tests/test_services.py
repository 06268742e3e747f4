"""
Credential store service tests.

Tests cover:
- Registration and duplicate usernames
- Password hashing format and salting
- Authentication outcomes
"""

import pytest
from unittest.mock import patch
from django.db import IntegrityError

from apps.accounts.models import User, UserRole
from apps.accounts.services import (
    register_user,
    authenticate_user,
    get_user_by_id,
    get_user_by_username,
    DuplicateUsernameError,
    InvalidCredentialsError,
)


# =============================================================================
# Registration
# =============================================================================

@pytest.mark.django_db
class TestRegisterUser:
    """Tests for register_user()."""

    def test_register_defaults_to_user_role(self):
        user = register_user(username='alice', password='secret')

        assert user.id is not None
        assert user.role == UserRole.USER
        assert user.created_at is not None

    def test_register_admin(self):
        user = register_user(username='boss', password='secret', role=UserRole.ADMIN)

        assert user.is_admin

    def test_duplicate_username_rejected(self, user):
        with pytest.raises(DuplicateUsernameError):
            register_user(username=user.username, password='other')

        assert User.objects.filter(username=user.username).count() == 1

    def test_integrity_error_reported_as_duplicate(self):
        """A registration racing past the existence check still fails cleanly."""
        with patch.object(User.objects, 'create_user', side_effect=IntegrityError):
            with pytest.raises(DuplicateUsernameError):
                register_user(username='racer', password='secret')

    def test_password_is_hashed_with_scrypt(self):
        user = register_user(username='alice', password='secret')

        assert user.password != 'secret'
        assert user.password.startswith('scrypt$')
        assert user.check_password('secret')

    def test_same_password_gets_different_salt(self):
        first = register_user(username='alice', password='secret')
        second = register_user(username='bob', password='secret')

        assert first.password != second.password


# =============================================================================
# Authentication
# =============================================================================

@pytest.mark.django_db
class TestAuthenticateUser:
    """Tests for authenticate_user()."""

    def test_valid_credentials(self, user):
        authenticated = authenticate_user(username='testuser', password='password123')

        assert authenticated == user
        assert authenticated.last_login is not None

    def test_wrong_password(self, user):
        with pytest.raises(InvalidCredentialsError, match='Invalid credentials'):
            authenticate_user(username='testuser', password='wrong')

    def test_unknown_user(self, db):
        with pytest.raises(InvalidCredentialsError, match='Invalid credentials'):
            authenticate_user(username='nobody', password='password123')

    def test_inactive_user(self, inactive_user):
        with pytest.raises(InvalidCredentialsError):
            authenticate_user(username='inactive', password='password123')

    def test_password_is_case_sensitive(self, user):
        with pytest.raises(InvalidCredentialsError):
            authenticate_user(username='testuser', password='PASSWORD123')


# =============================================================================
# Lookups
# =============================================================================

@pytest.mark.django_db
class TestUserLookup:
    """Tests for get_user_by_id() and get_user_by_username()."""

    def test_lookup_by_id(self, user):
        assert get_user_by_id(user_id=user.id) == user

    def test_lookup_by_username(self, user):
        assert get_user_by_username(username='testuser') == user

    def test_missing_user_returns_none(self, db):
        assert get_user_by_id(user_id=999) is None
        assert get_user_by_username(username='nobody') is None
