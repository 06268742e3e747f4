import pytest
from rest_framework.test import APIClient
from apps.accounts.models import User, UserRole
from apps.accounts.tokens import issue_token


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a regular shop user."""
    return User.objects.create_user(
        username='testuser',
        password='password123',
    )


@pytest.fixture
def admin_user(db):
    """Create and return a user with the admin role."""
    return User.objects.create_user(
        username='admin',
        password='admin123',
        role=UserRole.ADMIN,
    )


@pytest.fixture
def inactive_user(db):
    """Create and return an inactive user."""
    return User.objects.create_user(
        username='inactive',
        password='password123',
        is_active=False,
    )


@pytest.fixture
def user_token(user):
    """Return a bearer token for the regular user."""
    return issue_token(user)


@pytest.fixture
def authenticated_client(api_client, user_token):
    """Return an API client authenticated as the regular user."""
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {user_token}')
    return api_client


@pytest.fixture
def admin_client(api_client, admin_user):
    """Return an API client authenticated as the admin."""
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {issue_token(admin_user)}')
    return api_client
