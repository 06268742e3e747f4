import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from apps.accounts.models import User, UserRole
from apps.accounts.tokens import issue_token
from apps.sweets.models import Sweet


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
def authenticated_client(api_client, user):
    """Return an API client authenticated as the regular user."""
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {issue_token(user)}')
    return api_client


@pytest.fixture
def admin_client(api_client, admin_user):
    """Return an API client authenticated as the admin."""
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {issue_token(admin_user)}')
    return api_client


@pytest.fixture
def chocolate_bar(db):
    """A chocolate sweet with plenty of stock."""
    return Sweet.objects.create(
        name='Chocolate Bar',
        category='Chocolate',
        price=Decimal('2.50'),
        quantity=100,
        description='Milk chocolate',
    )


@pytest.fixture
def gummy_bears(db):
    """A cheap gummy sweet."""
    return Sweet.objects.create(
        name='Gummy Bears',
        category='Gummy',
        price=Decimal('1.20'),
        quantity=50,
    )


@pytest.fixture
def dark_truffle(db):
    """An expensive chocolate sweet."""
    return Sweet.objects.create(
        name='Dark Chocolate Truffle',
        category='Chocolate',
        price=Decimal('8.00'),
        quantity=10,
        image_url='https://example.com/truffle.png',
    )


@pytest.fixture
def catalog(chocolate_bar, gummy_bears, dark_truffle):
    """All three sweets."""
    return [chocolate_bar, gummy_bears, dark_truffle]
