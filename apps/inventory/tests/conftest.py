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
def buyer(db):
    """Create and return a regular user who buys sweets."""
    return User.objects.create_user(
        username='buyer',
        password='password123',
    )


@pytest.fixture
def shop_admin(db):
    """Create and return an admin who restocks."""
    return User.objects.create_user(
        username='shopadmin',
        password='admin123',
        role=UserRole.ADMIN,
    )


@pytest.fixture
def buyer_client(api_client, buyer):
    """Return an API client authenticated as the buyer."""
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {issue_token(buyer)}')
    return api_client


@pytest.fixture
def admin_client(api_client, shop_admin):
    """Return an API client authenticated as the admin."""
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {issue_token(shop_admin)}')
    return api_client


@pytest.fixture
def sweet(db):
    """A 10.00 sweet with 5 in stock."""
    return Sweet.objects.create(
        name='Chocolate Bar',
        category='Chocolate',
        price=Decimal('10.00'),
        quantity=5,
    )


@pytest.fixture
def sold_out_sweet(db):
    """A sweet with no stock."""
    return Sweet.objects.create(
        name='Rare Fudge',
        category='Fudge',
        price=Decimal('4.99'),
        quantity=0,
    )
