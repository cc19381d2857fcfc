import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import Manager
from apps.sellers.models import Seller


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def seller_manager(db):
    """Create and return a manager for seller tests."""
    return Manager.objects.create_user(
        email='seller-desk@example.com',
        password='TestPass123!',
    )


@pytest.fixture
def seller_auth_client(api_client, seller_manager):
    """Return API client authenticated as manager."""
    refresh = RefreshToken.for_user(seller_manager)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def seller(db):
    """Create and return a seller with an empty balance."""
    return Seller.objects.create(
        name='Jeanne Martin',
        email='jeanne@example.com',
        phone='0601020304',
    )


@pytest.fixture
def other_seller(db):
    """Create and return a seller who already has a balance."""
    return Seller.objects.create(
        name='Paul Bernard',
        email='paul@example.com',
        amount_owed=Decimal('42.50'),
    )
