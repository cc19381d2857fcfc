import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import Manager


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def manager(db):
    """Create and return a regular manager."""
    return Manager.objects.create_user(
        email='manager@example.com',
        password='TestPass123!',
        first_name='Marie',
        last_name='Dupont',
    )


@pytest.fixture
def admin_manager(db):
    """Create and return an admin manager."""
    return Manager.objects.create_user(
        email='admin@example.com',
        password='AdminPass123!',
        first_name='Alex',
        last_name='Admin',
        is_admin=True,
    )


@pytest.fixture
def inactive_manager(db):
    """Create and return a deactivated manager."""
    return Manager.objects.create_user(
        email='inactive@example.com',
        password='TestPass123!',
        is_active=False,
    )


@pytest.fixture
def authenticated_client(api_client, manager):
    """Return an API client authenticated as a regular manager."""
    refresh = RefreshToken.for_user(manager)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def admin_client(api_client, admin_manager):
    """Return an API client authenticated as an admin manager."""
    refresh = RefreshToken.for_user(admin_manager)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client
