import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import Manager
from apps.clients.models import Client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def client_auth_client(api_client, db):
    """Return API client authenticated as a manager."""
    manager = Manager.objects.create_user(email='front-desk@example.com', password='TestPass123!')
    refresh = RefreshToken.for_user(manager)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def buyer(db):
    """Create and return a client."""
    return Client.objects.create(
        name='Hugo Leroy',
        email='hugo@example.com',
        address='12 rue des Jeux, Montpellier',
    )
