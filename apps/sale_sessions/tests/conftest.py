import pytest
from datetime import timedelta
from decimal import Decimal
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import Manager
from apps.sale_sessions.models import Session


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def session_auth_client(api_client, db):
    """Return API client authenticated as a manager."""
    manager = Manager.objects.create_user(email='organizer@example.com', password='TestPass123!')
    refresh = RefreshToken.for_user(manager)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def open_session(db):
    """A session open from yesterday to tomorrow with 10 % commission."""
    now = timezone.now()
    return Session.objects.create(
        name='Festival du Jeu',
        start_date=now - timedelta(days=1),
        end_date=now + timedelta(days=1),
        sale_commission=Decimal('0.1'),
    )


@pytest.fixture
def past_session(db):
    """A session that ended last week."""
    now = timezone.now()
    return Session.objects.create(
        name='Bourse de printemps',
        start_date=now - timedelta(days=10),
        end_date=now - timedelta(days=7),
        sale_commission=Decimal('0.15'),
    )


@pytest.fixture
def future_session(db):
    """A session starting next month."""
    now = timezone.now()
    return Session.objects.create(
        name='Bourse d\'automne',
        start_date=now + timedelta(days=30),
        end_date=now + timedelta(days=32),
        sale_commission=Decimal('0.05'),
    )
