import pytest
from datetime import timedelta
from decimal import Decimal
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import Manager
from apps.games.models import GameDescription, DepositedGame
from apps.sale_sessions.models import Session
from apps.sellers.models import Seller


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def games_auth_client(api_client, db):
    """Return API client authenticated as a manager."""
    manager = Manager.objects.create_user(email='depot@example.com', password='TestPass123!')
    refresh = RefreshToken.for_user(manager)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def open_session(db):
    now = timezone.now()
    return Session.objects.create(
        name='Festival du Jeu',
        start_date=now - timedelta(days=1),
        end_date=now + timedelta(days=1),
        sale_commission=Decimal('0.1'),
    )


@pytest.fixture
def closed_session(db):
    now = timezone.now()
    return Session.objects.create(
        name='Bourse passee',
        start_date=now - timedelta(days=10),
        end_date=now - timedelta(days=7),
    )


@pytest.fixture
def seller(db):
    return Seller.objects.create(name='Jeanne Martin', email='jeanne@example.com')


@pytest.fixture
def catan(db):
    """Create and return a catalog entry."""
    return GameDescription.objects.create(
        name='Catan',
        publisher='Kosmos',
        min_players=3,
        max_players=4,
        age_range='10+',
    )


@pytest.fixture
def deposited_game(open_session, seller, catan):
    """A deposited game that is not listed yet."""
    return DepositedGame.objects.create(
        session=open_session,
        seller=seller,
        game_description=catan,
        sale_price=Decimal('20.00'),
    )


@pytest.fixture
def listed_game(open_session, seller, catan):
    """A deposited game listed for sale."""
    return DepositedGame.objects.create(
        session=open_session,
        seller=seller,
        game_description=catan,
        sale_price=Decimal('35.00'),
        for_sale=True,
    )
