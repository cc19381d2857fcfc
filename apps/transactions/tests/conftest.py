import pytest
from datetime import timedelta
from decimal import Decimal
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import Manager
from apps.clients.models import Client
from apps.games.models import GameDescription, DepositedGame
from apps.sale_sessions.models import Session
from apps.sellers.models import Seller


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def cashier(db):
    """Create and return the manager recording sales."""
    return Manager.objects.create_user(
        email='cashier@example.com',
        password='TestPass123!',
        first_name='Claire',
        last_name='Dupont',
    )


@pytest.fixture
def cashier_client(api_client, cashier):
    """Return API client authenticated as the cashier."""
    refresh = RefreshToken.for_user(cashier)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def open_session(db):
    """Session open from yesterday to tomorrow keeping 10 %."""
    now = timezone.now()
    return Session.objects.create(
        name='Festival du Jeu',
        start_date=now - timedelta(days=1),
        end_date=now + timedelta(days=1),
        sale_commission=Decimal('0.1'),
    )


@pytest.fixture
def past_session(db):
    now = timezone.now()
    return Session.objects.create(
        name='Bourse passee',
        start_date=now - timedelta(days=10),
        end_date=now - timedelta(days=7),
        sale_commission=Decimal('0.1'),
    )


@pytest.fixture
def seller(db):
    return Seller.objects.create(name='Jeanne Martin', email='jeanne@example.com')


@pytest.fixture
def buyer(db):
    return Client.objects.create(name='Marc Petit', email='marc@example.com')


@pytest.fixture
def catan(db):
    return GameDescription.objects.create(name='Catan', publisher='Kosmos')


@pytest.fixture
def listed_game(open_session, seller, catan):
    """Game priced 20 and for sale in the open session."""
    return DepositedGame.objects.create(
        session=open_session,
        seller=seller,
        game_description=catan,
        sale_price=Decimal('20.00'),
        for_sale=True,
    )


@pytest.fixture
def second_listed_game(open_session, seller, catan):
    return DepositedGame.objects.create(
        session=open_session,
        seller=seller,
        game_description=catan,
        sale_price=Decimal('15.00'),
        for_sale=True,
    )


@pytest.fixture
def unlisted_game(open_session, seller, catan):
    return DepositedGame.objects.create(
        session=open_session,
        seller=seller,
        game_description=catan,
        sale_price=Decimal('12.00'),
    )


@pytest.fixture
def sale_payload(listed_game, open_session, seller, buyer):
    """Request body selling ``listed_game`` to ``buyer``."""
    return {
        'label_id': str(listed_game.id),
        'session_id': str(open_session.id),
        'seller_id': str(seller.id),
        'client_id': str(buyer.id),
    }
