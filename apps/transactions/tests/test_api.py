import pytest
from decimal import Decimal
from django.urls import reverse
from rest_framework import status
from apps.sellers.models import Seller
from apps.transactions.models import Transaction


@pytest.mark.django_db
class TestCreateTransactionApi:
    """Tests for POST /api/transactions/"""

    def test_requires_auth(self, api_client, sale_payload):
        response = api_client.post(reverse('transactions:transaction-list'), sale_payload, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_create(self, cashier_client, sale_payload, seller, cashier):
        response = cashier_client.post(reverse('transactions:transaction-list'), sale_payload, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['manager']['id'] == str(cashier.id)
        assert response.data['label']['game_name'] == 'Catan'
        seller.refresh_from_db()
        assert seller.amount_owed == Decimal('18.00')

    def test_second_sale_conflicts(self, cashier_client, sale_payload):
        url = reverse('transactions:transaction-list')
        cashier_client.post(url, sale_payload, format='json')

        response = cashier_client.post(url, sale_payload, format='json')

        assert response.status_code == status.HTTP_409_CONFLICT
        assert 'error' in response.data

    def test_closed_session_conflicts(self, cashier_client, sale_payload, past_session):
        sale_payload['session_id'] = str(past_session.id)

        response = cashier_client.post(reverse('transactions:transaction-list'), sale_payload, format='json')

        assert response.status_code == status.HTTP_409_CONFLICT

    def test_other_seller_conflicts(self, cashier_client, sale_payload, seller):
        other = Seller.objects.create(name='Luc Girard', email='luc@example.com')
        sale_payload['seller_id'] = str(other.id)

        response = cashier_client.post(reverse('transactions:transaction-list'), sale_payload, format='json')

        assert response.status_code == status.HTTP_409_CONFLICT
        other.refresh_from_db()
        assert other.amount_owed == Decimal('0.00')

    def test_unknown_client(self, cashier_client, sale_payload):
        sale_payload['client_id'] = '00000000-0000-0000-0000-000000000000'

        response = cashier_client.post(reverse('transactions:transaction-list'), sale_payload, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_missing_field(self, cashier_client, sale_payload):
        del sale_payload['label_id']

        response = cashier_client.post(reverse('transactions:transaction-list'), sale_payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'label_id' in response.data


@pytest.mark.django_db
class TestBulkApi:
    """Tests for POST /api/transactions/bulk/"""

    def test_bulk(self, cashier_client, sale_payload, second_listed_game):
        second = dict(sale_payload, label_id=str(second_listed_game.id))

        response = cashier_client.post(
            reverse('transactions:transaction-bulk'), [sale_payload, second], format='json'
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert len(response.data) == 2

    def test_bulk_rolls_back(self, cashier_client, sale_payload, unlisted_game):
        bad = dict(sale_payload, label_id=str(unlisted_game.id))

        response = cashier_client.post(
            reverse('transactions:transaction-bulk'), [sale_payload, bad], format='json'
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        assert Transaction.objects.count() == 0

    def test_bulk_empty(self, cashier_client):
        response = cashier_client.post(reverse('transactions:transaction-bulk'), [], format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestTransactionQueriesApi:

    @pytest.fixture
    def sale(self, cashier_client, sale_payload):
        response = cashier_client.post(reverse('transactions:transaction-list'), sale_payload, format='json')
        return Transaction.objects.get(id=response.data['id'])

    def test_list_requires_auth(self, api_client, db):
        response = api_client.get(reverse('transactions:transaction-list'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_list(self, cashier_client, sale):
        response = cashier_client.get(reverse('transactions:transaction-list'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 1

    def test_retrieve(self, cashier_client, sale):
        url = reverse('transactions:transaction-detail', kwargs={'pk': sale.id})
        response = cashier_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['client']['email'] == 'marc@example.com'

    def test_by_session(self, cashier_client, sale, open_session, past_session):
        url = reverse('transactions:transaction-by-session', kwargs={'session_id': open_session.id})
        assert len(cashier_client.get(url).data) == 1

        url = reverse('transactions:transaction-by-session', kwargs={'session_id': past_session.id})
        response = cashier_client.get(url)
        assert response.status_code == status.HTTP_200_OK
        assert response.data == []

    def test_by_client(self, cashier_client, sale, buyer):
        url = reverse('transactions:transaction-by-client', kwargs={'client_id': buyer.id})
        response = cashier_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 1

    def test_by_seller_empty(self, cashier_client, db):
        url = reverse('transactions:transaction-by-seller', kwargs={
            'seller_id': '00000000-0000-0000-0000-000000000000'
        })
        response = cashier_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_patch(self, cashier_client, sale, buyer):
        url = reverse('transactions:transaction-detail', kwargs={'pk': sale.id})
        response = cashier_client.patch(url, {'transaction_date': '2026-01-15T10:00:00Z'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['transaction_date'].startswith('2026-01-15T10:00:00')
        assert response.data['client']['id'] == str(buyer.id)

    def test_patch_seller_conflicts(self, cashier_client, sale, seller):
        other = Seller.objects.create(name='Luc Girard', email='luc@example.com')

        url = reverse('transactions:transaction-detail', kwargs={'pk': sale.id})
        response = cashier_client.patch(url, {'seller_id': str(other.id)}, format='json')

        assert response.status_code == status.HTTP_409_CONFLICT
        sale.refresh_from_db()
        assert sale.seller_id == seller.id

    def test_delete(self, cashier_client, sale):
        url = reverse('transactions:transaction-detail', kwargs={'pk': sale.id})
        response = cashier_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Transaction.objects.filter(id=sale.id).exists()
