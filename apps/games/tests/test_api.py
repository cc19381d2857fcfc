import pytest
from django.urls import reverse
from rest_framework import status
from apps.games.models import DepositedGame


@pytest.mark.django_db
class TestGameDescriptionApi:

    def test_list_is_public(self, api_client, catan):
        response = api_client.get(reverse('games:game-description-list'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 1

    def test_create_requires_auth(self, api_client):
        response = api_client.post(reverse('games:game-description-list'), {'name': 'Azul'}, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_create(self, games_auth_client):
        response = games_auth_client.post(reverse('games:game-description-list'), {
            'name': 'Azul',
            'publisher': 'Plan B',
            'min_players': 2,
            'max_players': 4,
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['name'] == 'Azul'

    def test_delete_in_use(self, games_auth_client, deposited_game, catan):
        url = reverse('games:game-description-detail', kwargs={'pk': catan.id})
        response = games_auth_client.delete(url)

        assert response.status_code == status.HTTP_409_CONFLICT


@pytest.mark.django_db
class TestDepositedGameApi:

    def test_create(self, games_auth_client, open_session, seller, catan):
        response = games_auth_client.post(reverse('games:deposited-game-list'), {
            'session_id': str(open_session.id),
            'seller_id': str(seller.id),
            'game_description_id': str(catan.id),
            'sale_price': '20.00',
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['for_sale'] is False
        assert response.data['game_description']['name'] == 'Catan'
        assert response.data['seller']['email'] == 'jeanne@example.com'

    def test_create_closed_session(self, games_auth_client, closed_session, seller, catan):
        response = games_auth_client.post(reverse('games:deposited-game-list'), {
            'session_id': str(closed_session.id),
            'seller_id': str(seller.id),
            'game_description_id': str(catan.id),
            'sale_price': '20.00',
        }, format='json')

        assert response.status_code == status.HTTP_409_CONFLICT
        assert 'error' in response.data

    def test_create_unknown_seller(self, games_auth_client, open_session, catan):
        response = games_auth_client.post(reverse('games:deposited-game-list'), {
            'session_id': str(open_session.id),
            'seller_id': '00000000-0000-0000-0000-000000000000',
            'game_description_id': str(catan.id),
            'sale_price': '20.00',
        }, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_create_in_open_session(self, games_auth_client, open_session, seller, catan):
        response = games_auth_client.post(reverse('games:deposited-game-open-session'), {
            'seller_id': str(seller.id),
            'game_description_id': str(catan.id),
            'sale_price': '15.00',
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['session']['id'] == str(open_session.id)

    def test_create_in_open_session_none_open(self, games_auth_client, closed_session, seller, catan):
        response = games_auth_client.post(reverse('games:deposited-game-open-session'), {
            'seller_id': str(seller.id),
            'game_description_id': str(catan.id),
            'sale_price': '15.00',
        }, format='json')

        assert response.status_code == status.HTTP_409_CONFLICT

    def test_by_seller(self, api_client, deposited_game, seller):
        url = reverse('games:deposited-game-by-seller', kwargs={'seller_id': seller.id})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 1

    def test_by_session_empty(self, api_client, closed_session):
        url = reverse('games:deposited-game-by-session', kwargs={'session_id': closed_session.id})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_by_seller_and_session(self, api_client, deposited_game, seller, open_session):
        url = reverse('games:deposited-game-by-seller-and-session', kwargs={
            'seller_id': seller.id,
            'session_id': open_session.id,
        })
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data[0]['id'] == str(deposited_game.id)

    def test_for_sale_then_pick_up(self, games_auth_client, deposited_game):
        url = reverse('games:deposited-game-for-sale', kwargs={'pk': deposited_game.id})
        response = games_auth_client.post(url)
        assert response.status_code == status.HTTP_200_OK
        assert response.data['for_sale'] is True

        url = reverse('games:deposited-game-picked-up', kwargs={'pk': deposited_game.id})
        response = games_auth_client.post(url)
        assert response.status_code == status.HTTP_200_OK
        assert response.data['picked_up'] is True
        assert response.data['for_sale'] is False

    def test_for_sale_after_pick_up(self, games_auth_client, deposited_game):
        DepositedGame.objects.filter(id=deposited_game.id).update(picked_up=True)

        url = reverse('games:deposited-game-for-sale', kwargs={'pk': deposited_game.id})
        response = games_auth_client.post(url)

        assert response.status_code == status.HTTP_409_CONFLICT

    def test_remove_from_sale(self, games_auth_client, listed_game):
        url = reverse('games:deposited-game-remove-from-sale', kwargs={'pk': listed_game.id})
        response = games_auth_client.post(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['for_sale'] is False

    def test_lifecycle_requires_auth(self, api_client, deposited_game):
        url = reverse('games:deposited-game-for-sale', kwargs={'pk': deposited_game.id})
        response = api_client.post(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_patch_keeps_other_fields(self, games_auth_client, listed_game):
        url = reverse('games:deposited-game-detail', kwargs={'pk': listed_game.id})
        response = games_auth_client.patch(url, {'sale_price': '30.00'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['sale_price'] == '30.00'
        assert response.data['for_sale'] is True
        assert response.data['game_description']['name'] == 'Catan'

    def test_patch_sold_game_conflicts(self, games_auth_client, listed_game):
        DepositedGame.objects.filter(id=listed_game.id).update(for_sale=False, sold=True)

        url = reverse('games:deposited-game-detail', kwargs={'pk': listed_game.id})
        response = games_auth_client.patch(url, {'sale_price': '500.00'}, format='json')

        assert response.status_code == status.HTTP_409_CONFLICT
        listed_game.refresh_from_db()
        assert str(listed_game.sale_price) == '35.00'

    def test_delete(self, games_auth_client, deposited_game):
        url = reverse('games:deposited-game-detail', kwargs={'pk': deposited_game.id})
        response = games_auth_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not DepositedGame.objects.filter(id=deposited_game.id).exists()
