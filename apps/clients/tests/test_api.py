import pytest
from django.urls import reverse
from rest_framework import status


@pytest.mark.django_db
class TestClientApi:

    def test_list(self, api_client, buyer):
        response = api_client.get(reverse('clients:client-list'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 1

    def test_create(self, client_auth_client):
        response = client_auth_client.post(reverse('clients:client-list'), {
            'name': 'Ines', 'email': 'ines@example.com',
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['name'] == 'Ines'

    def test_create_anonymous_rejected(self, api_client, db):
        response = api_client.post(reverse('clients:client-list'), {
            'name': 'Ines', 'email': 'ines@example.com',
        }, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_patch(self, client_auth_client, buyer):
        url = reverse('clients:client-detail', kwargs={'pk': buyer.id})
        response = client_auth_client.patch(url, {'email': 'hugo.leroy@example.com'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['email'] == 'hugo.leroy@example.com'
        assert response.data['name'] == 'Hugo Leroy'

    def test_delete_missing(self, client_auth_client):
        url = reverse('clients:client-detail', kwargs={'pk': '00000000-0000-0000-0000-000000000000'})
        response = client_auth_client.delete(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
