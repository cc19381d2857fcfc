import pytest
from django.urls import reverse
from rest_framework import status
from apps.accounts.models import Manager


# =============================================================================
# Login Tests
# =============================================================================

@pytest.mark.django_db
class TestLogin:
    """Tests for POST /api/auth/login/"""

    def test_login_success(self, api_client, manager):
        url = reverse('accounts:login')
        response = api_client.post(url, {
            'email': 'manager@example.com',
            'password': 'TestPass123!',
        }, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert 'token' in response.data
        assert response.data['is_admin'] is False

    def test_login_token_authenticates_requests(self, api_client, manager):
        response = api_client.post(reverse('accounts:login'), {
            'email': 'manager@example.com',
            'password': 'TestPass123!',
        }, format='json')
        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {response.data['token']}")

        me = api_client.get(reverse('accounts:me'))

        assert me.status_code == status.HTTP_200_OK
        assert me.data['email'] == 'manager@example.com'

    def test_login_missing_fields(self, api_client, manager):
        url = reverse('accounts:login')
        response = api_client.post(url, {'email': 'manager@example.com'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'error' in response.data

    def test_login_unknown_email(self, api_client, manager):
        url = reverse('accounts:login')
        response = api_client.post(url, {
            'email': 'ghost@example.com',
            'password': 'TestPass123!',
        }, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_login_wrong_password(self, api_client, manager):
        url = reverse('accounts:login')
        response = api_client.post(url, {
            'email': 'manager@example.com',
            'password': 'WrongPass!',
        }, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_login_inactive(self, api_client, inactive_manager):
        url = reverse('accounts:login')
        response = api_client.post(url, {
            'email': 'inactive@example.com',
            'password': 'TestPass123!',
        }, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN


# =============================================================================
# Registration Tests
# =============================================================================

@pytest.mark.django_db
class TestRegister:
    """Tests for POST /api/auth/register/"""

    def test_admin_can_register_manager(self, admin_client):
        url = reverse('accounts:register')
        response = admin_client.post(url, {
            'email': 'newbie@example.com',
            'password': 'SecurePass123!',
            'first_name': 'New',
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert 'password' not in response.data
        assert Manager.objects.filter(email='newbie@example.com').exists()

    def test_regular_manager_forbidden(self, authenticated_client):
        url = reverse('accounts:register')
        response = authenticated_client.post(url, {
            'email': 'newbie@example.com',
            'password': 'SecurePass123!',
        }, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_anonymous_rejected(self, api_client):
        url = reverse('accounts:register')
        response = api_client.post(url, {
            'email': 'newbie@example.com',
            'password': 'SecurePass123!',
        }, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_duplicate_email(self, admin_client, manager):
        url = reverse('accounts:register')
        response = admin_client.post(url, {
            'email': manager.email,
            'password': 'SecurePass123!',
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST


# =============================================================================
# Profile Tests
# =============================================================================

@pytest.mark.django_db
class TestMe:
    """Tests for GET /api/auth/me/"""

    def test_me(self, authenticated_client, manager):
        response = authenticated_client.get(reverse('accounts:me'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['id'] == str(manager.id)
        assert 'password' not in response.data

    def test_me_requires_auth(self, api_client):
        response = api_client.get(reverse('accounts:me'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
