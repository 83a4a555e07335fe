import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a test user."""
    return User.objects.create_user(
        email='testuser@example.com',
        password='TestPass123!',
        display_name='Test User',
    )


@pytest.fixture
def user_inactive(db):
    """Create and return an inactive user."""
    return User.objects.create_user(
        email='inactive@example.com',
        password='TestPass123!',
        display_name='Inactive User',
        is_active=False,
    )


@pytest.fixture
def refresh_token(user):
    """Return a refresh token issued to the test user."""
    return RefreshToken.for_user(user)


@pytest.fixture
def authenticated_client(api_client, refresh_token):
    """Return an authenticated API client using JWT."""
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh_token.access_token}')
    return api_client
