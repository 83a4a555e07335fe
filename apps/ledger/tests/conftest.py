import pytest
from decimal import Decimal
from datetime import date
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.ledger.models import PriceRecord, ConsumptionRecord


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def ledger_user(db):
    """Create and return the tracker's owner."""
    return User.objects.create_user(
        email='milk@example.com',
        password='TestPass123!',
        display_name='Milk Buyer',
    )


@pytest.fixture
def ledger_client(api_client, ledger_user):
    """Return API client authenticated as the owner."""
    refresh = RefreshToken.for_user(ledger_user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def page_client(client, ledger_user):
    """Return a Django test client with a signed-in session."""
    client.force_login(ledger_user)
    return client


@pytest.fixture
def price(db):
    """Active price of 60 per liter."""
    return PriceRecord.objects.create(price=Decimal('60.00'))


@pytest.fixture
def june_first(db):
    """2.0 L logged on 2024-06-01."""
    return ConsumptionRecord.objects.create(
        date=date(2024, 6, 1),
        quantity=Decimal('2.000'),
    )
