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
def report_user(db):
    """Create and return the tracker's owner."""
    return User.objects.create_user(
        email='reports@example.com',
        password='TestPass123!',
        display_name='Report Reader',
    )


@pytest.fixture
def report_client(api_client, report_user):
    """Return API client authenticated as the owner."""
    refresh = RefreshToken.for_user(report_user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def page_client(client, report_user):
    """Return a Django test client with a signed-in session."""
    client.force_login(report_user)
    return client


@pytest.fixture
def price(db):
    """Active price of 60 per liter."""
    return PriceRecord.objects.create(price=Decimal('60.00'))


@pytest.fixture
def june_records(db):
    """2.0 L on June 1st and 1.5 L on June 2nd, 2024."""
    return [
        ConsumptionRecord.objects.create(date=date(2024, 6, 1), quantity=Decimal('2.0')),
        ConsumptionRecord.objects.create(date=date(2024, 6, 2), quantity=Decimal('1.5')),
    ]


@pytest.fixture
def month_edges(db):
    """Records straddling February 2024."""
    return [
        ConsumptionRecord.objects.create(date=date(2024, 1, 31), quantity=Decimal('1.0')),
        ConsumptionRecord.objects.create(date=date(2024, 2, 1), quantity=Decimal('1.0')),
        ConsumptionRecord.objects.create(date=date(2024, 2, 28), quantity=Decimal('2.0')),
        ConsumptionRecord.objects.create(date=date(2024, 3, 1), quantity=Decimal('4.0')),
    ]
