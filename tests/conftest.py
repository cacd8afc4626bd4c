import itertools
from datetime import date
from decimal import Decimal

import pytest
from django.core.cache import cache
from rest_framework.test import APIClient

from modules.accounts.constants import AccountRole
from modules.accounts.models import Account
from modules.deliveries.models import Delivery
from modules.drivers.models import Driver
from modules.orders.models import Order, Product


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture(autouse=True)
def _clear_cache():
    """Throttle counters live in the cache; start every test from zero."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture(autouse=True)
def _media_root(settings, tmp_path):
    settings.MEDIA_ROOT = str(tmp_path / "media")


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def auth_client(django_user_model):
    """APIClient with a force-authenticated Django user."""
    client = APIClient()
    user = django_user_model.objects.create_user(
        username="api-user", password="testpass123"
    )
    client.force_authenticate(user=user)
    return client


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


# ---------------------------------------------------------------------------
# Domain factories
# ---------------------------------------------------------------------------


@pytest.fixture()
def make_account():
    counter = itertools.count(1)

    def _make(name=None, email=None, role=AccountRole.CLIENT, **extra):
        n = next(counter)
        account = Account(
            name=name or f"User {n}",
            email=email or f"user{n}@example.com",
            phone="+216 20000000",
            location="Tunis",
            role=role,
            **extra,
        )
        account.set_password("password123")
        account.save()
        return account

    return _make


@pytest.fixture()
def customer(make_account):
    return make_account(name="Amira Ben Salah", email="amira@example.com")


@pytest.fixture()
def make_driver(make_account):
    def _make(
        latitude=None,
        longitude=None,
        is_available=True,
        vehicle_type="van",
        service_area="Tunis",
        rating="4.00",
        name=None,
    ):
        account = make_account(name=name, role=AccountRole.DELIVERY_MAN)
        return Driver.objects.create(
            user=account,
            latitude=latitude,
            longitude=longitude,
            is_available=is_available,
            vehicle_type=vehicle_type,
            service_area=service_area,
            rating=Decimal(rating),
        )

    return _make


@pytest.fixture()
def make_order(customer):
    """Create an order with its product and a pending delivery."""

    def _make(
        owner=None,
        source="Tunis",
        destination="Sfax",
        object_type="sofa",
        shipping_date=date(2024, 6, 1),
        total=Decimal("0.00"),
    ):
        order = Order.objects.create(
            customer=owner or customer,
            source=source,
            destination=destination,
            total=total,
        )
        Product.objects.create(order=order, object_type=object_type)
        Delivery.objects.create(order=order, shipping_date=shipping_date)
        return order

    return _make
