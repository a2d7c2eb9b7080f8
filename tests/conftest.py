import pytest
from types import SimpleNamespace
from unittest.mock import Mock
from fastapi.testclient import TestClient
from api import app
from managers.stripe_manager import get_settings, get_stripe_client
from models.settings import Settings


@pytest.fixture
def settings():
    return Settings(
        stripe_secret_key="sk_test_dummy",
        stripe_publishable_key="pk_test_dummy",
        site_url="https://a.example.com",
        url="https://b.example.com",
    )


@pytest.fixture
def stripe_client():
    client = Mock()
    client.checkout.sessions.create.return_value = SimpleNamespace(id="cs_test_123", livemode=False)
    return client


@pytest.fixture
def make_client(settings, stripe_client):
    """TestClient whose settings and Stripe client can be swapped per test."""

    def _make(settings=settings, stripe_client=stripe_client):
        app.dependency_overrides[get_settings] = lambda: settings
        app.dependency_overrides[get_stripe_client] = lambda: stripe_client
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture
def client(make_client):
    return make_client()
