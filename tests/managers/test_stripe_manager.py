from unittest.mock import patch
from managers.stripe_manager import build_stripe_client
from models.settings import Settings
import pytest
from pydantic import ValidationError


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("STRIPE_SECRET_KEY", "sk_test_env")
    monkeypatch.setenv("STRIPE_PUBLISHABLE_KEY", "pk_test_env")
    monkeypatch.setenv("SITE_URL", "")
    monkeypatch.setenv("URL", "https://b.example.com")
    monkeypatch.setenv("FRONTEND_URL", "https://f.example.com")
    monkeypatch.setenv("BASEURL", "https://base.example.com")

    settings = Settings.from_env()
    assert settings.stripe_secret_key == "sk_test_env"
    assert settings.stripe_publishable_key == "pk_test_env"
    assert settings.site_url is None
    assert settings.url == "https://b.example.com"
    assert settings.frontend_url == "https://f.example.com"
    assert settings.base_url == "https://base.example.com"
    assert "sk_test_env" not in repr(settings)


def test_settings_are_frozen():
    settings = Settings(site_url="https://a")
    with pytest.raises(ValidationError):
        settings.site_url = "https://evil"


def test_missing_secret_key_is_logged(caplog):
    assert build_stripe_client(Settings()) is None
    assert "Missing STRIPE_SECRET_KEY" in caplog.text


def test_client_init_failure_is_logged(caplog):
    with patch("managers.stripe_manager.stripe.StripeClient", side_effect=ValueError("bad key")):
        assert build_stripe_client(Settings(stripe_secret_key="sk_bad")) is None
    assert "Stripe initialization failed: bad key" in caplog.text


def test_client_is_built():
    client = build_stripe_client(Settings(stripe_secret_key="sk_test_dummy"))
    assert client is not None
    assert hasattr(client, "checkout")
