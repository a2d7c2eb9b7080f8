from functools import lru_cache
from typing import Optional
import logging
import stripe
from models.settings import Settings

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()


def build_stripe_client(settings: Settings) -> Optional[stripe.StripeClient]:
    """
    Stripe client for the secret key, or None when it cannot be built.
    A missing key is logged but never stops the function app from starting.
    """
    if not settings.stripe_secret_key:
        logger.error("Missing STRIPE_SECRET_KEY in function app settings.")
        return None
    try:
        return stripe.StripeClient(settings.stripe_secret_key)
    except Exception as e:
        logger.error(f"Stripe initialization failed: {str(e)}")
        return None


@lru_cache
def get_stripe_client() -> Optional[stripe.StripeClient]:
    return build_stripe_client(get_settings())
