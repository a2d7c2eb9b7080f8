# api/checkout.py
from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from pydantic import ValidationError as PayloadError
from typing import Optional
import json
import logging
import stripe
from managers.stripe_manager import get_settings, get_stripe_client
from models.checkout import CheckoutRequest, CheckoutResponse
from models.settings import Settings
from utils.errors import ConfigurationError, DependencyError, MethodError, ValidationError
from utils.fallback import first_defined
from utils.response import ANY_METHOD, json_response, preflight_response

logger = logging.getLogger(__name__)
router = APIRouter()


def parse_checkout_request(raw: bytes) -> CheckoutRequest:
    try:
        body = json.loads(raw)
    except ValueError as e:
        logger.error(f"Failed to parse JSON body: {str(e)}")
        raise ValidationError("Invalid JSON", details=str(e)) from e

    try:
        return CheckoutRequest.model_validate(body)
    except PayloadError as e:
        errors = e.errors()
        if any(error["loc"][:1] == ("lineItems",) for error in errors):
            raise ValidationError("lineItems must be a non-empty array") from e
        details = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or 'body'}: {error['msg']}"
            for error in errors
        )
        raise ValidationError("Invalid checkout payload", details=details) from e


def resolve_site_url(settings: Settings, request_origin: Optional[str]) -> str:
    return first_defined(
        settings.site_url,
        settings.url,
        settings.frontend_url,
        request_origin,
        default="*",
    )


@router.api_route("/create-checkout-session", methods=ANY_METHOD, response_model=CheckoutResponse, tags=["checkout"])
async def create_checkout_session(
    request: Request,
    settings: Settings = Depends(get_settings),
    client: Optional[stripe.StripeClient] = Depends(get_stripe_client),
):
    """Create a Stripe Checkout Session for the posted line items."""
    if request.method == "OPTIONS":
        return preflight_response(first_defined(settings.site_url, settings.url, default="*"))

    if request.method != "POST":
        raise MethodError("Method Not Allowed")

    if client is None:
        raise ConfigurationError("Stripe not initialized. Add STRIPE_SECRET_KEY to the function app settings")

    checkout = parse_checkout_request(await request.body())
    site_url = resolve_site_url(settings, request.headers.get("origin"))

    try:
        session = await run_in_threadpool(
            client.checkout.sessions.create, params=checkout.to_session_params(site_url)
        )
    except stripe.StripeError as e:
        logger.error(f"Stripe error: {str(e)}")
        raise DependencyError("Failed to create checkout session", details=e.user_message or str(e)) from e
    except Exception as e:
        logger.error(f"Stripe error: {str(e)}")
        raise DependencyError("Failed to create checkout session", details=str(e)) from e

    logger.info(f"Created checkout session: {session.id}")
    result = CheckoutResponse(id=session.id, livemode=session.livemode)
    return json_response(200, result.model_dump(), origin=site_url)
