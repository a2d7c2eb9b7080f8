# api/publishable_key.py
from fastapi import APIRouter, Depends
from managers.stripe_manager import get_settings
from models.checkout import PublishableKeyResponse
from models.settings import Settings
from utils.errors import ConfigurationError
from utils.fallback import first_defined
from utils.response import ANY_METHOD, json_response

router = APIRouter()


@router.api_route("/get-stripe-pk", methods=ANY_METHOD, response_model=PublishableKeyResponse, tags=["checkout"])
async def get_publishable_key(settings: Settings = Depends(get_settings)):
    """Stripe publishable key for the browser. Safe to expose, unlike the secret key."""
    origin = first_defined(settings.site_url, settings.base_url, default="*")
    if not settings.stripe_publishable_key:
        raise ConfigurationError("Publishable key not configured on server", origin=origin)

    result = PublishableKeyResponse(publishableKey=settings.stripe_publishable_key)
    return json_response(200, result.model_dump(), origin=origin)
