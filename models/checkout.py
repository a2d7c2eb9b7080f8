from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Dict, Any


class CheckoutRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    line_items: List[Any] = Field(alias="lineItems", min_length=1)  # forwarded to Stripe as-is
    customer_email: Optional[Any] = Field(default=None, alias="customerEmail")  # unchecked, Stripe validates
    metadata: Optional[Any] = None

    def to_session_params(self, site_url: str) -> Dict[str, Any]:
        params: Dict[str, Any] = {
            "payment_method_types": ["card"],
            "mode": "payment",
            "line_items": self.line_items,
            "success_url": f"{site_url}/?success=true",
            "cancel_url": f"{site_url}/?canceled=true",
            "allow_promotion_codes": True,
        }
        if self.customer_email is not None:
            params["customer_email"] = self.customer_email
        if self.metadata is not None:
            params["metadata"] = self.metadata
        return params


class CheckoutResponse(BaseModel):
    id: str  # Checkout Session id, used by Stripe.js redirectToCheckout
    livemode: bool


class PublishableKeyResponse(BaseModel):
    publishableKey: str
